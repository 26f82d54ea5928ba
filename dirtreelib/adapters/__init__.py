"""Adapters bridging concrete sources to the tree builder."""

from .filesystem import FileSystemAdapter

__all__ = [
    'FileSystemAdapter',
]
