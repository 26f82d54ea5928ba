"""Testing utilities for DirTreeLib."""

from .fixtures import MemoryFileSystemAdapter, write_fixture_tree

__all__ = ['MemoryFileSystemAdapter', 'write_fixture_tree']
