"""Core abstractions for DirTreeLib.

This module defines the entry model produced by the builder and the
adapter interface the builder reads from.
"""

from .entry import (
    Directory,
    File,
    Entry,
    EntryType,
    iter_directories,
    iter_files,
)
from .adapter import TreeSourceAdapter, EntryStat

__all__ = [
    # Entries
    'Directory',
    'File',
    'Entry',
    'EntryType',
    # Walkers
    'iter_directories',
    'iter_files',
    # Adapter
    'TreeSourceAdapter',
    'EntryStat',
]
