"""DirTreeLib - depth-limited directory trees.

DirTreeLib builds an in-memory tree of a directory, down to a chosen depth,
and renders it as an indented box-drawing listing.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from dirtreelib import build_tree, render

    tree = await build_tree('.', depth=2)
    print(render(tree))
━━━━━━━━━━━━━━━━━━━━━━━━━━

``depth`` counts the levels below the root's own listing: the root is always
listed, ``True`` means no limit. Directories the depth budget did not reach
are kept in the tree with ``is_searched`` set to False.
"""

import logging

__version__ = "1.0.0"

from .core import (
    Directory,
    File,
    Entry,
    EntryType,
    iter_directories,
    iter_files,
    TreeSourceAdapter,
    EntryStat,
)
from .adapters import FileSystemAdapter
from .builder import (
    build_tree,
    build_trees,
    build_tree_sync,
    build_trees_sync,
    flatten_depth_map,
)
from .render import render, tokenize, Token
from .config import BuildConfig, resolve_depth
from .errors import DirTreeError, InvalidDepthError, RootNotADirectoryError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Entries
    "Directory",
    "File",
    "Entry",
    "EntryType",
    "iter_directories",
    "iter_files",
    # Adapters
    "TreeSourceAdapter",
    "EntryStat",
    "FileSystemAdapter",
    # Building
    "build_tree",
    "build_trees",
    "build_tree_sync",
    "build_trees_sync",
    "flatten_depth_map",
    # Rendering
    "render",
    "tokenize",
    "Token",
    # Configuration
    "BuildConfig",
    "resolve_depth",
    # Errors
    "DirTreeError",
    "InvalidDepthError",
    "RootNotADirectoryError",
]
