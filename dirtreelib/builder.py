"""Depth-bounded tree building.

Builds Directory/File trees from a source adapter. Every searched directory
stats and lists its children and recurses into all of them concurrently
(asyncio.gather), then aggregates sizes and search flags once every child
subtree has resolved. The first failure in any branch fails the whole build.
"""

import asyncio
import logging
import os
from typing import Any, Dict, List, Mapping, Optional, Union

from .config import BuildConfig, Depth, resolve_depth
from .core import Directory, EntryType, File, TreeSourceAdapter
from .errors import RootNotADirectoryError

logger = logging.getLogger(__name__)

# A depth map: path fragments mapped to a depth or to a nested depth map
DepthMap = Mapping[str, Union[Depth, Mapping[str, Any]]]


async def build_tree(
    root_path: Union[str, os.PathLike],
    depth: Depth = 0,
    *,
    adapter: Optional[TreeSourceAdapter] = None,
    config: Optional[BuildConfig] = None,
) -> Directory:
    """Search a directory for files and sub-directories.

    The root directory is always listed; ``depth`` counts the levels below
    that first listing. With ``depth=0`` the root's child directories are
    present but unsearched.

    Args:
        root_path: Directory to build the tree of, relative or absolute
        depth: Levels to descend below the root listing, ``True`` for
            unbounded, ``False`` for 0
        adapter: Source to read from (defaults to the local filesystem)
        config: Settings for the default adapter, ignored if ``adapter``
            is given

    Returns:
        The root Directory

    Raises:
        InvalidDepthError: If ``depth`` is negative or not a number
        RootNotADirectoryError: If ``root_path`` is not a directory
        OSError: Any error of the underlying stat/list calls
    """
    numeric_depth = resolve_depth(depth)
    if adapter is None:
        adapter = (config or BuildConfig()).create_adapter()

    path = adapter.resolve(root_path)
    root_stat = await adapter.stat(path)
    if not root_stat.is_dir:
        raise RootNotADirectoryError(path)

    logger.debug("Building tree for %s (depth=%s)", path, numeric_depth)
    tree = await _build_entry(adapter, path, numeric_depth)
    logger.debug("Built tree for %s: %d bytes, fully searched: %s",
                 path, tree.size, tree.is_fully_searched)
    return tree


async def _build_entry(adapter: TreeSourceAdapter, path: str, depth) -> Optional[Union[Directory, File]]:
    """Build the entry at ``path`` with ``depth`` levels left to list.

    Returns None for paths that are neither files nor directories.
    """
    name = os.path.basename(path)
    entry_stat = await adapter.stat(path)

    if entry_stat.is_file:
        return File(
            path=path,
            name=name,
            ext=os.path.splitext(name)[1],
            size=entry_stat.size,
        )
    if not entry_stat.is_dir:
        return None

    if depth < 0:
        return Directory(path=path, name=name)

    names = await adapter.list_directory(path)
    children = await asyncio.gather(*(
        _build_entry(adapter, adapter.join(path, child_name), depth - 1)
        for child_name in names
    ))

    dirs = tuple(child for child in children
                 if child is not None and child.type == EntryType.DIRECTORY)
    files = tuple(child for child in children
                  if child is not None and child.type == EntryType.FILE)

    return Directory(
        path=path,
        name=name,
        dirs=dirs,
        files=files,
        size=sum(child.size for child in dirs) + sum(child.size for child in files),
        is_searched=True,
        is_fully_searched=all(child.is_fully_searched for child in dirs),
    )


def flatten_depth_map(depth_map: DepthMap) -> Dict[str, Depth]:
    """Flatten a nested depth map into one path -> depth mapping.

    Nested maps are joined to their parent key as path segments. Keys are
    normalized, so ``"a/b"`` and ``{"a": {"b": ...}}`` name the same
    directory; the later one wins but keeps the first one's position.

    Example:
        >>> flatten_depth_map({'src': {'pkg': 1, 'tests': 0}, 'docs': True})
        {'src/pkg': 1, 'src/tests': 0, 'docs': True}

    Args:
        depth_map: Mapping of path fragments to depths or nested maps

    Returns:
        Flat mapping in iteration order
    """
    flat: Dict[str, Depth] = {}
    for key, value in depth_map.items():
        if isinstance(value, Mapping):
            for sub_key, sub_value in flatten_depth_map(value).items():
                flat[os.path.normpath(os.path.join(key, sub_key))] = sub_value
        else:
            flat[os.path.normpath(key)] = value
    return flat


async def build_trees(
    depth_map: DepthMap,
    *,
    adapter: Optional[TreeSourceAdapter] = None,
    config: Optional[BuildConfig] = None,
) -> List[Directory]:
    """Build one tree per entry of a (possibly nested) depth map.

    A depth map looks like this::

        {
            'path/to/dir1': True,
            'path/to/dir2': False,
            'path/to/dir3': {
                'subdir1': 1,
                'subdir2': {'subsubdir1': 1},
                'subdir2/subsubdir2': 0,
            },
        }

    All trees are built concurrently and share one adapter.

    Args:
        depth_map: Nested mapping of paths to depths
        adapter: Source to read from (defaults to the local filesystem)
        config: Settings for the default adapter, ignored if ``adapter``
            is given

    Returns:
        Trees in the order of the flattened depth map
    """
    flat = flatten_depth_map(depth_map)
    if adapter is None:
        adapter = (config or BuildConfig()).create_adapter()

    logger.debug("Building %d trees", len(flat))
    return list(await asyncio.gather(*(
        build_tree(path, depth, adapter=adapter)
        for path, depth in flat.items()
    )))


def build_tree_sync(root_path: Union[str, os.PathLike], depth: Depth = 0, **kwargs) -> Directory:
    """Run build_tree in a fresh event loop.

    Not usable from inside a running event loop; await build_tree there.
    """
    return asyncio.run(build_tree(root_path, depth, **kwargs))


def build_trees_sync(depth_map: DepthMap, **kwargs) -> List[Directory]:
    """Run build_trees in a fresh event loop."""
    return asyncio.run(build_trees(depth_map, **kwargs))
