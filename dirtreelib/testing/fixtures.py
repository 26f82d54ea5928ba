"""Test fixtures for DirTreeLib consumers.

Directory listing order is platform-defined, which makes order-sensitive
assertions against a real filesystem brittle. MemoryFileSystemAdapter serves
a tree from a nested dict and lists children in insertion order, the way a
mocked filesystem does. write_fixture_tree materializes the same layouts on
disk for tests that need the real adapter.

Layouts map names to either a nested dict (a directory) or str/bytes
content (a file)::

    {
        'dir-1': {'file-1-1.txt': 'file-1-1'},
        'file-1.txt': 'file-1',
    }
"""

import asyncio
import errno
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from ..core import EntryStat, TreeSourceAdapter

Layout = Mapping[str, Union[str, bytes, Mapping[str, Any]]]


def _as_bytes(content: Union[str, bytes]) -> bytes:
    return content.encode('utf-8') if isinstance(content, str) else content


def write_fixture_tree(base: Union[str, Path], layout: Layout) -> Path:
    """Create a layout on disk below ``base``.

    Args:
        base: Existing directory to create the layout in
        layout: Nested layout (see module docstring)

    Returns:
        ``base`` as a Path
    """
    base = Path(base)
    for name, value in layout.items():
        target = base / name
        if isinstance(value, Mapping):
            target.mkdir()
            write_fixture_tree(target, value)
        else:
            target.write_bytes(_as_bytes(value))
    return base


class MemoryFileSystemAdapter(TreeSourceAdapter):
    """Adapter serving a tree held in memory.

    Every stat/list call suspends for ``latency`` seconds, so concurrent
    builds really interleave. The adapter records how many calls were in
    flight at once and can be told to fail on chosen paths.

    Example:
        adapter = MemoryFileSystemAdapter({'a': {'b.txt': 'b'}}, root='/work')
        tree = await build_tree('/work', True, adapter=adapter)
    """

    def __init__(
        self,
        layout: Layout,
        root: str = '/fixture',
        cwd: Optional[str] = None,
        latency: float = 0,
        fail_on: Optional[Mapping[str, BaseException]] = None,
    ):
        """Initialize the in-memory source.

        Args:
            layout: Nested layout served below ``root``
            root: Absolute path the layout is mounted at
            cwd: Directory relative paths resolve against (defaults to root)
            latency: Seconds each call suspends for
            fail_on: Paths (absolute, or relative to root) mapped to the
                exception any call on them raises
        """
        self.root = os.path.abspath(root)
        self.cwd = os.path.abspath(cwd) if cwd else self.root
        self.latency = latency
        self.fail_on = {
            os.path.normpath(os.path.join(self.root, path)): error
            for path, error in (fail_on or {}).items()
        }
        self.in_flight = 0
        self.max_in_flight = 0
        self.calls: List[str] = []
        self._nodes: Dict[str, Any] = {}
        self._mount(self.root, layout)

    def _mount(self, path: str, layout: Layout) -> None:
        self._nodes[path] = list(layout)
        for name, value in layout.items():
            child = os.path.join(path, name)
            if isinstance(value, Mapping):
                self._mount(child, value)
            else:
                self._nodes[child] = _as_bytes(value)

    def resolve(self, path) -> str:
        return os.path.normpath(os.path.join(self.cwd, os.fspath(path)))

    async def _io(self, path: str):
        self.calls.append(path)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.latency)
        finally:
            self.in_flight -= 1

        if path in self.fail_on:
            raise self.fail_on[path]
        if path not in self._nodes:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
        return self._nodes[path]

    async def stat(self, path: str) -> EntryStat:
        node = await self._io(path)
        if isinstance(node, bytes):
            return EntryStat(is_file=True, is_dir=False, size=len(node))
        return EntryStat(is_file=False, is_dir=True, size=0)

    async def list_directory(self, path: str) -> List[str]:
        node = await self._io(path)
        if isinstance(node, bytes):
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), path)
        return list(node)

