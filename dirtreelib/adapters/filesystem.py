"""Async filesystem adapter for tree building.

Runs the blocking os.stat/os.listdir calls in worker threads so that
sibling subtrees can be explored concurrently from one event loop.
"""

import asyncio
import os
import stat as stat_module  # To avoid name collision with stat results
from typing import List, Optional

from ..core import TreeSourceAdapter, EntryStat


class FileSystemAdapter(TreeSourceAdapter):
    """Adapter reading the local filesystem.

    The number of OS calls in flight is bounded by a semaphore. The
    semaphore is only held for a single stat or listdir, never across a
    recursion, so deep trees cannot starve themselves.
    """

    def __init__(self, max_concurrent: int = 100, follow_symlinks: bool = True):
        """Initialize filesystem adapter.

        Args:
            max_concurrent: Maximum concurrent I/O operations
            follow_symlinks: Whether stat follows symbolic links; when False
                a link is reported with its own (lstat) metadata
        """
        self.max_concurrent = max_concurrent
        self.follow_symlinks = follow_symlinks
        self._semaphore: Optional[asyncio.Semaphore] = None
        self._semaphore_loop: Optional[asyncio.AbstractEventLoop] = None

    @property
    def semaphore(self) -> asyncio.Semaphore:
        """Semaphore bounding OS calls, one per running event loop.

        A semaphore that has made a task wait is bound to that task's loop,
        so an adapter reused across asyncio.run calls gets a fresh one.
        """
        loop = asyncio.get_running_loop()
        if self._semaphore is None or self._semaphore_loop is not loop:
            self._semaphore = asyncio.Semaphore(self.max_concurrent)
            self._semaphore_loop = loop
        return self._semaphore

    async def stat(self, path: str) -> EntryStat:
        """Stat a path in a worker thread.

        Args:
            path: Absolute path to inspect

        Returns:
            EntryStat built from the stat result
        """
        async with self.semaphore:
            result = await asyncio.to_thread(os.stat, path, follow_symlinks=self.follow_symlinks)

        return EntryStat(
            is_file=stat_module.S_ISREG(result.st_mode) or stat_module.S_ISLNK(result.st_mode),
            is_dir=stat_module.S_ISDIR(result.st_mode),
            size=result.st_size,
        )

    async def list_directory(self, path: str) -> List[str]:
        """List a directory in a worker thread, in OS-reported order."""
        async with self.semaphore:
            return await asyncio.to_thread(os.listdir, path)

    def __repr__(self) -> str:
        """String representation."""
        return (f"FileSystemAdapter(max_concurrent={self.max_concurrent}, "
                f"follow_symlinks={self.follow_symlinks})")
