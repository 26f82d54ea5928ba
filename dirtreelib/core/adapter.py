"""Source adapter abstraction.

Defines the filesystem collaborator consumed by the tree builder. Adapters
answer two questions about a path, what it is (stat) and what it contains
(list_directory), and own how paths are resolved and joined.
"""

import os
from abc import ABC, abstractmethod
from collections import namedtuple
from typing import List


# Result of a stat call, reduced to what the builder needs
EntryStat = namedtuple('EntryStat', ['is_file', 'is_dir', 'size'])


class TreeSourceAdapter(ABC):
    """Abstract base class for the sources a tree can be built from.

    Errors raised by ``stat`` and ``list_directory`` (missing paths,
    permission problems) must propagate to the caller; the builder does
    not recover from them.
    """

    @abstractmethod
    async def stat(self, path: str) -> EntryStat:
        """Get the type and size of a path.

        Args:
            path: Absolute path to inspect

        Returns:
            EntryStat for the path

        Raises:
            FileNotFoundError: If the path does not exist
            PermissionError: If the path cannot be inspected
        """
        pass

    @abstractmethod
    async def list_directory(self, path: str) -> List[str]:
        """List the names of the immediate children of a directory.

        The order is whatever the source reports; it is not sorted.

        Args:
            path: Absolute path of a directory

        Returns:
            Child names (not paths)
        """
        pass

    # Optional methods with default implementations

    def resolve(self, path) -> str:
        """Resolve a caller-supplied path to an absolute, normalized one."""
        return os.path.abspath(os.fspath(path))

    def join(self, parent: str, name: str) -> str:
        """Build the path of a child from its parent path and name."""
        return os.path.join(parent, name)

    async def close(self):
        """Clean up adapter resources.

        Override if adapter needs cleanup.
        """
        pass

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
