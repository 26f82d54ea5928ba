"""Configuration for tree building.

Keeps the knobs that are not part of a single build call's arguments
(concurrency limits, symlink policy) together with depth normalization.
"""

import math
from dataclasses import dataclass
from numbers import Real
from typing import Union

from .errors import InvalidDepthError

# A depth as accepted from callers: levels below the first listing,
# True for unbounded, False for zero.
Depth = Union[bool, int, float]


def resolve_depth(depth: Depth) -> Union[int, float]:
    """Normalize a caller-supplied depth.

    Args:
        depth: Non-negative number of levels to descend below the root's
            own listing, ``True`` for unbounded or ``False`` for zero.

    Returns:
        The numeric depth; ``math.inf`` stands for unbounded.

    Raises:
        InvalidDepthError: If the depth is negative, NaN or not a number.
    """
    # bool is a subclass of int, so check it first
    if isinstance(depth, bool):
        return math.inf if depth else 0
    if not isinstance(depth, Real) or math.isnan(depth) or depth < 0:
        raise InvalidDepthError(depth)
    return depth


@dataclass
class BuildConfig:
    """Settings for the default filesystem adapter used by the builder."""

    max_concurrent: int = 100  # Concurrent stat/listdir calls in flight
    follow_symlinks: bool = True  # stat() vs lstat()

    def __post_init__(self):
        if self.max_concurrent < 1:
            raise ValueError(f"max_concurrent must be at least 1, got {self.max_concurrent}")

    def create_adapter(self):
        """Create a filesystem adapter configured with these settings."""
        from .adapters.filesystem import FileSystemAdapter

        return FileSystemAdapter(
            max_concurrent=self.max_concurrent,
            follow_symlinks=self.follow_symlinks,
        )
