"""Error taxonomy for DirTreeLib.

Library errors derive from DirTreeError and also from the closest builtin,
so callers can catch either. Filesystem failures raised by the adapters
(FileNotFoundError, PermissionError, ...) are never wrapped.
"""


class DirTreeError(Exception):
    """Base class for errors raised by DirTreeLib itself."""


class InvalidDepthError(DirTreeError, ValueError):
    """Raised when a depth is negative or not a number/boolean."""

    def __init__(self, depth):
        self.depth = depth
        if isinstance(depth, (int, float)):
            message = f"depth can't be less than 0 (got {depth!r})"
        else:
            message = f"depth should be a number or a boolean (got {depth!r})"
        super().__init__(message)


class RootNotADirectoryError(DirTreeError, NotADirectoryError):
    """Raised when the root of a build does not point to a directory."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"root path should point to a directory: {path}")
