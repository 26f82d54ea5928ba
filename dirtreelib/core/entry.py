"""Entry model for built directory trees.

A built tree is made of two closed variants, Directory and File. Both are
frozen dataclasses tagged by a ``type`` class attribute so that renderers
and walkers dispatch on the tag instead of on class identity.
"""

from dataclasses import dataclass
from typing import ClassVar, Iterator, List, Tuple, Union


class EntryType:
    """Values of the ``type`` tag carried by every entry."""
    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class File:
    """A file found while building a tree.

    Attributes:
        path: Absolute path of the file
        name: Base name of the path
        ext: Extension including the leading dot, or "" if there is none
        size: Size in bytes as reported by stat
    """
    path: str
    name: str
    ext: str
    size: int

    type: ClassVar[str] = EntryType.FILE


@dataclass(frozen=True)
class Directory:
    """A directory found while building a tree.

    ``dirs`` and ``files`` keep the order in which the directory listing
    reported the children. A directory the depth budget did not reach has
    no children, a size of 0 and ``is_searched`` set to False.

    Attributes:
        path: Absolute, normalized path of the directory
        name: Base name of the path
        dirs: Child directories in listing order
        files: Child files in listing order
        size: Sum of the sizes of every visited descendant
        is_searched: True if the immediate children were listed
        is_fully_searched: True if this directory and every descendant
            directory were listed
    """
    path: str
    name: str
    dirs: Tuple["Directory", ...] = ()
    files: Tuple[File, ...] = ()
    size: int = 0
    is_searched: bool = False
    is_fully_searched: bool = False

    type: ClassVar[str] = EntryType.DIRECTORY

    def get_directories(self, include_self: bool = True) -> List["Directory"]:
        """Get every directory inside of this directory.

        Args:
            include_self: Whether this directory leads the result

        Returns:
            Directories in depth-first pre-order
        """
        return list(iter_directories(self, include_self))

    def get_files(self) -> List[File]:
        """Get every file inside of this directory.

        Files directly in this directory come first, then the files of
        each child directory in listing order.

        Returns:
            Files in depth-first pre-order
        """
        return list(iter_files(self))


Entry = Union[Directory, File]


def iter_directories(root: Directory, include_self: bool = True) -> Iterator[Directory]:
    """Yield ``root`` (optionally) and every descendant directory, pre-order."""
    if include_self:
        yield root
    for child in root.dirs:
        yield from iter_directories(child, include_self=True)


def iter_files(root: Directory) -> Iterator[File]:
    """Yield the files of ``root`` followed by those of each child directory."""
    yield from root.files
    for child in root.dirs:
        yield from iter_files(child)
