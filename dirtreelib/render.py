"""Tree renderer.

Turns a built Directory into a box-drawing listing::

    /home/user/project/
    ├── src/
    │   └── main.py
    ├── docs/
    │       /* unsearched directory tree */
    └── README.md

Rendering happens in two passes: the tree is first split into lines of
typed tokens, then every token is stringified, through a style table when
colors are requested.
"""

import os
from dataclasses import dataclass
from typing import Callable, List, Mapping, Optional

from .core import Directory, EntryType

# Token kinds, also the keys of a style table
ROOT = "root"
DIRECTORY = "directory"
FILE = "file"
INDENT = "indent"
MESSAGE = "message"

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "
UNSEARCHED_MESSAGE = "/* unsearched directory tree */"

# Maps a token kind to a text -> text transform
Styles = Mapping[str, Callable[[str], str]]


@dataclass(frozen=True)
class Token:
    """A piece of one output line."""
    kind: str
    text: str


def _prefix(base_indent: str, is_last: bool) -> str:
    return base_indent + (LAST_BRANCH if is_last else BRANCH)


def _indent_level(base_indent: str, is_last: bool) -> str:
    return base_indent + (SPACE if is_last else PIPE)


def tokenize(root: Directory) -> List[List[Token]]:
    """Split a tree into lines of tokens.

    Directory names get a trailing ``os.sep``; within a directory, child
    directories come before files, each group in listing order. The root
    line is ``root.path + os.sep`` as is, so a filesystem root such as
    ``/`` renders as ``//``.

    Args:
        root: Tree to tokenize

    Returns:
        One list of tokens per output line, root line first
    """
    lines = [[Token(ROOT, root.path + os.sep)]]
    _tokenize_children(root, "", lines)
    return lines


def _tokenize_children(directory: Directory, base_indent: str, lines: List[List[Token]]) -> None:
    children = list(directory.dirs) + list(directory.files)
    remaining = len(children)

    for child in children:
        remaining -= 1
        is_last = remaining == 0

        if child.type == EntryType.DIRECTORY:
            lines.append([
                Token(INDENT, _prefix(base_indent, is_last)),
                Token(DIRECTORY, child.name + os.sep),
            ])
            if child.is_searched:
                _tokenize_children(child, _indent_level(base_indent, is_last), lines)
            else:
                lines.append([
                    Token(INDENT, _indent_level(base_indent, is_last) + SPACE),
                    Token(MESSAGE, UNSEARCHED_MESSAGE),
                ])
        elif child.type == EntryType.FILE:
            lines.append([
                Token(INDENT, _prefix(base_indent, is_last)),
                Token(FILE, child.name),
            ])


def render(root: Directory, use_colors: bool = False, styles: Optional[Styles] = None) -> str:
    """Render a tree as text.

    Args:
        root: Tree to render
        use_colors: Whether tokens go through the style table
        styles: Token kind -> transform table, defaults to ANSI colors;
            kinds missing from the table are left unstyled

    Returns:
        The listing, lines joined with ``os.linesep``
    """
    if use_colors and styles is None:
        from .styles import ANSI_STYLES
        styles = ANSI_STYLES

    def stringify(token: Token) -> str:
        if not use_colors:
            return token.text
        style = styles.get(token.kind)
        return style(token.text) if style else token.text

    return os.linesep.join(
        "".join(stringify(token) for token in line)
        for line in tokenize(root)
    )
