"""ANSI style tables for colored rendering.

A style table maps token kinds (see dirtreelib.render) to functions that
wrap text in terminal escape sequences. Pass your own table to render()
for other color schemes.
"""

from typing import Callable, Dict

RESET = "\033[0m"

# SGR codes
BLUE = 34
YELLOW = 33
BG_BLUE = 44


def ansi_style(*codes: int) -> Callable[[str], str]:
    """Build a transform wrapping text in the given SGR codes."""
    start = "\033[" + ";".join(str(code) for code in codes) + "m"

    def apply(text: str) -> str:
        if not text:
            return text
        return f"{start}{text}{RESET}"

    return apply


ANSI_STYLES: Dict[str, Callable[[str], str]] = {
    "root": ansi_style(BG_BLUE),
    "directory": ansi_style(BLUE),
    "file": ansi_style(YELLOW),
}
