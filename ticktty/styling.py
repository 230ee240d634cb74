"""ANSI styling of frame text, backed by rich styles."""

from functools import lru_cache

from rich.color import ColorSystem
from rich.style import Style
from rich.text import Text


@lru_cache(maxsize=None)
def _parse(spec: str) -> Style:
    return Style.parse(spec)


def paint(text: str, spec: str) -> str:
    """Wrap text in the escape sequences for a rich style spec like "bold red".

    The result is still a plain str, so frames can be assembled and measured
    line by line before they reach the screen.
    """
    return _parse(spec).render(text, color_system=ColorSystem.TRUECOLOR)


def strip_styles(text: str) -> str:
    """Remove styling escape sequences, leaving only printable text."""
    return Text.from_ansi(text).plain


def visible_len(text: str) -> int:
    """Number of printable characters in a single styled line."""
    return len(strip_styles(text))
