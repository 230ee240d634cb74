"""Terminal dimension queries."""

import shutil
from typing import NamedTuple

DEFAULT_ROWS = 24
DEFAULT_COLUMNS = 80


class TerminalSize(NamedTuple):
    rows: int
    columns: int


def get_size() -> TerminalSize:
    """Current terminal size, 24x80 when it cannot be determined."""
    columns, rows = shutil.get_terminal_size(fallback=(DEFAULT_COLUMNS, DEFAULT_ROWS))
    return TerminalSize(rows=rows or DEFAULT_ROWS, columns=columns or DEFAULT_COLUMNS)
