"""Terminal size queries used when packing to the screen width."""

from __future__ import annotations

import shutil

DEFAULT_TERMINAL_WIDTH = 80


def terminal_width(fallback: int = DEFAULT_TERMINAL_WIDTH) -> int:
    """
    Return the width of the attached terminal in columns.

    Honours the ``COLUMNS`` environment variable, and returns ``fallback``
    when output is not a terminal.
    """
    return shutil.get_terminal_size((fallback, 24)).columns
