"""
celltable: fixed-width text tables for terminals and logs.

This library renders rows of data as text tables with:
- Per-column extractors, formatters and stylers
- Unicode-aware wrapping at grapheme-cluster boundaries
- Height limits with a truncation indicator
- ASCII, box-drawing, Markdown and borderless styles
- Automatic column sizing, optionally bounded by a maximum width

Example:
    from celltable import Table

    table = Table(range(1, 6))
    table.add_column("N", lambda n: n)
    table.add_column("Doubled", lambda n: n * 2)
    print(table)

    +--------------+--------------+
    |       N      |    Doubled   |
    +--------------+--------------+
    |            1 |            2 |
    ...
"""

from importlib.metadata import PackageNotFoundError, version

from .border import BORDER_STYLES, Border, BorderStyle, RulePosition, get_border_style
from .cell import Alignment, Cell, ValueKind, format_value
from .column import Column
from .config import ColumnPadding, TableConfig
from .exceptions import (
    CellTableError,
    ConfigurationError,
    DuplicateColumnLabelError,
    InvalidAlignmentError,
    InvalidBorderStyleError,
    InvalidColumnLabelError,
    InvalidColumnWidthError,
    InvalidTruncationIndicatorError,
    UnknownColumnLabelError,
)
from .table import Row, Table
from .width import display_width, graphemes

try:
    __version__ = version("celltable")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Main classes
    "Table",
    "Row",
    "Column",
    "Cell",
    # Configuration
    "TableConfig",
    "ColumnPadding",
    "Alignment",
    "ValueKind",
    "BorderStyle",
    "Border",
    "RulePosition",
    "BORDER_STYLES",
    "get_border_style",
    # Helpers
    "display_width",
    "graphemes",
    "format_value",
    # Exceptions
    "CellTableError",
    "ConfigurationError",
    "DuplicateColumnLabelError",
    "UnknownColumnLabelError",
    "InvalidColumnLabelError",
    "InvalidAlignmentError",
    "InvalidBorderStyleError",
    "InvalidColumnWidthError",
    "InvalidTruncationIndicatorError",
]
