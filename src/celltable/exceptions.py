"""Exceptions for celltable."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class CellTableError(Exception):
    """
    Base exception for all celltable errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class ConfigurationError(CellTableError, ValueError):
    """
    Base exception for caller configuration mistakes.

    These are raised synchronously by the operation that received the bad
    configuration, before any output is produced. There is no partial
    rendering: a table that raises one of these renders nothing.
    """

    pass


# ---------------------------------------------------------------------------
# Column Exceptions
# ---------------------------------------------------------------------------


class DuplicateColumnLabelError(ConfigurationError):
    """Raised when adding a column whose label equals an existing label."""

    def __init__(self, label: Any) -> None:
        self.label = label
        super().__init__(f"Column label already in use: {label!r}")


class UnknownColumnLabelError(ConfigurationError):
    """
    Raised when a column label does not match any column in the table.

    Labels are compared by exact value and kind, so ``"3"`` never matches
    a column labelled ``3``.
    """

    def __init__(self, label: Any) -> None:
        self.label = label
        super().__init__(f"No column with label {label!r}")


class InvalidColumnLabelError(ConfigurationError, TypeError):
    """Raised when a column label is not a str or int (bool is rejected)."""

    def __init__(self, label: Any) -> None:
        self.label = label
        super().__init__(f"Column label must be a str or int, got {label!r}")


class InvalidAlignmentError(ConfigurationError):
    """Raised when an alignment is not left, right, center or auto."""

    def __init__(self, alignment: Any, valid: list[str]) -> None:
        self.alignment = alignment
        self.valid = valid
        super().__init__(
            f"Invalid alignment {alignment!r}, expected one of: {', '.join(valid)}"
        )


class InvalidColumnWidthError(ConfigurationError):
    """Raised when a column width is not a positive integer."""

    def __init__(self, width: Any) -> None:
        self.width = width
        super().__init__(f"Column width must be a positive integer, got {width!r}")


# ---------------------------------------------------------------------------
# Rendering Exceptions
# ---------------------------------------------------------------------------


class InvalidBorderStyleError(ConfigurationError):
    """Raised when a table with an unrecognized border style is rendered."""

    def __init__(self, style: Any, known: list[str] | None = None) -> None:
        self.style = style
        self.known = known or []
        msg = f"Unrecognized border style: {style!r}"
        if self.known:
            msg += f" (expected one of: {', '.join(self.known)})"
        super().__init__(msg)


class InvalidTruncationIndicatorError(ConfigurationError):
    """Raised when the truncation indicator is not a single width-1 character."""

    def __init__(self, indicator: Any) -> None:
        self.indicator = indicator
        super().__init__(
            "Truncation indicator must be a single character of display width 1, "
            f"got {indicator!r}"
        )
