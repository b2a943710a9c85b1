"""Table-wide configuration."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, fields
from typing import Any, Literal, Union

from .border import DEFAULT_BORDER, BorderStyle, TextStyler
from .cell import Alignment, Formatter, Styler, format_value
from .column import validate_width
from .exceptions import ConfigurationError, InvalidTruncationIndicatorError
from .width import display_width, graphemes

DEFAULT_COLUMN_WIDTH = 12
DEFAULT_COLUMN_PADDING = 1
DEFAULT_TRUNCATION_INDICATOR = "~"

HeaderFrequency = Union[Literal["start"], int, None]


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def validate_truncation_indicator(indicator: Any) -> str:
    """
    Check that a truncation indicator is one character of display width 1.

    Raises:
        InvalidTruncationIndicatorError: If it is not
    """
    if (
        not isinstance(indicator, str)
        or len(graphemes(indicator)) != 1
        or display_width(indicator) != 1
    ):
        raise InvalidTruncationIndicatorError(indicator)
    return indicator


@dataclass(frozen=True)
class ColumnPadding:
    """Padding characters on each side of every column's content."""

    left: int = DEFAULT_COLUMN_PADDING
    right: int = DEFAULT_COLUMN_PADDING

    def __post_init__(self) -> None:
        for amount in (self.left, self.right):
            if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
                raise ConfigurationError(
                    f"Column padding must be a non-negative integer, got {amount!r}"
                )

    @classmethod
    def parse(cls, value: ColumnPadding | int | Sequence[int] | None) -> ColumnPadding:
        """
        Build padding from an int (both sides) or a ``(left, right)`` pair.

        ``None`` gives the default of one character on each side.
        """
        if value is None:
            return cls()
        if isinstance(value, ColumnPadding):
            return value
        if isinstance(value, int):
            return cls(value, value)
        if isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 2:
            return cls(value[0], value[1])
        raise ConfigurationError(f"Invalid column padding: {value!r}")

    @property
    def total(self) -> int:
        return self.left + self.right


@dataclass(frozen=True)
class TableConfig:
    """
    Configuration shared by all columns of a table.

    Per-column options (width, alignment, formatter, stylers) default to
    the values here when a column does not set its own.

    Attributes:
        column_width: Default content width of new columns
        column_padding: Padding on each side of column content
        border: Border style name, or a custom BorderStyle. Validated when
            the table is rendered, not here.
        header_frequency: "start" for a header before the first row only,
            N to repeat it every N rows, None for no header
        row_divider_frequency: Draw a divider after every N rows, or None
        wrap_header_cells_to: Maximum header lines, None for unlimited
        wrap_body_cells_to: Maximum body cell lines, None for unlimited
        truncation_indicator: Character marking truncated content
        align_header: Default header alignment
        align_body: Default body alignment
        formatter: Default body formatter
        styler: Default body styler, ``(value, text) -> text``
        header_styler: Default header styler, ``(text) -> text``
        border_styler: Styler for border glyphs, ``(text) -> text``
    """

    column_width: int = DEFAULT_COLUMN_WIDTH
    column_padding: ColumnPadding = field(default_factory=ColumnPadding)
    border: str | BorderStyle = DEFAULT_BORDER
    header_frequency: HeaderFrequency = "start"
    row_divider_frequency: int | None = None
    wrap_header_cells_to: int | None = None
    wrap_body_cells_to: int | None = None
    truncation_indicator: str = DEFAULT_TRUNCATION_INDICATOR
    align_header: Alignment = Alignment.CENTER
    align_body: Alignment = Alignment.AUTO
    formatter: Formatter = format_value
    styler: Styler | None = None
    header_styler: TextStyler | None = None
    border_styler: TextStyler | None = None

    def __post_init__(self) -> None:
        validate_width(self.column_width)
        validate_truncation_indicator(self.truncation_indicator)
        if not isinstance(self.column_padding, ColumnPadding):
            raise ConfigurationError(f"Invalid column padding: {self.column_padding!r}")
        if self.header_frequency not in (None, "start") and not _is_positive_int(
            self.header_frequency
        ):
            raise ConfigurationError(
                "header_frequency must be None, 'start' or a positive integer, "
                f"got {self.header_frequency!r}"
            )
        for name in ("row_divider_frequency", "wrap_header_cells_to", "wrap_body_cells_to"):
            value = getattr(self, name)
            if value is not None and not _is_positive_int(value):
                raise ConfigurationError(
                    f"{name} must be None or a positive integer, got {value!r}"
                )
        if not isinstance(self.align_header, Alignment) or not isinstance(
            self.align_body, Alignment
        ):
            raise ConfigurationError("align_header and align_body must be Alignment values")

    @classmethod
    def build(
        cls,
        *,
        column_width: int | None = None,
        column_padding: ColumnPadding | int | Sequence[int] | None = None,
        border: str | BorderStyle | None = None,
        header_frequency: HeaderFrequency = "start",
        row_divider_frequency: int | None = None,
        wrap_header_cells_to: int | None = None,
        wrap_body_cells_to: int | None = None,
        truncation_indicator: str | None = None,
        align_header: Alignment | str = Alignment.CENTER,
        align_body: Alignment | str = Alignment.AUTO,
        formatter: Formatter | None = None,
        styler: Styler | None = None,
        header_styler: TextStyler | None = None,
        border_styler: TextStyler | None = None,
    ) -> TableConfig:
        """
        Build a config from loosely typed options.

        ``None`` for column_width, column_padding, border, truncation_indicator
        or formatter selects the default. Alignments may be given as strings.

        Raises:
            ConfigurationError: If any option is invalid
        """
        return cls(
            column_width=DEFAULT_COLUMN_WIDTH if column_width is None else column_width,
            column_padding=ColumnPadding.parse(column_padding),
            border=DEFAULT_BORDER if border is None else border,
            header_frequency=header_frequency,
            row_divider_frequency=row_divider_frequency,
            wrap_header_cells_to=wrap_header_cells_to,
            wrap_body_cells_to=wrap_body_cells_to,
            truncation_indicator=(
                DEFAULT_TRUNCATION_INDICATOR
                if truncation_indicator is None
                else truncation_indicator
            ),
            align_header=Alignment.parse(align_header),
            align_body=Alignment.parse(align_body),
            formatter=format_value if formatter is None else formatter,
            styler=styler,
            header_styler=header_styler,
            border_styler=border_styler,
        )

    def evolve(self, **changes: Any) -> TableConfig:
        """
        Copy this config with some options changed.

        Changes are interpreted as by :meth:`build`, so ``None`` selects
        the default and alignments may be given as strings.
        """
        options = {f.name: getattr(self, f.name) for f in fields(self)}
        options.update(changes)
        return TableConfig.build(**options)
