"""Column model: per-column configuration and cell construction."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from .cell import Alignment, Cell, Formatter, Styler, format_value, plain_styler
from .exceptions import InvalidColumnLabelError, InvalidColumnWidthError

Label = str | int
LabelKey = tuple[type, Label]
Extractor = Callable[[Any], Any]
HeaderStyler = Callable[[str], str]


def label_key(label: Label) -> LabelKey:
    """
    Canonical key for comparing column labels.

    Labels compare by exact value and kind: ``"3"`` and ``3`` are different
    labels, as are ``"abc"`` and ``"Abc"``.

    Raises:
        InvalidColumnLabelError: If the label is not a str or int (bool is
            rejected)
    """
    if isinstance(label, bool) or not isinstance(label, (str, int)):
        raise InvalidColumnLabelError(label)
    return (type(label), label)


def default_extractor(label: Label) -> Extractor:
    """
    Build the extractor used when a column is added without one.

    Integer labels index into the source row. String labels look up a key
    on mapping rows and an attribute on anything else; a callable attribute
    (a method) is called with no arguments.
    """

    def extract(source: Any) -> Any:
        if isinstance(label, int) or isinstance(source, Mapping):
            return source[label]
        attr = getattr(source, label)
        return attr() if callable(attr) else attr

    return extract


def validate_width(width: Any) -> int:
    if isinstance(width, bool) or not isinstance(width, int) or width < 1:
        raise InvalidColumnWidthError(width)
    return width


class Column:
    """
    One column of a table.

    ``width`` is the content width, excluding padding. It is fixed at
    creation and changes only through :meth:`Table.pack` or explicit
    assignment.
    """

    def __init__(
        self,
        label: Label,
        *,
        header: str | None = None,
        width: int,
        align_header: Alignment = Alignment.CENTER,
        align_body: Alignment = Alignment.AUTO,
        formatter: Formatter = format_value,
        extractor: Extractor | None = None,
        styler: Styler | None = None,
        header_styler: HeaderStyler | None = None,
        truncation_indicator: str = "~",
        padding_character: str = " ",
    ) -> None:
        self.key = label_key(label)
        self.label = label
        self.header = str(label) if header is None else header
        self.width = validate_width(width)
        self.align_header = Alignment.parse(align_header)
        self.align_body = Alignment.parse(align_body)
        self.formatter = formatter
        self.extractor = extractor if extractor is not None else default_extractor(label)
        self.styler = styler if styler is not None else plain_styler
        self.header_styler = header_styler
        self.truncation_indicator = truncation_indicator
        self.padding_character = padding_character

    def __repr__(self) -> str:
        return f"Column(label={self.label!r}, width={self.width})"

    def header_cell(self) -> Cell:
        """Cell for this column's header text."""
        header_styler = self.header_styler
        if header_styler is None:
            styler = plain_styler
        else:

            def styler(_value: Any, text: str) -> str:
                return header_styler(text)

        return Cell(
            self.header,
            formatter=str,
            alignment=self.align_header,
            width=self.width,
            styler=styler,
            truncation_indicator=self.truncation_indicator,
            padding_character=self.padding_character,
        )

    def body_cell(self, source: Any) -> Cell:
        """Cell for the value this column extracts from a source row."""
        return Cell(
            self.body_cell_value(source),
            formatter=self.formatter,
            alignment=self.align_body,
            width=self.width,
            styler=self.styler,
            truncation_indicator=self.truncation_indicator,
            padding_character=self.padding_character,
        )

    def body_cell_value(self, source: Any) -> Any:
        return self.extractor(source)

    def formatted_cell_content(self, source: Any) -> str:
        return self.formatter(self.body_cell_value(source))

    def padded_width(self, padding_left: int, padding_right: int) -> int:
        return self.width + padding_left + padding_right
