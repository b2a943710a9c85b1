"""
Table rendering.

A :class:`Table` pairs a source of rows with an ordered set of columns and
renders them as fixed-width text. The source is any iterable; it is
consumed once per render (and once more by :meth:`Table.pack`), so a
generator works as long as it is only rendered once.

Example output (default ``ascii`` border):
    +--------------+--------------+
    |       N      |    Doubled   |
    +--------------+--------------+
    |            1 |            2 |
    |            2 |            4 |
    +--------------+--------------+
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any, Literal

from .border import Border, BorderStyle, RulePosition, TextStyler, get_border_style
from .cell import Alignment, Cell, Formatter, Styler
from .column import Column, Extractor, Label, LabelKey, label_key
from .config import ColumnPadding, HeaderFrequency, TableConfig
from .exceptions import (
    DuplicateColumnLabelError,
    InvalidColumnLabelError,
    UnknownColumnLabelError,
)
from .packing import natural_widths, pack_widths
from .terminal import terminal_width
from .width import max_line_width

logger = logging.getLogger(__name__)

HeaderPlacement = Literal["top", "middle"]

_RULE_POSITIONS = {
    "top": RulePosition.TOP,
    "middle": RulePosition.HEADER,
    "bottom": RulePosition.BOTTOM,
}

_FIELD_NAMES_LABEL = "field_names"


class Row:
    """
    One row of a table, tied to a single element of the source.

    Iterating a Row yields its :class:`Cell` objects in column order.
    ``str(row)`` renders the row, preceded by the header block or divider
    that belongs above it at its position in the table.
    """

    def __init__(
        self,
        table: Table,
        source: Any,
        *,
        header: HeaderPlacement | None = None,
        divider: bool = False,
    ) -> None:
        self.table = table
        self.source = source
        self.header = header
        self.divider = divider

    def __iter__(self) -> Iterator[Cell]:
        for column in self.table.columns:
            yield column.body_cell(self.source)

    def __str__(self) -> str:
        return self.table.formatted_body_row(
            self.source, header=self.header, divider=self.divider
        )

    def __repr__(self) -> str:
        return f"Row(source={self.source!r})"

    def to_dict(self) -> dict[Label, Cell]:
        """Map each column label to this row's cell in that column."""
        return {column.label: column.body_cell(self.source) for column in self.table.columns}


class Table:
    """
    Render an iterable of rows as a text table.

    Columns are added with :meth:`add_column` (or as positional labels) and
    appear in insertion order. See :class:`~celltable.config.TableConfig`
    for the table-wide options.

    Example:
        >>> table = Table(range(1, 4), "real")
        >>> table.add_column("Doubled", lambda n: n * 2)
        >>> print(table.pack())
    """

    def __init__(
        self,
        source: Iterable[Any],
        *labels: Label,
        column_width: int | None = None,
        column_padding: ColumnPadding | int | Sequence[int] | None = None,
        border: str | BorderStyle | None = None,
        border_styler: TextStyler | None = None,
        header_styler: TextStyler | None = None,
        styler: Styler | None = None,
        header_frequency: HeaderFrequency = "start",
        row_divider_frequency: int | None = None,
        wrap_header_cells_to: int | None = None,
        wrap_body_cells_to: int | None = None,
        truncation_indicator: str | None = None,
        align_header: Alignment | str = Alignment.CENTER,
        align_body: Alignment | str = Alignment.AUTO,
        formatter: Formatter | None = None,
    ) -> None:
        self.source = source
        self.config = TableConfig.build(
            column_width=column_width,
            column_padding=column_padding,
            border=border,
            border_styler=border_styler,
            header_styler=header_styler,
            styler=styler,
            header_frequency=header_frequency,
            row_divider_frequency=row_divider_frequency,
            wrap_header_cells_to=wrap_header_cells_to,
            wrap_body_cells_to=wrap_body_cells_to,
            truncation_indicator=truncation_indicator,
            align_header=align_header,
            align_body=align_body,
            formatter=formatter,
        )
        self._columns: list[Column] = []
        for label in labels:
            self.add_column(label)

    @classmethod
    def from_config(cls, source: Iterable[Any], config: TableConfig) -> Table:
        """Create an empty table from an existing configuration."""
        table = cls(source)
        table.config = config
        return table

    # -----------------------------------------------------------------------
    # Column management
    # -----------------------------------------------------------------------

    @property
    def columns(self) -> list[Column]:
        """Columns in display order (a copy; mutate via add/remove_column)."""
        return list(self._columns)

    def add_column(
        self,
        label: Label,
        extractor: Extractor | None = None,
        *,
        header: str | None = None,
        width: int | None = None,
        align_header: Alignment | str | None = None,
        align_body: Alignment | str | None = None,
        formatter: Formatter | None = None,
        styler: Styler | None = None,
        header_styler: TextStyler | None = None,
        before: Label | None = None,
    ) -> Column:
        """
        Add a column to the table.

        Options left as None fall back to the table's configuration.

        Args:
            label: Unique column identifier (str or int)
            extractor: Derives the cell value from a source row. Defaults to
                item lookup (int labels, mapping rows) or attribute access.
            header: Header text, defaults to ``str(label)``
            width: Content width, defaults to the table's column_width
            align_header: Header alignment
            align_body: Body alignment; "auto" aligns by value type
            formatter: Converts the cell value to text
            styler: ``(value, text) -> text`` decoration for body content
            header_styler: ``(text) -> text`` decoration for header content
            before: Insert before the column with this label instead of last

        Returns:
            The new Column

        Raises:
            DuplicateColumnLabelError: If a column with this label exists
            UnknownColumnLabelError: If ``before`` matches no column
        """
        key = label_key(label)
        if self._index_of(key) is not None:
            raise DuplicateColumnLabelError(label)

        position = len(self._columns)
        if before is not None:
            index = self._index_of(label_key(before))
            if index is None:
                raise UnknownColumnLabelError(before)
            position = index

        config = self.config
        column = Column(
            label,
            header=header,
            width=config.column_width if width is None else width,
            align_header=config.align_header if align_header is None else align_header,
            align_body=config.align_body if align_body is None else align_body,
            formatter=config.formatter if formatter is None else formatter,
            extractor=extractor,
            styler=config.styler if styler is None else styler,
            header_styler=config.header_styler if header_styler is None else header_styler,
            truncation_indicator=config.truncation_indicator,
        )
        self._columns.insert(position, column)
        logger.debug("Added column %r at position %d", label, position)
        return column

    def remove_column(self, label: Label) -> bool:
        """
        Remove the column with the given label.

        Returns:
            True if a column was removed, False if none matched
        """
        try:
            index = self._index_of(label_key(label))
        except InvalidColumnLabelError:
            return False
        if index is None:
            return False
        del self._columns[index]
        logger.debug("Removed column %r", label)
        return True

    def column(self, label: Label) -> Column:
        """
        Look up a column by label.

        Raises:
            UnknownColumnLabelError: If no column has this label
        """
        try:
            index = self._index_of(label_key(label))
        except InvalidColumnLabelError:
            index = None
        if index is None:
            raise UnknownColumnLabelError(label)
        return self._columns[index]

    def _index_of(self, key: LabelKey) -> int | None:
        for i, column in enumerate(self._columns):
            if column.key == key:
                return i
        return None

    # -----------------------------------------------------------------------
    # Rendering
    # -----------------------------------------------------------------------

    def __iter__(self) -> Iterator[Row]:
        """Yield a Row per source element, carrying its header/divider placement."""
        header_frequency = self.config.header_frequency
        divider_frequency = self.config.row_divider_frequency
        for index, source in enumerate(self.source):
            header: HeaderPlacement | None = None
            if index == 0 and header_frequency is not None:
                header = "top"
            elif isinstance(header_frequency, int) and index % header_frequency == 0:
                header = "middle"
            divider = (
                divider_frequency is not None and index != 0 and index % divider_frequency == 0
            )
            yield Row(self, source, header=header, divider=divider)

    def __str__(self) -> str:
        return self.render()

    def render(self) -> str:
        """
        Render the whole table.

        Returns:
            The table text, or an empty string if the table has no columns

        Raises:
            InvalidBorderStyleError: If the border style is not recognized
        """
        if not self._columns:
            return ""
        border = self._border()

        lines: list[str] = []
        for row in self:
            lines.append(str(row))
        if not lines and self.config.header_frequency is not None:
            lines.append(self._header_block("top", border))

        bottom = border.rule(self._padded_widths(), RulePosition.BOTTOM)
        if bottom:
            lines.append(bottom)
        return "\n".join(lines)

    def formatted_header(self) -> str:
        """The header row (possibly several lines), without any rules."""
        if not self._columns:
            return ""
        cells = [column.header_cell() for column in self._columns]
        return self._format_row(cells, self.config.wrap_header_cells_to, self._border())

    def horizontal_rule(self, position: Literal["top", "middle", "bottom"] = "bottom") -> str:
        """
        A horizontal rule sized to the table, for the given position.

        Returns an empty string if the border style has no rule there.
        """
        if not self._columns:
            return ""
        try:
            rule_position = _RULE_POSITIONS[position]
        except KeyError:
            raise ValueError(
                f"Invalid rule position {position!r}, expected top, middle or bottom"
            ) from None
        return self._border().rule(self._padded_widths(), rule_position)

    def formatted_body_row(
        self,
        source: Any,
        *,
        header: HeaderPlacement | bool | None = None,
        divider: bool = False,
    ) -> str:
        """
        Render a single source element as a table row.

        The result depends only on the row and the flags, not on where the
        element sits in the source.

        Args:
            source: The source element
            header: "top" (or True) to precede the row with the opening header
                block, "middle" for a repeated header block, None/False for none
            divider: Precede the row with a divider rule. Ignored when a
                header block is requested.
        """
        if not self._columns:
            return ""
        border = self._border()
        cells = [column.body_cell(source) for column in self._columns]
        body = self._format_row(cells, self.config.wrap_body_cells_to, border)

        if header is True:
            header = "top"
        if header:
            parts = [self._header_block(header, border), body]
        elif divider:
            parts = [border.rule(self._padded_widths(), RulePosition.DIVIDER), body]
        else:
            parts = [body]
        return "\n".join(part for part in parts if part)

    def _header_block(self, placement: HeaderPlacement, border: Border) -> str:
        widths = self._padded_widths()
        above = RulePosition.TOP if placement == "top" else RulePosition.DIVIDER
        parts = [
            border.rule(widths, above),
            self.formatted_header(),
            border.rule(widths, RulePosition.HEADER),
        ]
        return "\n".join(part for part in parts if part)

    def _format_row(self, cells: list[Cell], wrap_to: int | None, border: Border) -> str:
        padding = self.config.column_padding
        heights = [cell.height for cell in cells]
        if wrap_to is None:
            row_height = max(heights)
        else:
            row_height = max(min(height, wrap_to) for height in heights)

        subcells = [
            cell.padded_truncated_subcells(row_height, padding.left, padding.right)
            for cell in cells
        ]
        return "\n".join(border.join_cells(line) for line in zip(*subcells))

    def _border(self) -> Border:
        return Border(get_border_style(self.config.border), self.config.border_styler)

    def _padded_widths(self) -> list[int]:
        padding = self.config.column_padding
        return [column.padded_width(padding.left, padding.right) for column in self._columns]

    # -----------------------------------------------------------------------
    # Sizing and reshaping
    # -----------------------------------------------------------------------

    def pack(self, max_table_width: int | Literal["auto"] | None = None) -> Table:
        """
        Resize columns to fit their content.

        Each column becomes just wide enough for its header and every
        formatted body cell without soft wrapping (hard line breaks still
        apply). If ``max_table_width`` is given and the result is wider,
        the widest columns are narrowed one character at a time, but never
        below one character of content.

        Args:
            max_table_width: None for an exact fit, an int bound on the
                total table width, or "auto" for the terminal width

        Returns:
            This table, for chaining
        """
        if not self._columns:
            return self

        if max_table_width == "auto":
            max_table_width = terminal_width()
        elif max_table_width is not None and (
            isinstance(max_table_width, bool) or not isinstance(max_table_width, int)
        ):
            raise ValueError(
                f"max_table_width must be None, 'auto' or an int, got {max_table_width!r}"
            )

        border = self._border()
        columns = self._columns
        overhead = border.overhead(len(columns)) + len(columns) * self.config.column_padding.total
        natural = natural_widths(columns, self.source)
        widths = pack_widths(natural, overhead=overhead, max_table_width=max_table_width)
        for column, width in zip(columns, widths):
            column.width = width

        logger.debug(
            "Packed %d columns: natural=%s packed=%s table_width=%d",
            len(columns),
            natural,
            widths,
            sum(widths) + overhead,
        )
        return self

    def transpose(
        self,
        *,
        field_names_width: int | None = None,
        field_names_header: str = "",
        field_names_header_alignment: Alignment | str = Alignment.RIGHT,
        field_names_body_alignment: Alignment | str = Alignment.RIGHT,
        headers: Callable[[Any], Any] = str,
        **options: Any,
    ) -> Table:
        """
        Build a new table whose rows are this table's columns.

        The left-most column holds this table's column headers; each source
        element becomes a column headed by ``headers(element)``. Table
        options are inherited from this table and may be overridden via
        keyword arguments (e.g. ``column_width=3``).

        Args:
            field_names_width: Width of the left-most column, defaulting to
                the widest header
            field_names_header: Header text of the left-most column
            field_names_header_alignment: Header alignment of the left-most column
            field_names_body_alignment: Body alignment of the left-most column
            headers: Derives a column header from each source element
            **options: TableConfig fields to override

        Returns:
            A new Table; this table is unchanged
        """
        config = self.config.evolve(**options)

        fields = self.columns
        transposed = Table.from_config(fields, config)

        if field_names_width is None:
            field_names_width = max((max_line_width(f.header) for f in fields), default=1)
        transposed.add_column(
            _FIELD_NAMES_LABEL,
            lambda field: field.header,
            header=field_names_header,
            width=max(field_names_width, 1),
            align_header=field_names_header_alignment,
            align_body=field_names_body_alignment,
        )

        for index, source in enumerate(self.source):
            transposed.add_column(
                index,
                _value_of(source),
                header=str(headers(source)),
            )
        return transposed


def _value_of(source: Any) -> Extractor:
    def extract(field: Column) -> Any:
        return field.body_cell_value(source)

    return extract
