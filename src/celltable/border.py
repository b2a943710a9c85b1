"""
Border styles and the assembly of rules and row lines.

A :class:`BorderStyle` is a named set of glyphs. An empty glyph means the
corresponding element is absent: a style whose top edge glyph is empty
has no top rule, and a style whose left edge glyph is empty has no left
border. :class:`Border` combines a style with an optional styler that
decorates emitted glyphs after all width arithmetic has been done.

Example output for each built-in style's rules:
    ascii           +-----+-----+
    modern          ┌─────┬─────┐
    reduced_ascii   ----- -----
    markdown        |-----|-----|   (below the header only)
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from .exceptions import InvalidBorderStyleError
from .width import display_width

TextStyler = Callable[[str], str]


class RulePosition(str, Enum):
    """Where a horizontal rule sits in the table."""

    TOP = "top"
    HEADER = "header"
    DIVIDER = "divider"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class BorderStyle:
    """
    Glyph set for a table border.

    Attributes:
        name: Style name used to select it
        corner_*: Corner glyphs of the outer frame
        edge_*: Horizontal glyph of the top/bottom rule, and vertical glyph
            of the left/right frame
        tee_*: Glyphs where an inner line meets the outer frame
        divider_vertical: Glyph separating adjacent columns
        divider_horizontal: Glyph of the rule below the header and between rows
        intersection: Glyph where inner lines cross
        show_row_dividers: Whether rules between body rows are drawn
    """

    name: str
    corner_top_left: str = ""
    corner_top_right: str = ""
    corner_bottom_left: str = ""
    corner_bottom_right: str = ""
    edge_top: str = ""
    edge_bottom: str = ""
    edge_left: str = ""
    edge_right: str = ""
    tee_top: str = ""
    tee_bottom: str = ""
    tee_left: str = ""
    tee_right: str = ""
    divider_vertical: str = ""
    divider_horizontal: str = ""
    intersection: str = ""
    show_row_dividers: bool = True

    def overhead(self, num_columns: int) -> int:
        """Width taken by vertical glyphs in a row of ``num_columns`` columns."""
        if num_columns <= 0:
            return 0
        return (
            display_width(self.edge_left)
            + display_width(self.edge_right)
            + (num_columns - 1) * display_width(self.divider_vertical)
        )

    def has_rule(self, position: RulePosition) -> bool:
        """Whether this style draws a rule at the given position."""
        if position is RulePosition.TOP:
            return bool(self.edge_top)
        if position is RulePosition.BOTTOM:
            return bool(self.edge_bottom)
        if position is RulePosition.DIVIDER and not self.show_row_dividers:
            return False
        return bool(self.divider_horizontal)


_ASCII = BorderStyle(
    name="ascii",
    corner_top_left="+",
    corner_top_right="+",
    corner_bottom_left="+",
    corner_bottom_right="+",
    edge_top="-",
    edge_bottom="-",
    edge_left="|",
    edge_right="|",
    tee_top="+",
    tee_bottom="+",
    tee_left="+",
    tee_right="+",
    divider_vertical="|",
    divider_horizontal="-",
    intersection="+",
)

_MODERN = BorderStyle(
    name="modern",
    corner_top_left="┌",
    corner_top_right="┐",
    corner_bottom_left="└",
    corner_bottom_right="┘",
    edge_top="─",
    edge_bottom="─",
    edge_left="│",
    edge_right="│",
    tee_top="┬",
    tee_bottom="┴",
    tee_left="├",
    tee_right="┤",
    divider_vertical="│",
    divider_horizontal="─",
    intersection="┼",
)

BORDER_STYLES: dict[str, BorderStyle] = {
    "ascii": _ASCII,
    "classic": BorderStyle(
        name="classic",
        corner_top_left="+",
        corner_top_right="+",
        edge_top="-",
        edge_left="|",
        edge_right="|",
        tee_top="+",
        tee_left="+",
        tee_right="+",
        divider_vertical="|",
        divider_horizontal="-",
        intersection="+",
    ),
    "markdown": BorderStyle(
        name="markdown",
        edge_left="|",
        edge_right="|",
        tee_left="|",
        tee_right="|",
        divider_vertical="|",
        divider_horizontal="-",
        intersection="|",
        show_row_dividers=False,
    ),
    "modern": _MODERN,
    "reduced_ascii": BorderStyle(
        name="reduced_ascii",
        edge_top="-",
        edge_bottom="-",
        tee_top=" ",
        tee_bottom=" ",
        divider_vertical=" ",
        divider_horizontal="-",
        intersection=" ",
    ),
    "reduced_modern": BorderStyle(
        name="reduced_modern",
        edge_top="─",
        edge_bottom="─",
        tee_top=" ",
        tee_bottom=" ",
        divider_vertical=" ",
        divider_horizontal="─",
        intersection=" ",
    ),
    "blank": BorderStyle(name="blank"),
}

DEFAULT_BORDER = "ascii"


def get_border_style(style: str | BorderStyle | None) -> BorderStyle:
    """
    Resolve a border style selector.

    Args:
        style: A style name, a custom BorderStyle, or None for the default

    Raises:
        InvalidBorderStyleError: If the name is not a known style
    """
    if style is None:
        return BORDER_STYLES[DEFAULT_BORDER]
    if isinstance(style, BorderStyle):
        return style
    if isinstance(style, str) and style in BORDER_STYLES:
        return BORDER_STYLES[style]
    raise InvalidBorderStyleError(style, known=list(BORDER_STYLES))


class Border:
    """A border style bound to an optional styler for its glyphs."""

    def __init__(self, style: BorderStyle, styler: TextStyler | None = None) -> None:
        self.style = style
        self._styler = styler

    def overhead(self, num_columns: int) -> int:
        return self.style.overhead(num_columns)

    def rule(self, padded_widths: Sequence[int], position: RulePosition) -> str:
        """
        Build the horizontal rule for the given position.

        Args:
            padded_widths: Width of each column including its padding
            position: Where the rule sits

        Returns:
            The (styled) rule, or an empty string if the style has no rule there
        """
        if not padded_widths or not self.style.has_rule(position):
            return ""

        s = self.style
        if position is RulePosition.TOP:
            edge, left, middle, right = (
                s.edge_top,
                s.corner_top_left,
                s.tee_top,
                s.corner_top_right,
            )
        elif position is RulePosition.BOTTOM:
            edge, left, middle, right = (
                s.edge_bottom,
                s.corner_bottom_left,
                s.tee_bottom,
                s.corner_bottom_right,
            )
        else:
            edge, left, middle, right = (
                s.divider_horizontal,
                s.tee_left,
                s.intersection,
                s.tee_right,
            )

        line = left + middle.join(edge * width for width in padded_widths) + right
        return self._style(line)

    def join_cells(self, cells: Sequence[str]) -> str:
        """Join one display line of each column into a row line."""
        s = self.style
        divider = self._style(s.divider_vertical)
        return self._style(s.edge_left) + divider.join(cells) + self._style(s.edge_right)

    def _style(self, text: str) -> str:
        if not text or self._styler is None:
            return text
        return self._styler(text)
