"""
Cell layout: wrapping, truncation, alignment and styling of one value.

A :class:`Cell` turns one formatted value into a list of fixed-width
display lines ("subcells"). Content is wrapped at grapheme-cluster
boundaries to the column width, then optionally truncated to a target
height, aligned within the width, styled, and padded on both sides.

Example:
    >>> cell = Cell(1234567, formatter=str, alignment=Alignment.AUTO, width=4)
    >>> cell.padded_truncated_subcells(2, 1, 1)
    [' 1234 ', '  567 ']
"""

from __future__ import annotations

import numbers
from collections.abc import Callable
from enum import Enum
from functools import cached_property
from typing import Any

from .exceptions import InvalidAlignmentError
from .width import cluster_width, display_width, graphemes, split_lines

Formatter = Callable[[Any], str]
Styler = Callable[[Any, str], str]


def format_value(value: Any) -> str:
    """Default formatter: ``None`` renders as empty text, anything else via ``str``."""
    if value is None:
        return ""
    return str(value)


def plain_styler(value: Any, text: str) -> str:
    """Default styler: returns the text unchanged."""
    return text


class Alignment(str, Enum):
    """Horizontal alignment of content within a column."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    AUTO = "auto"

    @classmethod
    def parse(cls, value: Alignment | str) -> Alignment:
        """
        Convert a string such as ``"left"`` to an Alignment.

        Raises:
            InvalidAlignmentError: If the value names no alignment
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise InvalidAlignmentError(value, [a.value for a in cls]) from None


class ValueKind(Enum):
    """Closed classification of a cell value, used to resolve AUTO alignment."""

    NUMERIC = "numeric"
    BOOLEAN = "boolean"
    OTHER = "other"

    @classmethod
    def of(cls, value: Any) -> ValueKind:
        # bool is a subclass of int, so it must be tested first
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, numbers.Number):
            return cls.NUMERIC
        return cls.OTHER

    @property
    def alignment(self) -> Alignment:
        """The alignment AUTO resolves to for values of this kind."""
        if self is ValueKind.NUMERIC:
            return Alignment.RIGHT
        if self is ValueKind.BOOLEAN:
            return Alignment.CENTER
        return Alignment.LEFT


def wrap(text: str, width: int) -> list[str]:
    """
    Wrap text to lines no wider than ``width`` display columns.

    Explicit line breaks always start a new line. Within a line, grapheme
    clusters are accumulated greedily; a cluster that would overflow the
    width starts the next line. A single cluster wider than ``width`` is
    placed on a line of its own.
    """
    lines: list[str] = []
    for paragraph in split_lines(text):
        current: list[str] = []
        current_width = 0
        for cluster in graphemes(paragraph):
            w = cluster_width(cluster)
            if current and current_width + w > width:
                lines.append("".join(current))
                current, current_width = [], 0
            current.append(cluster)
            current_width += w
        lines.append("".join(current))
    return lines


class Cell:
    """
    A single value laid out within a column of fixed width.

    Cells are created per render and are cheap; the formatted content and
    the wrapped lines are computed at most once per cell.

    Attributes:
        value: The underlying value, as returned by the column's extractor
        kind: Classification of ``value`` used for AUTO alignment
    """

    def __init__(
        self,
        value: Any,
        *,
        formatter: Formatter = format_value,
        alignment: Alignment = Alignment.AUTO,
        width: int,
        styler: Styler = plain_styler,
        truncation_indicator: str = "~",
        padding_character: str = " ",
    ) -> None:
        self.value = value
        self.kind = ValueKind.of(value)
        self._formatter = formatter
        self._alignment = alignment
        self._width = width
        self._styler = styler
        self._truncation_indicator = truncation_indicator
        self._padding_character = padding_character

    def __repr__(self) -> str:
        return f"Cell(value={self.value!r}, width={self._width})"

    @cached_property
    def formatted_content(self) -> str:
        """The value after formatting, before wrapping or styling."""
        return self._formatter(self.value)

    @property
    def alignment(self) -> Alignment:
        """The effective alignment, with AUTO resolved from the value's kind."""
        if self._alignment is Alignment.AUTO:
            return self.kind.alignment
        return self._alignment

    @cached_property
    def natural_lines(self) -> list[str]:
        """Wrapped content lines, before truncation, alignment or styling."""
        return wrap(self.formatted_content, self._width)

    @property
    def height(self) -> int:
        """Number of display lines the content needs at this width."""
        return len(self.natural_lines)

    def padded_truncated_subcells(
        self, target_height: int, padding_left: int, padding_right: int
    ) -> list[str]:
        """
        Lay the cell out as exactly ``target_height`` padded display lines.

        Content taller than ``target_height`` is truncated. When there is
        padding to spare, the styled truncation indicator takes the place
        of one padding character on the last line, so content is never cut
        short to fit it. With no padding, truncation is silent.

        Lines beyond the content are filled with padding characters.

        Args:
            target_height: Number of lines to produce
            padding_left: Padding characters before the content
            padding_right: Padding characters after the content

        Returns:
            List of lines, each ``width + padding_left + padding_right`` wide
        """
        truncated = self.height > target_height
        show_indicator = truncated and (padding_left + padding_right) > 0
        lpad = self._padding_character * padding_left
        rpad = self._padding_character * padding_right

        subcells: list[str] = []
        for index in range(target_height):
            if index < self.height:
                inner = self._style_and_align(self.natural_lines[index])
            else:
                inner = self._padding_character * self._width

            if show_indicator and index + 1 == target_height:
                indicator = self._styler(self.value, self._truncation_indicator)
                if padding_right > 0:
                    subcells.append(f"{lpad}{inner}{indicator}{rpad[1:]}")
                else:
                    subcells.append(f"{lpad[1:]}{inner}{indicator}")
            else:
                subcells.append(f"{lpad}{inner}{rpad}")
        return subcells

    def _style_and_align(self, content: str) -> str:
        padding = max(self._width - display_width(content), 0)
        alignment = self.alignment
        if alignment is Alignment.CENTER:
            right = padding // 2
            left = padding - right
        elif alignment is Alignment.RIGHT:
            left, right = padding, 0
        else:
            left, right = 0, padding
        return f"{' ' * left}{self._styler(self.value, content)}{' ' * right}"
