"""
Column width packing.

Packing derives each column's width from its content: the widest explicit
line of its header or of any formatted body cell. Soft wrapping is ignored
while measuring; only hard line breaks split content.

When a maximum table width is given and the natural widths do not fit,
width is taken away one character at a time from the currently widest
column (the leftmost one on ties) until the table fits or every column is
down to a single character of content.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any

from .width import max_line_width

if TYPE_CHECKING:
    from .column import Column

logger = logging.getLogger(__name__)

MIN_COLUMN_WIDTH = 1


def natural_widths(columns: Sequence[Column], sources: Iterable[Any]) -> list[int]:
    """
    Measure the width each column needs to show its content unwrapped.

    The source is iterated exactly once.

    Args:
        columns: Columns in display order
        sources: Source rows

    Returns:
        One width per column, never less than MIN_COLUMN_WIDTH
    """
    widths = [max(max_line_width(column.header), MIN_COLUMN_WIDTH) for column in columns]
    for source in sources:
        for i, column in enumerate(columns):
            width = max_line_width(column.formatted_cell_content(source))
            if width > widths[i]:
                widths[i] = width
    return widths


def shrink_widths(widths: Sequence[int], target_total: int) -> list[int]:
    """
    Reduce content widths until they sum to ``target_total``.

    Each step removes one character from the widest column, preferring the
    leftmost among equals. No column goes below MIN_COLUMN_WIDTH, so the
    result may sum to more than ``target_total``.
    """
    result = list(widths)
    excess = sum(result) - target_total
    while excess > 0:
        widest = max(range(len(result)), key=lambda i: (result[i], -i))
        if result[widest] <= MIN_COLUMN_WIDTH:
            break
        result[widest] -= 1
        excess -= 1
    return result


def pack_widths(
    widths: Sequence[int],
    *,
    overhead: int,
    max_table_width: int | None = None,
) -> list[int]:
    """
    Compute final content widths from natural widths.

    Args:
        widths: Natural content width of each column
        overhead: Table width not taken by content (borders and padding)
        max_table_width: Upper bound on the total table width, or None for
            an exact fit to content

    Returns:
        Final content width of each column
    """
    if max_table_width is None:
        return list(widths)

    budget = max_table_width - overhead
    if sum(widths) <= budget:
        return list(widths)

    packed = shrink_widths(widths, budget)
    achieved = sum(packed) + overhead
    if achieved > max_table_width:
        logger.debug(
            "Columns at minimum width; table is %d wide, over the %d limit",
            achieved,
            max_table_width,
        )
    return packed
