"""
Display width measurement for terminal text.

Text is measured per extended grapheme cluster, the smallest unit a reader
perceives as one character. A cluster is 2 columns wide when it renders
wide (East Asian wide/fullwidth characters, emoji presentation), 0 when it
renders nothing (lone combining marks, control characters), and 1
otherwise. Wrapping in :mod:`celltable.cell` breaks only between clusters.

Example:
    >>> display_width("很酷")
    4
    >>> graphemes("éx")
    ['é', 'x']
"""

from __future__ import annotations

from functools import lru_cache

import regex
from wcwidth import wcwidth

_GRAPHEME_RE = regex.compile(r"\X")

_EMOJI_PRESENTATION = "\ufe0f"
_REGIONAL_INDICATORS = range(0x1F1E6, 0x1F200)


def graphemes(text: str) -> list[str]:
    """Split text into extended grapheme clusters."""
    return _GRAPHEME_RE.findall(text)


@lru_cache(maxsize=4096)
def cluster_width(cluster: str) -> int:
    """
    Return the display width (0, 1 or 2) of a single grapheme cluster.

    The cluster is as wide as its widest code point. Joined sequences
    (ZWJ emoji, Hangul jamo, base + combining marks) therefore count
    once. A narrow base followed by U+FE0F is shown in emoji presentation
    and counts 2, as does a regional-indicator flag pair.
    """
    if not cluster:
        return 0

    width = max(max(wcwidth(ch), 0) for ch in cluster)
    if width == 1:
        if _EMOJI_PRESENTATION in cluster:
            return 2
        if len(cluster) == 2 and all(ord(ch) in _REGIONAL_INDICATORS for ch in cluster):
            return 2
    return min(width, 2)


def display_width(text: str) -> int:
    """Return the number of terminal columns text occupies."""
    if text.isascii() and text.isprintable():
        return len(text)
    return sum(cluster_width(cluster) for cluster in graphemes(text))


def split_lines(text: str) -> list[str]:
    """
    Split text on explicit line breaks.

    Unlike :meth:`str.splitlines`, a trailing break yields a trailing empty
    line, and empty text yields one empty line. Only ``\\r\\n``, ``\\r`` and
    ``\\n`` are treated as breaks.
    """
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def max_line_width(text: str) -> int:
    """Return the width of the widest explicit line in text."""
    return max(display_width(line) for line in split_lines(text))
