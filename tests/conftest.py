"""Pytest fixtures for celltable tests."""

import pytest

from celltable import Table


@pytest.fixture
def make_table():
    """Factory for the standard N / Doubled table over a numeric source.

    Keyword options are passed to :class:`Table`; the source defaults to
    ``range(1, 6)``.
    """

    def _make(source=None, **options) -> Table:
        table = Table(range(1, 6) if source is None else source, **options)
        table.add_column("N", lambda n: n)
        table.add_column("Doubled", lambda n: n * 2)
        return table

    return _make


@pytest.fixture
def red():
    """Styler that wraps text in a red ANSI escape."""

    def _red(text: str) -> str:
        return f"\033[31m{text}\033[0m"

    return _red
