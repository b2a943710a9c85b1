"""Command-line interface for rendering CSV or JSON-lines data as a table."""

from __future__ import annotations

import csv
import itertools
import json
import logging
from typing import IO, Any

import click

from .border import BORDER_STYLES
from .exceptions import CellTableError
from .table import Table

logger = logging.getLogger(__name__)


def _parse_header_frequency(
    ctx: click.Context, param: click.Parameter, value: str
) -> str | int | None:
    if value == "none":
        return None
    if value == "start":
        return "start"
    try:
        frequency = int(value)
    except ValueError:
        raise click.BadParameter("must be 'start', 'none' or a positive integer") from None
    if frequency < 1:
        raise click.BadParameter("must be 'start', 'none' or a positive integer")
    return frequency


def _parse_max_width(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> str | int | None:
    if value is None or value == "auto":
        return value
    try:
        width = int(value)
    except ValueError:
        raise click.BadParameter("must be 'auto' or a positive integer") from None
    if width < 1:
        raise click.BadParameter("must be 'auto' or a positive integer")
    return width


def _coerce(text: str) -> Any:
    """
    Turn numeric CSV fields into numbers so they align as numbers.

    A field is converted only when the number prints back as the same
    text, so "02134", "1_000" or "Infinity" stay as written.
    """
    for kind in (int, float):
        try:
            number = kind(text)
        except ValueError:
            continue
        if str(number) == text:
            return number
    return text


def _load_csv(stream: IO[str]) -> tuple[list[str], list[list[Any]]]:
    reader = csv.reader(stream)
    try:
        headers = next(reader)
    except StopIteration:
        return [], []
    rows = [[_coerce(field) for field in record] for record in reader]
    return headers, rows


def _load_jsonl(stream: IO[str]) -> tuple[list[str], list[dict[str, Any]]]:
    headers: list[str] = []
    rows: list[dict[str, Any]] = []
    for number, line in enumerate(stream, start=1):
        if not line.strip():
            continue
        try:
            record = json.loads(line)
        except json.JSONDecodeError as e:
            raise click.ClickException(f"line {number}: invalid JSON ({e.msg})") from e
        if not isinstance(record, dict):
            raise click.ClickException(f"line {number}: expected a JSON object")
        for key in record:
            if key not in headers:
                headers.append(key)
        rows.append(record)
    return headers, rows


def build_table(
    headers: list[str], rows: list[Any], *, keyed: bool, **options: Any
) -> Table:
    """Create a table with one column per header."""
    table = Table(rows, **options)
    for index, header in enumerate(headers):
        if keyed:
            table.add_column(header, lambda row, key=header: row.get(key))
        else:
            table.add_column(
                index,
                lambda row, i=index: row[i] if i < len(row) else None,
                header=header,
            )
    return table


@click.command()
@click.version_option(package_name="celltable")
@click.argument("input_file", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--format",
    "input_format",
    type=click.Choice(["csv", "jsonl"]),
    default="csv",
    help="Input format: CSV with a header row, or one JSON object per line",
)
@click.option(
    "--border",
    type=click.Choice(list(BORDER_STYLES)),
    default="ascii",
    help="Border style",
)
@click.option(
    "--column-width",
    type=click.IntRange(min=1),
    default=None,
    help="Default column width (default: 12)",
)
@click.option(
    "--padding",
    type=click.IntRange(min=0),
    default=None,
    help="Padding on each side of column content (default: 1)",
)
@click.option(
    "--header-frequency",
    default="start",
    callback=_parse_header_frequency,
    help="'start', 'none', or repeat the header every N rows",
)
@click.option(
    "--divider-frequency",
    type=click.IntRange(min=1),
    default=None,
    help="Draw a divider after every N rows",
)
@click.option(
    "--wrap-header",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum lines per header cell (default: unlimited)",
)
@click.option(
    "--wrap-body",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum lines per body cell (default: unlimited)",
)
@click.option(
    "--truncation-indicator",
    default=None,
    help="Character marking truncated cells (default: ~)",
)
@click.option(
    "--pack/--no-pack",
    default=True,
    help="Size columns to fit their content (default: enabled)",
)
@click.option(
    "--max-width",
    default=None,
    callback=_parse_max_width,
    help="Maximum table width when packing: an integer or 'auto' for the terminal width",
)
@click.option(
    "--transpose",
    is_flag=True,
    default=False,
    help="Swap rows and columns",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging")
def cli(
    input_file: IO[str],
    input_format: str,
    border: str,
    column_width: int | None,
    padding: int | None,
    header_frequency: str | int | None,
    divider_frequency: int | None,
    wrap_header: int | None,
    wrap_body: int | None,
    truncation_indicator: str | None,
    pack: bool,
    max_width: str | int | None,
    transpose: bool,
    verbose: bool,
) -> None:
    """Render CSV or JSON-lines data from INPUT_FILE (default: stdin) as a text table."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if input_format == "jsonl":
        headers, rows = _load_jsonl(input_file)
    else:
        headers, rows = _load_csv(input_file)
    logger.debug("Loaded %d rows with %d columns", len(rows), len(headers))

    try:
        table = build_table(
            headers,
            rows,
            keyed=input_format == "jsonl",
            border=border,
            column_width=column_width,
            column_padding=padding,
            header_frequency=header_frequency,
            row_divider_frequency=divider_frequency,
            wrap_header_cells_to=wrap_header,
            wrap_body_cells_to=wrap_body,
            truncation_indicator=truncation_indicator,
        )
        if transpose:
            numbers = itertools.count(1)
            table = table.transpose(headers=lambda row: next(numbers))
        if pack:
            table.pack(max_table_width=max_width)
        output = table.render()
    except CellTableError as e:
        raise click.UsageError(str(e)) from e

    if output:
        click.echo(output)


if __name__ == "__main__":
    cli()
