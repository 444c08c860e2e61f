"""Output helpers shared by all upbank commands.

Command output goes to stdout; failure messages go to stderr.
"""

import json
import logging
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from typing import Any, NamedTuple

import typer

from upbank.errors import UpBankError

logger = logging.getLogger(__name__)

MAX_COLUMN_WIDTH = 40
COLUMN_SEPARATOR = "  "


class Column(NamedTuple):
    """A table column: header label, how to pull a value from a row, how to show it."""

    header: str
    accessor: Callable[[dict[str, Any]], Any]
    formatter: Callable[[Any], str] | None = None

    def render(self, row: dict[str, Any]) -> str:
        value = self.accessor(row)
        if self.formatter is not None:
            return str(self.formatter(value))
        return "" if value is None else str(value)


def print_success(message: str) -> None:
    typer.echo(typer.style("✓", fg=typer.colors.GREEN) + " " + message)


def print_error(message: str) -> None:
    typer.echo(typer.style("✗", fg=typer.colors.RED) + " " + message, err=True)


def print_json(data: Any) -> None:
    """Print ``data`` exactly as returned by the API, indented by two spaces."""
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def print_table(rows: Sequence[dict[str, Any]], columns: Sequence[Column]) -> None:
    """Print rows as an aligned text table followed by a result count.

    Each column is as wide as its widest cell or header, capped at
    MAX_COLUMN_WIDTH; longer cells are truncated.
    """
    if not rows:
        typer.secho("No results found.", fg=typer.colors.YELLOW)
        return

    cells = [[column.render(row) for column in columns] for row in rows]
    widths = [
        min(
            max([len(column.header)] + [len(line[i]) for line in cells]),
            MAX_COLUMN_WIDTH,
        )
        for i, column in enumerate(columns)
    ]

    header = COLUMN_SEPARATOR.join(
        column.header.ljust(width) for column, width in zip(columns, widths)
    )
    typer.secho(header, fg=typer.colors.CYAN, bold=True)
    typer.secho("─" * len(header), dim=True)

    for line in cells:
        typer.echo(
            COLUMN_SEPARATOR.join(
                cell[:width].ljust(width) for cell, width in zip(line, widths)
            )
        )

    typer.secho(f"\n{len(rows)} result(s)", dim=True)


def print_details(title: str, fields: Sequence[tuple[str, str]]) -> None:
    """Print a titled block of aligned ``Label: value`` lines."""
    typer.secho(f"\n{title}\n", bold=True)
    label_width = max(len(label) for label, _ in fields) + 1
    for label, value in fields:
        typer.echo(f"{(label + ':').ljust(label_width)}  {value}")


@contextmanager
def handle_api_errors() -> Iterator[None]:
    """Turn any failure inside the block into a failure message and exit status 1."""
    try:
        yield
    except typer.Exit:
        raise
    except UpBankError as e:
        print_error(str(e))
        raise typer.Exit(1) from e
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        print_error(f"Unexpected error: {type(e).__name__}: {e}")
        raise typer.Exit(1) from e
