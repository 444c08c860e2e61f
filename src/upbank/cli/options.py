"""Option and argument types shared by the upbank commands."""

from typing import Annotated

import typer

DEFAULT_PAGE_SIZE = 50

JsonOption = Annotated[bool, typer.Option("--json", help="Output as JSON")]
LimitOption = Annotated[
    int, typer.Option("--limit", min=1, help="Maximum number of results")
]


def page_params(limit: int) -> dict[str, int]:
    """Query parameters asking the API for at most ``limit`` results."""
    return {"page[size]": limit}
