"""hors CLI — look up site-scoped search result links.

Usage:
    python cli/main.py --help
    python cli/main.py how to reverse a list --engine bing
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from hors.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import List, Optional

import typer

from hors.config import settings
from hors.engine import available_engines, get_engine
from hors.errors import HorsError

app = typer.Typer(
    name="hors-links",
    help="Print search result links for a query, scoped to one site.",
    no_args_is_help=True,
)


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def links(
    query: List[str] = typer.Argument(..., help="Query words."),
    engine: Optional[str] = typer.Option(
        None, "--engine", "-e", help=f"Search engine: {' | '.join(available_engines())}."
    ),
    site: Optional[str] = typer.Option(
        None, "--site", "-s", help="Restrict results to this domain."
    ),
    debug: bool = typer.Option(False, "--debug", help="Log request details."),
) -> None:
    """Search QUERY and print one result link per line."""
    _configure_logging(debug or settings.debug)

    text = " ".join(query).strip()
    if not text:
        typer.echo("[hors] Empty query.")
        raise typer.Exit(1)

    try:
        search_engine = get_engine(engine)
    except ValueError as exc:
        typer.echo(f"[hors] {exc}")
        raise typer.Exit(2)

    try:
        found = search_engine.search_links(text, site=site)
    except HorsError as exc:
        typer.echo(f"[hors] {exc}")
        raise typer.Exit(1)

    for url in found:
        typer.echo(url)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
