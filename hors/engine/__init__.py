"""Search engine package.

Public re-exports so callers can write::

    from hors.engine import search_links, get_engine
"""

from __future__ import annotations

from typing import Optional

from hors.engine.base import BingEngine, SearchEngine, available_engines, get_engine


def search_links(
    query: str,
    engine: Optional[str] = None,
    site: Optional[str] = None,
) -> list[str]:
    """Look up result links for *query* with *engine* (default: configured)."""
    return get_engine(engine).search_links(query, site)


__all__ = [
    "BingEngine",
    "SearchEngine",
    "available_engines",
    "get_engine",
    "search_links",
]
