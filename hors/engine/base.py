"""Search engine abstraction.

Every engine shares one interface:
``search_links(query, site=None) -> list[str]``.  An engine either returns a
non-empty list of result links or raises a :class:`~hors.errors.HorsError`:
``TransportError`` when the page could not be fetched, ``ParseError`` when it
held no results.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from hors.config import settings
from hors.engine import bing


# ---------------------------------------------------------------------------
# Abstract base
# ---------------------------------------------------------------------------

class SearchEngine(ABC):
    """Abstract base class for a single search engine backend."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry key, e.g. ``"bing"``."""

    @abstractmethod
    def search_links(self, query: str, site: Optional[str] = None) -> list[str]:
        """Return result links for *query*; raise ``HorsError`` on failure."""


# ---------------------------------------------------------------------------
# Bing
# ---------------------------------------------------------------------------

class BingEngine(SearchEngine):
    """Scrapes bing's HTML results page."""

    @property
    def name(self) -> str:
        return "bing"

    def search_links(self, query: str, site: Optional[str] = None) -> list[str]:
        return bing.search_links(query, site)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

_ENGINES: dict[str, type[SearchEngine]] = {
    "bing": BingEngine,
}


def available_engines() -> list[str]:
    return sorted(_ENGINES)


def get_engine(name: Optional[str] = None) -> SearchEngine:
    """Return a new engine instance registered under *name*.

    Falls back to ``settings.search_engine`` when *name* is empty.

    Raises:
        ValueError: No engine is registered under that name.
    """
    name = name or settings.search_engine
    key = name.strip().lower()
    try:
        engine_cls = _ENGINES[key]
    except KeyError:
        raise ValueError(
            f"Unknown search engine {name!r}. Use: {' | '.join(available_engines())}"
        ) from None
    return engine_cls()
