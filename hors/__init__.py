"""hors — site-scoped search-engine link lookup."""

from hors.engine import search_links
from hors.errors import HorsError, ParseError, TransportError

__all__ = ["search_links", "HorsError", "ParseError", "TransportError"]
