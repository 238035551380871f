"""Search result links from the ``bing`` search engine.

The flow is strictly linear::

    search_links(query)
        fetch(query)          -> results page as text   (TransportError)
        extract_links(page)   -> list of hrefs or None   (-> ParseError)
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional
from urllib.parse import quote

import httpx
from bs4 import BeautifulSoup

from hors.config import settings
from hors.errors import HorsError
from hors.utils import random_agent

logger = logging.getLogger(__name__)

_SEARCH_URL = "https://www.bing.com/search?q=site:{site}%20{query}"

# One organic result card -> its heading -> the heading's link.
_RESULT_SELECTOR = ".b_algo h2 a"

NOT_FOUND_MESSAGE = "Can't find search result..."


def build_url(query: str, site: Optional[str] = None) -> str:
    """Return the bing search URL for *query* scoped to *site*.

    The query is percent-encoded so characters such as ``&``, ``#`` or ``+``
    stay inside the ``q`` parameter instead of changing the URL's shape.
    """
    site = site or settings.search_site
    return _SEARCH_URL.format(site=site, query=quote(query, safe=""))


def _client_options() -> dict[str, Any]:
    options: dict[str, Any] = {
        "headers": {"User-Agent": random_agent()},
        "cookies": httpx.Cookies(),
        "follow_redirects": True,
    }
    # Without an explicit value the client keeps httpx's default timeout.
    if settings.request_timeout is not None:
        options["timeout"] = settings.request_timeout
    return options


def fetch(query: str, site: Optional[str] = None) -> str:
    """Fetch the bing results page for *query* and return its body as text.

    Every call builds its own client and cookie jar, so concurrent callers
    share nothing.  HTTP status codes are not checked here: whatever page
    comes back is handed to :func:`extract_links`.  *site* overrides the
    configured search site for this call only.

    Raises:
        TransportError: The client could not be built, the request failed,
            or the body could not be decoded.
    """
    url = build_url(query, site)
    try:
        with httpx.Client(**_client_options()) as client:
            request = client.build_request("GET", url)
            logger.debug(
                "Request to bing: %s %s headers=%s",
                request.method,
                request.url,
                dict(request.headers),
            )
            response = client.send(request)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise HorsError.from_transport(exc) from exc

    # The charset comes from the server; names such as "base64" or "rot13"
    # pass codecs.lookup but fail when used to decode text.
    try:
        page = response.text
    except (LookupError, ValueError, TypeError, AssertionError) as exc:
        raise HorsError.from_transport(exc) from exc
    return page


def extract_links(page: str) -> Optional[List[str]]:
    """Extract result links from a bing results *page*.

    Matches anchors inside an ``h2`` inside an element with class
    ``b_algo``, in document order.  Anchors without an ``href`` are skipped.

    Returns:
        The links, or ``None`` when nothing matched.
    """
    soup = BeautifulSoup(page, "html.parser")
    links = [
        anchor["href"]
        for anchor in soup.select(_RESULT_SELECTOR)
        if anchor.has_attr("href")
    ]

    logger.debug("Links extracted from bing: %s", links)
    if not links:
        return None
    return links


def search_links(query: str, site: Optional[str] = None) -> List[str]:
    """Return the result links bing finds for *query*, scoped to *site*.

    Raises:
        TransportError: Propagated unchanged from :func:`fetch`.
        ParseError: The page contained no usable links.
    """
    page = fetch(query, site)
    links = extract_links(page)
    if links is None:
        raise HorsError.from_parse(NOT_FOUND_MESSAGE)
    return links
