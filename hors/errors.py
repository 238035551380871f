"""Error types raised by the search engines."""

from __future__ import annotations


class HorsError(Exception):
    """Base class for every error a search engine surfaces to its caller."""

    kind = "hors"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @classmethod
    def from_parse(cls, message: str) -> "ParseError":
        return ParseError(message)

    @classmethod
    def from_transport(cls, exc: BaseException) -> "TransportError":
        return TransportError(f"{type(exc).__name__}: {exc}")

    def __str__(self) -> str:
        return self.message


class TransportError(HorsError):
    """Building the client, sending the request or reading the body failed."""

    kind = "transport"


class ParseError(HorsError):
    """The fetched page did not contain any usable result links."""

    kind = "parse"
