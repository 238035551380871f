"""Centralised settings for hors.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


def _env_timeout(name: str) -> float | None:
    """Return the timeout in seconds, or ``None`` to keep the transport default."""
    raw = os.environ.get(name, "").strip()
    return float(raw) if raw else None


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    search_engine: str = field(
        default_factory=lambda: os.environ.get("HORS_SEARCH_ENGINE", "bing")
    )
    search_site: str = field(
        default_factory=lambda: os.environ.get("HORS_SEARCH_SITE", "stackoverflow.com")
    )

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------
    request_timeout: float | None = field(
        default_factory=lambda: _env_timeout("HORS_REQUEST_TIMEOUT")
    )

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------
    debug: bool = field(default_factory=lambda: _env_flag("HORS_DEBUG"))


# Module-level singleton — import this everywhere:
#   from hors.config import settings
settings = Settings()
