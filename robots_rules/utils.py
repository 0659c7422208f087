# File: robots_rules/utils.py
"""robots_rules.utils: URL helpers shared by the fetcher and the per-host session."""

from __future__ import annotations

from typing import Optional, Sequence
from urllib.parse import urlsplit, urlunsplit

__all__: Sequence[str] = (
    "extract_host",
    "robots_url_for",
    "request_uri",
)


def extract_host(url: str) -> Optional[str]:
    """Host used as the RuleSet cache key (lowercased, without port)."""
    return urlsplit(url).hostname


def robots_url_for(url: str) -> Optional[str]:
    """Return `<scheme>://<netloc>/robots.txt` for *url*, or None without a host."""
    parts = urlsplit(url)
    if not parts.scheme or not parts.netloc:
        return None
    return urlunsplit((parts.scheme, parts.netloc, "/robots.txt", "", ""))


def request_uri(url: str) -> str:
    """Path plus query, the subject of Allow/Disallow matching; empty path becomes `/`."""
    parts = urlsplit(url)
    path = parts.path or "/"
    return f"{path}?{parts.query}" if parts.query else path
