"""
Artist feed payloads for the lineup endpoint.

Framework-agnostic: the web layer passes in the query params and headers of
the request and sends back the (status, body) pair.
"""

from typing import Mapping, Optional

import requests

from ..core.logging import log
from .cache import ArtistCache


def wants_refresh(query: Optional[Mapping[str, str]] = None, headers: Optional[Mapping[str, str]] = None) -> bool:
    """Check for ?refresh=1 or a Cache-Control: no-cache request header."""
    query = query or {}
    headers = headers or {}
    if str(query.get("refresh", "")) == "1":
        return True
    cache_control = next(
        (value for name, value in headers.items() if name.lower() == "cache-control"),
        "",
    )
    return "no-cache" in str(cache_control).lower()


def artists_response(
    cache: ArtistCache,
    query: Optional[Mapping[str, str]] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> tuple[int, dict]:
    """
    Build the /api/artists response.

    Returns:
        (200, {"artists": [...], "cached": bool}) or (500, {"message": ...})
    """
    try:
        artists, cached = cache.get(force_refresh=wants_refresh(query, headers))
    except (requests.exceptions.RequestException, RuntimeError) as e:
        log(f"failed to load artists: {e}", "artists")
        return 500, {"message": str(e) or "Failed to load artists"}

    return 200, {
        "artists": [a.to_dict() for a in artists],
        "cached": cached,
    }
