"""
Artist list cache.

One ArtistCache is built per process and handed to whatever serves the
lineup. The clock is injected so freshness can be tested without sleeping.
"""

import time
from dataclasses import dataclass
from typing import Callable, Optional

from ..core.logging import debug_log
from .models import Artist


@dataclass
class CachedArtists:
    """A fetched artist list and when it was fetched (clock seconds)."""
    fetched_at: float
    artists: list[Artist]


class ArtistCache:
    """
    Short-lived in-memory cache in front of the lineup sheet.

    get() serves the cached list while it is younger than ttl seconds and
    refetches otherwise. A failed fetch raises and leaves the previous entry
    in place.
    """

    def __init__(
        self,
        fetch: Callable[[], list[Artist]],
        ttl: float = 15 * 60,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._fetch = fetch
        self.ttl = ttl
        self._clock = clock
        self._entry: Optional[CachedArtists] = None

    def is_fresh(self) -> bool:
        """Check if the cached list can be served without refetching."""
        if self._entry is None:
            return False
        return self._clock() - self._entry.fetched_at < self.ttl

    def get(self, force_refresh: bool = False) -> tuple[list[Artist], bool]:
        """
        Get the artist list.

        Returns:
            (artists, cached) where cached is True if no fetch happened
        """
        if not force_refresh and self.is_fresh():
            return self._entry.artists, True

        now = self._clock()
        artists = self._fetch()
        self._entry = CachedArtists(fetched_at=now, artists=artists)
        debug_log(f"artist list refreshed: {len(artists)} artists")
        return artists, False

    def invalidate(self):
        """Drop the cached list."""
        self._entry = None
