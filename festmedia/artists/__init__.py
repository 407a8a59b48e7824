"""
Artist lineup feed for FreakFest media.

Turns the public lineup spreadsheet into artist records behind a short-lived
cache.
"""

from .csv_parser import parse_csv
from .models import (
    Artist,
    pick_first_key,
    clean_instagram_handle,
    find_profile_image,
    artist_id,
    normalize_artist,
    normalize_artists,
)
from .sheet import SheetClient, SheetClientConfig
from .cache import ArtistCache, CachedArtists
from .feed import wants_refresh, artists_response

__all__ = [
    "parse_csv",
    "Artist",
    "pick_first_key",
    "clean_instagram_handle",
    "find_profile_image",
    "artist_id",
    "normalize_artist",
    "normalize_artists",
    "SheetClient",
    "SheetClientConfig",
    "ArtistCache",
    "CachedArtists",
    "wants_refresh",
    "artists_response",
]
