"""
Runtime settings for FreakFest media.

Settings come from the environment (manifest_gen.py loads a .env file into it
first). Every value has a working default so a bare checkout runs.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..core.paths import get_assets_root, FLYERS_SUBDIR, GALLERY_SUBDIR, VENUE_SUBDIR


# Public lineup spreadsheet (Google Sheets CSV export)
DEFAULT_SHEET_ID = "1olXuQXZWpPCC87JLfS3P94gvZ5YRh2YoOJuSYa1RaYQ"
DEFAULT_SHEET_GID = "1711871810"

# Artist list cache lifetime (seconds)
DEFAULT_ARTISTS_TTL = 15 * 60


@dataclass
class AssetCategory:
    """A media folder that gets its own manifest."""
    name: str
    subdir: Path
    kind: str  # "files" (flyers) or "images" (gallery-style)
    canonical: bool = False  # Use the canonical flyer slots for ordering


CATEGORIES = [
    AssetCategory("flyers", FLYERS_SUBDIR, "files", canonical=True),
    AssetCategory("gallery", GALLERY_SUBDIR, "images"),
    AssetCategory("venue", VENUE_SUBDIR, "images"),
]


def get_category(name: str) -> Optional[AssetCategory]:
    """Get an asset category by name."""
    for category in CATEGORIES:
        if category.name == name:
            return category
    return None


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        print(f"Warning: {name}={value!r} is not a number, using {default}")
        return default


@dataclass
class MediaSettings:
    """Settings for manifest generation and the artist feed."""
    assets_root: Path
    sheet_id: str = DEFAULT_SHEET_ID
    sheet_gid: str = DEFAULT_SHEET_GID
    artists_ttl: int = DEFAULT_ARTISTS_TTL
    artists_timeout: int = 30

    @property
    def sheet_csv_url(self) -> str:
        """CSV export URL for the lineup sheet."""
        return (
            f"https://docs.google.com/spreadsheets/d/{self.sheet_id}"
            f"/export?format=csv&gid={self.sheet_gid}"
        )

    @classmethod
    def from_env(cls) -> "MediaSettings":
        """Build settings from environment variables."""
        return cls(
            assets_root=get_assets_root(),
            sheet_id=os.environ.get("ARTISTS_SHEET_ID") or DEFAULT_SHEET_ID,
            sheet_gid=os.environ.get("ARTISTS_SHEET_GID") or DEFAULT_SHEET_GID,
            artists_ttl=_env_int("ARTISTS_CACHE_TTL", DEFAULT_ARTISTS_TTL),
            artists_timeout=_env_int("ARTISTS_TIMEOUT", 30),
        )
