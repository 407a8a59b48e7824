"""
Artist records built from lineup spreadsheet rows.
"""

import re
from dataclasses import dataclass
from typing import Optional


NAME_KEYS = ["artist", "name", "band", "act"]
INSTAGRAM_KEYS = ["instagram", "ig", "instagram handle", "instagram_username", "instagram user", "insta"]

_INSTAGRAM_URL_RE = re.compile(r"^https?://(?:www\.)?instagram\.com/", re.IGNORECASE)
_INSTAGRAM_IMAGE_RE = re.compile(r"(instagram|cdninstagram)\.com/.+\.(jpg|jpeg|png)", re.IGNORECASE)
_IMAGE_URL_RE = re.compile(r"\.(jpg|jpeg|png)$", re.IGNORECASE)
_SLUG_RE = re.compile(r"[^a-z0-9]+")


@dataclass
class Artist:
    """One act on the lineup."""
    id: str
    name: str
    instagram_handle: str = ""
    instagram_url: str = ""
    profile_image_url: Optional[str] = None

    def to_dict(self) -> dict:
        """JSON shape the lineup page expects (camelCase keys)."""
        d = {
            "id": self.id,
            "name": self.name,
            "instagramHandle": self.instagram_handle,
            "instagramUrl": self.instagram_url,
        }
        if self.profile_image_url:
            d["profileImageUrl"] = self.profile_image_url
        return d


def pick_first_key(row: dict[str, str], keys: list[str]) -> Optional[str]:
    """
    Get the first non-empty value whose header matches a candidate key.

    Candidates are tried in order; a header matches if it equals the key or
    contains it ("artist name" matches "artist").
    """
    for key in keys:
        header = next((h for h in row if h == key or key in h), None)
        if header and row[header]:
            return str(row[header])
    return None


def clean_instagram_handle(value: str) -> str:
    """Reduce an Instagram URL or "@handle" to the bare handle."""
    handle = _INSTAGRAM_URL_RE.sub("", value.strip())
    if handle.endswith("/"):
        handle = handle[:-1]
    if handle.startswith("@"):
        handle = handle[1:]
    return handle


def find_profile_image(row: dict[str, str]) -> Optional[str]:
    """Find the first cell holding a profile image URL."""
    for value in row.values():
        if not isinstance(value, str):
            continue
        if _INSTAGRAM_IMAGE_RE.search(value):
            return value
        if _IMAGE_URL_RE.search(value) and "http" in value:
            return value
    return None


def artist_id(name: str, handle: str = "") -> str:
    """Stable slug id: "Night Owls" + "nightowls" -> "night-owls-nightowls"."""
    return _SLUG_RE.sub("-", f"{name}-{handle}".lower()).strip("-")


def normalize_artist(row: dict[str, str]) -> Optional[Artist]:
    """Build an Artist from a spreadsheet row, or None if the row has no name."""
    name = pick_first_key(row, NAME_KEYS)
    if not name:
        return None

    handle = pick_first_key(row, INSTAGRAM_KEYS)
    handle = clean_instagram_handle(handle) if handle else ""

    return Artist(
        id=artist_id(name, handle),
        name=name,
        instagram_handle=handle,
        instagram_url=f"https://instagram.com/{handle}" if handle else "",
        profile_image_url=find_profile_image(row),
    )


def normalize_artists(rows: list[dict[str, str]]) -> list[Artist]:
    """Normalize all rows, dropping the ones without a name."""
    artists = []
    for row in rows:
        artist = normalize_artist(row)
        if artist is not None:
            artists.append(artist)
    return artists
