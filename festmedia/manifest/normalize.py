"""
Filename normalization for manifest deduplication.

Archives re-exported over the years carry the same flyer under several
spellings: "1 - 10-16 - Main Stage.png", "1 - 10:16 - main stage.png",
"1 - 10-16 - Main Stage copy.png". They all reduce to one key here.
A " (n)" download counter is resolved separately, see numbered_copy_base().
"""

import os
import re
from typing import Optional

from ..core.formatting import normalize_name_key


IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".webp", ".avif"}

# macOS AppleDouble files ("._name.png") from archives built with tar on a Mac
RESOURCE_FORK_PREFIX = "._"

# "3 - " sort prefix. Capped at 3 digits so a year ("2024 - ") stays part of the name
_ORDINAL_PREFIX_RE = re.compile(r"^\s*\d{1,3}\s*-\s+")

# Export-tool suffixes: "(copy)", " copy", " copy 2"
_EXPORT_SUFFIX_RE = re.compile(r"(?:\s*\(copy\)|\s+copy(?:\s+\d+)?)+$")

# "10:16", "10.16", "10_16", "10 16" -> "10-16". Also rewrites "set 1 2" to
# "set 1-2", which the separator collapse below would produce anyway
_NUMERIC_PAIR_RE = re.compile(r"(?<!\d)(\d{1,2})[:._\- ](\d{1,2})(?!\d)")

# Numbered download copy: "IMG_0001 (1).jpg". Only a duplicate when the bare
# name is also present; "FreakFest (1)".."FreakFest (40)" is a photo series
_COPY_NUMBER_RE = re.compile(r"\s*\(\d+\)$")

_WHITESPACE_RE = re.compile(r"\s+")
_SEPARATOR_RE = re.compile(r"[-_\s]+")


def is_image_file(filename: str) -> bool:
    """Check if a filename has one of the accepted image extensions (any case)."""
    return os.path.splitext(filename)[1].lower() in IMAGE_EXTENSIONS


def is_resource_fork(filename: str) -> bool:
    """Check if a filename is a "._" resource-fork artifact."""
    return filename.startswith(RESOURCE_FORK_PREFIX)


def is_manifest_candidate(filename: str) -> bool:
    """Check if a filename should be considered for a manifest at all."""
    return is_image_file(filename) and not is_resource_fork(filename)


def normalize_flyer_name(filename: str) -> str:
    """
    Reduce a filename to the key used for duplicate detection.

    Steps, in order:
    1. Drop the extension, NFC-normalize, casefold
    2. Drop a leading "<digits> - " ordinal (sort order, not identity)
    3. Drop trailing export suffixes like "(copy)" or " copy"
    4. Rewrite numeric pairs "H:M", "H.M", "H_M", "H M" as "H-M"
    5. Collapse whitespace, then any run of whitespace/underscore/hyphen to "-"
    6. Trim

    The key is only ever compared, never written anywhere.
    """
    stem = os.path.splitext(filename)[0]
    key = normalize_name_key(stem)
    key = _ORDINAL_PREFIX_RE.sub("", key, count=1)
    key = _EXPORT_SUFFIX_RE.sub("", key)
    key = _NUMERIC_PAIR_RE.sub(r"\1-\2", key)
    key = _WHITESPACE_RE.sub(" ", key)
    key = _SEPARATOR_RE.sub("-", key)
    key = key.strip("- ")
    # Names made only of an ordinal or suffix keep their own identity
    return key or normalize_name_key(stem)


def numbered_copy_base(filename: str) -> Optional[str]:
    """
    Name without a trailing " (n)" download counter, or None if it has none.

    "IMG_0001 (1).jpg" -> "IMG_0001.jpg". A bare "(1).jpg" has no base.
    """
    stem, ext = os.path.splitext(filename)
    match = _COPY_NUMBER_RE.search(stem)
    if match is None or not stem[:match.start()].strip():
        return None
    return stem[:match.start()] + ext
