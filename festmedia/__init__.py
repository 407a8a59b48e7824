"""
FreakFest media - manifest generation and lineup feed for the festival site.

This package builds the JSON manifests the frontend reads for its flyer,
gallery and venue sections, and turns the public lineup spreadsheet into
artist records.

Import from submodules directly:
    from festmedia.manifest import resolve, build_manifest
    from festmedia.config import FlyerSlotsConfig, MediaSettings
    from festmedia.artists import ArtistCache, SheetClient
"""


def _get_version():
    """Read version from VERSION file."""
    from pathlib import Path
    version_file = Path(__file__).parent.parent / "VERSION"
    if version_file.exists():
        return version_file.read_text().strip()
    return "0.0.0"


__version__ = _get_version()
