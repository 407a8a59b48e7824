"""
Centralized path management for FreakFest media.

Directory structure (relative to the site root):
    path/to/site/
        .festmedia/             - Local data written by the tools
            logs/               - Session logs from manifest_gen.py
        client/public/assets/   - Dev assets (served by the dev server)
        dist/public/assets/     - Production build assets (preferred if present)
            flyers/             - Flyer images + manifest.json ({"files": [...]})
            gallery/freakfest/  - Gallery images + manifest.json ({"images": [...]})
            venue/              - Venue images + manifest.json ({"images": [...]})
            flyers.json         - Optional canonical flyer slot configuration
"""

import os
from datetime import datetime
from pathlib import Path


# Directory name for local data (hidden on Unix)
DATA_DIR_NAME = ".festmedia"

# Asset roots, relative to the site root, in lookup order
PROD_ASSETS_DIR = Path("dist") / "public" / "assets"
DEV_ASSETS_DIR = Path("client") / "public" / "assets"

# Asset categories, relative to the assets root
FLYERS_SUBDIR = Path("flyers")
GALLERY_SUBDIR = Path("gallery") / "freakfest"
VENUE_SUBDIR = Path("venue")

MANIFEST_FILENAME = "manifest.json"
SLOTS_FILENAME = "flyers.json"


def get_app_dir() -> Path:
    """
    Get the site root directory.

    Uses FESTMEDIA_ROOT when set (deployments run the script from elsewhere),
    otherwise the repository root (parent of festmedia/core/).
    """
    root = os.environ.get("FESTMEDIA_ROOT")
    if root:
        return Path(root)
    return Path(__file__).parent.parent.parent


def get_data_dir() -> Path:
    """
    Get the .festmedia/ data directory, creating it if needed.
    """
    data_dir = get_app_dir() / DATA_DIR_NAME
    data_dir.mkdir(exist_ok=True)
    return data_dir


def get_log_path() -> Path:
    """Get a fresh timestamped session log path under .festmedia/logs/."""
    log_dir = get_data_dir() / "logs"
    log_dir.mkdir(exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return log_dir / f"manifest_gen_{timestamp}.log"


def get_assets_root() -> Path:
    """
    Get the public assets root.

    MEDIA_ASSETS_ROOT wins when set. Otherwise the production build directory
    is used if it exists, falling back to the dev directory.
    """
    override = os.environ.get("MEDIA_ASSETS_ROOT")
    if override:
        return Path(override)
    app_dir = get_app_dir()
    prod = app_dir / PROD_ASSETS_DIR
    if prod.is_dir():
        return prod
    return app_dir / DEV_ASSETS_DIR


def get_flyers_dir(assets_root: Path = None) -> Path:
    """Get the flyer images directory."""
    return (assets_root or get_assets_root()) / FLYERS_SUBDIR


def get_gallery_dir(assets_root: Path = None) -> Path:
    """Get the gallery images directory."""
    return (assets_root or get_assets_root()) / GALLERY_SUBDIR


def get_venue_dir(assets_root: Path = None) -> Path:
    """Get the venue images directory."""
    return (assets_root or get_assets_root()) / VENUE_SUBDIR


def get_slots_config_path(assets_root: Path = None) -> Path:
    """Get path to the optional flyer slot configuration."""
    return (assets_root or get_assets_root()) / SLOTS_FILENAME
