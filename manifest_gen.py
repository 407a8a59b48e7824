#!/usr/bin/env python3
"""
FreakFest media - Manifest Generator

Rebuilds manifest.json for the flyer, gallery and venue asset folders.
Run after each media refresh (the server runs it at startup).
"""

import os
import sys
import time
import argparse
from pathlib import Path

import requests

# Load .env file if it exists
env_path = Path(__file__).parent / ".env"
if env_path.exists():
    with open(env_path) as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                key, value = line.split("=", 1)
                os.environ.setdefault(key.strip(), value.strip())

from festmedia import __version__
from festmedia.artists import ArtistCache, SheetClient, SheetClientConfig
from festmedia.config import CATEGORIES, FlyerSlotsConfig, MediaSettings, get_category
from festmedia.core import TeeOutput, debug_log, format_duration, get_log_path, get_slots_config_path
from festmedia.manifest import build_all_manifests


def generate(settings: MediaSettings, slots_path: Path = None, category_names: list[str] = None) -> int:
    """
    Rebuild manifests for the selected categories.

    Returns:
        Number of entries written across all manifests
    """
    print("=" * 60)
    print("FreakFest media - Manifest Generator")
    print("=" * 60)
    print(f"  Assets root: {settings.assets_root}")

    slots_path = slots_path or get_slots_config_path(settings.assets_root)
    slots_config = FlyerSlotsConfig.load(slots_path)
    if slots_config.slots:
        print(f"  Flyer slots: {len(slots_config.slots)}")
        debug_log(f"flyer slots from {slots_path.name}: {', '.join(slots_config.names)}")
    else:
        print("  Flyer slots: none (flyers sorted by name)")
    print()

    categories = CATEGORIES
    if category_names:
        categories = [get_category(name) for name in category_names]

    start_time = time.time()
    manifests = build_all_manifests(settings.assets_root, slots_config, categories)

    print()
    print("=" * 60)
    print("Summary")
    print("=" * 60)
    for name, manifest in manifests.items():
        print(f"  {name}: {len(manifest)} {manifest.kind}")
    print(f"  Done in {format_duration(time.time() - start_time)}")
    print()

    return sum(len(m) for m in manifests.values())


def fetch_artists(settings: MediaSettings) -> int:
    """Fetch the lineup sheet once and report what came back."""
    client = SheetClient(SheetClientConfig(
        csv_url=settings.sheet_csv_url,
        timeout=settings.artists_timeout,
    ))
    cache = ArtistCache(client.fetch_artists, ttl=settings.artists_ttl)
    try:
        artists, _ = cache.get()
    except (requests.exceptions.RequestException, RuntimeError) as e:
        print(f"Could not fetch artists: {e}")
        return 1

    print(f"{len(artists)} artists in lineup sheet")
    for artist in artists:
        handle = f" (@{artist.instagram_handle})" if artist.instagram_handle else ""
        print(f"  {artist.name}{handle}")
    return 0


def write_slots(settings: MediaSettings, slots_path: Path = None) -> int:
    """Write the active flyer slot list to flyers.json so it can be edited."""
    slots_path = slots_path or get_slots_config_path(settings.assets_root)
    slots_config = FlyerSlotsConfig.load(slots_path)
    try:
        slots_config.save(slots_path)
    except OSError as e:
        print(f"Could not write {slots_path}: {e}")
        return 1

    print(f"Wrote {len(slots_config.slots)} flyer slots to {slots_path}")
    for name in slots_config.names:
        print(f"  {name}")
    return 0


def main():
    parser = argparse.ArgumentParser(
        description="Generate media manifests for the FreakFest site",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python manifest_gen.py                      # Rebuild all manifests
  python manifest_gen.py --category flyers    # Only the flyers manifest
  python manifest_gen.py --slots flyers.json  # Custom flyer slot list
  python manifest_gen.py --artists            # Check the lineup sheet
  python manifest_gen.py --write-slots        # Write flyers.json for editing
"""
    )
    parser.add_argument("--assets-root", type=Path,
                        help="Public assets directory (default: MEDIA_ASSETS_ROOT or auto-detect)")
    parser.add_argument("--slots", type=Path,
                        help="Flyer slot config (default: <assets-root>/flyers.json)")
    parser.add_argument("--category", action="append",
                        choices=[c.name for c in CATEGORIES],
                        help="Only rebuild this category (repeatable)")
    parser.add_argument("--artists", action="store_true",
                        help="Fetch the lineup sheet instead of building manifests")
    parser.add_argument("--write-slots", action="store_true",
                        help="Write the active flyer slots to flyers.json and exit")
    parser.add_argument("--no-log", action="store_true",
                        help="Don't write a session log file")
    args = parser.parse_args()

    settings = MediaSettings.from_env()
    if args.assets_root:
        settings.assets_root = args.assets_root

    tee = None
    if not args.no_log:
        tee = TeeOutput(get_log_path(), version=__version__)
        sys.stdout = tee

    try:
        if args.artists:
            return fetch_artists(settings)
        if args.write_slots:
            return write_slots(settings, args.slots)
        generate(settings, args.slots, args.category)
        return 0
    finally:
        if tee:
            sys.stdout = tee.terminal
            tee.close()


if __name__ == "__main__":
    sys.exit(main())
