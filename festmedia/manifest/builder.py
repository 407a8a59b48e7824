"""
Directory-level manifest builds.

Run once per media refresh: list an asset folder, resolve it, and replace its
manifest.json. Failures are logged and degrade to an empty or unchanged
manifest; nothing here raises into the caller.
"""

import os
import time
from pathlib import Path
from typing import Iterable, Optional, Sequence

from ..config.settings import AssetCategory, CATEGORIES
from ..config.slots import CanonicalSlot, FlyerSlotsConfig
from ..core.files import is_lfs_pointer
from ..core.formatting import format_duration
from ..core.logging import log, debug_log
from ..core.paths import MANIFEST_FILENAME
from .errors import DirectoryUnreadable, ManifestWriteError
from .manifest import Manifest
from .normalize import is_image_file
from .resolver import resolve


def list_image_files(directory: Path) -> list[str]:
    """
    List regular files in an asset directory, skipping git-lfs pointers.

    Returns on-disk names unchanged (the manifest must reference real files).

    Raises:
        DirectoryUnreadable: if the directory is missing or can't be listed
    """
    try:
        with os.scandir(directory) as it:
            entries = list(it)
    except OSError as e:
        raise DirectoryUnreadable(f"Cannot read {directory}: {e.strerror or e}") from e

    names = []
    for entry in entries:
        try:
            if not entry.is_file():
                continue
        except OSError:
            continue
        if is_image_file(entry.name) and is_lfs_pointer(Path(entry.path)):
            debug_log(f"skipping LFS pointer: {entry.name}")
            continue
        names.append(entry.name)
    return names


def apply_aliases(directory: Path, files: list[str], aliases: dict[str, str]) -> list[str]:
    """
    Rename variant-spelled files to their canonical names on disk.

    The manifest lists canonical names, so the files must exist under them.
    If the rename fails, or the canonical name is already taken on disk, the
    manifest falls back to the on-disk variant name.

    Returns:
        files with any unrenamed aliases swapped back to the variant name
    """
    result = list(files)
    for canonical, variant in aliases.items():
        src = directory / variant
        dst = directory / canonical
        if dst.exists():
            # Usually an LFS pointer list_image_files skipped; list the real file
            log(f"'{canonical}' already exists, listing '{variant}' instead")
        else:
            try:
                src.rename(dst)
                log(f"renamed '{variant}' -> '{canonical}'")
                continue
            except OSError as e:
                log(f"could not rename '{variant}': {e}")
        result = [variant if name == canonical else name for name in result]
    return result


def build_manifest(
    directory: Path,
    kind: str = "files",
    slots: Optional[Sequence[CanonicalSlot]] = None,
    rename_aliases: bool = True,
) -> Manifest:
    """
    Rebuild manifest.json for one asset directory.

    Args:
        directory: Asset folder (populated by the archive fetch step)
        kind: "files" for flyers, "images" for gallery-style folders
        slots: Canonical flyer slots, or None to sort by name
        rename_aliases: Rename variant-spelled files to their canonical names

    Returns:
        The manifest that was (or would have been) written. Unreadable
        directories give an empty manifest.
    """
    directory = Path(directory)
    manifest_path = directory / MANIFEST_FILENAME
    label = directory.name or str(directory)

    try:
        raw_files = list_image_files(directory)
    except DirectoryUnreadable as e:
        log(f"{label} manifest: {e}, writing empty manifest")
        raw_files = []

    result = resolve(raw_files, slots)
    files = result.files
    if result.aliases and rename_aliases:
        files = apply_aliases(directory, files, result.aliases)

    if result.duplicates:
        debug_log(f"{label}: dropped {len(result.duplicates)} duplicates: {', '.join(result.duplicates)}")
    if result.unmatched:
        debug_log(f"{label}: {len(result.unmatched)} files fit no flyer slot: {', '.join(result.unmatched)}")

    manifest = Manifest(kind=kind, entries=files)
    try:
        manifest.save(manifest_path)
        log(f"wrote {label} manifest.json with {len(manifest)} {kind}")
    except ManifestWriteError as e:
        log(f"{label} manifest generation skipped: {e}")

    return manifest


def build_all_manifests(
    assets_root: Path,
    slots_config: Optional[FlyerSlotsConfig] = None,
    categories: Optional[Iterable[AssetCategory]] = None,
) -> dict[str, Manifest]:
    """
    Rebuild the manifest of every asset category.

    Categories use separate directories and files, so one failing has no
    effect on the others.

    Returns:
        {category name: manifest}
    """
    slots_config = slots_config or FlyerSlotsConfig()
    manifests = {}

    for category in (categories or CATEGORIES):
        start_time = time.time()
        slots = slots_config.slots if category.canonical else None
        manifests[category.name] = build_manifest(
            Path(assets_root) / category.subdir,
            kind=category.kind,
            slots=slots,
        )
        debug_log(f"{category.name} manifest built in {format_duration(time.time() - start_time)}")

    return manifests
