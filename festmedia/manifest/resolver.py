"""
Flyer/gallery manifest resolution.

Turns a raw directory listing into the ordered list the frontend shows:

    filter -> normalize -> dedupe -> canonical slots (or name sort)

Everything here is pure string processing; reading the directory and writing
manifest.json live in builder.py.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from ..config.slots import CanonicalSlot
from ..core.formatting import sort_by_name
from ..core.logging import log
from .normalize import is_manifest_candidate, normalize_flyer_name, numbered_copy_base


@dataclass
class ResolveResult:
    """Outcome of resolve()."""
    files: list[str] = field(default_factory=list)
    # Canonical name -> on-disk filename, for slots filled through a variant spelling
    aliases: dict[str, str] = field(default_factory=dict)
    # Filenames dropped as near-duplicates of a kept file
    duplicates: list[str] = field(default_factory=list)
    # Deduplicated filenames that fit no canonical slot (strict flyer mode only)
    unmatched: list[str] = field(default_factory=list)
    # Filenames rejected by the extension / resource-fork filter
    rejected: list[str] = field(default_factory=list)


def filter_candidates(raw_files: Iterable[str]) -> tuple[list[str], list[str]]:
    """Split raw filenames into (image candidates, rejected)."""
    kept, rejected = [], []
    for name in raw_files:
        if is_manifest_candidate(name):
            kept.append(name)
        else:
            rejected.append(name)
    return kept, rejected


def dedupe_by_key(filenames: Iterable[str]) -> tuple[list[str], list[str]]:
    """
    Keep one filename per normalized key.

    The shortest filename wins; equal lengths go to the first one in sorted
    order. Shorter names are the clean export names, longer ones carry
    "copy"-style suffixes.

    A " (n)" counter only marks a duplicate when the name without it is in
    the listing too: "IMG_0001 (1).jpg" folds into "IMG_0001.jpg", but
    "FreakFest (1).jpg" and "FreakFest (2).jpg" alone are a series and stay.

    Returns:
        (kept filenames in sorted order, dropped filenames)
    """
    names = sorted(set(filenames))
    keys = {name: normalize_flyer_name(name) for name in names}
    present = set(keys.values())

    chosen: dict[str, str] = {}
    dropped = []
    for name in names:
        key = keys[name]
        base = numbered_copy_base(name)
        if base is not None and normalize_flyer_name(base) in present:
            key = normalize_flyer_name(base)
        current = chosen.get(key)
        if current is None:
            chosen[key] = name
        elif len(name) < len(current):
            dropped.append(current)
            chosen[key] = name
        else:
            dropped.append(name)
    return sorted(chosen.values()), sorted(dropped)


def order_by_slots(
    filenames: Sequence[str],
    slots: Sequence[CanonicalSlot],
) -> tuple[list[str], dict[str, str], list[str]]:
    """
    Order filenames by the canonical slot list.

    Each slot takes its exact filename if present, otherwise the first (by
    name) remaining file matching its variant pattern, reported under the
    canonical name. Slots with no file are left out.

    Returns:
        (canonical names in slot order, aliases, unmatched filenames)
    """
    available = set(filenames)
    # Exact names are claimed up front so a looser pattern can't take them
    taken = {slot.name for slot in slots if slot.name in available}

    ordered: list[str] = []
    aliases: dict[str, str] = {}
    seen_slots = set()

    for slot in slots:
        if slot.name in seen_slots:
            continue
        seen_slots.add(slot.name)

        if slot.name in available:
            ordered.append(slot.name)
            continue

        candidates = [name for name in sorted(available - taken) if slot.matches(name)]
        if not candidates:
            continue
        if len(candidates) > 1:
            log(f"flyer slot '{slot.name}' matches {len(candidates)} files, using '{candidates[0]}'")

        chosen = candidates[0]
        taken.add(chosen)
        ordered.append(slot.name)
        aliases[slot.name] = chosen

    unmatched = sorted(available - taken)
    return ordered, aliases, unmatched


def resolve(
    raw_files: Iterable[str],
    slots: Optional[Sequence[CanonicalSlot]] = None,
) -> ResolveResult:
    """
    Resolve a raw directory listing into manifest entries.

    Args:
        raw_files: Filenames as found in the asset directory
        slots: Canonical flyer slots. None or empty sorts by name instead
               (gallery mode) and keeps every deduplicated file.

    Returns:
        ResolveResult with the final ordered files
    """
    candidates, rejected = filter_candidates(raw_files)
    unique, duplicates = dedupe_by_key(candidates)

    result = ResolveResult(duplicates=duplicates, rejected=sorted(rejected))

    if slots:
        result.files, result.aliases, result.unmatched = order_by_slots(unique, slots)
    else:
        result.files = sort_by_name(unique)

    return result
