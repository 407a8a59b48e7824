"""
Canonical flyer slot configuration for FreakFest media.

Manages flyers.json - the ordered list of flyers the lineup page expects,
one per day/stage plus the full festival flyer.
"""

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..core.files import write_json_atomic


@dataclass
class CanonicalSlot:
    """One expected flyer: its display filename and a matcher for variant spellings."""
    name: str
    pattern: str = ""  # Case-insensitive regex; empty = exact name only

    def __post_init__(self):
        self._regex = None
        if self.pattern:
            try:
                self._regex = re.compile(self.pattern, re.IGNORECASE)
            except (re.error, TypeError) as e:
                print(f"Warning: invalid pattern for flyer slot '{self.name}': {e}")

    def matches(self, filename: str) -> bool:
        """Check if a filename is a variant spelling of this slot."""
        if filename == self.name:
            return True
        if self._regex is None:
            return False
        return self._regex.search(filename) is not None

    def to_dict(self) -> dict:
        d = {"name": self.name}
        if self.pattern:
            d["pattern"] = self.pattern
        return d

    @classmethod
    def from_dict(cls, data: dict) -> "CanonicalSlot":
        name = data.get("name", "")
        pattern = data.get("pattern") or ""
        if not isinstance(name, str) or not isinstance(pattern, str):
            raise TypeError(f"flyer slot name and pattern must be strings: {data!r}")
        return cls(name=name, pattern=pattern)


def _slot(ordinal: int, date: Optional[str], stage: str) -> CanonicalSlot:
    """Build a "<n> - <MM-DD> - <Stage>.png" slot with its variant matcher."""
    stage_re = r"\s*".join(re.escape(word) for word in stage.split())
    if date is None:
        return CanonicalSlot(
            name=f"{ordinal} - {stage}.png",
            pattern=rf"^0*{ordinal}\s*-\s*{stage_re}\.png$",
        )
    month, day = date.split("-")
    return CanonicalSlot(
        name=f"{ordinal} - {date} - {stage}.png",
        pattern=rf"^0*{ordinal}\s*-\s*{month}\s*[:._\-]\s*{day}\s*-\s*{stage_re}\.png$",
    )


# FreakFest lineup: the order the lineup page shows flyers in
DEFAULT_FLYER_SLOTS = [
    _slot(1, "10-16", "Main Stage"),
    _slot(2, "10-17", "Main Stage"),
    _slot(3, "10-17", "Club Stage"),
    _slot(4, "10-17", "Playhouse Stage"),
    _slot(5, "10-18", "Main Stage"),
    _slot(6, "10-18", "Club Stage"),
    _slot(7, "10-19", "Main Stage"),
    _slot(8, None, "Full Festival Flyer"),
]


class FlyerSlotsConfig:
    """
    Manages flyers.json - the ordered canonical flyer slots.

    Missing file: the bundled FreakFest slots are used.
    "slots": [] : no canonical list, flyers are sorted by name like a gallery.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = path
        self.slots: list[CanonicalSlot] = list(DEFAULT_FLYER_SLOTS)

    @classmethod
    def load(cls, path: Path) -> "FlyerSlotsConfig":
        """Load slot configuration from file, keeping the defaults on any error."""
        config = cls(path)

        if path.exists():
            try:
                with open(path, encoding="utf-8") as f:
                    data = json.load(f)

                slots_data = data.get("slots", [])
                if not isinstance(slots_data, list):
                    raise TypeError(f'"slots" must be a list, got {type(slots_data).__name__}')
                config.slots = [
                    CanonicalSlot.from_dict(slot_data)
                    for slot_data in slots_data
                    if slot_data.get("name")
                ]
            except (json.JSONDecodeError, IOError, AttributeError, TypeError) as e:
                print(f"Warning: Could not load {path.name}: {e}")
                config.slots = list(DEFAULT_FLYER_SLOTS)

        return config

    def save(self, path: Optional[Path] = None):
        """Save slot configuration to file (atomic)."""
        path = path or self.path
        if path is None:
            raise ValueError("No path to save flyer slots to")
        write_json_atomic(path, {"slots": [s.to_dict() for s in self.slots]})
        self.path = path

    @property
    def names(self) -> list[str]:
        """Canonical names in display order."""
        return [s.name for s in self.slots]
