"""
manifest.json model.

Two shapes are written, both read-only for the frontend:
    {"files": [...]}   - flyers (lineup page)
    {"images": [...]}  - gallery and venue sections
"""

import json
from dataclasses import dataclass, field
from pathlib import Path

from ..core.files import write_json_atomic
from .errors import ManifestWriteError


MANIFEST_KINDS = ("files", "images")


@dataclass
class Manifest:
    """An ordered list of media filenames for one asset folder."""
    kind: str = "files"
    entries: list[str] = field(default_factory=list)

    def __post_init__(self):
        if self.kind not in MANIFEST_KINDS:
            raise ValueError(f"Unknown manifest kind: {self.kind!r} (expected one of {MANIFEST_KINDS})")

    def __len__(self) -> int:
        return len(self.entries)

    def to_dict(self) -> dict:
        return {self.kind: list(self.entries)}

    @classmethod
    def from_dict(cls, data: dict, kind: str = "files") -> "Manifest":
        entries = data.get(kind, [])
        if not isinstance(entries, list):
            entries = []
        return cls(kind=kind, entries=[e for e in entries if isinstance(e, str)])

    @classmethod
    def load(cls, path: Path, kind: str = "files") -> "Manifest":
        """Load a manifest from file. Missing or corrupt files give an empty manifest."""
        if path.exists():
            try:
                with open(path, encoding="utf-8") as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    return cls.from_dict(data, kind)
            except (json.JSONDecodeError, IOError):
                pass
        return cls(kind=kind)

    def save(self, path: Path):
        """
        Atomically replace the manifest at path.

        Raises:
            ManifestWriteError: if the write fails (the old file is kept)
        """
        try:
            write_json_atomic(path, self.to_dict())
        except OSError as e:
            raise ManifestWriteError(f"Could not write {path}: {e}") from e
