"""Pytest configuration and shared fixtures."""

import tempfile
from dataclasses import dataclass
from pathlib import Path

import pytest

from festmedia.config.slots import DEFAULT_FLYER_SLOTS
from festmedia.core.files import LFS_POINTER_PREFIX


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "stress: stress tests with large data (skipped in CI)"
    )


@dataclass
class AssetEnv:
    """Isolated public assets tree for builder tests."""
    root: Path

    def make_dir(self, subdir: str) -> Path:
        """Create an asset directory."""
        p = self.root / subdir
        p.mkdir(parents=True, exist_ok=True)
        return p

    def make_files(self, subdir: str, names: list[str], size: int = 64) -> Path:
        """Create fake image files (binary junk, not LFS pointers)."""
        folder = self.make_dir(subdir)
        for name in names:
            (folder / name).write_bytes(b"\x89PNG" + b"\x00" * size)
        return folder

    def make_lfs_pointer(self, subdir: str, name: str) -> Path:
        """Create a git-lfs pointer file where an image should be."""
        folder = self.make_dir(subdir)
        path = folder / name
        path.write_bytes(
            LFS_POINTER_PREFIX
            + b"\noid sha256:4d7a214614ab2935c943f9e0ff69d22eadbb8f32b1258daaa5e2ca24d17e2393\nsize 12345\n"
        )
        return path


@pytest.fixture
def temp_dir():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def asset_env(temp_dir):
    """Fresh assets root with no category folders yet."""
    return AssetEnv(root=temp_dir / "assets")


@pytest.fixture
def flyer_slots():
    return list(DEFAULT_FLYER_SLOTS)
