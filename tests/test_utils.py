"""
Tests for core utility functions.
"""

import sys
from datetime import datetime

import pytest

from festmedia.core.files import is_lfs_pointer, write_json_atomic, LFS_POINTER_PREFIX
from festmedia.core.formatting import (
    format_duration,
    name_sort_key,
    normalize_name_key,
    sort_by_name,
)
from festmedia.core.logging import TeeOutput, debug_log, format_log_line, log


class TestNameSorting:
    """Tests for case-insensitive, order-independent sorting."""

    def test_case_insensitive(self):
        assert sort_by_name(["b.jpg", "A.jpg", "c.jpg"]) == ["A.jpg", "b.jpg", "c.jpg"]

    def test_case_only_ties_are_stable_regardless_of_input(self):
        assert sort_by_name(["a.jpg", "A.jpg"]) == sort_by_name(["A.jpg", "a.jpg"])

    def test_key_function(self):
        items = [{"n": "b"}, {"n": "A"}]
        assert sort_by_name(items, key=lambda x: x["n"]) == [{"n": "A"}, {"n": "b"}]

    def test_name_key_casefolds(self):
        assert normalize_name_key("STRASSE") == normalize_name_key("straße")
        assert name_sort_key("B")[0] == "b"


class TestFormatting:
    """Tests for duration formatting."""

    def test_format_duration(self):
        assert format_duration(0.25) == "250ms"
        assert format_duration(42) == "42s"
        assert format_duration(125) == "2m 5s"
        assert format_duration(3725) == "1h 2m"


class TestLogging:
    """Tests for console logging helpers."""

    @pytest.mark.parametrize("when,expected", [
        (datetime(2025, 10, 16, 0, 5, 9), "12:05:09 AM [media] wrote manifest"),
        (datetime(2025, 10, 16, 9, 30, 0), "9:30:00 AM [media] wrote manifest"),
        (datetime(2025, 10, 16, 12, 0, 1), "12:00:01 PM [media] wrote manifest"),
        (datetime(2025, 10, 16, 23, 59, 59), "11:59:59 PM [media] wrote manifest"),
    ])
    def test_format_log_line(self, when, expected):
        assert format_log_line("wrote manifest", "media", when) == expected

    def test_log_prints_source(self, capsys):
        log("hello", "artists")
        assert "[artists] hello" in capsys.readouterr().out

    def test_debug_log_silent_without_tee(self, capsys):
        debug_log("hidden")
        assert capsys.readouterr().out == ""

    def test_tee_writes_file_and_filters_noise(self, temp_dir, monkeypatch):
        log_path = temp_dir / "logs" / "session.log"
        tee = TeeOutput(log_path, version="1.0.1")
        monkeypatch.setattr(sys, "stdout", tee)
        try:
            print("=" * 60)
            print("  flyers: 3 files")
            print()
            log("wrote flyers manifest.json")
            debug_log("only in file")
        finally:
            monkeypatch.setattr(sys, "stdout", tee.terminal)
            tee.close()

        lines = log_path.read_text(encoding="utf-8").splitlines()
        assert lines[0].startswith("--- Session started: ")
        assert lines[0].endswith(" v1.0.1 ---")
        assert len(lines) == 4
        assert lines[1].endswith("[stdout] flyers: 3 files")
        assert lines[2].endswith("[media] wrote flyers manifest.json")
        assert "[stdout]" not in lines[2]
        assert lines[3].endswith("[debug] only in file")

    def test_tee_flushes_partial_line_on_close(self, temp_dir):
        log_path = temp_dir / "session.log"
        tee = TeeOutput(log_path)
        tee.write("no newline yet")
        tee.close()
        assert log_path.read_text(encoding="utf-8").splitlines()[-1].endswith("[stdout] no newline yet")


class TestFiles:
    """Tests for file helpers."""

    def test_lfs_pointer_detected(self, temp_dir):
        path = temp_dir / "a.png"
        path.write_bytes(LFS_POINTER_PREFIX + b"\noid sha256:abc\nsize 10\n")
        assert is_lfs_pointer(path)

    def test_large_file_not_a_pointer(self, temp_dir):
        path = temp_dir / "a.png"
        path.write_bytes(LFS_POINTER_PREFIX + b"\x00" * 4096)
        assert not is_lfs_pointer(path)

    def test_missing_file_not_a_pointer(self, temp_dir):
        assert not is_lfs_pointer(temp_dir / "missing.png")

    def test_write_json_atomic_replaces(self, temp_dir):
        path = temp_dir / "data.json"
        path.write_text('{"old": true}')
        write_json_atomic(path, {"files": ["a.png"]})
        assert path.read_text(encoding="utf-8") == '{\n  "files": [\n    "a.png"\n  ]\n}\n'
        assert not (temp_dir / "data.json.tmp").exists()
