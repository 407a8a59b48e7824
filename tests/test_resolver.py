"""
Tests for manifest resolution.

Covers the filter -> dedupe -> canonical slot / name sort pipeline in
festmedia.manifest.resolver, independent of the filesystem.
"""

import random

import pytest

from festmedia.config.slots import CanonicalSlot, DEFAULT_FLYER_SLOTS
from festmedia.manifest.manifest import Manifest
from festmedia.manifest.normalize import normalize_flyer_name
from festmedia.manifest.resolver import (
    dedupe_by_key,
    filter_candidates,
    order_by_slots,
    resolve,
)


FLYER_NAMES = [slot.name for slot in DEFAULT_FLYER_SLOTS]


class TestDocumentedExamples:
    """The reference input/output pairs for flyer manifests."""

    def test_variant_and_resource_fork_removed(self, flyer_slots):
        raw = [
            "1 - 10-16 - Main Stage.png",
            "1 - 10:16 - Main Stage.png",
            "._1 - 10-16 - Main Stage.png",
        ]
        for slots in (flyer_slots, None):
            result = resolve(raw, slots)
            assert Manifest("files", result.files).to_dict() == {"files": ["1 - 10-16 - Main Stage.png"]}

    def test_empty_input(self, flyer_slots):
        assert Manifest("files", resolve([], flyer_slots).files).to_dict() == {"files": []}
        assert Manifest("files", resolve([]).files).to_dict() == {"files": []}

    def test_unrecognized_file_gallery_mode(self):
        """Without slots an unknown name takes its place in name order."""
        result = resolve(["zebra.png", "randomname.png", "Apple.png"])
        assert result.files == ["Apple.png", "randomname.png", "zebra.png"]

    def test_unrecognized_file_strict_flyer_mode(self, flyer_slots):
        result = resolve(["randomname.png", "1 - 10-16 - Main Stage.png"], flyer_slots)
        assert result.files == ["1 - 10-16 - Main Stage.png"]
        assert result.unmatched == ["randomname.png"]

    def test_shorter_duplicate_retained(self):
        result = resolve(["8 - Full Festival Flyer.png", "08 - Full Festival Flyer (copy).png"])
        assert result.files == ["8 - Full Festival Flyer.png"]
        assert result.duplicates == ["08 - Full Festival Flyer (copy).png"]


class TestFilterCandidates:
    """Tests for filter_candidates()."""

    def test_splits_kept_and_rejected(self):
        kept, rejected = filter_candidates(["a.png", "b.txt", "._c.png", "d.AVIF", "manifest.json"])
        assert kept == ["a.png", "d.AVIF"]
        assert sorted(rejected) == ["._c.png", "b.txt", "manifest.json"]


class TestDedupeByKey:
    """Tests for dedupe_by_key()."""

    def test_shortest_wins(self):
        kept, dropped = dedupe_by_key(["Stage (1).png", "Stage.png", "Stage copy.png"])
        assert kept == ["Stage.png"]
        assert dropped == ["Stage (1).png", "Stage copy.png"]

    def test_numbered_copy_folds_into_bare_name(self):
        kept, dropped = dedupe_by_key(["IMG_0001 (1).jpg", "IMG_0001.jpg", "IMG_0002 (1).jpg"])
        assert kept == ["IMG_0001.jpg", "IMG_0002 (1).jpg"]
        assert dropped == ["IMG_0001 (1).jpg"]

    def test_numbered_series_kept_whole(self):
        series = [f"FreakFest ({i}).jpg" for i in range(1, 41)]
        kept, dropped = dedupe_by_key(series)
        assert sorted(kept) == sorted(series)
        assert dropped == []

    def test_equal_length_tie_goes_to_first_sorted(self):
        """'-' sorts before ':' so the hyphenated date wins the tie."""
        kept, _ = dedupe_by_key(["1 - 10:16 - Main Stage.png", "1 - 10-16 - Main Stage.png"])
        assert kept == ["1 - 10-16 - Main Stage.png"]

    def test_tie_independent_of_input_order(self):
        names = ["B - x.png", "b - x.png"]
        assert dedupe_by_key(names) == dedupe_by_key(list(reversed(names)))

    def test_exact_repeats_collapse(self):
        kept, dropped = dedupe_by_key(["a.png", "a.png"])
        assert kept == ["a.png"]
        assert dropped == []

    def test_distinct_names_all_kept(self):
        names = ["crowd.jpg", "stage.jpg", "sunset.jpg"]
        kept, dropped = dedupe_by_key(names)
        assert kept == names
        assert dropped == []


class TestOrderBySlots:
    """Tests for canonical slot ordering."""

    def test_exact_matches_in_slot_order(self, flyer_slots):
        shuffled = list(reversed(FLYER_NAMES))
        ordered, aliases, unmatched = order_by_slots(shuffled, flyer_slots)
        assert ordered == FLYER_NAMES
        assert aliases == {}
        assert unmatched == []

    def test_missing_slots_omitted(self, flyer_slots):
        present = [FLYER_NAMES[0], FLYER_NAMES[7]]
        ordered, _, _ = order_by_slots(present, flyer_slots)
        assert ordered == present

    def test_variant_remapped_to_canonical_name(self, flyer_slots):
        ordered, aliases, unmatched = order_by_slots(
            ["2 - 10:17 - main stage.png", "08 - Full Festival Flyer.png"],
            flyer_slots,
        )
        assert ordered == ["2 - 10-17 - Main Stage.png", "8 - Full Festival Flyer.png"]
        assert aliases == {
            "2 - 10-17 - Main Stage.png": "2 - 10:17 - main stage.png",
            "8 - Full Festival Flyer.png": "08 - Full Festival Flyer.png",
        }
        assert unmatched == []

    def test_ambiguous_variant_takes_first_by_name(self, flyer_slots):
        ordered, aliases, unmatched = order_by_slots(
            ["1 - 10:16 - Main Stage.png", "1 - 10.16 - Main Stage.png"],
            flyer_slots,
        )
        assert ordered == ["1 - 10-16 - Main Stage.png"]
        assert aliases["1 - 10-16 - Main Stage.png"] == "1 - 10.16 - Main Stage.png"
        assert unmatched == ["1 - 10:16 - Main Stage.png"]

    def test_exact_name_not_stolen_by_other_pattern(self):
        """A loose pattern can't claim a file another slot owns exactly."""
        slots = [
            CanonicalSlot("first.png", pattern=r"\.png$"),
            CanonicalSlot("second.png"),
        ]
        ordered, aliases, _ = order_by_slots(["second.png", "other.png"], slots)
        assert ordered == ["first.png", "second.png"]
        assert aliases == {"first.png": "other.png"}

    def test_file_fills_at_most_one_slot(self):
        slots = [
            CanonicalSlot("a.png", pattern=r"\.png$"),
            CanonicalSlot("b.png", pattern=r"\.png$"),
        ]
        ordered, aliases, _ = order_by_slots(["x.png"], slots)
        assert ordered == ["a.png"]
        assert aliases == {"a.png": "x.png"}

    def test_duplicate_slot_names_listed_once(self):
        slots = [CanonicalSlot("a.png"), CanonicalSlot("a.png")]
        ordered, _, _ = order_by_slots(["a.png"], slots)
        assert ordered == ["a.png"]

    def test_invalid_pattern_falls_back_to_exact(self, capsys):
        slot = CanonicalSlot("a.png", pattern="(unclosed")
        assert "invalid pattern" in capsys.readouterr().out
        ordered, _, _ = order_by_slots(["a.png", "A.png"], [slot])
        assert ordered == ["a.png"]

    def test_empty_slot_list_means_name_sort(self):
        result = resolve(["b.png", "A.png"], [])
        assert result.files == ["A.png", "b.png"]


class TestResolveProperties:
    """Invariants that hold for any input."""

    SAMPLE = FLYER_NAMES + [
        "1 - 10:16 - Main Stage.png",
        "01 - 10-16 - Main Stage (1).png",
        "._3 - 10-17 - Club Stage.png",
        "3 - 10.17 - club stage.PNG",
        "8 - Full Festival Flyer copy.png",
        "IMG_0001.jpg",
        "IMG_0001 (1).jpg",
        "crowd.webp",
        "notes.txt",
        "._crowd.webp",
    ]

    @pytest.mark.parametrize("use_slots", [True, False])
    def test_deterministic_across_input_order(self, flyer_slots, use_slots):
        slots = flyer_slots if use_slots else None
        expected = resolve(self.SAMPLE, slots).files
        rng = random.Random(1234)
        for _ in range(20):
            shuffled = list(self.SAMPLE)
            rng.shuffle(shuffled)
            assert resolve(shuffled, slots).files == expected

    @pytest.mark.parametrize("use_slots", [True, False])
    def test_idempotent(self, flyer_slots, use_slots):
        slots = flyer_slots if use_slots else None
        once = resolve(self.SAMPLE, slots).files
        twice = resolve(once, slots).files
        assert sorted(twice) == sorted(once)

    @pytest.mark.parametrize("use_slots", [True, False])
    def test_no_shared_keys(self, flyer_slots, use_slots):
        slots = flyer_slots if use_slots else None
        files = resolve(self.SAMPLE, slots).files
        keys = [normalize_flyer_name(f) for f in files]
        assert len(keys) == len(set(keys))

    @pytest.mark.parametrize("use_slots", [True, False])
    def test_resource_forks_never_emitted(self, flyer_slots, use_slots):
        slots = flyer_slots if use_slots else None
        files = resolve(self.SAMPLE, slots).files
        assert not any(f.startswith("._") for f in files)

    def test_gallery_mode_keeps_every_unique_image(self):
        files = resolve(["IMG_0001.jpg", "IMG_0001 (1).jpg", "crowd.webp", "Band.avif"]).files
        assert files == ["Band.avif", "crowd.webp", "IMG_0001.jpg"]

    def test_gallery_mode_keeps_numbered_photo_series(self):
        series = [f"FreakFest ({i}).jpg" for i in range(1, 6)]
        files = resolve(series + ["FreakFest (3) copy.jpg"]).files
        assert files == series

    @pytest.mark.stress
    def test_large_listing_deterministic(self):
        names = [f"IMG_{i:05d}.jpg" for i in range(20000)]
        names += [f"IMG_{i:05d} (1).jpg" for i in range(0, 20000, 7)]
        rng = random.Random(99)
        shuffled = list(names)
        rng.shuffle(shuffled)
        result = resolve(shuffled)
        assert len(result.files) == 20000
        assert result.files == resolve(names).files
