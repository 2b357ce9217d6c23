import pytest

from data_designer_cognitive_fingerprint.calibration import CALIBRATION_PATTERNS, TIERS, calibrate, tier_for_score
from data_designer_cognitive_fingerprint.markers import MarkerSet


def _markers(compression=0, continuity=0, originality=0, depth=0):
    return MarkerSet.from_scores({
        "semantic_compression": compression,
        "inferential_continuity": continuity,
        "epistemic_resistance": originality,
        "semantic_topology": depth,
    })


class TestPatternTable:
    def test_patterns_cover_every_tier(self):
        assert {p.tier for p in CALIBRATION_PATTERNS} == set(TIERS)

    def test_blueprint_patterns_come_first(self):
        tiers = [p.tier for p in CALIBRATION_PATTERNS]
        assert tiers[:4] == ["blueprint-grade"] * 4
        assert tiers[-1] == "random-noise"

    def test_targets_descend(self):
        targets = [p.target for p in CALIBRATION_PATTERNS]
        assert targets == sorted(targets, reverse=True)

    def test_pattern_names_are_unique(self):
        names = [p.name for p in CALIBRATION_PATTERNS]
        assert len(names) == len(set(names))


class TestCalibrate:
    @pytest.mark.parametrize(
        "markers, pattern, target",
        [
            (_markers(95, 95), "blueprint_dual_peak", 95),
            (_markers(95, 92), "blueprint_dual", 94),
            (_markers(93, 10), "blueprint_compression", 92),
            (_markers(89, 92, 96), "blueprint_triad", 90),
            (_markers(87, 85, 80), "advanced_critique_high", 87),
            (_markers(87, 85, 10, 82), "advanced_critique_high", 87),
            (_markers(80, 75, 75), "advanced_critique_standard", 82),
            (_markers(60, 90, 80), "advanced_critique_basic", 80),
            (_markers(80, 76, 20), "surface_polish_high", 78),
            (_markers(60, 60, 60), "surface_polish", 70),
            (_markers(45, 45, 45), "fluent_shallow", 55),
            (_markers(10, 10, 10), "random_noise", 40),
        ],
    )
    def test_first_matching_pattern_sets_target(self, markers, pattern, target):
        result = calibrate(markers, aggregate_score=0 if target > 40 else 100)
        assert result.pattern == pattern
        assert result.score == target

    def test_blueprint_beats_surface_polish(self):
        # triad mean is 71.7, which alone would be surface polish
        result = calibrate(_markers(95, 60, 60), aggregate_score=65)
        assert result.tier == "blueprint-grade"
        assert result.score == 92

    def test_score_within_tolerance_is_kept(self):
        assert calibrate(_markers(95, 95), aggregate_score=97).score == 97
        assert calibrate(_markers(60, 60, 60), aggregate_score=72).score == 72
        assert calibrate(_markers(10, 10, 10), aggregate_score=37).score == 37

    def test_score_outside_band_snaps_even_when_close(self):
        # 89 is within tolerance of 90 but below the minimal blueprint band
        assert calibrate(_markers(89, 92, 96), aggregate_score=89).score == 90
        assert calibrate(_markers(95, 92), aggregate_score=96).score == 94

    def test_score_far_from_target_snaps(self):
        assert calibrate(_markers(60, 60, 60), aggregate_score=40).score == 70
        assert calibrate(_markers(45, 45, 45), aggregate_score=80).score == 55

    def test_levels(self):
        assert calibrate(_markers(95, 95), 50).level == "top-tier blueprint-grade"
        assert calibrate(_markers(87, 85, 80), 50).level == "high advanced-critique"
        assert calibrate(_markers(80, 76, 20), 50).level == "high surface-polish"

    def test_unmatched_markers_keep_aggregate(self):
        result = calibrate(_markers(80, 95, 98), aggregate_score=86)
        assert result.pattern is None
        assert result.score == 86
        assert result.tier == "advanced-critique"
        assert result.level == "high advanced-critique"

    def test_cognitive_asymmetry_is_ignored(self):
        base = _markers(60, 60, 60)
        spiked = base.with_overrides({"cognitive_asymmetry": 100})
        assert calibrate(base, 50) == calibrate(spiked, 50)


class TestTierForScore:
    @pytest.mark.parametrize(
        "score, tier, level",
        [
            (98, "blueprint-grade", "top-tier blueprint-grade"),
            (92, "blueprint-grade", "strong blueprint-grade"),
            (90, "blueprint-grade", "minimal blueprint-grade"),
            (89, "advanced-critique", "high advanced-critique"),
            (80, "advanced-critique", "standard advanced-critique"),
            (79, "surface-polish", "high surface-polish"),
            (60, "surface-polish", "standard surface-polish"),
            (59, "fluent-shallow", "fluent-shallow"),
            (39, "random-noise", "random-noise"),
            (0, "random-noise", "random-noise"),
        ],
    )
    def test_bands(self, score, tier, level):
        assert tier_for_score(score) == (tier, level)
