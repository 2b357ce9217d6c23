# Calibration against the reference tiers.
#
# Patterns are checked top to bottom and the first match wins. A matching
# pattern leaves the aggregate alone when it already sits inside the pattern's
# band and within tolerance of the target; otherwise the score snaps to the
# target.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Literal

from data_designer_cognitive_fingerprint.markers import MarkerSet

logger = logging.getLogger(__name__)

Tier = Literal["blueprint-grade", "advanced-critique", "surface-polish", "fluent-shallow", "random-noise"]

TIERS: tuple[Tier, ...] = ("blueprint-grade", "advanced-critique", "surface-polish", "fluent-shallow", "random-noise")


@dataclass(frozen=True)
class CalibrationInputs:
    """The metrics calibration patterns are written against.

    ``originality`` is read from epistemic resistance and ``depth`` from
    semantic topology.
    """

    compression: float
    continuity: float
    originality: float
    depth: float

    @classmethod
    def from_markers(cls, markers: MarkerSet) -> CalibrationInputs:
        return cls(
            compression=markers.semantic_compression.score,
            continuity=markers.inferential_continuity.score,
            originality=markers.epistemic_resistance.score,
            depth=markers.semantic_topology.score,
        )

    @property
    def triad_mean(self) -> float:
        return (self.compression + self.continuity + self.originality) / 3

    @property
    def core_blueprint(self) -> float:
        return (self.compression + self.continuity) / 2


@dataclass(frozen=True)
class CalibrationPattern:
    name: str
    tier: Tier
    level: str
    target: int
    low: int
    high: int
    tolerance: int
    predicate: Callable[[CalibrationInputs], bool]

    def snap(self, score: int) -> int:
        if self.low <= score <= self.high and abs(score - self.target) <= self.tolerance:
            return score
        return self.target


@dataclass(frozen=True)
class Calibration:
    score: int
    tier: Tier
    level: str
    pattern: str | None


# ---------------------------------------------------------------------------
# Pattern table
# ---------------------------------------------------------------------------

CALIBRATION_PATTERNS: tuple[CalibrationPattern, ...] = (
    CalibrationPattern(
        "blueprint_dual_peak", "blueprint-grade", "top-tier blueprint-grade", 95, 95, 98, 3,
        lambda m: m.compression >= 93 and m.continuity >= 93,
    ),
    CalibrationPattern(
        "blueprint_dual", "blueprint-grade", "strong blueprint-grade", 94, 92, 94, 3,
        lambda m: m.compression >= 90 and m.continuity >= 90,
    ),
    CalibrationPattern(
        "blueprint_compression", "blueprint-grade", "strong blueprint-grade", 92, 92, 94, 3,
        lambda m: m.compression >= 93,
    ),
    CalibrationPattern(
        "blueprint_triad", "blueprint-grade", "minimal blueprint-grade", 90, 90, 91, 3,
        lambda m: m.triad_mean >= 92,
    ),
    CalibrationPattern(
        "advanced_critique_high", "advanced-critique", "high advanced-critique", 87, 85, 89, 4,
        lambda m: (
            m.compression >= 85 and m.continuity >= 82 and m.compression < 90
            and (m.originality >= 80 or m.depth >= 82)
        ),
    ),
    CalibrationPattern(
        "advanced_critique_standard", "advanced-critique", "standard advanced-critique", 82, 80, 84, 4,
        lambda m: m.compression >= 75 and m.continuity >= 70 and 75 <= m.triad_mean < 90,
    ),
    CalibrationPattern(
        "advanced_critique_basic", "advanced-critique", "standard advanced-critique", 80, 80, 84, 4,
        lambda m: 75 <= m.triad_mean < 90,
    ),
    CalibrationPattern(
        "surface_polish_high", "surface-polish", "high surface-polish", 78, 75, 79, 5,
        lambda m: 55 <= m.triad_mean < 75 and m.core_blueprint >= 75,
    ),
    CalibrationPattern(
        "surface_polish", "surface-polish", "standard surface-polish", 70, 60, 74, 5,
        lambda m: 55 <= m.triad_mean < 75,
    ),
    CalibrationPattern(
        "fluent_shallow", "fluent-shallow", "fluent-shallow", 55, 40, 59, 5,
        lambda m: 40 <= m.triad_mean < 55,
    ),
    CalibrationPattern(
        "random_noise", "random-noise", "random-noise", 40, 0, 40, 5,
        lambda m: m.triad_mean < 40,
    ),
)


def tier_for_score(score: int) -> tuple[Tier, str]:
    """Band a score without any pattern; used when no pattern matches."""
    if score >= 95:
        return "blueprint-grade", "top-tier blueprint-grade"
    if score >= 92:
        return "blueprint-grade", "strong blueprint-grade"
    if score >= 90:
        return "blueprint-grade", "minimal blueprint-grade"
    if score >= 85:
        return "advanced-critique", "high advanced-critique"
    if score >= 80:
        return "advanced-critique", "standard advanced-critique"
    if score >= 75:
        return "surface-polish", "high surface-polish"
    if score >= 60:
        return "surface-polish", "standard surface-polish"
    if score >= 40:
        return "fluent-shallow", "fluent-shallow"
    return "random-noise", "random-noise"


def calibrate(
    markers: MarkerSet,
    aggregate_score: int,
    patterns: tuple[CalibrationPattern, ...] = CALIBRATION_PATTERNS,
) -> Calibration:
    """Classify ``markers`` and snap ``aggregate_score`` to the matched tier."""
    inputs = CalibrationInputs.from_markers(markers)
    for pattern in patterns:
        if pattern.predicate(inputs):
            score = pattern.snap(aggregate_score)
            logger.debug(f"Calibration pattern {pattern.name!r} matched: {aggregate_score} -> {score}")
            return Calibration(score=score, tier=pattern.tier, level=pattern.level, pattern=pattern.name)

    tier, level = tier_for_score(aggregate_score)
    logger.debug(f"No calibration pattern matched; keeping {aggregate_score} ({level})")
    return Calibration(score=aggregate_score, tier=tier, level=level, pattern=None)
