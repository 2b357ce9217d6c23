# Cognitive fingerprint scoring: six structural markers, weighted
# aggregation, and calibration against named reference tiers.
#
# Purely algorithmic; no model calls and no I/O. Every entry point is a
# total function over strings and returns scores clamped to [0, 100].

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Mapping

from data_designer_cognitive_fingerprint.calibration import Tier, calibrate
from data_designer_cognitive_fingerprint.markers import MarkerSet, assess_markers, clamp_score, round_half_up
from data_designer_cognitive_fingerprint.params import DEFAULT_HYPERPARAMETERS, Hyperparameters
from data_designer_cognitive_fingerprint.report import explain
from data_designer_cognitive_fingerprint.text import Document

logger = logging.getLogger(__name__)

_EMPTY_EXPLANATION = "No analyzable sentences."

# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScoringResult:
    overall_score: int
    aggregate_score: int
    markers: MarkerSet
    variance: float
    tier: Tier
    level: str
    pattern: str | None
    explanation: str

    def to_payload(self) -> dict[str, object]:
        return {
            "overall_score": self.overall_score,
            "aggregate_score": self.aggregate_score,
            "markers": self.markers.to_payload(),
            "variance": self.variance,
            "tier": self.tier,
            "level": self.level,
            "pattern": self.pattern,
            "explanation": self.explanation,
        }


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------


def marker_weights(hp: Hyperparameters = DEFAULT_HYPERPARAMETERS) -> dict[str, float]:
    return {
        "semantic_compression": hp.weight_semantic_compression,
        "inferential_continuity": hp.weight_inferential_continuity,
        "semantic_topology": hp.weight_semantic_topology,
        "cognitive_asymmetry": hp.weight_cognitive_asymmetry,
        "epistemic_resistance": hp.weight_epistemic_resistance,
        "metacognitive_awareness": hp.weight_metacognitive_awareness,
    }


def aggregate(markers: MarkerSet, hp: Hyperparameters = DEFAULT_HYPERPARAMETERS) -> int:
    """Weighted sum of marker scores with the non-linear tier separation applied.

    Scores above the boost threshold are stretched upward, scores strictly
    between the damp and boost thresholds are pulled down.
    """
    scores = markers.scores()
    weighted = sum(scores[name] * weight for name, weight in marker_weights(hp).items())
    if weighted > hp.boost_threshold:
        weighted = min(hp.score_max, weighted * hp.boost_factor)
    elif hp.damp_threshold < weighted < hp.boost_threshold:
        weighted *= hp.damp_factor
    return clamp_score(weighted, hp)


def marker_variance(markers: MarkerSet) -> float:
    """Population standard deviation of the six marker scores (diagnostic only)."""
    scores = list(markers.scores().values())
    mean = sum(scores) / len(scores)
    spread = math.sqrt(sum((s - mean) ** 2 for s in scores) / len(scores))
    return round_half_up(spread, 1) if math.isfinite(spread) else 0.0


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def score_text(
    text: str,
    hyperparameters: Hyperparameters | None = None,
    overrides: Mapping[str, float] | None = None,
) -> ScoringResult:
    """Score text for cognitive sophistication.

    Args:
        text: The prose to analyze.
        hyperparameters: Optional tuning overrides. Uses sensible defaults if omitted.
        overrides: Optional marker scores that replace the assessed ones before
            aggregation, keyed by marker name (e.g. ``"semantic_compression"``).

    Returns:
        A ScoringResult with the calibrated overall score, the pre-calibration
        aggregate, all six markers, their spread, the tier, and an explanation.

    Raises:
        ValueError: If ``overrides`` names an unknown marker.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    doc = Document.from_text(text)
    markers = assess_markers(doc, hp)

    if doc.is_empty and not overrides:
        return ScoringResult(
            overall_score=hp.score_min, aggregate_score=hp.score_min, markers=markers,
            variance=0.0, tier="random-noise", level="random-noise", pattern=None,
            explanation=_EMPTY_EXPLANATION,
        )

    if overrides:
        markers = markers.with_overrides(overrides)

    aggregate_score = aggregate(markers, hp)
    calibration = calibrate(markers, aggregate_score)
    overall = clamp_score(calibration.score, hp)
    logger.debug(
        f"Scored {len(doc.sentences)} sentences: aggregate {aggregate_score}, "
        f"calibrated {overall} ({calibration.level})"
    )

    return ScoringResult(
        overall_score=overall,
        aggregate_score=aggregate_score,
        markers=markers,
        variance=marker_variance(markers),
        tier=calibration.tier,
        level=calibration.level,
        pattern=calibration.pattern,
        explanation=explain(markers),
    )


def score(text: str) -> ScoringResult:
    """Score ``text`` with default hyperparameters."""
    return score_text(text)
