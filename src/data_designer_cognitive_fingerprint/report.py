from __future__ import annotations

import operator
from typing import Callable

from data_designer_cognitive_fingerprint.markers import MarkerSet

_DEFAULT_EXPLANATION = "Text shows standard structural markers without exceptional cognitive features."

# (marker, comparison, threshold, template); templates receive the marker score and stats.
_TEMPLATES: tuple[tuple[str, Callable[[float, float], bool], float, str], ...] = (
    ("semantic_compression", operator.gt, 80,
     "Exceptional semantic compression ({score}/100) with high-impact sentences creating multiple inferential consequences."),
    ("semantic_compression", operator.lt, 40,
     "Low semantic compression ({score}/100) suggesting surface-level or redundant content."),
    ("inferential_continuity", operator.gt, 75,
     "Strong inferential continuity ({score}/100) with coherence index of {coherence_index:.2f}."),
    ("inferential_continuity", operator.lt, 30,
     "Weak inferential continuity ({score}/100) indicating isolated or disconnected statements."),
    ("cognitive_asymmetry", operator.gt, 70,
     "Notable cognitive asymmetry ({score}/100) indicating uneven conceptual difficulty distribution."),
    ("epistemic_resistance", operator.gt, 60,
     "Significant epistemic resistance ({score}/100) avoiding tautological statements and creating cognitive friction."),
    ("metacognitive_awareness", operator.gt, 60,
     "Notable metacognitive awareness ({score}/100) with reframing and recursive self-reflection."),
)


def explain(markers: MarkerSet) -> str:
    """Summarize the notable markers in a few fixed sentences."""
    insights = []
    for name, compare, threshold, template in _TEMPLATES:
        result = getattr(markers, name)
        if compare(result.score, threshold):
            stats = {"coherence_index": 0.0, **result.stats}
            insights.append(template.format(score=result.score, **stats))
    return " ".join(insights) if insights else _DEFAULT_EXPLANATION
