import dataclasses

import pytest

from data_designer_cognitive_fingerprint.markers import MarkerResult, MarkerSet
from data_designer_cognitive_fingerprint.report import explain

# Compression and continuity at 0 would trigger their "low" templates.
NEUTRAL = {"semantic_compression": 50, "inferential_continuity": 50}

DEFAULT_SENTENCE = "Text shows standard structural markers without exceptional cognitive features."


def _markers(**scores):
    return MarkerSet.from_scores({**NEUTRAL, **scores})


class TestExplain:
    def test_neutral_markers_give_default_sentence(self):
        assert explain(_markers()) == DEFAULT_SENTENCE

    @pytest.mark.parametrize(
        "marker, silent, firing, phrase",
        [
            ("semantic_compression", 80, 81, "Exceptional semantic compression (81/100)"),
            ("semantic_compression", 40, 39, "Low semantic compression (39/100)"),
            ("inferential_continuity", 75, 76, "Strong inferential continuity (76/100)"),
            ("inferential_continuity", 30, 29, "Weak inferential continuity (29/100)"),
            ("cognitive_asymmetry", 70, 71, "Notable cognitive asymmetry (71/100)"),
            ("epistemic_resistance", 60, 61, "Significant epistemic resistance (61/100)"),
            ("metacognitive_awareness", 60, 61, "Notable metacognitive awareness (61/100)"),
        ],
    )
    def test_threshold_is_strict(self, marker, silent, firing, phrase):
        assert explain(_markers(**{marker: silent})) == DEFAULT_SENTENCE
        assert phrase in explain(_markers(**{marker: firing}))

    def test_continuity_reports_coherence_index(self):
        markers = dataclasses.replace(
            _markers(), inferential_continuity=MarkerResult(90, {"coherence_index": 0.75})
        )
        assert explain(markers) == "Strong inferential continuity (90/100) with coherence index of 0.75."

    def test_insights_follow_template_order(self):
        explanation = explain(_markers(semantic_compression=90, metacognitive_awareness=90, inferential_continuity=10))
        assert explanation.index("Exceptional semantic compression") < explanation.index("Weak inferential continuity")
        assert explanation.index("Weak inferential continuity") < explanation.index("Notable metacognitive awareness")
        assert DEFAULT_SENTENCE not in explanation

    def test_empty_marker_set_is_low_and_weak(self):
        explanation = explain(MarkerSet.empty())
        assert explanation.startswith("Low semantic compression (0/100)")
        assert "Weak inferential continuity (0/100)" in explanation
