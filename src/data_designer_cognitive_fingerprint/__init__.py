# SPDX-License-Identifier: Apache-2.0
"""Cognitive fingerprint plugin for NeMo Data Designer.

Adds a ``cognitive-fingerprint`` column type that scores prose for apparent
cognitive sophistication from six structural markers (semantic compression,
inferential continuity, semantic topology, cognitive asymmetry, epistemic
resistance, metacognitive awareness), then calibrates the score against named
tiers. No LLM calls, no API dependencies.

Usage::

    from data_designer_cognitive_fingerprint import CognitiveFingerprintColumnConfig

    builder.add_column(CognitiveFingerprintColumnConfig(
        name="fingerprint",
        target_columns=["essay"],
        min_score=80,
    ))

The engine can also be used directly::

    from data_designer_cognitive_fingerprint import score

    result = score(text)
    result.overall_score, result.tier
"""

from data_designer_cognitive_fingerprint.config import CognitiveFingerprintColumnConfig
from data_designer_cognitive_fingerprint.core import Hyperparameters, ScoringResult, score, score_text

__all__ = ["CognitiveFingerprintColumnConfig", "score", "score_text", "ScoringResult", "Hyperparameters"]
