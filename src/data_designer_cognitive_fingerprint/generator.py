from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from data_designer_cognitive_fingerprint.config import CognitiveFingerprintColumnConfig
from data_designer_cognitive_fingerprint.core import score_text

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


class CognitiveFingerprintColumnGenerator(ColumnGeneratorFullColumn[CognitiveFingerprintColumnConfig]):
    """Column generator that scores text for cognitive sophistication via structural markers."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\U0001f9e0 Scoring column {self.config.name!r} for cognitive fingerprint markers")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   min_score: {self.config.min_score}")

        results = []
        for _, row in data[self.config.target_columns].iterrows():
            text = " ".join(str(v) for v in row.values if v is not None)
            result = score_text(text)
            output: dict = {
                "is_valid": result.overall_score >= self.config.min_score,
                "cognitive_score": result.overall_score,
                "cognitive_tier": result.tier,
                "cognitive_level": result.level,
                "marker_variance": result.variance,
            }
            if self.config.include_explanation:
                output["cognitive_explanation"] = result.explanation
            if self.config.include_markers:
                output["cognitive_markers"] = result.markers.to_payload()
            results.append(output)

        data = data.copy()
        data[self.config.name] = results
        return data
