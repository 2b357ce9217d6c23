from __future__ import annotations

from typing import Literal

from pydantic import Field

from data_designer.config.column_configs import SingleColumnConfig


class CognitiveFingerprintColumnConfig(SingleColumnConfig):
    """Score text columns for cognitive sophistication using structural markers.

    Computes six linguistic markers per row, aggregates them, and calibrates the
    result against named tiers (blueprint-grade down to random-noise). No LLM calls.

    Attributes:
        target_columns: Columns whose text content will be concatenated and scored.
        min_score: Minimum calibrated score (0-100) for ``is_valid=True``. Defaults to 60
            (the floor of the surface-polish tier).
        include_markers: Include the six per-marker scores and statistics in output.
        include_explanation: Include the natural-language explanation in output.
    """

    target_columns: list[str]
    min_score: int = Field(default=60, ge=0, le=100, description="Minimum calibrated score for is_valid=True")
    include_markers: bool = Field(default=False, description="Include per-marker scores and statistics in output")
    include_explanation: bool = Field(default=True, description="Include the explanation string in output")
    column_type: Literal["cognitive-fingerprint"] = "cognitive-fingerprint"

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001f9e0"

    @property
    def required_columns(self) -> list[str]:
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []
