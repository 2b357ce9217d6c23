import pytest
from pydantic import ValidationError

from data_designer_cognitive_fingerprint import CognitiveFingerprintColumnConfig


class TestColumnConfig:
    def test_defaults(self):
        config = CognitiveFingerprintColumnConfig(name="fingerprint", target_columns=["essay"])
        assert config.column_type == "cognitive-fingerprint"
        assert config.min_score == 60
        assert config.include_explanation is True
        assert config.include_markers is False
        assert config.required_columns == ["essay"]
        assert config.side_effect_columns == []

    @pytest.mark.parametrize("min_score", [-1, 101])
    def test_min_score_bounds(self, min_score):
        with pytest.raises(ValidationError):
            CognitiveFingerprintColumnConfig(name="fingerprint", target_columns=["essay"], min_score=min_score)
