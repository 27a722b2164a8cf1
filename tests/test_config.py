"""Tests for pipeline configuration."""

import pytest

from tracklog import PipelineConfig
from tracklog.config import KNOTS_TO_METERS_PER_SECOND, SPATIAL_EPSILON_DEGREES


class TestPipelineConfig:
    """Tests for PipelineConfig validation."""

    def test_defaults(self):
        config = PipelineConfig()
        assert config.epsilon_degrees == SPATIAL_EPSILON_DEGREES == 1e-5
        assert config.knots_to_meters_per_second == KNOTS_TO_METERS_PER_SECOND == 0.514444

    def test_zero_epsilon_allowed(self):
        assert PipelineConfig(epsilon_degrees=0.0).epsilon_degrees == 0.0

    @pytest.mark.parametrize("epsilon", [-1e-5, float("nan")])
    def test_invalid_epsilon(self, epsilon):
        with pytest.raises(ValueError, match="epsilon_degrees"):
            PipelineConfig(epsilon_degrees=epsilon)

    @pytest.mark.parametrize("factor", [0.0, -0.5])
    def test_invalid_speed_factor(self, factor):
        with pytest.raises(ValueError, match="knots_to_meters_per_second"):
            PipelineConfig(knots_to_meters_per_second=factor)

    def test_frozen(self):
        config = PipelineConfig()
        with pytest.raises(AttributeError):
            config.epsilon_degrees = 1.0
