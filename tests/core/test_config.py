"""
Tests for EngineConfig.
"""

from dataclasses import FrozenInstanceError

import pytest

from pymatrix.core.config import DEFAULT_CONFIG, EngineConfig
from pymatrix.core.exceptions import ValidationError


class TestDefaults:

    def test_default_values(self):
        config = EngineConfig()
        assert config.tolerance == 1e-10
        assert config.max_iterations == 1000
        assert config.strassen_threshold == 100
        assert config.progress_interval == 10
        assert config.gaussian_max_size == 10
        assert config.ill_conditioned_threshold == 1e12

    def test_default_config_matches(self):
        assert DEFAULT_CONFIG == EngineConfig()

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.tolerance = 1e-6


class TestValidation:

    @pytest.mark.parametrize("tolerance", [0.0, -1e-10, float('inf'), float('nan')])
    def test_bad_tolerance(self, tolerance):
        with pytest.raises(ValidationError, match="tolerance"):
            EngineConfig(tolerance=tolerance)

    @pytest.mark.parametrize("value", [0, -5, 2.5, True])
    def test_bad_max_iterations(self, value):
        with pytest.raises(ValidationError, match="max_iterations"):
            EngineConfig(max_iterations=value)

    def test_bad_leaf_size(self):
        with pytest.raises(ValidationError, match="strassen_leaf_size"):
            EngineConfig(strassen_leaf_size=0)

    def test_custom_values_kept(self):
        config = EngineConfig(tolerance=1e-8, max_iterations=50)
        assert config.tolerance == 1e-8
        assert config.max_iterations == 50
