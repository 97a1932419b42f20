"""
Unit tests for the config module.
"""

import os
import pytest
import numpy as np
from dbap.panning.config import PanningConfig, DEFAULT_ROLLOFF_DB, FREE_FIELD_ROLLOFF_DB
from dbap.panning.exceptions import ConfigurationError


class TestPanningConfig:
    """Tests for PanningConfig."""
    
    def test_defaults(self):
        """Test the default free-field, single precision configuration."""
        config = PanningConfig()
        assert config.rolloff_db == DEFAULT_ROLLOFF_DB == FREE_FIELD_ROLLOFF_DB
        assert config.blur == 0.0
        assert config.precision is np.float32
    
    def test_precision_from_string(self):
        """Test that precision can be given by name."""
        assert PanningConfig(precision='float64').precision is np.float64
    
    def test_invalid_precision(self):
        """Test that non floating precisions are rejected."""
        with pytest.raises(ConfigurationError):
            PanningConfig(precision='int32')
        with pytest.raises(ConfigurationError):
            PanningConfig(precision=int)
    
    def test_non_finite_values(self):
        """Test that infinite or NaN values are rejected."""
        with pytest.raises(ConfigurationError):
            PanningConfig(rolloff_db=float('inf'))
        with pytest.raises(ConfigurationError):
            PanningConfig(blur=float('nan'))
    
    def test_non_numeric_values(self):
        """Test that non-numeric values from a JSON file raise ConfigurationError."""
        with pytest.raises(ConfigurationError):
            PanningConfig.from_dict({"rolloff_db": "6"})
        with pytest.raises(ConfigurationError):
            PanningConfig(blur=None)
    
    def test_scalar(self):
        """Test conversion to the configured precision."""
        assert isinstance(PanningConfig(precision=np.float64).scalar(3), np.float64)
    
    def test_dict_roundtrip(self, test_config):
        """Test that to_dict and from_dict preserve every field."""
        data = test_config.to_dict()
        assert data == {'rolloff_db': 6.0, 'blur': 0.5, 'precision': 'float64'}
        assert PanningConfig.from_dict(data) == test_config
    
    def test_from_partial_dict(self):
        """Test that missing keys use defaults."""
        config = PanningConfig.from_dict({'rolloff_db': 4.0})
        assert config.rolloff_db == 4.0
        assert config.precision is np.float32
    
    def test_save_and_load(self, tmp_path, test_config):
        """Test saving to and loading from a JSON file."""
        path = os.path.join(tmp_path, 'panning.json')
        test_config.save(path)
        assert PanningConfig.load(path) == test_config
