"""
Configuration Management Module

This module provides centralized configuration management for DBAP panning,
including constants, default settings, and configuration utilities.
"""

from typing import Dict, Any
from dataclasses import dataclass
import logging
import math
import numpy as np

from .utils import DEFAULT_SCALAR
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


# =====================================================================================
# Constants
# =====================================================================================

# Rolloff in dB per doubling of distance
FREE_FIELD_ROLLOFF_DB = 6.0  # inverse distance law
REVERBERANT_ROLLOFF_RANGE_DB = (3.0, 5.0)  # closed or semi-closed rooms
DEFAULT_ROLLOFF_DB = FREE_FIELD_ROLLOFF_DB

# Blur, in the unit of the speaker coordinates
DEFAULT_BLUR = 0.0


# =====================================================================================
# Configuration Classes
# =====================================================================================

@dataclass
class PanningConfig:
    """Configuration for DBAP gain computation"""

    # Acoustic environment
    rolloff_db: float = DEFAULT_ROLLOFF_DB

    # Distance blur applied by callers deriving distances from positions
    blur: float = DEFAULT_BLUR

    # Precision
    precision: type = DEFAULT_SCALAR

    def __post_init__(self):
        """Validate configuration after initialization"""
        if isinstance(self.precision, str):
            try:
                self.precision = np.dtype(self.precision).type
            except TypeError:
                raise ConfigurationError(f"Unknown precision: {self.precision}")

        if not (isinstance(self.precision, type) and issubclass(self.precision, np.floating)):
            raise ConfigurationError(f"Precision must be a numpy floating type, got {self.precision}")

        for name in ('rolloff_db', 'blur'):
            value = getattr(self, name)
            try:
                finite = math.isfinite(value)
            except TypeError:
                raise ConfigurationError(f"{name} must be a number, got {value!r}")
            if not finite:
                raise ConfigurationError(f"{name} must be finite, got {value}")

    def scalar(self, value: Any) -> Any:
        """Convert a number to the configured precision"""
        return self.precision(value)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary for serialization"""
        return {
            'rolloff_db': self.rolloff_db,
            'blur': self.blur,
            'precision': np.dtype(self.precision).name
        }

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'PanningConfig':
        """Create configuration from dictionary"""
        return cls(
            rolloff_db=config_dict.get('rolloff_db', DEFAULT_ROLLOFF_DB),
            blur=config_dict.get('blur', DEFAULT_BLUR),
            precision=config_dict.get('precision', np.dtype(DEFAULT_SCALAR).name)
        )

    def save(self, file_path: str) -> None:
        """Save configuration to file"""
        import json
        with open(file_path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info(f"Saved panning configuration to {file_path}")

    @classmethod
    def load(cls, file_path: str) -> 'PanningConfig':
        """Load configuration from file"""
        import json
        with open(file_path, 'r') as f:
            config = cls.from_dict(json.load(f))
        logger.info(f"Loaded panning configuration from {file_path}")
        return config


# Create a default configuration
default_config = PanningConfig()
