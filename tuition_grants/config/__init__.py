"""Runtime configuration: console settings and scoring thresholds."""

from .config import Config, load_config, validate_config
from .thresholds import DEFAULT_THRESHOLDS, ScoringThresholds, load_thresholds

__all__ = [
    "Config",
    "load_config",
    "validate_config",
    "DEFAULT_THRESHOLDS",
    "ScoringThresholds",
    "load_thresholds",
]
