"""
Configuration for typed_operation: dataclass defaults, YAML profiles and
validation.
"""
from .defaults import DefaultConfig, LoggingParams, get_default_config
from .loader import ConfigLoader, setup
from .validation import ConfigValidator, ValidationError

__all__ = [
    "DefaultConfig",
    "LoggingParams",
    "get_default_config",
    "ConfigLoader",
    "setup",
    "ConfigValidator",
    "ValidationError",
]
