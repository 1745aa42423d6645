"""
Indicator parameter defaults, YAML overrides and validation.
"""
from .defaults import DefaultConfig, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = ["DefaultConfig", "get_default_config", "ConfigLoader", "ConfigValidator", "ValidationError"]
