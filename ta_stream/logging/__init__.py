"""
Logging configuration and utilities for the TA Stream indicator engine.
"""
from .config import configure_logging, get_logger, log_configuration_rejected

__all__ = ["configure_logging", "get_logger", "log_configuration_rejected"]
