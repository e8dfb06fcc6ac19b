"""
Configuration management for the command-line host.
"""

from .loader import ConfigLoader
from .models import SUPPORTED_PLATFORMS, ApplicationConfig, LoggingConfig

__all__ = [
    "ConfigLoader",
    "SUPPORTED_PLATFORMS",
    "ApplicationConfig",
    "LoggingConfig",
]
