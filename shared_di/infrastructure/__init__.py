"""
Infrastructure layer: configuration, logging and the platform-native bindings.
"""

from .config.loader import ConfigLoader
from .config.models import ApplicationConfig, LoggingConfig
from .logging.setup import setup_logging

__all__ = [
    "ConfigLoader",
    "ApplicationConfig",
    "LoggingConfig",
    "setup_logging",
]
