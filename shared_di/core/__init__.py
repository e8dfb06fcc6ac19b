"""
Core module containing service contracts and the shared services.

This module is independent of the container and of any platform; the
application layer wires it together.
"""

from .interfaces import IAnalytics, ILogger, IPlatform, PlatformContext
from .services import GREET_EVENT, Greeting, LoguruLogger, Platform

__all__ = [
    "IAnalytics",
    "ILogger",
    "IPlatform",
    "PlatformContext",
    "GREET_EVENT",
    "Greeting",
    "LoguruLogger",
    "Platform",
]
