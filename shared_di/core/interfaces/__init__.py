"""
Core interfaces defining the service capabilities bound in the registry.

Platforms and shared code depend only on these contracts.
"""

from .services import IAnalytics, ILogger, IPlatform, PlatformContext

__all__ = [
    "IAnalytics",
    "ILogger",
    "IPlatform",
    "PlatformContext",
]
