"""Shared service implementations used on every platform."""

from .greeting import GREET_EVENT, Greeting
from .logger import LoguruLogger
from .platform import Platform, detect_platform_name

__all__ = [
    "GREET_EVENT",
    "Greeting",
    "LoguruLogger",
    "Platform",
    "detect_platform_name",
]
