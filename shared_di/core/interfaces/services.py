"""
Service capability interfaces shared by every platform.

Each interface doubles as the capability identifier it is bound under in the
registry.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


class ILogger(ABC):
    """Interface for the logging sink used by shared and native services."""

    @abstractmethod
    def log(self, text: str) -> None:
        """
        Write a line of text to the logging sink.

        Args:
            text: Text to log
        """
        pass


class IAnalytics(ABC):
    """Interface for analytics reporting, implemented natively per platform."""

    @abstractmethod
    def log_event(self, event_name: str) -> None:
        """
        Report an analytics event.

        Args:
            event_name: Name of the event
        """
        pass


class IPlatform(ABC):
    """Interface exposing information about the running platform."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human readable platform name, e.g. ``"Android 34"``."""
        pass


@dataclass(frozen=True)
class PlatformContext:
    """Host-supplied context handed to the container at startup."""
    platform_name: Optional[str] = None
    host: Optional[object] = None
