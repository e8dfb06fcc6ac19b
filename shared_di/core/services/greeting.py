"""Greeting service shown by every front-end."""

from ..interfaces.services import IAnalytics, IPlatform

GREET_EVENT = "greet-requested"


class Greeting:
    """Builds the greeting for the current platform and reports it."""

    def __init__(self, platform: IPlatform, analytics: IAnalytics) -> None:
        self._platform = platform
        self._analytics = analytics

    def greet(self) -> str:
        self._analytics.log_event(GREET_EVENT)

        return f"Hello, {self._platform.name}!"
