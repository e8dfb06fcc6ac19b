"""
Desktop native bindings.

The desktop host reports the operating system it runs on, so no default
platform name is bound here.
"""

from ...application.native import make_native_module
from ...core.interfaces.services import IAnalytics, ILogger


class DesktopAnalytics(IAnalytics):
    """Analytics implementation used when running on a desktop host."""

    def __init__(self, logger: ILogger) -> None:
        self._logger = logger

    def log_event(self, event_name: str) -> None:
        self._logger.log(f'Event "{event_name}" sent to analytic by desktop implementation')


native_module = make_native_module(
    analytics=lambda registry: DesktopAnalytics(registry.resolve(ILogger)),
    name="desktop",
)
