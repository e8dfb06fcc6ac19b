"""Android native bindings."""

from ...application.native import make_native_module
from ...core.interfaces.services import IAnalytics, ILogger


class AndroidAnalytics(IAnalytics):
    """Analytics implementation used by the Android front-end."""

    def __init__(self, logger: ILogger) -> None:
        self._logger = logger

    def log_event(self, event_name: str) -> None:
        self._logger.log(f'Event "{event_name}" sent to analytic by Android implementation')


native_module = make_native_module(
    analytics=lambda registry: AndroidAnalytics(registry.resolve(ILogger)),
    platform_name="Android",
    name="android",
)
