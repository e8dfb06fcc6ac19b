"""iOS native bindings."""

from ...application.native import make_native_module
from ...core.interfaces.services import IAnalytics, ILogger


class IOSAnalytics(IAnalytics):
    """Analytics implementation used by the iOS front-end."""

    def __init__(self, logger: ILogger) -> None:
        self._logger = logger

    def log_event(self, event_name: str) -> None:
        self._logger.log(f'Event "{event_name}" sent to analytic by iOS implementation')


native_module = make_native_module(
    analytics=lambda registry: IOSAnalytics(logger=registry.resolve(ILogger)),
    platform_name="iOS",
    name="ios",
)
