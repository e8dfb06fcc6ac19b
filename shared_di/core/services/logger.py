"""Logger service backed by loguru."""

from loguru import logger

from ..interfaces.services import ILogger


class LoguruLogger(ILogger):
    """Writes service log lines through loguru at INFO level."""

    def __init__(self, name: str = "shared_di.services") -> None:
        self._logger = logger.bind(service=name)

    def log(self, text: str) -> None:
        self._logger.info(text)
