"""Platform information service."""

import platform as host_platform
from typing import Optional

from ..interfaces.services import IPlatform


def detect_platform_name() -> str:
    """Describe the host operating system, e.g. ``"Linux 6.1.0"``."""
    system = host_platform.system() or "Unknown"
    release = host_platform.release()
    return f"{system} {release}" if release else system


class Platform(IPlatform):
    """
    Platform information resolved at construction time.

    When no explicit name is given the host operating system is reported.
    """

    def __init__(self, name: Optional[str] = None) -> None:
        self._name = name or detect_platform_name()

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Platform(name={self._name!r})"
