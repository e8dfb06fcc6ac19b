"""
Module containing the services provided by shared code on every platform.
"""

from typing import TYPE_CHECKING

from ..core.interfaces.services import ILogger, IPlatform, PlatformContext
from ..core.services.greeting import Greeting
from ..core.services.logger import LoguruLogger
from ..core.services.platform import Platform
from ..infrastructure.config.models import ApplicationConfig
from .module import module, single, single_of

if TYPE_CHECKING:
    from .registry import Registry


def create_platform(registry: "Registry") -> Platform:
    """
    Build platform info from the configured name, the platform context, or the host OS.
    """
    config = registry.try_resolve(ApplicationConfig)
    if config is not None and config.platform_name:
        return Platform(config.platform_name)

    context = registry.try_resolve(PlatformContext)
    if context is not None and context.platform_name:
        return Platform(context.platform_name)

    return Platform()


shared_module = module(
    single(ILogger, LoguruLogger),
    single(IPlatform, create_platform),
    single_of(Greeting),
    name="shared",
)
