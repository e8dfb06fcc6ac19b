"""
Slot through which a platform supplies its own service implementations.

Shared code only knows the ``IAnalytics`` contract; each platform builds a
native module with ``make_native_module`` and hands it to bootstrap.
"""

from typing import TYPE_CHECKING, Callable, Optional

from ..core.interfaces.services import IAnalytics, PlatformContext
from .module import Module, instance, module, single

if TYPE_CHECKING:
    from .registry import Registry

NativeInjectionFactory = Callable[["Registry"], IAnalytics]


def make_native_module(
    analytics: NativeInjectionFactory,
    platform_name: Optional[str] = None,
    name: str = "native",
) -> Module:
    """
    Build the module holding a platform's native bindings.

    Args:
        analytics: Factory receiving the registry and returning the platform's analytics
        platform_name: Default platform name reported when no override is configured
        name: Module name

    Returns:
        Module to pass to bootstrap
    """
    bindings = [single(IAnalytics, analytics)]
    if platform_name is not None:
        bindings.append(instance(PlatformContext, PlatformContext(platform_name=platform_name)))

    return module(*bindings, name=name)
