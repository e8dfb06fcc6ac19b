"""
Shared DI - a platform-agnostic dependency injection container shared between
several client front-ends.

Platforms supply native bindings, shared code supplies defaults, and a single
bootstrap call composes them into a lazily resolving singleton registry.
"""

__version__ = "0.1.0"

from .application.bootstrap import Bootstrap, get_registry, start
from .application.exceptions import (AlreadyStartedException, CyclicDependencyException,
                                     MissingBindingException, RegistryException)
from .application.module import Module, instance, merge, module, single, single_of
from .application.native import make_native_module
from .application.registry import Registry
from .core.interfaces.services import IAnalytics, ILogger, IPlatform, PlatformContext
from .core.services.greeting import Greeting

__all__ = [
    "Bootstrap",
    "get_registry",
    "start",
    "AlreadyStartedException",
    "CyclicDependencyException",
    "MissingBindingException",
    "RegistryException",
    "Module",
    "instance",
    "merge",
    "module",
    "single",
    "single_of",
    "make_native_module",
    "Registry",
    "IAnalytics",
    "ILogger",
    "IPlatform",
    "PlatformContext",
    "Greeting",
]
