"""
One-time container startup.

Bootstrap merges a platform's native module with the shared module and the
startup options, and builds the registry used for the rest of the process.
Starting twice is an error: a second ``start`` raises ``AlreadyStartedException``
instead of silently replacing the active registry.
"""

import threading
from typing import Any, Dict, Optional

from loguru import logger

from ..core.interfaces.services import PlatformContext
from ..infrastructure.config.models import ApplicationConfig
from .exceptions import AlreadyStartedException, NotStartedException
from .module import Module, instance, merge, module
from .registry import Registry
from .shared_module import shared_module

STARTUP_OPTIONS = ("context", "config")


def _options_module(options: Dict[str, Any]) -> Module:
    unknown = sorted(set(options) - set(STARTUP_OPTIONS))
    if unknown:
        raise ValueError(f"Unknown startup options: {', '.join(unknown)}")

    bindings = []

    context = options.get("context")
    if context is not None:
        if not isinstance(context, PlatformContext):
            raise ValueError(
                f"Startup option 'context' must be a PlatformContext, got {type(context).__name__}")
        bindings.append(instance(PlatformContext, context))

    config = options.get("config")
    if config is not None:
        if not isinstance(config, ApplicationConfig):
            raise ValueError(
                f"Startup option 'config' must be an ApplicationConfig, got {type(config).__name__}")
        bindings.append(instance(ApplicationConfig, config))

    return module(*bindings, name="options")


class Bootstrap:
    """
    Owns the single active registry of a process.

    The module-level ``start`` and ``get_registry`` use a default instance;
    separate instances are useful where isolated containers are needed.
    """

    def __init__(self, shared: Module = shared_module) -> None:
        self._shared = shared
        self._registry: Optional[Registry] = None
        self._lock = threading.Lock()

    @property
    def started(self) -> bool:
        return self._registry is not None

    @property
    def registry(self) -> Registry:
        """
        Get the active registry.

        Raises:
            NotStartedException: If start has not been called
        """
        if self._registry is None:
            raise NotStartedException("Dependency injection has not been started")
        return self._registry

    def start(self, native_module: Module, options: Optional[Dict[str, Any]] = None) -> Registry:
        """
        Build and publish the registry.

        Args:
            native_module: Bindings supplied by the host platform
            options: Startup options, ``context`` and/or ``config``

        Returns:
            The active registry

        Raises:
            AlreadyStartedException: If start was already called
            ValueError: If an option is unknown or has the wrong type
        """
        with self._lock:
            if self._registry is not None:
                raise AlreadyStartedException(
                    f"Dependency injection already started with '{self._registry.name}'")

            options_module = _options_module(options or {})
            merged = merge(native_module, self._shared, options_module)
            self._registry = Registry(merged)

        logger.info(
            f"Started dependency injection with modules '{merged.name}' "
            f"({len(merged)} bindings)")
        return self._registry


_default_bootstrap = Bootstrap()


def start(native_module: Module, options: Optional[Dict[str, Any]] = None) -> Registry:
    """Start the process-wide container. See ``Bootstrap.start``."""
    return _default_bootstrap.start(native_module, options)


def get_registry() -> Registry:
    """Get the process-wide registry created by ``start``."""
    return _default_bootstrap.registry
