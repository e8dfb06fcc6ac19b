"""
Memoizing registry resolving capability identifiers to singleton instances.

The registry is built from a module's bindings. Every binding is constructed
lazily on its first resolution and cached for the registry's lifetime.
Construction is serialized by a re-entrant lock so that each factory runs at
most once, even when several threads race on first resolution.
"""

import threading
from enum import Enum, auto
from typing import Any, Dict, Hashable, List, Optional, Tuple, Type, TypeVar, Union, overload

from loguru import logger

from .exceptions import (BindingResolutionException, CyclicDependencyException,
                         MissingBindingException, RegistryException)
from .module import Binding, Module, identifier_name

T = TypeVar('T')


class BindingState(Enum):
    """Resolution state of a single binding."""
    UNRESOLVED = auto()
    RESOLVING = auto()
    RESOLVED = auto()


class BindingRegistration:
    """Runtime state of a binding inside a registry."""

    def __init__(self, binding: Binding) -> None:
        self.binding = binding
        self.state = BindingState.UNRESOLVED
        self.instance: Any = None


class Registry:
    """
    Lazy singleton container over a merged binding set.

    Factories receive this registry so they can resolve their own
    dependencies; such nested resolutions go through the same cache.

    First-time construction holds one re-entrant lock for the whole factory
    call. A factory must not block on another thread that resolves from this
    registry: that thread waits for the lock and the two deadlock. Resolve
    such dependencies before handing work off, or pass the instances along.
    """

    def __init__(self, module: Module) -> None:
        self._name = module.name
        self._registrations: Dict[Hashable, BindingRegistration] = {
            identifier: BindingRegistration(binding)
            for identifier, binding in module.bindings.items()
        }
        self._lock = threading.RLock()
        self._resolution_stack: List[Hashable] = []

        logger.debug(
            f"Created registry '{self._name}' with {len(self._registrations)} bindings")

    @property
    def name(self) -> str:
        return self._name

    @overload
    def resolve(self, identifier: Type[T]) -> T: ...

    @overload
    def resolve(self, identifier: Hashable) -> Any: ...

    def resolve(self, identifier: Union[Type[T], Hashable]) -> Any:
        """
        Resolve an identifier to its singleton instance.

        Args:
            identifier: Capability identifier to resolve

        Returns:
            The memoized instance, constructed on first use

        Raises:
            MissingBindingException: If the identifier has no binding
            CyclicDependencyException: If construction depends on itself
            BindingResolutionException: If the factory raises
        """
        registration = self._registrations.get(identifier)
        if registration is None:
            raise MissingBindingException(
                f"No binding registered for {identifier_name(identifier)}")

        if registration.state is BindingState.RESOLVED:
            return registration.instance

        with self._lock:
            # Another thread may have finished construction while we waited
            if registration.state is BindingState.RESOLVED:
                return registration.instance

            # Only the lock holder can observe RESOLVING, so this is our own cycle
            if registration.state is BindingState.RESOLVING:
                cycle = " -> ".join(
                    [identifier_name(i) for i in self._resolution_stack] +
                    [identifier_name(identifier)])
                raise CyclicDependencyException(
                    f"Circular dependency detected: {cycle}")

            registration.state = BindingState.RESOLVING
            self._resolution_stack.append(identifier)
            try:
                instance = registration.binding.create(self)
            except RegistryException:
                registration.state = BindingState.UNRESOLVED
                raise
            except Exception as e:
                registration.state = BindingState.UNRESOLVED
                raise BindingResolutionException(
                    f"Failed to resolve {identifier_name(identifier)}: {e}") from e
            finally:
                self._resolution_stack.pop()

            registration.instance = instance
            registration.state = BindingState.RESOLVED

        logger.debug(f"Resolved {identifier_name(identifier)}")
        return instance

    def try_resolve(self, identifier: Union[Type[T], Hashable]) -> Optional[Any]:
        """
        Resolve an identifier, returning None when it has no binding.

        Cycles and factory failures still raise.
        """
        if identifier not in self._registrations:
            return None
        return self.resolve(identifier)

    def is_registered(self, identifier: Hashable) -> bool:
        """Check if an identifier has a binding."""
        return identifier in self._registrations

    def is_resolved(self, identifier: Hashable) -> bool:
        """Check if an identifier's instance has been constructed."""
        return self.state_of(identifier) is BindingState.RESOLVED

    def state_of(self, identifier: Hashable) -> BindingState:
        """Get the resolution state of a binding."""
        registration = self._registrations.get(identifier)
        if registration is None:
            raise MissingBindingException(
                f"No binding registered for {identifier_name(identifier)}")
        return registration.state

    def identifiers(self) -> Tuple[Hashable, ...]:
        return tuple(self._registrations)

    def get_bindings(self) -> Dict[Hashable, Binding]:
        """Get all bindings (for debugging)."""
        return {identifier: registration.binding
                for identifier, registration in self._registrations.items()}

    def __len__(self) -> int:
        return len(self._registrations)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._registrations
