"""
Application layer: the dependency injection container and its startup.

Modules declare bindings, the registry resolves them lazily as singletons,
and bootstrap composes the native and shared modules once per process.
"""

from .bootstrap import Bootstrap, get_registry, start
from .exceptions import (AlreadyStartedException, BindingResolutionException,
                         CyclicDependencyException, DuplicateBindingException,
                         MissingBindingException, NotStartedException, RegistryException)
from .module import Binding, Module, instance, merge, module, single, single_of
from .native import make_native_module
from .registry import BindingState, Registry
from .shared_module import shared_module

__all__ = [
    "Bootstrap",
    "get_registry",
    "start",
    "AlreadyStartedException",
    "BindingResolutionException",
    "CyclicDependencyException",
    "DuplicateBindingException",
    "MissingBindingException",
    "NotStartedException",
    "RegistryException",
    "Binding",
    "Module",
    "instance",
    "merge",
    "module",
    "single",
    "single_of",
    "make_native_module",
    "BindingState",
    "Registry",
    "shared_module",
]
