"""
Binding declarations and module composition.

A module is an immutable, named set of bindings. Declaring a module never runs
a factory; factories are only invoked by the registry on first resolution.
Modules are combined with ``merge``, where a module supplied later overrides
bindings of the same identifier from earlier ones.
"""

import inspect
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import (TYPE_CHECKING, Any, Callable, Hashable, Iterator, List, Mapping,
                    Optional, Tuple, Type, TypeVar, Union, get_type_hints)

from loguru import logger

from .exceptions import DuplicateBindingException

if TYPE_CHECKING:
    from .registry import Registry

T = TypeVar('T')

Factory = Union[Callable[[], Any], Callable[["Registry"], Any]]


def identifier_name(identifier: Hashable) -> str:
    """Human readable name for a capability identifier."""
    if isinstance(identifier, str):
        return identifier
    name = getattr(identifier, '__name__', None)
    return name if isinstance(name, str) else repr(identifier)


def _takes_registry(factory: Callable[..., Any]) -> bool:
    try:
        signature = inspect.signature(factory)
    except (TypeError, ValueError):
        # Builtins without introspectable signatures are treated as zero-arg
        return False

    positional = [
        param for param in signature.parameters.values()
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD)
        and param.default is inspect.Parameter.empty
    ]
    if len(positional) > 1:
        raise TypeError(
            f"Factory {factory!r} must take zero arguments or the registry")
    return len(positional) == 1


@dataclass(frozen=True)
class Binding:
    """Association of a capability identifier with a factory."""

    identifier: Hashable
    factory: Callable[..., Any]
    source: Optional[str] = field(default=None, compare=False)
    takes_registry: bool = field(init=False, compare=False)

    def __post_init__(self) -> None:
        if not callable(self.factory):
            raise TypeError(
                f"Factory for {identifier_name(self.identifier)} is not callable")
        object.__setattr__(self, 'takes_registry',
                           _takes_registry(self.factory))

    def create(self, registry: "Registry") -> Any:
        """Invoke the factory, passing the registry when it asks for one."""
        if self.takes_registry:
            return self.factory(registry)
        return self.factory()


def single(identifier: Hashable, factory: Factory) -> Binding:
    """Bind ``identifier`` to a lazily constructed singleton."""
    return Binding(identifier, factory)


def instance(identifier: Hashable, value: Any) -> Binding:
    """Bind ``identifier`` to an already constructed value."""
    return Binding(identifier, lambda: value)


def _constructor_dependencies(implementation: Type[Any]) -> List[Tuple[str, Any, Any]]:
    constructor = implementation.__init__
    if constructor is object.__init__:
        return []

    signature = inspect.signature(constructor)
    type_hints = get_type_hints(constructor)

    dependencies = []
    for param_name, param in signature.parameters.items():
        if param_name == 'self' or param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue

        if param_name not in type_hints:
            if param.default is inspect.Parameter.empty:
                raise TypeError(
                    f"Parameter '{param_name}' of {implementation.__name__} "
                    f"has no type hint to resolve")
            continue

        param_type = type_hints[param_name]

        # Optional[T] resolves T
        if getattr(param_type, '__origin__', None) is Union:
            args = [arg for arg in param_type.__args__ if arg is not type(None)]
            if len(args) == 1:
                param_type = args[0]

        dependencies.append((param_name, param_type, param.default))

    return dependencies


def single_of(implementation: Type[T], bind: Optional[Hashable] = None) -> Binding:
    """
    Bind a class whose constructor arguments are resolved from the registry.

    Required parameters are resolved by their type hints. Parameters with a
    default are resolved when bound and otherwise keep the default. A bound
    dependency is injected even when its instance is None.

    Args:
        implementation: Class to construct
        bind: Identifier to bind under, defaults to the class itself

    Returns:
        Binding constructing the class on first resolution
    """
    dependencies = _constructor_dependencies(implementation)

    def factory(registry: "Registry") -> T:
        kwargs = {}
        for param_name, param_type, default in dependencies:
            if default is inspect.Parameter.empty:
                kwargs[param_name] = registry.resolve(param_type)
                continue

            if registry.is_registered(param_type):
                kwargs[param_name] = registry.resolve(param_type)
        return implementation(**kwargs)

    factory.__qualname__ = f"single_of({implementation.__name__})"
    return Binding(bind if bind is not None else implementation, factory)


@dataclass(frozen=True)
class Module:
    """Named, immutable set of bindings."""

    name: str
    bindings: Mapping[Hashable, Binding]

    def __post_init__(self) -> None:
        object.__setattr__(self, 'bindings',
                           MappingProxyType(dict(self.bindings)))

    @property
    def identifiers(self) -> Tuple[Hashable, ...]:
        return tuple(self.bindings)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self.bindings

    def __len__(self) -> int:
        return len(self.bindings)

    def __iter__(self) -> Iterator[Binding]:
        return iter(self.bindings.values())


def module(*bindings: Binding, name: str = "module") -> Module:
    """
    Declare a module from bindings.

    Raises:
        DuplicateBindingException: If an identifier is declared twice
    """
    declared = {}
    for binding in bindings:
        if binding.identifier in declared:
            raise DuplicateBindingException(
                f"Module '{name}' binds {identifier_name(binding.identifier)} more than once")
        declared[binding.identifier] = replace(binding, source=name)

    return Module(name=name, bindings=declared)


def merge(*modules: Module, name: Optional[str] = None) -> Module:
    """
    Combine modules into one; later modules override earlier bindings.

    Args:
        *modules: Modules in override order
        name: Name of the merged module, defaults to the joined names

    Returns:
        Merged module
    """
    merged = {}
    for mod in modules:
        for identifier, binding in mod.bindings.items():
            if identifier in merged:
                logger.debug(
                    f"Module '{mod.name}' overrides binding for {identifier_name(identifier)}")
            merged[identifier] = binding

    merged_name = name if name is not None else "+".join(mod.name for mod in modules)
    return Module(name=merged_name, bindings=merged)
