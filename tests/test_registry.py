"""
Tests for the registry.

This module tests lazy singleton resolution, recursive dependency resolution,
error reporting and thread safety of first construction.
"""

import threading
import time
from typing import Any, List

import pytest

from shared_di.application.exceptions import (BindingResolutionException,
                                              CyclicDependencyException,
                                              MissingBindingException)
from shared_di.application.module import instance, merge, module, single, single_of
from shared_di.application.registry import BindingState, Registry


class IValueService:
    """Service interface used as an identifier."""
    def get_value(self) -> str:
        raise NotImplementedError


class ValueService(IValueService):
    def __init__(self) -> None:
        self.value = "test"

    def get_value(self) -> str:
        return self.value


class ServiceWithDependency:
    def __init__(self, dependency: IValueService) -> None:
        self.dependency = dependency

    def get_combined_value(self) -> str:
        return f"combined_{self.dependency.get_value()}"


class TestRegistry:
    """Test cases for registry resolution."""

    def test_resolve_returns_singleton(self) -> None:
        """Repeated resolutions return the same instance."""
        registry = Registry(module(single(IValueService, ValueService)))

        service1 = registry.resolve(IValueService)
        service2 = registry.resolve(IValueService)

        assert service1 is service2
        assert service1.get_value() == "test"

    def test_factory_is_lazy(self) -> None:
        """Factories only run on first resolution."""
        calls: List[str] = []

        def create() -> ValueService:
            calls.append("created")
            return ValueService()

        registry = Registry(module(single(IValueService, create)))

        assert calls == []
        assert registry.state_of(IValueService) is BindingState.UNRESOLVED

        registry.resolve(IValueService)
        registry.resolve(IValueService)

        assert calls == ["created"]
        assert registry.is_resolved(IValueService)

    def test_factory_receives_registry(self) -> None:
        """Factories taking one argument receive the registry."""
        registry = Registry(module(
            single(IValueService, ValueService),
            single(ServiceWithDependency,
                   lambda r: ServiceWithDependency(r.resolve(IValueService))),
        ))

        service = registry.resolve(ServiceWithDependency)

        assert service.get_combined_value() == "combined_test"
        assert service.dependency is registry.resolve(IValueService)

    def test_constructor_injection(self) -> None:
        """single_of resolves constructor arguments by type hint."""
        registry = Registry(module(
            single(IValueService, ValueService),
            single_of(ServiceWithDependency),
        ))

        service = registry.resolve(ServiceWithDependency)

        assert service.get_combined_value() == "combined_test"

    def test_complex_dependency_chain(self) -> None:
        """Shared dependencies are constructed once across a graph."""

        class ServiceA:
            def get_name(self) -> str:
                return "A"

        class ServiceB:
            def __init__(self, service_a: ServiceA) -> None:
                self.service_a = service_a

        class ServiceC:
            def __init__(self, service_b: ServiceB, service_a: ServiceA) -> None:
                self.service_b = service_b
                self.service_a = service_a

        registry = Registry(module(
            single_of(ServiceA),
            single_of(ServiceB),
            single_of(ServiceC),
        ))

        service_c = registry.resolve(ServiceC)
        service_a = registry.resolve(ServiceA)

        assert service_c.service_a is service_a
        assert service_c.service_b.service_a is service_a

    def test_instance_binding(self) -> None:
        """Instance bindings resolve to the given object."""
        value = ValueService()
        registry = Registry(module(instance(IValueService, value)))

        assert registry.resolve(IValueService) is value

    def test_string_identifiers(self) -> None:
        """Any hashable value can identify a capability."""
        registry = Registry(module(single("answer", lambda: 42)))

        assert registry.resolve("answer") == 42

    def test_merged_module_last_writer_wins(self) -> None:
        """A later module's binding is the one resolved."""

        class OtherService(IValueService):
            def get_value(self) -> str:
                return "other"

        first = module(single(IValueService, ValueService), name="first")
        second = module(single(IValueService, OtherService), name="second")

        registry = Registry(merge(first, second))

        assert isinstance(registry.resolve(IValueService), OtherService)

    def test_registries_are_isolated(self) -> None:
        """Registries built from the same module do not share instances."""
        shared = module(single(IValueService, ValueService))

        assert Registry(shared).resolve(IValueService) is not Registry(shared).resolve(IValueService)


class TestRegistryErrors:
    """Test error reporting of the registry."""

    def test_missing_binding(self) -> None:
        registry = Registry(module())

        with pytest.raises(MissingBindingException, match="IValueService"):
            registry.resolve(IValueService)

    def test_try_resolve_missing_returns_none(self) -> None:
        registry = Registry(module())

        assert registry.try_resolve(IValueService) is None

    def test_try_resolve_registered(self) -> None:
        registry = Registry(module(single(IValueService, ValueService)))

        assert isinstance(registry.try_resolve(IValueService), ValueService)

    def test_missing_nested_dependency(self) -> None:
        """A missing dependency surfaces as MissingBinding, not wrapped."""
        registry = Registry(module(single_of(ServiceWithDependency)))

        with pytest.raises(MissingBindingException):
            registry.resolve(ServiceWithDependency)

        assert registry.state_of(ServiceWithDependency) is BindingState.UNRESOLVED

    def test_two_node_cycle(self) -> None:
        """A -> B -> A fails fast."""
        registry = Registry(module(
            single("A", lambda r: ("A", r.resolve("B"))),
            single("B", lambda r: ("B", r.resolve("A"))),
        ))

        with pytest.raises(CyclicDependencyException, match="A -> B -> A"):
            registry.resolve("A")

        assert registry.state_of("A") is BindingState.UNRESOLVED
        assert registry.state_of("B") is BindingState.UNRESOLVED

    def test_self_cycle(self) -> None:
        registry = Registry(module(single("A", lambda r: r.resolve("A"))))

        with pytest.raises(CyclicDependencyException, match="A -> A"):
            registry.resolve("A")

    def test_constructor_cycle(self) -> None:
        """Cycles through constructor injection are detected."""

        class First:
            def __init__(self, second: "Second") -> None:
                self.second = second

        class Second:
            def __init__(self, first: First) -> None:
                self.first = first

        # Hints are resolved against module globals, so bind by factory
        registry = Registry(module(
            single(First, lambda r: First(r.resolve(Second))),
            single(Second, lambda r: Second(r.resolve(First))),
        ))

        with pytest.raises(CyclicDependencyException, match="First -> Second -> First"):
            registry.resolve(First)

    def test_factory_failure_is_wrapped(self) -> None:
        """Factory errors are wrapped and the binding can be retried."""
        attempts: List[int] = []

        def create() -> ValueService:
            attempts.append(1)
            if len(attempts) == 1:
                raise RuntimeError("boom")
            return ValueService()

        registry = Registry(module(single(IValueService, create)))

        with pytest.raises(BindingResolutionException, match="boom") as exc_info:
            registry.resolve(IValueService)

        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert registry.state_of(IValueService) is BindingState.UNRESOLVED

        assert registry.resolve(IValueService).get_value() == "test"
        assert len(attempts) == 2

    def test_state_of_unknown_identifier(self) -> None:
        with pytest.raises(MissingBindingException):
            Registry(module()).state_of("unknown")


class TestRegistryIntrospection:
    """Test introspection helpers."""

    def test_is_registered(self) -> None:
        registry = Registry(module(single(IValueService, ValueService)))

        assert registry.is_registered(IValueService)
        assert not registry.is_registered(ServiceWithDependency)
        assert IValueService in registry
        assert len(registry) == 1

    def test_identifiers_and_bindings(self) -> None:
        registry = Registry(module(
            single(IValueService, ValueService),
            single("answer", lambda: 42),
            name="sample",
        ))

        assert registry.name == "sample"
        assert registry.identifiers() == (IValueService, "answer")
        assert set(registry.get_bindings()) == {IValueService, "answer"}


class TestRegistryConcurrency:
    """Test thread safety of first resolution."""

    def test_factory_invoked_once_under_concurrent_resolution(self) -> None:
        thread_count = 16
        calls: List[int] = []
        barrier = threading.Barrier(thread_count)
        results: List[Any] = []
        errors: List[BaseException] = []
        results_lock = threading.Lock()

        def create() -> object:
            calls.append(1)
            time.sleep(0.05)
            return object()

        registry = Registry(module(single("slow", create)))

        def worker() -> None:
            try:
                barrier.wait()
                resolved = registry.resolve("slow")
                with results_lock:
                    results.append(resolved)
            except BaseException as e:
                with results_lock:
                    errors.append(e)

        threads = [threading.Thread(target=worker) for _ in range(thread_count)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=10)

        assert errors == []
        assert len(calls) == 1
        assert len(results) == thread_count
        assert all(result is results[0] for result in results)

    def test_concurrent_resolution_of_dependency_graph(self) -> None:
        """Threads resolving different roots share one dependency instance."""
        thread_count = 8
        calls: List[int] = []
        barrier = threading.Barrier(thread_count)
        results: List[Any] = []
        results_lock = threading.Lock()

        def create_base() -> ValueService:
            calls.append(1)
            time.sleep(0.02)
            return ValueService()

        registry = Registry(module(
            single(IValueService, create_base),
            single("left", lambda r: ("left", r.resolve(IValueService))),
            single("right", lambda r: ("right", r.resolve(IValueService))),
        ))

        def worker(identifier: str) -> None:
            barrier.wait()
            _, base = registry.resolve(identifier)
            with results_lock:
                results.append(base)

        threads = [
            threading.Thread(target=worker, args=("left" if i % 2 else "right",))
            for i in range(thread_count)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=10)

        assert len(calls) == 1
        assert len(results) == thread_count
        assert all(result is results[0] for result in results)

    def test_factory_hands_resolved_dependency_to_worker_thread(self) -> None:
        """A worker may resolve bindings that are already constructed."""
        seen: List[Any] = []

        def create_outer(registry: Registry) -> str:
            base = registry.resolve(IValueService)

            worker = threading.Thread(
                target=lambda: seen.append(registry.resolve(IValueService)))
            worker.start()
            worker.join(timeout=5)
            assert not worker.is_alive()
            return base.value

        registry = Registry(module(
            single(IValueService, ValueService),
            single("outer", create_outer),
        ))

        assert registry.resolve("outer") == "test"
        assert seen == [registry.resolve(IValueService)]
