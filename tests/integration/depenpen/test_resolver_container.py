"""Integration tests for resolver, lifetime manager and finisher working with the container."""

from unittest.mock import MagicMock

from depenpen.application.container import DIContainer
from depenpen.application.resolver import DependencyResolver
from depenpen.domain import Definition, IContainer


class TestResolverContainerIntegration:
    """Test cases for resolver integration with container."""

    def test_resolver_calls_container_resolver(self):
        """Test that the resolver goes through container.resolver for every name."""
        resolver = DependencyResolver()
        resolve_calls = []

        class TrackingContainer(IContainer):
            def add(self, dependency, options=None):
                pass

            def resolver(self, name):
                resolve_calls.append(name)
                return name.upper()

            def finish(self):
                pass

            def get_registry_copy(self):
                return {}

        definition = Definition(name="svc", factory=object, dependency_names=["db", "cache"])

        arguments = resolver.resolve_arguments(definition, TrackingContainer())

        assert resolve_calls == ["db", "cache"]
        assert arguments == ["DB", "CACHE"]

    def test_container_uses_replaced_components(self):
        """Test that the container delegates to its components."""
        container = DIContainer()
        lifetime_manager = MagicMock()
        lifetime_manager.get_or_create.return_value = "built"
        container._lifetime_manager = lifetime_manager

        container.add(object, {"name": "svc"})

        assert container.resolver("svc") == "built"
        definition, arguments = lifetime_manager.get_or_create.call_args.args
        assert definition.name == "svc"
        assert arguments == []

    def test_finish_resolves_through_container(self):
        """Test that finish uses the container to resolve hook arguments."""
        container = DIContainer()
        on_finish = MagicMock()

        class Service:
            pass

        container.add(Service, {"name": "svc"})
        container.add({"x": 1}, {"name": "x", "dependency_names": ["svc"], "on_finish": on_finish})
        container.finish()

        (service,) = on_finish.call_args.args
        assert isinstance(service, Service)
