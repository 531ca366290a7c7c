"""Unit tests for domain interfaces."""

from abc import ABC

import pytest

from depenpen.domain.interfaces import IContainer, IFinisher, ILifetimeManager, IResolver
from depenpen.domain.models import Definition


class TestIContainerInterface:
    """Test cases for the IContainer interface."""

    def test_icontainer_is_abstract(self):
        """Test that IContainer is an abstract base class."""
        assert issubclass(IContainer, ABC)

    def test_icontainer_cannot_be_instantiated(self):
        """Test that IContainer cannot be instantiated directly."""
        with pytest.raises(TypeError, match="Can't instantiate abstract class"):
            IContainer()

    @pytest.mark.parametrize("method", ["add", "resolver", "finish", "get_registry_copy"])
    def test_icontainer_declares_method(self, method):
        """Test that IContainer defines the container operations."""
        assert callable(getattr(IContainer, method))
        assert method in IContainer.__abstractmethods__

    def test_icontainer_implementation_requires_all_methods(self):
        """Test that implementing IContainer requires all abstract methods."""

        class PartialContainer(IContainer):
            def add(self, dependency, options=None):
                pass

        with pytest.raises(TypeError, match="Can't instantiate abstract class"):
            PartialContainer()

    def test_icontainer_can_be_implemented(self):
        """Test that IContainer can be properly implemented."""

        class ConcreteContainer(IContainer):
            def add(self, dependency, options=None):
                pass

            def resolver(self, name):
                return name

            def finish(self):
                pass

            def get_registry_copy(self):
                return {}

        container = ConcreteContainer()
        assert container.resolver("x") == "x"


class TestIResolverInterface:
    """Test cases for the IResolver interface."""

    def test_iresolver_cannot_be_instantiated(self):
        """Test that IResolver cannot be instantiated directly."""
        with pytest.raises(TypeError):
            IResolver()

    def test_iresolver_can_be_implemented(self):
        """Test that IResolver can be properly implemented."""

        class EchoResolver(IResolver):
            def resolve_arguments(self, definition, container):
                return list(definition.dependency_names)

        definition = Definition(name="svc", factory=object, dependency_names=["a", "b"])
        assert EchoResolver().resolve_arguments(definition, None) == ["a", "b"]


class TestILifetimeManagerInterface:
    """Test cases for the ILifetimeManager interface."""

    def test_ilifetime_manager_cannot_be_instantiated(self):
        """Test that ILifetimeManager cannot be instantiated directly."""
        with pytest.raises(TypeError):
            ILifetimeManager()

    def test_ilifetime_manager_declares_get_or_create(self):
        """Test that ILifetimeManager defines get_or_create."""
        assert "get_or_create" in ILifetimeManager.__abstractmethods__


class TestIFinisherInterface:
    """Test cases for the IFinisher interface."""

    def test_ifinisher_cannot_be_instantiated(self):
        """Test that IFinisher cannot be instantiated directly."""
        with pytest.raises(TypeError):
            IFinisher()

    def test_ifinisher_declares_run_pending(self):
        """Test that IFinisher defines run_pending."""
        assert "run_pending" in IFinisher.__abstractmethods__
