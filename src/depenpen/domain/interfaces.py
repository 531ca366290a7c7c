from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, Union

from depenpen.domain.models import Definition, DependencyOptions


class IContainer(ABC):
    """Abstract interface for dependency container operations."""

    @abstractmethod
    def add(
        self,
        dependency: Any,
        options: Optional[Union[DependencyOptions, Dict[str, Any]]] = None,
    ) -> None:
        """Register a dependency under a unique name.

        Args:
            dependency: The value or callable to register.
            options: Registration options. When omitted they are read from the dependency.
        """

    @abstractmethod
    def resolver(self, name: str) -> Any:
        """Resolve a dependency by name.

        Args:
            name: The name the dependency was registered under.
        """

    @abstractmethod
    def finish(self) -> None:
        """Run every pending finish hook once."""

    @abstractmethod
    def get_registry_copy(self) -> Dict[str, Definition]:
        """Get a copy of the current registry of definitions."""


class IResolver(ABC):
    """Abstract interface for resolving the arguments of a definition."""

    @abstractmethod
    def resolve_arguments(self, definition: Definition, container: IContainer) -> List[Any]:
        """Resolve every dependency of a definition, in declared order.

        Args:
            definition: The definition whose dependencies are resolved.
            container: The container to resolve dependencies from.

        Returns:
            The resolved dependencies, ready to be passed positionally.

        Raises:
            DependencyNotFoundError: If a dependency name is not registered.
        """


class ILifetimeManager(ABC):
    """Abstract interface for producing values according to a definition's lifetime."""

    @abstractmethod
    def get_or_create(
        self,
        definition: Definition,
        arguments: List[Any],
    ) -> Any:
        """Return the stored value or build a new instance.

        Args:
            definition: The definition being resolved.
            arguments: Its resolved dependencies.
        """


class IFinisher(ABC):
    """Abstract interface for running finish hooks."""

    @abstractmethod
    def run_pending(
        self,
        definitions: List[Definition],
        resolve_arguments: Callable[[Definition], List[Any]],
    ) -> int:
        """Run the finish hook of every definition that has not run it yet.

        Args:
            definitions: The definitions to inspect, in order.
            resolve_arguments: Resolves a definition's dependencies.

        Returns:
            The number of hooks that ran.
        """
