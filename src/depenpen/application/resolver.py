from typing import Any, List

from depenpen.domain import Definition, IContainer, IResolver


class DependencyResolver(IResolver):
    """Resolves the declared dependencies of a definition by name.

    Each name is resolved through the container, so nested dependencies are
    resolved recursively. There is no cycle guard: a definition that depends on
    itself, directly or through others, recurses until Python raises
    ``RecursionError``.
    """

    def resolve_arguments(self, definition: Definition, container: IContainer) -> List[Any]:
        """Resolve every dependency of a definition, in declared order.

        Args:
            definition: The definition whose dependencies are resolved.
            container: The container to resolve dependencies from.

        Returns:
            The resolved dependencies, ready to be passed positionally.

        Raises:
            DependencyNotFoundError: If a dependency name is not registered.

        Example:
            >>> container.add({"url": "sqlite://"}, {"name": "config"})
            >>> container.add(Database, {"name": "db", "dependency_names": ["config"]})
            >>> resolver = DependencyResolver()
            >>> resolver.resolve_arguments(container.get_registry_copy()["db"], container)
            [{'url': 'sqlite://'}]
        """
        return [container.resolver(dependency_name) for dependency_name in definition.dependency_names]
