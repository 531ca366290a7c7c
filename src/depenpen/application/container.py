import logging
from collections.abc import Mapping
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from depenpen.application.finisher import LifecycleFinisher
from depenpen.application.lifetime_manager import LifetimeManager
from depenpen.application.resolver import DependencyResolver
from depenpen.domain import (
    Definition,
    DependencyNotFoundError,
    DependencyOptions,
    ExportRequest,
    IContainer,
    IFinisher,
    ILifetimeManager,
    InvalidOptionsError,
    IResolver,
)

logger = logging.getLogger(__name__)

CONTAINER_NAME = "DependencyResolver"

RawOptions = Union[DependencyOptions, Dict[str, Any]]


class DIContainer(IContainer):
    """Name-keyed dependency container.

    Stores definitions by unique name, resolves their dependencies recursively
    and returns either the stored value (singleton) or a new instance built
    with the resolved dependencies (transient). The container registers itself
    under ``CONTAINER_NAME`` so it can be injected like any other dependency.

    Dependency cycles are not detected. Resolving a cyclic graph recurses until
    Python raises ``RecursionError``.

    Attributes:
        _registry: Dictionary mapping names to their definitions.
        _resolver: Component resolving the dependencies of a definition.
        _lifetime_manager: Component producing singleton or transient values.
        _finisher: Component running pending finish hooks.
    """

    def __init__(self) -> None:
        """Initialize the container with a registry holding only itself."""
        self._registry: Dict[str, Definition] = {}
        self._resolver: IResolver = DependencyResolver()
        self._lifetime_manager: ILifetimeManager = LifetimeManager()
        self._finisher: IFinisher = LifecycleFinisher()
        self._bootstrap()

    def _bootstrap(self) -> None:
        """Register the container under its reserved name."""
        self._registry[CONTAINER_NAME] = Definition(
            name=CONTAINER_NAME,
            factory=self,
            dependency_names=[],
            is_singleton=True,
        )

    def add(self, dependency: Any, options: Optional[RawOptions] = None) -> None:
        """Register a dependency under a unique name.

        The definition is stored before its exports are added, so exports and
        the ``on_register`` hook can already resolve it. Exports are added
        depth-first in declaration order, then ``on_register`` is called with
        the container.

        Adding a dependency without a name, or under a name that is already
        registered, does nothing: the existing definition is kept and the new
        exports and hooks are ignored.

        Args:
            dependency: The value or callable to register. Values that are not
                callable are always singletons.
            options: ``DependencyOptions`` or a mapping of its fields. When
                omitted, the ``di_``-prefixed options of the dependency are used.

        Raises:
            InvalidOptionsError: If the options cannot be validated.

        Example:
            >>> container.add({"debug": True}, {"name": "settings"})
            >>> container.add(
            ...     Mailer,
            ...     DependencyOptions(name="mailer", dependency_names=["settings"]),
            ... )
        """
        raw_options = self._raw_options(dependency, options)
        name = raw_options.name if isinstance(raw_options, DependencyOptions) else raw_options.get("name")

        if not name:
            logger.debug("Skipping dependency without a name: %r", dependency)
            return
        if not isinstance(name, str):
            raise InvalidOptionsError(None, f"Expected name to be a string, got {type(name).__name__}")
        if name in self._registry:
            logger.debug("Dependency '%s' is already registered, skipping", name)
            return

        definition = Definition.from_options(dependency, self._validate(name, raw_options))
        self._registry[definition.name] = definition
        logger.debug("Registered dependency '%s' as %s", definition.name, definition.lifetime)

        for export in definition.exports:
            self._add_export(definition.name, export)

        if definition.on_register is not None:
            definition.on_register(self)

    def _raw_options(self, dependency: Any, options: Optional[RawOptions]) -> RawOptions:
        """Pick the options to register a dependency with, unvalidated.

        Args:
            dependency: The dependency being added.
            options: Options given to ``add``, if any.

        Returns:
            The given options, or the ``di_``-prefixed options of the dependency.

        Raises:
            InvalidOptionsError: If ``options`` is neither ``DependencyOptions`` nor a mapping.
        """
        if options is None:
            return DependencyOptions.embedded_in(dependency)
        if isinstance(options, DependencyOptions):
            return options
        if isinstance(options, Mapping):
            return dict(options)
        raise InvalidOptionsError(None, f"Expected DependencyOptions or a mapping, got {type(options).__name__}")

    def _validate(self, name: str, raw_options: RawOptions) -> DependencyOptions:
        """Validate raw options into ``DependencyOptions``.

        Args:
            name: The name found in the options, used in the error message.
            raw_options: Options returned by ``_raw_options``.

        Returns:
            The validated options.

        Raises:
            InvalidOptionsError: If pydantic rejects the options.
        """
        if isinstance(raw_options, DependencyOptions):
            return raw_options
        try:
            return DependencyOptions.model_validate(raw_options)
        except ValidationError as e:
            raise InvalidOptionsError(name, str(e)) from e

    def _add_export(self, parent_name: str, export: Any) -> None:
        """Add one export entry of ``parent_name``.

        An entry is either a dependency paired with options (an ``ExportRequest``,
        a ``(dependency, options)`` tuple, or a mapping holding ``di_dependency``
        and ``di_options``) or a bare dependency carrying its own options.
        """
        logger.debug("Adding export of '%s'", parent_name)
        pair = ExportRequest.pair_in(export)
        if pair is None:
            self.add(export)
        else:
            self.add(*pair)

    def resolver(self, name: str) -> Any:
        """Resolve a dependency by name.

        Dependencies are resolved first, in declared order, for singletons as
        well as transients.

        Args:
            name: The name the dependency was registered under.

        Returns:
            The stored value for singletons, or ``factory(*dependencies)`` for
            transients, a new instance on every call.

        Raises:
            DependencyNotFoundError: If the name, or one of its dependencies, is not registered.

        Example:
            >>> mailer = container.resolver("mailer")
            >>> mailer is container.resolver("mailer")
            False
        """
        definition = self._registry.get(name)
        if definition is None:
            raise DependencyNotFoundError(name)

        arguments = self._resolver.resolve_arguments(definition, self)
        return self._lifetime_manager.get_or_create(definition, arguments)

    def finish(self) -> None:
        """Run every pending ``on_finish`` hook with its resolved dependencies.

        Call once all dependencies are added. Each hook runs at most once over
        the life of the container, so calling ``finish`` again only runs the
        hooks of dependencies added since. Definitions added by a hook during
        this call are left for the next call.
        """
        ran = self._finisher.run_pending(
            list(self._registry.values()),
            lambda definition: self._resolver.resolve_arguments(definition, self),
        )
        logger.debug("Finish ran %d hook(s)", ran)

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    def get_registry_copy(self) -> Dict[str, Definition]:
        """Get a copy of the registry.

        Definitions are copied too, so consuming a finish hook in the copy
        does not affect this container.

        Returns:
            Copy of the current registry.
        """
        return {name: definition.model_copy() for name, definition in self._registry.items()}
