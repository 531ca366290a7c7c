from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from depenpen.domain.enums import Lifetime

EMBEDDED_OPTION_PREFIX = "di_"
EXPORT_DEPENDENCY_KEY = EMBEDDED_OPTION_PREFIX + "dependency"
EXPORT_OPTIONS_KEY = EMBEDDED_OPTION_PREFIX + "options"


class DependencyOptions(BaseModel):
    """Options describing how a dependency is registered.

    When no options are passed to ``add``, the same fields are read from the
    dependency itself, prefixed with ``di_`` (``di_name``, ``di_dependency_names``, ...).

    Attributes:
        name: Unique registry key. Without a name the dependency is not registered.
        dependency_names: Names resolved and passed positionally to the factory. Defaults to none.
        is_singleton: Whether the dependency is returned as-is instead of constructed. Defaults to False.
        exports: Nested dependencies registered together with this one. Defaults to none.
            Each entry is a bare dependency carrying its own options, or a
            dependency paired with options: an ``ExportRequest``, a
            ``(dependency, options)`` tuple, or a mapping with the keys
            ``di_dependency`` and optionally ``di_options``.
        on_register: Called with the container once the dependency and its exports are added.
        on_finish: Called with the resolved dependencies the first time ``finish`` runs.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid")

    name: Optional[str] = Field(default=None, description="Unique name of the dependency.")
    dependency_names: List[str] = Field(
        default_factory=list,
        description="Names of the dependencies to inject, in positional order.",
    )
    is_singleton: bool = Field(default=False, description="Return the dependency itself instead of an instance.")
    exports: List[Any] = Field(
        default_factory=list,
        description="Dependencies (or dependency/options pairs) registered along with this one.",
    )
    on_register: Optional[Callable[..., Any]] = Field(
        default=None,
        description="Hook receiving the container after registration.",
    )
    on_finish: Optional[Callable[..., Any]] = Field(
        default=None,
        description="Hook receiving the resolved dependencies on finish.",
    )

    @classmethod
    def embedded_in(cls, dependency: Any) -> Dict[str, Any]:
        """Collect the ``di_``-prefixed options carried by a dependency.

        Mappings are read by key, anything else by attribute. Options that are
        absent or None are left out so the field defaults apply.

        Args:
            dependency: The dependency carrying its own options.

        Returns:
            Raw option values keyed by field name, ready for validation.
        """
        found: Dict[str, Any] = {}
        for field_name in cls.model_fields:
            key = EMBEDDED_OPTION_PREFIX + field_name
            if isinstance(dependency, Mapping):
                value = dependency.get(key)
            else:
                value = getattr(dependency, key, None)
            if value is not None:
                found[field_name] = value
        return found


class ExportRequest(BaseModel):
    """A dependency paired with its options inside another dependency's exports.

    Attributes:
        dependency: The value or callable to register.
        options: Its options. When omitted they are read from the dependency itself.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    dependency: Any = Field(..., description="The dependency to register.")
    options: Optional[DependencyOptions] = Field(default=None, description="Options for the dependency.")

    @staticmethod
    def pair_in(entry: Any) -> Optional[Tuple[Any, Any]]:
        """Split an export entry into its dependency and options.

        Args:
            entry: One item of a dependency's exports.

        Returns:
            ``(dependency, options)`` for an ``ExportRequest``, a two-item tuple,
            or a mapping holding ``di_dependency`` (and optionally ``di_options``).
            None for a bare dependency, whose options are embedded in it.
        """
        if isinstance(entry, ExportRequest):
            return entry.dependency, entry.options
        if isinstance(entry, tuple) and len(entry) == 2:
            return entry[0], entry[1]
        if isinstance(entry, Mapping) and EXPORT_DEPENDENCY_KEY in entry:
            return entry[EXPORT_DEPENDENCY_KEY], entry.get(EXPORT_OPTIONS_KEY)
        return None


class Definition(BaseModel):
    """A registered dependency as stored in the registry.

    A definition whose factory is not callable is always a singleton, whatever
    ``is_singleton`` was declared as.

    Attributes:
        name: Unique registry key.
        factory: The stored value, or the callable building new instances.
        dependency_names: Names resolved and passed positionally to the factory and to ``on_finish``.
        is_singleton: Whether resolution returns ``factory`` itself.
        exports: The exports declared when the definition was added.
        on_register: Registration hook, already run by the time the definition is visible.
        on_finish: Finish hook.
        finish_consumed: Set once ``on_finish`` has run; the hook never runs again.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str = Field(..., description="Unique name of the dependency.")
    factory: Any = Field(..., description="Stored value or callable factory.")
    dependency_names: List[str] = Field(default_factory=list, description="Names of the dependencies to inject.")
    is_singleton: bool = Field(default=False, description="Return the factory itself on resolution.")
    exports: List[Any] = Field(default_factory=list, description="Exports declared with the dependency.")
    on_register: Optional[Callable[..., Any]] = Field(default=None, description="Registration hook.")
    on_finish: Optional[Callable[..., Any]] = Field(default=None, description="Finish hook.")
    finish_consumed: bool = Field(default=False, description="Whether the finish hook has already run.")

    @model_validator(mode="after")
    def force_singleton_for_values(self) -> "Definition":
        if not callable(self.factory):
            self.is_singleton = True
        return self

    @classmethod
    def from_options(cls, factory: Any, options: DependencyOptions) -> "Definition":
        """Build a definition for ``factory`` from validated options.

        Args:
            factory: The dependency being added.
            options: Its options; ``options.name`` must be set.

        Returns:
            The new definition.
        """
        return cls(
            name=options.name,
            factory=factory,
            dependency_names=options.dependency_names,
            is_singleton=options.is_singleton,
            exports=options.exports,
            on_register=options.on_register,
            on_finish=options.on_finish,
        )

    @property
    def lifetime(self) -> Lifetime:
        return Lifetime.SINGLETON if self.is_singleton else Lifetime.TRANSIENT

    @property
    def has_pending_finish(self) -> bool:
        """Whether ``on_finish`` is set and has not run yet."""
        return self.on_finish is not None and not self.finish_consumed

    def consume_finish(self) -> None:
        """Mark the finish hook as run so it is never invoked again."""
        self.finish_consumed = True
