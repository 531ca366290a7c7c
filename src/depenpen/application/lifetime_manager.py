import logging
from typing import Any, List

from depenpen.domain import Definition, ILifetimeManager, Lifetime

logger = logging.getLogger(__name__)


class LifetimeManager(ILifetimeManager):
    """Produces the value of a definition according to its lifetime.

    Singletons are the stored value itself, so nothing is cached here: the
    registry already holds the one shared reference. Transients are built by
    calling the factory with the resolved arguments.
    """

    def get_or_create(self, definition: Definition, arguments: List[Any]) -> Any:
        """Return the stored value or build a new instance.

        Args:
            definition: The definition being resolved.
            arguments: Its resolved dependencies, in declared order.

        Returns:
            Value according to lifetime rules:
            - Singleton: The stored factory value, the same reference on every call
            - Transient: A new instance built by ``factory(*arguments)``

        Example:
            >>> definition = Definition(name="clock", factory=Clock, dependency_names=["tz"])
            >>> clock = manager.get_or_create(definition, [utc])
            >>> isinstance(clock, Clock)
            True
        """
        if definition.lifetime == Lifetime.SINGLETON:
            return definition.factory

        # Lifetime.TRANSIENT
        logger.debug("Constructing new instance of '%s' with %d argument(s)", definition.name, len(arguments))
        return definition.factory(*arguments)
