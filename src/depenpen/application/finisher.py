"""Application layer - Finish hook execution."""

import logging
from typing import Any, Callable, List

from depenpen.domain import Definition, IFinisher

logger = logging.getLogger(__name__)


class LifecycleFinisher(IFinisher):
    """Runs the ``on_finish`` hook of each definition at most once.

    A hook is marked consumed only after it returns. If it raises, the error
    propagates, the hooks that already ran stay consumed and the failing one
    stays pending for the next run.
    """

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
        ran = 0
        for definition in definitions:
            if not definition.has_pending_finish:
                continue

            arguments = resolve_arguments(definition)
            logger.debug("Running finish hook of '%s'", definition.name)
            definition.on_finish(*arguments)
            definition.consume_finish()
            ran += 1

        return ran
