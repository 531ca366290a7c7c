from enum import Enum


class Lifetime(str, Enum):
    """Defines how a definition is instantiated on resolution.

    Attributes:
        SINGLETON: The stored value is returned as-is on every resolution.
        TRANSIENT: The factory is called to build a new instance on every resolution.
    """

    TRANSIENT = "transient"
    SINGLETON = "singleton"

    def __str__(self) -> str:
        return self.value
