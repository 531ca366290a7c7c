from typing import Optional


class DIException(Exception):
    """Base exception for DI-related errors."""


class DependencyNotFoundError(DIException):
    """Raised when a name has no definition in the registry.

    This occurs when:
    - The requested name was never added.
    - A definition lists a dependency name that was never added.

    Attributes:
        name: The name that could not be found.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Dependency was not found: {name}")


class InvalidOptionsError(DIException):
    """Raised when the options given to ``add`` cannot be validated.

    This occurs when:
    - A field has the wrong type (e.g. ``dependency_names`` is not a list of strings).
    - A hook is set to something that is not callable.

    Attributes:
        name: The name found in the options, if any.
        reason: Description of the validation failure.
    """

    def __init__(self, name: Optional[str], reason: str) -> None:
        self.name = name
        self.reason = reason
        message = "Invalid dependency options"
        if name:
            message += f" for '{name}'"
        message += f". Reason: {reason}"
        super().__init__(message)
