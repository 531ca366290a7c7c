"""
depenpen: Lightweight name-based dependency container with lifecycle hooks.

Public API exports for the depenpen package.
"""

# Application exports
from depenpen.application.container import CONTAINER_NAME, DIContainer

# Domain exports
from depenpen.domain.enums import Lifetime
from depenpen.domain.exceptions import (
    DependencyNotFoundError,
    DIException,
    InvalidOptionsError,
)
from depenpen.domain.models import DependencyOptions, ExportRequest

__version__ = "0.1.0"

__all__ = [
    # Container
    "DIContainer",
    "CONTAINER_NAME",
    # Options
    "DependencyOptions",
    "ExportRequest",
    # Enums
    "Lifetime",
    # Exceptions
    "DIException",
    "DependencyNotFoundError",
    "InvalidOptionsError",
]
