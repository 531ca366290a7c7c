"""
Domain layer - Core business logic and models.

This layer contains the definitions, options and errors of the dependency container.
It has no dependencies on other layers.
"""

from .enums import Lifetime
from .exceptions import (
    DependencyNotFoundError,
    DIException,
    InvalidOptionsError,
)
from .interfaces import IContainer, IFinisher, ILifetimeManager, IResolver
from .models import Definition, DependencyOptions, ExportRequest

__all__ = [
    # Enums
    "Lifetime",
    # Exceptions
    "DIException",
    "DependencyNotFoundError",
    "InvalidOptionsError",
    # Interfaces
    "IContainer",
    "IResolver",
    "ILifetimeManager",
    "IFinisher",
    # Models
    "Definition",
    "DependencyOptions",
    "ExportRequest",
]
