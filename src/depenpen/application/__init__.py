"""
Application layer - Use cases and orchestration.

This layer contains the use cases that orchestrate domain objects.
It depends only on the Domain layer.
"""

from .container import CONTAINER_NAME, DIContainer
from .finisher import LifecycleFinisher
from .lifetime_manager import LifetimeManager
from .resolver import DependencyResolver

__all__ = [
    "CONTAINER_NAME",
    "DIContainer",
    "DependencyResolver",
    "LifetimeManager",
    "LifecycleFinisher",
]
