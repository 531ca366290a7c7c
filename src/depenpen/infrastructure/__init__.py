"""
Infrastructure layer - External integrations.

FastAPI helpers resolving names from a container, and test doubles for
containers. Depends on both Application and Domain layers.
"""

from . import fastapi_integration, testing

__all__ = [
    "fastapi_integration",
    "testing",
]
