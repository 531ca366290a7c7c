"""
FastAPI integration module.

Provides helpers and utilities for integrating depenpen with FastAPI.
"""

from .integration import (
    create_fastapi_dependency,
    create_finish_lifespan,
    inject_dependencies,
)

__all__ = [
    "create_fastapi_dependency",
    "create_finish_lifespan",
    "inject_dependencies",
]
