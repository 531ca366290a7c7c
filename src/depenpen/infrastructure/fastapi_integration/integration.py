import functools
import inspect
from contextlib import asynccontextmanager
from typing import Any, AsyncContextManager, AsyncIterator, Callable

from fastapi import FastAPI

from depenpen.domain import IContainer


def create_fastapi_dependency(container: IContainer, name: str) -> Callable[[], Any]:
    """Create a FastAPI Depends() callable that resolves a name from the container.

    This function generates a dependency function compatible with FastAPI's
    Depends() system. Each call resolves ``name`` again, so the result follows
    the registration: the same value for singletons, a new instance for transients.

    Args:
        container: The container to resolve dependencies from.
        name: The name to resolve when the dependency is called.

    Returns:
        A callable that FastAPI can use with Depends().

    Example:
        >>> container = DIContainer()
        >>> container.add(UserRepository, {"name": "users", "dependency_names": ["db"]})
        >>>
        >>> get_user_repo = create_fastapi_dependency(container, "users")
        >>>
        >>> @app.get("/users")
        >>> async def list_users(repo: UserRepository = Depends(get_user_repo)):
        ...     return await repo.get_all()
    """

    def dependency() -> Any:
        """Resolve the dependency from the container."""
        return container.resolver(name)

    return dependency


def create_finish_lifespan(container: IContainer) -> Callable[[FastAPI], AsyncContextManager[None]]:
    """Create a FastAPI lifespan that runs the container's finish hooks on startup.

    Register every dependency before the application starts; pending
    ``on_finish`` hooks then run once, before the first request is served.

    Args:
        container: The container whose ``finish`` is called.

    Returns:
        A lifespan function to pass as ``FastAPI(lifespan=...)``.

    Example:
        >>> container = DIContainer()
        >>> container.add(Cache, {"name": "cache", "is_singleton": True, "on_finish": warm_up})
        >>>
        >>> app = FastAPI(lifespan=create_finish_lifespan(container))
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Run pending finish hooks, then serve."""
        container.finish()
        yield

    return lifespan


def inject_dependencies(container: IContainer, *names: str) -> Callable:
    """Decorator that injects resolved dependencies into an async endpoint.

    The names are resolved from the container and passed as keyword
    arguments to the first parameters of the decorated function, in order.
    Arguments passed explicitly by the caller are left untouched. The
    injected parameters are hidden from the signature FastAPI inspects.

    Args:
        container: The container to resolve dependencies from.
        *names: Names to resolve and inject.

    Returns:
        A decorator function.

    Example:
        >>> @app.get("/users")
        >>> @inject_dependencies(container, "users", "logger")
        >>> async def list_users(users: UserService, logger: Logger):
        ...     logger.info("Listing users")
        ...     return await users.get_all()
    """

    def decorator(func: Callable) -> Callable:
        """Wrap the function with dependency injection logic."""
        signature = inspect.signature(func)
        parameters = list(signature.parameters.values())
        injected = dict(zip([parameter.name for parameter in parameters], names))

        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            """Resolve dependencies and call the original function."""
            for param_name, name in injected.items():
                if param_name not in kwargs:
                    kwargs[param_name] = container.resolver(name)

            return await func(*args, **kwargs)

        wrapper.__signature__ = signature.replace(
            parameters=[parameter for parameter in parameters if parameter.name not in injected]
        )
        return wrapper

    return decorator
