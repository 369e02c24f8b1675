from collections.abc import Callable
from typing import TypeVar

from dependency_injector import providers
from dependency_injector.providers import Provider

from admin_catalog.core import Container, container
from admin_catalog.database import DatabaseSession

T = TypeVar("T")


def _provider_name(provider: Provider[T]) -> str:
    for name, candidate in container.providers.items():
        if candidate is provider:
            return name
    raise ValueError(f"Provider {provider!r} is not registered in the container")


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency for a container provider.

    Each request gets its own container bound to the request-scoped
    session; the shared container is never overridden, so concurrent
    requests cannot see each other's session.
    """
    name = _provider_name(provider)

    def dependency(db: DatabaseSession) -> T:
        request_container = Container(db=providers.Object(db))
        return getattr(request_container, name)()

    return dependency
