from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from rebook.core import Container
from rebook.database import DatabaseSession

T = TypeVar("T")


def _declared_name(provider: Provider[T]) -> str:
    for name, declared in Container.providers.items():
        if declared is provider:
            return name
    raise ValueError(f"{provider!r} is not declared on {Container.__name__}")


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency that builds a use case for one request.

    ``provider`` must be declared on ``Container``. Each request resolves it on
    its own container instance whose ``db`` is that request's session; the
    shared container is never overridden, so requests served by different
    worker threads cannot pick up each other's session.
    """
    name = _declared_name(provider)

    def dependency(db: DatabaseSession) -> T:
        request_container = Container(db=db)
        return request_container.providers[name]()

    return dependency
