"""Glue between the dependency-injector container and FastAPI dependencies."""

import threading
from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from flashdeck.core import container
from flashdeck.database import DatabaseSession

T = TypeVar("T")

# The container is process-wide and sync dependencies run in a threadpool,
# so the override of container.db must not interleave between requests.
_container_lock = threading.Lock()


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Wrap a container provider as a FastAPI dependency.

    Usage:
        use_case: ReviewCardUseCase = Depends(inject_use_case(container.review_card_use_case))

    Each call binds the container's `db` to the session of the current request,
    builds the object, then drops the binding again, all under one lock.
    """

    def resolve(db: DatabaseSession) -> T:
        with _container_lock:
            container.db.override(db)
            try:
                return provider()
            finally:
                container.db.reset_override()

    return resolve
