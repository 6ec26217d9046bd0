import threading
from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider
from sqlalchemy.orm import Session

from mindweave.core import container
from mindweave.database import DatabaseSession

T = TypeVar("T")

# The container is process-wide; overriding db and building the use case
# must happen as one step.
_override_lock = threading.Lock()


def build_with_session(provider: Provider[T], db: Session) -> T:
    """Build ``provider`` with every repository bound to ``db``."""
    with _override_lock:
        container.db.override(db)
        try:
            return provider()
        finally:
            container.db.reset_override()


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency for a container provider.

    The use case is built against the request-scoped database session.
    """

    def dependency(db: DatabaseSession) -> T:
        return build_with_session(provider, db)

    return dependency

