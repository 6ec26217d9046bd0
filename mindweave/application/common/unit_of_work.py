"""
Unit of Work interface.

Repositories stage changes on a shared session; the Unit of Work decides
when they become durable. Use cases that write more than one row commit
them together.

Example:
    with self.uow:
        self.progress_repository.add(entry)
        self.node_repository.update_status_badge(node_id, entry.status)
        self.uow.commit()
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self


class UnitOfWork(ABC):
    """
    Unit of Work interface (Port).

    Infrastructure layer provides the concrete implementation
    (``SQLAlchemyUnitOfWork``).
    """

    @abstractmethod
    def commit(self) -> None:
        """Persist every change staged since the last commit or rollback."""
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """Discard every change staged since the last commit or rollback."""
        raise NotImplementedError

    def __enter__(self) -> Self:
        """Enter the unit of work context."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """
        Exit the unit of work context.

        If an exception occurred, rollback. Otherwise, do nothing
        (commit must be called explicitly).
        """
        if exc_type is not None:
            self.rollback()
