"""Application layer building blocks shared across bounded contexts."""

from .unit_of_work import UnitOfWork

__all__ = ["UnitOfWork"]
