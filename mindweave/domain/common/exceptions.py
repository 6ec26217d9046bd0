"""
Errors raised by domain entities and services.

The HTTP layer maps them onto status codes: not-found errors to 404,
authorization errors to 403 and everything else to 400.
"""


class DomainError(Exception):
    """Root of the domain error hierarchy. ``details`` carries structured context."""

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        return f"{self.message} - {self.details}"


class ValidationError(DomainError):
    """A value fails a domain rule: blank node title, negative minutes, unknown status."""

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details = {key: v for key, v in (("field", field), ("value", value)) if v is not None}
        super().__init__(message, details)
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    def __init__(self, entity_type: str, entity_id: object) -> None:
        super().__init__(
            f"{entity_type} with id {entity_id} not found",
            {"entity_type": entity_type, "entity_id": entity_id},
        )
        self.entity_type = entity_type
        self.entity_id = entity_id


class InvariantViolationError(DomainError):
    """An operation would leave an entity in an invalid state, e.g. completing a failed source."""

    def __init__(self, aggregate: str, invariant: str) -> None:
        super().__init__(
            f"Invariant violation in {aggregate}: {invariant}",
            {"aggregate": aggregate, "invariant": invariant},
        )
        self.aggregate = aggregate
        self.invariant = invariant


class AuthorizationError(DomainError):
    def __init__(self, message: str = "Not authorized to perform this action") -> None:
        super().__init__(message)
