"""Custom exception hierarchy for mindweave application."""

from fastapi import HTTPException
from starlette import status


class MindweaveError(Exception):
    """Base exception for all mindweave errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class InvalidArgumentError(MindweaveError):
    """Caller supplied a missing or malformed argument."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=status.HTTP_400_BAD_REQUEST)


class UnauthenticatedError(MindweaveError):
    """Missing or invalid credentials."""

    def __init__(self, message: str = "Could not validate credentials") -> None:
        super().__init__(message, status_code=status.HTTP_401_UNAUTHORIZED)


class ForbiddenError(MindweaveError):
    """Requester does not own the resource."""

    def __init__(self, message: str = "Forbidden") -> None:
        super().__init__(message, status_code=status.HTTP_403_FORBIDDEN)


class NotFoundError(MindweaveError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=status.HTTP_404_NOT_FOUND)


class NodeNotFoundError(NotFoundError):
    """Node not found error."""

    def __init__(self, node_id: int | None = None, *, message: str | None = None) -> None:
        """Initialize with node ID or custom message."""
        self.node_id = node_id
        if message:
            super().__init__(message)
        elif node_id is not None:
            super().__init__(f"Node with id {node_id} not found")
        else:
            super().__init__("Node not found")


class SourceNotFoundError(NotFoundError):
    """Source not found error."""

    def __init__(self, source_id: int | None = None, *, message: str | None = None) -> None:
        """Initialize with source ID or custom message."""
        self.source_id = source_id
        if message:
            super().__init__(message)
        elif source_id is not None:
            super().__init__(f"Source with id {source_id} not found")
        else:
            super().__init__("Source not found")


class ProfileNotFoundError(NotFoundError):
    """Authenticated identity has no stored profile."""

    def __init__(self) -> None:
        super().__init__("User profile not found.")


class ConflictError(MindweaveError):
    """Resource already exists."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=status.HTTP_409_CONFLICT)


class NotImplementedFeatureError(MindweaveError):
    """Feature is declared but not available yet."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=status.HTTP_501_NOT_IMPLEMENTED)


class ServiceUnavailableError(MindweaveError):
    """An upstream service (the AI model or the job queue) failed or is not configured."""

    def __init__(self, message: str = "The AI model service is currently unavailable.") -> None:
        super().__init__(message, status_code=status.HTTP_502_BAD_GATEWAY)


class GenerationTimeoutError(MindweaveError):
    """Upstream AI model service did not answer in time."""

    def __init__(self, timeout_seconds: float) -> None:
        self.timeout_seconds = timeout_seconds
        super().__init__(
            f"The AI model service did not respond within {timeout_seconds:g} seconds.",
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
        )


class ExtractionError(InvalidArgumentError):
    """Text could not be extracted from a submitted source."""

    def __init__(self, origin: str, reason: str) -> None:
        self.origin = origin
        self.reason = reason
        super().__init__(f"Could not extract text from '{origin}': {reason}")


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)
