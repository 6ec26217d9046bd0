"""Response envelope shared by every endpoint."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope."""

    success: bool = Field(default=True, description="Always true for successful calls")
    data: T = Field(..., description="Response payload")
    message: str = Field(default="Success", description="Human-readable outcome")


class ErrorResponse(BaseModel):
    """Error envelope."""

    success: bool = Field(default=False, description="Always false for failed calls")
    message: str = Field(..., description="What went wrong")


def envelope(data: T, message: str = "Success") -> ApiResponse[T]:
    return ApiResponse[T](data=data, message=message)
