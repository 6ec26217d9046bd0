"""Common infrastructure schemas."""

from mindweave.infrastructure.common.schemas.camel_model import CamelModel
from mindweave.infrastructure.common.schemas.response_wrappers import (
    ApiResponse,
    ErrorResponse,
    envelope,
)
from mindweave.infrastructure.common.schemas.settings_schemas import AppSettingsResponse

__all__ = [
    "ApiResponse",
    "AppSettingsResponse",
    "CamelModel",
    "ErrorResponse",
    "envelope",
]
