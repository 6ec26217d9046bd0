from pydantic import BaseModel, Field

from mindweave.feature_flags import FeatureFlags


class AppSettingsResponse(BaseModel):
    """Schema for returning public application settings."""

    feature_flags: FeatureFlags = Field(..., description="All feature flags")
    api_version: str = Field(..., description="Server version")
