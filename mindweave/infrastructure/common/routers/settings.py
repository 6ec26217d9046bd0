from fastapi import APIRouter

from mindweave.config import get_settings
from mindweave.feature_flags import get_feature_flags
from mindweave.infrastructure.common.schemas import ApiResponse, AppSettingsResponse, envelope

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("")
async def get_app_settings() -> ApiResponse[AppSettingsResponse]:
    """
    Get public application settings.

    Lets clients hide AI features or the sign-up form when they are
    switched off. Does not require authentication.
    """
    return envelope(
        AppSettingsResponse(feature_flags=get_feature_flags(), api_version=get_settings().VERSION)
    )
