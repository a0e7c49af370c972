from fastapi import APIRouter

from wordshelf.config import get_settings
from wordshelf.feature_flags import get_feature_flags
from wordshelf.infrastructure.common.schemas.settings_schemas import (
    AppSettingsResponse,
    QuizSettings,
)

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("")
async def get_app_settings() -> AppSettingsResponse:
    """
    Get public application settings.

    Returns non-user-specific settings that affect application behavior.
    This is a public endpoint that doesn't require authentication.
    """
    return AppSettingsResponse(
        feature_flags=get_feature_flags(),
        quiz=QuizSettings(default_required_streak=get_settings().DEFAULT_REQUIRED_STREAK),
    )
