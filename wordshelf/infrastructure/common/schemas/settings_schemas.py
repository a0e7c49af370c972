from pydantic import BaseModel, Field

from wordshelf.domain.learning.entities import MAX_REQUIRED_STREAK, MIN_REQUIRED_STREAK
from wordshelf.feature_flags import FeatureFlags


class QuizSettings(BaseModel):
    """Server-wide quiz defaults."""

    default_required_streak: int = Field(..., description="Streak used when a quiz does not set one")
    min_required_streak: int = Field(MIN_REQUIRED_STREAK)
    max_required_streak: int = Field(MAX_REQUIRED_STREAK)


class AppSettingsResponse(BaseModel):
    """Schema for returning public application settings."""

    feature_flags: FeatureFlags = Field(..., description="All feature flags")
    quiz: QuizSettings = Field(..., description="Quiz defaults")
