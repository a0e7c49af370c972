"""Common infrastructure schemas."""

from wordshelf.infrastructure.common.schemas.settings_schemas import AppSettingsResponse

__all__ = [
    "AppSettingsResponse",
]
