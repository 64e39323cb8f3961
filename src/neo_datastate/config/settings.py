"""
Settings for neo-datastate controllers.

Defaults for request executors and paginators, overridable through
environment variables prefixed with NEO_DATASTATE_ or a .env file.
"""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DataStateSettings(BaseSettings):
    """Runtime defaults for request and pagination controllers."""

    model_config = SettingsConfigDict(
        env_prefix="NEO_DATASTATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Request executor notifications
    show_success_toast: bool = Field(default=False)
    show_error_toast: bool = Field(default=True)
    success_message: str = Field(default="Operation successful")

    # Overlapping executions: keep only the latest issued request's outcome
    discard_stale_responses: bool = Field(default=False)

    # Pagination Configuration
    default_page: int = Field(default=1, ge=1)
    default_page_size: int = Field(default=20, ge=1)
    default_server_page_size: int = Field(default=10, ge=1)
    max_page_size: int = Field(default=1000, ge=1)

    def clamp_page_size(self, page_size: int) -> int:
        """Constrain a requested page size to [1, max_page_size]."""
        return max(1, min(page_size, self.max_page_size))


@lru_cache()
def get_settings() -> DataStateSettings:
    """Get cached settings instance."""
    return DataStateSettings()
