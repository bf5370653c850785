from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict

from yql_query.constants import LOG_LEVELS

from .base import YqlBaseSettings


class _Settings(YqlBaseSettings):

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="YQL_",
    )

    strict_conditions: bool = Field(
        default=False,
        description="Raise an error when a builder receives condition input that is not "
                    "a string, a sequence of strings or a mapping. When disabled such "
                    "input is ignored and a warning is logged."
    )
    log_level: str = Field(
        default="INFO",
        description="Log level used by setup_logging() when no explicit level is given."
    )
    log_rendered_statements: bool = Field(
        default=False,
        description="Emit a debug log record for every statement rendered by a builder."
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the log level and reject unknown names."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{v}'. Expected one of: {', '.join(LOG_LEVELS)}"
            )
        return level


# Singleton instance
_settings: Optional[_Settings] = None


def get_settings(force_reload: bool = False) -> _Settings:
    """Get the singleton settings instance for the application.

    Settings are loaded from ``YQL_``-prefixed environment variables (and a
    ``.env`` file when present) on first access.

    Args:
        force_reload: If True, creates a new Settings instance even if
                     one already exists. Useful for testing or when
                     environment variables have changed.

    Returns:
        Settings: The singleton Settings instance

    Example:
        ```python
        settings = get_settings()
        assert settings is get_settings()

        # Force reload to pick up environment changes
        new_settings = get_settings(force_reload=True)
        assert new_settings is not settings
        ```
    """
    global _settings

    if _settings is None or force_reload:
        _settings = _Settings()

    return _settings


def _reload_settings() -> _Settings:
    """Force reload of settings.

    This is primarily for testing purposes where you need to reset
    the singleton instance.

    Returns:
        A fresh _Settings instance
    """
    global _settings
    _settings = None
    return get_settings(force_reload=True)
