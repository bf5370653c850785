from pydantic_settings import BaseSettings, SettingsConfigDict


class YqlBaseSettings(BaseSettings):
    """Base class for yql-query settings with ``.env`` file support."""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__"
    )
