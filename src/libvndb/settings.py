"""Settings for the libvndb client."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import BASE_URL


class VndbSettings(BaseSettings):
    """libvndb configuration settings."""

    # API
    VNDB_API_TOKEN: Optional[str] = None
    VNDB_BASE_URL: str = BASE_URL
    VNDB_TIMEOUT: float = 30.0
    VNDB_USER_AGENT: str = "libvndb-python"

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = VndbSettings()
