from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Subzero"
    app_host: str = "0.0.0.0"
    app_port: int = 8000

    default_spaces: int = Field(default=5, ge=0)
    default_between: int = Field(default=2, ge=0)
    default_squash: int = Field(default=0, ge=0, le=3)

    max_text_length: int = Field(default=256, ge=1)

    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    return Settings()
