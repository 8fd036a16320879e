import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """套件設定"""
    model_config = SettingsConfigDict(
        env_prefix="FORMFIELDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging Configuration
    debug: bool = Field(default=False, description="Use the console renderer instead of JSON")
    log_level: str = Field(default="INFO", description="Standard library log level name")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level


# 全域設定實例
settings = Settings()
