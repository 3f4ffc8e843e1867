"""Process-level settings read from the environment before config.yaml is loaded."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentVariables(BaseSettings):
    """Primitive values loaded from environment variables and .env files."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = Field(
        default="development"
    )
    config_file: str = Field(default="config.yaml")


def get_environment_variables() -> EnvironmentVariables:
    return EnvironmentVariables()
