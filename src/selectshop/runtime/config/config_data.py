"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field, computed_field


class AppConfig(BaseModel):
    """Application configuration model."""

    name: str = Field(default="selectshop", description="Application name")
    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./selectshop.db",
        description="Database connection URL",
    )
    echo: bool = Field(default=False, description="Echo SQL statements")
    pool_size: int = Field(default=5, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")
    password_env_var: str | None = Field(
        default=None,
        description="Environment variable name containing database password",
    )

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @computed_field
    @property
    def connection_string(self) -> str:
        """Database URL with the password from ``password_env_var`` applied."""
        from sqlalchemy.engine import make_url

        base_url = make_url(self.url)
        if not self.password_env_var:
            return self.url

        password = os.getenv(self.password_env_var)
        if not password:
            raise ValueError(f"Environment variable {self.password_env_var} not set")

        if base_url.password and base_url.password != password:
            logger.warning(
                "Database password in URL differs from {}; using the environment value",
                self.password_env_var,
            )
        return base_url.set(password=password).render_as_string(hide_password=False)


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="plain", description="Log format")
    file: str | None = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class MessagesConfig(BaseModel):
    """Localized message bundle configuration."""

    default_locale: str = Field(default="en", description="Locale used when none is given")
    bundle: str = Field(
        default=str(Path(__file__).resolve().parents[2] / "resources" / "messages.yaml"),
        description="Path to the YAML message bundle",
    )


class CatalogConfig(BaseModel):
    """Listing defaults for product pages."""

    default_page_size: int = Field(default=10, ge=1)
    max_page_size: int = Field(default=100, ge=1)
    default_sort_by: str = Field(default="id")


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    messages: MessagesConfig = Field(
        default_factory=MessagesConfig, description="Message bundle configuration"
    )
    catalog: CatalogConfig = Field(
        default_factory=CatalogConfig, description="Catalog listing configuration"
    )
