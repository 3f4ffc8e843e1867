"""Configuration template substitution utilities."""

import os
import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic_core import ValidationError

from src.selectshop.runtime.config.config_data import ConfigData
from src.selectshop.runtime.settings import get_environment_variables


def substitute_env_vars(text: str) -> str:
    """
    Substitute environment variable placeholders in text.

    Supports formats:
    - ${VAR_NAME} - required variable (raises error if missing)
    - ${VAR_NAME:-default} - optional with default value
    - ${VAR_NAME:?error_message} - required with custom error message
    """
    def replacer(match: re.Match[str]) -> str:
        var_expr = match.group(1)

        if ":-" in var_expr:
            var_name, default = var_expr.split(":-", 1)
            return os.getenv(var_name, default)

        if ":?" in var_expr:
            var_name, error_msg = var_expr.split(":?", 1)
            value = os.getenv(var_name)
            if value is None:
                raise ValueError(f"Required environment variable {var_name}: {error_msg}")
            return value

        value = os.getenv(var_expr)
        if value is None:
            raise ValueError(f"Required environment variable {var_expr} not set")
        return value

    return re.sub(r"\$\{([^}]+)\}", replacer, text)


def apply_environment_overrides(env_mode: str) -> None:
    """Promote ``<ENV>_NAME`` variables to ``NAME`` for the active environment."""
    prefix = f"{env_mode.upper()}_"
    overrides = [
        (var, value) for var, value in os.environ.items() if var.startswith(prefix)
    ]
    if overrides:
        logger.info(
            "Applying environment-specific overrides: {}",
            [name for name, _ in overrides],
        )

    for var_name, var_value in overrides:
        new_var_name = var_name[len(prefix):]
        os.environ[new_var_name] = var_value
        logger.debug("Set environment variable {} from {}", new_var_name, var_name)


def load_templated_yaml(file_path: Path) -> ConfigData:
    """
    Load a YAML file with environment variable substitution.

    Args:
        file_path: Path to the YAML file

    Returns:
        Parsed and validated configuration

    Raises:
        ValueError: If required environment variables are missing or the
            YAML does not describe a valid configuration
        FileNotFoundError: If the YAML file doesn't exist
    """
    with open(file_path, encoding="utf-8") as f:
        content = f.read()

    env_mode = get_environment_variables().environment
    logger.info("Loading configuration for environment: {}", env_mode)
    apply_environment_overrides(env_mode)

    substituted_content = substitute_env_vars(content)

    try:
        loaded = yaml.safe_load(substituted_content)
        if not loaded:
            raise ValueError("Failed to parse YAML")
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e

    try:
        config_data = loaded.get("config", {})
        config = ConfigData(**config_data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e

    if config.app.environment != env_mode:
        logger.warning(
            "config.yaml declares environment '{}' but APP_ENVIRONMENT is '{}'",
            config.app.environment,
            env_mode,
        )

    return config


def load_default_config() -> ConfigData:
    """Load the configuration file named by ``APP_CONFIG_FILE``.

    Falls back to built-in defaults when the file does not exist, so that
    library use and tests do not depend on the working directory.
    """
    config_path = Path(get_environment_variables().config_file)
    if not config_path.exists():
        logger.debug("No configuration file at {}; using defaults", config_path)
        return ConfigData()
    return load_templated_yaml(config_path)
