from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from typing import Any

from pydantic import BaseModel

from src.selectshop.runtime.config.config_data import ConfigData
from src.selectshop.runtime.config.config_template import load_default_config


@dataclass
class AppContext:
    """Application context containing configuration and other app-wide state."""

    config: ConfigData


_default_context = AppContext(config=load_default_config())

_app_context: ContextVar[AppContext] = ContextVar(
    "app_context", default=_default_context
)


def get_context() -> AppContext:
    """Get the current application context."""
    return _app_context.get()


def set_context(context: AppContext) -> Token[AppContext]:
    """Set the current application context."""
    return _app_context.set(context)


def _explicitly_set(model: BaseModel) -> dict[str, Any]:
    """Dump only the fields that were set explicitly, at any depth.

    A nested model is included whole when any of its own fields were set,
    so that the merge below can descend into it.
    """
    result: dict[str, Any] = {}
    for field_name in model.__class__.model_fields:
        value = getattr(model, field_name)
        if isinstance(value, BaseModel):
            if _explicitly_set(value) or field_name in model.model_fields_set:
                result[field_name] = _explicitly_set(value) or value.model_dump()
        elif field_name in model.model_fields_set:
            result[field_name] = value
    return result


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = base.copy()
    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = _merge(result[key], value)
        else:
            result[key] = value
    return result


def merge_configs(base_config: ConfigData, override_config: ConfigData) -> ConfigData:
    """Overlay the explicitly set fields of ``override_config`` onto ``base_config``."""
    merged = _merge(base_config.model_dump(), _explicitly_set(override_config))
    return ConfigData.model_validate(merged)


@contextmanager
def with_context(config_override: ConfigData | None = None) -> Iterator[None]:
    """Temporarily override the application configuration.

    Only fields set on ``config_override`` change; everything else is
    inherited from the current context.

    Example:
        override = ConfigData()
        override.messages.default_locale = "ko"
        with with_context(override):
            assert get_config().messages.default_locale == "ko"
    """
    if config_override is None:
        yield
        return

    if not isinstance(config_override, ConfigData):
        raise ValueError(
            f"config_override must be ConfigData, or None, got {type(config_override)}"
        )

    merged_config = merge_configs(get_context().config, config_override)
    token = set_context(replace(get_context(), config=merged_config))
    try:
        yield
    finally:
        _app_context.reset(token)


def set_config(config: ConfigData) -> None:
    """Replace the entire current configuration."""
    set_context(replace(get_context(), config=config))


def get_config() -> ConfigData:
    """Convenience function to get the current configuration."""
    return get_context().config
