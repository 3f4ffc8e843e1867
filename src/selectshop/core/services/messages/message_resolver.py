"""Localized message lookup backed by a YAML bundle."""

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from src.selectshop.runtime.context import get_config


def _candidate_locales(locale: str, default_locale: str) -> list[str]:
    """Most specific first: ``ko_KR`` -> ``ko`` -> default locale."""
    normalized = locale.replace("-", "_")
    candidates = [normalized]
    language = normalized.split("_", 1)[0]
    if language != normalized:
        candidates.append(language)
    if default_locale not in candidates:
        candidates.append(default_locale)
    return candidates


class MessageResolver:
    """Resolve message keys to localized text.

    The bundle maps locale to a mapping of message key to template. Templates
    use ``{0}``-style positional placeholders.
    """

    def __init__(
        self,
        bundle: Mapping[str, Mapping[str, str]],
        default_locale: str = "en",
    ):
        self._bundle = {
            locale.replace("-", "_"): dict(messages)
            for locale, messages in bundle.items()
        }
        self._default_locale = default_locale

    @classmethod
    def from_yaml(cls, path: Path | str, default_locale: str = "en") -> "MessageResolver":
        with open(path, encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Message bundle {path} must map locales to messages")
        logger.debug("Loaded message bundle {} with locales {}", path, sorted(loaded))
        return cls(loaded, default_locale=default_locale)

    @classmethod
    def from_config(cls) -> "MessageResolver":
        cfg = get_config().messages
        return cls.from_yaml(cfg.bundle, default_locale=cfg.default_locale)

    @property
    def default_locale(self) -> str:
        return self._default_locale

    def resolve(
        self,
        key: str,
        args: Sequence[Any] | None = None,
        default_message: str | None = None,
        locale: str | None = None,
    ) -> str:
        """Return the message for ``key`` in ``locale``.

        Falls back to the language, then the default locale, then
        ``default_message``. A key with no translation and no default
        resolves to the key itself.
        """
        template = None
        for candidate in _candidate_locales(locale or self._default_locale, self._default_locale):
            template = self._bundle.get(candidate, {}).get(key)
            if template is not None:
                break

        if template is None:
            if default_message is None:
                logger.warning("No message for key '{}' and no default given", key)
                return key
            template = default_message

        return template.format(*(args or ()))
