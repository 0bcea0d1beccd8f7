"""
Configuration management for the hold logic and the CLI.
"""
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from .const import (
    CONFIG_DIR_ENV,
    DEFAULT_CURRENCY,
    DEFAULT_HOLDINGS_GROUPING,
    DEFAULT_HOLDINGS_TEXT_FIELDS,
    DEFAULT_SEARCH_BACKEND,
    HMAC_KEY_ENV,
)

_LOGGER = logging.getLogger(__name__)

_TRUE_STRINGS = {"1", "true", "yes", "on"}


def default_config_dir() -> Path:
    """Return $ILSLOGIC_CONFIG_DIR, or ~/.config/ilslogic when it is not set."""
    env_dir = os.getenv(CONFIG_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return Path.home() / ".config" / "ilslogic"


class Config:
    """YAML backed configuration with dot-notation access."""

    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize the configuration manager.

        Args:
            config_dir: Directory holding config.yaml. If None, uses
                     default_config_dir().
        """
        if config_dir is None:
            self.config_dir = default_config_dir()
        else:
            self.config_dir = Path(config_dir)

        self.config_file = self.config_dir / "config.yaml"

        # Cache for loaded config
        self._config: dict[str, Any] = {}

        self.load()

    def load(self) -> None:
        """Load configuration from file."""
        if self.config_file.exists():
            try:
                with open(self.config_file, encoding='utf-8') as f:
                    loaded = yaml.safe_load(f) or {}
            except (yaml.YAMLError, OSError) as e:
                # If there's an error loading the config, start with an empty one
                _LOGGER.warning("Ignoring unreadable config file %s: %s", self.config_file, e)
                loaded = {}
            self._config = loaded if isinstance(loaded, dict) else {}
        else:
            self._config = {}

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'Catalog.holds_mode')
            default: Default value if key is not found

        Returns:
            The configuration value or the default if not found
        """
        keys = key.split('.')
        value = self._config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def as_dict(self) -> dict[str, Any]:
        return self._config


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def _as_tuple(value: Any) -> tuple[str, ...]:
    if value is None or value == "":
        return ()
    if isinstance(value, (list, tuple)):
        return tuple(str(v) for v in value)
    if isinstance(value, dict):
        # INI style numbered lists: {0: "A", 1: "B"}
        return tuple(str(v) for v in value.values())
    return (str(value),)


@dataclass(frozen=True)
class LogicConfig:
    """Settings consumed by the holds and title holds logic."""

    hide_holdings: tuple[str, ...] = ()
    allow_holds_override: bool = False
    holdings_grouping: str = DEFAULT_HOLDINGS_GROUPING
    holds_mode: str = "all"
    title_level_holds_mode: str = "disabled"
    hmac_key: str = ""
    default_search_backend: str = DEFAULT_SEARCH_BACKEND
    currency: str = DEFAULT_CURRENCY
    holdings_text_fields: tuple[str, ...] = field(
        default_factory=lambda: tuple(DEFAULT_HOLDINGS_TEXT_FIELDS)
    )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LogicConfig":
        """Build settings from a sectioned mapping (Catalog, Record, Security, Site).

        The HMAC key falls back to $ILSLOGIC_HMAC_KEY when the mapping has none.
        """
        catalog = data.get("Catalog") or {}
        record = data.get("Record") or {}
        security = data.get("Security") or {}
        site = data.get("Site") or {}

        text_fields = _as_tuple(catalog.get("holdings_text_fields"))
        return cls(
            hide_holdings=_as_tuple(record.get("hide_holdings")),
            allow_holds_override=_as_bool(catalog.get("allow_holds_override", False)),
            holdings_grouping=str(catalog.get("holdings_grouping") or DEFAULT_HOLDINGS_GROUPING),
            holds_mode=str(catalog.get("holds_mode") or "all"),
            title_level_holds_mode=str(catalog.get("title_level_holds_mode") or "disabled"),
            hmac_key=str(security.get("HMACkey") or os.getenv(HMAC_KEY_ENV, "")),
            default_search_backend=str(site.get("defaultSearchBackend") or DEFAULT_SEARCH_BACKEND),
            currency=str(site.get("defaultCurrency") or DEFAULT_CURRENCY),
            holdings_text_fields=text_fields or tuple(DEFAULT_HOLDINGS_TEXT_FIELDS),
        )

    @classmethod
    def from_config(cls, config: Config) -> "LogicConfig":
        return cls.from_dict(config.as_dict())
