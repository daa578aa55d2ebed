"""
Hierarchical configuration management.

Loads configuration from multiple sources with this precedence (highest wins):
    1. Environment variables (DIDI_SECTION__KEY)
    2. Config file (YAML or JSON)
    3. Built-in defaults

The diary location itself is picked by ``resolve_database_path``:
``DIDI_URL`` (surfaced as the top-level ``url`` key) beats
``paths.database``, which defaults to ``~/digital_diary.sqlite``.

Usage:
    config = Config(config_file="~/.config/didi/config.yaml")

    config.get("display.show_keywords")   # dot-notation access
    resolve_database_path(config)         # -> "/home/me/digital_diary.sqlite"
"""

import json
import os
from typing import Any

import yaml

from didi.core.exceptions import ValidationError

_DEFAULT_ENV_PREFIX = "DIDI_"
_DEFAULT_DATABASE_NAME = "digital_diary.sqlite"
DEFAULT_CONFIG_FILE = os.path.join("~", ".config", "didi", "config.yaml")


class Config:
    """
    Central configuration manager.

    Loads and merges configuration from defaults, a config file, and
    environment variables. Env vars use double-underscore to denote nesting:
    DIDI_DISPLAY__SHOW_IDS=true -> config["display"]["show_ids"] = "true"
    """

    def __init__(
        self,
        config_file: str | None = None,
        env_prefix: str = _DEFAULT_ENV_PREFIX,
    ):
        """
        Args:
            config_file: Path to YAML or JSON configuration file.
            env_prefix: Prefix for environment variable overrides.
        """
        self.config_file = os.path.expanduser(config_file) if config_file else None
        self.env_prefix = env_prefix or ""
        self.config_data: dict[str, Any] = {}

        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from all sources."""
        self.config_data = self._get_default_config()

        if self.config_file and os.path.exists(self.config_file):
            file_config = self._load_file(self.config_file)
            self._update_dict(self.config_data, file_config)

        # Env vars override everything
        self._load_from_env()

    def _get_default_config(self) -> dict[str, Any]:
        return {
            "url": "",
            "paths": {
                "database": os.path.join("~", _DEFAULT_DATABASE_NAME),
                "log_file": "",
            },
            "display": {
                "show_date": True,
                "show_ids": False,
                "show_hashes": False,
                "show_keywords": False,
                "show_content": True,
            },
            "logging": {
                "level": "WARNING",
            },
        }

    @staticmethod
    def _load_file(path: str) -> dict[str, Any]:
        """Load a YAML or JSON config file."""
        ext = os.path.splitext(path)[1].lower()
        with open(path) as f:
            if ext in (".yaml", ".yml"):
                return yaml.safe_load(f) or {}
            elif ext == ".json":
                return json.load(f)
        return {}

    def _update_dict(self, target: dict, source: dict) -> None:
        """Recursively merge source into target."""
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._update_dict(target[key], value)
            else:
                target[key] = value

    def _load_from_env(self) -> None:
        """Override config values from environment variables."""
        if not self.env_prefix:
            return
        for env_key, env_value in os.environ.items():
            if not env_key.startswith(self.env_prefix):
                continue
            config_key = env_key[len(self.env_prefix) :].lower()
            key_parts = config_key.split("__")

            current = self.config_data
            for part in key_parts[:-1]:
                if not isinstance(current.get(part), dict):
                    current[part] = {}
                current = current[part]
            current[key_parts[-1]] = env_value

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dot-notation path.

        Args:
            key_path: e.g. "paths.database", "display.show_ids"
            default: Returned when key is not found.
        """
        parts = key_path.split(".")
        current = self.config_data
        for part in parts:
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def get_bool(self, key_path: str, default: bool = False) -> bool:
        """Get a boolean value, accepting the string forms env vars produce."""
        value = self.get(key_path, default)
        if isinstance(value, bool):
            return value
        v = str(value).strip().lower()
        if v in {"1", "true", "yes", "on"}:
            return True
        if v in {"0", "false", "no", "off", ""}:
            return False
        raise ValidationError(f"Config value {key_path}={value!r} is not a boolean")


def resolve_database_path(config: Config) -> str:
    """Return the diary database path, honoring the ``DIDI_URL`` override."""
    url = config.get("url") or ""
    if url:
        return os.path.expanduser(str(url))
    return os.path.expanduser(str(config.get("paths.database")))

