"""Configuration with file storage and env overrides."""

import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger("gridprompt.config")

# Module-level cache for singleton pattern
_config_cache: "Config | None" = None


def clear_config_cache() -> None:
    """Clear the config cache. Useful for testing or config reload."""
    global _config_cache
    _config_cache = None


def get_default_config_dir() -> Path:
    """Get default config directory, respecting GRIDPROMPT_CONFIG_DIR env var."""
    config_dir = os.environ.get("GRIDPROMPT_CONFIG_DIR")
    if config_dir:
        return Path(config_dir)
    return Path.home() / ".config" / "gridprompt"


class ConfigMeta:
    """Schema definition - separate from runtime state."""

    TOGGLES: dict[str, str] = {
        "summary": "Show a one-line summary instead of the grid once answered",
        "swap_separators": "Allow Shift+arrow to swap separator cells",
        "vim_keys": "Enable hjkl navigation and HJKL moves",
    }

    SETTINGS: dict[str, str] = {
        "cols": "Number of columns (0 = square-ish grid)",
        "min_cell_width": "Minimum cell width (default: 10)",
        "pointer": "Selection pointer symbol",
        "selected_style": "Rich style of the selected cell",
        "moving_style": "Rich style of a cell being moved",
        "changed_style": "Rich style of moved cells after answering",
        "answer_style": "Rich style of the summary answer",
    }


class Config:
    """Runtime configuration with env override support."""

    DEFAULTS: dict[str, Any] = {
        # Toggles
        "summary": False,
        "swap_separators": False,
        "vim_keys": True,
        # Settings
        "cols": 0,  # 0 = ceil(sqrt(number of choices))
        "min_cell_width": 10,
        "pointer": "❯",
        "selected_style": "cyan",
        "moving_style": "yellow",
        "changed_style": "green",
        "answer_style": "cyan",
    }

    # Integer settings that must not be negative
    NON_NEGATIVE: tuple[str, ...] = ("cols", "min_cell_width")

    def __init__(self, config_dir: Path | None = None):
        self._config_dir = config_dir or get_default_config_dir()
        self._config_file = self._config_dir / "config.json"
        self._data: dict[str, Any] = {}

    @property
    def config_dir(self) -> Path:
        return self._config_dir

    @classmethod
    def load(cls, config_dir: Path | None = None) -> "Config":
        """Factory method - explicit loading with caching."""
        global _config_cache

        if _config_cache is not None and config_dir is None:
            return _config_cache

        config = cls(config_dir)
        config._load_from_file()
        config._apply_env_overrides()

        if config_dir is None:
            _config_cache = config

        return config

    def __getattr__(self, name: str) -> Any:
        """Access config values as attributes."""
        if name.startswith("_"):
            raise AttributeError(name)
        if name in self._data:
            return self._data[name]
        if name in self.DEFAULTS:
            return self.DEFAULTS[name]
        raise AttributeError(f"Config has no attribute '{name}'")

    def as_dict(self) -> dict[str, Any]:
        """All known keys with their effective values."""
        return {key: getattr(self, key) for key in self.DEFAULTS}

    def set(self, key: str, value: Any) -> None:
        """Set value and persist.

        String values are coerced to the type of the key's default.

        Raises:
            KeyError: If key is not a known setting
            ValueError: If value cannot be coerced or is out of range
        """
        if key not in self.DEFAULTS:
            raise KeyError(key)
        if isinstance(value, str):
            value = self._coerce(value, type(self.DEFAULTS[key]))
        self._validate(key, value)
        self._data[key] = value
        self._save()

    def _load_from_file(self) -> None:
        if self._config_file.exists():
            try:
                content = self._config_file.read_text()
                if content.strip():
                    self._data = json.loads(content)
                    self._drop_invalid()
            except json.JSONDecodeError:
                # Corrupted config - use defaults, will be fixed on next save
                logger.warning("Ignoring corrupted config file %s", self._config_file)
                self._data = {}

    def _save(self) -> None:
        self._config_dir.mkdir(parents=True, exist_ok=True)
        self._config_file.write_text(json.dumps(self._data, indent=2))

    def _apply_env_overrides(self) -> None:
        """Apply GRIDPROMPT_* env vars (highest priority)."""
        for key, default in self.DEFAULTS.items():
            env_key = f"GRIDPROMPT_{key.upper()}"
            if env_key in os.environ:
                try:
                    value = self._coerce(os.environ[env_key], type(default))
                    self._validate(key, value)
                    self._data[key] = value
                except ValueError:
                    logger.warning("Ignoring invalid %s=%r", env_key, os.environ[env_key])

    def _drop_invalid(self) -> None:
        """Drop out-of-range values from the config file, keeping defaults."""
        for key in self.NON_NEGATIVE:
            if key not in self._data:
                continue
            try:
                self._validate(key, self._data[key])
            except ValueError:
                logger.warning("Ignoring invalid %s=%r in %s", key, self._data[key], self._config_file)
                del self._data[key]

    @classmethod
    def _validate(cls, key: str, value: Any) -> None:
        """Raise ValueError for values the prompt cannot use."""
        if key in cls.NON_NEGATIVE:
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{key} must be a non-negative integer, got {value!r}")

    @staticmethod
    def _coerce(value: str, target_type: type) -> Any:
        """Coerce string value to target type."""
        if target_type is bool:
            return value.lower() in ("true", "1", "yes")
        if target_type is int:
            return int(value)
        return value
