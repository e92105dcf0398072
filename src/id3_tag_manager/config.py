"""Configuration management for the id3tm command-line tool.

Settings are kept in a TOML file and merged over the defaults, so a config
file only needs the keys it changes.
"""

import copy
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

import tomli_w

from .constants import DEFAULT_LANGUAGE


logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get the configuration directory (~/.id3tm on all platforms)."""
    return Path.home() / ".id3tm"


def get_config_path() -> Path:
    """Get the full path to the default config file."""
    return get_config_dir() / "config.toml"


class Config:
    """Configuration manager for application settings."""

    DEFAULT_CONFIG: Dict[str, Any] = {
        "logging": {
            # Empty means logging stays disabled unless --log-level is given
            "level": "",
        },
        "display": {
            # Longer values are truncated in tables
            "max_value_length": 60,
            # Also list frames by their raw identifier
            "show_raw": False,
        },
        "write": {
            # Language code for comments given on the command line
            "comment_language": DEFAULT_LANGUAGE,
        },
    }

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """Initialize configuration manager.

        Args:
            config_path: TOML file to use instead of the default location
        """
        self.config_path = Path(config_path) if config_path else get_config_path()
        self.data: Dict[str, Any] = copy.deepcopy(self.DEFAULT_CONFIG)
        self._dirty = False
        self.load()

    def load(self) -> bool:
        """Load configuration from file.

        Returns:
            True if loaded successfully, False if file doesn't exist or error occurred
        """
        if not self.config_path.exists():
            return False

        try:
            with open(self.config_path, "rb") as f:
                self._merge_config(self.data, tomllib.load(f))
            self._dirty = False
            return True
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error("Error loading config %s: %s", self.config_path, e)
            return False

    def save(self, force: bool = False) -> bool:
        """Save configuration to file.

        Args:
            force: If True, save even if config hasn't been modified

        Returns:
            True if saved successfully, False otherwise
        """
        if not force and not self._dirty:
            return True

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "wb") as f:
                tomli_w.dump(self.data, f)
            self._dirty = False
            return True
        except OSError as e:
            logger.error("Error saving config %s: %s", self.config_path, e)
            return False

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        """Recursively merge override dict into base dict."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def is_dirty(self) -> bool:
        return self._dirty

    # Logging settings
    def get_log_level(self) -> str:
        return self.data["logging"]["level"]

    def set_log_level(self, level: str) -> None:
        if level and not isinstance(getattr(logging, level.upper(), None), int):
            raise ValueError(f"Invalid log level: {level}")
        self.data["logging"]["level"] = level
        self._dirty = True

    # Display settings
    def get_max_value_length(self) -> int:
        return self.data["display"]["max_value_length"]

    def set_max_value_length(self, length: int) -> None:
        """Set the table truncation width.

        Raises:
            ValueError: If length is less than 10
        """
        if length < 10:
            raise ValueError("Value length must be at least 10 characters")
        self.data["display"]["max_value_length"] = length
        self._dirty = True

    def get_show_raw(self) -> bool:
        return self.data["display"]["show_raw"]

    def set_show_raw(self, show_raw: bool) -> None:
        self.data["display"]["show_raw"] = show_raw
        self._dirty = True

    # Write settings
    def get_comment_language(self) -> str:
        return self.data["write"]["comment_language"]

    def set_comment_language(self, language: str) -> None:
        """Set the comment language.

        Raises:
            ValueError: If language is not a 3 letter code
        """
        if len(language) != 3 or not language.isalpha():
            raise ValueError(f"Language must be a 3 letter ISO-639-2 code, got {language!r}")
        self.data["write"]["comment_language"] = language.lower()
        self._dirty = True
