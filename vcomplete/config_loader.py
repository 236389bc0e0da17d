"""Configuration file loading utilities.

This module handles loading, parsing, and merging TOML configuration files.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .constants import CONFIG_FILE
from .models import ConfigError
from .utils import merge

if TYPE_CHECKING:
    import logging

__all__ = ["ConfigLoader"]


class ConfigLoader:
    """Handles loading and merging configuration files.

    Supports:
    - TOML configuration files
    - Directory-based config (multiple .toml files merged)
    - Include directives for modular configuration

    The default location is optional: without it the built-in tables are used as is.
    """

    def __init__(self, log: logging.Logger) -> None:
        """Initialize the config loader.

        Args:
            log: Logger instance for status and error messages
        """
        self.log = log
        self._config: dict[str, Any] = {}

    @property
    def config(self) -> dict[str, Any]:
        """Return the loaded configuration."""
        return self._config

    def load(self, config_filename: str = "") -> dict[str, Any]:
        """Load configuration from file or directory.

        Args:
            config_filename: Optional path to config file or directory.
                           If empty, uses `VCOMPLETE_CONFIG` or the default CONFIG_FILE location.

        Returns:
            The loaded and merged configuration dictionary.

        Raises:
            ConfigError: If an explicit config file is missing or has syntax errors.
        """
        config_filename = config_filename or os.environ.get("VCOMPLETE_CONFIG", "")
        merge(self._config, self._open_config(config_filename))
        return self._config

    def _open_config(self, config_filename: str = "") -> dict[str, Any]:
        """Load config file(s) into a dictionary, following includes."""
        if config_filename:
            fname = Path(os.path.expandvars(config_filename)).expanduser()
            config = self._load_config_directory(fname) if fname.is_dir() else self._load_config_file(fname)
        elif CONFIG_FILE.exists():
            config = self._load_config_file(CONFIG_FILE)
        else:
            self.log.debug("No config file at %s, using built-in tables", CONFIG_FILE)
            return {}

        for extra_config in list(config.get("vcomplete", {}).get("include", [])):
            merge(config, self._open_config(extra_config))

        return config

    def _load_config_directory(self, directory: Path) -> dict[str, Any]:
        """Load and merge all .toml files from a directory.

        Args:
            directory: Path to directory containing .toml files
        """
        config: dict[str, Any] = {}
        for toml_file in sorted(f.name for f in directory.iterdir()):
            if not toml_file.endswith(".toml"):
                continue
            merge(config, self._load_config_file(directory / toml_file))
        return config

    def _load_config_file(self, fname: Path) -> dict[str, Any]:
        """Load a single configuration file.

        Raises:
            ConfigError: If file not found or has syntax errors
        """
        if not fname.exists():
            self.log.error("Config file not found: %s", fname)
            raise ConfigError(str(fname))

        self.log.info("Loading %s", fname)
        with fname.open("rb") as f:
            try:
                return tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                self.log.error("Problem reading %s: %s", fname, e)
                raise ConfigError(str(fname)) from e
