#!/usr/bin/env python3
"""
Configuration management for moz-paste.
Holds runtime settings using a singleton pattern. Settings come from
built-in defaults, optionally overridden by environment variables.
"""

import os
import math
from typing import Dict, Any, Optional

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/129.0.0.0 Safari/537.36"
)


def _positive_float(raw: str) -> float:
    value = float(raw)
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"expected a positive number, got {raw}")
    return value


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value <= 0:
        raise ValueError(f"expected a positive integer, got {raw}")
    return value


class Config:
    _instance: Optional["Config"] = None
    _initialized = False

    # Default configuration settings
    DEFAULT_CONFIG = {
        "timeout": 30,  # seconds per HTTP request
        "max_redirects": 1024,
        "user_agent": DEFAULT_USER_AGENT,
        "log_folder": None,  # no log file unless set
        "log_basename": "mozpaste",
        "max_log_size_mb": 5,
        "max_log_backups": 10,
    }

    # Environment variable -> (config key, converter)
    ENV_OVERRIDES = {
        "MOZPASTE_TIMEOUT": ("timeout", _positive_float),
        "MOZPASTE_MAX_REDIRECTS": ("max_redirects", _positive_int),
        "MOZPASTE_LOG_FOLDER": ("log_folder", str),
    }

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Config, cls).__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self._config = self._load_config()
            self._initialized = True

    def _load_config(self, environ=None) -> Dict[str, Any]:
        """
        Build the configuration from defaults and environment overrides.
        Malformed or out-of-range override values are ignored.

        Args:
            environ: Mapping to read overrides from (default: os.environ)

        Returns:
            Dict: Configuration settings
        """
        if environ is None:
            environ = os.environ

        config = self.DEFAULT_CONFIG.copy()
        for env_name, (key, convert) in self.ENV_OVERRIDES.items():
            raw = environ.get(env_name)
            if not raw:
                continue
            try:
                config[key] = convert(raw)
            except ValueError:
                print(f"Warning: Ignoring invalid value for {env_name}: {raw}")

        return config

    def reload(self, environ=None) -> None:
        """Re-read defaults and environment overrides."""
        self._config = self._load_config(environ)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key doesn't exist

        Returns:
            The configuration value or default if not found
        """
        return self._config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value for the running process.

        Args:
            key: Configuration key
            value: Value to set
        """
        self._config[key] = value


# Create a single instance of the Config class
config = Config()
