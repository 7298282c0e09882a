"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var
from .errors import ConfigurationError
from .logging import configure_logging
from .paths import BASE_DIR_ENV_VAR, DEFAULT_SHEET_NAME, PathsConfig, get_paths_config

__all__ = [
    "BASE_DIR_ENV_VAR",
    "DEFAULT_SHEET_NAME",
    "ConfigurationError",
    "PathsConfig",
    "configure_logging",
    "get_paths_config",
    "optional_env_var",
]
