"""
User configuration management for Photo Duplicate Finder.

Supports configuration from multiple sources (in order of priority):
1. Command-line arguments (highest priority)
2. Environment variables
3. User config file (~/.photodupes/config.json)
4. Default values from config.py (lowest priority)

Configuration file location: ~/.photodupes/config.json

Example config.json:
{
    "default_extensions": ["jpg", "jpeg", "png", "heic"],
    "default_workers": 4
}
"""

import json
import os
from pathlib import Path
from typing import Any, Optional
import logging

from .config import CONFIG_DIR, DEFAULT_EXTENSIONS, DEFAULT_WORKERS
from .utils.validators import validate_workers

logger = logging.getLogger(__name__)


class UserConfig:
    """
    Manages user configuration from file and environment variables.

    The config file is read lazily on first access and cached.
    """

    _instance: Optional['UserConfig'] = None
    _config_data: Optional[dict] = None

    def __new__(cls):
        """Singleton pattern to ensure one config instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def config_dir(self) -> Path:
        """Get the configuration directory path."""
        env_dir = os.getenv('PHOTODUPES_CONFIG_DIR')
        if env_dir:
            return Path(env_dir)
        return Path(CONFIG_DIR)

    @property
    def config_file_path(self) -> Path:
        """Get the configuration file path."""
        return self.config_dir / 'config.json'

    def _load_config_file(self) -> dict:
        """Load configuration from JSON file."""
        if not self.config_file_path.exists():
            return {}

        try:
            with open(self.config_file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to load config file {self.config_file_path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring config file {self.config_file_path}: expected a JSON object")
            return {}

        logger.debug(f"Loaded configuration from {self.config_file_path}")
        return data

    def _get_config_data(self) -> dict:
        """Get cached config data (lazy loading)."""
        if self._config_data is None:
            self._config_data = self._load_config_file()
        return self._config_data

    def reload(self):
        """Reload configuration from file."""
        self._config_data = None

    def get(self, key: str, default: Any = None, env_var: Optional[str] = None) -> Any:
        """
        Get a configuration value with priority:
        1. Environment variable (if env_var specified)
        2. Config file
        3. Default value

        Args:
            key: Configuration key
            default: Default value if not found
            env_var: Optional environment variable name to check

        Returns:
            Configuration value
        """
        if env_var:
            env_value = os.getenv(env_var)
            if env_value is not None:
                # Try to parse as JSON for complex types
                try:
                    return json.loads(env_value)
                except (json.JSONDecodeError, TypeError):
                    return env_value

        config_data = self._get_config_data()
        if key in config_data:
            return config_data[key]

        return default

    @property
    def default_extensions(self) -> list[str]:
        """Extensions or glob patterns scanned when --extensions is omitted."""
        value = self.get(
            'default_extensions',
            default=list(DEFAULT_EXTENSIONS),
            env_var='PHOTODUPES_EXTENSIONS'
        )
        if isinstance(value, str):
            return [part.strip() for part in value.split(',') if part.strip()]
        if isinstance(value, list) and all(isinstance(part, str) for part in value):
            return list(value)
        logger.warning(
            f"Invalid default_extensions value {value!r} (expected a list of strings "
            f"or a comma-separated string), using built-in defaults"
        )
        return list(DEFAULT_EXTENSIONS)

    @property
    def default_workers(self) -> int:
        """Number of parallel hashing workers."""
        value = self.get(
            'default_workers',
            default=DEFAULT_WORKERS,
            env_var='PHOTODUPES_WORKERS'
        )
        if isinstance(value, bool):
            is_valid, error = False, "Workers must be an integer"
        else:
            is_valid, error = validate_workers(value)
        if not is_valid:
            logger.warning(f"Invalid default_workers value {value!r} ({error}), using {DEFAULT_WORKERS}")
            return DEFAULT_WORKERS
        return int(value)


# Global instance
_user_config = UserConfig()


def get_user_config() -> UserConfig:
    """Get the global UserConfig instance."""
    return _user_config
