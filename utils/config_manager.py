"""Configuration Manager for loading and accessing app settings."""
import copy
import os
from datetime import timedelta
from typing import Any, Dict

import yaml

from data.models import DEFAULT_KEY, SessionSettings


DEFAULT_CONFIG: Dict[str, Any] = {
    "app": {
        "title": "Just Move It",
        "window_width": 300,
        "window_height": 200,
    },
    "logging": {
        "file": "logs/justmoveit.log",
        "level": "INFO",
        "max_bytes": 10485760,
        "backup_count": 5,
    },
    "session": {
        "key": DEFAULT_KEY,
        "interval_seconds": 60,
        "fixed_time_enabled": False,
        "duration_minutes": 60,
        "exit_on_completion": True,
    },
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigManager:
    """Manages application configuration from YAML file."""

    def __init__(self):
        self._config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)

    def load_config(self, config_path: str = "config.yaml"):
        """Load configuration from YAML file on top of the defaults."""
        if os.path.exists(config_path):
            with open(config_path, 'r') as f:
                loaded = yaml.safe_load(f) or {}
            if not isinstance(loaded, dict):
                raise ValueError(f"Configuration root must be a mapping: {config_path}")
            self._config = _merge(DEFAULT_CONFIG, loaded)
        else:
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.
        Example: config.get('session.interval_seconds')
        """
        keys = key_path.split('.')
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def set(self, key_path: str, value: Any):
        """Set configuration value using dot notation."""
        keys = key_path.split('.')
        config = self._config

        for key in keys[:-1]:
            if key not in config:
                config[key] = {}
            config = config[key]

        config[keys[-1]] = value

    def save(self, config_path: str = "config.yaml"):
        """Save current configuration to file."""
        with open(config_path, 'w') as f:
            yaml.dump(self._config, f, default_flow_style=False)

    def session_settings(self) -> SessionSettings:
        """Build validated session settings from the 'session' block."""
        return SessionSettings(
            interval=timedelta(seconds=int(self.get('session.interval_seconds', 60))),
            fixed_time_enabled=bool(self.get('session.fixed_time_enabled', False)),
            execution_duration=timedelta(minutes=int(self.get('session.duration_minutes', 60))),
            key=str(self.get('session.key', DEFAULT_KEY)),
        )
