"""
Configuration management for dosshell
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class Config:
    """Configuration manager for dosshell"""

    DEFAULT_CONFIG_PATH = Path.home() / ".dosshell" / "config.json"

    # Default configuration
    DEFAULTS = {
        "shell": {
            "username": "USER",
            "history_size": 1000
        },
        "storage": {
            "path": "~/.dosshell/vfs.json",
            "persist": True,
            "async_writes": True
        },
        "filesystem": {
            "strict_rm": False
        }
    }

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration

        Args:
            config_path: Optional custom config path
        """
        self.config_path = Path(config_path) if config_path else self.DEFAULT_CONFIG_PATH
        self.config = self.load()
        # Command line values, never saved
        self.overrides: Dict[str, Any] = {}

    def load(self) -> Dict[str, Any]:
        """Load configuration from file or create default"""
        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    user_config = json.load(f)
                if not isinstance(user_config, dict):
                    raise ValueError("top level must be an object")
                # Merge with defaults (user config takes precedence)
                return self._deep_merge(copy.deepcopy(self.DEFAULTS), user_config)
            except (json.JSONDecodeError, ValueError) as e:
                logger.warning(f"Invalid config file {self.config_path}: {e}, using defaults")
                return copy.deepcopy(self.DEFAULTS)
            except (IOError, OSError) as e:
                logger.warning(f"Error reading config file: {e}, using defaults")
                return copy.deepcopy(self.DEFAULTS)
        else:
            # Create default config file
            try:
                self.save(self.DEFAULTS)
            except OSError as e:
                logger.warning(f"Could not write default config to {self.config_path}: {e}")
            return copy.deepcopy(self.DEFAULTS)

    def save(self, config: Optional[Dict[str, Any]] = None):
        """Save configuration to file"""
        config = config or self.config

        # Ensure directory exists
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.config_path, 'w') as f:
            json.dump(config, f, indent=2)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation key

        Examples:
            config.get('shell.username')
            config.get('storage.persist', True)
        """
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_int(self, key: str, default: int, minimum: Optional[int] = None) -> int:
        """
        Get an integer value by dot-notation key

        Values that are not integers (or fall below minimum) are logged and
        replaced by default.
        """
        value = self.get(key, default)
        if not isinstance(value, bool):
            try:
                number = int(value)
            except (TypeError, ValueError):
                pass
            else:
                if minimum is None or number >= minimum:
                    return number

        logger.warning(f"Invalid value for {key}: {value!r}, using {default}")
        return default

    def set(self, key: str, value: Any):
        """
        Set configuration value by dot-notation key

        Examples:
            config.set('filesystem.strict_rm', True)
        """
        keys = key.split('.')
        target = self.config

        # Navigate to parent
        for k in keys[:-1]:
            if k not in target:
                target[k] = {}
            target = target[k]

        target[keys[-1]] = value

        self.save()

    @property
    def username(self) -> str:
        """Prompt user name; DOSSHELL_USER wins over the config file"""
        return os.environ.get("DOSSHELL_USER") or self.get('shell.username', 'USER')

    @property
    def storage_path(self) -> Path:
        """Snapshot file: command line, then DOSSHELL_STORAGE, then the config file"""
        raw = (self.overrides.get('storage.path')
               or os.environ.get("DOSSHELL_STORAGE")
               or self.get('storage.path'))
        return Path(raw).expanduser()

    def _deep_merge(self, base: Dict, override: Dict) -> Dict:
        """Deep merge two dictionaries"""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                base[key] = self._deep_merge(base[key], value)
            else:
                base[key] = value
        return base


# Global config instance
_config = None

def get_config(config_path: Optional[Path] = None) -> Config:
    """Get global config instance"""
    global _config
    if _config is None or (config_path is not None and Path(config_path) != _config.config_path):
        _config = Config(config_path)
    return _config
