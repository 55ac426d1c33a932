# betterrest/config/config_manager.py
import logging
import os

import yaml

logger = logging.getLogger(__name__)

PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), 'app_config.yaml')


class ConfigManager:
    """Central configuration manager"""

    def __init__(self, config_path=None):
        self.config_path = config_path or DEFAULT_CONFIG_PATH
        self.config = self._load_config()

    def _load_config(self):
        """Load configuration from file"""
        with open(self.config_path, 'r') as file:
            config = yaml.safe_load(file) or {}
        if not isinstance(config, dict):
            raise ValueError(f"Configuration in {self.config_path} must be a mapping")
        logger.info(f"Loaded configuration from {self.config_path}")
        return config

    def get(self, key, default=None):
        """Get configuration value"""
        # Support nested keys with dot notation
        keys = key.split('.')
        value = self.config
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def section(self, key):
        """Get a configuration section as a dict (empty if missing)"""
        value = self.get(key, {})
        return dict(value) if isinstance(value, dict) else {}

    def resolve_path(self, key, default=None):
        """Get a path setting; relative paths are resolved against the betterrest package directory"""
        value = self.get(key, default)
        if value is None or os.path.isabs(value):
            return value
        return os.path.join(PACKAGE_ROOT, value)
