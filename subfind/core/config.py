"""
Configuration Manager
Defaults for every source, optionally overridden by a JSON file.
"""

import json
import os
from pathlib import Path
from typing import Dict, Any, Optional

from . import console


class ConfigManager:
    """
    Manages configuration loading.
    Provides defaults for missing values.
    """

    DEFAULTS = {
        'http': {
            'timeout': 30,
            'user_agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36',
            'verify_ssl': True
        },
        'sources': {
            'certspotter': {
                'enabled': True,
                'url': 'https://certspotter.com/api/v0/certs?domain={domain}'
            },
            'hackertarget': {
                'enabled': True,
                'url': 'https://api.hackertarget.com/hostsearch/?q={domain}'
            },
            'threatcrowd': {
                'enabled': True,
                'url': 'https://www.threatcrowd.org/searchApi/v2/domain/report/?domain={domain}'
            },
            'crtsh': {
                'enabled': True,
                'url': 'https://crt.sh/?q=%25.{domain}&output=json'
            },
            'facebook': {
                'enabled': True,
                'url': 'https://graph.facebook.com/certificates?fields=domains&access_token={app_id}|{app_secret}&query=*.{domain}',
                'app_id': '',
                'app_secret': ''
            }
        }
    }

    # Credentials that may come from the environment when the file leaves them empty
    ENV_OVERRIDES = {
        ('sources', 'facebook', 'app_id'): 'FB_APP_ID',
        ('sources', 'facebook', 'app_secret'): 'FB_APP_SECRET'
    }

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to a JSON config (optional, uses defaults if not provided)
        """
        self.config_file = Path(config_file) if config_file else None
        self.config = self._load_config()
        self._apply_env()

    def _load_config(self) -> Dict:
        """Load configuration, merging with defaults"""
        if self.config_file and self.config_file.exists():
            # Try different encodings (handles Windows BOM issues)
            encodings = ['utf-8-sig', 'utf-8', 'utf-16', 'latin-1']
            user_config = None

            for encoding in encodings:
                try:
                    with open(self.config_file, 'r', encoding=encoding) as f:
                        user_config = json.load(f)
                    break
                except (UnicodeDecodeError, UnicodeError):
                    continue
                except json.JSONDecodeError as e:
                    raise ValueError(f"Invalid JSON in config file: {e}")

            if user_config is None:
                raise ValueError("Could not decode config file with any supported encoding")
            if not isinstance(user_config, dict):
                raise ValueError("Config file must contain a JSON object")

            config = self._deep_merge(self.DEFAULTS, user_config)
            console.info('CONFIG', f"Loaded: {self.config_file}")
        else:
            config = self._deep_merge(self.DEFAULTS, {})
            if self.config_file:
                console.info('CONFIG', f"File not found, using defaults: {self.config_file}")
            else:
                console.info('CONFIG', "Using default configuration")

        return config

    def _deep_merge(self, base: Dict, override: Dict) -> Dict:
        """
        Deep merge two dictionaries.
        Override values take precedence; nested dicts in base are copied.
        """
        result = {
            key: self._deep_merge(value, {}) if isinstance(value, dict) else value
            for key, value in base.items()
        }

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def _apply_env(self):
        for keys, env_name in self.ENV_OVERRIDES.items():
            if self.get(*keys):
                continue
            value = os.environ.get(env_name, '')
            if value:
                section = self.config
                for key in keys[:-1]:
                    section = section.setdefault(key, {})
                section[keys[-1]] = value

    def get(self, *keys, default: Any = None) -> Any:
        """
        Get nested configuration value.

        Args:
            *keys: Path to config value (e.g., 'sources', 'crtsh', 'url')
            default: Default value if path not found

        Returns:
            Configuration value or default
        """
        value = self.config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def source_config(self, name: str) -> Dict:
        """Config for one source: its own section on top of the shared http settings"""
        return self._deep_merge(self.get('http', default={}), self.get('sources', name, default={}))
