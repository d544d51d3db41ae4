"""
Configuration for the FieldClimate ET0 proxy.

Settings come from a JSON file; the HMAC keys and a few deployment values
are normally injected through environment variables instead.
"""

import json
import os
from pathlib import Path
from typing import Dict, Any, Optional

from . import constants


# Environment variable -> dotted configuration key
ENV_OVERRIDES = {
    "FIELDCLIMATE_BASE_URL": "api.base_url",
    "FIELDCLIMATE_PUBLIC_KEY": "authentication.public_key",
    "FIELDCLIMATE_PRIVATE_KEY": "authentication.private_key",
    "ENVIRONMENT": "environment",
}

REQUIRED_KEYS = {
    "api": ("base_url", "timeout", "max_retries"),
}


class Config:
    """Configuration manager for the application."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var
                        or defaults to 'config.json'

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If required sections or keys are missing
        """
        self.config_file = config_file or os.getenv("CONFIG_FILE", "config.json")
        self.config: Dict[str, Any] = self._read(Path(self.config_file))
        for env_name, key in ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value:
                self.set(key, value)
        self._validate()

    @staticmethod
    def _read(path: Path) -> Dict[str, Any]:
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")
        with open(path, "r", encoding="utf-8") as f:
            content = json.load(f)
        if not isinstance(content, dict):
            raise ValueError(f"Configuration file must contain a JSON object: {path}")
        return content

    def _validate(self) -> None:
        missing_sections = [s for s in REQUIRED_KEYS if not isinstance(self.config.get(s), dict)]
        if missing_sections:
            raise ValueError(
                f"Missing required configuration sections: {', '.join(missing_sections)}"
            )

        missing_keys = [
            f"{section}.{key}"
            for section, keys in REQUIRED_KEYS.items()
            for key in keys
            if key not in self.config[section]
        ]
        if missing_keys:
            raise ValueError(
                f"Missing required configuration keys: {', '.join(missing_keys)}"
            )

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'api.base_url')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value: Any = self.config
        for part in key.split("."):
            if not isinstance(value, dict) or value.get(part) is None:
                return default
            value = value[part]
        return value

    def set(self, key: str, value: Any) -> None:
        """Set a value by dotted key, creating intermediate sections."""
        *sections, last = key.split(".")
        target = self.config
        for section in sections:
            target = target.setdefault(section, {})
        target[last] = value

    # API

    @property
    def api_base_url(self) -> str:
        return self.get("api.base_url", "")

    @property
    def api_timeout(self) -> int:
        """Request timeout in seconds."""
        return self.get("api.timeout", 30)

    @property
    def api_max_retries(self) -> int:
        return self.get("api.max_retries", 3)

    @property
    def api_verify_ssl(self) -> bool:
        return self.get("api.verify_ssl", True)

    # Credentials

    @property
    def public_key(self) -> Optional[str]:
        return self.get("authentication.public_key")

    @property
    def private_key(self) -> Optional[str]:
        return self.get("authentication.private_key")

    @property
    def has_credentials(self) -> bool:
        """Whether both HMAC keys are configured."""
        return bool(self.public_key and self.private_key)

    # Behaviour

    @property
    def cache_ttl(self) -> int:
        """Lifetime of cached station metadata in seconds (0 disables)."""
        return self.get("cache.ttl_seconds", 300)

    @property
    def hours_back(self) -> int:
        """Default window of readings aggregated for ET0."""
        return self.get("processing.hours_back", 24)

    @property
    def stations_file(self) -> Optional[str]:
        """Station metadata file; the bundled table when unset."""
        return self.get("stations.file")

    @property
    def default_station_id(self) -> str:
        return self.get("stations.default_id", constants.DEFAULT_STATION_ID)

    def __repr__(self) -> str:
        """String representation of config (never includes keys)."""
        return (
            f"Config(file={self.config_file}, env={self.get('environment')}, "
            f"credentials={'set' if self.has_credentials else 'missing'})"
        )
