"""
Configuration module with strict environment variable validation.
Server settings must be explicitly set; everything else has a YAML default.

Settings are centralized in config.yaml - modify there, not in code.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Any

import yaml


class ConfigurationError(Exception):
    """Raised when required configuration is missing."""
    pass


# Load YAML config once at module level
_CONFIG_PATH = Path(__file__).parent / "config.yaml"
_YAML_CONFIG: dict = {}


def _load_yaml_config() -> dict:
    """Load configuration from config.yaml file."""
    global _YAML_CONFIG
    if not _YAML_CONFIG:
        if _CONFIG_PATH.exists():
            with open(_CONFIG_PATH, "r") as f:
                _YAML_CONFIG = yaml.safe_load(f) or {}
        else:
            raise ConfigurationError(f"Configuration file not found: {_CONFIG_PATH}")
    return _YAML_CONFIG


def get_yaml_setting(*keys: str, default: Any = None) -> Any:
    """
    Get a setting from config.yaml by nested keys.

    Example: get_yaml_setting("history", "max_entries") -> 1000
    """
    config = _load_yaml_config()
    value = config
    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    return value


def get_required_env(key: str) -> str:
    """Get a required environment variable. Raises if not set."""
    value = os.environ.get(key)
    if value is None or value.strip() == "":
        raise ConfigurationError(
            f"Missing required environment variable: {key}\n"
            f"Please set {key} in your .env file or environment."
        )
    return value.strip()


def get_optional_env(key: str) -> Optional[str]:
    """Get an optional environment variable. Returns None if not set."""
    value = os.environ.get(key)
    if value is None or value.strip() == "":
        return None
    return value.strip()


@dataclass(frozen=True)
class Config:
    """Application configuration - immutable after creation."""

    # Server settings - REQUIRED
    backend_port: int
    backend_host: str

    # CORS settings - REQUIRED
    cors_origins: list[str]

    # History log (None = keep in memory only)
    history_path: Optional[str]
    history_max_entries: int

    # Reverse geocoding (graceful degradation if unreachable)
    geocoding_base_url: Optional[str]
    geocoding_user_agent: str
    geocoding_timeout: float

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables and config.yaml."""

        # Required settings
        backend_port = int(get_required_env("BACKEND_PORT"))
        backend_host = get_required_env("BACKEND_HOST")

        cors_origins_str = get_required_env("CORS_ORIGINS")
        cors_origins = [origin.strip() for origin in cors_origins_str.split(",")]

        # Optional overrides of the YAML defaults
        history_path = get_optional_env("HISTORY_PATH") or get_yaml_setting("history", "path")
        user_agent = get_optional_env("NOMINATIM_USER_AGENT") or get_yaml_setting(
            "geocoding", "user_agent", default="ecotrip/1.0"
        )

        return cls(
            backend_port=backend_port,
            backend_host=backend_host,
            cors_origins=cors_origins,
            history_path=history_path or None,
            history_max_entries=int(get_yaml_setting("history", "max_entries", default=1000)),
            geocoding_base_url=get_yaml_setting("geocoding", "base_url"),
            geocoding_user_agent=user_agent,
            geocoding_timeout=float(get_yaml_setting("geocoding", "timeout_seconds", default=8.0)),
        )

    def validate_apis(self) -> dict[str, bool]:
        """Return which collaborators are configured."""
        return {
            "nominatim": bool(self.geocoding_base_url),
            "history_file": bool(self.history_path),
        }


def load_config() -> Config:
    """Load and validate configuration."""
    from dotenv import load_dotenv

    # Load .env file if present
    load_dotenv()

    return Config.from_env()
