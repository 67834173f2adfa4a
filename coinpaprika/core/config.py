"""
Client configuration with YAML defaults and environment overrides.

A ``ClientConfig`` is immutable once built. ``load_config`` assembles one from
an optional YAML file (``coinpaprika:`` section) and ``COINPAPRIKA_*``
environment variables, the latter also read from a ``.env`` file.
"""

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

API_URL = "https://api.coinpaprika.com/v1/"
API_URL_PRO = "https://api-pro.coinpaprika.com/v1/"
DEFAULT_USER_AGENT = "coinpaprika-api-python-client"

ENV_PREFIX = "COINPAPRIKA"


class ConfigError(Exception):
    """Configuration-related errors."""
    pass


@dataclass(frozen=True)
class ClientConfig:
    """Connection-level configuration shared by every request of a client."""

    base_url: str = API_URL
    api_key: Optional[str] = None
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = 10.0
    max_retries: int = 3
    retry_delay: float = 0.5
    backoff_factor: float = 2.0

    def __post_init__(self):
        if not self.base_url:
            raise ConfigError("base_url must not be empty")
        if self.timeout <= 0:
            raise ConfigError(f"timeout must be positive, got {self.timeout}")
        if self.max_retries < 0:
            raise ConfigError(f"max_retries must not be negative, got {self.max_retries}")
        if self.retry_delay < 0 or self.backoff_factor < 1:
            raise ConfigError("retry_delay must be >= 0 and backoff_factor >= 1")

    @classmethod
    def free(cls, **overrides) -> "ClientConfig":
        """Free tier: no credential, public base URL unless ``base_url`` is given."""
        if overrides.pop("api_key", None) is not None:
            raise ConfigError("the free tier takes no api_key; use ClientConfig.keyed")
        overrides.setdefault("base_url", API_URL)
        return cls(api_key=None, **overrides)

    @classmethod
    def keyed(cls, api_key: str, **overrides) -> "ClientConfig":
        """Keyed tier: ``api_key`` sent as the Authorization header, pro base URL
        unless ``base_url`` is given."""
        if not api_key:
            raise ConfigError("api_key must not be empty")
        overrides.setdefault("base_url", API_URL_PRO)
        return cls(api_key=api_key, **overrides)

    @property
    def has_api_key(self) -> bool:
        return self.api_key is not None

    def with_overrides(self, **changes) -> "ClientConfig":
        return replace(self, **changes)


_FIELD_TYPES = {
    "base_url": str,
    "api_key": str,
    "user_agent": str,
    "timeout": float,
    "max_retries": int,
    "retry_delay": float,
    "backoff_factor": float,
}


def _convert_value(key: str, value: Any) -> Any:
    """Convert a raw YAML or environment value to the type of ``key``."""
    target = _FIELD_TYPES[key]
    if value is None:
        return None
    try:
        if target is int and isinstance(value, str):
            return int(value.strip())
        return target(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid value for {key}: {value!r}") from e


def _load_yaml_section(config_file: Path) -> Dict[str, Any]:
    try:
        with open(config_file, "r") as f:
            file_config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config from {config_file}: {e}") from e

    if not isinstance(file_config, dict):
        raise ConfigError(f"{config_file} must contain a mapping")

    section = file_config.get("coinpaprika", {}) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"'coinpaprika' section in {config_file} must be a mapping")

    unknown = set(section) - set(_FIELD_TYPES)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

    logger.debug(f"Loaded config from {config_file}")
    return dict(section)


def _env_overrides(environ) -> Dict[str, Any]:
    overrides = {}
    for key in _FIELD_TYPES:
        env_key = f"{ENV_PREFIX}_{key.upper()}"
        if environ.get(env_key):
            overrides[key] = environ[env_key]
            logger.debug(f"Applied env override: {key}")
    return overrides


def load_config(config_file: Optional[Union[str, Path]] = None,
                env_file: Optional[Union[str, Path]] = None,
                use_env: bool = True) -> ClientConfig:
    """Build a ClientConfig from a YAML file and environment overrides.

    Args:
        config_file: Optional YAML file with a ``coinpaprika`` section
        env_file: Optional dotenv file; defaults to ``.env`` lookup
        use_env: Whether ``COINPAPRIKA_*`` variables override file values

    Returns:
        The resulting immutable configuration

    Raises:
        ConfigError: if a file cannot be read or a value is invalid
    """
    values: Dict[str, Any] = {}

    if config_file is not None:
        values.update(_load_yaml_section(Path(config_file)))

    if use_env:
        load_dotenv(dotenv_path=env_file)
        values.update(_env_overrides(os.environ))

    values = {key: _convert_value(key, value) for key, value in values.items()}
    values = {key: value for key, value in values.items() if value is not None}

    # A key without an explicit base URL selects the pro tier
    if values.get("api_key") and "base_url" not in values:
        values["base_url"] = API_URL_PRO

    return ClientConfig(**values)
