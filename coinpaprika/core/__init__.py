"""Configuration and logging shared by the client and the CLI."""

from .config import API_URL, API_URL_PRO, DEFAULT_USER_AGENT, ClientConfig, ConfigError, load_config
from .logging import StructuredFormatter, setup_logging

__all__ = [
    'API_URL',
    'API_URL_PRO',
    'DEFAULT_USER_AGENT',
    'ClientConfig',
    'ConfigError',
    'load_config',
    'StructuredFormatter',
    'setup_logging',
]
