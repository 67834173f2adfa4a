"""
Coinpaprika API client - typed, asyncio-based access to the Coinpaprika market data API.

This package provides a configurable client with one request builder per
endpoint, a closed error taxonomy for API and transport failures, and frozen
dataclass models mirroring the API's JSON resources.
"""

__version__ = "0.1.0"
__license__ = "MIT"

# Core imports for public API
from coinpaprika.core.config import ClientConfig, ConfigError, load_config
from coinpaprika.data.client import Client
from coinpaprika.data.errors import CoinpaprikaError, ErrorKind

__all__ = [
    "__version__",
    "__license__",
    "Client",
    "ClientConfig",
    "ConfigError",
    "load_config",
    "CoinpaprikaError",
    "ErrorKind",
]
