"""Data layer: API client, request builders, resource models and errors."""

from .client import Client
from .errors import (
    ApiConnectionError,
    CoinpaprikaError,
    DecodeError,
    ErrorKind,
    InsufficientPlanError,
    InternalServerError,
    InvalidApiKeyError,
    InvalidParameterError,
    InvalidRequestError,
    RateLimitError,
    StatusError,
    UnexpectedStatusError,
)
from .http import PreparedRequest, Response
from .models import (
    OHLCV,
    APIModel,
    Change,
    Coin,
    CoinContract,
    CoinDetails,
    CoinEvent,
    CoinExchange,
    CoinMarket,
    CoinTag,
    Contract,
    CurrentMonthUsage,
    Exchange,
    ExchangeMarket,
    Fiat,
    Global,
    HistoricalTick,
    KeyInfo,
    KeyUsage,
    Parent,
    Person,
    PlanStatus,
    Position,
    PriceConversion,
    Tag,
    TeamMember,
    Ticker,
    Tweet,
)

__all__ = [
    'Client',
    'PreparedRequest',
    'Response',
    'ApiConnectionError',
    'CoinpaprikaError',
    'DecodeError',
    'ErrorKind',
    'InsufficientPlanError',
    'InternalServerError',
    'InvalidApiKeyError',
    'InvalidParameterError',
    'InvalidRequestError',
    'RateLimitError',
    'StatusError',
    'UnexpectedStatusError',
    'APIModel',
    'Change',
    'Coin',
    'CoinContract',
    'CoinDetails',
    'CoinEvent',
    'CoinExchange',
    'CoinMarket',
    'CoinTag',
    'Contract',
    'CurrentMonthUsage',
    'Exchange',
    'ExchangeMarket',
    'Fiat',
    'Global',
    'HistoricalTick',
    'KeyInfo',
    'KeyUsage',
    'OHLCV',
    'Parent',
    'Person',
    'PlanStatus',
    'Position',
    'PriceConversion',
    'Tag',
    'TeamMember',
    'Ticker',
    'Tweet',
]
