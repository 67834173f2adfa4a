"""Data models for Coinpaprika API resources.

Every model is a frozen dataclass mirroring the JSON object the API returns.
Field names follow the API, except where the API name collides with a Python
builtin (``type``); those fields carry their JSON name in the field metadata.
"""

import typing
from dataclasses import MISSING, dataclass, field, fields
from enum import Enum
from functools import lru_cache
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

T = TypeVar("T", bound="APIModel")

_NONE_TYPE = type(None)


def json_field(name: str, **kwargs) -> Any:
    """Declare a dataclass field whose JSON key differs from the attribute name."""
    return field(metadata={"json": name}, **kwargs)


@lru_cache(maxsize=None)
def _type_hints(cls: type) -> Dict[str, Any]:
    return typing.get_type_hints(cls)


def _check(value: Any, expected: tuple, path: str, type_name: str) -> Any:
    # bool is an int subclass; JSON true/false must not pass as a number
    if isinstance(value, bool) and bool not in expected:
        raise TypeError(f"{path}: expected {type_name}, got bool")
    if not isinstance(value, expected):
        raise TypeError(f"{path}: expected {type_name}, got {type(value).__name__}")
    return value


def _decode_value(tp: Any, value: Any, path: str) -> Any:
    if tp is Any:
        return value

    origin = typing.get_origin(tp)
    if origin is Union:
        args = [arg for arg in typing.get_args(tp) if arg is not _NONE_TYPE]
        if value is None:
            return None
        return _decode_value(args[0], value, path)

    if value is None:
        raise TypeError(f"{path}: null is not allowed")

    if origin is list:
        _check(value, (list,), path, "array")
        item_type = (typing.get_args(tp) or (Any,))[0]
        return [_decode_value(item_type, item, f"{path}[{i}]") for i, item in enumerate(value)]

    if origin is dict:
        return _check(value, (dict,), path, "object")

    if isinstance(tp, type) and issubclass(tp, APIModel):
        return tp._decode(value, path)

    if tp is float:
        return _check(value, (int, float), path, "number")
    if tp is int:
        return _check(value, (int,), path, "integer")
    if tp is bool:
        return _check(value, (bool,), path, "boolean")
    if tp is str:
        return _check(value, (str,), path, "string")

    return value


def _encode_value(value: Any) -> Any:
    if isinstance(value, APIModel):
        return value.to_dict()
    if isinstance(value, list):
        return [_encode_value(item) for item in value]
    return value


def decode(tp: Any, data: Any, path: Optional[str] = None) -> Any:
    """Decode parsed JSON into ``tp``.

    ``tp`` may be a model class, ``List[...]`` of models or primitives, or
    ``Any`` for opaque JSON. Raises TypeError/ValueError when ``data`` does
    not match.
    """
    return _decode_value(tp, data, path or getattr(tp, "__name__", str(tp)))


@dataclass(frozen=True)
class APIModel:
    """Base class for all API resource models."""

    @classmethod
    def _decode(cls: Type[T], data: Any, path: str) -> T:
        _check(data, (dict,), path, "object")

        hints = _type_hints(cls)
        kwargs = {}
        for f in fields(cls):
            key = f.metadata.get("json", f.name)
            if key not in data:
                if f.default is MISSING and f.default_factory is MISSING:
                    raise ValueError(f"{path}: missing required field '{key}'")
                continue
            kwargs[f.name] = _decode_value(hints[f.name], data[key], f"{path}.{key}")

        return cls(**kwargs)

    @classmethod
    def from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
        """Create instance from a decoded JSON object."""
        return cls._decode(data, cls.__name__)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary keyed by the API's field names."""
        return {
            f.metadata.get("json", f.name): _encode_value(getattr(self, f.name))
            for f in fields(self)
        }


#
# Coins
#

@dataclass(frozen=True)
class Coin(APIModel):
    """Basic information about a cryptocurrency.

    ``rank`` is 0 when ``is_active`` is false.
    """

    id: str
    name: str
    symbol: str
    rank: int
    is_new: bool
    is_active: bool
    coin_type: str = json_field("type")


@dataclass(frozen=True)
class Parent(APIModel):
    """Parent coin (deprecated by the API in favour of ``contracts``)."""

    id: str
    name: str
    symbol: str


@dataclass(frozen=True)
class CoinTag(APIModel):
    """Tag assigned to a coin."""

    id: str
    name: str
    coin_counter: Optional[int] = None
    ico_counter: Optional[int] = None


@dataclass(frozen=True)
class TeamMember(APIModel):
    id: str
    name: str
    position: Optional[str] = None


@dataclass(frozen=True)
class CoinContract(APIModel):
    """Contract of a token on a given platform (``eth-ethereum``, ``trx-tron``, ...)."""

    contract: str
    platform: str
    contract_type: Optional[str] = json_field("type", default=None)


@dataclass(frozen=True)
class CoinDetails(APIModel):
    """Descriptive information about a single coin, without price or volume data."""

    id: str
    name: str
    symbol: str
    parent: Optional[Parent] = None
    rank: Optional[int] = None
    is_new: Optional[bool] = None
    is_active: Optional[bool] = None
    coin_type: Optional[str] = json_field("type", default=None)
    logo: Optional[str] = None
    tags: Optional[List[CoinTag]] = None
    team: Optional[List[TeamMember]] = None
    description: Optional[str] = None
    message: Optional[str] = None
    open_source: Optional[bool] = None
    hardware_wallet: Optional[bool] = None
    started_at: Optional[str] = None
    development_status: Optional[str] = None
    proof_type: Optional[str] = None
    org_structure: Optional[str] = None
    hash_algorithm: Optional[str] = None
    contract: Optional[str] = None
    platform: Optional[str] = None
    contracts: Optional[List[CoinContract]] = None
    links: Any = None
    links_extended: Any = None
    whitepaper: Any = None
    first_data_at: Optional[str] = None
    last_data_at: Optional[str] = None


@dataclass(frozen=True)
class Tweet(APIModel):
    """Tweet from the official Twitter profile of a coin."""

    date: str
    status_id: str
    user_name: Optional[str] = None
    user_image_link: Optional[str] = None
    status: Optional[str] = None
    is_retweet: Optional[bool] = None
    retweet_count: Optional[int] = None
    like_count: Optional[int] = None
    status_link: Optional[str] = None
    media_link: Optional[str] = None
    youtube_link: Optional[str] = None


@dataclass(frozen=True)
class CoinEvent(APIModel):
    id: str
    date: str
    name: str
    date_to: Optional[str] = None
    description: Optional[str] = None
    is_conference: Optional[bool] = None
    link: Optional[str] = None
    proof_image_link: Optional[str] = None


@dataclass(frozen=True)
class Fiat(APIModel):
    name: str
    symbol: str


@dataclass(frozen=True)
class CoinExchange(APIModel):
    """Exchange where a given coin is traded."""

    id: str
    name: str
    fiats: Optional[List[Fiat]] = None
    adjusted_volume_24h_share: Optional[float] = None


@dataclass(frozen=True)
class CoinMarket(APIModel):
    """Market for a given coin. ``quotes`` is keyed by quote currency code."""

    exchange_id: str
    pair: str
    exchange_name: Optional[str] = None
    base_currency_id: Optional[str] = None
    base_currency_name: Optional[str] = None
    quote_currency_id: Optional[str] = None
    quote_currency_name: Optional[str] = None
    market_url: Optional[str] = None
    category: Optional[str] = None
    fee_type: Optional[str] = None
    outlier: Optional[bool] = None
    adjusted_volume_24h_share: Optional[float] = None
    quotes: Any = None
    last_updated: Optional[str] = None


@dataclass(frozen=True)
class OHLCV(APIModel):
    """Open/high/low/close values with volume and market capitalization."""

    time_open: str
    time_close: str
    open: Optional[float] = None
    high: Optional[float] = None
    low: Optional[float] = None
    close: Optional[float] = None
    volume: Optional[float] = None
    market_cap: Optional[float] = None


#
# Tickers
#

@dataclass(frozen=True)
class Ticker(APIModel):
    """Price data of a single cryptocurrency.

    ``quotes`` maps each requested quote currency to its price figures; its
    shape depends on the ``quotes`` query parameter.
    """

    id: str
    name: str
    symbol: str
    rank: Optional[int] = None
    circulating_supply: Optional[float] = None
    total_supply: Optional[float] = None
    max_supply: Optional[float] = None
    beta_value: Optional[float] = None
    first_data_at: Optional[str] = None
    last_updated: Optional[str] = None
    quotes: Any = None


@dataclass(frozen=True)
class HistoricalTick(APIModel):
    """Historical price point; the API returns them in ascending timestamp order."""

    timestamp: str
    price: Optional[float] = None
    volume_24h: Optional[float] = None
    market_cap: Optional[float] = None


#
# Exchanges
#

@dataclass(frozen=True)
class Exchange(APIModel):
    id: str
    name: str
    active: Optional[bool] = None
    website_status: Optional[bool] = None
    api_status: Optional[bool] = None
    description: Optional[str] = None
    message: Optional[str] = None
    links: Any = None
    markets_data_fetched: Optional[bool] = None
    adjusted_rank: Optional[int] = None
    reported_rank: Optional[int] = None
    currencies: Optional[int] = None
    markets: Optional[int] = None
    fiats: Optional[List[Fiat]] = None
    quotes: Any = None
    last_updated: Optional[str] = None


@dataclass(frozen=True)
class ExchangeMarket(APIModel):
    pair: str
    base_currency_id: str
    quote_currency_id: str
    base_currency_name: Optional[str] = None
    quote_currency_name: Optional[str] = None
    market_url: Optional[str] = None
    category: Optional[str] = None
    fee_type: Optional[str] = None
    outlier: Optional[bool] = None
    reported_volume_24h_share: Optional[float] = None
    quotes: Any = None
    last_updated: Optional[str] = None


#
# Global
#

@dataclass(frozen=True)
class Global(APIModel):
    """Market overview: totals, all-time highs and 24h changes.

    ``last_updated`` is a Unix timestamp in seconds.
    """

    market_cap_usd: Optional[float] = None
    volume_24h_usd: Optional[float] = None
    bitcoin_dominance_percentage: Optional[float] = None
    cryptocurrencies_number: Optional[int] = None
    market_cap_ath_value: Optional[float] = None
    market_cap_ath_date: Optional[str] = None
    volume_24h_ath_value: Optional[float] = None
    volume_24h_ath_date: Optional[str] = None
    market_cap_change_24h: Optional[float] = None
    volume_24h_change_24h: Optional[float] = None
    last_updated: Optional[int] = None


#
# Key
#

class PlanStatus(Enum):
    ACTIVE = "active"
    PAST_DUE = "past_due"
    INACTIVE = "inactive"


@dataclass(frozen=True)
class CurrentMonthUsage(APIModel):
    requests_made: int
    requests_left: int

    @property
    def is_unlimited(self) -> bool:
        """The API reports -1 requests left for unlimited plans."""
        return self.requests_left == -1


@dataclass(frozen=True)
class KeyUsage(APIModel):
    current_month: CurrentMonthUsage
    message: Optional[str] = None


@dataclass(frozen=True)
class KeyInfo(APIModel):
    """API key plan and usage information."""

    plan: str
    plan_status: str
    usage: KeyUsage
    plan_started_at: Optional[str] = None
    portal_url: Optional[str] = None

    @property
    def status(self) -> Optional[PlanStatus]:
        """``plan_status`` as a PlanStatus; None for values this client does not know."""
        try:
            return PlanStatus(self.plan_status)
        except ValueError:
            return None

    @property
    def is_active(self) -> bool:
        return self.status is PlanStatus.ACTIVE


#
# Tags
#

@dataclass(frozen=True)
class Tag(APIModel):
    """Tag with its counters.

    ``coins`` and ``icos`` are only present when requested through
    ``additional_fields``.
    """

    id: str
    name: str
    coin_counter: Optional[int] = None
    ico_counter: Optional[int] = None
    description: Optional[str] = None
    tag_type: Optional[str] = json_field("type", default=None)
    coins: Optional[List[str]] = None
    icos: Optional[List[str]] = None


#
# People
#

@dataclass(frozen=True)
class Position(APIModel):
    coin_id: str
    coin_name: Optional[str] = None
    position: Optional[str] = None


@dataclass(frozen=True)
class Person(APIModel):
    id: str
    name: str
    description: Optional[str] = None
    teams_count: Optional[int] = None
    links: Any = None
    positions: Optional[List[Position]] = None


#
# Tools
#

@dataclass(frozen=True)
class PriceConversion(APIModel):
    """Result of converting ``amount`` of the base currency into the quote currency."""

    base_currency_id: str
    quote_currency_id: str
    amount: float
    price: float
    base_currency_name: Optional[str] = None
    base_price_last_updated: Optional[str] = None
    quote_currency_name: Optional[str] = None
    quote_price_last_updated: Optional[str] = None


#
# Contracts
#

@dataclass(frozen=True)
class Contract(APIModel):
    """Contract listed on a platform: its address and the coin id it belongs to."""

    address: str
    id: str
    contract_type: Optional[str] = json_field("type", default=None)


#
# Changelog
#

@dataclass(frozen=True)
class Change(APIModel):
    """Coin id change made by Coinpaprika moderators."""

    currency_id: str
    old_id: str
    new_id: str
    changed_at: str
