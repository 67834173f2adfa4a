"""Shared machinery for per-endpoint request builders."""

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, ClassVar, Dict, List, Optional, Sequence, Union

import aiohttp

from ..errors import ApiConnectionError, DecodeError, UnexpectedStatusError
from ..http import PreparedRequest, Response
from ..models import decode

if TYPE_CHECKING:
    from ..client import Client

logger = logging.getLogger(__name__)

DateLike = Union[str, int]


def utc_today() -> str:
    """Current UTC calendar date as ``YYYY-MM-DD``."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%d")


def as_list(values: Union[str, Sequence[str]]) -> List[str]:
    """Normalize a single value or a sequence of values to a list of strings."""
    if isinstance(values, str):
        return [values]
    return [str(value) for value in values]


def join_values(values: Sequence[str]) -> Optional[str]:
    """Comma-join a list parameter; empty lists are omitted (None)."""
    return ",".join(values) if values else None


async def decode_response(response: Response, result_type: Any) -> Any:
    """Read the body of ``response`` and decode it into ``result_type``.

    Raises:
        UnexpectedStatusError: for error statuses the client passed through
        DecodeError: when the body is not JSON of the expected shape
        ApiConnectionError: when the connection drops or times out while reading the body
    """
    raw = response.response
    try:
        body = await raw.read()
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        raise ApiConnectionError(f"Failed to read response body: {e!r}", cause=e) from e
    finally:
        raw.release()

    if raw.status >= 400:
        raise UnexpectedStatusError(
            raw.status,
            body.decode("utf-8", errors="replace"),
            url=response.request.url
        )

    target = result_type.__name__ if isinstance(result_type, type) else str(result_type)
    try:
        payload = json.loads(body)
        return decode(result_type, payload)
    except (ValueError, TypeError) as e:
        logger.warning(f"Failed to decode {response.request.url} as {target}: {e}")
        raise DecodeError(e, target=target) from e


class BaseRequest(ABC):
    """Base class for request builders.

    Setters store optional query parameters and return the builder; ``send``
    performs the single HTTP call and decodes the result. A builder can be
    sent more than once.
    """

    method: ClassVar[str] = "GET"
    result_type: ClassVar[Any] = Any

    def __init__(self, client: "Client"):
        self._client = client

    @property
    @abstractmethod
    def path(self) -> str:
        """Resource path relative to the API base URL."""

    def params(self) -> Dict[str, str]:
        """Query parameters; unset optional parameters are left out."""
        return {}

    def prepare(self) -> PreparedRequest:
        return PreparedRequest(
            method=self.method,
            url=self._client.url_for(self.path),
            params=self.params()
        )

    async def send(self) -> Any:
        response = await self._client.execute(self.prepare())
        return await decode_response(response, self.result_type)


class QuotesMixin:
    """``quotes`` parameter: up to 3 quote currencies (BTC, ETH, USD, EUR, PLN, ...)."""

    _quotes: List[str]

    def quotes(self, quotes: Union[str, Sequence[str]]):
        self._quotes = as_list(quotes)
        return self

    def _quote_params(self) -> Dict[str, str]:
        value = join_values(self._quotes)
        return {"quotes": value} if value else {}


class HistoricalMixin:
    """``start``/``end``/``limit``/``quote`` parameters of historical endpoints.

    ``start`` and ``end`` accept RFC3339 timestamps (``2018-02-15T05:15:00Z``),
    plain dates (``2018-02-15``) or Unix seconds (``1518671700``); they are
    sent verbatim. ``start`` defaults to the UTC date at construction.
    """

    _start: str
    _end: Optional[str]
    _limit: Optional[int]
    _quote: Optional[str]

    def _init_historical(self):
        self._start = utc_today()
        self._end = None
        self._limit = None
        self._quote = None

    def start(self, start: DateLike):
        self._start = str(start)
        return self

    def end(self, end: DateLike):
        self._end = str(end)
        return self

    def limit(self, limit: int):
        self._limit = limit
        return self

    def quote(self, quote: str):
        """Returned data quote: ``usd`` (default) or ``btc``."""
        self._quote = quote
        return self

    def _historical_params(self) -> Dict[str, str]:
        params = {"start": self._start}
        if self._end is not None:
            params["end"] = self._end
        if self._limit is not None:
            params["limit"] = str(self._limit)
        if self._quote is not None:
            params["quote"] = self._quote
        return params
