"""Coinpaprika API client: shared request path and endpoint entry points."""

import asyncio
import logging
import time
from typing import Dict, Optional

import aiohttp

from ..core.config import ClientConfig
from .errors import ApiConnectionError, error_for_status
from .http import PreparedRequest, Response
from .endpoints.changelog import GetChangelogRequest
from .endpoints.coins import (
    GetCoinEventsRequest,
    GetCoinExchangesRequest,
    GetCoinMarketsRequest,
    GetCoinOHLCHistoricalRequest,
    GetCoinOHLCLastFullDayRequest,
    GetCoinOHLCTodayRequest,
    GetCoinRequest,
    GetCoinsRequest,
    GetTwitterRequest,
)
from .endpoints.contracts import GetContractPlatformsRequest, GetContractsRequest
from .endpoints.exchanges import GetExchangeMarketsRequest, GetExchangeRequest, GetExchangesRequest
from .endpoints.global_market import GetGlobalRequest
from .endpoints.key import GetKeyInfoRequest
from .endpoints.people import GetPersonRequest
from .endpoints.tags import GetTagRequest, GetTagsRequest
from .endpoints.tickers import GetHistoricalTicksRequest, GetTickerRequest, GetTickersRequest
from .endpoints.tools import GetPriceConversionRequest, GetSearchRequest

logger = logging.getLogger(__name__)

# Failures raised before any HTTP status was received
TRANSIENT_ERRORS = (aiohttp.ClientConnectionError, asyncio.TimeoutError)


class Client:
    """Client for the Coinpaprika REST API.

    Without a key it talks to the free tier; with a key it talks to the pro
    tier and sends the key as the ``Authorization`` header. The configuration
    is fixed at construction, so one client can be shared by concurrent tasks.

    Usage::

        async with Client() as client:
            ticker = await client.ticker("btc-bitcoin").quotes(["USD", "PLN"]).send()

    Outside ``async with``, the first request opens the HTTP session and the
    caller must ``await client.stop()`` when done; otherwise aiohttp warns
    about an unclosed client session.
    """

    def __init__(self, api_key: Optional[str] = None, config: Optional[ClientConfig] = None):
        """Initialize the client.

        Args:
            api_key: Optional API key; selects the pro tier
            config: Explicit configuration, overrides ``api_key``
        """
        if config is None:
            config = ClientConfig.keyed(api_key) if api_key else ClientConfig.free()

        self._config = config
        self._session: Optional[aiohttp.ClientSession] = None
        self._request_count = 0

    @classmethod
    def with_key(cls, api_key: str) -> "Client":
        """Create a client for the pro tier authorized with ``api_key``."""
        return cls(api_key=api_key)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def api_url(self) -> str:
        return self._config.base_url

    async def __aenter__(self):
        """Async context manager entry."""
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.stop()

    async def start(self):
        """Open the HTTP session."""
        if self._session is None:
            timeout = aiohttp.ClientTimeout(total=self._config.timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
            logger.debug(f"Started Coinpaprika client for {self._config.base_url}")

    async def stop(self):
        """Close the HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None
            logger.debug("Stopped Coinpaprika client")

    def url_for(self, path: str) -> str:
        """Join ``path`` onto the configured base URL."""
        return f"{self._config.base_url.rstrip('/')}/{path.lstrip('/')}"

    def _headers(self) -> Dict[str, str]:
        headers = {"User-Agent": self._config.user_agent}
        if self._config.api_key is not None:
            headers["Authorization"] = self._config.api_key
        return headers

    async def execute(self, request: PreparedRequest) -> Response:
        """Send ``request`` and classify the response status.

        Injects the ``User-Agent`` and, when a key is configured, the
        ``Authorization`` header. Connection-level failures are retried with
        exponential backoff up to ``max_retries`` times; HTTP statuses are
        never retried. The response body is left unread.

        Returns:
            Response wrapping the unread HTTP response and the final request

        Raises:
            StatusError subclass: for 400, 402, 403, 404, 429 and 500
            ApiConnectionError: when every attempt failed to connect
        """
        if not self._session:
            await self.start()

        request.headers.update(self._headers())

        start_time = time.time()
        attempts = self._config.max_retries + 1
        last_exception: Optional[BaseException] = None

        for attempt in range(attempts):
            try:
                response = await self._session.request(
                    method=request.method,
                    url=request.url,
                    params=request.params,
                    headers=request.headers
                )
            except TRANSIENT_ERRORS as e:
                last_exception = e
                logger.warning(f"Request attempt {attempt + 1}/{attempts} to {request.url} failed: {e!r}")

                if attempt < self._config.max_retries:
                    delay = self._config.retry_delay * (self._config.backoff_factor ** attempt)
                    await asyncio.sleep(delay)
                continue
            except aiohttp.ClientError as e:
                logger.error(f"{request.method} {request.url} failed: {e!r}")
                raise ApiConnectionError(str(e) or None, cause=e, attempts=attempt + 1) from e

            self._request_count += 1
            response_time = time.time() - start_time
            logger.debug(f"{request.method} {request.url} -> {response.status} ({response_time:.3f}s)")

            error_class = error_for_status(response.status)
            if error_class is not None:
                response.release()
                raise error_class(url=request.url)

            return Response(response=response, request=request)

        logger.error(f"Request to {request.url} failed after {attempts} attempts")
        raise ApiConnectionError(
            f"Fail to connect to API after {attempts} attempts: {last_exception!r}",
            cause=last_exception,
            attempts=attempts
        ) from last_exception

    def get_stats(self) -> Dict[str, object]:
        """Get client statistics."""
        return {
            'request_count': self._request_count,
            'base_url': self._config.base_url,
            'has_api_key': self._config.has_api_key,
            'max_retries': self._config.max_retries,
        }

    #
    # Key
    #
    def key_info(self) -> GetKeyInfoRequest:
        """Call to ``/key/info``."""
        return GetKeyInfoRequest(self)

    #
    # Global
    #
    def global_overview(self) -> GetGlobalRequest:
        """Call to ``/global``."""
        return GetGlobalRequest(self)

    #
    # Coins
    #
    def coins(self) -> GetCoinsRequest:
        """Call to ``/coins``."""
        return GetCoinsRequest(self)

    def coin(self, coin_id: str) -> GetCoinRequest:
        """Call to ``/coins/{coin_id}``."""
        return GetCoinRequest(self, coin_id)

    def twitter(self, coin_id: str) -> GetTwitterRequest:
        """Call to ``/coins/{coin_id}/twitter``."""
        return GetTwitterRequest(self, coin_id)

    def coin_events(self, coin_id: str) -> GetCoinEventsRequest:
        """Call to ``/coins/{coin_id}/events``."""
        return GetCoinEventsRequest(self, coin_id)

    def coin_exchanges(self, coin_id: str) -> GetCoinExchangesRequest:
        """Call to ``/coins/{coin_id}/exchanges``."""
        return GetCoinExchangesRequest(self, coin_id)

    def coin_markets(self, coin_id: str) -> GetCoinMarketsRequest:
        """Call to ``/coins/{coin_id}/markets``."""
        return GetCoinMarketsRequest(self, coin_id)

    def coin_ohlc_last_full_day(self, coin_id: str) -> GetCoinOHLCLastFullDayRequest:
        """Call to ``/coins/{coin_id}/ohlcv/latest``."""
        return GetCoinOHLCLastFullDayRequest(self, coin_id)

    def coin_ohlc_historical(self, coin_id: str) -> GetCoinOHLCHistoricalRequest:
        """Call to ``/coins/{coin_id}/ohlcv/historical``."""
        return GetCoinOHLCHistoricalRequest(self, coin_id)

    def coin_ohlc_today(self, coin_id: str) -> GetCoinOHLCTodayRequest:
        """Call to ``/coins/{coin_id}/ohlcv/today``."""
        return GetCoinOHLCTodayRequest(self, coin_id)

    #
    # People
    #
    def person(self, person_id: str) -> GetPersonRequest:
        """Call to ``/people/{person_id}``."""
        return GetPersonRequest(self, person_id)

    #
    # Tags
    #
    def tags(self) -> GetTagsRequest:
        """Call to ``/tags``."""
        return GetTagsRequest(self)

    def tag(self, tag_id: str) -> GetTagRequest:
        """Call to ``/tags/{tag_id}``."""
        return GetTagRequest(self, tag_id)

    #
    # Tickers
    #
    def tickers(self) -> GetTickersRequest:
        """Call to ``/tickers``."""
        return GetTickersRequest(self)

    def ticker(self, coin_id: str) -> GetTickerRequest:
        """Call to ``/tickers/{coin_id}``."""
        return GetTickerRequest(self, coin_id)

    def historical_ticks(self, coin_id: str) -> GetHistoricalTicksRequest:
        """Call to ``/tickers/{coin_id}/historical``."""
        return GetHistoricalTicksRequest(self, coin_id)

    #
    # Exchanges
    #
    def exchanges(self) -> GetExchangesRequest:
        """Call to ``/exchanges``."""
        return GetExchangesRequest(self)

    def exchange(self, exchange_id: str) -> GetExchangeRequest:
        """Call to ``/exchanges/{exchange_id}``."""
        return GetExchangeRequest(self, exchange_id)

    def exchange_markets(self, exchange_id: str) -> GetExchangeMarketsRequest:
        """Call to ``/exchanges/{exchange_id}/markets``."""
        return GetExchangeMarketsRequest(self, exchange_id)

    #
    # Tools
    #
    def search(self, q: str) -> GetSearchRequest:
        """Call to ``/search``."""
        return GetSearchRequest(self, q)

    def price_convert(self, base_currency_id: str, quote_currency_id: str) -> GetPriceConversionRequest:
        """Call to ``/price-converter``."""
        return GetPriceConversionRequest(self, base_currency_id, quote_currency_id)

    #
    # Contracts
    #
    def contract_platforms(self) -> GetContractPlatformsRequest:
        """Call to ``/contracts``."""
        return GetContractPlatformsRequest(self)

    def contracts(self, platform_id: str) -> GetContractsRequest:
        """Call to ``/contracts/{platform_id}``."""
        return GetContractsRequest(self, platform_id)

    #
    # Changelog
    #
    def changelog(self, page: int = 1) -> GetChangelogRequest:
        """Call to ``/changelog/ids``."""
        return GetChangelogRequest(self, page)
