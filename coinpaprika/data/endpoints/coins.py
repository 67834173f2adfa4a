"""Requests for the "Coins" section of the API."""

from typing import Dict, List, Optional

from ..models import OHLCV, Coin, CoinDetails, CoinEvent, CoinExchange, CoinMarket, Tweet
from .base import BaseRequest, HistoricalMixin, QuotesMixin


class CoinRequest(BaseRequest):
    """Base for requests scoped to one coin id."""

    def __init__(self, client, coin_id: str):
        super().__init__(client)
        self.coin_id = coin_id


class GetCoinsRequest(BaseRequest):
    """Basic information about every cryptocurrency listed on Coinpaprika."""

    result_type = List[Coin]
    path = "coins"


class GetCoinRequest(CoinRequest):
    """Descriptive information about a single coin, without price or volume data."""

    result_type = CoinDetails

    @property
    def path(self) -> str:
        return f"coins/{self.coin_id}"


class GetTwitterRequest(CoinRequest):
    """Last 50 tweets from the official Twitter profile of a coin."""

    result_type = List[Tweet]

    @property
    def path(self) -> str:
        return f"coins/{self.coin_id}/twitter"


class GetCoinEventsRequest(CoinRequest):
    result_type = List[CoinEvent]

    @property
    def path(self) -> str:
        return f"coins/{self.coin_id}/events"


class GetCoinExchangesRequest(CoinRequest):
    result_type = List[CoinExchange]

    @property
    def path(self) -> str:
        return f"coins/{self.coin_id}/exchanges"


class GetCoinMarketsRequest(QuotesMixin, CoinRequest):
    """All available markets for a coin, priced in the requested quotes."""

    result_type = List[CoinMarket]

    def __init__(self, client, coin_id: str):
        super().__init__(client, coin_id)
        self._quotes = []

    @property
    def path(self) -> str:
        return f"coins/{self.coin_id}/markets"

    def params(self) -> Dict[str, str]:
        return self._quote_params()


class _SingleQuoteRequest(CoinRequest):
    _quote: Optional[str]

    def __init__(self, client, coin_id: str):
        super().__init__(client, coin_id)
        self._quote = None

    def quote(self, quote: str):
        """Returned data quote: ``usd`` (default) or ``btc``."""
        self._quote = quote
        return self

    def params(self) -> Dict[str, str]:
        return {"quote": self._quote} if self._quote is not None else {}


class GetCoinOHLCLastFullDayRequest(_SingleQuoteRequest):
    """OHLCV for the last full day."""

    result_type = List[OHLCV]

    @property
    def path(self) -> str:
        return f"coins/{self.coin_id}/ohlcv/latest"


class GetCoinOHLCTodayRequest(_SingleQuoteRequest):
    """OHLCV for the current day; values change until the day closes at 23:59:59."""

    result_type = List[OHLCV]

    @property
    def path(self) -> str:
        return f"coins/{self.coin_id}/ohlcv/today"


class GetCoinOHLCHistoricalRequest(HistoricalMixin, CoinRequest):
    """OHLCV for a date range.

    ``limit`` caps the rows returned (max 366, server default 1). If the
    range ends today, the last row can change until the day closes.
    """

    result_type = List[OHLCV]

    def __init__(self, client, coin_id: str):
        super().__init__(client, coin_id)
        self._init_historical()

    @property
    def path(self) -> str:
        return f"coins/{self.coin_id}/ohlcv/historical"

    def params(self) -> Dict[str, str]:
        return self._historical_params()
