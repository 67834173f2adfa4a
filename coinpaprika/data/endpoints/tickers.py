"""Requests for the "Tickers" section of the API."""

from typing import Dict, List, Optional

from ..models import HistoricalTick, Ticker
from .base import BaseRequest, HistoricalMixin, QuotesMixin


class GetTickersRequest(QuotesMixin, BaseRequest):
    """Price data of all active cryptocurrencies."""

    result_type = List[Ticker]
    path = "tickers"

    def __init__(self, client):
        super().__init__(client)
        self._quotes = []

    def params(self) -> Dict[str, str]:
        return self._quote_params()


class GetTickerRequest(QuotesMixin, BaseRequest):
    """Price data of a single cryptocurrency."""

    result_type = Ticker

    def __init__(self, client, coin_id: str):
        super().__init__(client)
        self.coin_id = coin_id
        self._quotes = []

    @property
    def path(self) -> str:
        return f"tickers/{self.coin_id}"

    def params(self) -> Dict[str, str]:
        return self._quote_params()


class GetHistoricalTicksRequest(HistoricalMixin, BaseRequest):
    """Historical ticks of a single cryptocurrency.

    ``limit`` caps the rows returned (max 5000, server default 1000) and
    ``interval`` sets the distance between points (``5m`` ... ``365d``,
    server default ``5m``).
    """

    result_type = List[HistoricalTick]

    def __init__(self, client, coin_id: str):
        super().__init__(client)
        self.coin_id = coin_id
        self._interval: Optional[str] = None
        self._init_historical()

    @property
    def path(self) -> str:
        return f"tickers/{self.coin_id}/historical"

    def interval(self, interval: str):
        self._interval = interval
        return self

    def params(self) -> Dict[str, str]:
        params = self._historical_params()
        if self._interval is not None:
            params["interval"] = self._interval
        return params
