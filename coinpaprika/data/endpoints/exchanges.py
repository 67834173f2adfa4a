"""Requests for the "Exchanges" section of the API."""

from typing import Dict, List

from ..models import Exchange, ExchangeMarket
from .base import BaseRequest, QuotesMixin


class GetExchangesRequest(QuotesMixin, BaseRequest):
    result_type = List[Exchange]
    path = "exchanges"

    def __init__(self, client):
        super().__init__(client)
        self._quotes = []

    def params(self) -> Dict[str, str]:
        return self._quote_params()


class GetExchangeRequest(QuotesMixin, BaseRequest):
    result_type = Exchange

    def __init__(self, client, exchange_id: str):
        super().__init__(client)
        self.exchange_id = exchange_id
        self._quotes = []

    @property
    def path(self) -> str:
        return f"exchanges/{self.exchange_id}"

    def params(self) -> Dict[str, str]:
        return self._quote_params()


class GetExchangeMarketsRequest(GetExchangeRequest):
    """All markets listed on one exchange."""

    result_type = List[ExchangeMarket]

    @property
    def path(self) -> str:
        return f"exchanges/{self.exchange_id}/markets"
