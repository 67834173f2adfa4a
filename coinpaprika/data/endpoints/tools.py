"""Requests for the "Tools" section of the API: search and price conversion."""

from typing import Any, Dict, List, Optional, Sequence, Union

from ..models import PriceConversion
from .base import BaseRequest, as_list, join_values


class GetSearchRequest(BaseRequest):
    """Search currencies, exchanges, ICOs, people and tags.

    The result is the decoded JSON object as returned by the API; its keys
    depend on the requested categories.
    """

    result_type = Any
    path = "search"

    def __init__(self, client, q: str):
        super().__init__(client)
        self.q = q
        self._categories: List[str] = []
        self._modifier: Optional[str] = None
        self._limit: Optional[int] = None

    def categories(self, categories: Union[str, Sequence[str]]):
        """Categories to search (``c`` parameter): currencies, exchanges, icos, people, tags."""
        self._categories = as_list(categories)
        return self

    c = categories

    def modifier(self, modifier: str):
        """Search modifier; ``symbol_search`` restricts currencies to symbol matches."""
        self._modifier = modifier
        return self

    def limit(self, limit: int):
        """Limit of results per category (max 250, server default 6)."""
        self._limit = limit
        return self

    def params(self) -> Dict[str, str]:
        params = {"q": self.q}
        categories = join_values(self._categories)
        if categories:
            params["c"] = categories
        if self._modifier is not None:
            params["modifier"] = self._modifier
        if self._limit is not None:
            params["limit"] = str(self._limit)
        return params


class GetPriceConversionRequest(BaseRequest):
    """Convert ``amount`` of the base currency into the quote currency."""

    result_type = PriceConversion
    path = "price-converter"

    def __init__(self, client, base_currency_id: str, quote_currency_id: str):
        super().__init__(client)
        self.base_currency_id = base_currency_id
        self.quote_currency_id = quote_currency_id
        self._amount: Union[int, float] = 0

    def amount(self, amount: Union[int, float]):
        self._amount = amount
        return self

    def params(self) -> Dict[str, str]:
        return {
            "base_currency_id": self.base_currency_id,
            "quote_currency_id": self.quote_currency_id,
            "amount": str(self._amount),
        }
