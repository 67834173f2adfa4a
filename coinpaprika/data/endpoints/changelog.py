"""Requests for the "Changelog" section of the API."""

from typing import Dict, List

from ..models import Change
from .base import BaseRequest


class GetChangelogRequest(BaseRequest):
    """Coin id changes made by Coinpaprika moderators, newest first, one page at a time."""

    result_type = List[Change]
    path = "changelog/ids"

    def __init__(self, client, page: int = 1):
        super().__init__(client)
        self._page = page

    def page(self, page: int):
        self._page = page
        return self

    def params(self) -> Dict[str, str]:
        return {"page": str(self._page)}
