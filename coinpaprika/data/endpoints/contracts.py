"""Requests for the "Contracts" section of the API."""

from typing import List

from ..models import Contract
from .base import BaseRequest


class GetContractPlatformsRequest(BaseRequest):
    """Ids of all contract platforms (``eth-ethereum``, ``trx-tron``, ...)."""

    result_type = List[str]
    path = "contracts"


class GetContractsRequest(BaseRequest):
    """All contracts listed on a platform."""

    result_type = List[Contract]

    def __init__(self, client, platform_id: str):
        super().__init__(client)
        self.platform_id = platform_id

    @property
    def path(self) -> str:
        return f"contracts/{self.platform_id}"
