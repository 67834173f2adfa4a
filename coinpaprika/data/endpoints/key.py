"""Requests for the "Key" section of the API."""

from ..models import KeyInfo
from .base import BaseRequest


class GetKeyInfoRequest(BaseRequest):
    """Plan and usage of the configured API key. Only meaningful on the keyed tier."""

    result_type = KeyInfo
    path = "key/info"
