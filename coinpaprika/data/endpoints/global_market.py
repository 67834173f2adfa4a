"""Requests for the "Global" section of the API."""

from ..models import Global
from .base import BaseRequest


class GetGlobalRequest(BaseRequest):
    """Market overview data."""

    result_type = Global
    path = "global"
