"""Per-endpoint request builders, one module per API section."""

from .base import BaseRequest
from .changelog import GetChangelogRequest
from .coins import (
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
from .contracts import GetContractPlatformsRequest, GetContractsRequest
from .exchanges import GetExchangeMarketsRequest, GetExchangeRequest, GetExchangesRequest
from .global_market import GetGlobalRequest
from .key import GetKeyInfoRequest
from .people import GetPersonRequest
from .tags import GetTagRequest, GetTagsRequest
from .tickers import GetHistoricalTicksRequest, GetTickerRequest, GetTickersRequest
from .tools import GetPriceConversionRequest, GetSearchRequest

__all__ = [
    'BaseRequest',
    'GetChangelogRequest',
    'GetCoinEventsRequest',
    'GetCoinExchangesRequest',
    'GetCoinMarketsRequest',
    'GetCoinOHLCHistoricalRequest',
    'GetCoinOHLCLastFullDayRequest',
    'GetCoinOHLCTodayRequest',
    'GetCoinRequest',
    'GetCoinsRequest',
    'GetContractPlatformsRequest',
    'GetContractsRequest',
    'GetExchangeMarketsRequest',
    'GetExchangeRequest',
    'GetExchangesRequest',
    'GetGlobalRequest',
    'GetHistoricalTicksRequest',
    'GetKeyInfoRequest',
    'GetPersonRequest',
    'GetPriceConversionRequest',
    'GetSearchRequest',
    'GetTagRequest',
    'GetTagsRequest',
    'GetTickerRequest',
    'GetTickersRequest',
    'GetTwitterRequest',
]
