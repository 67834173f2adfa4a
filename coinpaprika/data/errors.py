"""Error taxonomy for Coinpaprika API calls."""

from enum import Enum
from typing import Dict, Optional, Type


class ErrorKind(Enum):
    """Closed set of failure kinds a request can end with."""
    INVALID_REQUEST = "invalid_request"
    INSUFFICIENT_PLAN = "insufficient_plan"
    INVALID_API_KEY = "invalid_api_key"
    INVALID_PARAMETER = "invalid_parameter"
    RATE_LIMITED = "rate_limited"
    INTERNAL_SERVER_ERROR = "internal_server_error"
    API_CONNECTION = "api_connection"
    DECODE = "decode"
    UNEXPECTED_STATUS = "unexpected_status"


class CoinpaprikaError(Exception):
    """Base class for every error raised by the client.

    Each subclass has a fixed ``kind`` and a human-readable ``description``
    suitable for direct display.
    """

    kind: ErrorKind
    description: str = "Unknown Coinpaprika API error."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.description)


class StatusError(CoinpaprikaError):
    """Error derived from a received HTTP status code."""

    status_code: int

    def __init__(self, message: Optional[str] = None, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class InvalidRequestError(StatusError):
    kind = ErrorKind.INVALID_REQUEST
    status_code = 400
    description = ("The server could not process the request due to invalid request "
                   "parameters or invalid format of the parameters.")


class InsufficientPlanError(StatusError):
    kind = ErrorKind.INSUFFICIENT_PLAN
    status_code = 402
    description = ("The request could not be processed because the user has an insufficient "
                   "plan. If you want to be able to process this request, get a higher plan.")


class InvalidApiKeyError(StatusError):
    kind = ErrorKind.INVALID_API_KEY
    status_code = 403
    description = "The request could not be processed due to invalid API key."


class InvalidParameterError(StatusError):
    kind = ErrorKind.INVALID_PARAMETER
    status_code = 404
    description = ("The server could not process the request due to invalid URL "
                   "or invalid path parameter.")


class RateLimitError(StatusError):
    kind = ErrorKind.RATE_LIMITED
    status_code = 429
    description = ("The rate limit has been exceeded. Reduce the frequency of requests "
                   "to avoid this error.")


class InternalServerError(StatusError):
    kind = ErrorKind.INTERNAL_SERVER_ERROR
    status_code = 500
    description = "An unexpected server error has occurred."


class UnexpectedStatusError(StatusError):
    """Non-success status outside the classified set.

    The raw status and body are preserved for the caller to inspect.
    """

    kind = ErrorKind.UNEXPECTED_STATUS
    description = "The server returned an unexpected HTTP status."

    def __init__(self, status_code: int, body: str = "", url: Optional[str] = None):
        super().__init__(f"{self.description} (HTTP {status_code})", url=url)
        self.status_code = status_code
        self.body = body


class ApiConnectionError(CoinpaprikaError):
    """Transport failure that survived every retry attempt."""

    kind = ErrorKind.API_CONNECTION
    description = "Fail to connect to API."

    def __init__(self, message: Optional[str] = None, cause: Optional[BaseException] = None,
                 attempts: int = 1):
        super().__init__(message)
        self.cause = cause
        self.attempts = attempts


class DecodeError(CoinpaprikaError):
    """Response body could not be parsed into the expected shape."""

    kind = ErrorKind.DECODE
    description = "Failed to decode the API response."

    def __init__(self, cause: BaseException, target: Optional[str] = None):
        detail = f"{self.description} ({target}): {cause}" if target else f"{self.description}: {cause}"
        super().__init__(detail)
        self.cause = cause
        self.target = target


STATUS_ERRORS: Dict[int, Type[StatusError]] = {
    cls.status_code: cls
    for cls in (
        InvalidRequestError,
        InsufficientPlanError,
        InvalidApiKeyError,
        InvalidParameterError,
        RateLimitError,
        InternalServerError,
    )
}


def error_for_status(status_code: int) -> Optional[Type[StatusError]]:
    """Return the error class mapped to ``status_code``, or None to pass it through."""
    return STATUS_ERRORS.get(status_code)
