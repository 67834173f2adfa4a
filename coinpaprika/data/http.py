"""Request and response containers passed between builders and the client."""

from dataclasses import dataclass, field
from typing import Dict

import aiohttp


@dataclass
class PreparedRequest:
    """Request description handed to ``Client.execute``.

    ``headers`` is filled in by the client right before sending.
    """

    method: str
    url: str
    params: Dict[str, str] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass
class Response:
    """Raw HTTP response together with the request that produced it.

    The body of ``response`` has not been read yet.
    """

    response: aiohttp.ClientResponse
    request: PreparedRequest

    @property
    def status(self) -> int:
        return self.response.status
