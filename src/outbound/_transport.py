"""Bridge between :class:`Request`/:class:`Options` and httpx.

Transports are expected to send a :class:`Request` unchanged and to bound
their connect and read waits by the :class:`Options` passed alongside it.
"""

from logging import getLogger
from typing import Protocol

import httpx

from ._options import Options
from ._request import Request


class Client(Protocol):
    """Contract every transport implements."""

    def execute(self, request: Request, options: Options) -> httpx.Response: ...


def to_httpx_timeout(options: Options) -> httpx.Timeout:
    """Map options to an httpx timeout; write and pool waits stay unbounded."""
    return httpx.Timeout(
        connect=options.connect_timeout,
        read=options.read_timeout,
        write=None,
        pool=None,
    )


def to_httpx_request(request: Request) -> httpx.Request:
    """Build the httpx request, keeping header order and repeated names."""
    return httpx.Request(
        request.method,
        request.url,
        headers=list(request.header_lines()),
        content=request.body,
    )


class HttpxClient:
    """:class:`Client` backed by a synchronous ``httpx.Client``."""

    def __init__(self, client: httpx.Client | None = None) -> None:
        self._logger = getLogger("outbound")
        self._owns_client = client is None
        self._client = client or httpx.Client()

    def execute(self, request: Request, options: Options) -> httpx.Response:
        self._logger.debug(f"Request: {request.method} {request.url}")

        httpx_request = to_httpx_request(request)
        httpx_request.extensions["timeout"] = to_httpx_timeout(options).as_dict()
        response = self._client.send(httpx_request)

        self._logger.debug(f"Response: {response.status_code} {request.url}")
        return response

    def close(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpxClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
