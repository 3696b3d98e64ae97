from __future__ import annotations

import logging

import httpx

from clearly_defined.core.http import HttpRequest, HttpResponse, Method
from clearly_defined.errors import GenericError, TransportError

logger = logging.getLogger(__name__)


class HttpxTransport:
    """Send abstract requests with a blocking ``httpx.Client``.

    Implements the ``HttpTransport`` protocol. The whole response body is
    read into memory.
    """

    def __init__(self, client: httpx.Client | None = None, timeout: float = 30.0) -> None:
        self._client = client if client is not None else httpx.Client(timeout=timeout)

    def send(self, request: HttpRequest) -> HttpResponse:
        httpx_request = _convert_request(request, self._client)
        try:
            response = self._client.send(httpx_request)
        except httpx.HTTPError as exc:
            raise TransportError(f"{httpx_request.method} {request.uri} failed: {exc}") from exc
        logger.debug("%s %s -> %d", httpx_request.method, request.uri, response.status_code)
        return _convert_response(response)

    def close(self) -> None:
        self._client.close()


class AsyncHttpxTransport:
    """Send abstract requests with an ``httpx.AsyncClient``.

    Implements the ``AsyncHttpTransport`` protocol.
    """

    def __init__(self, client: httpx.AsyncClient | None = None, timeout: float = 30.0) -> None:
        self._client = client if client is not None else httpx.AsyncClient(timeout=timeout)

    async def send(self, request: HttpRequest) -> HttpResponse:
        httpx_request = _convert_request(request, self._client)
        try:
            response = await self._client.send(httpx_request)
        except httpx.HTTPError as exc:
            raise TransportError(f"{httpx_request.method} {request.uri} failed: {exc}") from exc
        logger.debug("%s %s -> %d", httpx_request.method, request.uri, response.status_code)
        return _convert_response(response)

    async def aclose(self) -> None:
        await self._client.aclose()


def _convert_request(request: HttpRequest, client: httpx.Client | httpx.AsyncClient) -> httpx.Request:
    try:
        method = Method(request.method)
    except ValueError as exc:
        raise GenericError("unsupported request method") from exc
    try:
        return client.build_request(method.value, request.uri, headers=request.headers, content=request.body)
    except httpx.InvalidURL as exc:
        raise GenericError(f"failed to convert request for '{request.uri}'") from exc


def _convert_response(response: httpx.Response) -> HttpResponse:
    return HttpResponse(
        status=response.status_code,
        headers=dict(response.headers.items()),
        body=response.content,
    )
