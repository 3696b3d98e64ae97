"""Execute abstract requests through a transport and decode typed responses."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from types import TracebackType
from typing import Self, TypeVar

from clearly_defined.config import get_settings
from clearly_defined.core.coordinates import Coordinate
from clearly_defined.core.definitions import GetResponse, build_get_requests
from clearly_defined.core.http import ApiResponse, HttpRequest
from clearly_defined.core.ports.transport import AsyncHttpTransport, HttpTransport
from clearly_defined.models import Definition

ResponseT = TypeVar("ResponseT", bound=ApiResponse)


class Client:
    """Blocking client; defaults to an httpx transport configured from the environment."""

    def __init__(self, transport: HttpTransport | None = None, root_uri: str | None = None) -> None:
        settings = get_settings()
        if transport is None:
            from clearly_defined.transport.httpx_adapter import HttpxTransport

            transport = HttpxTransport(timeout=settings.timeout)
        self._transport = transport
        self._root_uri = root_uri or settings.root_uri
        self._chunk_size = settings.chunk_size

    def execute(self, request: HttpRequest, response_type: type[ResponseT]) -> ResponseT:
        return response_type.from_http_response(self._transport.send(request))

    def get_definitions(self, coordinates: Iterable[Coordinate], chunk_size: int | None = None) -> list[Definition]:
        definitions: list[Definition] = []
        size = self._chunk_size if chunk_size is None else chunk_size
        for request in build_get_requests(size, coordinates, root_uri=self._root_uri):
            definitions.extend(self.execute(request, GetResponse).definitions)
        return definitions

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class AsyncClient:
    """Asyncio client that can fetch several definition chunks at once."""

    def __init__(
        self,
        transport: AsyncHttpTransport | None = None,
        root_uri: str | None = None,
        concurrency: int | None = None,
    ) -> None:
        settings = get_settings()
        if transport is None:
            from clearly_defined.transport.httpx_adapter import AsyncHttpxTransport

            transport = AsyncHttpxTransport(timeout=settings.timeout)
        self._transport = transport
        self._root_uri = root_uri or settings.root_uri
        self._chunk_size = settings.chunk_size
        self._concurrency = max(1, concurrency or settings.concurrency)

    async def execute(self, request: HttpRequest, response_type: type[ResponseT]) -> ResponseT:
        return response_type.from_http_response(await self._transport.send(request))

    async def get_definitions(
        self, coordinates: Iterable[Coordinate], chunk_size: int | None = None
    ) -> list[Definition]:
        """Fetch every chunk concurrently; results keep chunk order.

        The first failing chunk cancels the ones still in flight and its
        error is raised as is.
        """
        semaphore = asyncio.Semaphore(self._concurrency)

        async def _fetch(request: HttpRequest) -> GetResponse:
            async with semaphore:
                return await self.execute(request, GetResponse)

        size = self._chunk_size if chunk_size is None else chunk_size
        requests = build_get_requests(size, coordinates, root_uri=self._root_uri)
        try:
            async with asyncio.TaskGroup() as group:
                tasks = [group.create_task(_fetch(request)) for request in requests]
        except ExceptionGroup as exc:
            first = exc.exceptions[0]
            raise first from first.__cause__
        return [definition for task in tasks for definition in task.result().definitions]

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
