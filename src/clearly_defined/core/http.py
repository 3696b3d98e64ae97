"""Transport-independent HTTP request and response values."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Self

from clearly_defined.errors import HttpStatusError


class Method(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class HttpRequest:
    method: Method
    uri: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""


@dataclass(frozen=True)
class HttpResponse:
    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300


class ApiResponse(ABC):
    """A typed result that can be decoded from an ``HttpResponse``.

    ``from_http_response`` rejects non-2xx responses before the subclass's
    ``decode`` ever sees the body; the service does not return structured
    error payloads, so only the status code is reported.
    """

    @classmethod
    def from_http_response(cls, response: HttpResponse) -> Self:
        if not response.is_success:
            raise HttpStatusError(response.status)
        return cls.decode(response)

    @classmethod
    @abstractmethod
    def decode(cls, response: HttpResponse) -> Self: ...
