"""Error taxonomy shared by the request builder, decoder and transports.

Every error raised by this package derives from ``ClearlyDefinedError`` and
exposes a ``kind`` so callers can decide whether a failure is worth retrying
(transport, HTTP status) or permanent (decode).
"""

from __future__ import annotations

from enum import Enum
from http import HTTPStatus


class ErrorKind(str, Enum):
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    DECODE = "decode"
    GENERIC = "generic"


class ClearlyDefinedError(Exception):
    kind: ErrorKind = ErrorKind.GENERIC

    @property
    def retryable(self) -> bool:
        return self.kind in (ErrorKind.TRANSPORT, ErrorKind.HTTP_STATUS)


class TransportError(ClearlyDefinedError):
    """The HTTP collaborator failed before a response was received."""

    kind = ErrorKind.TRANSPORT


class HttpStatusError(ClearlyDefinedError):
    """The service answered with a non-2xx status."""

    kind = ErrorKind.HTTP_STATUS

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(_describe_status(status_code))


class DecodeError(ClearlyDefinedError):
    """A payload or coordinate string did not match the expected grammar."""

    kind = ErrorKind.DECODE


class GenericError(ClearlyDefinedError):
    """Wraps a lower-level failure with a short description of what was being done."""

    kind = ErrorKind.GENERIC

    def __init__(self, context: str) -> None:
        self.context = context
        super().__init__(context)

    def __str__(self) -> str:
        if self.__cause__ is not None:
            return f"{self.context}: {self.__cause__}"
        return self.context


def _describe_status(status_code: int) -> str:
    try:
        phrase = HTTPStatus(status_code).phrase
    except ValueError:
        return f"HTTP status: {status_code}"
    return f"HTTP status: {status_code} {phrase}"
