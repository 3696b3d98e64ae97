"""Batched requests for, and decoding of, the ``/definitions`` endpoint."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from pydantic import ValidationError

from clearly_defined.core.coordinates import Coordinate
from clearly_defined.core.helpers import load_json
from clearly_defined.core.http import ApiResponse, HttpRequest, HttpResponse, Method
from clearly_defined.errors import DecodeError
from clearly_defined.models import Definition

logger = logging.getLogger(__name__)

ROOT_URI = "https://api.clearlydefined.io"

# Documented per-call maximum of the service
MAX_COORDINATES_PER_REQUEST = 1000


def build_get_requests(
    chunk_size: int,
    coordinates: Iterable[Coordinate],
    *,
    root_uri: str = ROOT_URI,
) -> Iterator[HttpRequest]:
    """Lazily yield one POST request per chunk of ``coordinates``.

    ``chunk_size`` is capped at ``MAX_COORDINATES_PER_REQUEST``. The service
    can be very slow for large batches, so a modest chunk size with requests
    sent in parallel usually gives the best wall time.
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be at least 1, got {chunk_size}")
    return _chunked_requests(min(chunk_size, MAX_COORDINATES_PER_REQUEST), coordinates, root_uri.rstrip("/"))


def _chunked_requests(chunk_size: int, coordinates: Iterable[Coordinate], root_uri: str) -> Iterator[HttpRequest]:
    batch: list[str] = []
    for coordinate in coordinates:
        batch.append(str(coordinate))
        if len(batch) == chunk_size:
            yield _definitions_request(batch, root_uri)
            batch = []
    if batch:
        yield _definitions_request(batch, root_uri)


def _definitions_request(batch: list[str], root_uri: str) -> HttpRequest:
    logger.debug("Built definitions request for %d coordinate(s)", len(batch))
    return HttpRequest(
        method=Method.POST,
        uri=f"{root_uri}/definitions",
        headers={"Content-Type": "application/json", "Accept": "application/json"},
        body=json.dumps(batch, separators=(",", ":")).encode("utf-8"),
    )


@dataclass(frozen=True)
class GetResponse(ApiResponse):
    # One definition per requested coordinate, ordered by coordinate string
    definitions: list[Definition] = field(default_factory=list)

    @classmethod
    def decode(cls, response: HttpResponse) -> GetResponse:
        try:
            payload = load_json(response.body)
        except ValueError as exc:
            raise DecodeError(f"response body is not valid JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise DecodeError(f"expected a JSON object of definitions, got {type(payload).__name__}")

        definitions = []
        for key in sorted(payload):
            try:
                definitions.append(Definition.model_validate(payload[key]))
            except ValidationError as exc:
                raise DecodeError(f"invalid definition for '{key}': {exc}") from exc
        return cls(definitions=definitions)
