"""Typed records for the ClearlyDefined definitions API.

Field names follow the service's JSON, with camelCase keys mapped to
snake_case attributes. All records are immutable once decoded.
"""

from __future__ import annotations

import datetime
import logging
import re
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from clearly_defined.core.coordinates import CoordVersion, Provider, Shape
from clearly_defined.core.helpers import duplicate_keys

logger = logging.getLogger(__name__)

_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")

# Numbers are strict so that a string or float never passes for a count
Count = Annotated[StrictInt, Field(ge=0, le=2**32 - 1)]
# Top-level scores are percentages carried in a single byte
Score = Annotated[StrictInt, Field(ge=0, le=255)]


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class _CamelRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


class DefCoords(_Record):
    """The coordinates a definition pertains to, as reported by the service."""

    shape: Shape = Field(alias="type")
    provider: Provider
    name: StrictStr
    revision: CoordVersion

    def __str__(self) -> str:
        return f"{self.shape.value}/{self.provider.value}/{self.name}/{self.revision}"


class Hashes(_Record):
    sha1: StrictStr
    sha256: StrictStr | None = None


class Scores(_Record):
    total: Count
    date: Count
    source: Count


class SourceLocation(_Record):
    type: StrictStr
    provider: StrictStr
    namespace: StrictStr
    name: StrictStr
    revision: StrictStr
    url: StrictStr


class Date(_Record):
    """A calendar date, written by the service as ``YYYY-MM-DD``."""

    year: StrictInt
    month: StrictInt
    day: StrictInt

    @model_validator(mode="before")
    @classmethod
    def _parse_text(cls, data: Any) -> Any:
        if not isinstance(data, str):
            return data
        match = _DATE_RE.fullmatch(data)
        if match is None:
            raise ValueError(f"date '{data}' is not in YYYY-MM-DD format")
        year, month, day = (int(part) for part in match.groups())
        datetime.date(year, month, day)
        return {"year": year, "month": month, "day": day}

    def to_date(self) -> datetime.date:
        return datetime.date(self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


class Description(_CamelRecord):
    release_date: Date
    source_location: SourceLocation | None = None
    project_website: StrictStr | None = None
    # e.g. the registry, version and download urls of a crate
    urls: dict[StrictStr, StrictStr]
    hashes: Hashes
    # Total number of files that were scanned
    files: Count
    # Tools and curations used to harvest the component
    tools: list[StrictStr]
    tool_score: Scores
    score: Scores


class LicenseScore(_Record):
    total: Count
    declared: Count
    discovered: Count
    consistency: Count
    spdx: Count
    texts: Count


class Attribution(_Record):
    # Files that had no attribution
    unknown: Count
    parties: list[StrictStr] = Field(default_factory=list)


class Discovered(_Record):
    # Files with no, or indeterminate, license information
    unknown: Count
    expressions: list[StrictStr]


class Facet(_Record):
    attribution: Attribution
    discovered: Discovered
    files: Count


class Facets(_Record):
    core: Facet


class License(_CamelRecord):
    """Top-level license information for a definition."""

    # For a crate this is the `license` field of its Cargo.toml
    declared: StrictStr
    facets: Facets
    tool_score: LicenseScore
    score: LicenseScore


class File(_Record):
    """A single file crawled while the definition was harvested."""

    path: StrictStr
    hashes: Hashes | None = None
    license: StrictStr | None = None
    attributions: list[StrictStr] = Field(default_factory=list)
    natures: list[StrictStr] = Field(default_factory=list)


class TopLevelScore(_Record):
    effective: Score
    tool: Score


# Sub-objects decoded best-effort: a coordinate that was never harvested still
# comes back, just with these objects partially filled or malformed.
_TOLERANT_FIELDS: dict[str, type[BaseModel]] = {"described": Description, "licensed": License}
_SINGLE_OCCURRENCE_FIELDS = ("coordinates", "described", "licensed", "files")


class Definition(_Record):
    """The service's record for one coordinate.

    ``described`` and ``licensed`` are ``None`` when the coordinate has not
    been harvested, or when their payload could not be decoded.
    """

    coordinates: DefCoords
    described: Description | None
    licensed: License | None
    files: list[File] = Field(default_factory=list)
    scores: TopLevelScore = Field(default_factory=lambda: TopLevelScore(effective=0, tool=0))

    @model_validator(mode="before")
    @classmethod
    def _decode_partial(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        for name in _SINGLE_OCCURRENCE_FIELDS:
            if name in duplicate_keys(data):
                raise ValueError(f"duplicate field `{name}`")
        for name in ("coordinates", *_TOLERANT_FIELDS):
            if name not in data:
                raise ValueError(f"missing field `{name}`")

        fields = dict(data)
        for name, record_type in _TOLERANT_FIELDS.items():
            fields[name] = _decode_or_none(record_type, fields[name], name, data.get("coordinates"))
        return fields


def _decode_or_none(record_type: type[BaseModel], value: Any, name: str, coordinates: Any) -> BaseModel | None:
    if value is None or isinstance(value, record_type):
        return value
    try:
        return record_type.model_validate(value)
    except ValidationError as exc:
        logger.debug("Discarding undecodable `%s` for %s: %s", name, coordinates, exc)
        return None
