"""Component coordinates and their textual form.

A coordinate looks like ``crate/cratesio/-/syn/1.0.14`` and may carry a
curation pull request suffix, ``crate/cratesio/-/syn/1.0.14/pr/42``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

import semver
from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from clearly_defined.errors import DecodeError

NO_NAMESPACE = "-"
# Curation pull request numbers are unsigned 32-bit
MAX_CURATION_PR = 2**32 - 1


class Shape(str, Enum):
    """The kind of component."""

    CRATE = "crate"
    GIT = "git"

    @classmethod
    def parse(cls, token: str) -> Shape:
        try:
            return cls(token)
        except ValueError:
            raise DecodeError(f"unknown shape '{token}'") from None

    def __str__(self) -> str:
        return self.value


class Provider(str, Enum):
    """Where a component is hosted."""

    CRATES_IO = "cratesio"
    GITHUB = "github"

    @classmethod
    def parse(cls, token: str) -> Provider:
        try:
            return cls(token)
        except ValueError:
            raise DecodeError(f"unknown provider '{token}'") from None

    def __str__(self) -> str:
        return self.value


class CoordVersion:
    """A component revision, either a semantic version or an opaque string.

    ``CoordVersion.parse`` never fails: anything that is not a valid semantic
    version becomes an ``AnyVersion`` holding the original text.
    """

    @staticmethod
    def parse(value: str) -> CoordVersion:
        try:
            return SemverVersion(semver.Version.parse(value))
        except ValueError:
            return AnyVersion(value)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            _validate_version,
            serialization=core_schema.to_string_ser_schema(),
        )


@dataclass(frozen=True, eq=False)
class SemverVersion(CoordVersion):
    version: semver.Version

    def __str__(self) -> str:
        return str(self.version)

    # Build metadata takes part in equality, unlike in semver.Version
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemverVersion):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))


@dataclass(frozen=True)
class AnyVersion(CoordVersion):
    value: str

    def __str__(self) -> str:
        return self.value


def _validate_version(value: Any) -> CoordVersion:
    if isinstance(value, CoordVersion):
        return value
    if isinstance(value, str):
        return CoordVersion.parse(value)
    raise ValueError(f"expected a version string, got {type(value).__name__}")


@dataclass(frozen=True)
class Coordinate:
    """Identity of a specific component, e.g. ``crate/cratesio/-/syn/1.0.14``."""

    shape: Shape
    provider: Provider
    name: str
    version: CoordVersion
    # None is written as "-" for providers without namespaces
    namespace: str | None = None
    # Curation PR applied on top of the harvested data
    curation_pr: int | None = None

    def __post_init__(self) -> None:
        for label, segment in (("name", self.name), ("namespace", self.namespace), ("version", str(self.version))):
            if segment is not None and "/" in segment:
                raise ValueError(f"{label} may not contain '/': {segment!r}")
        if self.namespace == NO_NAMESPACE:
            raise ValueError(f"use None rather than {NO_NAMESPACE!r} for a missing namespace")
        if self.curation_pr is not None and not 0 <= self.curation_pr <= MAX_CURATION_PR:
            raise ValueError(f"curation PR must be non-negative and fit in 32 bits, got {self.curation_pr}")

    @classmethod
    def parse(cls, text: str) -> Coordinate:
        """Parse the ``shape/provider/namespace/name/version[/pr/N]`` form.

        Raises ``DecodeError`` naming the missing or unexpected segment.
        """
        segments = iter(text.split("/"))

        def required(field: str) -> str:
            segment = next(segments, None)
            if segment is None:
                raise DecodeError(f"missing {field} in coordinate '{text}'")
            return segment

        shape = Shape.parse(required("shape"))
        provider = Provider.parse(required("provider"))
        namespace_token = required("namespace")
        name = required("name")
        version = CoordVersion.parse(required("version"))

        curation_pr = None
        trailing = next(segments, None)
        if trailing == "pr":
            pr_token = next(segments, None)
            if pr_token is None:
                raise DecodeError(f"expected curation PR number in coordinate '{text}'")
            curation_pr = _parse_curation_pr(pr_token)
            if curation_pr is None:
                raise DecodeError(f"unable to parse PR number '{pr_token}' in coordinate '{text}'")
            trailing = next(segments, None)
        if trailing is not None:
            raise DecodeError(f"unknown trailing path component '{trailing}' in coordinate '{text}'")

        return cls(
            shape=shape,
            provider=provider,
            namespace=None if namespace_token == NO_NAMESPACE else namespace_token,
            name=name,
            version=version,
            curation_pr=curation_pr,
        )

    def __str__(self) -> str:
        namespace = self.namespace if self.namespace is not None else NO_NAMESPACE
        text = f"{self.shape.value}/{self.provider.value}/{namespace}/{self.name}/{self.version}"
        if self.curation_pr is not None:
            text += f"/pr/{self.curation_pr}"
        return text


def _parse_curation_pr(token: str) -> int | None:
    if not (token.isascii() and token.isdigit()):
        return None
    digits = token.lstrip("0") or "0"
    if len(digits) > len(str(MAX_CURATION_PR)):
        return None
    number = int(digits)
    return number if number <= MAX_CURATION_PR else None
