import os
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from clearly_defined.core.definitions import ROOT_URI


@dataclass(frozen=True)
class Settings:
    root_uri: str = ROOT_URI
    timeout: float = 30.0
    chunk_size: int = 100
    concurrency: int = 4


def get_settings() -> Settings:
    defaults = Settings()
    return Settings(
        root_uri=os.getenv("CLEARLYDEFINED_URL", defaults.root_uri).rstrip("/"),
        timeout=_env_number("CLEARLYDEFINED_TIMEOUT", defaults.timeout, float),
        chunk_size=_env_number("CLEARLYDEFINED_CHUNK_SIZE", defaults.chunk_size, int),
        concurrency=_env_number("CLEARLYDEFINED_CONCURRENCY", defaults.concurrency, int),
    )


def _env_number(name: str, default: Any, convert: Callable[[str], Any]) -> Any:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return convert(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc
