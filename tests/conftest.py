"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest

from clearly_defined.core.http import HttpResponse

_REPO_ROOT = Path(__file__).parent.parent
_DATA_DIR = Path(__file__).parent / "data"


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Response fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def definitions_body() -> bytes:
    return (_DATA_DIR / "definitions-get.json").read_bytes()


@pytest.fixture
def definitions_response(definitions_body: bytes) -> HttpResponse:
    return HttpResponse(status=200, headers={"content-type": "application/json"}, body=definitions_body)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "CLEARLYDEFINED_URL",
        "CLEARLYDEFINED_TIMEOUT",
        "CLEARLYDEFINED_CHUNK_SIZE",
        "CLEARLYDEFINED_CONCURRENCY",
    ):
        monkeypatch.delenv(name, raising=False)
