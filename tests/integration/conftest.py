"""Integration test configuration: requests against the live ClearlyDefined service."""

import os
from pathlib import Path

import pytest

_INTEGRATION_DIR = Path(__file__).parent


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    if os.getenv("CLEARLYDEFINED_LIVE_TESTS") == "1":
        return
    skip_live = pytest.mark.skip(reason="set CLEARLYDEFINED_LIVE_TESTS=1 to run against the live service")
    for item in items:
        if _INTEGRATION_DIR in Path(str(item.fspath)).parents:
            item.add_marker(skip_live)
