import json
from typing import Any


class JsonObject(dict[str, Any]):
    """A decoded JSON object that remembers which keys appeared more than once.

    Values follow the usual ``json`` rule where the last occurrence wins.
    """

    duplicates: frozenset[str]

    def __init__(self, pairs: list[tuple[str, Any]]) -> None:
        super().__init__(pairs)
        seen: set[str] = set()
        repeated: set[str] = set()
        for key, _ in pairs:
            if key in seen:
                repeated.add(key)
            seen.add(key)
        self.duplicates = frozenset(repeated)


def load_json(data: bytes | str) -> Any:
    """Parse JSON, producing ``JsonObject`` for every object in the document."""
    return json.loads(data, object_pairs_hook=JsonObject)


def duplicate_keys(value: Any) -> frozenset[str]:
    return getattr(value, "duplicates", frozenset())
