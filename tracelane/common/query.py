"""Query-string encoding for list operations."""

from dataclasses import field, fields
from enum import Enum
from typing import Any, List, Tuple

import httpx


def query_field(name: str) -> Any:
    """Declare an optional list parameter sent under the wire name ``name``."""
    return field(default=None, metadata={"query": name})


def _is_unset(value: Any) -> bool:
    return value is None or value == "" or value == 0


class ListParams:
    """
    Base for list parameter dataclasses.

    Fields are encoded in their declared order as ``key=value`` pairs joined by
    ``&``. Fields left at ``None``, ``""`` or ``0`` are dropped so that the
    server applies its own defaults.
    """

    def to_query_pairs(self) -> List[Tuple[str, Any]]:
        pairs: List[Tuple[str, Any]] = []
        for f in fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            if _is_unset(value):
                continue
            if isinstance(value, Enum):
                value = value.value
            pairs.append((f.metadata.get("query", f.name), value))
        return pairs

    def to_query_string(self) -> str:
        return str(httpx.QueryParams(self.to_query_pairs()))
