"""JSON reporter for parsed svn results."""

from __future__ import annotations

import dataclasses
import json
from enum import Enum
from typing import Any, Dict, List, Tuple


def _value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


def _factory(items: List[Tuple[str, Any]]) -> Dict[str, Any]:
    return {key: _value(val) for key, val in items}


def to_dict(result: Any) -> Dict[str, Any]:
    """Convert a result dataclass to a JSON-serialisable dict."""
    if not dataclasses.is_dataclass(result) or isinstance(result, type):
        raise TypeError(f"not a result object: {result!r}")
    return dataclasses.asdict(result, dict_factory=_factory)


def render(result: Any, *, indent: int = 2) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(result), indent=indent, ensure_ascii=False)
