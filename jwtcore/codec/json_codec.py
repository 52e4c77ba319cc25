"""Compact JSON serialization for headers and claims."""

import json
from typing import Any

DEFAULT_MAX_DEPTH = 32


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def serialize(value: Any) -> bytes:
    """Serialize a value to compact UTF-8 JSON.

    Raises TypeError or ValueError for values JSON cannot represent
    (NaN, circular references, unencodable strings).
    """
    text = json.dumps(
        value, separators=(",", ":"), ensure_ascii=False, allow_nan=False
    )
    return text.encode("utf-8")


def _depth(value: Any) -> int:
    deepest = 0
    stack = [(value, 1)]
    while stack:
        node, level = stack.pop()
        if isinstance(node, dict):
            deepest = max(deepest, level)
            stack.extend((child, level + 1) for child in node.values())
        elif isinstance(node, list):
            deepest = max(deepest, level)
            stack.extend((child, level + 1) for child in node)
    return deepest


def deserialize(data: bytes, max_depth: int = DEFAULT_MAX_DEPTH) -> Any:
    """Parse UTF-8 JSON, rejecting NaN/Infinity and excessive nesting."""
    try:
        value = json.loads(data.decode("utf-8"), parse_constant=_reject_constant)
    except RecursionError as exc:
        raise ValueError("JSON nesting too deep") from exc
    if _depth(value) > max_depth:
        raise ValueError(f"JSON nesting exceeds {max_depth} levels")
    return value
