"""
Object utilities for JSON serialization.

Provides convenience functions for turning dataclasses and plain
containers into JSON text and back.
"""

import json
from dataclasses import asdict, is_dataclass
from typing import Any


def to_json(obj: Any, indent: int | None = None) -> str:
    """
    Serialize an object to JSON string.

    Handles dataclasses by converting them to dictionaries first.
    Falls back to str() for non-serializable objects.

    Args:
        obj: Object to serialize.
        indent: Optional indentation for pretty printing.

    Returns:
        JSON string representation.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        obj = asdict(obj)
    return json.dumps(
        obj, default=_default_serializer, indent=indent, ensure_ascii=False
    )


def from_json(text: str) -> Any:
    """
    Parse JSON text.

    Raises:
        ValueError: If the text is not valid JSON.
    """
    return json.loads(text)


def _default_serializer(obj: Any) -> Any:
    """
    Default serializer for JSON encoding.

    Handles common types that aren't JSON serializable by default.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    return str(obj)
