"""Small object and JSON helpers."""

from __future__ import annotations

import json
from typing import Any


class Rectangle:
    """Rectangle with a computed area."""

    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height

    def get_area(self) -> float:
        """Return `width * height` using the current field values."""
        return self.width * self.height

    def __repr__(self) -> str:
        return f"Rectangle(width={self.width!r}, height={self.height!r})"


def get_json(obj: Any) -> str:
    """Return the JSON representation of `obj` (compact, keys unsorted)."""
    return json.dumps(obj, separators=(",", ":"))


def from_json(proto: Any, text: str) -> Any:
    """
    Build an object of the given type from its JSON representation.

    The JSON object's values are passed positionally to the constructor in
    document order, so the key order must match the constructor's parameter
    order:

        from_json(Rectangle, '{"width": 10, "height": 20}').get_area()
        # => 200

    Args:
        proto: Target class, or an instance whose class is used.
        text: JSON object text.

    Returns:
        A new instance of the target class.

    Raises:
        json.JSONDecodeError: If `text` is not valid JSON.
        TypeError: If the value count does not fit the constructor.
    """
    cls = proto if isinstance(proto, type) else type(proto)
    data = json.loads(text)
    return cls(*data.values())
