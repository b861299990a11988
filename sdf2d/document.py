"""Scene-wide settings and their JSON form."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


def _to_int(value: Any, default: int) -> int:
    """Return ``value`` if it is an integral JSON number within int range, else ``default``."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if isinstance(value, float) and not value.is_integer():
        return default
    return int(value) if -(2**31) <= value < 2**31 else default


@dataclass
class Document:
    """Size and frame rate of an animation."""

    width: int = 1920
    height: int = 1080
    fps: int = 24

    def to_json(self) -> dict[str, int]:
        return {"width": self.width, "height": self.height, "fps": self.fps}

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Document:
        """Build a document, using defaults for missing or non-integer values."""
        return cls(
            width=_to_int(data.get("width"), 1920),
            height=_to_int(data.get("height"), 1080),
            fps=_to_int(data.get("fps"), 24),
        )