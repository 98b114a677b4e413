"""
Data model representing a candidate master carton.

Dimensions are internal dimensions in the caller's unit. A box either comes
from the carton inventory or is synthesised by the planner with the id
``CUSTOM-NEW`` when nothing in stock is large enough.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

CUSTOM_BOX_ID = "CUSTOM-NEW"


def _require_id(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"id must be a non-empty string, got {value!r}")
    return value


@dataclass(frozen=True)
class BoxItem:
    """Immutable carton with internal length, width and height."""

    id: str
    length: float
    width: float
    height: float

    def __post_init__(self) -> None:
        _require_id(self.id)
        object.__setattr__(self, "length", float(self.length))
        object.__setattr__(self, "width", float(self.width))
        object.__setattr__(self, "height", float(self.height))

    @property
    def volume(self) -> float:
        """Return usable internal volume."""
        return self.length * self.width * self.height

    @property
    def dimensions(self) -> Tuple[float, float, float]:
        return self.length, self.width, self.height

    @property
    def is_custom(self) -> bool:
        return self.id == CUSTOM_BOX_ID

    def footprint_rotated(self) -> "BoxItem":
        """Return the same carton turned 90 degrees on its base."""
        return BoxItem(id=self.id, length=self.width, width=self.length, height=self.height)

    def to_dict(self) -> Dict[str, float | str]:
        return {
            "id": self.id,
            "length": self.length,
            "width": self.width,
            "height": self.height,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "BoxItem":
        """Instantiate from a raw inventory record."""
        return cls(
            id=str(payload["id"]).strip(),
            length=float(payload["length"]),
            width=float(payload["width"]),
            height=float(payload["height"]),
        )
