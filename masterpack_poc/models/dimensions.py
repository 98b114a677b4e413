"""
Value types describing product sizes, unit counts per axis and safety clearances.

All lengths share a single caller-defined unit (mm or cm). Nothing here checks
positivity: degenerate values flow through so the planner can still produce
numerically consistent output. Use ``core.validation`` to reject bad input.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Mapping, Tuple


@dataclass(frozen=True)
class Arrangement:
    """Count of units stacked along length, width and height."""

    l: int
    w: int
    h: int

    @property
    def count(self) -> int:
        return self.l * self.w * self.h

    def as_tuple(self) -> Tuple[int, int, int]:
        return self.l, self.w, self.h

    def to_dict(self) -> Dict[str, int]:
        return {"l": self.l, "w": self.w, "h": self.h}

    @classmethod
    def from_dict(cls, payload: Mapping[str, int]) -> "Arrangement":
        return cls(l=payload["l"], w=payload["w"], h=payload["h"])


@dataclass(frozen=True)
class SafetyGaps:
    """Minimum clearance between the payload and the carton walls, per axis."""

    l: float
    w: float
    h: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "l", float(self.l))
        object.__setattr__(self, "w", float(self.w))
        object.__setattr__(self, "h", float(self.h))

    def with_values(self, **changes: float) -> "SafetyGaps":
        """Return a copy with only the given axes replaced."""
        unknown = set(changes) - {"l", "w", "h"}
        if unknown:
            raise ValueError(f"unknown gap axes: {sorted(unknown)}")
        return replace(self, **changes)

    def as_tuple(self) -> Tuple[float, float, float]:
        return self.l, self.w, self.h

    def to_dict(self) -> Dict[str, float]:
        return {"l": self.l, "w": self.w, "h": self.h}

    @classmethod
    def from_dict(cls, payload: Mapping[str, float]) -> "SafetyGaps":
        return cls(l=payload["l"], w=payload["w"], h=payload["h"])


DEFAULT_SAFETY_GAPS = SafetyGaps(l=3, w=3, h=2)


@dataclass(frozen=True)
class Dimensions:
    """Immutable length x width x height triple."""

    length: float
    width: float
    height: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "length", float(self.length))
        object.__setattr__(self, "width", float(self.width))
        object.__setattr__(self, "height", float(self.height))

    @property
    def volume(self) -> float:
        return self.length * self.width * self.height

    @property
    def dimensions(self) -> Tuple[float, float, float]:
        """Expose dimensions as an (L, W, H) tuple."""
        return self.length, self.width, self.height

    def scaled_by(self, arrangement: Arrangement) -> "Dimensions":
        """Size of ``arrangement`` copies of this block placed edge to edge."""
        return Dimensions(
            length=self.length * arrangement.l,
            width=self.width * arrangement.w,
            height=self.height * arrangement.h,
        )

    def padded(self, gaps: SafetyGaps) -> "Dimensions":
        return Dimensions(
            length=self.length + gaps.l,
            width=self.width + gaps.w,
            height=self.height + gaps.h,
        )

    def to_dict(self) -> Dict[str, float]:
        return {"length": self.length, "width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, payload: Mapping[str, float]) -> "Dimensions":
        return cls(
            length=payload["length"],
            width=payload["width"],
            height=payload["height"],
        )
