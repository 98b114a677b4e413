"""
Packaging configuration: how products form an inner pack and how inner packs
fill the master carton.

The inner pack comes in two encodings. ``AxisArrangement`` gives independent
counts per axis. ``StackCount`` stacks N products along the height only
(cup-stacked goods) and is equivalent to an arrangement of ``(1, 1, N)``.
Both resolve to a plain ``Arrangement`` before any arithmetic runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional, Union

from masterpack_poc.models.dimensions import Arrangement


@dataclass(frozen=True)
class AxisArrangement:
    arrangement: Arrangement

    def resolve(self) -> Arrangement:
        return self.arrangement


@dataclass(frozen=True)
class StackCount:
    count: int

    def resolve(self) -> Arrangement:
        return Arrangement(l=1, w=1, h=self.count)


InnerPackSpec = Union[AxisArrangement, StackCount]

SINGLE_UNIT = Arrangement(l=1, w=1, h=1)


def _pick(payload: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in payload:
            return payload[key]
    return default


@dataclass(frozen=True)
class PackagingConfig:
    """Immutable two-level packing configuration."""

    inner_pack: InnerPackSpec = field(default_factory=lambda: AxisArrangement(SINGLE_UNIT))
    master_arrangement: Arrangement = field(default=SINGLE_UNIT)
    inner_wall_thickness: float = field(default=0.0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "inner_wall_thickness", float(self.inner_wall_thickness))

    @property
    def inner_arrangement(self) -> Arrangement:
        return self.inner_pack.resolve()

    @property
    def stack_count(self) -> Optional[int]:
        if isinstance(self.inner_pack, StackCount):
            return self.inner_pack.count
        return None

    @property
    def is_stacked(self) -> bool:
        return isinstance(self.inner_pack, StackCount)

    def with_inner_arrangement(self, arrangement: Arrangement) -> "PackagingConfig":
        return replace(self, inner_pack=AxisArrangement(arrangement))

    def with_stack_count(self, count: int) -> "PackagingConfig":
        return replace(self, inner_pack=StackCount(count))

    def with_master_arrangement(self, arrangement: Arrangement) -> "PackagingConfig":
        return replace(self, master_arrangement=arrangement)

    def with_inner_wall_thickness(self, thickness: float) -> "PackagingConfig":
        return replace(self, inner_wall_thickness=thickness)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "masterArrangement": self.master_arrangement.to_dict(),
            "innerWallThickness": self.inner_wall_thickness,
        }
        if isinstance(self.inner_pack, StackCount):
            payload["innerBox"] = {"stackCount": self.inner_pack.count}
        else:
            payload["innerArrangement"] = self.inner_pack.arrangement.to_dict()
        return payload

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "PackagingConfig":
        """
        Build a config from either wire shape.

        ``innerArrangement`` selects the per-axis form; ``innerBox.stackCount``
        selects the stack form. snake_case keys are accepted as well.
        """
        inner_box = _pick(payload, "innerBox", "inner_box")
        inner_arrangement = _pick(payload, "innerArrangement", "inner_arrangement")
        if inner_arrangement is not None:
            inner_pack: InnerPackSpec = AxisArrangement(Arrangement.from_dict(inner_arrangement))
        elif inner_box is not None:
            count = _pick(inner_box, "stackCount", "stack_count")
            if count is None:
                raise ValueError("innerBox requires stackCount")
            inner_pack = StackCount(count)
        else:
            raise ValueError("config needs either innerArrangement or innerBox.stackCount")

        master = _pick(payload, "masterArrangement", "master_arrangement")
        return cls(
            inner_pack=inner_pack,
            master_arrangement=Arrangement.from_dict(master) if master is not None else SINGLE_UNIT,
            inner_wall_thickness=_pick(payload, "innerWallThickness", "inner_wall_thickness", default=0.0),
        )
