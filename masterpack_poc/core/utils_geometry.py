"""
Geometry helper utilities shared across planner, plotting and reporting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from masterpack_poc.models.dimensions import Arrangement


Orientation = Tuple[float, float, float]


def fits_within(item: Sequence[float], container: Sequence[float]) -> bool:
    """Componentwise ``item <= container`` without any rotation."""
    return all(float(i) <= float(c) for i, c in zip(item, container))


def footprint_orientations(dimensions: Sequence[float]) -> List[Orientation]:
    """
    Return the orientations that preserve height (no sideways flipping).

    Cartons are turned on their base only; height is gravity-fixed.
    """
    l, w, h = (float(value) for value in dimensions)
    return [(l, w, h), (w, l, h)] if l != w else [(l, w, h)]


def volume_utilization(used_volume: float, container_volume: float) -> float:
    """
    Simple volume utilisation metric expressed as a percentage (0.0 - 100.0).
    """
    if container_volume <= 0:
        return 0.0
    return float(used_volume) / float(container_volume) * 100.0


@dataclass(frozen=True)
class Placement:
    """
    Represents the placement of a block within a container.
    """

    x: float
    y: float
    z: float
    orientation: Orientation
    item_index: int


def iter_grid_positions(
    arrangement: Arrangement,
    cell: Orientation,
    origin: Orientation = (0.0, 0.0, 0.0),
) -> Iterable[Tuple[float, float, float]]:
    """
    Yield the (x, y, z) corner of every cell of a regular ``arrangement`` grid.

    Cells are packed edge to edge with no gap between them.
    """
    for ix in range(max(int(arrangement.l), 0)):
        for iy in range(max(int(arrangement.w), 0)):
            for iz in range(max(int(arrangement.h), 0)):
                yield (
                    origin[0] + ix * cell[0],
                    origin[1] + iy * cell[1],
                    origin[2] + iz * cell[2],
                )


def grid_placements(
    arrangement: Arrangement,
    cell: Orientation,
    origin: Orientation = (0.0, 0.0, 0.0),
    start_index: int = 0,
) -> List[Placement]:
    return [
        Placement(x=x, y=y, z=z, orientation=cell, item_index=start_index + index)
        for index, (x, y, z) in enumerate(iter_grid_positions(arrangement, cell, origin))
    ]
