"""
Nested packaging planner: products -> inner pack -> master carton.

The computation is pure. Given the product size and the packing configuration
it derives the inner pack and the master payload, then either selects the
tightest carton from inventory or synthesises a custom one at the exact
minimum envelope.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple

from masterpack_poc.core.utils_geometry import fits_within, footprint_orientations, volume_utilization
from masterpack_poc.core.validation import validate_plan_inputs
from masterpack_poc.models.box_item import CUSTOM_BOX_ID, BoxItem
from masterpack_poc.models.dimensions import (
    DEFAULT_SAFETY_GAPS,
    Arrangement,
    Dimensions,
    SafetyGaps,
)
from masterpack_poc.models.packaging_config import PackagingConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculationResult:
    inner_box_dims: Dimensions
    master_payload_dims: Dimensions
    total_items: int
    box: BoxItem
    is_custom: bool
    gap_l: float
    gap_w: float
    gap_h: float
    waste_volume: float
    rotated: bool
    inner_arrangement: Arrangement
    master_arrangement: Arrangement
    stack_count: Optional[int] = None
    inner_wall_thickness: float = 0.0

    @property
    def found_in_inventory(self) -> bool:
        return not self.is_custom

    @property
    def payload_volume(self) -> float:
        return self.master_payload_dims.volume

    @property
    def box_volume(self) -> float:
        return self.box.volume

    @property
    def gaps(self) -> Tuple[float, float, float]:
        return self.gap_l, self.gap_w, self.gap_h

    @property
    def volume_utilisation_pct(self) -> float:
        return volume_utilization(self.payload_volume, self.box_volume)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "found_in_inventory": self.found_in_inventory,
            "box": self.box.to_dict(),
            "is_custom": self.is_custom,
            "rotated": self.rotated,
            "gap_l": self.gap_l,
            "gap_w": self.gap_w,
            "gap_h": self.gap_h,
            "waste_volume": self.waste_volume,
            "inner_box_dims": self.inner_box_dims.to_dict(),
            "master_payload_dims": self.master_payload_dims.to_dict(),
            "total_items": self.total_items,
            "stack_count": self.stack_count,
            "volume_utilization": self.volume_utilisation_pct,
        }


def derive_inner_box(product: Dimensions, config: PackagingConfig) -> Dimensions:
    """
    Inner pack size: products edge to edge plus one wall allowance per axis.

    The wall thickness models a single enclosing wrapper, so it is added once
    regardless of how many products sit along the axis.
    """
    stacked = product.scaled_by(config.inner_arrangement)
    wall = config.inner_wall_thickness
    return Dimensions(
        length=stacked.length + wall,
        width=stacked.width + wall,
        height=stacked.height + wall,
    )


def derive_master_payload(inner_box: Dimensions, config: PackagingConfig) -> Dimensions:
    # inner packs touch each other inside the master carton, no extra allowance
    return inner_box.scaled_by(config.master_arrangement)


def _fit_orientation(box: BoxItem, envelope: Dimensions) -> Optional[bool]:
    """
    ``None`` when the box cannot hold the envelope, otherwise whether it only
    fits with its base turned. Height is never rotated.
    """
    for index, orientation in enumerate(footprint_orientations(box.dimensions)):
        if fits_within(envelope.dimensions, orientation):
            return index == 1
    return None


def _select_box(
    inventory: Sequence[BoxItem],
    envelope: Dimensions,
    payload_volume: float,
) -> Tuple[Optional[BoxItem], bool]:
    """
    Return the least-waste carton passing either footprint orientation.

    ``min`` keeps the first of equal keys, so ties go to input order.
    """
    candidates = []
    for box in inventory:
        rotated = _fit_orientation(box, envelope)
        if rotated is not None:
            candidates.append((box, rotated))
    if not candidates:
        return None, False
    return min(candidates, key=lambda candidate: candidate[0].volume - payload_volume)


def plan(
    product: Dimensions,
    inventory: Iterable[BoxItem],
    config: PackagingConfig,
    gaps: SafetyGaps = DEFAULT_SAFETY_GAPS,
    *,
    strict: bool = False,
    rotation_aware_gaps: bool = False,
) -> CalculationResult:
    """
    Compute the packaging hierarchy and pick (or fabricate) a master carton.

    With ``strict=False`` no input is rejected: zero or negative values flow
    through the arithmetic and yield degenerate but consistent output. With
    ``strict=True`` inputs are validated first and ``ConfigurationError`` is
    raised on the first bad field.

    Gaps for a carton accepted only in its rotated footprint are reported
    against the un-rotated axes unless ``rotation_aware_gaps`` is set.
    """
    inventory = list(inventory)
    if strict:
        validate_plan_inputs(product, inventory, config, gaps)

    inner_box_dims = derive_inner_box(product, config)
    master_payload_dims = derive_master_payload(inner_box_dims, config)
    envelope = master_payload_dims.padded(gaps)
    payload_volume = master_payload_dims.volume
    total_items = config.inner_arrangement.count * config.master_arrangement.count

    best_box, rotated = _select_box(inventory, envelope, payload_volume)

    if best_box is not None:
        if rotated and rotation_aware_gaps:
            gap_l = best_box.width - master_payload_dims.length
            gap_w = best_box.length - master_payload_dims.width
        else:
            gap_l = best_box.length - master_payload_dims.length
            gap_w = best_box.width - master_payload_dims.width
        gap_h = best_box.height - master_payload_dims.height
        logger.debug(
            "Selected %s (rotated=%s) for payload %s, waste %.2f",
            best_box.id,
            rotated,
            master_payload_dims.dimensions,
            best_box.volume - payload_volume,
        )
        box = best_box
        is_custom = False
    else:
        box = BoxItem(
            id=CUSTOM_BOX_ID,
            length=envelope.length,
            width=envelope.width,
            height=envelope.height,
        )
        gap_l, gap_w, gap_h = gaps.as_tuple()
        is_custom = True
        logger.debug(
            "No inventory match among %d boxes; custom carton %s",
            len(inventory),
            box.dimensions,
        )

    return CalculationResult(
        inner_box_dims=inner_box_dims,
        master_payload_dims=master_payload_dims,
        total_items=total_items,
        box=box,
        is_custom=is_custom,
        gap_l=gap_l,
        gap_w=gap_w,
        gap_h=gap_h,
        waste_volume=box.volume - payload_volume,
        rotated=rotated,
        inner_arrangement=config.inner_arrangement,
        master_arrangement=config.master_arrangement,
        stack_count=config.stack_count,
        inner_wall_thickness=config.inner_wall_thickness,
    )


find_best_box = plan
