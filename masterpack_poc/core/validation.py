"""
Input validation for the packaging planner.

The planner accepts anything numeric and never raises; this module is the
gatekeeper callers run first (or ask the planner to run via ``strict=True``).
Checks are performed eagerly and stop at the first offending field.
"""

from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Any, Sequence

from masterpack_poc.models.box_item import BoxItem
from masterpack_poc.models.dimensions import Arrangement, Dimensions, SafetyGaps
from masterpack_poc.models.packaging_config import PackagingConfig

MAX_BOX_ID_LENGTH = 50
MAX_INVENTORY_ITEMS = 1000


class ConfigurationError(ValueError):
    """Raised when planner input is structurally valid but semantically wrong."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def _require_positive(name: str, value: Any) -> None:
    if not _is_number(value) or value <= 0:
        raise ConfigurationError(name, f"must be positive, got {value!r}")


def _require_non_negative(name: str, value: Any) -> None:
    if not _is_number(value) or value < 0:
        raise ConfigurationError(name, f"cannot be negative, got {value!r}")


def _require_count(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, Integral) or value < 1:
        raise ConfigurationError(name, f"must be an integer >= 1, got {value!r}")


def validate_dimensions(dimensions: Dimensions, prefix: str = "product") -> Dimensions:
    for axis in ("length", "width", "height"):
        _require_positive(f"{prefix}.{axis}", getattr(dimensions, axis))
    return dimensions


def validate_arrangement(arrangement: Arrangement, prefix: str = "arrangement") -> Arrangement:
    for axis in ("l", "w", "h"):
        _require_count(f"{prefix}.{axis}", getattr(arrangement, axis))
    return arrangement


def validate_safety_gaps(gaps: SafetyGaps, prefix: str = "safetyGaps") -> SafetyGaps:
    for axis in ("l", "w", "h"):
        _require_non_negative(f"{prefix}.{axis}", getattr(gaps, axis))
    return gaps


def validate_config(config: PackagingConfig) -> PackagingConfig:
    if config.is_stacked:
        _require_count("innerBox.stackCount", config.stack_count)
    else:
        validate_arrangement(config.inner_arrangement, "innerArrangement")
    validate_arrangement(config.master_arrangement, "masterArrangement")
    _require_non_negative("innerWallThickness", config.inner_wall_thickness)
    return config


def validate_box_item(box: BoxItem, prefix: str = "box") -> BoxItem:
    if len(box.id) > MAX_BOX_ID_LENGTH:
        raise ConfigurationError(f"{prefix}.id", f"longer than {MAX_BOX_ID_LENGTH} characters")
    for axis in ("length", "width", "height"):
        _require_positive(f"{prefix}.{axis}", getattr(box, axis))
    return box


def validate_inventory(inventory: Sequence[BoxItem]) -> Sequence[BoxItem]:
    if len(inventory) > MAX_INVENTORY_ITEMS:
        raise ConfigurationError(
            "inventory", f"holds {len(inventory)} boxes, limit is {MAX_INVENTORY_ITEMS}"
        )
    seen: set[str] = set()
    for index, box in enumerate(inventory):
        validate_box_item(box, prefix=f"inventory[{index}]")
        if box.id in seen:
            raise ConfigurationError(f"inventory[{index}].id", f"duplicate id {box.id!r}")
        seen.add(box.id)
    return inventory


def validate_plan_inputs(
    product: Dimensions,
    inventory: Sequence[BoxItem],
    config: PackagingConfig,
    gaps: SafetyGaps,
) -> None:
    """Run every check the planner relies on, in input order."""
    validate_dimensions(product)
    validate_inventory(inventory)
    validate_config(config)
    validate_safety_gaps(gaps)
