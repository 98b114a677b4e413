"""
Named defaults for the planner, read from the JSON files in ``config/``.

Nothing here is consulted implicitly: callers load the defaults and pass them
into ``plan`` themselves.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping

from masterpack_poc.core.inventory import load_inventory_json
from masterpack_poc.models.box_item import BoxItem
from masterpack_poc.models.dimensions import DEFAULT_SAFETY_GAPS, Arrangement, SafetyGaps
from masterpack_poc.models.packaging_config import AxisArrangement, PackagingConfig, SINGLE_UNIT

BASE_DIR = Path(__file__).resolve().parent
CONFIG_DIR = BASE_DIR / "config"


def load_json_config(filename: str, config_dir: Path = CONFIG_DIR) -> Any:
    with open(config_dir / filename, "r", encoding="utf-8") as file:
        return json.load(file)


@dataclass(frozen=True)
class PlannerDefaults:
    unit: str = field(default="mm")
    safety_gaps: SafetyGaps = field(default=DEFAULT_SAFETY_GAPS)
    inner_wall_thickness: float = field(default=0.0)
    inner_arrangement: Arrangement = field(default=SINGLE_UNIT)
    master_arrangement: Arrangement = field(default=SINGLE_UNIT)

    def packaging_config(self) -> PackagingConfig:
        return PackagingConfig(
            inner_pack=AxisArrangement(self.inner_arrangement),
            master_arrangement=self.master_arrangement,
            inner_wall_thickness=self.inner_wall_thickness,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "unit": self.unit,
            "safety_gaps": self.safety_gaps.to_dict(),
            "inner_wall_thickness": self.inner_wall_thickness,
            "inner_arrangement": self.inner_arrangement.to_dict(),
            "master_arrangement": self.master_arrangement.to_dict(),
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "PlannerDefaults":
        """Instantiate from a raw configuration dictionary; missing keys keep defaults."""
        base = cls()
        return cls(
            unit=str(payload.get("unit", base.unit)),
            safety_gaps=(
                SafetyGaps.from_dict(payload["safety_gaps"])
                if "safety_gaps" in payload
                else base.safety_gaps
            ),
            inner_wall_thickness=float(payload.get("inner_wall_thickness", base.inner_wall_thickness)),
            inner_arrangement=(
                Arrangement.from_dict(payload["inner_arrangement"])
                if "inner_arrangement" in payload
                else base.inner_arrangement
            ),
            master_arrangement=(
                Arrangement.from_dict(payload["master_arrangement"])
                if "master_arrangement" in payload
                else base.master_arrangement
            ),
        )


def load_defaults(config_dir: Path = CONFIG_DIR) -> PlannerDefaults:
    return PlannerDefaults.from_dict(load_json_config("defaults.json", config_dir))


def load_default_inventory(config_dir: Path = CONFIG_DIR) -> List[BoxItem]:
    return load_inventory_json(config_dir / "boxes.json")
