from __future__ import annotations

import json

from masterpack_poc.core.planner import plan
from masterpack_poc.models.dimensions import DEFAULT_SAFETY_GAPS, Arrangement, Dimensions, SafetyGaps
from masterpack_poc.settings import (
    PlannerDefaults,
    load_default_inventory,
    load_defaults,
    load_json_config,
)


def test_bundled_defaults():
    defaults = load_defaults()

    assert defaults.unit == "mm"
    assert defaults.safety_gaps == DEFAULT_SAFETY_GAPS
    assert defaults.inner_wall_thickness == 1.0
    assert defaults.packaging_config().inner_arrangement == Arrangement(1, 1, 1)


def test_bundled_inventory():
    inventory = load_default_inventory()

    assert [box.id for box in inventory] == [f"BOX-00{i}" for i in range(1, 8)]
    assert load_json_config("boxes.json")[0]["length"] == 200


def test_defaults_from_partial_dict():
    defaults = PlannerDefaults.from_dict({"unit": "cm", "safety_gaps": {"l": 0.3, "w": 0.3, "h": 0.2}})

    assert defaults.unit == "cm"
    assert defaults.safety_gaps == SafetyGaps(0.3, 0.3, 0.2)
    assert defaults.master_arrangement == Arrangement(1, 1, 1)
    assert PlannerDefaults.from_dict(defaults.to_dict()) == defaults


def test_load_defaults_from_custom_dir(tmp_path):
    (tmp_path / "defaults.json").write_text(
        json.dumps({"inner_wall_thickness": 2, "master_arrangement": {"l": 2, "w": 1, "h": 1}}),
        encoding="utf-8",
    )

    defaults = load_defaults(tmp_path)

    assert defaults.inner_wall_thickness == 2.0
    assert defaults.packaging_config().master_arrangement == Arrangement(2, 1, 1)


def test_defaults_feed_planner_with_bundled_inventory():
    defaults = load_defaults()
    result = plan(
        Dimensions(40, 30, 20),
        load_default_inventory(),
        defaults.packaging_config().with_inner_arrangement(Arrangement(2, 2, 1)),
        defaults.safety_gaps,
    )

    # payload 81 x 61 x 21, envelope 84 x 64 x 23
    assert result.box.id == "BOX-003"
    assert result.gaps == (19.0, 39.0, 79.0)
    assert result.total_items == 4
