from __future__ import annotations

import pytest

from masterpack_poc.models.box_item import CUSTOM_BOX_ID, BoxItem
from masterpack_poc.models.dimensions import DEFAULT_SAFETY_GAPS, Arrangement, Dimensions, SafetyGaps
from masterpack_poc.models.packaging_config import (
    SINGLE_UNIT,
    AxisArrangement,
    PackagingConfig,
    StackCount,
)


def test_dimensions_coerce_to_float_and_allow_zero():
    dims = Dimensions(0, 2, 3)

    assert dims.dimensions == (0.0, 2.0, 3.0)
    assert isinstance(dims.length, float)
    assert dims.volume == 0


def test_dimensions_scaled_and_padded():
    dims = Dimensions(10, 20, 30)

    assert dims.scaled_by(Arrangement(2, 3, 4)) == Dimensions(20, 60, 120)
    assert dims.padded(SafetyGaps(1, 2, 3)) == Dimensions(11, 22, 33)


def test_dimensions_dict_round_trip():
    dims = Dimensions(1.5, 2, 3)

    assert Dimensions.from_dict(dims.to_dict()) == dims


def test_arrangement_count():
    assert Arrangement(2, 3, 4).count == 24
    assert Arrangement.from_dict({"l": 1, "w": 2, "h": 3}).as_tuple() == (1, 2, 3)


def test_default_gaps():
    assert DEFAULT_SAFETY_GAPS.as_tuple() == (3.0, 3.0, 2.0)


def test_safety_gaps_partial_update():
    gaps = DEFAULT_SAFETY_GAPS.with_values(h=5)

    assert gaps == SafetyGaps(3, 3, 5)
    assert DEFAULT_SAFETY_GAPS.h == 2.0


def test_safety_gaps_rejects_unknown_axis():
    with pytest.raises(ValueError):
        DEFAULT_SAFETY_GAPS.with_values(depth=1)


@pytest.mark.parametrize("bad_id", ["", "   ", None, 42])
def test_box_item_requires_id(bad_id):
    with pytest.raises(ValueError):
        BoxItem(bad_id, 1, 1, 1)


def test_box_item_properties():
    box = BoxItem("BOX-001", 200, 150, 100)

    assert box.volume == 3_000_000
    assert box.footprint_rotated() == BoxItem("BOX-001", 150, 200, 100)
    assert not box.is_custom
    assert BoxItem(CUSTOM_BOX_ID, 1, 1, 1).is_custom


def test_box_item_from_dict():
    box = BoxItem.from_dict({"id": " BOX-9 ", "length": "10", "width": 20, "height": 30.5})

    assert box == BoxItem("BOX-9", 10, 20, 30.5)


def test_inner_pack_specs_resolve():
    assert AxisArrangement(Arrangement(2, 3, 4)).resolve() == Arrangement(2, 3, 4)
    assert StackCount(6).resolve() == Arrangement(1, 1, 6)


def test_config_defaults():
    config = PackagingConfig()

    assert config.inner_arrangement == SINGLE_UNIT
    assert config.master_arrangement == SINGLE_UNIT
    assert config.inner_wall_thickness == 0.0
    assert config.stack_count is None


def test_config_with_builders_return_new_instances():
    base = PackagingConfig()
    stacked = base.with_stack_count(4)
    walled = stacked.with_inner_wall_thickness(2).with_master_arrangement(Arrangement(2, 2, 1))

    assert base.stack_count is None
    assert stacked.stack_count == 4
    assert stacked.is_stacked
    assert walled.inner_wall_thickness == 2.0
    assert walled.master_arrangement == Arrangement(2, 2, 1)
    assert walled.stack_count == 4

    axis = walled.with_inner_arrangement(Arrangement(3, 1, 1))
    assert not axis.is_stacked
    assert axis.inner_arrangement == Arrangement(3, 1, 1)


def test_config_from_dict_axis_form():
    config = PackagingConfig.from_dict(
        {
            "innerArrangement": {"l": 2, "w": 2, "h": 2},
            "masterArrangement": {"l": 1, "w": 3, "h": 1},
            "innerWallThickness": 1,
        }
    )

    assert config.inner_arrangement == Arrangement(2, 2, 2)
    assert config.master_arrangement == Arrangement(1, 3, 1)
    assert config.inner_wall_thickness == 1.0
    assert PackagingConfig.from_dict(config.to_dict()) == config


def test_config_from_dict_stack_form():
    config = PackagingConfig.from_dict(
        {"innerBox": {"stackCount": 5}, "masterArrangement": {"l": 2, "w": 2, "h": 1}}
    )

    assert config.stack_count == 5
    assert config.inner_arrangement == Arrangement(1, 1, 5)
    assert config.inner_wall_thickness == 0.0
    assert config.to_dict()["innerBox"] == {"stackCount": 5}


def test_config_from_dict_snake_case():
    config = PackagingConfig.from_dict(
        {"inner_box": {"stack_count": 2}, "inner_wall_thickness": 3}
    )

    assert config.stack_count == 2
    assert config.master_arrangement == SINGLE_UNIT


@pytest.mark.parametrize("payload", [{}, {"innerBox": {}}])
def test_config_from_dict_needs_inner_pack(payload):
    with pytest.raises(ValueError):
        PackagingConfig.from_dict(payload)
