from __future__ import annotations

from masterpack_poc.core.planner import plan
from masterpack_poc.models.box_item import BoxItem
from masterpack_poc.models.dimensions import Arrangement, Dimensions, SafetyGaps
from masterpack_poc.models.packaging_config import PackagingConfig, StackCount
from masterpack_poc.report.pdf_generator import generate_pdf_report, input_rows, result_rows

PRODUCT = Dimensions(100, 50, 25)
GAPS = SafetyGaps(3, 3, 2)


def test_input_rows_describe_stack_form():
    config = PackagingConfig(StackCount(4), Arrangement(2, 1, 1), 1)
    rows = dict(input_rows(PRODUCT, config, GAPS, unit="cm"))

    assert rows["Stack Count"] == "4"
    assert rows["Master Arrangement (L x W x H)"] == "2 x 1 x 1"
    assert rows["Product Dimensions (cm)"] == "100.0 x 50.0 x 25.0"


def test_input_rows_describe_axis_form():
    config = PackagingConfig().with_inner_arrangement(Arrangement(2, 2, 2))
    rows = dict(input_rows(PRODUCT, config, GAPS, unit="mm"))

    assert rows["Inner Arrangement (L x W x H)"] == "2 x 2 x 2"
    assert "Stack Count" not in rows


def test_result_rows_for_inventory_pick():
    result = plan(PRODUCT, [BoxItem("BOX-004", 500, 400, 300)], PackagingConfig(), GAPS)
    rows = dict(result_rows(result, GAPS, unit="mm"))

    assert rows["Master Carton"] == "BOX-004"
    assert rows["Source"] == "Inventory"
    assert rows["Required Envelope (mm)"] == "103.0 x 53.0 x 27.0"
    assert rows["Total Items per Carton"] == "1"


def test_generate_pdf_report(tmp_path):
    config = PackagingConfig(StackCount(2), Arrangement(1, 2, 1), 1)
    result = plan(PRODUCT, [], config, GAPS)

    output = generate_pdf_report(
        tmp_path / "reports" / "plan.pdf",
        product=PRODUCT,
        config=config,
        gaps=GAPS,
        result=result,
        layout_images=[tmp_path / "missing.png"],
    )

    assert output.exists()
    assert output.read_bytes().startswith(b"%PDF")
