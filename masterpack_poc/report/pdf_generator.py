"""
PDF report generator using ReportLab.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import (
    Image,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from masterpack_poc.core.planner import CalculationResult
from masterpack_poc.models.dimensions import Dimensions, SafetyGaps
from masterpack_poc.models.packaging_config import PackagingConfig


def _fmt(values: Sequence[float]) -> str:
    return " x ".join(f"{value:.1f}" for value in values)


def _build_table(data: Sequence[Sequence[str]], column_widths: Sequence[float]) -> Table:
    table = Table(data, colWidths=column_widths)
    table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#F1F1F1")),
                ("TEXTCOLOR", (0, 0), (-1, 0), colors.HexColor("#333333")),
                ("ALIGN", (0, 0), (-1, -1), "LEFT"),
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("FONTSIZE", (0, 0), (-1, -1), 10),
                ("BOTTOMPADDING", (0, 0), (-1, 0), 6),
                ("GRID", (0, 0), (-1, -1), 0.25, colors.HexColor("#DDDDDD")),
            ]
        )
    )
    return table


def input_rows(
    product: Dimensions,
    config: PackagingConfig,
    gaps: SafetyGaps,
    unit: str,
) -> list[tuple[str, str]]:
    if config.is_stacked:
        inner_pack = ("Stack Count", str(config.stack_count))
    else:
        inner_pack = ("Inner Arrangement (L x W x H)", " x ".join(map(str, config.inner_arrangement.as_tuple())))
    return [
        (f"Product Dimensions ({unit})", _fmt(product.dimensions)),
        inner_pack,
        ("Master Arrangement (L x W x H)", " x ".join(map(str, config.master_arrangement.as_tuple()))),
        (f"Inner Wall Thickness ({unit})", f"{config.inner_wall_thickness:.1f}"),
        (f"Safety Gaps L / W / H ({unit})", " / ".join(f"{gap:.1f}" for gap in gaps.as_tuple())),
    ]


def result_rows(result: CalculationResult, gaps: SafetyGaps, unit: str) -> list[tuple[str, str]]:
    envelope = result.master_payload_dims.padded(gaps)
    return [
        (f"Inner Pack ({unit})", _fmt(result.inner_box_dims.dimensions)),
        (f"Master Payload ({unit})", _fmt(result.master_payload_dims.dimensions)),
        (f"Required Envelope ({unit})", _fmt(envelope.dimensions)),
        ("Master Carton", result.box.id),
        (f"Carton Dimensions ({unit})", _fmt(result.box.dimensions)),
        ("Source", "Custom fabrication" if result.is_custom else "Inventory"),
        ("Footprint Rotated", "Yes" if result.rotated else "No"),
        (f"Achieved Gaps L / W / H ({unit})", " / ".join(f"{gap:.1f}" for gap in result.gaps)),
        (f"Waste Volume ({unit}^3)", f"{result.waste_volume:,.1f}"),
        ("Volume Utilisation (%)", f"{result.volume_utilisation_pct:.2f}"),
        ("Total Items per Carton", str(result.total_items)),
    ]


def generate_pdf_report(
    output_path: str | Path,
    product: Dimensions,
    config: PackagingConfig,
    gaps: SafetyGaps,
    result: CalculationResult,
    layout_images: Iterable[str | Path] = (),
    unit: str = "mm",
) -> Path:
    """
    Generate a packaging plan PDF report and return the output path.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    doc = SimpleDocTemplate(
        str(output_path),
        pagesize=landscape(A4),
        leftMargin=20 * mm,
        rightMargin=20 * mm,
        topMargin=15 * mm,
        bottomMargin=15 * mm,
        title="Master Carton Packaging Report",
    )

    styles = getSampleStyleSheet()
    subtitle_style = ParagraphStyle(
        "Subtitle",
        parent=styles["Heading2"],
        textColor=colors.HexColor("#2D5B88"),
    )

    story: list = [
        Paragraph("Master Carton Packaging Report", styles["Title"]),
        Spacer(1, 8 * mm),
        Paragraph("Input Summary", subtitle_style),
        Spacer(1, 4 * mm),
        _build_table(
            [["Parameter", "Value"]] + [list(row) for row in input_rows(product, config, gaps, unit)],
            column_widths=[80 * mm, 100 * mm],
        ),
        Spacer(1, 6 * mm),
        Paragraph("Packaging Plan", subtitle_style),
        Spacer(1, 4 * mm),
        _build_table(
            [["Metric", "Value"]] + [list(row) for row in result_rows(result, gaps, unit)],
            column_widths=[80 * mm, 100 * mm],
        ),
    ]

    for image_path in layout_images:
        image_path = Path(image_path)
        if image_path.exists():
            story.extend(
                [
                    Spacer(1, 6 * mm),
                    Paragraph(image_path.stem.replace("_", " ").title(), subtitle_style),
                    Spacer(1, 4 * mm),
                    Image(str(image_path), width=180 * mm, height=110 * mm),
                ]
            )

    doc.build(story)
    return output_path
