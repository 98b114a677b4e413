"""
Simple CLI script to execute the master carton planner end-to-end.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Add parent directory to path to allow imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from masterpack_poc.core.planner import plan
from masterpack_poc.core.validation import ConfigurationError
from masterpack_poc.models.dimensions import Arrangement, Dimensions
from masterpack_poc.report.pdf_generator import generate_pdf_report
from masterpack_poc.settings import load_default_inventory, load_defaults
from masterpack_poc.visualization import layout_plot

logger = logging.getLogger("masterpack_poc")


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    base_dir = Path(__file__).resolve().parent
    output_dir = base_dir / "artifacts"
    output_dir.mkdir(parents=True, exist_ok=True)

    defaults = load_defaults()
    inventory = load_default_inventory()
    gaps = defaults.safety_gaps

    product = Dimensions(length=40, width=30, height=20)
    scenarios = {
        "axis": defaults.packaging_config()
        .with_inner_arrangement(Arrangement(l=2, w=2, h=1))
        .with_master_arrangement(Arrangement(l=2, w=2, h=2)),
        "stack": defaults.packaging_config()
        .with_stack_count(6)
        .with_master_arrangement(Arrangement(l=3, w=2, h=1)),
    }

    for name, config in scenarios.items():
        try:
            result = plan(product, inventory, config, gaps, strict=True)
        except ConfigurationError as exc:
            logger.error("Scenario %s rejected: %s", name, exc)
            return 1

        fig = layout_plot.packing_figure(result)
        image_path = output_dir / f"{name}_layout.png"
        layout_plot.save_figure_image(fig, image_path)

        pdf_path = generate_pdf_report(
            output_dir / f"{name}_plan.pdf",
            product=product,
            config=config,
            gaps=gaps,
            result=result,
            layout_images=[image_path],
            unit=defaults.unit,
        )

        print(f"=== Packaging Plan ({name}) ===")
        print(f"Inner Pack: {' x '.join(f'{v:g}' for v in result.inner_box_dims.dimensions)} {defaults.unit}")
        print(f"Master Payload: {' x '.join(f'{v:g}' for v in result.master_payload_dims.dimensions)} {defaults.unit}")
        print(f"Carton: {result.box.id} ({'custom' if result.is_custom else 'inventory'})")
        print(f"Total Items: {result.total_items}")
        print(f"Volume Utilisation: {result.volume_utilisation_pct:.2f}%")
        print(f"Report saved to: {pdf_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
