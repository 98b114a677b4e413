"""
Inventory loading helpers.

CSV rows follow ``ID, Length, Width, Height``. Malformed rows (too few
fields, empty id, a size that does not start with a finite number) are
skipped rather than rejected, so a header line or a trailing blank line drops
out. A size is read from its leading number, so ``120mm`` counts as 120.
"""

from __future__ import annotations

import json
import logging
import math
import re
from pathlib import Path
from typing import Iterable, List, Optional

from masterpack_poc.models.box_item import BoxItem

logger = logging.getLogger(__name__)


# Leading decimal literal; trailing text such as a unit suffix is ignored.
_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _parse_size(raw: str) -> Optional[float]:
    match = _LEADING_NUMBER.match(raw)
    if match is None:
        return None
    value = float(match.group())
    if not math.isfinite(value):
        return None
    return value


def parse_inventory_csv(text: str) -> List[BoxItem]:
    inventory: List[BoxItem] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        parts = [part.strip() for part in line.split(",")]
        if len(parts) < 4:
            if line.strip():
                logger.debug("Skipping inventory line %d: expected 4 fields", line_number)
            continue

        box_id = parts[0]
        sizes = [_parse_size(part) for part in parts[1:4]]
        if not box_id or any(size is None for size in sizes):
            logger.debug("Skipping inventory line %d: %r", line_number, line)
            continue

        length, width, height = sizes
        inventory.append(BoxItem(id=box_id, length=length, width=width, height=height))
    return inventory


def load_inventory_csv(path: str | Path) -> List[BoxItem]:
    path = Path(path)
    inventory = parse_inventory_csv(path.read_text(encoding="utf-8"))
    logger.info("Loaded %d boxes from %s", len(inventory), path)
    return inventory


def load_inventory_json(path: str | Path) -> List[BoxItem]:
    """Read a JSON list of ``{"id", "length", "width", "height"}`` records."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as file:
        records = json.load(file)
    inventory = [BoxItem.from_dict(record) for record in records]
    logger.info("Loaded %d boxes from %s", len(inventory), path)
    return inventory


def inventory_to_csv(inventory: Iterable[BoxItem]) -> str:
    return "\n".join(
        f"{box.id},{box.length:g},{box.width:g},{box.height:g}" for box in inventory
    )
