"""Turn packed rows into per-item results.

pack_rows() speaks in (count, height) rows. Callers usually want one value
per item, in input order, or ready-to-use positions for keyed items.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from app.perfectgrid.layout.config import GridConfig
from app.perfectgrid.layout.justified import Row, row_spans

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridLayout:
    """Result of laying out one ratio sequence.

    heights holds one entry per placed item. starts holds the input index
    of the first item of each row. dropped counts the items that could not
    be placed at all.
    """

    rows: Tuple[Row, ...]
    heights: Tuple[float, ...]
    starts: Tuple[int, ...] = ()
    dropped: int = 0


@dataclass(frozen=True)
class GridItem:
    """Input item for layout. aspect_ratio is width / height."""

    key: str
    aspect_ratio: float


@dataclass(frozen=True)
class GridPlacement:
    key: str
    row: int
    x: float
    y: float
    width: float
    height: float


def expand_rows(rows: Iterable[Row]) -> List[float]:
    """One height per item, in order. Sentinel rows expand to nothing."""

    heights: List[float] = []
    for row in rows:
        heights.extend([row.height] * row.count)
    return heights


def layout_grid(config: GridConfig, ratios: Sequence[float]) -> GridLayout:
    for ratio in ratios:
        if not (math.isfinite(ratio) and ratio > 0):
            raise ValueError("aspect ratios must be finite and > 0")

    spans = row_spans(config, ratios)
    rows = [row for _, row in spans]
    heights = expand_rows(rows)
    dropped = len(ratios) - len(heights)
    if dropped:
        logger.warning("%d of %d item(s) left out of the layout", dropped, len(ratios))
    return GridLayout(
        rows=tuple(rows),
        heights=tuple(heights),
        starts=tuple(start for start, _ in spans),
        dropped=dropped,
    )


def optimal_grid(
    ratios: Sequence[float],
    available_width: float,
    min_line_height: float,
    max_line_height: float,
    min_item_width: float,
    gap: float,
) -> List[float]:
    """Flat entry point: ratios in, one row height per item out.

    Raises GridConfigError before any row is computed if the constraints
    are inconsistent.
    """

    config = GridConfig(
        available_width=available_width,
        min_line_height=min_line_height,
        max_line_height=max_line_height,
        min_item_width=min_item_width,
        gap=gap,
    )
    return list(layout_grid(config, ratios).heights)


def layout_justified(
    config: GridConfig,
    items: Iterable[GridItem],
) -> Tuple[List[GridPlacement], float]:
    """Compute placements and total height.

    Items are laid out left to right, rows top to bottom, with `gap` between
    neighbours in both directions. Dropped items get no placement.

    Returns (placements, total_height).
    """

    items = list(items)
    layout = layout_grid(config, [item.aspect_ratio for item in items])

    placements: List[GridPlacement] = []
    y = 0.0
    placed = [(start, row) for start, row in zip(layout.starts, layout.rows) if row.count]
    for row_no, (start, row) in enumerate(placed):
        x = 0.0
        for item in items[start:start + row.count]:
            width = row.height * item.aspect_ratio
            placements.append(
                GridPlacement(
                    key=item.key,
                    row=row_no,
                    x=x,
                    y=y,
                    width=width,
                    height=row.height,
                )
            )
            x += width + config.gap
        y += row.height + config.gap

    total = y - (config.gap if placements else 0.0)
    return placements, max(0.0, total)
