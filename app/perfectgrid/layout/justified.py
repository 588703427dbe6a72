"""Justified (row-filling) layout helpers.

This module is intentionally UI-framework agnostic.

Goal: given a container width and an ordered list of aspect ratios
(width / height), split the items into contiguous rows and pick one height
per row so every row spans the container as closely as the constraints in
GridConfig allow.

Algorithm: greedy forward scan. The longest prefix of the remaining items
that can be fitted at some admissible height becomes the next row; trailing
items that do not fit spill over into the rows after it. Row heights are
searched in whole pixel steps, downwards from the height that would fill the
row exactly.
"""

from __future__ import annotations

import logging
import math
from typing import List, NamedTuple, Sequence, Tuple

from app.perfectgrid.layout.config import GridConfig
from app.perfectgrid.layout.errors import (
    BiggerThanMaxHeight,
    CanNotFitItems,
    Empty,
    LowerThanMinHeight,
    MinItemWidthOverload,
    ResizeError,
)

logger = logging.getLogger(__name__)


class Row(NamedTuple):
    """`count` consecutive items rendered at `height`.

    Row(0, 0.0) is the "no items" sentinel.
    """

    count: int
    height: float


EMPTY_ROW = Row(0, 0.0)


def row_width(config: GridConfig, ratios: Sequence[float], height: float) -> float:
    """Width taken by `ratios` at `height`, gaps between items included."""

    if not ratios:
        return 0.0
    return sum(height * ratio for ratio in ratios) + config.gap * (len(ratios) - 1)


def row_width_secure(config: GridConfig, ratios: Sequence[float], height: float) -> float:
    """Like row_width(), but reject heights that break the constraints.

    Raises MinItemWidthOverload if an item would render narrower than
    min_item_width, CanNotFitItems if the row overflows available_width.
    """

    if any(height * ratio < config.min_item_width for ratio in ratios):
        raise MinItemWidthOverload(f"an item is narrower than {config.min_item_width} at height {height}")

    width = row_width(config, ratios, height)
    if width > config.available_width:
        raise CanNotFitItems(f"row is {width} wide at height {height}")
    return width


def ideal_height(config: GridConfig, ratios: Sequence[float]) -> float:
    """Whole-pixel height at which the row would fill the width exactly.

    Bounds and min_item_width are not taken into account.
    """

    usable = config.available_width - config.gap * (len(ratios) - 1)
    return float(math.floor(usable / sum(ratios)))


def may_fit(config: GridConfig, ratios: Sequence[float], height: float) -> float:
    """Return the slack left in the row at `height`."""

    if height < config.min_line_height:
        raise LowerThanMinHeight(f"{height} < {config.min_line_height}")
    if height > config.max_line_height:
        raise BiggerThanMaxHeight(f"{height} > {config.max_line_height}")

    return config.available_width - row_width_secure(config, ratios, height)


def best_height(config: GridConfig, ratios: Sequence[float]) -> float:
    """Find the height that fits `ratios` most tightly.

    Walks down one pixel at a time from min(ideal_height, max_line_height)
    and keeps the highest height that fits. Equal slack keeps descending.

    Raises Empty for no ratios and CanNotFitItems when no height in
    [min_line_height, max_line_height] fits.
    """

    if not ratios:
        raise Empty("no items to size")

    height = min(ideal_height(config, ratios), config.max_line_height)
    best = None

    while height >= config.min_line_height:
        try:
            slack = may_fit(config, ratios, height)
        except ResizeError:
            if best is not None:
                return best[0]
        else:
            if best is not None and slack > best[1]:
                return best[0]
            best = (height, slack)
        height -= 1

    if best is None:
        raise CanNotFitItems(f"no height fits {len(ratios)} item(s)")
    return best[0]


def is_fittable(config: GridConfig, ratios: Sequence[float]) -> bool:
    """Cheap check that `ratios` could form a row at all.

    Tries min_line_height, the ideal height and max_line_height; best_height()
    may still fail for a row that passes.
    """

    if not ratios:
        return False

    for height in (config.min_line_height, ideal_height(config, ratios), config.max_line_height):
        try:
            row_width_secure(config, ratios, height)
        except ResizeError:
            continue
        return True
    return False


def row_spans(config: GridConfig, ratios: Sequence[float]) -> List[Tuple[int, Row]]:
    """Like pack_rows(), but pair every row with the index of its first item.

    A sentinel that stands for dropped items starts where they start, so
    callers can tell which items were left out.
    """

    items = tuple(ratios)
    if not items:
        return [(0, EMPTY_ROW)]

    spans: List[Tuple[int, Row]] = []
    start = 0
    while start < len(items):
        end = len(items)
        # Peel trailing items until the candidate row can be fitted.
        while end > start and not is_fittable(config, items[start:end]):
            end -= 1
        if end == start:
            logger.warning("Dropping %d item(s): first item can not be fitted", len(items) - start)
            spans.append((start, EMPTY_ROW))
            break

        candidate = items[start:end]
        if end < len(items):
            logger.debug("Row at %d: %d item(s) spill over", start, len(items) - end)

        try:
            height = best_height(config, candidate)
        except ResizeError:
            if len(candidate) != 1:
                logger.warning("Dropping %d item(s): no height fits the row at %d", len(candidate), start)
                spans.append((start, EMPTY_ROW))
                start = end
                continue
            logger.warning("Item %d does not fit; forcing it to height %s", start, config.min_line_height)
            height = config.min_line_height

        logger.debug("Row at %d: %d item(s) at height %s", start, len(candidate), height)
        spans.append((start, Row(len(candidate), float(height))))
        start = end

    return spans


def pack_rows(config: GridConfig, ratios: Sequence[float]) -> List[Row]:
    """Split `ratios` into rows, in order.

    Returns (count, height) rows whose counts add up to len(ratios), unless
    some items can not be placed:

    - a multi-item row that passes is_fittable() but has no admissible
      height becomes the EMPTY_ROW sentinel, its items are dropped and
      packing goes on with the items after it;
    - if not even the first remaining item can be fitted, the packer ends
      with EMPTY_ROW and everything left is dropped.

    An empty input gives [EMPTY_ROW]. The caller's sequence is never modified.
    """

    return [row for _, row in row_spans(config, ratios)]
