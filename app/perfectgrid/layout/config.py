"""Layout constraints for the justified grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from app.perfectgrid.layout.errors import GridConfigError


@dataclass(frozen=True)
class GridConfig:
    """Constraints shared by every row of one layout computation.

    available_width: container width the rows are justified against.
    min_line_height / max_line_height: admissible row heights.
    min_item_width: narrowest an item may render.
    gap: spacing between adjacent items of a row (none at the edges).
    """

    available_width: float
    min_line_height: float
    max_line_height: float
    min_item_width: float
    gap: float = 0.0

    def __post_init__(self) -> None:
        problems = self.problems(
            available_width=self.available_width,
            min_line_height=self.min_line_height,
            max_line_height=self.max_line_height,
            min_item_width=self.min_item_width,
        )
        if problems:
            raise GridConfigError(problems)

    @classmethod
    def problems(
        cls,
        *,
        available_width: float,
        min_line_height: float,
        max_line_height: float,
        min_item_width: float,
    ) -> List[str]:
        """Return the invariant violations for a candidate config.

        An empty list means the values can be used to build a GridConfig.
        """

        found: List[str] = []
        if min_line_height > max_line_height:
            found.append("Min height can not be bigger than max height")
        if available_width < min_item_width:
            found.append("Available width can not be less than min item width")
        return found
