"""Error kinds raised by the justified layout."""

from __future__ import annotations

from typing import List


class GridConfigError(ValueError):
    """Raised when a GridConfig violates one of its invariants."""

    def __init__(self, problems: List[str]) -> None:
        super().__init__("; ".join(problems))
        self.problems = list(problems)


class ResizeError(Exception):
    """Base for the signals used while sizing a row.

    These never reach callers of pack_rows(); the packer recovers from them
    by peeling items or forcing a single-item row.
    """


class MinItemWidthOverload(ResizeError):
    pass


class LowerThanMinHeight(ResizeError):
    pass


class BiggerThanMaxHeight(ResizeError):
    pass


class CanNotFitItems(ResizeError):
    pass


class Empty(ResizeError):
    pass
