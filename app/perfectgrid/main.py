from __future__ import annotations

import argparse
import logging
import math
from typing import List, Optional

from app.perfectgrid.layout.config import GridConfig
from app.perfectgrid.layout.grid import GridLayout, layout_grid
from app.perfectgrid.utils.imaging import aspect_ratios


def positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None
    if not (math.isfinite(number) and number > 0):
        raise argparse.ArgumentTypeError(f"must be finite and > 0: {value!r}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compute a justified image grid")
    parser.add_argument("ratios", nargs="*", type=positive_float, help="Aspect ratios (width / height)")
    parser.add_argument("--image", action="append", default=[], help="Image file to take a ratio from (repeatable)")
    parser.add_argument("--width", type=float, default=1526.0, help="Available container width")
    parser.add_argument("--min-height", type=float, default=200.0, help="Minimum row height")
    parser.add_argument("--max-height", type=float, default=575.0, help="Maximum row height")
    parser.add_argument("--min-item-width", type=float, default=175.0, help="Narrowest an item may render")
    parser.add_argument("--gap", type=float, default=4.0, help="Spacing between items of a row")
    parser.add_argument("--rows", action="store_true", help="Print rows instead of per-item heights")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log layout decisions")
    return parser


def run_layout(args: argparse.Namespace) -> GridLayout:
    config = GridConfig(
        available_width=args.width,
        min_line_height=args.min_height,
        max_line_height=args.max_height,
        min_item_width=args.min_item_width,
        gap=args.gap,
    )
    ratios = list(args.ratios) + aspect_ratios(args.image)
    return layout_grid(config, ratios)


def format_layout(layout: GridLayout, rows: bool = False) -> List[str]:
    if rows:
        lines = [f"{row.count} x {row.height:g}" for row in layout.rows]
    else:
        lines = [f"{height:g}" for height in layout.heights]
    if layout.dropped:
        lines.append(f"dropped: {layout.dropped}")
    return lines


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    problems = GridConfig.problems(
        available_width=args.width,
        min_line_height=args.min_height,
        max_line_height=args.max_height,
        min_item_width=args.min_item_width,
    )
    if problems:
        parser.error("; ".join(problems))

    for line in format_layout(run_layout(args), rows=args.rows):
        print(line)


if __name__ == "__main__":
    main()
