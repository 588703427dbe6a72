from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from PIL import Image


def image_aspect_ratio(path: str | Path) -> float:
    """Return width / height of an image file.

    Only the header is read; pixel data is never loaded.
    """
    with Image.open(path) as img:
        width, height = img.size
    if width <= 0 or height <= 0:
        raise ValueError(f"image has no area: {path}")
    return width / height


def aspect_ratios(paths: Iterable[str | Path]) -> List[float]:
    return [image_aspect_ratio(p) for p in paths]
