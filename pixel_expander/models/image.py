from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import numpy as np


@dataclass
class Image:
    """
    Simple data object: a pixel grid (+ optional source path for bookkeeping).
    No codec logic outside the repository.
    """
    pixels: np.ndarray # Shape (H, W) or (H, W, C); channel layout is opaque here.
    path: Path | None = None # Source of the image.

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def get_pixel(self, x: int, y: int):
        return self.pixels[y, x].copy()

    def set_pixel(self, x: int, y: int, value) -> None:
        self.pixels[y, x] = value
