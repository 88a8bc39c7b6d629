from pathlib import Path

import numpy as np
import pytest
from PIL import Image as PILImage

from pixel_expander.models.image import Image

A = (255, 0, 0)
B = (0, 255, 0)
C = (0, 0, 255)
D = (255, 255, 0)


@pytest.fixture
def quad_pixels() -> np.ndarray:
    """2x2 RGB grid laid out as  A B / C D."""
    return np.array([[A, B], [C, D]], dtype=np.uint8)


@pytest.fixture
def quad_image(quad_pixels) -> Image:
    return Image(pixels=quad_pixels)


@pytest.fixture
def random_image() -> Image:
    rng = np.random.default_rng(7)
    return Image(pixels=rng.integers(0, 256, size=(5, 7, 4), dtype=np.uint8))


@pytest.fixture
def write_image(tmp_path):
    """Write a numpy pixel grid to *name* under tmp_path with Pillow."""
    def _write(pixels: np.ndarray, name: str = "input.png") -> Path:
        path = tmp_path / name
        PILImage.fromarray(pixels).save(path)
        return path
    return _write
