from pathlib import Path
from typing import Union
import logging
import os
import signal

import numpy as np
import cv2
from PIL import Image as PILImage
from dotenv import load_dotenv

from ..errors import ConfigurationError, DecodeError, EncodeError
from ..models.image import Image

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

# OpenCV hands back BGR(A); Pillow expects RGB(A).
_TO_RGB = {3: cv2.COLOR_BGR2RGB, 4: cv2.COLOR_BGRA2RGBA}


def _decode_timeout() -> int:
    raw = os.getenv("DECODE_TIMEOUT", "5")
    try:
        timeout = int(raw)
    except ValueError:
        raise ConfigurationError("DECODE_TIMEOUT", raw, "a whole number of seconds") from None
    if timeout < 0:
        raise ConfigurationError("DECODE_TIMEOUT", raw, "a whole number of seconds")
    return timeout


def _to_8bit(arr: np.ndarray) -> np.ndarray:
    """Keep the high byte of 16-bit samples; pixels are always handed on as 8-bit."""
    if arr.dtype == np.uint8:
        return arr
    if arr.dtype == np.uint16:
        return (arr >> 8).astype(np.uint8)
    raise TypeError(f"unsupported pixel depth {arr.dtype}")


class ImageRepository:
    """
    Handles file I/O for Image entities.
    """
    def __init__(self):
        self.DECODE_TIMEOUT = _decode_timeout()

    def load(self, path: Union[str, Path]) -> Image:
        path = Path(path)
        if not path.is_file():
            raise DecodeError(path, "no such file")

        # ─── timeout wrapper ──────────────────────────────────────────────
        def _handler(signum, frame):
            raise TimeoutError(f"cv2.imread timed-out after {self.DECODE_TIMEOUT}s")

        use_alarm = hasattr(signal, "SIGALRM") and self.DECODE_TIMEOUT > 0
        if use_alarm:
            previous = signal.signal(signal.SIGALRM, _handler)
            signal.alarm(self.DECODE_TIMEOUT)
        try:
            arr = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
        except (TimeoutError, cv2.error) as err:
            raise DecodeError(path, err) from err
        finally:
            if use_alarm:
                signal.alarm(0)  # always disarm
                signal.signal(signal.SIGALRM, previous)
        # ──────────────────────────────────────────────────────────────────

        if arr is None:
            raise DecodeError(path, "unreadable or unsupported image format")

        try:
            arr = _to_8bit(arr)
        except TypeError as err:
            raise DecodeError(path, err) from err
        if arr.ndim == 3 and arr.shape[2] in _TO_RGB:
            arr = cv2.cvtColor(arr, _TO_RGB[arr.shape[2]])
        logger.debug("Decoded %s: shape=%s dtype=%s", path, arr.shape, arr.dtype)
        return Image(pixels=arr, path=path)

    @staticmethod
    def save(image: Image, path: Union[str, Path] = None) -> Path:
        path = Path(path) if path is not None else image.path
        if path is None:
            raise EncodeError("<unset>", "image has no destination path")
        pixels = image.pixels
        if not pixels.flags['C_CONTIGUOUS']:
            pixels = np.ascontiguousarray(pixels)
        try:
            PILImage.fromarray(pixels).save(path)
        except (OSError, ValueError, TypeError) as err:
            # Pillow raises ValueError for unknown extensions,
            # TypeError for pixel layouts it cannot map to a mode.
            raise EncodeError(path, err) from err
        logger.debug("Encoded %s", path)
        return path
