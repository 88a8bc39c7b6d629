from __future__ import annotations
from pathlib import Path
from typing import Union

from .models.offset import Axis


class PixelExpanderError(Exception):
    """Base class for every failure that ends an invocation."""


class DecodeError(PixelExpanderError):
    def __init__(self, path: Union[str, Path], cause: str | BaseException):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"cannot read {self.path}: {cause}")


class EncodeError(PixelExpanderError):
    def __init__(self, path: Union[str, Path], cause: str | BaseException):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"cannot write {self.path}: {cause}")


class OutOfBounds(PixelExpanderError):
    """
    The requested row/column does not exist in the image.
    """
    def __init__(self, axis: Axis, coordinate: int, dimension: int):
        self.axis = axis
        self.coordinate = coordinate
        self.dimension = dimension
        limit = "height" if axis is Axis.ROW else "width"
        super().__init__(
            f"pixel {axis.value} {coordinate} out of bounds "
            f"(image {limit} is {dimension})"
        )


class ConfigurationError(PixelExpanderError):
    def __init__(self, name: str, value: str, expected: str):
        self.name = name
        self.value = value
        super().__init__(f"invalid {name}={value!r}: expected {expected}")
