from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class Axis(Enum):
    """Which kind of line an offset selects."""
    ROW = "row"
    COL = "column"

    @property
    def array_axis(self) -> int:
        # pixels are stored (H, W, ...): rows index axis 0, columns axis 1
        return 0 if self is Axis.ROW else 1


@dataclass(frozen=True)
class Offset:
    """
    The source line to replicate: a row or column and its pixel coordinate.
    """
    axis: Axis
    index: int

    @classmethod
    def row(cls, index: int) -> Offset:
        return cls(Axis.ROW, index)

    @classmethod
    def col(cls, index: int) -> Offset:
        return cls(Axis.COL, index)

    def __str__(self) -> str:
        return f"{self.axis.value} {self.index}"
