from __future__ import annotations

import logging

import numpy as np

from ..errors import OutOfBounds
from ..models.image import Image
from ..models.offset import Axis, Offset

logger = logging.getLogger(__name__)


class ExpansionService:
    """
    Replicates one row or column of an Image across the whole grid.
    *   No I/O here—works only with Image objects.
    *   Mutates the Image in place.
    """

    # ─── Public API ────────────────────────────────────────────────
    def expand(self, img: Image, offset: Offset) -> Image:
        """
        Overwrite every pixel of *img* with the pixel found on the source
        line selected by *offset*.

        Args:
            img (Image): The image to modify in place.
            offset (Offset): Source row or column.

        Returns:
            The same Image object, for chaining.

        Raises:
            OutOfBounds: the offset does not address a line of *img*.
                Nothing has been written when this is raised.
        """
        self.check_bounds(img, offset)

        axis = offset.axis.array_axis
        # np.take copies, so the source line survives being written over.
        line = np.take(img.pixels, offset.index, axis=axis)
        np.copyto(img.pixels, np.expand_dims(line, axis))

        logger.info("Expanded %s across %dx%d image", offset, img.width, img.height)
        return img

    @staticmethod
    def dimension_for(img: Image, axis: Axis) -> int:
        return img.height if axis is Axis.ROW else img.width

    def check_bounds(self, img: Image, offset: Offset) -> None:
        dimension = self.dimension_for(img, offset.axis)
        if not 0 <= offset.index < dimension:
            raise OutOfBounds(offset.axis, offset.index, dimension)
