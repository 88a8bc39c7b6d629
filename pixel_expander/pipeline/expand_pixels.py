# pipeline/expand_pixels.py
from pathlib import Path
from typing import Union
import logging

from ..models.offset import Offset
from ..services.expansion_service import ExpansionService
from ..services.image_service import ImageService

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
def expand_file(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    offset: Offset,
    *,
    image_service: ImageService = None,
    expansion_service: ExpansionService = None,
) -> Path:
    """
    For the image at *input_path*:
        • decode it
        • replicate the *offset* line over every pixel
        • encode the result to *output_path*
    The output is only written once the expansion succeeded.
    """
    image_service = image_service or ImageService()
    expansion_service = expansion_service or ExpansionService()

    # 1. decode
    img = image_service.load(input_path)
    logger.info(f"Loaded {img.path} ({img.width}x{img.height})")

    # 2. expand in-memory
    expansion_service.expand(img, offset)

    # 3. encode
    saved = image_service.save(img, output_path)
    logger.info(f"Saved {saved}")
    return saved
