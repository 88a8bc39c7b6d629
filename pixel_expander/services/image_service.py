from pathlib import Path
from typing import Union

from ..models.image import Image
from ..repositories.image_repository import ImageRepository


class ImageService:
    """I/O helpers.  No pixel logic here."""
    def __init__(self, image_repository: ImageRepository = None):
        self.image_repository = image_repository or ImageRepository()

    def load(self, path: Union[str, Path]) -> Image:
        """Load a single image from disk into an Image object."""
        return self.image_repository.load(path)

    def save(self, image: Image, path: Union[str, Path] = None) -> Path:
        """
        Business-level method to save the image, to *path* when given,
        otherwise back to the image's own path.
        """
        return self.image_repository.save(image, path)
