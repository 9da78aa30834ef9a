"""In-memory store for the beacon response images."""

import logging
from pathlib import Path

from ga_beacon.domain.models import IMAGE_VARIANTS, ImageChoice

logger = logging.getLogger(__name__)


class ImageStore:
    """Reads image files from a directory once and serves the cached bytes."""

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)
        self._cache: dict[str, bytes] = {}

    def load(self, image: ImageChoice) -> bytes:
        """Return the bytes behind ``image``, reading the file on first use."""
        data = self._cache.get(image.file_name)
        if data is None:
            data = (self.directory / image.file_name).read_bytes()
            self._cache[image.file_name] = data
        return data

    def preload(self, images: tuple[ImageChoice, ...] = IMAGE_VARIANTS) -> None:
        """Read every variant up front so a missing file fails at startup.

        Raises:
            FileNotFoundError: If any image file does not exist.
        """
        missing = [i.file_name for i in images if not (self.directory / i.file_name).is_file()]
        if missing:
            raise FileNotFoundError(f"Images missing from {self.directory}: {', '.join(missing)}")
        for image in images:
            self.load(image)
        logger.info(f"Loaded {len(images)} beacon images from {self.directory}")
