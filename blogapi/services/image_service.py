"""Image lookups rendered as data URIs."""
from __future__ import annotations

import base64
import logging
from typing import Optional

from blogapi.db.models import Image
from blogapi.repositories.base import Repository
from blogapi.repositories.sql_repository import SQLRepository
from blogapi.services.errors import NotFoundError

logger = logging.getLogger(__name__)


def to_data_uri(image: Image) -> str:
    payload = base64.b64encode(image.data or b"").decode("ascii")
    return f"data:{image.mime_type};base64,{payload}"


class ImageService:
    def __init__(self, images: Optional[Repository[Image]] = None) -> None:
        self.images = images if images is not None else SQLRepository(Image)

    def get_image_data_uri(self, image_id: int) -> str:
        """Return ``data:<mime>;base64,<payload>`` for a stored image."""
        image = self.images.read(image_id)
        if image is None:
            logger.debug("Image %s requested but not stored", image_id)
            raise NotFoundError("Image does not exist")
        return to_data_uri(image)
