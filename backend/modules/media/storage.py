"""
Cloudinary-backed image storage.
"""

import logging
from typing import Optional

import cloudinary
import cloudinary.uploader

from shared.config import Settings
from .exceptions import ImageUploadError
from .interfaces import IImageStorage

logger = logging.getLogger(__name__)


class CloudinaryImageStorage(IImageStorage):
    """Uploads images to Cloudinary and returns the secure URL."""

    def __init__(self, cloud_name: str, api_key: str, api_secret: str):
        if not cloud_name or not api_key or not api_secret:
            raise RuntimeError(
                "Cloudinary configuration missing. "
                "Set CLOUDINARY_CLOUD_NAME, CLOUDINARY_API_KEY and "
                "CLOUDINARY_API_SECRET environment variables."
            )
        cloudinary.config(
            cloud_name=cloud_name,
            api_key=api_key,
            api_secret=api_secret,
            secure=True,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "CloudinaryImageStorage":
        return cls(
            settings.cloudinary_cloud_name,
            settings.cloudinary_api_key,
            settings.cloudinary_api_secret,
        )

    def upload(
        self,
        data: bytes,
        folder: str,
        public_id: Optional[str] = None,
    ) -> str:
        options = {"folder": folder, "resource_type": "image"}
        if public_id:
            options["public_id"] = public_id
            options["overwrite"] = True
        else:
            options["unique_filename"] = True

        try:
            result = cloudinary.uploader.upload(data, **options)
        except Exception as e:
            logger.warning("Cloudinary upload to %s failed: %s", folder, e)
            raise ImageUploadError(folder, str(e)) from e

        url = result.get("secure_url") or result.get("url")
        if not url:
            raise ImageUploadError(folder, "no URL in upload response")
        return url
