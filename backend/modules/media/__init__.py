"""
Media module.

Stores avatar and post images with an external object store.

Public API:
- IImageStorage: Interface for image uploads
- CloudinaryImageStorage: Cloudinary implementation
- ImageUploadError: Raised on upload failure
"""

from .interfaces import IImageStorage
from .storage import CloudinaryImageStorage
from .exceptions import ImageUploadError

__all__ = [
    "IImageStorage",
    "CloudinaryImageStorage",
    "ImageUploadError",
]
