"""
Image storage interface.

Uploaded avatars and post images are handed to an object store that
returns a durable URL; only that URL is persisted on the user record.
"""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class IImageStorage(Protocol):
    """Interface for storing uploaded images."""

    def upload(
        self,
        data: bytes,
        folder: str,
        public_id: Optional[str] = None,
    ) -> str:
        """
        Store an image and return its public URL.

        Args:
            data: Raw image bytes
            folder: Logical folder ("avatars", "posts")
            public_id: Optional stable name; generated when omitted

        Returns:
            Durable HTTPS URL of the stored image

        Raises:
            ImageUploadError: If the store rejects the upload
        """
        ...
