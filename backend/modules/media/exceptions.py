"""
Media module exceptions.
"""

from shared.exceptions import ExternalServiceError


class ImageUploadError(ExternalServiceError):
    """Raised when the image store fails to accept an upload."""

    def __init__(self, folder: str, reason: str):
        super().__init__(
            "Image upload failed",
            service="cloudinary",
            code="IMAGE_UPLOAD_FAILED",
            details={"folder": folder, "reason": reason},
        )
