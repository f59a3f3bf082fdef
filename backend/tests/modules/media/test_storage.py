"""Tests for modules/media/storage.py."""

import pytest
from unittest.mock import MagicMock, patch

from modules.media.exceptions import ImageUploadError
from modules.media.storage import CloudinaryImageStorage


@pytest.fixture
def storage() -> CloudinaryImageStorage:
    with patch("modules.media.storage.cloudinary.config"):
        return CloudinaryImageStorage("cloud", "key", "secret")


class TestConstruction:
    @pytest.mark.parametrize("args", [("", "k", "s"), ("c", "", "s"), ("c", "k", "")])
    def test_missing_configuration(self, args):
        with pytest.raises(RuntimeError, match="Cloudinary configuration missing"):
            CloudinaryImageStorage(*args)

    def test_configures_sdk(self):
        with patch("modules.media.storage.cloudinary.config") as config:
            CloudinaryImageStorage("cloud", "key", "secret")
        config.assert_called_once_with(
            cloud_name="cloud", api_key="key", api_secret="secret", secure=True
        )

    def test_from_settings(self):
        settings = MagicMock(
            cloudinary_cloud_name="cloud",
            cloudinary_api_key="key",
            cloudinary_api_secret="secret",
        )
        with patch("modules.media.storage.cloudinary.config"):
            assert isinstance(CloudinaryImageStorage.from_settings(settings), CloudinaryImageStorage)


class TestUpload:
    def test_returns_secure_url(self, storage):
        with patch("modules.media.storage.cloudinary.uploader.upload") as upload:
            upload.return_value = {"secure_url": "https://res/x.png", "url": "http://res/x.png"}

            url = storage.upload(b"data", "posts")

        assert url == "https://res/x.png"
        upload.assert_called_once_with(
            b"data", folder="posts", resource_type="image", unique_filename=True
        )

    def test_public_id_overwrites(self, storage):
        with patch("modules.media.storage.cloudinary.uploader.upload") as upload:
            upload.return_value = {"secure_url": "https://res/a.png"}

            storage.upload(b"data", "avatars", public_id="avatar_1")

        kwargs = upload.call_args.kwargs
        assert kwargs["public_id"] == "avatar_1"
        assert kwargs["overwrite"] is True

    def test_sdk_failure(self, storage):
        with patch("modules.media.storage.cloudinary.uploader.upload") as upload:
            upload.side_effect = Exception("boom")

            with pytest.raises(ImageUploadError) as exc_info:
                storage.upload(b"data", "posts")

        assert exc_info.value.status_code == 500
        assert exc_info.value.details["service"] == "cloudinary"

    def test_missing_url(self, storage):
        with patch("modules.media.storage.cloudinary.uploader.upload") as upload:
            upload.return_value = {}

            with pytest.raises(ImageUploadError):
                storage.upload(b"data", "posts")
