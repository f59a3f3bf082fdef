"""Tests for shared/exceptions.py."""

from shared.exceptions import (
    AltairisError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
)


class TestAltairisError:
    def test_message(self):
        """AltairisError should store message."""
        error = AltairisError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_default_code(self):
        """AltairisError should default code to class name."""
        error = AltairisError("Test error")
        assert error.code == "AltairisError"

    def test_custom_code_and_details(self):
        error = AltairisError("Test error", code="CUSTOM_ERROR", details={"key": "value"})
        assert error.code == "CUSTOM_ERROR"
        assert error.details == {"key": "value"}

    def test_default_details(self):
        """AltairisError should default details to empty dict."""
        assert AltairisError("Test error").details == {}

    def test_to_dict(self):
        """AltairisError should convert to dict."""
        error = AltairisError("Test error", code="TEST_ERROR", details={"key": "value"})
        result = error.to_dict()

        assert result["error"] == "TEST_ERROR"
        assert result["message"] == "Test error"
        assert result["details"]["key"] == "value"

    def test_default_status_is_server_error(self):
        assert AltairisError.status_code == 500


class TestStatusCodes:
    def test_validation_error_is_400(self):
        assert ValidationError("bad").status_code == 400

    def test_conflict_error_is_400(self):
        assert ConflictError("taken").status_code == 400

    def test_authentication_error_is_401(self):
        assert AuthenticationError("who are you").status_code == 401

    def test_authorization_error_is_403(self):
        assert AuthorizationError("no").status_code == 403

    def test_not_found_error_is_404(self):
        assert NotFoundError("gone").status_code == 404

    def test_all_inherit_base(self):
        for cls in (NotFoundError, ValidationError, ConflictError,
                    AuthenticationError, AuthorizationError):
            assert isinstance(cls("x"), AltairisError)


class TestExternalServiceError:
    def test_stores_service(self):
        error = ExternalServiceError("Connection failed", service="cloudinary")
        assert error.service == "cloudinary"
        assert error.status_code == 500

    def test_includes_service_in_details(self):
        error = ExternalServiceError(
            "Connection failed",
            service="cloudinary",
            details={"status_code": 502},
        )
        result = error.to_dict()

        assert result["details"]["service"] == "cloudinary"
        assert result["details"]["status_code"] == 502
