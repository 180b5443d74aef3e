"""Tests for shared/exceptions.py."""

from shared.exceptions import (
    IdentityError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    ExternalServiceError,
)


class TestIdentityError:
    def test_identity_error_message(self):
        """IdentityError should store message."""
        error = IdentityError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_identity_error_default_code(self):
        """IdentityError should default code to class name."""
        error = IdentityError("Test error")
        assert error.code == "IdentityError"

    def test_identity_error_custom_code(self):
        """IdentityError should accept custom code."""
        error = IdentityError("Test error", code="CUSTOM_ERROR")
        assert error.code == "CUSTOM_ERROR"

    def test_identity_error_default_details(self):
        """IdentityError should default details to empty dict."""
        error = IdentityError("Test error")
        assert error.details == {}
        assert error.field is None
        assert error.value is None

    def test_identity_error_to_dict_minimal(self):
        """to_dict should omit field and value when no field is set."""
        error = IdentityError("Test error")
        result = error.to_dict()

        assert result == {"error": "IdentityError", "message": "Test error", "details": {}}

    def test_identity_error_to_dict_with_field(self):
        """to_dict should include the offending field and value."""
        error = IdentityError(
            "Bad code",
            code="INVALID_CODE",
            details={"is_expired": False},
            field="code",
            value="123456",
        )
        result = error.to_dict()

        assert result["error"] == "INVALID_CODE"
        assert result["message"] == "Bad code"
        assert result["details"]["is_expired"] is False
        assert result["field"] == "code"
        assert result["value"] == "123456"

    def test_localized_renders_catalog_message(self):
        """localized should re-render the message from the catalog."""
        error = IdentityError(
            "whatever",
            code="COOLDOWN_ACTIVE",
            details={"seconds_left": 7},
            field="email",
        )
        assert error.localized("en") == "Request a new code in 7 seconds"
        assert error.localized("ru") == "Повторите отправку кода через: 7"


class TestSubclasses:
    def test_not_found_error_inherits_identity_error(self):
        error = NotFoundError("Resource not found")
        assert isinstance(error, IdentityError)
        assert error.code == "NotFoundError"

    def test_validation_error_inherits_identity_error(self):
        error = ValidationError("Invalid input", field="email", value="bad")
        assert isinstance(error, IdentityError)
        assert error.field == "email"

    def test_authentication_error_inherits_identity_error(self):
        error = AuthenticationError("Invalid token")
        assert isinstance(error, IdentityError)


class TestExternalServiceError:
    def test_external_service_error_stores_service(self):
        """ExternalServiceError should store service name."""
        error = ExternalServiceError("Connection failed", service="smtp")
        assert isinstance(error, IdentityError)
        assert error.service == "smtp"

    def test_external_service_error_includes_service_in_details(self):
        """ExternalServiceError should include service in details."""
        error = ExternalServiceError(
            "Connection failed",
            service="smtp",
            details={"error_type": "SMTPConnectError"},
        )
        result = error.to_dict()

        assert result["details"]["service"] == "smtp"
        assert result["details"]["error_type"] == "SMTPConnectError"
