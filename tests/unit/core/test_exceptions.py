"""Unit tests for the exception hierarchy."""

from archive_cli.core.exceptions import (
    ApplicationError,
    ArchiveAPIError,
    ConfigurationError,
    ServiceError,
    TransportError,
)


class TestExceptions:
    """Codes and inheritance of application errors."""

    def test_service_error(self):
        error = ServiceError("API Error: bad query", status_code=400)
        assert isinstance(error, ArchiveAPIError)
        assert isinstance(error, ApplicationError)
        assert error.message == "API Error: bad query"
        assert str(error) == "API Error: bad query"
        assert error.code == "API_SERVICE_ERROR"
        assert error.status_code == 400

    def test_transport_error(self):
        error = TransportError("Request failed: timed out")
        assert isinstance(error, ArchiveAPIError)
        assert error.code == "API_TRANSPORT_ERROR"

    def test_configuration_error_is_not_an_api_error(self):
        error = ConfigurationError()
        assert not isinstance(error, ArchiveAPIError)
        assert error.message == "Invalid configuration"
        assert error.code == "CFG_INVALID"
