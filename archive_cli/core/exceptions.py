"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ArchiveAPIError(ApplicationError):
    """Raised when a call to the search service fails."""


class ServiceError(ArchiveAPIError):
    """Raised when the service answers with a structured error message."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message, code="API_SERVICE_ERROR")


class TransportError(ArchiveAPIError):
    """Raised for network failures, unexpected statuses and malformed bodies."""

    def __init__(self, message: str = "Request failed") -> None:
        super().__init__(message, code="API_TRANSPORT_ERROR")


class ConfigurationError(ApplicationError):
    """Raised when the stored configuration cannot be read."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message, code="CFG_INVALID")
