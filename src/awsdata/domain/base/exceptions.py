"""Base exception hierarchy shared by every layer."""

from typing import Any, Optional


class DomainException(Exception):
    """Base class for all errors raised by awsdata."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize the error for CLI and log output."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return self.message


class InfrastructureError(DomainException):
    """Raised when an external system call fails."""

    def __init__(
        self,
        component: str,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, error_code, details)
        self.component = component


class ConfigurationError(DomainException):
    """Raised when configuration cannot be loaded or validated."""


class DataSourceError(DomainException):
    """Base class for errors raised while reading a data source."""


class SchemaValidationError(DataSourceError):
    """Raised when an attribute does not conform to the data source schema."""


class DataSourceNotFoundError(DataSourceError):
    """Raised when an unknown data source name is requested."""
