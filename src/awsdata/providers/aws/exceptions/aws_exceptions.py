"""AWS provider exceptions and ClientError conversion."""

from typing import Any, Optional

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectTimeoutError,
    EndpointConnectionError,
    HTTPClientError,
    NoCredentialsError,
    ParamValidationError,
    ReadTimeoutError,
)

from awsdata.domain.base.exceptions import DataSourceError, InfrastructureError


class AWSError(InfrastructureError):
    """Base class for errors returned by AWS or botocore."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__("AWS", message, error_code, details)


class AWSValidationError(AWSError):
    """AWS rejected the request parameters."""


class AWSEntityNotFoundError(AWSError):
    """The requested AWS entity does not exist."""


class AuthorizationError(AWSError):
    """Credentials are missing, invalid or not permitted."""


class RateLimitError(AWSError):
    """The request was throttled."""


class NetworkError(AWSError):
    """The endpoint could not be reached or timed out."""


class AWSConfigurationError(AWSError):
    """The AWS session or client could not be configured."""


class NoMatchingOptionsError(DataSourceError):
    """No orderable option matched the search criteria."""

    def __init__(self, message: str, criteria: dict[str, Any]) -> None:
        super().__init__(message, details={"criteria": criteria})
        self.criteria = criteria


class AmbiguousOptionsError(DataSourceError):
    """More than one orderable option matched and no preference resolved it."""

    def __init__(self, message: str, candidates: list[str]) -> None:
        super().__init__(message, details={"candidates": candidates})
        self.candidates = candidates


_ERROR_CODE_MAP: dict[str, type[AWSError]] = {
    "ValidationError": AWSValidationError,
    "InvalidParameterValue": AWSValidationError,
    "InvalidParameterCombination": AWSValidationError,
    "BadRequestException": AWSValidationError,
    "NotFoundException": AWSEntityNotFoundError,
    "ResourceNotFoundException": AWSEntityNotFoundError,
    "UnauthorizedOperation": AuthorizationError,
    "AccessDenied": AuthorizationError,
    "AccessDeniedException": AuthorizationError,
    "InvalidClientTokenId": AuthorizationError,
    "ExpiredToken": AuthorizationError,
    "Throttling": RateLimitError,
    "ThrottlingException": RateLimitError,
    "RequestLimitExceeded": RateLimitError,
    "LimitExceededException": RateLimitError,
    "RequestTimeout": NetworkError,
    "ServiceUnavailable": NetworkError,
}

_NETWORK_ERRORS = (EndpointConnectionError, ConnectTimeoutError, ReadTimeoutError, HTTPClientError)


def error_code_of(error: Exception) -> Optional[str]:
    """Return the AWS error code carried by a ClientError, else None."""
    if isinstance(error, ClientError):
        return error.response.get("Error", {}).get("Code")
    return None


def error_code_equals(error: Optional[Exception], *codes: str) -> bool:
    """Check whether error is a ClientError with one of the given codes."""
    if error is None:
        return False
    return error_code_of(error) in codes


def convert_client_error(error: Exception, context: str) -> AWSError:
    """
    Convert a botocore error into the AWS exception taxonomy.

    Args:
        error: ClientError or BotoCoreError raised by a client call
        context: Human readable description of the failed operation

    Returns:
        An AWSError subclass instance; the caller raises it from the botocore error
    """
    if isinstance(error, ClientError):
        error_code = error_code_of(error) or "Unknown"
        error_message = error.response.get("Error", {}).get("Message", str(error))
        exc_class = _ERROR_CODE_MAP.get(error_code, AWSError)
        return exc_class(
            f"{context}: {error_code} - {error_message}",
            error_code=error_code,
            details={"operation": error.operation_name},
        )

    if isinstance(error, NoCredentialsError):
        return AuthorizationError(f"{context}: {error}", error_code="NoCredentialsError")

    if isinstance(error, ParamValidationError):
        return AWSValidationError(f"{context}: {error}", error_code="ParamValidationError")

    if isinstance(error, _NETWORK_ERRORS):
        return NetworkError(f"{context}: {error}", error_code=type(error).__name__)

    if isinstance(error, BotoCoreError):
        return AWSError(f"{context}: {error}", error_code=type(error).__name__)

    return AWSError(f"{context}: {error}")
