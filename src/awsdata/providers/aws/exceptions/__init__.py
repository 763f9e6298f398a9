"""AWS provider exceptions."""

from awsdata.providers.aws.exceptions.aws_exceptions import (
    AmbiguousOptionsError,
    AuthorizationError,
    AWSConfigurationError,
    AWSEntityNotFoundError,
    AWSError,
    AWSValidationError,
    NetworkError,
    NoMatchingOptionsError,
    RateLimitError,
    convert_client_error,
    error_code_equals,
)

__all__: list[str] = [
    "AWSConfigurationError",
    "AWSEntityNotFoundError",
    "AWSError",
    "AWSValidationError",
    "AmbiguousOptionsError",
    "AuthorizationError",
    "NetworkError",
    "NoMatchingOptionsError",
    "RateLimitError",
    "convert_client_error",
    "error_code_equals",
]
