"""
Exception hierarchy for the tweetkit package.
"""
from typing import Optional


class TwitterClientError(Exception):
    """Base exception for all library errors."""


class ConfigurationError(TwitterClientError):
    """Raised when required configuration or credentials are missing."""


class InvalidArgument(TwitterClientError, ValueError):
    """Raised when a request cannot be built from the given arguments."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field


class MissingRequiredField(InvalidArgument):
    """Raised when a mandatory argument was not supplied."""

    def __init__(self, field: str):
        super().__init__(field, "is required")


class InvalidFieldFormat(InvalidArgument):
    """Raised when a supplied value fails structural validation."""


class TransportError(TwitterClientError):
    """Raised when the request could not be sent or the response not decoded."""


class ApiResponseError(TransportError):
    """Raised when the Twitter API answers with an error status or payload."""

    def __init__(self, message: str, code: Optional[int] = None,
                 status_code: Optional[int] = None):
        super().__init__(message)
        self.code = code
        self.status_code = status_code


class RateLimitExceeded(ApiResponseError):
    """Raised when the Twitter API enforces a rate limit."""

    def __init__(self, message: str, code: Optional[int] = None,
                 status_code: Optional[int] = None, reset_at: Optional[int] = None):
        super().__init__(message, code=code, status_code=status_code)
        self.reset_at = reset_at
