"""
tweetkit - Twitter API Client
A Python binding for the statuses endpoints of Twitter's REST API.
"""

__version__ = "0.1.0"
__author__ = "Developer"

from .client import TwitterClient
from .auth import Auth
from .errors import (
    ApiResponseError,
    ConfigurationError,
    InvalidArgument,
    InvalidFieldFormat,
    MissingRequiredField,
    RateLimitExceeded,
    TransportError,
    TwitterClientError,
)
from .request import Attachment, RequestDescription
from .transport import AsyncHTTPTransport, HTTPTransport

__all__ = [
    "TwitterClient",
    "Auth",
    "HTTPTransport",
    "AsyncHTTPTransport",
    "RequestDescription",
    "Attachment",
    "TwitterClientError",
    "ConfigurationError",
    "InvalidArgument",
    "MissingRequiredField",
    "InvalidFieldFormat",
    "TransportError",
    "ApiResponseError",
    "RateLimitExceeded",
]
