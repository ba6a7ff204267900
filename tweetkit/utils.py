"""
Utility Functions
Validation and encoding helpers shared by the request builders.
"""
from collections.abc import Iterable
from numbers import Real
from typing import Any, Optional
from urllib.parse import urlparse

from .errors import InvalidFieldFormat, MissingRequiredField

OEMBED_ALIGNMENTS = ("left", "center", "right", "none")


def require(field: str, value: Any) -> Any:
    """
    Ensure a mandatory argument was supplied.

    Args:
        field: Parameter name used in the error
        value: Supplied value

    Returns:
        The value unchanged

    Raises:
        MissingRequiredField: if value is None
    """
    if value is None:
        raise MissingRequiredField(field)
    return value


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_tweet_id(field: str, value: Any) -> int:
    """
    Validate a tweet id.

    Args:
        field: Parameter name used in errors
        value: Candidate id

    Returns:
        The id as int
    """
    require(field, value)
    if not _is_int(value) or value <= 0:
        raise InvalidFieldFormat(field, f"must be a positive integer, got {value!r}")
    return value


def validate_tweet_ids(field: str, values: Any) -> list:
    require(field, values)
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise InvalidFieldFormat(field, "must be a list of tweet ids")
    return [validate_tweet_id(field, v) for v in values]


def validate_int(field: str, value: Any, positive: bool = False) -> int:
    if not _is_int(value):
        raise InvalidFieldFormat(field, f"must be an integer, got {value!r}")
    if positive and value <= 0:
        raise InvalidFieldFormat(field, f"must be positive, got {value}")
    return value


def validate_bool(field: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise InvalidFieldFormat(field, f"must be a boolean, got {value!r}")
    return value


def validate_coordinate(field: str, value: Any, limit: float) -> float:
    """
    Validate a latitude or longitude.

    Args:
        field: Parameter name used in errors
        value: Candidate coordinate
        limit: Absolute bound (90 for latitude, 180 for longitude)

    Returns:
        The coordinate as float
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidFieldFormat(field, f"must be a number, got {value!r}")
    if not -limit <= value <= limit:
        raise InvalidFieldFormat(field, f"must be between -{limit:g} and {limit:g}")
    return float(value)


def validate_text(field: str, value: Any, allow_empty: bool = True) -> str:
    if not isinstance(value, str):
        raise InvalidFieldFormat(field, f"must be a string, got {type(value).__name__}")
    if not allow_empty and not value.strip():
        raise InvalidFieldFormat(field, "must not be empty")
    return value


def validate_align(field: str, value: Any) -> str:
    if value not in OEMBED_ALIGNMENTS:
        raise InvalidFieldFormat(field, f"must be one of {', '.join(OEMBED_ALIGNMENTS)}")
    return value


def validate_url(field: str, value: Any) -> str:
    """
    Validate an absolute http(s) URL.

    Args:
        field: Parameter name used in errors
        value: Candidate URL string

    Returns:
        The URL unchanged
    """
    require(field, value)
    validate_text(field, value)
    try:
        parsed = urlparse(value)
    except ValueError as e:
        raise InvalidFieldFormat(field, f"is not a valid URL ({e})") from e
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidFieldFormat(field, f"is not an absolute http(s) URL: {value!r}")
    return value


def validate_media(field: str, value: Any) -> bytes:
    require(field, value)
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise InvalidFieldFormat(field, f"must be binary data, got {type(value).__name__}")
    return bytes(value)


def join_ids(ids: Iterable[int]) -> str:
    """Join tweet ids into the comma separated form the API expects."""
    return ",".join(str(i) for i in ids)


def encode_value(value: Any) -> Optional[str]:
    """
    Render a parameter value for a query string or form body.

    Args:
        value: Typed parameter value

    Returns:
        String form, or None for binary values which are sent as files
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        # fixed-point, up to 8 fractional digits; the API drops exponent forms
        text = format(value, ".8f").rstrip("0")
        return text + "0" if text.endswith(".") else text
    return str(value)
