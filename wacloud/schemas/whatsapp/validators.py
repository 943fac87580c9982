"""
Reusable field-level validators for WhatsApp payloads.

Each validator is a plain function usable as a Pydantic ``AfterValidator`` or
``PlainValidator``, plus an ``Annotated`` alias that models use directly. They
never raise anything but ``ValueError`` or ``PydanticCustomError``, so every
failure surfaces through Pydantic with the field location attached.
"""

import math
import re
from typing import Annotated, Any
from urllib.parse import urlsplit

from pydantic import AfterValidator, PlainValidator
from pydantic_core import PydanticCustomError

from wacloud.schemas.core.errors import NUMBER_LIKE_TYPE_ERROR

# Unix timestamp as sent by the platform (decimal digits, seconds or millis)
TIMESTAMP_REGEX = re.compile(r"^\d{1,20}$")

EMAIL_REGEX = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

# ISO 8601 calendar date used for contact birthdays
DATE_REGEX = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def validate_number_like(value: Any) -> int | float | str:
    """
    Accept a number or a numeric string without changing its representation.

    The platform sends coordinates, prices and quantities as numbers on some
    endpoints and as strings on others.

    Args:
        value: Raw input value

    Returns:
        The value unchanged

    Raises:
        PydanticCustomError: If the value is neither a finite number nor a
            string holding one
    """
    if isinstance(value, bool) or not isinstance(value, int | float | str):
        raise PydanticCustomError(
            NUMBER_LIKE_TYPE_ERROR, "Input should be a number or a numeric string"
        )

    if isinstance(value, str):
        try:
            parsed = float(value.strip())
        except ValueError:
            raise PydanticCustomError(
                "number_like_parsing",
                "Input should be a numeric string, got {value}",
                {"value": value},
            ) from None
    else:
        try:
            parsed = float(value)
        except OverflowError:
            raise PydanticCustomError(
                "number_like_finite", "Number is too large to be represented"
            ) from None

    if not math.isfinite(parsed):
        raise PydanticCustomError("number_like_finite", "Number must be finite")
    return value


def number_value(value: int | float | str) -> float:
    """Numeric value of a number-like field."""
    return float(value)


def _in_range(low: float, high: float, label: str):
    def check(value: int | float | str) -> int | float | str:
        if not low <= number_value(value) <= high:
            raise ValueError(f"{label} must be between {low} and {high}")
        return value

    return check


def validate_http_url(url: str) -> str:
    """
    Validate that a string is a well-formed absolute http(s) URL.

    Args:
        url: URL to validate

    Returns:
        The URL unchanged

    Raises:
        ValueError: If the scheme is not http/https, the host is missing or
            the URL contains whitespace
    """
    if not url or any(ch.isspace() for ch in url):
        raise ValueError("URL cannot be empty or contain whitespace")

    parts = urlsplit(url)
    if parts.scheme not in ("http", "https"):
        raise ValueError("URL must start with http:// or https://")
    if not parts.netloc or not parts.hostname:
        raise ValueError("URL must include a host")

    return url


def validate_timestamp(value: str) -> str:
    """Validate a Unix timestamp sent as a string of digits."""
    if not TIMESTAMP_REGEX.match(value):
        raise ValueError("Timestamp must be a string of at most 20 digits")
    return value


def validate_not_blank(value: str) -> str:
    """Reject strings made only of whitespace."""
    if not value.strip():
        raise ValueError("Value cannot be empty")
    return value


def validate_email(value: str) -> str:
    if not EMAIL_REGEX.match(value):
        raise ValueError("Email address is not valid")
    return value


def validate_date(value: str) -> str:
    if not DATE_REGEX.match(value):
        raise ValueError("Date must use the YYYY-MM-DD format")
    return value


NumberLike = Annotated[int | float | str, PlainValidator(validate_number_like)]
Latitude = Annotated[NumberLike, AfterValidator(_in_range(-90.0, 90.0, "Latitude"))]
Longitude = Annotated[
    NumberLike, AfterValidator(_in_range(-180.0, 180.0, "Longitude"))
]
HttpUrlStr = Annotated[str, AfterValidator(validate_http_url)]
TimestampStr = Annotated[str, AfterValidator(validate_timestamp)]
NonBlankStr = Annotated[str, AfterValidator(validate_not_blank)]
EmailStr = Annotated[str, AfterValidator(validate_email)]
DateStr = Annotated[str, AfterValidator(validate_date)]
