"""
Tests for the reusable field validators.
"""

import pytest
from pydantic import TypeAdapter, ValidationError

from wacloud.schemas.core.errors import ErrorKind, issues_from_validation_error
from wacloud.schemas.whatsapp.validators import (
    DateStr,
    EmailStr,
    HttpUrlStr,
    Latitude,
    Longitude,
    NonBlankStr,
    NumberLike,
    TimestampStr,
    number_value,
)


def first_issue(adapter: TypeAdapter, value):
    with pytest.raises(ValidationError) as exc_info:
        adapter.validate_python(value)
    return issues_from_validation_error(exc_info.value, value)[0]


class TestNumberLike:
    adapter = TypeAdapter(NumberLike)

    @pytest.mark.parametrize("value", [3, 1.5, "2", " 1.50", "-122.14"])
    def test_representation_is_preserved(self, value):
        validated = self.adapter.validate_python(value)

        assert validated == value
        assert type(validated) is type(value)

    def test_bool_is_rejected(self):
        found = first_issue(self.adapter, True)

        assert found.kind is ErrorKind.TYPE_MISMATCH
        assert found.constraint == "number_like_type"

    def test_non_numeric_string(self):
        found = first_issue(self.adapter, "twelve")

        assert found.kind is ErrorKind.TYPE_MISMATCH
        assert found.input == "twelve"

    @pytest.mark.parametrize("value", ["nan", float("inf")])
    def test_non_finite(self, value):
        assert first_issue(self.adapter, value).kind is ErrorKind.CONSTRAINT_VIOLATION

    @pytest.mark.parametrize(
        "value",
        [10**400, -(10**400), "9" * 500],
        ids=["huge-int", "huge-negative-int", "long-digit-string"],
    )
    def test_too_large(self, value):
        found = first_issue(self.adapter, value)

        assert found.kind is ErrorKind.CONSTRAINT_VIOLATION
        assert found.constraint == "number_like_finite"

    def test_number_value(self):
        assert number_value("1.25") == 1.25
        assert number_value(4) == 4.0


class TestCoordinates:
    @pytest.mark.parametrize("value", [-90, "90", 0.0])
    def test_latitude_bounds(self, value):
        assert TypeAdapter(Latitude).validate_python(value) == value

    @pytest.mark.parametrize("value", [90.01, "-91"])
    def test_latitude_out_of_range(self, value):
        found = first_issue(TypeAdapter(Latitude), value)

        assert found.kind is ErrorKind.CONSTRAINT_VIOLATION
        assert "Latitude" in found.message

    def test_longitude_range(self):
        adapter = TypeAdapter(Longitude)

        assert adapter.validate_python("-180") == "-180"
        assert first_issue(adapter, 180.5).kind is ErrorKind.CONSTRAINT_VIOLATION


class TestStringValidators:
    @pytest.mark.parametrize(
        "url", ["https://example.com", "http://example.com/a?b=1"]
    )
    def test_valid_urls(self, url):
        assert TypeAdapter(HttpUrlStr).validate_python(url) == url

    @pytest.mark.parametrize(
        "url", ["", "ftp://example.com", "https://", "https://exa mple.com", "example.com"]
    )
    def test_invalid_urls(self, url):
        with pytest.raises(ValidationError):
            TypeAdapter(HttpUrlStr).validate_python(url)

    def test_timestamp_digits_only(self):
        adapter = TypeAdapter(TimestampStr)

        assert adapter.validate_python("1603059201") == "1603059201"
        with pytest.raises(ValidationError):
            adapter.validate_python("16030592O1")
        with pytest.raises(ValidationError):
            adapter.validate_python("1" * 5000)

    def test_non_blank(self):
        adapter = TypeAdapter(NonBlankStr)

        assert adapter.validate_python(" x ") == " x "
        assert first_issue(adapter, "   ").kind is ErrorKind.CONSTRAINT_VIOLATION

    def test_email(self):
        adapter = TypeAdapter(EmailStr)

        assert adapter.validate_python("ada@example.com") == "ada@example.com"
        with pytest.raises(ValidationError):
            adapter.validate_python("ada@example")

    def test_date(self):
        adapter = TypeAdapter(DateStr)

        assert adapter.validate_python("1815-12-10") == "1815-12-10"
        with pytest.raises(ValidationError):
            adapter.validate_python("10/12/1815")
