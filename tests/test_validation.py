from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from friendbook.domain.forms import AddressForm, FriendForm
from friendbook.domain.identifiers import (
    InvalidIdentifierError,
    optional_identifier,
    parse_identifier,
)
from friendbook.domain.validation import validate_address, validate_friend


def _friend(**overrides) -> FriendForm:
    values = {"first_name": "Anna", "last_name": "Berg", "email": "anna@example.com", "birthday": ""}
    values.update(overrides)
    return FriendForm(**values)


def _address(**overrides) -> AddressForm:
    values = {"street_address": "Storgatan 12", "zip_code": "11122", "city": "Stockholm", "country": "Sweden"}
    values.update(overrides)
    return AddressForm(**values)


def test_valid_friend_has_no_errors():
    assert validate_friend(_friend()) == {}


@pytest.mark.parametrize("value", ["", "   "])
def test_first_name_required(value):
    errors = validate_friend(_friend(first_name=value))
    assert errors["FirstName"] == "First name is required."


def test_names_are_limited_to_100_characters():
    errors = validate_friend(_friend(first_name="a" * 101, last_name="b" * 101))
    assert "FirstName" in errors and "LastName" in errors
    assert validate_friend(_friend(first_name="a" * 100, last_name="b" * 100)) == {}


@pytest.mark.parametrize(
    "email",
    ["plainaddress", "anna@example", "@example.com", "anna@.com", "an na@example.com", "anna@exa mple.com"],
)
def test_malformed_email_rejected(email):
    assert validate_friend(_friend(email=email))["Email"] == "Email must be a valid email address."


def test_email_length_limit():
    email = "a" * 250 + "@ex.com"
    assert validate_friend(_friend(email=email))["Email"] == "Email cannot exceed 255 characters."


def test_birthday_in_future_rejected():
    tomorrow = (date.today() + timedelta(days=1)).isoformat()
    assert validate_friend(_friend(birthday=tomorrow))["Birthday"] == "Birthday must be in the past."


def test_birthday_before_1900_rejected():
    assert validate_friend(_friend(birthday="1899-12-31"))["Birthday"] == "Birthday must be after 1900."


def test_birthday_boundaries_accepted():
    assert validate_friend(_friend(birthday="1900-01-01")) == {}
    now = datetime(2024, 5, 17, 12, 0)
    assert validate_friend(_friend(birthday="2024-05-17"), now=now) == {}


def test_unparseable_birthday_rejected():
    assert validate_friend(_friend(birthday="17/05/1980"))["Birthday"] == "Birthday must be a valid date."


@pytest.mark.parametrize("birthday", ["1990-01-01 not a date", "1990-01-01T10:00", "19900101", "1990-W01-1"])
def test_birthday_with_extra_text_rejected(birthday):
    assert validate_friend(_friend(birthday=birthday))["Birthday"] == "Birthday must be a valid date."


@pytest.mark.parametrize("zip_code", ["0", "999999", "12345"])
def test_zip_code_boundaries_accepted(zip_code):
    assert validate_address(_address(zip_code=zip_code)) == {}


@pytest.mark.parametrize("zip_code", ["-1", "1000000"])
def test_zip_code_out_of_range_rejected(zip_code):
    assert validate_address(_address(zip_code=zip_code))["ZipCode"] == "Zip code must be between 0 and 999999."


def test_zip_code_must_be_a_number():
    assert validate_address(_address(zip_code="abc"))["ZipCode"] == "Zip code must be a number."


@pytest.mark.parametrize("zip_code", ["12_345", "+5", "\u0661\u0662\u0663", "1 2"])
def test_zip_code_accepts_only_plain_digits(zip_code):
    assert validate_address(_address(zip_code=zip_code))["ZipCode"] == "Zip code must be a number."


def test_address_fields_reject_punctuation():
    errors = validate_address(_address(street_address="Main St.", city="Sankt-Petersburg", country="U.S.A"))
    assert errors == {
        "StreetAddress": "Street address can only contain letters, numbers, and spaces.",
        "City": "City can only contain letters, numbers, and spaces.",
        "Country": "Country can only contain letters, numbers, and spaces.",
    }


def test_address_required_fields_and_lengths():
    errors = validate_address(_address(street_address="", city=" ", country=""))
    assert set(errors) == {"StreetAddress", "City", "Country"}
    errors = validate_address(_address(street_address="a" * 256, city="b" * 101, country="c" * 101))
    assert errors["StreetAddress"] == "Street address cannot exceed 255 characters."
    assert errors["City"] == "City cannot exceed 100 characters."
    assert errors["Country"] == "Country cannot exceed 100 characters."


def test_identifier_parsing():
    value = "3f2504e0-4f89-11d3-9a0c-0305e82c3301"
    assert str(parse_identifier(value)) == value
    with pytest.raises(InvalidIdentifierError):
        parse_identifier("not-a-guid")
    with pytest.raises(InvalidIdentifierError):
        parse_identifier(None)
    assert optional_identifier("") is None
    assert optional_identifier("00000000-0000-0000-0000-000000000000") is None
