"""Field rules for the friend and address edit forms.

Each validator returns a mapping of field name to a human readable message.
An empty mapping means the form may be saved. Only the first failing rule of
a field is reported.
"""
from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

from .forms import AddressForm, FriendForm

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
DISALLOWED_ADDRESS_CHARS = re.compile(r"[^a-zA-Z0-9\s]")
ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII)
INTEGER_PATTERN = re.compile(r"^-?\d+$", re.ASCII)

NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 255
STREET_MAX_LENGTH = 255
CITY_MAX_LENGTH = 100
COUNTRY_MAX_LENGTH = 100
ZIP_CODE_MIN = 0
ZIP_CODE_MAX = 999999
BIRTHDAY_MIN_YEAR = 1900


def parse_birthday(value: str | None) -> Optional[date]:
    """Read an ISO ``YYYY-MM-DD`` birthday; blank means no birthday."""
    text = (value or "").strip()
    if not text:
        return None
    if not ISO_DATE_PATTERN.match(text):
        raise ValueError(f"not an ISO date: {text!r}")
    return date.fromisoformat(text)


def parse_zip_code(value: str | None) -> int:
    text = (value or "").strip()
    if not INTEGER_PATTERN.match(text):
        raise ValueError(f"not a whole number: {text!r}")
    return int(text)


def is_valid_email(value: str | None) -> bool:
    return bool(value) and bool(EMAIL_PATTERN.match(value))


def _is_blank(value: str | None) -> bool:
    return not value or not value.strip()


def _check_name(errors: dict[str, str], field: str, label: str, value: str) -> None:
    if _is_blank(value):
        errors[field] = f"{label} is required."
    elif len(value) > NAME_MAX_LENGTH:
        errors[field] = f"{label} cannot exceed {NAME_MAX_LENGTH} characters."


def _check_address_text(errors: dict[str, str], field: str, label: str, value: str, max_length: int) -> None:
    if _is_blank(value):
        errors[field] = f"{label} is required."
    elif DISALLOWED_ADDRESS_CHARS.search(value):
        errors[field] = f"{label} can only contain letters, numbers, and spaces."
    elif len(value) > max_length:
        errors[field] = f"{label} cannot exceed {max_length} characters."


def validate_friend(form: FriendForm, now: Optional[datetime] = None) -> dict[str, str]:
    errors: dict[str, str] = {}
    _check_name(errors, "FirstName", "First name", form.first_name)
    _check_name(errors, "LastName", "Last name", form.last_name)

    if _is_blank(form.email):
        errors["Email"] = "Email is required."
    elif not is_valid_email(form.email):
        errors["Email"] = "Email must be a valid email address."
    elif len(form.email) > EMAIL_MAX_LENGTH:
        errors["Email"] = f"Email cannot exceed {EMAIL_MAX_LENGTH} characters."

    try:
        birthday = parse_birthday(form.birthday)
    except ValueError:
        errors["Birthday"] = "Birthday must be a valid date."
    else:
        if birthday is not None:
            today = (now or datetime.now()).date()
            if birthday > today:
                errors["Birthday"] = "Birthday must be in the past."
            elif birthday.year < BIRTHDAY_MIN_YEAR:
                errors["Birthday"] = f"Birthday must be after {BIRTHDAY_MIN_YEAR}."
    return errors


def validate_address(form: AddressForm) -> dict[str, str]:
    errors: dict[str, str] = {}
    _check_address_text(errors, "StreetAddress", "Street address", form.street_address, STREET_MAX_LENGTH)
    _check_address_text(errors, "City", "City", form.city, CITY_MAX_LENGTH)

    try:
        zip_code = parse_zip_code(form.zip_code)
    except ValueError:
        errors["ZipCode"] = "Zip code must be a number."
    else:
        if zip_code < ZIP_CODE_MIN or zip_code > ZIP_CODE_MAX:
            errors["ZipCode"] = f"Zip code must be between {ZIP_CODE_MIN} and {ZIP_CODE_MAX}."

    _check_address_text(errors, "Country", "Country", form.country, COUNTRY_MAX_LENGTH)
    return errors
