"""Immutable snapshots of the submitted edit forms, one per request."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FriendForm:
    friend_id: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    birthday: str = ""
    address_id: str = ""


@dataclass(frozen=True)
class AddressForm:
    address_id: str = ""
    street_address: str = ""
    zip_code: str = ""
    city: str = ""
    country: str = ""
    friend_id: str = ""
