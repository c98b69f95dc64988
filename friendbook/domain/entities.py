"""Plain data views of the persisted entities and the create/update payloads."""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Address:
    address_id: uuid.UUID
    street_address: str
    zip_code: int
    city: str
    country: str
    seeded: bool = False


@dataclass(frozen=True)
class Pet:
    pet_id: uuid.UUID
    name: str
    kind: str
    mood: str
    friend_id: uuid.UUID
    seeded: bool = False


@dataclass(frozen=True)
class Quote:
    quote_id: uuid.UUID
    quote_text: str
    author: str
    friend_id: uuid.UUID
    seeded: bool = False


@dataclass(frozen=True)
class Friend:
    friend_id: uuid.UUID
    first_name: str
    last_name: str
    email: str
    birthday: Optional[date] = None
    address: Optional[Address] = None
    pets: tuple[Pet, ...] = field(default_factory=tuple)
    quotes: tuple[Quote, ...] = field(default_factory=tuple)
    seeded: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass(frozen=True)
class FriendPayload:
    """Create/update payload for a friend. ``friend_id=None`` means create."""

    friend_id: Optional[uuid.UUID]
    first_name: str
    last_name: str
    email: str
    birthday: Optional[date] = None
    address_id: Optional[uuid.UUID] = None

    @classmethod
    def from_friend(cls, friend: Friend, **changes) -> "FriendPayload":
        payload = cls(
            friend_id=friend.friend_id,
            first_name=friend.first_name,
            last_name=friend.last_name,
            email=friend.email,
            birthday=friend.birthday,
            address_id=friend.address.address_id if friend.address else None,
        )
        return replace(payload, **changes) if changes else payload


@dataclass(frozen=True)
class AddressPayload:
    """Create/update payload for an address. ``address_id=None`` means create."""

    address_id: Optional[uuid.UUID]
    street_address: str
    zip_code: int
    city: str
    country: str


@dataclass(frozen=True)
class ResponseItem(Generic[T]):
    """Single-item service response; ``item`` is None when nothing matched."""

    item: Optional[T] = None
