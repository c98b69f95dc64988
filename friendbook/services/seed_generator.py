"""Random demo data for the overview page and local development."""
from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from friendbook.domain.entities import AddressPayload, FriendPayload

FIRST_NAMES = [
    "Anna", "Bjorn", "Clara", "David", "Elsa", "Filip", "Greta", "Hugo", "Ingrid", "Johan",
    "Karin", "Lars", "Maja", "Nils", "Olivia", "Per", "Rut", "Sven", "Tove", "Ulf",
]
LAST_NAMES = [
    "Andersson", "Berg", "Carlsson", "Dahl", "Ek", "Falk", "Gustafsson", "Holm", "Isaksson",
    "Johansson", "Karlsson", "Lind", "Martinsson", "Nilsson", "Olsson", "Persson", "Svensson",
]
EMAIL_DOMAINS = ["example.com", "mail.test", "friends.local"]
STREETS = ["Storgatan", "Kungsgatan", "Drottninggatan", "Parkvagen", "Skolgatan", "Kyrkvagen"]
CITIES_BY_COUNTRY = {
    "Sweden": ["Stockholm", "Gothenburg", "Malmo", "Uppsala"],
    "Norway": ["Oslo", "Bergen", "Trondheim"],
    "Denmark": ["Copenhagen", "Aarhus", "Odense"],
    "Finland": ["Helsinki", "Espoo", "Tampere"],
}
PET_NAMES = ["Fido", "Misse", "Rex", "Bella", "Nemo", "Kalle", "Luna", "Sixten"]
PET_KINDS = ["dog", "cat", "rabbit", "fish", "bird"]
PET_MOODS = ["happy", "hungry", "lazy", "sulky", "busy"]
QUOTES = [
    ("The only way to do great work is to love what you do.", "Steve Jobs"),
    ("Simplicity is prerequisite for reliability.", "Edsger W. Dijkstra"),
    ("A friend is someone who knows all about you and still loves you.", "Elbert Hubbard"),
    ("Walking with a friend in the dark is better than walking alone in the light.", "Helen Keller"),
    ("Programs must be written for people to read.", "Harold Abelson"),
    ("Friendship is born at that moment when one person says to another: What! You too?", "C. S. Lewis"),
]


@dataclass(frozen=True)
class SeedFriend:
    friend: FriendPayload
    address: Optional[AddressPayload]
    pets: tuple[tuple[str, str, str], ...]
    quotes: tuple[tuple[str, str], ...]


class SeedGenerator:
    """Builds seed payloads; pass a seeded ``random.Random`` for reproducible data."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def address(self) -> AddressPayload:
        country = self.rng.choice(sorted(CITIES_BY_COUNTRY))
        return AddressPayload(
            address_id=None,
            street_address=f"{self.rng.choice(STREETS)} {self.rng.randint(1, 120)}",
            zip_code=self.rng.randint(10000, 99999),
            city=self.rng.choice(CITIES_BY_COUNTRY[country]),
            country=country,
        )

    def birthday(self) -> Optional[date]:
        if self.rng.random() < 0.2:
            return None
        start = date(1950, 1, 1)
        return start + timedelta(days=self.rng.randint(0, 365 * 55))

    def friend(self) -> SeedFriend:
        first = self.rng.choice(FIRST_NAMES)
        last = self.rng.choice(LAST_NAMES)
        email = f"{first}.{last}@{self.rng.choice(EMAIL_DOMAINS)}".lower()
        payload = FriendPayload(
            friend_id=None,
            first_name=first,
            last_name=last,
            email=email,
            birthday=self.birthday(),
        )
        address = self.address() if self.rng.random() < 0.8 else None
        pets = tuple(
            (self.rng.choice(PET_NAMES), self.rng.choice(PET_KINDS), self.rng.choice(PET_MOODS))
            for _ in range(self.rng.randint(0, 3))
        )
        quotes = tuple(self.rng.sample(QUOTES, self.rng.randint(0, 3)))
        return SeedFriend(friend=payload, address=address, pets=pets, quotes=quotes)

    def friends(self, count: int) -> list[SeedFriend]:
        return [self.friend() for _ in range(max(0, count))]
