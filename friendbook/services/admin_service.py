"""Seed data maintenance."""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from friendbook.repositories.sql_repository import SQLRepository
from friendbook.services.base import RepositoryService
from friendbook.services.seed_generator import SeedFriend, SeedGenerator

logger = logging.getLogger(__name__)


class AdminService(RepositoryService):
    """Creates and removes the demo records shown by the overview page."""

    def __init__(
        self,
        repository: Optional[SQLRepository] = None,
        generator: Optional[SeedGenerator] = None,
    ) -> None:
        super().__init__(repository)
        self.generator = generator or SeedGenerator()

    async def seed(self, count: int) -> dict[str, int]:
        seeds = self.generator.friends(count)
        counts = await self._run(self._store_seeds, seeds)
        logger.info("Seeded %(friends)s friends, %(addresses)s addresses, %(pets)s pets, %(quotes)s quotes", counts)
        return counts

    async def remove_seeds(self, seeded: bool = True) -> dict[str, int]:
        counts = await self._run(self.repository.delete_seeded, seeded)
        logger.info("Removed %s rows with seeded=%s", sum(counts.values()), seeded)
        return counts

    def _store_seeds(self, seeds: list[SeedFriend]) -> dict[str, int]:
        counts = {"friends": 0, "addresses": 0, "pets": 0, "quotes": 0}
        for seed in seeds:
            payload = seed.friend
            if seed.address is not None:
                address = self.repository.create_address(seed.address, seeded=True)
                payload = replace(payload, address_id=address.address_id)
                counts["addresses"] += 1
            friend = self.repository.create_friend(payload, seeded=True)
            counts["friends"] += 1
            for name, kind, mood in seed.pets:
                self.repository.add_pet(friend.friend_id, name, kind, mood, seeded=True)
                counts["pets"] += 1
            for text, author in seed.quotes:
                self.repository.add_quote(friend.friend_id, text, author, seeded=True)
                counts["quotes"] += 1
        return counts
