"""Friend use cases: read, create, update and the by-country grouping."""
from __future__ import annotations

import logging
import uuid
from dataclasses import replace

from friendbook.domain.entities import Friend, FriendPayload, ResponseItem
from friendbook.services.base import (
    MissingIdentifierError,
    RelatedItemNotFoundError,
    RepositoryService,
)

logger = logging.getLogger(__name__)

UNKNOWN_COUNTRY = "Unknown"


def group_by_country(friends: list[Friend]) -> dict[str, list[Friend]]:
    """Group friends by address country, countries sorted, friends by name."""
    groups: dict[str, list[Friend]] = {}
    for friend in friends:
        country = (friend.address.country.strip() if friend.address else "") or UNKNOWN_COUNTRY
        groups.setdefault(country, []).append(friend)
    return {
        country: sorted(groups[country], key=lambda f: (f.last_name.lower(), f.first_name.lower()))
        for country in sorted(groups, key=str.lower)
    }


class FriendsService(RepositoryService):
    """Backend contract for friend records."""

    async def read_friend(self, friend_id: uuid.UUID, include_deleted: bool = False) -> ResponseItem[Friend]:
        friend = await self._run(self.repository.get_friend, friend_id, include_deleted)
        return ResponseItem(friend)

    async def read_friends_by_country(
        self, use_seeds: bool = True, include_deleted: bool = False
    ) -> dict[str, list[Friend]]:
        friends = await self._run(self.repository.list_friends, use_seeds, include_deleted)
        return group_by_country(friends)

    async def create_friend(self, payload: FriendPayload) -> ResponseItem[Friend]:
        await self._ensure_address(payload)
        friend = await self._run(self.repository.create_friend, replace(payload, friend_id=None))
        logger.info("Friend %s stored", friend.friend_id)
        return ResponseItem(friend)

    async def update_friend(self, payload: FriendPayload) -> ResponseItem[Friend]:
        if payload.friend_id is None:
            raise MissingIdentifierError("Cannot update a friend without friend_id")
        await self._ensure_address(payload)
        friend = await self._run(self.repository.update_friend, payload)
        if friend is None:
            logger.warning("Friend %s not found for update", payload.friend_id)
        return ResponseItem(friend)

    async def _ensure_address(self, payload: FriendPayload) -> None:
        if payload.address_id is None:
            return
        address = await self._run(self.repository.get_address, payload.address_id)
        if address is None:
            raise RelatedItemNotFoundError(f"Address {payload.address_id} not found")
