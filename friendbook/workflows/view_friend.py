"""Minimal read-only page for one friend, addressed by the ``id`` query parameter."""
from __future__ import annotations

from dataclasses import dataclass

from friendbook.domain.entities import Friend
from friendbook.domain.identifiers import parse_identifier
from friendbook.services.friends_service import FriendsService
from friendbook.workflows.base import Render


class FriendNotFoundError(LookupError):
    """Raised when the requested friend does not exist."""


@dataclass(frozen=True)
class ViewFriendView:
    friend: Friend


class SingleFriendLookup:
    """Loads a friend without any recovery policy.

    A malformed or missing id raises InvalidIdentifierError and an unknown id
    raises FriendNotFoundError; the web layer decides how to answer.
    """

    def __init__(self, friends_service: FriendsService) -> None:
        self.friends_service = friends_service

    async def load(self, query_id: str | None) -> Render:
        friend_id = parse_identifier(query_id)
        response = await self.friends_service.read_friend(friend_id, False)
        if response.item is None:
            raise FriendNotFoundError(f"Friend {friend_id} not found")
        return Render(ViewFriendView(friend=response.item))
