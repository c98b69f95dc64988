"""Friend detail page with delete actions for the friend's pets and quotes."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from friendbook.domain.entities import Friend
from friendbook.domain.identifiers import try_parse_identifier
from friendbook.services.friends_service import FriendsService
from friendbook.services.pets_service import PetsService
from friendbook.services.quotes_service import QuotesService
from friendbook.workflows.base import (
    OVERVIEW_URL,
    PageResult,
    Redirect,
    Render,
    attempt,
    friend_details_url,
)

logger = logging.getLogger(__name__)


def _back_to_friend(friend_id: str | None) -> Redirect:
    if not (friend_id or "").strip():
        return Redirect(OVERVIEW_URL)
    return Redirect(friend_details_url(friend_id.strip()))


@dataclass(frozen=True)
class FriendDetailView:
    friend: Friend


class FriendDetailWorkflow:
    def __init__(
        self,
        friends_service: FriendsService,
        pets_service: PetsService,
        quotes_service: QuotesService,
    ) -> None:
        self.friends_service = friends_service
        self.pets_service = pets_service
        self.quotes_service = quotes_service

    async def load(self, friend_id: str | None) -> PageResult:
        parsed = try_parse_identifier(friend_id)
        if parsed is None:
            logger.warning("Invalid friend ID provided: %r", friend_id)
            return Redirect(OVERVIEW_URL)

        step = await attempt("loading friend details", self.friends_service.read_friend(parsed, False))
        if not step.ok:
            return Redirect(OVERVIEW_URL)
        if step.value.item is None:
            logger.warning("Friend with ID %s not found", parsed)
            return Redirect(OVERVIEW_URL)
        return Render(FriendDetailView(friend=step.value.item))

    async def delete_pet(self, pet_id: str | None, friend_id: str | None) -> Redirect:
        back = _back_to_friend(friend_id)
        parsed = try_parse_identifier(pet_id)
        if parsed is None:
            logger.warning("Invalid pet ID provided: %r", pet_id)
            return back

        step = await attempt("deleting pet", self.pets_service.delete_pet(parsed))
        if step.ok:
            if step.value.item is None:
                logger.warning("Pet with ID %s not found", parsed)
            else:
                logger.info("Pet %s deleted", parsed)
        return back

    async def delete_quote(self, quote_id: str | None, friend_id: str | None) -> Redirect:
        back = _back_to_friend(friend_id)
        parsed = try_parse_identifier(quote_id)
        if parsed is None:
            logger.warning("Invalid quote ID provided: %r", quote_id)
            return back

        step = await attempt("deleting quote", self.quotes_service.delete_quote(parsed))
        if step.ok:
            if step.value.item is None:
                logger.warning("Quote with ID %s not found", parsed)
            else:
                logger.info("Quote %s deleted", parsed)
        return back
