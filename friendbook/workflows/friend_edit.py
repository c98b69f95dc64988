"""Create/edit page for a single friend."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Optional

from friendbook.domain.entities import Friend, FriendPayload
from friendbook.domain.forms import FriendForm
from friendbook.domain.identifiers import optional_identifier, try_parse_identifier
from friendbook.domain.validation import parse_birthday, validate_friend
from friendbook.services.friends_service import FriendsService
from friendbook.workflows.base import (
    OVERVIEW_URL,
    VALIDATION_MESSAGE,
    PageResult,
    Redirect,
    Render,
    attempt,
    friend_details_url,
)

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "An error occurred while loading the friend details."
SAVE_FAILED_MESSAGE = "Failed to save friend. Please try again."
SAVE_ERROR_MESSAGE = "An error occurred while saving the friend. Please try again later."


@dataclass(frozen=True)
class FriendEditView:
    """Everything the edit-friend template shows."""

    friend_id: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    birthday: str = ""
    address_id: str = ""
    friend: Optional[Friend] = None
    is_new_friend: bool = True
    error_message: str = ""
    validation_errors: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_friend(cls, friend: Friend) -> "FriendEditView":
        return cls(
            friend_id=str(friend.friend_id),
            first_name=friend.first_name,
            last_name=friend.last_name,
            email=friend.email,
            birthday=friend.birthday.isoformat() if friend.birthday else "",
            address_id=str(friend.address.address_id) if friend.address else "",
            friend=friend,
            is_new_friend=False,
        )

    @classmethod
    def from_form(cls, form: FriendForm, **extra) -> "FriendEditView":
        return cls(
            friend_id=form.friend_id,
            first_name=form.first_name,
            last_name=form.last_name,
            email=form.email,
            birthday=form.birthday,
            address_id=form.address_id,
            **extra,
        )


class FriendEditWorkflow:
    def __init__(self, friends_service: FriendsService) -> None:
        self.friends_service = friends_service

    async def load(self, friend_id: str | None) -> PageResult:
        if not (friend_id or "").strip():
            return Render(FriendEditView())

        parsed = try_parse_identifier(friend_id)
        if parsed is None:
            logger.warning("Invalid friend ID provided: %r", friend_id)
            return Redirect(OVERVIEW_URL)

        step = await attempt("loading friend for edit", self.friends_service.read_friend(parsed, False))
        if not step.ok:
            return Render(FriendEditView(friend_id=str(parsed), is_new_friend=False, error_message=LOAD_ERROR_MESSAGE))
        if step.value.item is None:
            logger.warning("Friend with ID %s not found", parsed)
            return Redirect(OVERVIEW_URL)
        return Render(FriendEditView.from_friend(step.value.item))

    def validate(self, form: FriendForm) -> dict[str, str]:
        return validate_friend(form)

    async def save(self, form: FriendForm) -> PageResult:
        friend_id = optional_identifier(form.friend_id)
        is_new = friend_id is None

        errors = self.validate(form)
        if errors:
            friend = None
            if not is_new:
                step = await attempt("reloading friend", self.friends_service.read_friend(friend_id, False))
                friend = step.value.item if step.ok else None
            view = FriendEditView.from_form(
                form,
                friend=friend,
                is_new_friend=is_new,
                error_message=VALIDATION_MESSAGE,
                validation_errors=errors,
            )
            if friend is not None:
                view = replace(view, address_id=str(friend.address.address_id) if friend.address else "")
            return Render(view)

        payload = FriendPayload(
            friend_id=friend_id,
            first_name=form.first_name.strip(),
            last_name=form.last_name.strip(),
            email=form.email.strip(),
            birthday=parse_birthday(form.birthday),
            address_id=optional_identifier(form.address_id),
        )
        if is_new:
            step = await attempt("creating friend", self.friends_service.create_friend(payload))
        else:
            step = await attempt("updating friend", self.friends_service.update_friend(payload))

        if not step.ok:
            return Render(FriendEditView.from_form(form, is_new_friend=is_new, error_message=SAVE_ERROR_MESSAGE))
        friend = step.value.item
        if friend is None:
            return Render(FriendEditView.from_form(form, is_new_friend=is_new, error_message=SAVE_FAILED_MESSAGE))

        logger.info("Friend %s: %s", "created" if is_new else "updated", friend.friend_id)
        return Redirect(friend_details_url(friend.friend_id))
