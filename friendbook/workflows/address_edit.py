"""Create/edit page for an address, optionally linked to a friend."""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from typing import Optional

from friendbook.domain.entities import Address, AddressPayload, FriendPayload
from friendbook.domain.forms import AddressForm
from friendbook.domain.identifiers import optional_identifier, try_parse_identifier
from friendbook.domain.validation import parse_zip_code, validate_address
from friendbook.services.addresses_service import AddressesService
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

LOAD_ERROR_MESSAGE = "An error occurred while loading the address details."
SAVE_FAILED_MESSAGE = "Failed to save address. Please try again."
SAVE_ERROR_MESSAGE = "An error occurred while saving the address. Please try again later."


@dataclass(frozen=True)
class AddressEditView:
    address_id: str = ""
    street_address: str = ""
    zip_code: str = ""
    city: str = ""
    country: str = ""
    friend_id: str = ""
    address: Optional[Address] = None
    is_new_address: bool = True
    error_message: str = ""
    validation_errors: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_address(cls, address: Address, friend_id: str = "") -> "AddressEditView":
        return cls(
            address_id=str(address.address_id),
            street_address=address.street_address,
            zip_code=str(address.zip_code),
            city=address.city,
            country=address.country,
            friend_id=friend_id,
            address=address,
            is_new_address=False,
        )

    @classmethod
    def from_form(cls, form: AddressForm, **extra) -> "AddressEditView":
        return cls(
            address_id=form.address_id,
            street_address=form.street_address,
            zip_code=form.zip_code,
            city=form.city,
            country=form.country,
            friend_id=form.friend_id,
            **extra,
        )


class AddressEditWorkflow:
    """Load, validate and save an address.

    Creating an address while a friend id is supplied also points that
    friend's address reference at the new address. The two writes are not
    atomic: when the second one fails the address stays created and the
    failure is only logged.
    """

    def __init__(self, addresses_service: AddressesService, friends_service: FriendsService) -> None:
        self.addresses_service = addresses_service
        self.friends_service = friends_service

    async def load(self, address_id: str | None, friend_id: str | None = None) -> PageResult:
        friend_ref = (friend_id or "").strip()
        if not (address_id or "").strip():
            return Render(AddressEditView(friend_id=friend_ref))

        parsed = try_parse_identifier(address_id)
        if parsed is None:
            logger.warning("Invalid address ID provided: %r", address_id)
            return Redirect(OVERVIEW_URL)

        step = await attempt("loading address for edit", self.addresses_service.read_address(parsed, False))
        if not step.ok:
            return Render(
                AddressEditView(
                    address_id=str(parsed),
                    friend_id=friend_ref,
                    is_new_address=False,
                    error_message=LOAD_ERROR_MESSAGE,
                )
            )
        if step.value.item is None:
            logger.warning("Address with ID %s not found", parsed)
            return Redirect(OVERVIEW_URL)
        return Render(AddressEditView.from_address(step.value.item, friend_ref))

    def validate(self, form: AddressForm) -> dict[str, str]:
        return validate_address(form)

    async def save(self, form: AddressForm) -> PageResult:
        address_id = optional_identifier(form.address_id)
        friend_id = optional_identifier(form.friend_id)
        is_new = address_id is None

        errors = self.validate(form)
        if errors:
            address = None
            if not is_new:
                step = await attempt("reloading address", self.addresses_service.read_address(address_id, False))
                address = step.value.item if step.ok else None
            return Render(
                AddressEditView.from_form(
                    form,
                    address=address,
                    is_new_address=is_new,
                    error_message=VALIDATION_MESSAGE,
                    validation_errors=errors,
                )
            )

        payload = AddressPayload(
            address_id=address_id,
            street_address=form.street_address.strip(),
            zip_code=parse_zip_code(form.zip_code),
            city=form.city.strip(),
            country=form.country.strip(),
        )
        if is_new:
            step = await attempt("creating address", self.addresses_service.create_address(payload))
        else:
            step = await attempt("updating address", self.addresses_service.update_address(payload))

        if not step.ok:
            return Render(AddressEditView.from_form(form, is_new_address=is_new, error_message=SAVE_ERROR_MESSAGE))
        address = step.value.item
        if address is None:
            return Render(AddressEditView.from_form(form, is_new_address=is_new, error_message=SAVE_FAILED_MESSAGE))

        logger.info("Address %s: %s", "created" if is_new else "updated", address.address_id)
        if is_new and friend_id is not None:
            await self._link_friend(friend_id, address.address_id)

        if friend_id is not None:
            return Redirect(friend_details_url(friend_id))
        return Redirect(OVERVIEW_URL)

    async def _link_friend(self, friend_id: uuid.UUID, address_id: uuid.UUID) -> bool:
        step = await attempt("reading friend to link address", self.friends_service.read_friend(friend_id, False))
        if not step.ok:
            return False
        friend = step.value.item
        if friend is None:
            logger.warning("Friend %s not found, address %s left unlinked", friend_id, address_id)
            return False
        payload = FriendPayload.from_friend(friend, address_id=address_id)
        step = await attempt("linking address to friend", self.friends_service.update_friend(payload))
        if not step.ok or step.value.item is None:
            logger.warning("Address %s created but friend %s was not updated", address_id, friend_id)
            return False
        logger.info("Friend %s now lives at address %s", friend_id, address_id)
        return True
