"""Address use cases."""
from __future__ import annotations

import logging
import uuid
from dataclasses import replace

from friendbook.domain.entities import Address, AddressPayload, ResponseItem
from friendbook.services.base import MissingIdentifierError, RepositoryService

logger = logging.getLogger(__name__)


class AddressesService(RepositoryService):
    """Backend contract for address records."""

    async def read_address(self, address_id: uuid.UUID, include_deleted: bool = False) -> ResponseItem[Address]:
        # addresses have no soft-delete state; the flag only mirrors read_friend
        address = await self._run(self.repository.get_address, address_id)
        return ResponseItem(address)

    async def create_address(self, payload: AddressPayload) -> ResponseItem[Address]:
        address = await self._run(self.repository.create_address, replace(payload, address_id=None))
        logger.info("Address %s stored", address.address_id)
        return ResponseItem(address)

    async def update_address(self, payload: AddressPayload) -> ResponseItem[Address]:
        if payload.address_id is None:
            raise MissingIdentifierError("Cannot update an address without address_id")
        address = await self._run(self.repository.update_address, payload)
        if address is None:
            logger.warning("Address %s not found for update", payload.address_id)
        return ResponseItem(address)
