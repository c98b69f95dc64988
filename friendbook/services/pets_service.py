"""Pet use cases."""
from __future__ import annotations

import uuid

from friendbook.domain.entities import Pet, ResponseItem
from friendbook.services.base import RepositoryService


class PetsService(RepositoryService):
    async def delete_pet(self, pet_id: uuid.UUID) -> ResponseItem[Pet]:
        pet = await self._run(self.repository.delete_pet, pet_id)
        return ResponseItem(pet)
