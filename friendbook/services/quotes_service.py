"""Quote use cases."""
from __future__ import annotations

import uuid

from friendbook.domain.entities import Quote, ResponseItem
from friendbook.services.base import RepositoryService


class QuotesService(RepositoryService):
    async def delete_quote(self, quote_id: uuid.UUID) -> ResponseItem[Quote]:
        quote = await self._run(self.repository.delete_quote, quote_id)
        return ResponseItem(quote)
