"""Overview page: friends grouped by the country they live in."""
from __future__ import annotations

from dataclasses import dataclass, field

from friendbook.domain.entities import Friend
from friendbook.services.friends_service import FriendsService
from friendbook.workflows.base import Render


@dataclass(frozen=True)
class OverviewView:
    friends_by_country: dict[str, list[Friend]] = field(default_factory=dict)
    use_seeds: bool = True

    @property
    def friend_count(self) -> int:
        return sum(len(friends) for friends in self.friends_by_country.values())


class OverviewWorkflow:
    def __init__(self, friends_service: FriendsService) -> None:
        self.friends_service = friends_service

    async def load(self, use_seeds: bool = True) -> Render:
        groups = await self.friends_service.read_friends_by_country(use_seeds, False)
        return Render(OverviewView(friends_by_country=groups, use_seeds=use_seeds))
