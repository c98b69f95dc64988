from __future__ import annotations

import asyncio
import uuid

import pytest
from fakes import FakeFriendsService

from friendbook.domain.entities import Friend
from friendbook.domain.identifiers import InvalidIdentifierError
from friendbook.workflows import FriendNotFoundError, OverviewWorkflow, SingleFriendLookup


def test_overview_defaults_to_seed_data():
    friend = Friend(uuid.uuid4(), "Olivia", "Persson", "olivia@example.com")
    svc = FakeFriendsService([friend])

    result = asyncio.run(OverviewWorkflow(svc).load())

    assert svc.calls == [("read_friends_by_country", True)]
    assert result.view.use_seeds is True
    assert result.view.friends_by_country == {"Sweden": [friend]}
    assert result.view.friend_count == 1


def test_overview_user_data():
    svc = FakeFriendsService()
    result = asyncio.run(OverviewWorkflow(svc).load(use_seeds=False))
    assert svc.calls == [("read_friends_by_country", False)]
    assert result.view.friend_count == 0


def test_lookup_reads_friend():
    friend = Friend(uuid.uuid4(), "Olivia", "Persson", "olivia@example.com")
    result = asyncio.run(SingleFriendLookup(FakeFriendsService([friend])).load(str(friend.friend_id)))
    assert result.view.friend == friend


@pytest.mark.parametrize("value", [None, "", "12345"])
def test_lookup_malformed_id_raises(value):
    with pytest.raises(InvalidIdentifierError):
        asyncio.run(SingleFriendLookup(FakeFriendsService()).load(value))


def test_lookup_unknown_friend_raises():
    with pytest.raises(FriendNotFoundError):
        asyncio.run(SingleFriendLookup(FakeFriendsService()).load(str(uuid.uuid4())))
