from __future__ import annotations

import asyncio
import uuid
from datetime import date

from fakes import FakeFriendsService

from friendbook.domain.entities import Address, Friend
from friendbook.domain.forms import FriendForm
from friendbook.workflows import FriendEditView, FriendEditWorkflow, Redirect, Render
from friendbook.workflows.base import OVERVIEW_URL, VALIDATION_MESSAGE
from friendbook.workflows.friend_edit import SAVE_ERROR_MESSAGE, SAVE_FAILED_MESSAGE


def _friend(**overrides) -> Friend:
    values = dict(
        friend_id=uuid.uuid4(),
        first_name="Greta",
        last_name="Falk",
        email="greta@example.com",
        birthday=date(1979, 11, 2),
        address=Address(uuid.uuid4(), "Parkvagen 9", 75320, "Uppsala", "Sweden"),
    )
    values.update(overrides)
    return Friend(**values)


def _form(**overrides) -> FriendForm:
    values = dict(first_name="Greta", last_name="Falk", email="greta@example.com", birthday="1979-11-02")
    values.update(overrides)
    return FriendForm(**values)


def test_load_without_id_gives_blank_new_friend_form():
    result = asyncio.run(FriendEditWorkflow(FakeFriendsService()).load(None))

    assert isinstance(result, Render)
    view = result.view
    assert view == FriendEditView()
    assert view.is_new_friend is True
    assert (view.friend_id, view.first_name, view.last_name, view.email, view.birthday) == ("", "", "", "", "")


def test_load_with_malformed_id_redirects_to_overview():
    svc = FakeFriendsService()
    result = asyncio.run(FriendEditWorkflow(svc).load("not-a-guid"))
    assert result == Redirect(OVERVIEW_URL)
    assert svc.calls == []


def test_load_unknown_friend_redirects_to_overview():
    result = asyncio.run(FriendEditWorkflow(FakeFriendsService()).load(str(uuid.uuid4())))
    assert result == Redirect(OVERVIEW_URL)


def test_load_existing_friend_populates_form():
    friend = _friend()
    result = asyncio.run(FriendEditWorkflow(FakeFriendsService([friend])).load(str(friend.friend_id)))

    view = result.view
    assert view.is_new_friend is False
    assert view.first_name == "Greta"
    assert view.birthday == "1979-11-02"
    assert view.address_id == str(friend.address.address_id)


def test_load_failure_shows_error_message():
    svc = FakeFriendsService(fail_on=("read_friend",))
    result = asyncio.run(FriendEditWorkflow(svc).load(str(uuid.uuid4())))
    assert isinstance(result, Render)
    assert result.view.error_message == "An error occurred while loading the friend details."


def test_empty_first_name_blocks_save():
    svc = FakeFriendsService()
    result = asyncio.run(FriendEditWorkflow(svc).save(_form(first_name="")))

    assert isinstance(result, Render)
    assert "FirstName" in result.view.validation_errors
    assert result.view.error_message == VALIDATION_MESSAGE
    assert not svc.called("create_friend")
    assert not svc.called("update_friend")


def test_validation_failure_on_update_redisplays_stored_friend():
    friend = _friend()
    svc = FakeFriendsService([friend])
    form = _form(friend_id=str(friend.friend_id), email="broken")

    result = asyncio.run(FriendEditWorkflow(svc).save(form))

    view = result.view
    assert view.friend == friend
    assert view.is_new_friend is False
    assert view.email == "broken"
    assert view.address_id == str(friend.address.address_id)
    assert "Email" in view.validation_errors
    assert not svc.called("update_friend")


def test_create_trims_fields_and_redirects_to_details():
    svc = FakeFriendsService()
    result = asyncio.run(FriendEditWorkflow(svc).save(_form(first_name="  Greta ", last_name=" Falk  ")))

    assert isinstance(result, Redirect)
    name, payload = svc.calls[-1]
    assert name == "create_friend"
    assert payload.friend_id is None
    assert payload.first_name == "Greta"
    assert payload.last_name == "Falk"
    assert payload.birthday == date(1979, 11, 2)
    created = next(iter(svc.friends.values()))
    assert result.location == f"/friends/details/{created.friend_id}"


def test_present_id_dispatches_update():
    friend = _friend()
    svc = FakeFriendsService([friend])
    form = _form(friend_id=str(friend.friend_id), last_name="Holm", address_id=str(friend.address.address_id))

    result = asyncio.run(FriendEditWorkflow(svc).save(form))

    assert result == Redirect(f"/friends/details/{friend.friend_id}")
    assert svc.called("update_friend") and not svc.called("create_friend")
    assert svc.friends[friend.friend_id].last_name == "Holm"


def test_nil_guid_is_treated_as_new():
    svc = FakeFriendsService()
    asyncio.run(FriendEditWorkflow(svc).save(_form(friend_id=str(uuid.UUID(int=0)))))
    assert svc.called("create_friend")


def test_missing_item_renders_failure_message():
    svc = FakeFriendsService()
    svc.return_none = True
    result = asyncio.run(FriendEditWorkflow(svc).save(_form()))
    assert isinstance(result, Render)
    assert result.view.error_message == SAVE_FAILED_MESSAGE
    assert result.view.is_new_friend is True


def test_backend_exception_renders_generic_message():
    svc = FakeFriendsService(fail_on=("create_friend",))
    result = asyncio.run(FriendEditWorkflow(svc).save(_form()))
    assert isinstance(result, Render)
    assert result.view.error_message == SAVE_ERROR_MESSAGE
    assert result.view.first_name == "Greta"
