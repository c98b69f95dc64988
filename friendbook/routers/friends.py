from __future__ import annotations

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse

from friendbook.domain.forms import FriendForm
from friendbook.routers.common import (
    friends_service,
    pets_service,
    quotes_service,
    respond,
)
from friendbook.workflows import FriendDetailWorkflow, FriendEditWorkflow, OverviewWorkflow

router = APIRouter(prefix="/friends", tags=["friends"])


def _detail_workflow(request: Request) -> FriendDetailWorkflow:
    return FriendDetailWorkflow(friends_service(request), pets_service(request), quotes_service(request))


@router.get("/overview", response_class=HTMLResponse)
async def overview(request: Request, use_seeds: bool = True):
    result = await OverviewWorkflow(friends_service(request)).load(use_seeds)
    return respond(request, result, "overview.html")


@router.post("/details/delete-pet")
async def delete_pet(request: Request, pet_id: str = Form(""), friend_id: str = Form("")):
    result = await _detail_workflow(request).delete_pet(pet_id, friend_id)
    return respond(request, result, "details.html")


@router.post("/details/delete-quote")
async def delete_quote(request: Request, quote_id: str = Form(""), friend_id: str = Form("")):
    result = await _detail_workflow(request).delete_quote(quote_id, friend_id)
    return respond(request, result, "details.html")


@router.get("/details/{friend_id}", response_class=HTMLResponse)
async def details(request: Request, friend_id: str):
    result = await _detail_workflow(request).load(friend_id)
    return respond(request, result, "details.html")


@router.get("/edit", response_class=HTMLResponse)
@router.get("/edit/{friend_id}", response_class=HTMLResponse)
async def edit_friend(request: Request, friend_id: str = ""):
    result = await FriendEditWorkflow(friends_service(request)).load(friend_id)
    return respond(request, result, "edit_friend.html")


@router.post("/edit", response_class=HTMLResponse)
@router.post("/edit/{path_id}", response_class=HTMLResponse)
async def edit_friend_post(
    request: Request,
    path_id: str = "",
    friend_id: str = Form(""),
    first_name: str = Form(""),
    last_name: str = Form(""),
    email: str = Form(""),
    birthday: str = Form(""),
    address_id: str = Form(""),
):
    form = FriendForm(
        friend_id=friend_id or path_id,
        first_name=first_name,
        last_name=last_name,
        email=email,
        birthday=birthday,
        address_id=address_id,
    )
    result = await FriendEditWorkflow(friends_service(request)).save(form)
    return respond(request, result, "edit_friend.html")
