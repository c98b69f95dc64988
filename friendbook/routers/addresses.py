from __future__ import annotations

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse

from friendbook.domain.forms import AddressForm
from friendbook.routers.common import addresses_service, friends_service, respond
from friendbook.workflows import AddressEditWorkflow

router = APIRouter(prefix="/addresses", tags=["addresses"])


def _workflow(request: Request) -> AddressEditWorkflow:
    return AddressEditWorkflow(addresses_service(request), friends_service(request))


@router.get("/edit", response_class=HTMLResponse)
@router.get("/edit/{address_id}", response_class=HTMLResponse)
async def edit_address(request: Request, address_id: str = "", friend_id: str = ""):
    result = await _workflow(request).load(address_id, friend_id)
    return respond(request, result, "edit_address.html")


@router.post("/edit", response_class=HTMLResponse)
@router.post("/edit/{path_id}", response_class=HTMLResponse)
async def edit_address_post(
    request: Request,
    path_id: str = "",
    address_id: str = Form(""),
    street_address: str = Form(""),
    zip_code: str = Form(""),
    city: str = Form(""),
    country: str = Form(""),
    friend_id: str = Form(""),
):
    form = AddressForm(
        address_id=address_id or path_id,
        street_address=street_address,
        zip_code=zip_code,
        city=city,
        country=country,
        friend_id=friend_id or request.query_params.get("friend_id", ""),
    )
    result = await _workflow(request).save(form)
    return respond(request, result, "edit_address.html")
