"""Helpers shared by the page routers: app.state lookups and result rendering."""
from __future__ import annotations

from fastapi import Request
from fastapi.responses import RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from friendbook.services import (
    AddressesService,
    FriendsService,
    PetsService,
    QuotesService,
)
from friendbook.workflows.base import PageResult, Redirect


def _state(request: Request, name: str):
    value = getattr(getattr(request.app, "state", None), name, None)
    if value is None:
        raise RuntimeError(f"{name} is not configured")
    return value


def templates(request: Request) -> Jinja2Templates:
    return _state(request, "templates")


def friends_service(request: Request) -> FriendsService:
    return _state(request, "friends_service")


def addresses_service(request: Request) -> AddressesService:
    return _state(request, "addresses_service")


def pets_service(request: Request) -> PetsService:
    return _state(request, "pets_service")


def quotes_service(request: Request) -> QuotesService:
    return _state(request, "quotes_service")


def respond(request: Request, result: PageResult, template: str) -> Response:
    """Turn a workflow result into a 303 redirect or a rendered template."""
    if isinstance(result, Redirect):
        return RedirectResponse(result.location, status_code=303)
    return templates(request).TemplateResponse(
        request=request,
        name=template,
        context={"view": result.view},
        status_code=result.status_code,
    )
