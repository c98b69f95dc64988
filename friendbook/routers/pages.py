from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from friendbook.domain.identifiers import InvalidIdentifierError
from friendbook.routers.common import friends_service, respond
from friendbook.workflows import FriendNotFoundError, SingleFriendLookup
from friendbook.workflows.base import OVERVIEW_URL

router = APIRouter(prefix="", tags=["pages"])


@router.get("/")
def index():
    return RedirectResponse(OVERVIEW_URL, status_code=302)


@router.get("/view-friend", response_class=HTMLResponse)
async def view_friend(request: Request, id: str = ""):
    try:
        result = await SingleFriendLookup(friends_service(request)).load(id)
    except InvalidIdentifierError:
        raise HTTPException(400, "Invalid friend id")
    except FriendNotFoundError:
        raise HTTPException(404, "Friend not found")
    return respond(request, result, "view_friend.html")

