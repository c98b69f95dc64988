"""Result types shared by the page workflows and the single error boundary."""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Any, Awaitable, Generic, Optional, TypeVar, Union
from urllib.parse import quote

logger = logging.getLogger(__name__)

T = TypeVar("T")

OVERVIEW_URL = "/friends/overview"
VALIDATION_MESSAGE = "Please correct the highlighted fields."


def friend_details_url(friend_id: uuid.UUID | str) -> str:
    return f"/friends/details/{quote(str(friend_id), safe='')}"


@dataclass(frozen=True)
class Redirect:
    location: str


@dataclass(frozen=True)
class Render:
    view: Any
    status_code: int = 200


PageResult = Union[Render, Redirect]


@dataclass(frozen=True)
class StepResult(Generic[T]):
    """Outcome of one backend call: either ``value`` or ``error`` is set."""

    value: Optional[T] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def attempt(action: str, call: Awaitable[T]) -> StepResult[T]:
    """Await ``call`` and turn any exception into a failed StepResult.

    This is the only place where workflows catch backend errors; callers map
    a failed step to a user-facing message or a redirect.
    """
    try:
        value = await call
    except Exception as exc:
        logger.exception("Error %s: %s", action, exc)
        return StepResult(error=exc)
    return StepResult(value=value)
