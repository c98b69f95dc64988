"""Shared plumbing for the async service layer."""
from __future__ import annotations

from typing import Callable, Optional, TypeVar

from fastapi.concurrency import run_in_threadpool

from friendbook.repositories.sql_repository import SQLRepository

R = TypeVar("R")


class ServiceError(Exception):
    """Base exception for service workflows."""


class MissingIdentifierError(ServiceError):
    """Raised when an update payload carries no identifier."""


class RelatedItemNotFoundError(ServiceError):
    """Raised when a payload references a record that does not exist."""


class RepositoryService:
    """Base class holding the repository and the threadpool bridge."""

    def __init__(self, repository: Optional[SQLRepository] = None) -> None:
        self.repository = repository or SQLRepository()

    async def _run(self, func: Callable[..., R], *args, **kwargs) -> R:
        return await run_in_threadpool(func, *args, **kwargs)
