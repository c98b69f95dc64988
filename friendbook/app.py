import logging
import os

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates
from starlette.middleware.base import BaseHTTPMiddleware

from friendbook.core.config import Settings, get_settings
from friendbook.core.logging_config import setup_logging
from friendbook.db.create_tables import create_all
from friendbook.repositories.sql_repository import SQLRepository
from friendbook.routers import addresses as addresses_router
from friendbook.routers import friends as friends_router
from friendbook.routers import pages as pages_router
from friendbook.services import (
    AddressesService,
    FriendsService,
    PetsService,
    QuotesService,
)

logger = logging.getLogger(__name__)

BASE = os.path.dirname(__file__)
TEMPLATES_DIR = os.path.join(BASE, "templates")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (CSP, anti clickjacking, referrer policy)."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault(
            "Content-Security-Policy",
            "default-src 'self'; style-src 'self' 'unsafe-inline'",
        )
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer-when-downgrade")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory compatible with ``uvicorn --factory friendbook.app:create_app``."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file or None)

    if settings.create_tables:
        create_all()

    app = FastAPI(title="Friendbook")
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")

    repository = SQLRepository()
    app.state.settings = settings
    app.state.templates = Jinja2Templates(directory=TEMPLATES_DIR)
    app.state.friends_service = FriendsService(repository)
    app.state.addresses_service = AddressesService(repository)
    app.state.pets_service = PetsService(repository)
    app.state.quotes_service = QuotesService(repository)

    app.include_router(pages_router.router)
    app.include_router(friends_router.router)
    app.include_router(addresses_router.router)

    logger.info("Friendbook started (env=%s)", settings.app_env)
    return app
