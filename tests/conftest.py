from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the friendbook package is importable when running the tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from friendbook.core import config as core_config  # noqa: E402
from friendbook.db import models  # noqa: E402
from friendbook.db import session as db_session  # noqa: E402
from friendbook.domain.entities import AddressPayload, FriendPayload  # noqa: E402
from friendbook.repositories.sql_repository import SQLRepository  # noqa: E402


def _clear_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Point DATABASE_URL at a temporary SQLite file and build the schema."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    _clear_caches()

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)

    yield db_file

    models.Base.metadata.drop_all(bind=engine)
    engine.dispose()
    _clear_caches()


@pytest.fixture()
def repo(temp_db) -> SQLRepository:
    return SQLRepository()


@pytest.fixture()
def make_friend(repo):
    def _make(first="Anna", last="Berg", email="anna@example.com", birthday=None, address_id=None, seeded=False):
        payload = FriendPayload(
            friend_id=None,
            first_name=first,
            last_name=last,
            email=email,
            birthday=birthday,
            address_id=address_id,
        )
        return repo.create_friend(payload, seeded=seeded)

    return _make


@pytest.fixture()
def make_address(repo):
    def _make(street="Storgatan 1", zip_code=11122, city="Stockholm", country="Sweden", seeded=False):
        payload = AddressPayload(
            address_id=None,
            street_address=street,
            zip_code=zip_code,
            city=city,
            country=country,
        )
        return repo.create_address(payload, seeded=seeded)

    return _make
