"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import delete, select, update
from sqlalchemy.orm import selectinload

from friendbook.db import models
from friendbook.db.session import get_session
from friendbook.domain.entities import (
    Address,
    AddressPayload,
    Friend,
    FriendPayload,
    Pet,
    Quote,
)


def _key(value: uuid.UUID | str | None) -> Optional[str]:
    return str(value) if value else None


def _to_address(entity: models.Address | None) -> Optional[Address]:
    if entity is None:
        return None
    return Address(
        address_id=uuid.UUID(entity.address_id),
        street_address=entity.street_address,
        zip_code=int(entity.zip_code or 0),
        city=entity.city,
        country=entity.country,
        seeded=bool(entity.seeded),
    )


def _to_pet(entity: models.Pet) -> Pet:
    return Pet(
        pet_id=uuid.UUID(entity.pet_id),
        name=entity.name,
        kind=entity.kind,
        mood=entity.mood,
        friend_id=uuid.UUID(entity.friend_id),
        seeded=bool(entity.seeded),
    )


def _to_quote(entity: models.Quote) -> Quote:
    return Quote(
        quote_id=uuid.UUID(entity.quote_id),
        quote_text=entity.quote_text,
        author=entity.author or "",
        friend_id=uuid.UUID(entity.friend_id),
        seeded=bool(entity.seeded),
    )


def _to_friend(entity: models.Friend) -> Friend:
    return Friend(
        friend_id=uuid.UUID(entity.friend_id),
        first_name=entity.first_name,
        last_name=entity.last_name,
        email=entity.email,
        birthday=entity.birthday,
        address=_to_address(entity.address),
        pets=tuple(sorted((_to_pet(p) for p in entity.pets), key=lambda p: p.name.lower())),
        quotes=tuple(_to_quote(q) for q in entity.quotes),
        seeded=bool(entity.seeded),
    )


def _friend_query():
    return select(models.Friend).options(
        selectinload(models.Friend.address),
        selectinload(models.Friend.pets),
        selectinload(models.Friend.quotes),
    )


class SQLRepository:
    """CRUD helpers wrapping the SQLAlchemy session."""

    # -------------------------- friends --------------------------
    def get_friend(self, friend_id: uuid.UUID, include_deleted: bool = False) -> Optional[Friend]:
        with get_session() as session:
            stmt = _friend_query().where(models.Friend.friend_id == str(friend_id))
            if not include_deleted:
                stmt = stmt.where(models.Friend.deleted_at.is_(None))
            entity = session.execute(stmt).scalar_one_or_none()
            return _to_friend(entity) if entity else None

    def list_friends(self, seeded: bool, include_deleted: bool = False) -> list[Friend]:
        with get_session() as session:
            stmt = _friend_query().where(models.Friend.seeded == seeded)
            if not include_deleted:
                stmt = stmt.where(models.Friend.deleted_at.is_(None))
            stmt = stmt.order_by(models.Friend.last_name, models.Friend.first_name)
            return [_to_friend(entity) for entity in session.execute(stmt).scalars().all()]

    def create_friend(self, payload: FriendPayload, *, seeded: bool = False) -> Friend:
        now = datetime.now(timezone.utc)
        entity = models.Friend(
            friend_id=_key(payload.friend_id) or str(uuid.uuid4()),
            first_name=payload.first_name,
            last_name=payload.last_name,
            email=payload.email,
            birthday=payload.birthday,
            address_id=_key(payload.address_id),
            seeded=seeded,
            created_at=now,
            updated_at=now,
        )
        with get_session() as session:
            session.add(entity)
            session.commit()
            friend_id = entity.friend_id
        return self.get_friend(uuid.UUID(friend_id))

    def update_friend(self, payload: FriendPayload) -> Optional[Friend]:
        if payload.friend_id is None:
            return None
        with get_session() as session:
            entity = session.get(models.Friend, str(payload.friend_id))
            if entity is None or entity.deleted_at is not None:
                return None
            entity.first_name = payload.first_name
            entity.last_name = payload.last_name
            entity.email = payload.email
            entity.birthday = payload.birthday
            entity.address_id = _key(payload.address_id)
            entity.updated_at = datetime.now(timezone.utc)
            session.commit()
        return self.get_friend(payload.friend_id)

    # -------------------------- addresses --------------------------
    def get_address(self, address_id: uuid.UUID) -> Optional[Address]:
        with get_session() as session:
            return _to_address(session.get(models.Address, str(address_id)))

    def create_address(self, payload: AddressPayload, *, seeded: bool = False) -> Address:
        now = datetime.now(timezone.utc)
        entity = models.Address(
            address_id=_key(payload.address_id) or str(uuid.uuid4()),
            street_address=payload.street_address,
            zip_code=payload.zip_code,
            city=payload.city,
            country=payload.country,
            seeded=seeded,
            created_at=now,
            updated_at=now,
        )
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return _to_address(entity)

    def update_address(self, payload: AddressPayload) -> Optional[Address]:
        if payload.address_id is None:
            return None
        with get_session() as session:
            entity = session.get(models.Address, str(payload.address_id))
            if entity is None:
                return None
            entity.street_address = payload.street_address
            entity.zip_code = payload.zip_code
            entity.city = payload.city
            entity.country = payload.country
            entity.updated_at = datetime.now(timezone.utc)
            session.commit()
            session.refresh(entity)
            return _to_address(entity)

    # -------------------------- pets & quotes --------------------------
    def add_pet(self, friend_id: uuid.UUID, name: str, kind: str, mood: str, *, seeded: bool = False) -> Pet:
        entity = models.Pet(name=name, kind=kind, mood=mood, friend_id=str(friend_id), seeded=seeded)
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return _to_pet(entity)

    def delete_pet(self, pet_id: uuid.UUID) -> Optional[Pet]:
        with get_session() as session:
            entity = session.get(models.Pet, str(pet_id))
            if entity is None:
                return None
            pet = _to_pet(entity)
            session.delete(entity)
            session.commit()
            return pet

    def add_quote(self, friend_id: uuid.UUID, quote_text: str, author: str, *, seeded: bool = False) -> Quote:
        entity = models.Quote(quote_text=quote_text, author=author, friend_id=str(friend_id), seeded=seeded)
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return _to_quote(entity)

    def delete_quote(self, quote_id: uuid.UUID) -> Optional[Quote]:
        with get_session() as session:
            entity = session.get(models.Quote, str(quote_id))
            if entity is None:
                return None
            quote = _to_quote(entity)
            session.delete(entity)
            session.commit()
            return quote

    # -------------------------- seeds --------------------------
    def delete_seeded(self, seeded: bool = True) -> dict[str, int]:
        counts: dict[str, int] = {}
        with get_session() as session:
            seeded_addresses = select(models.Address.address_id).where(models.Address.seeded == seeded)
            session.execute(
                update(models.Friend)
                .where(models.Friend.address_id.in_(seeded_addresses))
                .values(address_id=None)
                .execution_options(synchronize_session=False)
            )
            for name, model in (
                ("quotes", models.Quote),
                ("pets", models.Pet),
                ("friends", models.Friend),
                ("addresses", models.Address),
            ):
                result = session.execute(
                    delete(model).where(model.seeded == seeded).execution_options(synchronize_session=False)
                )
                counts[name] = int(result.rowcount or 0)
            session.commit()
        return counts
