"""SQLAlchemy models for friends and their dependent records."""
from __future__ import annotations

import uuid

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.orm import relationship

from .session import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class Address(Base):
    __tablename__ = "addresses"

    address_id = Column(String(36), primary_key=True, default=_new_id)
    street_address = Column(String(255), nullable=False)
    zip_code = Column(Integer, nullable=False, default=0)
    city = Column(String(100), nullable=False)
    country = Column(String(100), nullable=False)
    seeded = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    friends = relationship("Friend", back_populates="address")


class Friend(Base):
    __tablename__ = "friends"

    friend_id = Column(String(36), primary_key=True, default=_new_id)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    birthday = Column(Date, nullable=True)
    address_id = Column(String(36), ForeignKey("addresses.address_id", ondelete="SET NULL"), nullable=True)
    seeded = Column(Boolean, default=False, nullable=False)
    deleted_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    address = relationship("Address", back_populates="friends")
    pets = relationship("Pet", back_populates="friend", cascade="all,delete-orphan")
    quotes = relationship("Quote", back_populates="friend", cascade="all,delete-orphan")


class Pet(Base):
    __tablename__ = "pets"

    pet_id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String(100), nullable=False)
    kind = Column(String(32), nullable=False, default="dog")
    mood = Column(String(32), nullable=False, default="happy")
    friend_id = Column(String(36), ForeignKey("friends.friend_id", ondelete="CASCADE"), nullable=False)
    seeded = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    friend = relationship("Friend", back_populates="pets")


class Quote(Base):
    __tablename__ = "quotes"

    quote_id = Column(String(36), primary_key=True, default=_new_id)
    quote_text = Column(Text, nullable=False)
    author = Column(String(200), nullable=False, default="")
    friend_id = Column(String(36), ForeignKey("friends.friend_id", ondelete="CASCADE"), nullable=False)
    seeded = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    friend = relationship("Friend", back_populates="quotes")
