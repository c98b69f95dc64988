"""Parsing helpers for the opaque UUID identifiers used in routes and forms."""
from __future__ import annotations

import uuid
from typing import Optional


class InvalidIdentifierError(ValueError):
    """Raised when a value cannot be read as an entity identifier."""


def parse_identifier(value: str | None) -> uuid.UUID:
    """Parse ``value`` as a UUID or raise InvalidIdentifierError."""
    text = (value or "").strip()
    if not text:
        raise InvalidIdentifierError("Identifier is missing")
    try:
        return uuid.UUID(text)
    except (ValueError, AttributeError) as exc:
        raise InvalidIdentifierError(f"Invalid identifier: {text!r}") from exc


def try_parse_identifier(value: str | None) -> Optional[uuid.UUID]:
    try:
        return parse_identifier(value)
    except InvalidIdentifierError:
        return None


def optional_identifier(value: str | None) -> Optional[uuid.UUID]:
    """Return the identifier carried by a form field, None for blank or nil UUID."""
    parsed = try_parse_identifier(value)
    if parsed is None or parsed.int == 0:
        return None
    return parsed
