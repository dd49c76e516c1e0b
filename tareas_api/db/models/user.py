"""User document."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from bson import ObjectId


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """BSON dates come back naive unless the client is tz-aware; they are always UTC."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


@dataclass
class User:
    name: str
    email: str
    password_hash: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    reset_token: Optional[str] = None
    reset_token_expire: Optional[datetime] = None
    id: Optional[ObjectId] = None

    def to_document(self) -> dict[str, Any]:
        doc: dict[str, Any] = {
            "name": self.name,
            "email": self.email,
            "password_hash": self.password_hash,
            "created_at": self.created_at,
        }
        # Both or neither
        if self.reset_token is not None and self.reset_token_expire is not None:
            doc["reset_token"] = self.reset_token
            doc["reset_token_expire"] = self.reset_token_expire
        if self.id is not None:
            doc["_id"] = self.id
        return doc

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> User:
        return cls(
            id=doc["_id"],
            name=doc["name"],
            email=doc["email"],
            password_hash=doc["password_hash"],
            created_at=as_utc(doc["created_at"]),
            reset_token=doc.get("reset_token"),
            reset_token_expire=as_utc(doc.get("reset_token_expire")),
        )
