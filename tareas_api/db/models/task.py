"""Task document."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from bson import ObjectId

from tareas_api.db.models.user import as_utc


class TaskStatus(str, Enum):
    PENDING = "Pendiente"
    IN_PROGRESS = "Ejecucion"
    DONE = "Realizada"


@dataclass
class Task:
    description: str
    status: TaskStatus = TaskStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    id: Optional[ObjectId] = None

    def to_document(self) -> dict[str, Any]:
        doc: dict[str, Any] = {
            "descripcion": self.description,
            "fecha_creacion": self.created_at,
            "estado": self.status.value,
        }
        if self.id is not None:
            doc["_id"] = self.id
        return doc

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> Task:
        return cls(
            id=doc["_id"],
            description=doc["descripcion"],
            status=TaskStatus(doc["estado"]),
            created_at=as_utc(doc["fecha_creacion"]),
        )
