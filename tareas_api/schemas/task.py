"""Task request/response schemas."""

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field

from tareas_api.db.models.task import Task, TaskStatus


class TaskCreateRequest(BaseModel):
    description: str = Field(
        min_length=1,
        validation_alias=AliasChoices("description", "descripcion"),
    )
    status: TaskStatus = Field(
        default=TaskStatus.PENDING,
        validation_alias=AliasChoices("status", "estado"),
    )


class TaskUpdateRequest(BaseModel):
    description: Optional[str] = Field(
        default=None,
        min_length=1,
        validation_alias=AliasChoices("description", "descripcion"),
    )
    status: Optional[TaskStatus] = Field(
        default=None,
        validation_alias=AliasChoices("status", "estado"),
    )


class TaskResponse(BaseModel):
    id: str
    description: str
    fecha_creacion: datetime
    estado: TaskStatus

    @classmethod
    def from_task(cls, task: Task) -> "TaskResponse":
        return cls(
            id=str(task.id),
            description=task.description,
            fecha_creacion=task.created_at,
            estado=task.status,
        )
