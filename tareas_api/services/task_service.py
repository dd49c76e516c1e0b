"""Task CRUD."""

import logging
from typing import Any, Optional

from bson import ObjectId
from pymongo.database import Database

from tareas_api.core.exceptions import EmptyUpdateError, InternalError, InvalidIdError, NotFoundError
from tareas_api.db.models.task import Task, TaskStatus
from tareas_api.db.mongo import get_tasks_collection

logger = logging.getLogger(__name__)


def _parse_id(task_id: str) -> ObjectId:
    if not ObjectId.is_valid(task_id):
        raise InvalidIdError("Invalid task id")
    return ObjectId(task_id)


def create_task(
    db: Database,
    description: str,
    status: TaskStatus = TaskStatus.PENDING,
) -> Task:
    """Insert a task and return it as stored."""
    tasks = get_tasks_collection(db)
    result = tasks.insert_one(Task(description=description, status=status).to_document())
    doc = tasks.find_one({"_id": result.inserted_id})
    if doc is None:
        raise InternalError("Inserted task could not be read back")
    logger.info("Task %s created", result.inserted_id)
    return Task.from_document(doc)


def list_tasks(db: Database) -> list[Task]:
    """All tasks in store order."""
    return [Task.from_document(doc) for doc in get_tasks_collection(db).find()]


def get_task(db: Database, task_id: str) -> Task:
    doc = get_tasks_collection(db).find_one({"_id": _parse_id(task_id)})
    if doc is None:
        raise NotFoundError("Task not found")
    return Task.from_document(doc)


def update_task(
    db: Database,
    task_id: str,
    description: Optional[str] = None,
    status: Optional[TaskStatus] = None,
) -> Task:
    """Partial update: only the given fields are written."""
    oid = _parse_id(task_id)
    changes: dict[str, Any] = {}
    if description is not None:
        changes["descripcion"] = description
    if status is not None:
        changes["estado"] = status.value
    if not changes:
        raise EmptyUpdateError()
    tasks = get_tasks_collection(db)
    result = tasks.update_one({"_id": oid}, {"$set": changes})
    if result.matched_count == 0:
        raise NotFoundError("Task not found")
    doc = tasks.find_one({"_id": oid})
    if doc is None:
        # Deleted between the update and the read
        raise NotFoundError("Task not found")
    return Task.from_document(doc)


def delete_task(db: Database, task_id: str) -> None:
    result = get_tasks_collection(db).delete_one({"_id": _parse_id(task_id)})
    if result.deleted_count == 0:
        raise NotFoundError("Task not found")
    logger.info("Task %s deleted", task_id)
