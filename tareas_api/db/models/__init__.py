"""Document models stored in MongoDB."""

from tareas_api.db.models.task import Task, TaskStatus
from tareas_api.db.models.user import User

__all__ = [
    "Task",
    "TaskStatus",
    "User",
]
