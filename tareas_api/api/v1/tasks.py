"""Task endpoints: /tareas CRUD."""

from fastapi import APIRouter, HTTPException, Response, status

from tareas_api.core.exceptions import AppError, to_http_exception
from tareas_api.dependencies import DbSession
from tareas_api.schemas.task import TaskCreateRequest, TaskResponse, TaskUpdateRequest
from tareas_api.services.task_service import (
    create_task,
    delete_task,
    get_task,
    list_tasks,
    update_task,
)

router = APIRouter(prefix="/tareas", tags=["tareas"])


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def task_create(body: TaskCreateRequest, db: DbSession):
    task = create_task(db, description=body.description, status=body.status)
    return TaskResponse.from_task(task)


@router.get("", response_model=list[TaskResponse])
def task_list(db: DbSession):
    return [TaskResponse.from_task(t) for t in list_tasks(db)]


@router.get("/{task_id}", response_model=TaskResponse)
def task_get(task_id: str, db: DbSession):
    try:
        task = get_task(db, task_id)
    except AppError as e:
        raise to_http_exception(e)
    return TaskResponse.from_task(task)


@router.put("/{task_id}", response_model=TaskResponse)
def task_update(task_id: str, body: TaskUpdateRequest, db: DbSession):
    """Partial update; fields left out of the body are untouched."""
    try:
        task = update_task(db, task_id, description=body.description, status=body.status)
    except AppError as e:
        raise to_http_exception(e)
    return TaskResponse.from_task(task)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def task_delete(task_id: str, db: DbSession):
    try:
        delete_task(db, task_id)
    except AppError as e:
        raise to_http_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
