"""Tests for the task CRUD service against an in-memory store."""

import pytest
from bson import ObjectId

from tareas_api.core.exceptions import EmptyUpdateError, InvalidIdError, NotFoundError
from tareas_api.db.models.task import TaskStatus
from tareas_api.services.task_service import (
    create_task,
    delete_task,
    get_task,
    list_tasks,
    update_task,
)


class TestTaskService:
    def test_create_defaults_to_pending(self, db):
        task = create_task(db, "buy milk")
        assert task.id is not None
        assert task.description == "buy milk"
        assert task.status == TaskStatus.PENDING
        assert task.created_at.tzinfo is not None

    def test_create_with_status(self, db):
        task = create_task(db, "write report", TaskStatus.IN_PROGRESS)
        assert task.status == TaskStatus.IN_PROGRESS

    def test_stored_document_uses_wire_names(self, db):
        task = create_task(db, "buy milk")
        doc = db["tareas"].find_one({"_id": task.id})
        assert doc["descripcion"] == "buy milk"
        assert doc["estado"] == "Pendiente"
        assert "fecha_creacion" in doc

    def test_list_returns_all(self, db):
        create_task(db, "one")
        create_task(db, "two")
        assert sorted(t.description for t in list_tasks(db)) == ["one", "two"]

    def test_list_empty(self, db):
        assert list_tasks(db) == []

    def test_get_round_trip(self, db):
        created = create_task(db, "buy milk")
        fetched = get_task(db, str(created.id))
        assert fetched == created

    def test_get_invalid_id(self, db):
        with pytest.raises(InvalidIdError):
            get_task(db, "not-an-id")

    def test_get_missing(self, db):
        with pytest.raises(NotFoundError):
            get_task(db, str(ObjectId()))

    def test_update_status_only_keeps_description(self, db):
        created = create_task(db, "buy milk")
        updated = update_task(db, str(created.id), status=TaskStatus.DONE)
        assert updated.status == TaskStatus.DONE
        assert updated.description == "buy milk"
        assert updated.created_at == created.created_at

    def test_update_description_only_keeps_status(self, db):
        created = create_task(db, "buy milk", TaskStatus.IN_PROGRESS)
        updated = update_task(db, str(created.id), description="buy oat milk")
        assert updated.description == "buy oat milk"
        assert updated.status == TaskStatus.IN_PROGRESS

    def test_update_empty_payload(self, db):
        created = create_task(db, "buy milk")
        with pytest.raises(EmptyUpdateError):
            update_task(db, str(created.id))

    def test_update_invalid_id_checked_first(self, db):
        with pytest.raises(InvalidIdError):
            update_task(db, "123")

    def test_update_missing(self, db):
        with pytest.raises(NotFoundError):
            update_task(db, str(ObjectId()), description="x")

    def test_delete(self, db):
        created = create_task(db, "buy milk")
        delete_task(db, str(created.id))
        with pytest.raises(NotFoundError):
            get_task(db, str(created.id))

    def test_delete_missing(self, db):
        with pytest.raises(NotFoundError):
            delete_task(db, str(ObjectId()))

    def test_delete_invalid_id(self, db):
        with pytest.raises(InvalidIdError):
            delete_task(db, "zzz")
