import logging
from typing import Optional

from sqlalchemy import select

from taskboard.db import Database
from taskboard.errors import NotFoundError, PersistenceError, ValidationError
from taskboard.models import Task, TASKS_SEQ
from taskboard.schemas.common import MAX_ID
from taskboard.schemas.task_schemas import TaskRequest

logger = logging.getLogger(__name__)


def parse_project_filter(project_id: Optional[str]) -> Optional[int]:
    """Blank or missing means no filter; anything else must be a number."""
    if project_id is None or project_id.strip() == "":
        return None
    try:
        value = int(project_id.strip())
    except ValueError:
        raise ValidationError("project_id must be a number")
    if not 1 <= value <= MAX_ID:
        raise ValidationError("project_id is out of range")
    return value

def _to_dict(task: Task) -> dict:
    return {
        "task_id": task.task_id,
        "project_id": task.project_id,
        "task_name": task.task_name,
        "status": task.status,
        "assigned_to": task.assigned_to,
    }


def _next_task_id(db) -> Optional[int]:
    """Draw the next value of tasks_seq, or None when the database has no sequences."""
    if not db.get_bind().dialect.supports_sequences:
        return None
    return db.execute(select(TASKS_SEQ.next_value())).scalar()


def get_tasks(database: Database, project_id: Optional[int] = None) -> list:
    with database.session() as db:
        query = db.query(Task)
        if project_id is not None:
            query = query.filter(Task.project_id == project_id)
        tasks = query.order_by(Task.task_id).all()
        return [_to_dict(t) for t in tasks]

def get_task(database: Database, task_id: int) -> dict:
    with database.session() as db:
        task = db.get(Task, task_id)
        if task is None:
            raise NotFoundError("Task not found")
        return _to_dict(task)

def create_task(database: Database, req: TaskRequest) -> dict:
    # Sequence read and insert share one transaction; any failure rolls both back.
    with database.session() as db:
        task = Task(
            task_id=_next_task_id(db),
            project_id=req.project_id,
            task_name=req.task_name,
            status=req.status,
            assigned_to=req.assigned_to,
        )
        db.add(task)
        db.flush()

        if not task.task_id or task.task_id <= 0:
            raise PersistenceError("Failed to generate task id")
        created = _to_dict(task)

    logger.info("Task created: %s (project %s)", created["task_id"], created["project_id"])
    return created

def update_task(database: Database, task_id: int, req: TaskRequest) -> dict:
    values = {
        Task.project_id: req.project_id,
        Task.task_name: req.task_name,
        Task.status: req.status,
        Task.assigned_to: req.assigned_to,
    }
    with database.session() as db:
        updated = db.query(Task).filter(Task.task_id == task_id).update(values, synchronize_session=False)
        if updated == 0:
            raise NotFoundError("Task not found")

    logger.info("Task updated: %s", task_id)
    return {"task_id": task_id, **req.model_dump()}

def delete_task(database: Database, task_id: int):
    with database.session() as db:
        deleted = db.query(Task).filter(Task.task_id == task_id).delete(synchronize_session=False)
        if deleted == 0:
            raise NotFoundError("Task not found")
    logger.info("Task deleted: %s", task_id)
