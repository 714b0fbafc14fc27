from typing import List, Optional

from fastapi import APIRouter, Depends

from taskboard.db import Database
from taskboard.routers.deps import get_database
from taskboard.schemas.auth_schemas import MessageResponse
from taskboard.schemas.common import IdPath
from taskboard.schemas.task_schemas import TaskOut, TaskRequest
from taskboard.services import task_service

task_router = APIRouter(prefix="/api/tasks", tags=["tasks"])

@task_router.get("", response_model=List[TaskOut])
def get_tasks(project_id: Optional[str] = None, database: Database = Depends(get_database)):
    # kept as a string so that ?project_id= (blank) means "no filter"
    return task_service.get_tasks(database, task_service.parse_project_filter(project_id))

@task_router.get("/{task_id}", response_model=TaskOut)
def get_task(task_id: IdPath, database: Database = Depends(get_database)):
    return task_service.get_task(database, task_id)

@task_router.post("", status_code=201, response_model=TaskOut)
def create_task(body: TaskRequest, database: Database = Depends(get_database)):
    return task_service.create_task(database, body)

@task_router.put("/{task_id}", response_model=TaskOut)
def update_task(task_id: IdPath, body: TaskRequest, database: Database = Depends(get_database)):
    return task_service.update_task(database, task_id, body)

@task_router.delete("/{task_id}", response_model=MessageResponse)
def delete_task(task_id: IdPath, database: Database = Depends(get_database)):
    task_service.delete_task(database, task_id)
    return {"message": "Task deleted"}
