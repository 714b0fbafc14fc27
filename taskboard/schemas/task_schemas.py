from pydantic import BaseModel, Field
from typing import Optional

from taskboard.schemas.common import Id

class TaskRequest(BaseModel):
    project_id: Id
    task_name: str = Field(min_length=1)
    status: str = "Pending"
    assigned_to: Optional[Id] = None

class TaskOut(BaseModel):
    task_id: int
    project_id: Optional[int] = None
    task_name: str
    status: Optional[str] = None
    assigned_to: Optional[int] = None
