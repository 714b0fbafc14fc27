from pydantic import BaseModel, Field
from typing import Optional

from taskboard.schemas.common import Id

class ProjectCreate(BaseModel):
    project_name: str = Field(min_length=1)
    description: Optional[str] = None
    created_by: Optional[Id] = None

class ProjectUpdate(BaseModel):
    project_name: str = Field(min_length=1)
    description: Optional[str] = None

class ProjectOut(BaseModel):
    project_id: int
    project_name: str
    description: Optional[str] = None
    created_by: Optional[str] = None # creator's display name

class ProjectCreated(BaseModel):
    message: str
    projectId: int
