from typing import List

from fastapi import APIRouter, Depends

from taskboard.db import Database
from taskboard.routers.deps import get_database
from taskboard.schemas.auth_schemas import MessageResponse
from taskboard.schemas.common import IdPath
from taskboard.schemas.project_schemas import ProjectCreate, ProjectCreated, ProjectOut, ProjectUpdate
from taskboard.services import project_service

project_router = APIRouter(prefix="/api/projects", tags=["projects"])

@project_router.post("", status_code=201, response_model=ProjectCreated)
def create_project(body: ProjectCreate, database: Database = Depends(get_database)):
    project_id = project_service.create_project(database, body)
    return {"message": "Project created successfully", "projectId": project_id}

@project_router.get("", response_model=List[ProjectOut])
def get_projects(database: Database = Depends(get_database)):
    return project_service.get_projects(database)

@project_router.get("/{project_id}", response_model=ProjectOut)
def get_project(project_id: IdPath, database: Database = Depends(get_database)):
    return project_service.get_project(database, project_id)

@project_router.put("/{project_id}", response_model=MessageResponse)
def update_project(project_id: IdPath, body: ProjectUpdate, database: Database = Depends(get_database)):
    project_service.update_project(database, project_id, body)
    return {"message": "Project updated successfully"}

@project_router.delete("/{project_id}", response_model=MessageResponse)
def delete_project(project_id: IdPath, database: Database = Depends(get_database)):
    project_service.delete_project(database, project_id)
    return {"message": "Project deleted successfully"}
