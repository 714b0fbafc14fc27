import logging

from taskboard.db import Database
from taskboard.errors import NotFoundError
from taskboard.models import Project, User
from taskboard.schemas.project_schemas import ProjectCreate, ProjectUpdate

logger = logging.getLogger(__name__)


def _project_query(db):
    return (
        db.query(Project.project_id, Project.project_name, Project.description, User.name.label("created_by"))
        .outerjoin(User, Project.created_by == User.id)
    )

def _to_dict(row) -> dict:
    return {
        "project_id": row.project_id,
        "project_name": row.project_name,
        "description": row.description,
        "created_by": row.created_by,
    }


def create_project(database: Database, req: ProjectCreate) -> int:
    with database.session() as db:
        project = Project(
            project_name=req.project_name,
            description=req.description,
            created_by=req.created_by,
        )
        db.add(project)
        db.flush()
        project_id = project.project_id

    logger.info("Project created: %s", project_id)
    return project_id

def get_projects(database: Database) -> list:
    with database.session() as db:
        rows = _project_query(db).order_by(Project.project_id).all()
    return [_to_dict(row) for row in rows]

def get_project(database: Database, project_id: int) -> dict:
    with database.session() as db:
        row = _project_query(db).filter(Project.project_id == project_id).first()
    if row is None:
        raise NotFoundError("Project not found")
    return _to_dict(row)

def update_project(database: Database, project_id: int, req: ProjectUpdate):
    with database.session() as db:
        updated = (
            db.query(Project)
            .filter(Project.project_id == project_id)
            .update(
                {Project.project_name: req.project_name, Project.description: req.description},
                synchronize_session=False,
            )
        )
        if updated == 0:
            raise NotFoundError("Project not found")
    logger.info("Project updated: %s", project_id)

def delete_project(database: Database, project_id: int):
    with database.session() as db:
        deleted = db.query(Project).filter(Project.project_id == project_id).delete(synchronize_session=False)
        if deleted == 0:
            raise NotFoundError("Project not found")
    logger.info("Project deleted: %s", project_id)
