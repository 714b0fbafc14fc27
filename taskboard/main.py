import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from taskboard.config import Settings
from taskboard.db import Database
from taskboard.errors import AppError, PersistenceError, ValidationError
from taskboard.routers.auth_router import auth_router
from taskboard.routers.deps import require_user
from taskboard.routers.project_router import project_router
from taskboard.routers.task_router import task_router
from taskboard.utils.log import configure_logging

logger = logging.getLogger(__name__)


def _missing_fields(exc: RequestValidationError) -> str:
    fields = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        if loc:
            fields.append(".".join(loc))
    if not fields:
        return ValidationError.default_message
    return "Missing or invalid fields: " + ", ".join(fields)


def register_error_handlers(app: FastAPI):
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": _missing_fields(exc)})

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        # Full detail stays in the server log; the client gets a generic message.
        logger.exception("Database error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": PersistenceError.default_message})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": AppError.default_message})


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    settings = settings or Settings()
    configure_logging(settings)
    database = database or Database(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Taskboard started (%s, database=%s)", settings.app_env, database.dialect)
        yield
        database.dispose()
        logger.info("Database connections released")

    app = FastAPI(title="Taskboard", lifespan=lifespan)
    app.state.settings = settings
    app.state.db = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    protected = [Depends(require_user)] if settings.auth_required else []
    app.include_router(auth_router)
    app.include_router(project_router, dependencies=protected)
    app.include_router(task_router, dependencies=protected)

    @app.get("/health")
    def health():
        return {"status": "ok", "database": database.dialect if database.ping() else "unavailable"}

    return app


if __name__ == "__main__":
    uvicorn.run("taskboard.main:create_app", factory=True, host="0.0.0.0", port=Settings().port)
