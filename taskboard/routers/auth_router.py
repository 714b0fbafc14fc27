from fastapi import APIRouter, Depends

from taskboard.config import Settings
from taskboard.db import Database
from taskboard.routers.deps import get_database, get_settings
from taskboard.schemas.auth_schemas import LoginRequest, LoginResponse, MessageResponse, SignupRequest
from taskboard.services import auth_service

auth_router = APIRouter(prefix="/api/auth", tags=["auth"])

@auth_router.post("/signup", status_code=201, response_model=MessageResponse)
def signup(body: SignupRequest, database: Database = Depends(get_database), settings: Settings = Depends(get_settings)):
    auth_service.signup(database, settings, body)
    return {"message": "User created"}

@auth_router.post("/login", response_model=LoginResponse)
def login(body: LoginRequest, database: Database = Depends(get_database), settings: Settings = Depends(get_settings)):
    return auth_service.login(database, settings, body)
