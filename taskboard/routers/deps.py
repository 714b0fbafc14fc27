from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from taskboard.config import Settings
from taskboard.db import Database
from taskboard.errors import AuthError
from taskboard.utils.crypto import decode_token

bearer_scheme = HTTPBearer(auto_error=False)


def get_database(request: Request) -> Database:
    return request.app.state.db

def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def require_user(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> dict:
    """Claims of a valid bearer token; 401 otherwise."""
    if credentials is None:
        raise AuthError("Not authenticated")
    return decode_token(credentials.credentials, settings.jwt_secret, algorithm=settings.jwt_algorithm)
