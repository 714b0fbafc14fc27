import logging

from sqlalchemy.exc import IntegrityError

from taskboard.config import Settings
from taskboard.db import Database
from taskboard.errors import AuthError, ConflictError
from taskboard.models import User
from taskboard.schemas.auth_schemas import LoginRequest, SignupRequest
from taskboard.utils.crypto import create_token, hash_password, verify_password

logger = logging.getLogger(__name__)


def signup(database: Database, settings: Settings, req: SignupRequest):
    """Create a user account. No token is issued here; the client logs in afterwards."""
    try:
        with database.session() as db:
            exists = db.query(User.id).filter_by(email=req.email).first()
            if exists:
                raise ConflictError("User exists")

            db.add(User(
                name=req.name,
                email=req.email,
                password_hash=hash_password(req.password, rounds=settings.bcrypt_rounds),
            ))
    except IntegrityError:
        # lost a race against another signup with the same email
        raise ConflictError("User exists")

    logger.info("User created: %s", req.email)


def login(database: Database, settings: Settings, req: LoginRequest) -> dict:
    with database.session() as db:
        user = db.query(User).filter_by(email=req.email).first()

    if user is None or not verify_password(req.password, user.password_hash):
        logger.info("Failed login for %s", req.email)
        raise AuthError("Invalid credentials")

    token = create_token(
        {"id": user.id, "email": user.email, "name": user.name},
        settings.jwt_secret,
        expires_in=settings.jwt_expires_in,
        algorithm=settings.jwt_algorithm,
    )
    logger.info("User logged in: %s", user.email)
    return {"token": token, "email": user.email, "name": user.name}
