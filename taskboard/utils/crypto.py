import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt
from passlib.hash import bcrypt

from taskboard.errors import AuthError

logger = logging.getLogger(__name__)


def hash_password(password: str, rounds: int = 10) -> str:
    return bcrypt.using(rounds=rounds).hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.verify(password, password_hash)
    except (ValueError, TypeError) as e:
        # malformed or empty hash in the users table
        logger.error("Password hash could not be checked: %s", e)
        return False


def create_token(claims: Dict[str, Any], secret: str, expires_in: int = 3600, algorithm: str = "HS256") -> str:
    """Sign ``claims`` into a JWT that expires ``expires_in`` seconds from now."""
    now = datetime.now(timezone.utc)
    payload = dict(claims)
    payload["iat"] = now
    payload["exp"] = now + timedelta(seconds=expires_in)
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_token(token: str, secret: str, algorithm: str = "HS256") -> Dict[str, Any]:
    try:
        return jwt.decode(token, secret, algorithms=[algorithm])
    except jwt.ExpiredSignatureError:
        raise AuthError("Token has expired")
    except jwt.InvalidTokenError:
        raise AuthError("Invalid token")
