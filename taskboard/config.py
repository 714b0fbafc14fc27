import logging
import secrets
from typing import Annotated, List, Optional

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from taskboard.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///./taskboard.db"


class Settings(BaseSettings):
    """Process configuration, read from the environment and ``.env``.

    Field names match the upper-cased variables (``DATABASE_URL`` ->
    ``database_url``); keyword arguments take precedence over both.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_env: str = "development"
    database_url: str = DEFAULT_DATABASE_URL
    db_pool_size: int = 5
    db_echo: bool = False

    jwt_secret: Optional[str] = None
    jwt_algorithm: str = "HS256"
    jwt_expires_in: int = 3600
    bcrypt_rounds: int = 10
    auth_required: bool = False

    cors_origins: Annotated[List[str], NoDecode] = ["http://localhost:3000"]
    log_level: str = "INFO"
    log_file: Optional[str] = None
    port: int = 5000

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() in ("prod", "production")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value):
        if isinstance(value, str):
            return [o.strip() for o in value.split(",") if o.strip()]
        return value

    @field_validator("jwt_secret", "log_file", mode="before")
    @classmethod
    def _blank_is_unset(cls, value):
        if isinstance(value, str) and value.strip() == "":
            return None
        return value

    @model_validator(mode="after")
    def _require_secret(self):
        if self.jwt_secret:
            return self
        if self.is_production:
            raise ConfigError("JWT_SECRET must be set when APP_ENV=production")
        # Tokens signed with this secret do not survive a restart.
        logger.warning("JWT_SECRET is not set; using a random secret for this process")
        self.jwt_secret = secrets.token_urlsafe(32)
        return self
