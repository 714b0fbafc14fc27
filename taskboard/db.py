import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from taskboard.config import Settings

logger = logging.getLogger(__name__)

Base = declarative_base()


class Database:
    """Owns the engine and its connection pool for the lifetime of the app.

    Built once from ``Settings`` at startup, hands out sessions through
    ``session()`` and is released with ``dispose()`` on shutdown.
    """

    def __init__(self, settings: Settings):
        self.url = settings.database_url
        engine_kwargs = {"echo": settings.db_echo}

        if self.url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if self.url in ("sqlite://", "sqlite:///:memory:"):
                # One shared connection, otherwise every checkout gets an empty database.
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs["pool_size"] = settings.db_pool_size
            engine_kwargs["pool_pre_ping"] = True

        self.engine = create_engine(self.url, **engine_kwargs)
        self.sessionlocal = sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=False)

    @property
    def dialect(self) -> str:
        return self.engine.dialect.name

    @contextmanager
    def session(self) -> Iterator[Session]:
        """One unit of work: commit on success, roll back on any error, always close."""
        db = self.sessionlocal()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def create_all(self, drop: bool = False):
        # models must be imported so their tables are registered on Base.metadata
        import taskboard.models  # noqa: F401

        if drop:
            Base.metadata.drop_all(bind=self.engine)
        Base.metadata.create_all(bind=self.engine)

    def ping(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error("Database ping failed: %s", e)
            return False

    def dispose(self):
        self.engine.dispose()
