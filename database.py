"""Database configuration and session management."""
import logging
from typing import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, Session

from models import Base

logger = logging.getLogger(__name__)


class Database:
    """
    Owns the SQLAlchemy engine (and so the connection pool) for one process.

    Built by the application entry point and kept on ``app.state.database``;
    request handlers reach it through the ``get_db`` dependency.
    """

    def __init__(self, url: str, **engine_kwargs):
        self.engine = create_engine(url, **engine_kwargs)
        self.SessionLocal = sessionmaker(bind=self.engine, autocommit=False, autoflush=False)

    def session(self) -> Session:
        return self.SessionLocal()

    def get_db(self) -> Generator[Session, None, None]:
        """Yield a session and close it once the request is done."""
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def create_all(self) -> None:
        """Create any missing tables."""
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables ensured")

    def ping(self) -> None:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def dispose(self) -> None:
        self.engine.dispose()
