# backend/ledger/database.py
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from .utils.logging import db_logger

Base = declarative_base()


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:")


class Database:
    """Engine and session factory for one backing store.

    Constructed once at application startup and disposed at shutdown.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = str(url)
        kwargs = {"echo": echo}
        if self.url.startswith("sqlite"):
            kwargs["connect_args"] = {"check_same_thread": False}
            if _is_memory_sqlite(self.url):
                # One shared connection, otherwise every checkout sees an empty database
                kwargs["poolclass"] = StaticPool

        db_logger.info("Connecting to database", extra={"url": self.url})
        self.engine = create_engine(self.url, **kwargs)

        if self.url.startswith("sqlite"):
            @event.listens_for(self.engine, "connect")
            def set_sqlite_pragma(dbapi_conn, connection_record):
                cursor = dbapi_conn.cursor()
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.close()

        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def create_all(self) -> None:
        """Create tables that don't exist yet"""
        from . import models  # noqa: F401  registers tables on Base

        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self) -> None:
        db_logger.info("Closing database", extra={"url": self.url})
        self.engine.dispose()


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
