"""In-memory database engine, session factory and the store-wide write lock."""

import threading

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from drivedesk.app.core.settings import get_settings

settings = get_settings()

# One shared connection keeps the in-memory database alive for the process.
engine = create_engine(
    settings.database_url,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)

# Guards every check-then-write sequence on lessons, feedback and invoices.
store_lock = threading.RLock()


def close_session(db: Session) -> None:
    # Closing rolls back the shared connection, so it must not interleave with a locked write.
    with store_lock:
        db.close()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        close_session(db)


def init_db() -> None:
    from drivedesk.app.db.base import Base

    Base.metadata.create_all(bind=engine)
