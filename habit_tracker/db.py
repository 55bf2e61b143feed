import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from habit_tracker.config import settings
from habit_tracker.errors import StorageFailure

logger = logging.getLogger(__name__)


def _normalize_database_url(raw_url: str) -> str:
    url = (raw_url or "").strip()
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://") :]
    if url.startswith("postgresql://") and "+psycopg" not in url:
        url = url.replace("postgresql://", "postgresql+psycopg://", 1)
    return url


DATABASE_URL = _normalize_database_url(settings.DATABASE_URL)
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, future=True, pool_pre_ping=True, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine, future=True)


@contextmanager
def storage_errors(db: Session, operation: str) -> Iterator[None]:
    """Re-raise store errors as StorageFailure; used for read-only operations."""
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Store failure during %s", operation)
        raise StorageFailure(f"{operation} failed: {exc}") from exc


@contextmanager
def transaction(db: Session, operation: str) -> Iterator[Session]:
    """Run a unit of work: commit on success, roll back on any failure."""
    try:
        yield db
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Store failure during %s, rolled back", operation)
        raise StorageFailure(f"{operation} failed: {exc}") from exc
    except Exception:
        db.rollback()
        raise
