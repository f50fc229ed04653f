from sqlalchemy import create_engine, Column, Integer, String, DateTime, event
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from contextlib import contextmanager
from datetime import datetime, timezone, tzinfo
from typing import Callable, Dict, List, Optional
import logging
import sqlite3
import threading

from .config import DEFAULT_DATABASE_URL
from .exceptions import StoreUnavailableError
from .operations import DatabaseOperations
from .utils import as_utc, day_label

logger = logging.getLogger(__name__)

Base = declarative_base()


class Bookmark(Base):
    __tablename__ = "bookmarks"

    id = Column(Integer, primary_key=True)
    url = Column(String, index=True)  # Lookup index only, duplicates are allowed
    added_at = Column(DateTime, index=True)


class HistoryEntry(Base):
    __tablename__ = "history"

    id = Column(Integer, primary_key=True)
    url = Column(String, index=True)  # Lookup index only, duplicates are allowed
    visited_at = Column(DateTime, index=True)


def set_sqlite_pragma(dbapi_connection, connection_record):
    """Configure SQLite for better performance"""
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()

        # WAL for better write performance, NORMAL sync is safe with WAL
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA synchronous=NORMAL")

        # Set cache size to 32MB
        cursor.execute("PRAGMA cache_size=-32000")

        cursor.close()


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def create_db_engine(database_url: str):
    """Create an engine for ``database_url`` with the SQLite tuning applied"""
    kwargs = {}
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {
            "timeout": 30,  # Connection timeout in seconds
            "check_same_thread": False,  # Access is serialized by DatabaseManager
        }
        if url.database in (None, "", ":memory:"):
            # One shared connection, otherwise every session sees an empty database
            kwargs["poolclass"] = StaticPool
    else:
        kwargs.update(
            pool_size=5,
            max_overflow=10,
            pool_timeout=30,  # Connection timeout from pool
            pool_recycle=3600,  # Recycle connections every hour
            pool_pre_ping=True,
        )

    engine = create_engine(database_url, **kwargs)
    event.listen(engine, "connect", set_sqlite_pragma)
    return engine


class DatabaseManager(DatabaseOperations):
    """
    Bookmark and history persistence on top of SQLAlchemy.

    Owns the engine for the lifetime of the process: it is created here and
    disposed by the single explicit ``close()``. Every operation runs in its
    own session and commits immediately, and all connection use is
    serialized by one lock.

    Args:
        database_url: SQLAlchemy URL of the store
        now: Clock used to stamp new records, must return an aware datetime
        tz: Time zone for day labels, None for the local time zone
    """

    def __init__(
        self,
        database_url: str = DEFAULT_DATABASE_URL,
        now: Callable[[], datetime] = _utc_now,
        tz: Optional[tzinfo] = None,
    ):
        self.database_url = database_url
        self._now = now
        self._tz = tz
        self._lock = threading.Lock()
        self._closed = False
        self._engine = None

        try:
            self._engine = create_db_engine(database_url)
            self._session_factory = sessionmaker(
                autocommit=False,
                autoflush=False,
                bind=self._engine,
                expire_on_commit=False
            )
            # Create tables and url indexes if needed
            Base.metadata.create_all(bind=self._engine)
        except SQLAlchemyError as e:
            logger.error(f"Could not open database {database_url}: {e}", exc_info=True)
            if self._engine is not None:
                self._engine.dispose()
            raise StoreUnavailableError(f"Could not open database {database_url}") from e

        logger.info(f"Database ready at {self._engine.url!r}")

    @property
    def tz(self) -> Optional[tzinfo]:
        """Time zone used for day labels, None for the local time zone"""
        return self._tz

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    @contextmanager
    def _session(self, action: str):
        """Serialized session that commits on success and maps driver errors"""
        with self._lock:
            if self._closed:
                raise StoreUnavailableError(f"Cannot {action}: database connection is closed")
            db = self._session_factory()
            try:
                yield db
                db.commit()
            except SQLAlchemyError as e:
                db.rollback()
                logger.error(f"Database error during {action}: {e}", exc_info=True)
                raise StoreUnavailableError(f"Database error during {action}") from e
            finally:
                db.close()

    def _stamp(self) -> datetime:
        # Stored naive, in UTC
        return as_utc(self._now()).replace(tzinfo=None)

    # Bookmarks
    def add_bookmark(self, url: str) -> None:
        with self._session("add bookmark") as db:
            db.add(Bookmark(url=url, added_at=self._stamp()))

    def get_bookmarks(self) -> List[str]:
        with self._session("list bookmarks") as db:
            rows = db.query(Bookmark.url)\
                .order_by(Bookmark.added_at.desc(), Bookmark.id.desc())\
                .all()
            return [row.url for row in rows]

    def delete_bookmark(self, url: str) -> None:
        with self._session("delete bookmark") as db:
            bookmark = db.query(Bookmark)\
                .filter(Bookmark.url == url)\
                .order_by(Bookmark.id)\
                .first()
            if bookmark is not None:
                db.delete(bookmark)

    # History
    def add_history(self, url: str) -> None:
        with self._session("add history") as db:
            db.add(HistoryEntry(url=url, visited_at=self._stamp()))

    def get_history(self) -> List[str]:
        with self._session("list history") as db:
            rows = db.query(HistoryEntry.url)\
                .order_by(HistoryEntry.visited_at.desc(), HistoryEntry.id.desc())\
                .all()
            return [row.url for row in rows]

    def get_history_by_day(self) -> Dict[str, List[str]]:
        with self._session("group history by day") as db:
            rows = db.query(HistoryEntry.url, HistoryEntry.visited_at)\
                .order_by(HistoryEntry.visited_at.desc(), HistoryEntry.id.desc())\
                .all()

        history_by_day: Dict[str, List[str]] = {}
        for url, visited_at in rows:
            if url is None or visited_at is None:
                continue
            history_by_day.setdefault(day_label(visited_at, self._tz), []).append(url)
        return history_by_day

    def delete_history(self, url: str) -> None:
        with self._session("delete history") as db:
            entry = db.query(HistoryEntry)\
                .filter(HistoryEntry.url == url)\
                .order_by(HistoryEntry.id)\
                .first()
            if entry is not None:
                db.delete(entry)

    def ping(self) -> bool:
        """Round-trip a trivial query, raising StoreUnavailableError on failure"""
        with self._session("ping") as db:
            db.query(Bookmark.id).limit(1).all()
        return True

    def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._engine.dispose()
        logger.info("Database connection closed")
