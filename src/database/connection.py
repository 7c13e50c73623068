"""
Relational Database Connection Management.

This module handles the PostgreSQL connection via SQLAlchemy.
It provides:
- Connection pooling
- Session management with commit/rollback
- Health checks

Tours, tour participants, route plans, emergency contacts and users
live in this store.
"""
from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from src.core.config import get_settings
from src.core.logging_config import get_logger

logger = get_logger(__name__)


def _engine_options(db_url: str) -> dict:
    """Pool options per backend; SQLite (tests) needs a single shared connection."""
    if db_url.startswith("sqlite"):
        return {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
        }
    return {
        "pool_pre_ping": True,
        "pool_size": 20,
        "max_overflow": 10,
        "pool_recycle": 1800,
        "connect_args": {"connect_timeout": 2},
    }


class DatabaseConnection:
    """
    Manages database connections and session lifecycle.

    Example:
        >>> db = DatabaseConnection()
        >>> with db.get_session() as session:
        ...     session.execute(text("SELECT 1"))
    """

    def __init__(self, connection_url: Optional[str] = None):
        """
        Initialize database engine with connection pooling.

        Args:
            connection_url: Optional connection URL. If not provided, uses settings.
        """
        self.settings = get_settings()

        db_url = connection_url or self.settings.database_url

        self.engine = create_engine(db_url, echo=False, **_engine_options(db_url))

        self._session_factory = sessionmaker(
            bind=self.engine,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )

        logger.info(f"Database connection initialized: {db_url.split('@')[-1] if '@' in db_url else db_url}")

    @contextmanager
    def get_session(self) -> Generator[Session, None, None]:
        """
        Get a database session with automatic cleanup.

        The session is committed when the block exits normally and rolled
        back when it raises. Multi-statement operations (tour creation,
        participant registration) rely on this as their transaction.

        Yields:
            SQLAlchemy Session object
        """
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Database error, rolling back: {e}")
            raise
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    transaction = get_session

    def check_connection(self) -> bool:
        """
        Test database connectivity.

        Returns:
            True if connection is healthy, False otherwise.
        """
        try:
            with self.get_session() as session:
                session.execute(text("SELECT 1"))
            logger.debug("Database connection check: OK")
            return True
        except SQLAlchemyError as e:
            logger.error(f"Database connection check failed: {e}")
            return False

    def close(self):
        """Close all connections in the pool."""
        self.engine.dispose()
        logger.info("Database connections closed")


# Module-level instance (singleton pattern)
_db_connection: Optional[DatabaseConnection] = None


def get_database() -> DatabaseConnection:
    """
    Get or create the database connection instance.

    This lazy initialization prevents connection before app startup.
    """
    global _db_connection
    if _db_connection is None:
        _db_connection = DatabaseConnection()
    return _db_connection


def reset_database() -> None:
    """Dispose the singleton engine so the next call reconnects."""
    global _db_connection
    if _db_connection is not None:
        _db_connection.close()
    _db_connection = None
