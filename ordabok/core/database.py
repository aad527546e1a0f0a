from contextlib import contextmanager
from typing import Iterator
import logging

from sqlalchemy import event
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import DBAPIError, TimeoutError as PoolTimeoutError
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from ordabok.core.exceptions import DatabaseConnectionError

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(
    database_url: str,
    pool_size: int = 5,
    max_overflow: int = 10,
    pool_timeout: float = 30.0,
) -> Engine:
    """
    Create the engine backing the connection pool.

    PostgreSQL gets a bounded QueuePool: at most ``pool_size + max_overflow``
    connections, a checkout blocks for at most ``pool_timeout`` seconds and then
    fails, and every connection is pinged before being handed out.
    SQLite (tests, local development) shares one static connection.
    """
    if database_url.startswith("postgres://"):
        database_url = database_url.replace("postgres://", "postgresql://", 1)

    logger.info(f"Connecting to database: {database_url[:20]}...")  # Log partial URL for debugging

    if database_url.startswith("sqlite"):
        engine = create_engine(
            database_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_engine(
        database_url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_timeout=pool_timeout,
    )


class Database:
    """Connection pool shared by all requests; the only shared mutable state."""

    def __init__(self, engine: Engine):
        self.engine = engine

    @classmethod
    def from_settings(cls, settings) -> "Database":
        return cls(
            build_engine(
                settings.sqlalchemy_url,
                pool_size=settings.db_pool_size,
                max_overflow=settings.db_max_overflow,
                pool_timeout=settings.db_pool_timeout,
            )
        )

    def acquire(self) -> Connection:
        """Check a validated connection out of the pool."""
        try:
            return self.engine.connect()
        except PoolTimeoutError as e:
            logger.error(f"Connection pool exhausted: {e}")
            raise DatabaseConnectionError("Connection pool exhausted") from e
        except DBAPIError as e:
            logger.error(f"Failed to connect to database: {e}")
            raise DatabaseConnectionError("Database unreachable") from e

    @contextmanager
    def session(self) -> Iterator[Session]:
        """
        Session bound to exactly one pooled connection.

        The connection goes back to the pool when the block exits; callers
        should not hold a session across more than one repository call.
        """
        connection = self.acquire()
        try:
            with Session(bind=connection, expire_on_commit=False) as session:
                yield session
        finally:
            connection.close()

    def init_db(self) -> None:
        """Initialize database tables."""
        # Import models to register them with SQLModel
        from ordabok import models  # noqa: F401

        SQLModel.metadata.create_all(self.engine)

    def dispose(self) -> None:
        self.engine.dispose()

