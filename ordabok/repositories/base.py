"""
Shared helpers for the repositories, including the translation of store
failures into the application's exception taxonomy.

Every helper opens its own session, so each repository call checks out
exactly one pooled connection and returns it before the call returns.
"""
from contextlib import contextmanager
from typing import Iterator, List, Type, TypeVar
import logging

from sqlalchemy import func
from sqlalchemy.exc import (
    DBAPIError,
    IntegrityError,
    NoResultFound,
    SQLAlchemyError,
    TimeoutError as PoolTimeoutError,
)
from sqlmodel import SQLModel, select

from ordabok.core.database import Database
from ordabok.core.exceptions import (
    DatabaseConnectionError,
    DatabaseError,
    NotFoundError,
    OrdabokException,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=SQLModel)


@contextmanager
def translate_errors(action: str) -> Iterator[None]:
    """
    Re-raise store failures under the application's taxonomy.

    - no row matched            -> NotFoundError
    - pool timeout, lost link   -> DatabaseConnectionError
    - constraint violation      -> DatabaseError("Constraint violation")
    - anything else, including rows that fail to decode -> DatabaseError
    """
    try:
        yield
    except OrdabokException:
        raise
    except NoResultFound as e:
        raise NotFoundError(f"Failed to {action}: no matching row") from e
    except PoolTimeoutError as e:
        logger.error(f"Failed to {action}: connection pool exhausted: {e}")
        raise DatabaseConnectionError("Connection pool exhausted") from e
    except IntegrityError as e:
        logger.error(f"Failed to {action}: {e}")
        raise DatabaseError(f"Failed to {action}: {e}", "Constraint violation") from e
    except DBAPIError as e:
        if e.connection_invalidated:
            logger.error(f"Failed to {action}: connection lost: {e}")
            raise DatabaseConnectionError("Database connection lost") from e
        logger.error(f"Failed to {action}: {e}")
        raise DatabaseError(f"Failed to {action}: {e}") from e
    except SQLAlchemyError as e:
        logger.error(f"Failed to {action}: {e}")
        raise DatabaseError(f"Failed to {action}: {e}") from e
    except (ValueError, LookupError) as e:
        # Stored value outside of an enum domain, malformed UUID column, ...
        logger.error(f"Failed to {action}: could not decode row: {e}")
        raise DatabaseError(f"Failed to {action}: could not decode row: {e}", "Decode error") from e


def get_by_id(db: Database, model: Type[ModelT], ident, action: str) -> ModelT:
    """Fetch one row by primary key or raise NotFoundError."""
    with translate_errors(action), db.session() as session:
        row = session.get(model, ident)
        if row is None:
            raise NotFoundError(f"{model.__name__} {ident} not found")
        return row


def fetch_one(db: Database, statement, action: str):
    """First row of ``statement`` or NotFoundError."""
    with translate_errors(action), db.session() as session:
        row = session.exec(statement).first()
        if row is None:
            raise NoResultFound()
        return row


def fetch_all(db: Database, statement, action: str) -> List:
    """All rows of ``statement``; an empty list when nothing matched."""
    with translate_errors(action), db.session() as session:
        return list(session.exec(statement).all())


def count(db: Database, model: Type[ModelT], *criteria, action: str) -> int:
    with translate_errors(action), db.session() as session:
        return session.exec(select(func.count()).select_from(model).where(*criteria)).one()


def add(db: Database, row: ModelT, action: str) -> ModelT:
    """Insert ``row`` and commit; the committed object is returned."""
    with translate_errors(action), db.session() as session:
        session.add(row)
        session.commit()
        session.refresh(row)
        return row


def delete_by_id(db: Database, model: Type[ModelT], ident, action: str) -> None:
    with translate_errors(action), db.session() as session:
        row = session.get(model, ident)
        if row is None:
            raise NotFoundError(f"{model.__name__} {ident} not found")
        session.delete(row)
        session.commit()


def delete_where(db: Database, model: Type[ModelT], *criteria, action: str) -> int:
    """Delete every row matching ``criteria``; returns how many went."""
    with translate_errors(action), db.session() as session:
        rows = session.exec(select(model).where(*criteria)).all()
        for row in rows:
            session.delete(row)
        session.commit()
        return len(rows)
