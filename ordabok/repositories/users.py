"""
User repository.
"""
import logging
from typing import List

from sqlmodel import select, or_

from ordabok.core.database import Database
from ordabok.core.exceptions import NotFoundError, ValidationError
from ordabok.models import (
    User,
    UserFollow,
    UserFollowLanguage,
    LangAndAgent,
    Language,
    WordLearning,
)
from ordabok.repositories.base import (
    add,
    fetch_all,
    get_by_id,
    translate_errors,
)

logger = logging.getLogger(__name__)


def find_by_id(db: Database, user_id: str) -> User:
    return get_by_id(db, User, user_id, f"retrieve user {user_id}")


def all_users(db: Database) -> List[User]:
    return fetch_all(db, select(User).order_by(User.username), "retrieve users")


def search(db: Database, query: str) -> List[User]:
    """Users whose username contains ``query``, ignoring case."""
    statement = select(User).where(
        User.username.icontains(query, autoescape=True)  # type: ignore[attr-defined]
    ).order_by(User.username)
    return fetch_all(db, statement, f"search users matching {query!r}")


def insert(db: Database, username: str, user_id: str) -> User:
    """Insert a user then read it back by its id."""
    if not user_id.strip():
        raise ValidationError("User id must not be empty")
    if not username.strip():
        raise ValidationError("Username must not be empty")
    add(db, User(id=user_id, username=username), f"insert user {user_id}")
    return find_by_id(db, user_id)


def delete(db: Database, user_id: str) -> None:
    """
    Delete a user together with the join rows naming them.

    Users who still own languages are rejected: their languages would be left
    without an owner.

    Raises:
        NotFoundError: If no such user exists
        ValidationError: If the user owns at least one language
    """
    with translate_errors(f"delete user {user_id}"), db.session() as session:
        user = session.get(User, user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")

        owned = session.exec(select(Language.id).where(Language.owner == user_id)).first()
        if owned is not None:
            raise ValidationError(f"User {user_id} still owns languages")

        follows = session.exec(
            select(UserFollow).where(
                or_(UserFollow.follower == user_id, UserFollow.following == user_id)
            )
        ).all()
        followed_languages = session.exec(
            select(UserFollowLanguage).where(UserFollowLanguage.userid == user_id)
        ).all()
        learning = session.exec(select(WordLearning).where(WordLearning.userid == user_id)).all()
        agents = session.exec(select(LangAndAgent).where(LangAndAgent.agent == user_id)).all()

        for row in [*follows, *followed_languages, *learning, *agents]:
            session.delete(row)
        # Join rows must be gone before the user row for the foreign keys
        session.flush()
        session.delete(user)
        session.commit()

    logger.info(
        f"Deleted user {user_id}: {len(follows)} follows, "
        f"{len(followed_languages)} followed languages, "
        f"{len(learning)} learning entries, {len(agents)} language roles"
    )
