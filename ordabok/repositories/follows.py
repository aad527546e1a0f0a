"""
Follow repositories: users following languages, users following users.
"""
import uuid
from typing import List

from sqlmodel import select

from ordabok.core.database import Database
from ordabok.models import UserFollow, UserFollowLanguage
from ordabok.repositories.base import add, delete_where, fetch_all


# ============================================================================
# User follows language
# ============================================================================

def find_language_follows(db: Database, user_id: str, language_id: uuid.UUID) -> List[UserFollowLanguage]:
    """Join rows recording that ``user_id`` follows ``language_id``; usually zero or one."""
    statement = select(UserFollowLanguage).where(
        UserFollowLanguage.userid == user_id,
        UserFollowLanguage.lang == language_id,
    )
    return fetch_all(db, statement, f"retrieve follow of language {language_id} by {user_id}")


def language_followers(db: Database, language_id: uuid.UUID) -> List[UserFollowLanguage]:
    statement = select(UserFollowLanguage).where(UserFollowLanguage.lang == language_id)
    return fetch_all(db, statement, f"retrieve followers of language {language_id}")


def languages_followed_by(db: Database, user_id: str) -> List[UserFollowLanguage]:
    statement = select(UserFollowLanguage).where(UserFollowLanguage.userid == user_id)
    return fetch_all(db, statement, f"retrieve languages followed by {user_id}")


def insert_language_follow(db: Database, user_id: str, language_id: uuid.UUID) -> UserFollowLanguage:
    return add(
        db,
        UserFollowLanguage(userid=user_id, lang=language_id),
        f"insert follow of language {language_id} by {user_id}",
    )


def delete_language_follows(db: Database, user_id: str, language_id: uuid.UUID) -> int:
    return delete_where(
        db, UserFollowLanguage,
        UserFollowLanguage.userid == user_id,
        UserFollowLanguage.lang == language_id,
        action=f"delete follow of language {language_id} by {user_id}",
    )


# ============================================================================
# User follows user
# ============================================================================

def find_user_follows(db: Database, follower: str, following: str) -> List[UserFollow]:
    statement = select(UserFollow).where(
        UserFollow.follower == follower,
        UserFollow.following == following,
    )
    return fetch_all(db, statement, f"retrieve follow of {following} by {follower}")


def followers_of(db: Database, user_id: str) -> List[UserFollow]:
    statement = select(UserFollow).where(UserFollow.following == user_id)
    return fetch_all(db, statement, f"retrieve followers of {user_id}")


def followed_by(db: Database, user_id: str) -> List[UserFollow]:
    statement = select(UserFollow).where(UserFollow.follower == user_id)
    return fetch_all(db, statement, f"retrieve users followed by {user_id}")


def insert_user_follow(db: Database, follower: str, following: str) -> UserFollow:
    return add(
        db,
        UserFollow(follower=follower, following=following),
        f"insert follow of {following} by {follower}",
    )


def delete_user_follows(db: Database, follower: str, following: str) -> int:
    return delete_where(
        db, UserFollow,
        UserFollow.follower == follower,
        UserFollow.following == following,
        action=f"delete follow of {following} by {follower}",
    )
