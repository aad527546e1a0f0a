"""
User models.
"""
from sqlmodel import SQLModel, Field
from typing import Optional


class User(SQLModel, table=True):
    """User table - mirrors the accounts of the identity provider."""
    __tablename__ = "users"

    id: str = Field(primary_key=True)  # Opaque id assigned by Appwrite
    username: str = Field(index=True)  # Display name, not unique


class UserFollow(SQLModel, table=True):
    """UserFollow junction table - a user following another user."""
    __tablename__ = "userfollows"

    id: Optional[int] = Field(default=None, primary_key=True)
    follower: str = Field(foreign_key="users.id", index=True)
    following: str = Field(foreign_key="users.id", index=True)
