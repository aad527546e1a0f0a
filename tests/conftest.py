"""Shared fixtures: an in-memory database, seeded users and request contexts."""

import os

# Settings are read when ordabok.main is first imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ADMIN_KEY", "test-admin-key")

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from ordabok.core.config import Settings
from ordabok.core.context import RequestContext
from ordabok.core.database import Database, build_engine
from ordabok.models import DictGenre, Language, PartOfSpeech, Release, Word
from ordabok.repositories import languages as language_repo
from ordabok.repositories import users as user_repo
from ordabok.repositories import words as word_repo

ADMIN_KEY = "test-admin-key"


@pytest.fixture
def db():
    database = Database(build_engine("sqlite://"))
    database.init_db()
    yield database
    database.dispose()


@pytest.fixture
def users(db):
    """Three mirrored accounts: alice, bob and carol."""
    return {
        name: user_repo.insert(db, name.capitalize(), name)
        for name in ("alice", "bob", "carol")
    }


@pytest.fixture
def anonymous(db, users) -> RequestContext:
    return RequestContext(db=db, admin_key=ADMIN_KEY)


@pytest.fixture
def alice(anonymous) -> RequestContext:
    return anonymous.with_caller("alice")


@pytest.fixture
def bob(anonymous) -> RequestContext:
    return anonymous.with_caller("bob")


@pytest.fixture
def make_language(db, users):
    """Insert a language straight through the repository."""
    def _make(name="Proto-Norse", owner="alice", **kwargs):
        kwargs.setdefault("release", Release.PUBLIC)
        kwargs.setdefault("genre", [DictGenre.GENERAL])
        return language_repo.insert(db, Language(name=name, owner=owner, **kwargs))
    return _make


@pytest.fixture
def make_word(db):
    def _make(language, norm="hestr", **kwargs):
        kwargs.setdefault("partofspeech", PartOfSpeech.NOUN)
        return word_repo.insert(db, Word(norm=norm, language=language.id, **kwargs))
    return _make


@pytest.fixture
def identity():
    """Identity provider accepting session ``s-<user id>`` for every user."""
    provider = MagicMock()
    provider.check_session.side_effect = lambda session_id, user_id: session_id == f"s-{user_id}"
    return provider


@pytest.fixture
def settings() -> Settings:
    return Settings(database_url="sqlite://", admin_key=ADMIN_KEY, environment="test")


@pytest.fixture
def client(settings, db, users, identity):
    """Client against an app sharing the test database; startup hooks are not run."""
    from ordabok.main import create_app

    app = create_app(settings=settings, database=db, identity=identity)
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def auth():
    """Authorization header for a valid session of a user."""
    def _auth(user_id: str) -> dict:
        return {"Authorization": f"{user_id};s-{user_id}"}
    return _auth
