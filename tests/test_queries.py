"""Tests for the read-side root operations."""

import uuid

import pytest

from ordabok.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ordabok.models import PartOfSpeech
from ordabok.services import queries


class TestLanguageQueries:
    """Tests for language lookups."""

    def test_all_languages(self, anonymous, make_language) -> None:
        make_language(name="Quenya")
        make_language(name="Sindarin", owner="bob")
        assert {lang.name for lang in queries.all_languages(anonymous)} == {"Quenya", "Sindarin"}

    def test_language_by_name_and_owner(self, anonymous, make_language) -> None:
        created = make_language(name="Quenya", owner="bob")
        assert queries.language(anonymous, "Quenya", "bob").id == created.id
        with pytest.raises(NotFoundError):
            queries.language(anonymous, "Quenya", "alice")

    def test_language_name_is_trimmed(self, anonymous, make_language) -> None:
        created = make_language(name="Quenya", owner="bob")
        assert queries.language(anonymous, "  Quenya ", "bob").id == created.id

    @pytest.mark.parametrize("query", ["abc", "ABC", "bcd"])
    def test_find_language(self, anonymous, make_language, query) -> None:
        make_language(name="Abcdef")
        assert [lang.name for lang in queries.find_language(anonymous, query)] == ["Abcdef"]

    def test_find_language_no_match(self, anonymous, make_language) -> None:
        make_language(name="Abcdef")
        assert queries.find_language(anonymous, "xyz") == []

    def test_language_by_malformed_id(self, anonymous) -> None:
        with pytest.raises(ValidationError):
            queries.language_by_id(anonymous, "12")


class TestUserQueries:
    """Tests for user lookups."""

    def test_user(self, anonymous) -> None:
        assert queries.user(anonymous, "bob").username == "Bob"

    def test_find_user(self, anonymous) -> None:
        assert [u.id for u in queries.find_user(anonymous, "aRo")] == ["carol"]

    def test_all_users_requires_admin_key(self, anonymous) -> None:
        assert len(queries.all_users(anonymous, anonymous.admin_key)) == 3
        with pytest.raises(AuthorizationError):
            queries.all_users(anonymous, "guess")


class TestWordQueries:
    """Tests for word lookups."""

    def test_word(self, anonymous, make_language, make_word) -> None:
        word = make_word(make_language())
        assert queries.word(anonymous, str(word.id)).norm == "hestr"

    def test_missing_word(self, anonymous) -> None:
        with pytest.raises(NotFoundError):
            queries.word(anonymous, str(uuid.uuid4()))

    def test_malformed_word_id(self, anonymous) -> None:
        with pytest.raises(ValidationError):
            queries.word(anonymous, "hestr")

    def test_find_word(self, anonymous, make_language, make_word) -> None:
        language = make_language()
        make_word(language, norm="hestr")
        make_word(language, norm="ulfr")
        assert [w.norm for w in queries.find_word(anonymous, str(language.id), "EST")] == ["hestr"]

    def test_words_normalizes_the_form(self, anonymous, make_language, make_word) -> None:
        language = make_language()
        make_word(language, norm="run", partofspeech=PartOfSpeech.NOUN)
        make_word(language, norm="run", partofspeech=PartOfSpeech.VERB)
        assert len(queries.words(anonymous, str(language.id), " run. ")) == 2
        assert queries.words(anonymous, str(language.id), "walk") == []
