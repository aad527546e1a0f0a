"""Tests for the HTTP boundary: routes, status codes and response graphs."""

import uuid
from datetime import datetime

from fastapi.routing import APIRoute

from ordabok.core.exceptions import DatabaseConnectionError, DatabaseError
from ordabok.repositories import languages as language_repo

API = "/api/v1"


class TestRoutes:
    """Tests for route registration."""

    def test_routers_registered_under_prefix(self, client) -> None:
        paths = {r.path for r in client.app.routes if isinstance(r, APIRoute)}
        assert f"{API}/languages" in paths
        assert f"{API}/users/{{user_id}}" in paths
        assert f"{API}/words/{{word_id}}/learning" in paths

    def test_health(self, client) -> None:
        assert client.get("/health").json() == {"status": "healthy"}
        assert client.get("/").status_code == 200


class TestLanguages:
    """Tests for the language endpoints."""

    def test_create_as_authenticated_user(self, client, auth) -> None:
        response = client.post(
            f"{API}/languages",
            json={"name": "Quenya", "release": "Public", "genre": ["General", "Learning"]},
            headers=auth("alice"),
        )
        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Quenya"
        assert body["owner_id"] == "alice"
        assert body["release"] == "Public"
        assert body["genre"] == ["General", "Learning"]
        assert "owner" not in body
        uuid.UUID(body["id"])

    def test_create_anonymous(self, client) -> None:
        response = client.post(f"{API}/languages", json={"name": "Quenya"})
        assert response.status_code == 401

    def test_create_with_invalid_session(self, client) -> None:
        response = client.post(
            f"{API}/languages",
            json={"name": "Quenya"},
            headers={"Authorization": "alice;stolen"},
        )
        assert response.status_code == 401

    def test_create_with_unknown_release(self, client, auth) -> None:
        response = client.post(
            f"{API}/languages",
            json={"name": "Quenya", "release": "Secret"},
            headers=auth("alice"),
        )
        assert response.status_code == 422

    def test_blank_name_is_rejected(self, client, auth) -> None:
        response = client.post(f"{API}/languages", json={"name": "   "}, headers=auth("alice"))
        assert response.status_code == 422
        assert response.json()["detail"][0]["loc"][-1] == "name"

    def test_created_is_timezone_aware(self, client, auth) -> None:
        response = client.post(f"{API}/languages", json={"name": "Quenya"}, headers=auth("alice"))
        created = datetime.fromisoformat(response.json()["created"].replace("Z", "+00:00"))
        assert created.tzinfo is not None

    def test_delete_by_non_owner(self, client, auth, make_language) -> None:
        language = make_language(owner="alice")
        response = client.delete(f"{API}/languages/{language.id}", headers=auth("bob"))
        assert response.status_code == 403

    def test_delete_by_owner(self, client, auth, make_language) -> None:
        language = make_language(owner="alice")
        response = client.delete(f"{API}/languages/{language.id}", headers=auth("alice"))
        assert response.status_code == 204
        assert client.get(f"{API}/languages/{language.id}").status_code == 404

    def test_malformed_id(self, client) -> None:
        response = client.get(f"{API}/languages/not-a-uuid")
        assert response.status_code == 400
        assert response.json()["type"] == "ValidationError"

    def test_search(self, client, make_language) -> None:
        make_language(name="Abcdef")
        response = client.get(f"{API}/languages/search", params={"q": "BCD"})
        assert [lang["name"] for lang in response.json()] == ["Abcdef"]

    def test_by_name(self, client, make_language) -> None:
        language = make_language(name="Quenya", owner="bob")
        response = client.get(f"{API}/languages/by-name", params={"name": "Quenya", "owner": "bob"})
        assert response.json()["id"] == str(language.id)

    def test_requested_fields_are_resolved(self, client, auth, make_language) -> None:
        language = make_language(owner="alice")
        client.post(f"{API}/languages/{language.id}/follow", headers=auth("bob"))

        response = client.get(f"{API}/languages/{language.id}", params={"fields": "owner,followers"})

        body = response.json()
        assert body["owner"]["id"] == "alice"
        assert [user["id"] for user in body["followers"]] == ["bob"]
        assert "authors" not in body

    def test_unknown_field(self, client, make_language) -> None:
        language = make_language()
        response = client.get(f"{API}/languages/{language.id}", params={"fields": "owner,secrets"})
        assert response.status_code == 400

    def test_unfollow_when_not_following(self, client, auth, make_language) -> None:
        language = make_language(owner="alice")
        response = client.delete(f"{API}/languages/{language.id}/follow", headers=auth("bob"))
        assert response.status_code == 400

    def test_add_author(self, client, auth, make_language) -> None:
        language = make_language(owner="alice")
        response = client.post(
            f"{API}/languages/{language.id}/agents/bob",
            params={"relationship": "Author"},
            headers=auth("alice"),
        )
        assert response.status_code == 200
        assert [user["id"] for user in response.json()["authors"]] == ["bob"]
        assert response.json()["publishers"] == []


class TestErrors:
    """Tests for the mapping of store failures to responses."""

    def test_database_error_hides_detail(self, client, monkeypatch) -> None:
        def broken(db):
            raise DatabaseError("relation languages: password=hunter2", "Database error")

        monkeypatch.setattr(language_repo, "all_languages", broken)
        response = client.get(f"{API}/languages")

        assert response.status_code == 500
        assert response.json()["detail"] == "Database error"
        assert "hunter2" not in response.text

    def test_connection_error_is_unavailable(self, client, monkeypatch) -> None:
        def unreachable(db):
            raise DatabaseConnectionError("Connection pool exhausted")

        monkeypatch.setattr(language_repo, "all_languages", unreachable)
        assert client.get(f"{API}/languages").status_code == 503

    def test_unexpected_error_is_generic(self, client, monkeypatch) -> None:
        def crash(db):
            raise RuntimeError("boom")

        monkeypatch.setattr(language_repo, "all_languages", crash)
        response = client.get(f"{API}/languages")

        assert response.status_code == 500
        assert "boom" not in response.text


class TestUsers:
    """Tests for the user endpoints."""

    def test_list_requires_admin_key(self, client) -> None:
        assert client.get(f"{API}/users", params={"admin_key": "guess"}).status_code == 403
        response = client.get(f"{API}/users", params={"admin_key": "test-admin-key"})
        assert {user["id"] for user in response.json()} == {"alice", "bob", "carol"}

    def test_create_user(self, client) -> None:
        response = client.post(
            f"{API}/users",
            json={"id": "dave", "username": "Dave", "admin_key": "test-admin-key"},
        )
        assert response.status_code == 201
        assert response.json() == {"id": "dave", "username": "Dave"}

    def test_get_missing_user(self, client) -> None:
        assert client.get(f"{API}/users/nobody").status_code == 404

    def test_follow_user(self, client, auth) -> None:
        assert client.post(f"{API}/users/bob/follow", headers=auth("alice")).status_code == 200
        response = client.get(f"{API}/users/alice", params={"fields": "following"})
        assert [user["id"] for user in response.json()["following"]] == ["bob"]

    def test_delete_user(self, client) -> None:
        response = client.delete(f"{API}/users/carol", params={"admin_key": "test-admin-key"})
        assert response.status_code == 204
        assert client.get(f"{API}/users/carol").status_code == 404


class TestWords:
    """Tests for the word endpoints."""

    def test_create_and_lookup(self, client, auth, make_language) -> None:
        language = make_language(owner="alice")
        response = client.post(
            f"{API}/words",
            json={"norm": "hestr", "language": str(language.id), "partofspeech": "Noun"},
            headers=auth("alice"),
        )
        assert response.status_code == 201
        word = response.json()
        assert word["language_id"] == str(language.id)

        found = client.get(f"{API}/words", params={"language": str(language.id), "word": "hestr"})
        assert [w["id"] for w in found.json()] == [word["id"]]

        detail = client.get(f"{API}/words/{word['id']}", params={"fields": "language,lemma"})
        assert detail.json()["language"]["id"] == str(language.id)
        assert detail.json()["lemma"] is None

    def test_blank_norm_is_rejected(self, client, auth, make_language) -> None:
        language = make_language(owner="alice")
        response = client.post(
            f"{API}/words",
            json={"norm": "  ", "language": str(language.id), "partofspeech": "Noun"},
            headers=auth("alice"),
        )
        assert response.status_code == 422
        assert response.json()["detail"][0]["loc"][-1] == "norm"

    def test_create_in_foreign_language(self, client, auth, make_language) -> None:
        language = make_language(owner="alice")
        response = client.post(
            f"{API}/words",
            json={"norm": "hestr", "language": str(language.id), "partofspeech": "Noun"},
            headers=auth("bob"),
        )
        assert response.status_code == 403

    def test_learning(self, client, auth, make_language, make_word) -> None:
        word = make_word(make_language(owner="alice"))
        response = client.put(
            f"{API}/words/{word.id}/learning",
            json={"status": "Learned"},
            headers=auth("bob"),
        )
        assert response.status_code == 200

        bob = client.get(f"{API}/users/bob", params={"fields": "learning,learned"}).json()
        assert bob["learning"] == []
        assert [w["id"] for w in bob["learned"]] == [str(word.id)]

    def test_relations(self, client, auth, make_language, make_word) -> None:
        language = make_language(owner="alice")
        word = make_word(language, norm="hestr")
        target = make_word(language, norm="horse")
        response = client.post(
            f"{API}/words/{word.id}/relations/{target.id}",
            params={"relationship": "Definition"},
            headers=auth("alice"),
        )
        assert [w["norm"] for w in response.json()["definitions"]] == ["horse"]

    def test_delete(self, client, auth, make_language, make_word) -> None:
        word = make_word(make_language(owner="alice"))
        assert client.delete(f"{API}/words/{word.id}", headers=auth("alice")).status_code == 204
        assert client.get(f"{API}/words/{word.id}").status_code == 404
