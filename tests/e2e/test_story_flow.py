"""End-to-end tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from sodfa.interface.api.app import create_app
from tests.conftest import ANONYMOUS_NAME, LOST_BOOK_CONTENT, PSEUDO_TOKEN
from tests.di import build_test_container

PSEUDO_HEADERS = {"X-Client-Id": PSEUDO_TOKEN}


@pytest.fixture
def client():
    """Test client over an app wired to in-memory components."""
    return TestClient(create_app(build_test_container()))


def _submit(client, **overrides) -> dict:
    body = {"title": "Lost Book", "content": LOST_BOOK_CONTENT, "tags": []}
    body.update(overrides)
    response = client.post("/stories", json=body)
    assert response.status_code == 201, response.text
    return response.json()["story"]


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestAuthFlow:
    """Session cookie handling."""

    def test_anonymous_session_sets_cookie(self, client):
        response = client.post("/auth/anonymous")

        assert response.status_code == 200
        assert "auth_token" in response.cookies
        assert response.json()["session"]["is_ephemeral"] is True

        me = client.get("/auth/me").json()
        assert me["identity_class"] == "shadow"
        assert me["display_name"] == ANONYMOUS_NAME

    def test_signup_login_logout(self, client):
        signup = client.post(
            "/auth/signup",
            json={"email": "a@x.io", "password": "secret1", "display_name": "Amira"},
        )
        assert signup.status_code == 200
        uid = signup.json()["session"]["uid"]

        me = client.get("/auth/me").json()
        assert me["identity_class"] == "authenticated"
        assert me["owner_key"] == uid

        client.post("/auth/logout")
        client.cookies.clear()
        assert client.get("/auth/me").json()["error"]["kind"] == "identity_unavailable"

        login = client.post("/auth/login", json={"email": "a@x.io", "password": "secret1"})
        assert login.status_code == 200
        assert login.json()["session"]["uid"] == uid

    def test_bad_credentials_are_401(self, client):
        response = client.post(
            "/auth/login", json={"email": "nobody@x.io", "password": "secret1"}
        )

        assert response.status_code == 401
        assert response.json()["detail"]["kind"] == "unauthorized"

    def test_duplicate_signup_is_400(self, client):
        body = {"email": "a@x.io", "password": "secret1"}
        client.post("/auth/signup", json=body)

        response = client.post("/auth/signup", json=body)

        assert response.status_code == 400


class TestStoryFlow:
    """Stories, reactions and comments over HTTP."""

    def test_submit_without_identity_is_401(self, client):
        response = client.post(
            "/stories", json={"title": "Lost Book", "content": LOST_BOOK_CONTENT}
        )

        assert response.status_code == 401
        assert response.json()["detail"]["kind"] == "identity_unavailable"

    def test_lost_book_scenario(self, client):
        client.post("/auth/signup", json={"email": "a@x.io", "password": "secret1"})

        story = _submit(client)

        assert story["tags"] == ["general"]
        assert story["status"] == "pending"
        assert (story["likes"], story["loves"]) == (0, 0)

        listing = client.get("/stories").json()
        assert [s["id"] for s in listing["stories"]] == [story["id"]]
        assert client.get("/stories/tags").json()["tags"] == ["general"]

    def test_love_toggle_scenario(self, client):
        client.post("/auth/signup", json={"email": "a@x.io", "password": "secret1"})
        story = _submit(client)
        url = f"/stories/{story['id']}/reactions"

        first = client.post(url, json={"type": "love"}).json()
        after_first = client.get(f"/stories/{story['id']}").json()["story"]
        second = client.post(url, json={"type": "love"}).json()
        after_second = client.get(f"/stories/{story['id']}").json()["story"]

        assert (first["reacted"], first["type"]) == (True, "love")
        assert (after_first["likes"], after_first["loves"]) == (0, 1)
        assert (second["reacted"], second["type"]) == (False, None)
        assert (after_second["likes"], after_second["loves"]) == (0, 0)

    def test_pseudo_reactions_and_comment(self, client):
        client.post("/auth/signup", json={"email": "a@x.io", "password": "secret1"})
        story = _submit(client)
        client.cookies.clear()

        for _ in range(2):
            response = client.post(
                f"/stories/{story['id']}/reactions",
                json={"type": "like"},
                headers=PSEUDO_HEADERS,
            )
            assert response.json()["reacted"] is True
        comment = client.post(
            f"/stories/{story['id']}/comments",
            json={"text": "Unbelievable!"},
            headers=PSEUDO_HEADERS,
        )

        assert client.get(f"/stories/{story['id']}").json()["story"]["likes"] == 2
        assert comment.status_code == 201
        created = comment.json()["comment"]
        assert created["author_id"] is None
        assert created["author"] == ANONYMOUS_NAME
        assert created["is_anonymous"] is True

        comments = client.get(f"/stories/{story['id']}/comments").json()
        assert [c["content"] for c in comments["comments"]] == ["Unbelievable!"]
        assert comments["warning"] is None

    def test_malformed_client_id_is_400(self, client):
        response = client.get("/auth/me", headers={"X-Client-Id": "short"})

        assert response.status_code == 400

    def test_unauthorized_delete_scenario(self, client):
        client.post("/auth/signup", json={"email": "a@x.io", "password": "secret1"})
        story = _submit(client)
        client.post(
            f"/stories/{story['id']}/comments", json={"text": "Mine"}
        )
        client.post("/auth/logout")
        client.cookies.clear()
        client.post("/auth/signup", json={"email": "b@x.io", "password": "secret1"})

        response = client.delete(f"/stories/{story['id']}")

        assert response.status_code == 403
        assert client.get(f"/stories/{story['id']}").status_code == 200
        comments = client.get(f"/stories/{story['id']}/comments").json()["comments"]
        assert len(comments) == 1

    def test_author_delete_cascades(self, client):
        signup = client.post(
            "/auth/signup", json={"email": "a@x.io", "password": "secret1"}
        )
        uid = signup.json()["session"]["uid"]
        story = _submit(client)
        client.post(f"/stories/{story['id']}/comments", json={"text": "One"})
        client.post(f"/stories/{story['id']}/reactions", json={"type": "like"})

        assert len(client.get(f"/users/{uid}/stories").json()["stories"]) == 1
        response = client.delete(f"/stories/{story['id']}")

        assert response.status_code == 200
        assert client.get(f"/stories/{story['id']}").status_code == 404
        assert client.get(f"/stories/{story['id']}/comments").json()["comments"] == []
        assert client.get(f"/users/{uid}/stories").json()["stories"] == []

    def test_update_story(self, client):
        client.post("/auth/signup", json={"email": "a@x.io", "password": "secret1"})
        story = _submit(client)

        response = client.patch(
            f"/stories/{story['id']}", json={"title": "Found Book", "tags": ["travel"]}
        )

        assert response.status_code == 200
        assert response.json()["story"]["title"] == "Found Book"
        assert response.json()["story"]["tags"] == ["travel"]

    def test_missing_story_is_404(self, client):
        assert client.get("/stories/missing").status_code == 404
