"""Basic auth and role checks in front of the actor, film and search routes."""

import pytest

from utils import basic_auth


def test_sign_up_then_read(client):
    res = client.post("/sign-up/", json={"name": "alice", "password": "wonderland"})
    assert res.status_code == 200
    assert res.get_data(as_text=True) == "user signed up"

    res = client.get("/actor/", headers=basic_auth("alice", "wonderland"))
    assert res.status_code == 200
    assert res.get_json() == {"actors": []}


def test_sign_up_creates_regular_users(client, store):
    client.post("/sign-up/", json={"name": "alice", "password": "wonderland"})
    user = store.get_user("alice")
    assert user.role == "user"
    assert not user.is_admin


def test_sign_up_rejects_bad_bodies(client):
    res = client.post("/sign-up/", data="{not json")
    assert res.status_code == 400
    assert res.get_data(as_text=True) == "cannot get request body"

    res = client.post("/sign-up/", json={"name": "", "password": "x"})
    assert res.status_code == 400
    assert res.get_data(as_text=True) == "name length should be at least 1 and no more than 100 characters"


def test_duplicate_sign_up_is_a_server_error(client):
    client.post("/sign-up/", json={"name": "alice", "password": "one"})
    res = client.post("/sign-up/", json={"name": "alice", "password": "two"})
    assert res.status_code == 500
    assert res.get_data(as_text=True) == "internal server error"


@pytest.mark.parametrize("path", ["/actor/", "/film/", "/search/?search_by=x"])
def test_missing_credentials(client, path):
    res = client.get(path)
    assert res.status_code == 401
    assert res.get_data(as_text=True) == "auth data was not provided"
    assert res.headers["WWW-Authenticate"].startswith("Basic")


def test_unknown_user_and_wrong_password_look_the_same(client, user_headers):
    unknown = client.get("/actor/", headers=basic_auth("ghost", "viewer-pass"))
    wrong = client.get("/actor/", headers=basic_auth("viewer", "nope"))
    assert unknown.status_code == wrong.status_code == 401
    assert unknown.get_data(as_text=True) == wrong.get_data(as_text=True) == "unauthorized"


def test_bearer_token_is_not_basic_auth(client, user_headers):
    res = client.get("/actor/", headers={"Authorization": "Bearer abc"})
    assert res.status_code == 401


@pytest.mark.parametrize(
    "method, path",
    [
        ("post", "/actor/"),
        ("put", "/actor/1"),
        ("delete", "/actor/1"),
        ("post", "/film/"),
        ("put", "/film/1"),
        ("delete", "/film/1"),
    ],
)
def test_non_admin_cannot_write(client, user_headers, method, path):
    res = getattr(client, method)(path, json={}, headers=user_headers)
    assert res.status_code == 403
    assert res.get_data(as_text=True) == "forbidden"


@pytest.mark.parametrize("path", ["/actor/", "/film/", "/actor/1", "/film/1", "/search/?search_by=a"])
def test_non_admin_can_read(client, user_headers, path):
    assert client.get(path, headers=user_headers).status_code == 200


def test_admin_can_write(client, admin_headers):
    res = client.post(
        "/actor/", json={"first_name": "Uma", "last_name": "Thurman", "sex": "f"}, headers=admin_headers
    )
    assert res.status_code == 200
    assert res.get_data(as_text=True) == "actor added"
