"""Application shell: root route, plain-text errors, request log, CLI."""

import logging

from film_api.models.user import ADMIN_ROLE


def test_root(client):
    res = client.get("/")
    assert res.status_code == 200
    assert res.get_data(as_text=True) == "Hello world!"
    assert res.mimetype == "text/plain"


def test_unknown_path_is_plain_text_404(client):
    res = client.get("/nowhere")
    assert res.status_code == 404
    assert res.get_data(as_text=True) == "not found"


def test_wrong_method(client):
    res = client.get("/sign-up/")
    assert res.status_code == 405
    assert res.get_data(as_text=True) == "unexpected method"


def test_requests_are_logged(client, caplog):
    with caplog.at_level(logging.INFO, logger="film_api"):
        client.get("/?probe=1")
    assert any(record.getMessage().startswith("GET /?probe=1: ") for record in caplog.records)


def test_store_errors_become_500(client, admin_headers, store, monkeypatch):
    from film_api.store import FailureKind, StoreError

    def broken():
        raise StoreError(FailureKind.STORE, "connection lost")

    monkeypatch.setattr(store, "list_actors", broken)
    res = client.get("/actor/", headers=admin_headers)
    assert res.status_code == 500
    assert res.get_data(as_text=True) == "internal server error"


def test_store_errors_during_auth_are_401(client, admin_headers, store, monkeypatch):
    from film_api.store import FailureKind, StoreError

    def broken(name):
        raise StoreError(FailureKind.STORE, "connection lost")

    monkeypatch.setattr(store, "get_user", broken)
    res = client.get("/actor/", headers=admin_headers)
    assert res.status_code == 401
    assert res.get_data(as_text=True) == "unauthorized"


def test_create_admin_command(app, store):
    result = app.test_cli_runner().invoke(args=["create-admin", "boss", "secret"])
    assert result.exit_code == 0
    assert store.get_user("boss").role == ADMIN_ROLE
