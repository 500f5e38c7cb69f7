from __future__ import annotations

from collections.abc import Iterator

import pytest
from flask.testing import FlaskClient

from userapi.app import create_app
from userapi.infrastructure.db import ENGINE, Base, SessionLocal
from userapi.infrastructure.db.models import User, UserListItem
from userapi.shared.config import AppConfig, JwtConfig
from userapi.tests.fakes import TEST_SECRET


@pytest.fixture(autouse=True)
def reset_database() -> Iterator[None]:
    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    Base.metadata.drop_all(bind=ENGINE)


def _config(**overrides: object) -> AppConfig:
    return AppConfig(jwt=JwtConfig(JWT_SECRET=TEST_SECRET, JWT_EXPIRES_IN=3600), **overrides)


@pytest.fixture()
def client() -> Iterator[FlaskClient]:
    app = create_app(_config())
    with app.test_client() as client:
        yield client


def _register(client: FlaskClient, username: str = "alice", password: str = "pw1"):
    return client.post("/api/user/register", json={"username": username, "password": password})


def _login(client: FlaskClient, username: str = "alice", password: str = "pw1") -> str:
    response = client.post("/api/user/login", json={"username": username, "password": password})
    assert response.status_code == 200
    return response.get_json()["token"]


def _auth(token: str) -> dict[str, str]:
    return {"Authorization": f"JWT {token}"}


def test_register_login_and_favourites_flow(client: FlaskClient) -> None:
    register = _register(client)
    assert register.status_code == 200
    assert register.get_json() == {"message": "User alice successfully registered"}

    token = _login(client)

    assert client.get("/api/user/favourites", headers=_auth(token)).get_json() == []
    assert client.put("/api/user/favourites/42", headers=_auth(token)).get_json() == ["42"]
    assert client.put("/api/user/favourites/42", headers=_auth(token)).get_json() == ["42"]
    assert client.delete("/api/user/favourites/42", headers=_auth(token)).get_json() == []
    assert client.delete("/api/user/favourites/42", headers=_auth(token)).get_json() == []


def test_history_is_separate_from_favourites(client: FlaskClient) -> None:
    _register(client)
    token = _login(client)

    client.put("/api/user/favourites/1", headers=_auth(token))
    client.put("/api/user/history/2", headers=_auth(token))
    client.put("/api/user/history/3", headers=_auth(token))

    assert client.get("/api/user/favourites", headers=_auth(token)).get_json() == ["1"]
    assert client.get("/api/user/history", headers=_auth(token)).get_json() == ["2", "3"]


def test_lists_are_scoped_to_the_token_owner(client: FlaskClient) -> None:
    _register(client, "alice")
    _register(client, "bob")
    alice = _login(client, "alice")
    bob = _login(client, "bob")

    client.put("/api/user/favourites/42", headers=_auth(alice))

    assert client.get("/api/user/favourites", headers=_auth(bob)).get_json() == []


def test_duplicate_registration_leaves_first_user_intact(client: FlaskClient) -> None:
    _register(client, "alice", "pw1")

    duplicate = _register(client, "alice", "other")

    assert duplicate.status_code == 409
    assert duplicate.get_json()["error"] == "user_already_exists"
    assert _login(client, "alice", "pw1")
    session = SessionLocal()
    try:
        assert session.query(User).count() == 1
    finally:
        session.close()


def test_wrong_password_and_unknown_user_look_the_same(client: FlaskClient) -> None:
    _register(client)

    wrong = client.post("/api/user/login", json={"username": "alice", "password": "nope"})
    unknown = client.post("/api/user/login", json={"username": "bob", "password": "pw1"})

    assert wrong.status_code == unknown.status_code == 401
    assert wrong.get_json() == unknown.get_json()


def test_password_is_not_stored_in_plaintext(client: FlaskClient) -> None:
    _register(client, "alice", "pw1-plaintext")

    session = SessionLocal()
    try:
        row = session.query(User).filter(User.username == "alice").one()
        assert "pw1-plaintext" not in row.password_hash
    finally:
        session.close()


def test_token_outlives_deleted_user(client: FlaskClient) -> None:
    _register(client)
    token = _login(client)
    session = SessionLocal()
    try:
        session.query(UserListItem).delete()
        session.query(User).delete()
        session.commit()
    finally:
        session.close()

    response = client.get("/api/user/favourites", headers=_auth(token))

    assert response.status_code == 404
    assert response.get_json()["error"] == "user_not_found"


def test_protected_routes_reject_bad_tokens(client: FlaskClient) -> None:
    _register(client)
    token = _login(client)

    assert client.get("/api/user/favourites").status_code == 401
    assert client.get("/api/user/favourites", headers=_auth("abc")).status_code == 401
    assert (
        client.get("/api/user/favourites", headers={"Authorization": f"Bearer {token}"})
        .status_code
        == 401
    )


def test_legacy_mode_collapses_errors_to_422() -> None:
    app = create_app(_config(LEGACY_ERROR_STATUS=True))

    with app.test_client() as client:
        _register(client)
        duplicate = _register(client)
        bad_login = client.post("/api/user/login", json={"username": "alice", "password": "x"})
        no_token = client.get("/api/user/favourites")

    assert duplicate.status_code == 422
    assert bad_login.status_code == 422
    assert no_token.status_code == 401


def test_health_reports_database(client: FlaskClient) -> None:
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.get_json()["database"] == "ok"


def test_cors_headers_on_api_routes(client: FlaskClient) -> None:
    response = client.options(
        "/api/user/login",
        headers={
            "Origin": "http://example.com",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type, Authorization",
        },
    )

    assert response.headers["Access-Control-Allow-Origin"] == "*"


def test_routing_errors_use_json_error_shape(client: FlaskClient) -> None:
    _register(client)
    token = _login(client)

    missing_id = client.put("/api/user/favourites", headers=_auth(token))
    unknown = client.get("/api/user/nowhere")

    assert missing_id.status_code == 405
    assert missing_id.is_json
    assert missing_id.get_json()["error"] == "method_not_allowed"
    assert "GET" in missing_id.headers["Allow"]
    assert unknown.status_code == 404
    assert unknown.get_json()["error"] == "not_found"
    assert unknown.get_json()["message"]


def test_legacy_mode_collapses_routing_errors_to_422() -> None:
    app = create_app(_config(LEGACY_ERROR_STATUS=True))

    with app.test_client() as client:
        _register(client)
        token = _login(client)
        missing_id = client.put("/api/user/favourites", headers=_auth(token))

    assert missing_id.status_code == 422
    assert missing_id.is_json
    assert missing_id.get_json()["error"] == "method_not_allowed"
