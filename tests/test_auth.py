"""
Tests for signup, login and session handling
"""

import pytest

from app.core.config import Settings
from app.services.auth_service import AuthService
from app.services.errors import Forbidden, Unauthenticated
from conftest import ADMIN_EMAIL, ADMIN_PASSWORD, admin_login, auth_header, signup_user


def test_signup_returns_session_and_profile(client):
    response = client.post("/auth/signup", json={
        "email": "Ravi@Example.com",
        "password": "secret123",
        "name": "Ravi",
        "category": "Student",
    })

    assert response.status_code == 200
    data = response.json()
    assert data["session"]["access_token"]
    assert data["user"]["email"] == "ravi@example.com"
    assert data["profile"]["name"] == "Ravi"
    assert data["profile"]["category"] == "Student"
    assert data["profile"]["role"] == "user"
    assert data["profile"]["createdAt"]
    assert data["isAdmin"] is False


def test_signup_defaults_name_to_email_local_part(client):
    response = client.post("/auth/signup", json={"email": "meera@example.com", "password": "secret123"})
    assert response.json()["profile"]["name"] == "meera"


def test_signup_duplicate_email_conflicts(client):
    signup_user(client, email="dup@example.com")
    response = client.post("/auth/signup", json={"email": "DUP@example.com", "password": "another1"})

    assert response.status_code == 409
    assert response.json()["error_code"] == "conflict"
    assert "DuplicateEmail" in response.json()["error"]


@pytest.mark.parametrize("body", [
    {"password": "secret123"},
    {"email": "x@example.com"},
    {"email": "not-an-email", "password": "secret123"},
    {"email": "x@example.com", "password": "123"},
])
def test_signup_invalid_input(client, body):
    response = client.post("/auth/signup", json=body)
    assert response.status_code == 400
    assert response.json()["error_code"] == "invalid_input"


def test_admin_self_signup_is_forbidden(client):
    response = client.post("/auth/signup", json={
        "email": "sneaky@example.com",
        "password": "secret123",
        "isAdmin": True,
    })
    assert response.status_code == 403


def test_signup_cannot_claim_admin_email(client):
    response = client.post("/auth/signup", json={"email": ADMIN_EMAIL.upper(), "password": "squatter1"})
    assert response.status_code == 409

    token = admin_login(client)
    assert client.get("/auth/session", headers=auth_header(token)).json()["isAdmin"] is True


def test_user_signin(client):
    signup_user(client, email="kiran@example.com", password="secret123")
    response = client.post("/auth/signin", json={"email": "kiran@example.com", "password": "secret123"})

    assert response.status_code == 200
    assert response.json()["profile"]["email"] == "kiran@example.com"
    assert response.json()["isAdmin"] is False


def test_signin_wrong_password(client):
    signup_user(client, email="kiran@example.com", password="secret123")
    response = client.post("/auth/signin", json={"email": "kiran@example.com", "password": "wrong-pass"})

    assert response.status_code == 401
    assert response.json()["error"] == "Invalid credentials"


def test_signin_unknown_email(client):
    response = client.post("/auth/signin", json={"email": "ghost@example.com", "password": "secret123"})
    assert response.status_code == 401


def test_admin_bootstrap_login_provisions_once(client, admin_token):
    second = admin_login(client)
    assert second != admin_token

    users = client.get("/users", headers=auth_header(second)).json()["users"]
    admins = [u for u in users if u["role"] == "admin"]
    assert len(admins) == 1
    assert admins[0]["email"] == ADMIN_EMAIL


def test_admin_login_with_wrong_password(client):
    response = client.post("/auth/signin", json={
        "email": ADMIN_EMAIL,
        "password": "nope-nope",
        "isAdmin": True,
    })
    assert response.status_code == 401


def test_admin_login_with_user_account_is_forbidden(client):
    signup_user(client, email="kiran@example.com", password="secret123")
    response = client.post("/auth/signin", json={
        "email": "kiran@example.com",
        "password": "secret123",
        "loginType": "admin",
    })
    assert response.status_code == 403


def test_user_login_with_admin_account_is_forbidden(client, admin_token):
    response = client.post("/auth/signin", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 403


def test_session_resolves_profile(client, user):
    token, user_id = user
    response = client.get("/auth/session", headers=auth_header(token))

    assert response.status_code == 200
    assert response.json()["user"]["id"] == user_id
    assert response.json()["isAdmin"] is False


@pytest.mark.parametrize("headers", [
    {},
    {"Authorization": "Bearer public-anon-key"},
    {"Authorization": "Bearer made-up-token"},
])
def test_session_rejects_missing_anon_or_unknown_tokens(client, headers):
    response = client.get("/auth/session", headers=headers)
    assert response.status_code == 401
    assert response.json()["error_code"] == "unauthenticated"


def test_signout_invalidates_token(client, user):
    token, _ = user
    assert client.post("/auth/signout", headers=auth_header(token)).status_code == 200
    assert client.get("/auth/session", headers=auth_header(token)).status_code == 401
    assert client.post("/auth/signout", headers=auth_header(token)).status_code == 401


def test_expired_session_is_rejected_and_removed(store):
    settings = Settings(SESSION_TTL_SECONDS=-1, PASSWORD_HASH_ITERATIONS=1000)
    auth = AuthService(store, settings)
    token = auth.signup("old@example.com", "secret123")["session"]["access_token"]

    with pytest.raises(Unauthenticated):
        auth.validate_session(token)
    assert store.get(f"session:{token}") is None


def test_service_login_type_mismatch(store, settings):
    auth = AuthService(store, settings)
    auth.signup("plain@example.com", "secret123")

    with pytest.raises(Forbidden):
        auth.login("plain@example.com", "secret123", login_type="admin")

    auth.login(ADMIN_EMAIL, ADMIN_PASSWORD, login_type="admin")
    with pytest.raises(Forbidden):
        auth.login(ADMIN_EMAIL, ADMIN_PASSWORD, login_type="user")


def test_password_is_not_stored_in_clear(store, settings):
    AuthService(store, settings).signup("hash@example.com", "secret123")
    credential = store.get("auth:email:hash@example.com")

    assert "secret123" not in str(credential)
    assert credential["passwordHash"].startswith("1000$")


def test_login_purges_expired_sessions(store, settings):
    stale = Settings(SESSION_TTL_SECONDS=-1, PASSWORD_HASH_ITERATIONS=1000)
    old_token = AuthService(store, stale).signup("old@example.com", "secret123")["session"]["access_token"]
    assert store.get(f"session:{old_token}") is not None

    auth = AuthService(store, settings)
    new_token = auth.login("old@example.com", "secret123")["session"]["access_token"]

    assert store.get(f"session:{old_token}") is None
    assert auth.validate_session(new_token).email == "old@example.com"
