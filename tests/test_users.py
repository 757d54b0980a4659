"""
Tests for user profile administration
"""

from conftest import auth_header, signup_user


def test_user_updates_own_profile(client, user):
    token, user_id = user
    response = client.put(f"/users/{user_id}", json={"name": "Asha K", "category": "Artist"}, headers=auth_header(token))

    assert response.status_code == 200
    profile = response.json()["user"]
    assert profile["name"] == "Asha K"
    assert profile["category"] == "Artist"
    assert profile["role"] == "user"
    assert profile["version"] == 2

    session = client.get("/auth/session", headers=auth_header(token)).json()
    assert session["user"]["name"] == "Asha K"


def test_user_cannot_change_own_role(client, user):
    token, user_id = user
    response = client.put(f"/users/{user_id}", json={"role": "admin"}, headers=auth_header(token))
    assert response.status_code == 403


def test_user_cannot_edit_someone_else(client, user):
    _, user_id = user
    other_token, _ = signup_user(client, email="other@example.com")
    response = client.put(f"/users/{user_id}", json={"name": "Hacked"}, headers=auth_header(other_token))
    assert response.status_code == 403


def test_admin_promotes_user(client, admin_token, user):
    token, user_id = user
    response = client.put(f"/users/{user_id}", json={"role": "admin"}, headers=auth_header(admin_token))

    assert response.status_code == 200
    assert response.json()["user"]["role"] == "admin"
    assert client.get("/auth/session", headers=auth_header(token)).json()["isAdmin"] is True


def test_update_rejects_email_changes(client, user):
    token, user_id = user
    response = client.put(f"/users/{user_id}", json={"email": "new@example.com"}, headers=auth_header(token))
    assert response.status_code == 400


def test_admin_update_unknown_user(client, admin_token):
    response = client.put("/users/user_missing", json={"name": "Nobody"}, headers=auth_header(admin_token))
    assert response.status_code == 404


def test_list_users_is_admin_only(client, admin_token, user):
    token, _ = user
    assert client.get("/users", headers=auth_header(token)).status_code == 403
    assert len(client.get("/users", headers=auth_header(admin_token)).json()["users"]) == 2
