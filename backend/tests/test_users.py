from fastapi.testclient import TestClient
from sqlmodel import Session

from inventory.models.user import User


def test_list_users(client: TestClient, admin_token: str, regular_user: User):
    response = client.get(
        "/users",
        headers={"Authorization": f"Bearer {admin_token}"},
    )
    assert response.status_code == 200
    users = response.json()
    assert [u["email"] for u in users] == ["admin@example.com", "jane@example.com"]
    # Ensure no password hashes leak
    for u in users:
        assert "passwordHash" not in u
        assert "password_hash" not in u


def test_set_role(
    client: TestClient, admin_token: str, regular_user: User, session: Session
):
    response = client.put(
        f"/users/{regular_user.id}/role",
        json={"role": "manager"},
        headers={"Authorization": f"Bearer {admin_token}"},
    )
    assert response.status_code == 200
    assert response.json()["message"] == "User role updated to manager"
    assert session.get(User, regular_user.id).role == "manager"


def test_set_invalid_role(
    client: TestClient, admin_token: str, regular_user: User, session: Session
):
    response = client.put(
        f"/users/{regular_user.id}/role",
        json={"role": "superuser"},
        headers={"Authorization": f"Bearer {admin_token}"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid role"
    assert session.get(User, regular_user.id).role == "user"


def test_set_role_missing(client: TestClient, admin_token: str):
    response = client.put(
        "/users/1/role",
        json={},
        headers={"Authorization": f"Bearer {admin_token}"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid role"


def test_set_role_of_nonexistent_user(client: TestClient, admin_token: str):
    response = client.put(
        "/users/99999/role",
        json={"role": "manager"},
        headers={"Authorization": f"Bearer {admin_token}"},
    )
    assert response.status_code == 404
    assert response.json()["detail"] == "User not found"


def test_non_admin_cannot_set_role(
    client: TestClient, user_token: str, regular_user: User
):
    response = client.put(
        f"/users/{regular_user.id}/role",
        json={"role": "admin"},
        headers={"Authorization": f"Bearer {user_token}"},
    )
    assert response.status_code == 403


def test_promoted_user_needs_new_token(
    client: TestClient, admin_token: str, user_token: str, regular_user: User
):
    client.put(
        f"/users/{regular_user.id}/role",
        json={"role": "admin"},
        headers={"Authorization": f"Bearer {admin_token}"},
    )
    # The old token still carries the old role
    response = client.get("/users", headers={"Authorization": f"Bearer {user_token}"})
    assert response.status_code == 403

    login = client.post(
        "/login",
        json={"email": "jane@example.com", "password": "janepass"},
    )
    response = client.get(
        "/users",
        headers={"Authorization": f"Bearer {login.json()['token']}"},
    )
    assert response.status_code == 200
