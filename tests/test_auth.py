from app.core.config import settings


def test_register_returns_user_without_password(client):
    response = client.post(
        "/api/register",
        json={
            "username": "alice",
            "email": "alice@example.com",
            "password": "secret123",
            "role": "instructor",
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body["user"]["username"] == "alice"
    assert body["user"]["role"] == "instructor"
    assert "password" not in body["user"]
    assert body["access_token"]
    assert settings.session_cookie_name in response.cookies


def test_register_rejects_taken_username_and_email(client, register):
    register("alice")

    response = client.post(
        "/api/register",
        json={"username": "alice", "email": "new@example.com", "password": "secret123"},
    )
    assert response.status_code == 400
    assert response.json() == {"message": "Username already exists"}

    response = client.post(
        "/api/register",
        json={"username": "alice2", "email": "alice@example.com", "password": "secret123"},
    )
    assert response.status_code == 400
    assert response.json() == {"message": "Email already registered"}


def test_register_cannot_self_assign_admin(client):
    response = client.post(
        "/api/register",
        json={
            "username": "mallory",
            "email": "mallory@example.com",
            "password": "secret123",
            "role": "admin",
        },
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Validation error"


def test_short_password_is_rejected(client):
    response = client.post(
        "/api/register",
        json={"username": "bob", "email": "bob@example.com", "password": "123"},
    )
    assert response.status_code == 400


def test_login_with_bad_credentials(client, register):
    register("alice")

    response = client.post(
        "/api/login", json={"username": "alice", "password": "wrong-password"}
    )
    assert response.status_code == 401
    assert response.json() == {"message": "Invalid username or password"}


def test_session_cookie_authenticates_and_logout_clears_it(client, register):
    register("alice")

    response = client.post(
        "/api/login", json={"username": "alice", "password": "secret123"}
    )
    assert response.status_code == 200

    me = client.get("/api/user")
    assert me.status_code == 200
    assert me.json()["username"] == "alice"

    assert client.post("/api/logout").json() == {"message": "Logged out"}
    client.cookies.clear()
    assert client.get("/api/user").status_code == 401


def test_bearer_token_authenticates(client, student):
    user, headers = student

    response = client.get("/api/user", headers=headers)
    assert response.status_code == 200
    assert response.json()["id"] == user["id"]


def test_invalid_token_is_rejected(client):
    response = client.get("/api/user", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401
    assert response.json() == {"message": "Invalid or expired session"}


def test_deactivated_user_cannot_log_in(client, admin, student):
    user, _ = student
    client.put(
        f"/api/admin/users/{user['id']}", json={"is_active": False}, headers=admin[1]
    )

    response = client.post(
        "/api/login", json={"username": "learner", "password": "secret123"}
    )
    assert response.status_code == 401
    assert response.json() == {"message": "Account is deactivated"}
