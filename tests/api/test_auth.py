"""Tests for auth endpoints: register, login, me, and bearer-token checks."""

from httpx import AsyncClient

from photofeed.infrastructure.security.jwt import create_access_token

PASSWORD = "correct-horse-battery"


async def test_register_login_me(client: AsyncClient) -> None:
    """Register, login with the same credentials, then read /me with the token."""
    register = await client.post(
        "/api/v1/auth/register",
        json={"email": "Ada@Example.com", "username": "ada", "password": PASSWORD},
    )
    assert register.status_code == 201
    body = register.json()
    assert body["username"] == "ada"
    assert body["email"] == "ada@example.com"
    assert body["role"] == "user"
    assert "password" not in body and "hashedPassword" not in body
    assert "createdAt" in body

    login = await client.post(
        "/api/v1/auth/login", json={"email": "ada@example.com", "password": PASSWORD}
    )
    assert login.status_code == 200
    token = login.json()
    assert token["tokenType"] == "bearer"

    me = await client.get(
        "/api/v1/auth/me", headers={"Authorization": f"Bearer {token['accessToken']}"}
    )
    assert me.status_code == 200
    assert me.json()["id"] == body["id"]


async def test_register_duplicate_returns_400(client: AsyncClient, make_user) -> None:
    await make_user("taken")
    response = await client.post(
        "/api/v1/auth/register",
        json={"email": "fresh@example.com", "username": "taken", "password": PASSWORD},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "USER_ALREADY_EXISTS"


async def test_register_validation_returns_422(client: AsyncClient) -> None:
    """Short password, bad username characters and bad email all fail validation."""
    for payload in (
        {"email": "a@example.com", "username": "abc", "password": "short"},
        {"email": "a@example.com", "username": "no spaces", "password": PASSWORD},
        {"email": "not-an-email", "username": "abc", "password": PASSWORD},
    ):
        response = await client.post("/api/v1/auth/register", json=payload)
        assert response.status_code == 422, payload


async def test_login_wrong_password_returns_401(client: AsyncClient, make_user) -> None:
    await make_user("ada")
    response = await client.post(
        "/api/v1/auth/login", json={"email": "ada@example.com", "password": "wrong-password"}
    )
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid credentials"


async def test_login_unknown_email_same_message(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/auth/login", json={"email": "ghost@example.com", "password": PASSWORD}
    )
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid credentials"


async def test_protected_route_requires_token(client: AsyncClient) -> None:
    response = await client.get("/api/v1/posts")
    assert response.status_code == 401
    assert response.json()["error"] == "AUTHENTICATION_ERROR"


async def test_garbage_token_returns_401(client: AsyncClient) -> None:
    response = await client.get(
        "/api/v1/auth/me", headers={"Authorization": "Bearer not.a.jwt"}
    )
    assert response.status_code == 401


async def test_token_for_deleted_user_returns_401(client: AsyncClient) -> None:
    token = create_access_token("no-such-user")
    response = await client.get(
        "/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"}
    )
    assert response.status_code == 401
