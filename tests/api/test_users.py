"""Tests for the current-user profile endpoints."""
from httpx import AsyncClient

from tests.api.conftest import signup_headers


async def test_get_me(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    response = await client.get("/users/me", headers=auth_headers)
    assert response.status_code == 200

    data = response.json()
    assert data["email"] == "test@test.com"
    assert data["firstName"] is None
    assert data["lastName"] is None
    assert isinstance(data["id"], int)


async def test_get_me_never_exposes_password_hash(
    client: AsyncClient, auth_headers: dict[str, str],
) -> None:
    response = await client.get("/users/me", headers=auth_headers)
    data = response.json()
    assert "hash" not in data
    assert "password" not in data


async def test_update_me(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    """Test updating email and names through PATCH /users."""
    response = await client.patch(
        "/users",
        json={"email": "testing@test.com", "firstName": "Lamba", "lastName": "Lord"},
        headers=auth_headers,
    )
    assert response.status_code == 200

    data = response.json()
    assert data["email"] == "testing@test.com"
    assert data["firstName"] == "Lamba"
    assert data["lastName"] == "Lord"

    me = await client.get("/users/me", headers=auth_headers)
    assert me.json()["firstName"] == "Lamba"


async def test_update_me_partial(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    """Test that fields left out of the body keep their values."""
    await client.patch("/users", json={"firstName": "Lamba"}, headers=auth_headers)

    response = await client.patch("/users", json={"lastName": "Lord"}, headers=auth_headers)
    data = response.json()
    assert data["firstName"] == "Lamba"
    assert data["lastName"] == "Lord"
    assert data["email"] == "test@test.com"


async def test_update_me_email_taken_forbidden(
    client: AsyncClient, auth_headers: dict[str, str],
) -> None:
    await signup_headers(client, "taken@test.com")

    response = await client.patch(
        "/users", json={"email": "taken@test.com"}, headers=auth_headers,
    )
    assert response.status_code == 403
    assert response.json()["detail"] == "Credentials taken"


async def test_update_me_invalid_email_returns_400(
    client: AsyncClient, auth_headers: dict[str, str],
) -> None:
    response = await client.patch(
        "/users", json={"email": "not-an-email"}, headers=auth_headers,
    )
    assert response.status_code == 400


async def test_update_me_requires_auth(client: AsyncClient) -> None:
    response = await client.patch("/users", json={"firstName": "Anon"})
    assert response.status_code == 401


async def test_signin_with_updated_email(
    client: AsyncClient, auth_headers: dict[str, str],
) -> None:
    """Test that the new email is used for subsequent signins."""
    await client.patch("/users", json={"email": "moved@test.com"}, headers=auth_headers)

    response = await client.post(
        "/auth/signin", json={"email": "moved@test.com", "password": "test1234"},
    )
    assert response.status_code == 200
