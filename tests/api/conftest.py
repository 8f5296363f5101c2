"""Shared fixtures for API tests."""
import pytest
from httpx import AsyncClient


async def signup_headers(
    client: AsyncClient,
    email: str,
    password: str = "test1234",
) -> dict[str, str]:
    """Register a user through the API and return bearer auth headers for them."""
    response = await client.post(
        "/auth/signup", json={"email": email, "password": password},
    )
    assert response.status_code == 201, response.text
    token = response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def auth_headers(client: AsyncClient) -> dict[str, str]:
    """Auth headers for the primary test user."""
    return await signup_headers(client, "test@test.com")


@pytest.fixture
async def other_headers(client: AsyncClient) -> dict[str, str]:
    """Auth headers for a second, unrelated user."""
    return await signup_headers(client, "other@test.com")


# Bookmark ID that is never assigned in a fresh test database
MISSING_BOOKMARK_ID = 999_999
