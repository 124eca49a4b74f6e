"""Helpers for driving the API through a test client."""

from fastapi.testclient import TestClient

from learnhub.config import Settings
from learnhub.util.jwt import create_token


def auth_header(user_id: str, admin: bool = False) -> dict[str, str]:
    """Bearer header for a token the identity provider would issue."""
    token = create_token(
        user_id,
        Settings().auth,
        email=f"{user_id}@learnhub.test",
        scp="ADMIN" if admin else None,
    )
    return {"Authorization": f"Bearer {token}"}


def register(client: TestClient, user_id: str, admin: bool = False) -> dict[str, str]:
    """Register a user and return their auth header."""
    headers = auth_header(user_id, admin=admin)
    response = client.post("/v1/auth/register", headers=headers)
    assert response.status_code == 201, response.text
    return headers
