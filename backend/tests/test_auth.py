"""
Flavorbase Backend: Authentication Gate Tests
===============================================

What:  The router-wide bearer token gate, with tokens configured.
"""

import pytest

from app.config import settings


@pytest.fixture
def tokens(monkeypatch):
    monkeypatch.setattr(settings, "auth_tokens", "alpha-token, beta-token")


@pytest.mark.asyncio
async def test_open_when_no_tokens_configured(test_client):
    response = await test_client.get("/ingredients/count")
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_missing_header(test_client, tokens):
    response = await test_client.get("/ingredients/count")

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"
    assert response.json()["message"] == "Missing authorization header"


@pytest.mark.asyncio
async def test_wrong_scheme(test_client, tokens):
    response = await test_client.get(
        "/ingredients/count", headers={"Authorization": "Basic YWxwaGE="}
    )

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid authorization format"


@pytest.mark.asyncio
async def test_unknown_token(test_client, tokens):
    response = await test_client.get(
        "/ingredients/count", headers={"Authorization": "Bearer gamma-token"}
    )

    assert response.status_code == 401
    assert response.json()["error"] == "unauthorized"


@pytest.mark.asyncio
async def test_known_token(test_client, tokens):
    response = await test_client.get(
        "/ingredients/count", headers={"Authorization": "Bearer beta-token"}
    )

    assert response.status_code == 200
    assert response.json() == 5


@pytest.mark.asyncio
async def test_gate_runs_before_validation(test_client, tokens):
    response = await test_client.get("/flavor/ham")
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_health_is_not_gated(test_client, tokens):
    response = await test_client.get("/health")
    assert response.status_code == 200
