"""Tests for auth dependencies."""

from datetime import timedelta

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from techstock.dependencies.admin import get_admin_user
from techstock.dependencies.auth import get_current_user
from techstock.schemas.auth import TokenClaims
from techstock.services.auth_service import AuthService
from tests.conftest import bearer


@pytest.fixture
def client():
    """Create test app with protected routes."""
    app = FastAPI()

    @app.get("/protected")
    def protected_route(user: TokenClaims = Depends(get_current_user)):
        return {"user_id": user.user_id, "role": user.role, "username": user.username}

    @app.get("/admin-only")
    def admin_route(user: TokenClaims = Depends(get_admin_user)):
        return {"user_id": user.user_id}

    return TestClient(app)


def test_protected_route_with_valid_token(client):
    """Claims are recovered from the token without a database."""
    response = client.get("/protected", headers=bearer(7, role="user", username="Dana"))

    assert response.status_code == 200
    assert response.json() == {"user_id": 7, "role": "user", "username": "Dana"}


def test_protected_route_without_token(client):
    response = client.get("/protected")

    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_protected_route_with_invalid_token(client):
    response = client.get("/protected", headers={"Authorization": "Bearer invalid_token"})

    assert response.status_code == 401


def test_protected_route_with_expired_token(client):
    token = AuthService.create_access_token(7, "user", "Dana", expires_delta=timedelta(seconds=-1))

    response = client.get("/protected", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


def test_admin_route_rejects_regular_user(client):
    response = client.get("/admin-only", headers=bearer(7, role="user"))

    assert response.status_code == 403


def test_admin_route_accepts_admin(client):
    response = client.get("/admin-only", headers=bearer(1, role="admin"))

    assert response.status_code == 200
    assert response.json() == {"user_id": 1}
