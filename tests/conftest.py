# tests/conftest.py
import os

# Settings are read at import time, so they must be in place first
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["DATABASE_URL"] = ""

import pytest
from unittest.mock import AsyncMock, MagicMock
from fastapi.testclient import TestClient

from farm_market.main import app
from farm_market.routers.auth.helpers import auth_helpers


def make_result(rows=None, first=None, scalar=None, rowcount=1):
    """Mimic the parts of a SQLAlchemy Result the repositories touch"""
    result = MagicMock()
    result.mappings.return_value.all.return_value = rows or []
    result.mappings.return_value.first.return_value = first
    result.scalar_one.return_value = scalar
    result.rowcount = rowcount
    return result


@pytest.fixture
def mock_db():
    """An AsyncSession stand-in; configure execute.return_value per test."""
    db = MagicMock()
    db.execute = AsyncMock(return_value=make_result())
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    return db


@pytest.fixture
def client():
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def token_for():
    """Build a signed bearer header for a given role."""
    def _make(role: str = "customer", user_id: int = 1, email: str = "user@example.com"):
        token = auth_helpers.create_access_token(user_id=user_id, email=email, role=role)
        return {"Authorization": f"Bearer {token}"}
    return _make


@pytest.fixture
def customer_headers(token_for):
    return token_for("customer", user_id=7, email="buyer@example.com")


@pytest.fixture
def farmer_headers(token_for):
    return token_for("farmer", user_id=3, email="farmer@example.com")


@pytest.fixture
def admin_headers(token_for):
    return token_for("admin", user_id=1, email="admin@example.com")
