# tests/test_config.py
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from farm_market import config
from farm_market.main import app
from farm_market.utils.response_helpers import parse_id, safe_model_validate
from farm_market.routers.markets.schemas import MarketResponse


def test_async_url_normalization() -> None:
    assert config.get_async_database_url("postgresql://u:p@db/farm") == "postgresql+asyncpg://u:p@db/farm"
    assert config.get_async_database_url("postgresql+asyncpg://u:p@db/farm") == "postgresql+asyncpg://u:p@db/farm"
    assert config.get_sync_database_url("postgresql+asyncpg://u:p@db/farm") == "postgresql://u:p@db/farm"


async def test_get_db_without_url_fails(monkeypatch) -> None:
    monkeypatch.setattr(config, "DATABASE_URL", "")

    with pytest.raises(Exception, match="Database not configured"):
        await config.get_db().__anext__()


def test_cors_origins_default() -> None:
    assert config.CORS_ORIGINS == ["http://localhost:5173"]


@pytest.mark.parametrize("raw, expected", [("12", 12), ("0", None), ("-3", None), ("abc", None), ("1.5", None)])
def test_parse_id(raw, expected) -> None:
    assert parse_id(raw) == expected


def test_safe_model_validate_converts_decimals() -> None:
    from decimal import Decimal
    from farm_market.routers.products.schemas import ProductResponse

    product = safe_model_validate(ProductResponse, {
        "product_id": 1, "farmer_id": 3, "product_name": "Maize",
        "stock_quantity": 10, "price": Decimal("7.25"),
    })

    assert product.price == 7.25
    assert safe_model_validate(MarketResponse, {"market_id": 2, "market_name": "Kaneshie"}).location is None


def test_startup_creates_tables_when_enabled(monkeypatch) -> None:
    check = AsyncMock(return_value=True)
    init = AsyncMock()
    dispose = AsyncMock()
    monkeypatch.setattr(config, "DATABASE_URL", "postgresql://u:p@db/farm")
    monkeypatch.setattr(config, "DB_CREATE_TABLES", True)
    monkeypatch.setattr(config, "check_database", check)
    monkeypatch.setattr(config, "init_db", init)
    monkeypatch.setattr(config, "dispose_engine", dispose)

    with TestClient(app) as client:
        assert client.get("/").status_code == 200

    check.assert_awaited_once()
    init.assert_awaited_once()
    dispose.assert_awaited_once()


def test_unreachable_database_does_not_stop_startup(monkeypatch) -> None:
    init = AsyncMock()
    monkeypatch.setattr(config, "DATABASE_URL", "postgresql://u:p@db/farm")
    monkeypatch.setattr(config, "DB_CREATE_TABLES", True)
    monkeypatch.setattr(config, "check_database", AsyncMock(return_value=False))
    monkeypatch.setattr(config, "init_db", init)
    monkeypatch.setattr(config, "dispose_engine", AsyncMock())

    with TestClient(app) as client:
        assert client.get("/").status_code == 200

    init.assert_not_awaited()
