# tests/test_registry_api.py
from unittest.mock import MagicMock

import pytest

from farm_market.main import app
from farm_market.routers.farmers.farmers import get_farmer_service
from farm_market.routers.markets.markets import get_market_service
from farm_market.services import FarmerService, MarketService


@pytest.fixture
def farmer_service():
    service = MagicMock(spec=FarmerService)
    app.dependency_overrides[get_farmer_service] = lambda: service
    return service


@pytest.fixture
def market_service():
    service = MagicMock(spec=MarketService)
    app.dependency_overrides[get_market_service] = lambda: service
    return service


def test_banner(client) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.text == "Digital Farm Marketplace API is running..."


def test_cors_allows_configured_origin(client) -> None:
    response = client.options("/api/products", headers={
        "Origin": "http://localhost:5173",
        "Access-Control-Request-Method": "GET",
    })

    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


def test_markets(client, market_service, customer_headers) -> None:
    market_service.fetch_all_markets.return_value = [{"market_id": 1, "market_name": "Makola", "location": "Accra"}]

    response = client.get("/api/market", headers=customer_headers)

    assert response.status_code == 200
    assert response.json() == [{"market_id": 1, "market_name": "Makola", "location": "Accra"}]


def test_market_not_found(client, market_service, customer_headers) -> None:
    market_service.fetch_market_by_id.return_value = None

    response = client.get("/api/market/3", headers=customer_headers)

    assert response.status_code == 404
    assert response.json()["detail"] == "Market not found"


def test_farmers_readable_with_any_token(client, farmer_service, customer_headers) -> None:
    farmer_service.get_all_farmers.return_value = [{"farmer_id": 1, "full_name": "Yaw Boateng"}]

    response = client.get("/api/farmers", headers=customer_headers)

    assert response.status_code == 200
    assert response.json()[0]["full_name"] == "Yaw Boateng"


def test_farmer_not_found(client, farmer_service, customer_headers) -> None:
    farmer_service.get_farmer_by_id.return_value = None

    response = client.get("/api/farmers/8", headers=customer_headers)

    assert response.status_code == 404
    assert response.json()["detail"] == "Farmer not found"


def test_farmer_writes_need_admin(client, farmer_service, customer_headers) -> None:
    response = client.post("/api/farmers", headers=customer_headers, json={"full_name": "Yaw"})

    assert response.status_code == 403
    farmer_service.add_farmer.assert_not_awaited()


def test_admin_manages_farmers(client, farmer_service, admin_headers) -> None:
    farmer_service.add_farmer.return_value = {"message": "Farmer added successfully", "farmer_id": 2}
    farmer_service.update_farmer.return_value = {"message": "Farmer updated successfully"}
    farmer_service.delete_farmer.return_value = None

    created = client.post("/api/farmers", headers=admin_headers, json={"full_name": "Yaw", "farm_name": "Sunrise"})
    updated = client.put("/api/farmers/2", headers=admin_headers, json={"location": "Tamale"})
    missing = client.delete("/api/farmers/2", headers=admin_headers)

    assert created.status_code == 201
    assert created.json()["farmer_id"] == 2
    assert updated.json() == {"message": "Farmer updated successfully"}
    farmer_service.update_farmer.assert_awaited_once_with(2, {"location": "Tamale"})
    assert missing.status_code == 404


def test_markets_answer_plain_401_without_token(client, market_service) -> None:
    response = client.get("/api/market")

    assert response.status_code == 401
    assert response.json()["detail"] == "unauthorized"


def test_markets_answer_plain_401_for_bad_token(client, market_service) -> None:
    response = client.get("/api/market/1", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401
    assert response.json()["detail"] == "unauthorized"
    market_service.fetch_market_by_id.assert_not_awaited()


def test_farmer_update_drops_null_name(client, farmer_service, admin_headers) -> None:
    farmer_service.update_farmer.return_value = {"message": "Farmer updated successfully"}

    response = client.put("/api/farmers/2", headers=admin_headers, json={"full_name": None, "location": "Ho"})

    assert response.status_code == 200
    farmer_service.update_farmer.assert_awaited_once_with(2, {"location": "Ho"})


def test_registry_served_on_bare_path(client, farmer_service, customer_headers) -> None:
    farmer_service.get_all_farmers.return_value = []

    response = client.get("/api/farmers", headers=customer_headers, follow_redirects=False)

    assert response.status_code == 200
