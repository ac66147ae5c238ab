# tests/test_admin_api.py
from unittest.mock import MagicMock

import pytest

from farm_market.main import app
from farm_market.routers.admin.admin import get_admin_service
from farm_market.routers.logistics.logistics import get_logistics_service
from farm_market.services import AdminService, LogisticsService

LOGISTICS_ROW = {
    "logistics_id": 6,
    "order_id": 11,
    "vehicle_number_plate": "GT-4410-19",
    "transport_mode": "truck",
    "pickup_location": "Techiman",
    "dropoff_location": "Accra",
    "delivered": False,
}

ASSIGNMENT = {
    "vehicle_number_plate": "GT-4410-19",
    "transport_mode": "truck",
    "pickup_location": "Techiman",
    "dropoff_location": "Accra",
}


@pytest.fixture
def admin_service():
    service = MagicMock(spec=AdminService)
    app.dependency_overrides[get_admin_service] = lambda: service
    return service


@pytest.fixture
def logistics_service():
    service = MagicMock(spec=LogisticsService)
    app.dependency_overrides[get_logistics_service] = lambda: service
    return service


def test_all_orders_with_names(client, admin_service, admin_headers) -> None:
    admin_service.get_all_orders.return_value = [{
        "order_id": 11, "user_id": 7, "product_id": 5, "market_id": 1, "quantity": 2,
        "total_amount": 24.0, "order_date": "2026-03-01T10:00:00+00:00", "status": "pending",
        "product_name": "Plantain", "customer_name": "Esi Owusu",
    }]

    response = client.get("/api/admin/orders", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()[0]["customer_name"] == "Esi Owusu"


def test_pending_orders(client, admin_service, admin_headers) -> None:
    admin_service.get_pending_orders.return_value = []

    response = client.get("/api/admin/orders/pending", headers=admin_headers)

    assert response.status_code == 200
    admin_service.get_pending_orders.assert_awaited_once()


def test_update_order_status(client, admin_service, admin_headers) -> None:
    response = client.patch("/api/admin/orders/11/status", headers=admin_headers, json={"status": "Delivered"})

    assert response.status_code == 200
    assert response.json() == {"message": "Order status updated successfully"}
    admin_service.update_order_status.assert_awaited_once_with(11, "Delivered")


def test_approve_payment(client, admin_service, admin_headers) -> None:
    admin_service.approve_payment.return_value = 55

    response = client.post("/api/admin/orders/11/approve-payment", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {"message": "Payment approved successfully"}
    admin_service.approve_payment.assert_awaited_once_with(11)


def test_approve_payment_failure(client, admin_service, admin_headers) -> None:
    admin_service.approve_payment.side_effect = RuntimeError("insert failed")

    response = client.post("/api/admin/orders/11/approve-payment", headers=admin_headers)

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to approve payment: insert failed"


def test_assign_driver(client, admin_service, admin_headers) -> None:
    admin_service.assign_driver.return_value = 6

    response = client.post("/api/admin/orders/11/assign-driver", headers=admin_headers, json=ASSIGNMENT)

    assert response.status_code == 200
    assert response.json() == {"message": "Driver assigned successfully"}
    admin_service.assign_driver.assert_awaited_once_with(11, ASSIGNMENT)


def test_assign_driver_needs_full_assignment(client, admin_service, admin_headers) -> None:
    response = client.post(
        "/api/admin/orders/11/assign-driver",
        headers=admin_headers,
        json={"vehicle_number_plate": "GT-4410-19"},
    )

    assert response.status_code == 422
    admin_service.assign_driver.assert_not_awaited()


def test_order_logistics_not_found(client, admin_service, admin_headers) -> None:
    admin_service.get_logistics_by_order.return_value = None

    response = client.get("/api/admin/orders/11/logistics", headers=admin_headers)

    assert response.status_code == 404
    assert response.json()["detail"] == "Logistics not found"


def test_all_logistics_with_order_status(client, admin_service, admin_headers) -> None:
    admin_service.get_all_logistics.return_value = [{**LOGISTICS_ROW, "order_status": "Shipped"}]

    response = client.get("/api/admin/logistics", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()[0]["order_status"] == "Shipped"


def test_drivers(client, admin_service, admin_headers) -> None:
    admin_service.get_all_drivers.return_value = [{
        "user_id": 9, "full_name": "Kwame Asante", "email": "kwame@example.com",
        "phone": "0240000000", "role": "driver", "created_at": "2026-01-05T09:00:00+00:00",
    }]

    response = client.get("/api/admin/drivers", headers=admin_headers)

    assert response.status_code == 200
    assert "password_hash" not in response.json()[0]


def test_farmer_cannot_reach_admin_routes(client, admin_service, farmer_headers) -> None:
    response = client.post("/api/admin/orders/11/approve-payment", headers=farmer_headers)

    assert response.status_code == 403
    admin_service.approve_payment.assert_not_awaited()


# =================
# LOGISTICS
# =================

def test_create_logistics_validation(client, logistics_service, admin_headers) -> None:
    logistics_service.create_logistics.side_effect = ValueError("Missing required logistics fields")

    response = client.post("/api/logistics", headers=admin_headers, json={"order_id": 11})

    assert response.status_code == 400
    assert response.json()["detail"] == "Missing required logistics fields"


def test_create_logistics(client, logistics_service, admin_headers) -> None:
    logistics_service.create_logistics.return_value = {
        "message": "Logistics record created successfully", "logistics_id": 6,
    }

    response = client.post("/api/logistics", headers=admin_headers, json={"order_id": 11, **ASSIGNMENT})

    assert response.status_code == 201
    assert response.json()["logistics_id"] == 6


def test_update_missing_logistics_is_404(client, logistics_service, admin_headers) -> None:
    logistics_service.update_logistics.side_effect = LookupError("Logistics record not found")

    response = client.put("/api/logistics/6", headers=admin_headers, json={"delivered": True})

    assert response.status_code == 404
    assert response.json()["detail"] == "Logistics record not found"


def test_logistics_requires_admin(client, logistics_service, customer_headers) -> None:
    response = client.get("/api/logistics", headers=customer_headers)

    assert response.status_code == 403


def test_logistics_update_drops_explicit_nulls(client, logistics_service, admin_headers) -> None:
    logistics_service.update_logistics.return_value = {"message": "Logistics record updated successfully"}

    response = client.put("/api/logistics/6", headers=admin_headers, json={
        "vehicle_number_plate": None,
        "transport_mode": None,
        "pickup_location": None,
        "dropoff_location": None,
        "delivered": True,
    })

    assert response.status_code == 200
    logistics_service.update_logistics.assert_awaited_once_with(6, {"delivered": True})


def test_logistics_list_served_on_bare_path(client, logistics_service, admin_headers) -> None:
    logistics_service.get_all_logistics.return_value = [LOGISTICS_ROW]

    response = client.get("/api/logistics", headers=admin_headers, follow_redirects=False)

    assert response.status_code == 200
    assert response.json()[0]["logistics_id"] == 6
