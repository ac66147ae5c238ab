# tests/test_services.py
from unittest.mock import MagicMock

import pytest

from farm_market.repositories import (
    FarmerRepository,
    LogisticsRepository,
    MarketRepository,
    OrderRepository,
    PaymentRepository,
    ProductRepository,
    UserRepository,
)
from farm_market.services import (
    AdminService,
    FarmerService,
    LogisticsService,
    MarketService,
    OrderService,
    ProductService,
)


# =================
# PRODUCTS
# =================

@pytest.fixture
def product_repo():
    repo = MagicMock(spec=ProductRepository)
    repo.get_by_id.return_value = {"product_id": 5, "farmer_id": 3}
    return repo


async def test_add_product_requires_name_and_price(product_repo) -> None:
    service = ProductService(product_repo)

    with pytest.raises(ValueError, match="Product name and price are required."):
        await service.add_product({"product_name": "Cassava"})
    with pytest.raises(ValueError, match="Product name and price are required."):
        await service.add_product({"price": 3.0})
    product_repo.create.assert_not_awaited()


async def test_add_product(product_repo) -> None:
    result = await ProductService(product_repo).add_product(
        {"product_name": "Cassava", "price": 3.0, "farmer_id": 3}
    )

    assert result == {"message": "Product added successfully"}
    product_repo.create.assert_awaited_once()


@pytest.mark.parametrize("bad_id", [0, -4, "12", 2.5])
async def test_get_product_rejects_invalid_ids(product_repo, bad_id) -> None:
    with pytest.raises(ValueError, match="Invalid product ID"):
        await ProductService(product_repo).get_product_by_id(bad_id)


async def test_update_missing_product_returns_none(product_repo) -> None:
    product_repo.get_by_id.return_value = None

    assert await ProductService(product_repo).update_product(5, {"price": 2}) is None
    product_repo.update.assert_not_awaited()


async def test_update_product_rejects_non_positive_price(product_repo) -> None:
    with pytest.raises(ValueError, match="Price must be greater than zero."):
        await ProductService(product_repo).update_product(5, {"price": 0})


async def test_update_and_delete_product(product_repo) -> None:
    service = ProductService(product_repo)

    assert await service.update_product(5, {"stock_quantity": 10}) == {"message": "Product updated successfully"}
    assert await service.delete_product(5) == {"message": "Product deleted successfully"}
    product_repo.delete.assert_awaited_once_with(5)


async def test_ownership_check(product_repo) -> None:
    product_repo.get_owned.return_value = None
    assert await ProductService(product_repo).is_owned_by(5, 9) is False

    product_repo.get_owned.return_value = {"product_id": 5}
    assert await ProductService(product_repo).is_owned_by(5, 3) is True


# =================
# ORDERS
# =================

async def test_create_order_fills_defaults() -> None:
    repo = MagicMock(spec=OrderRepository)
    repo.create.return_value = {"message": "Order created successfully", "order_id": 1}

    await OrderService(repo).create_order({"user_id": 7, "product_id": 2, "quantity": 1, "total_amount": 5})

    stored = repo.create.await_args.args[0]
    assert stored["status"] == "pending"
    assert stored["order_date"] is not None


async def test_create_order_keeps_explicit_status() -> None:
    repo = MagicMock(spec=OrderRepository)

    await OrderService(repo).create_order({"user_id": 7, "status": "Paid"})

    assert repo.create.await_args.args[0]["status"] == "Paid"


# =================
# FARMERS, MARKETS, LOGISTICS
# =================

async def test_add_farmer_requires_name() -> None:
    repo = MagicMock(spec=FarmerRepository)

    with pytest.raises(ValueError):
        await FarmerService(repo).add_farmer({"farm_name": "Green Acres"})


async def test_add_farmer() -> None:
    repo = MagicMock(spec=FarmerRepository)
    repo.create.return_value = 4

    result = await FarmerService(repo).add_farmer({"full_name": "Yaw Boateng"})

    assert result == {"message": "Farmer added successfully", "farmer_id": 4}


async def test_update_missing_farmer_returns_none() -> None:
    repo = MagicMock(spec=FarmerRepository)
    repo.get_by_id.return_value = None

    assert await FarmerService(repo).update_farmer(4, {"location": "Kumasi"}) is None
    assert await FarmerService(repo).delete_farmer(4) is None


async def test_fetch_market_by_id() -> None:
    repo = MagicMock(spec=MarketRepository)
    repo.get_by_id.return_value = {"market_id": 1, "market_name": "Makola"}

    assert (await MarketService(repo).fetch_market_by_id(1))["market_name"] == "Makola"


async def test_create_logistics_requires_all_fields() -> None:
    repo = MagicMock(spec=LogisticsRepository)

    with pytest.raises(ValueError, match="Missing required logistics fields"):
        await LogisticsService(repo).create_logistics({"order_id": 1, "transport_mode": "truck"})


async def test_update_missing_logistics_raises_lookup_error() -> None:
    repo = MagicMock(spec=LogisticsRepository)
    repo.get_by_id.return_value = None

    with pytest.raises(LookupError, match="Logistics record not found"):
        await LogisticsService(repo).update_logistics(8, {"delivered": True})
    with pytest.raises(LookupError):
        await LogisticsService(repo).delete_logistics(8)


# =================
# ADMIN WORKFLOWS
# =================

@pytest.fixture
def admin_parts():
    calls = []
    orders = MagicMock(spec=OrderRepository)
    payments = MagicMock(spec=PaymentRepository)
    logistics = MagicMock(spec=LogisticsRepository)
    users = MagicMock(spec=UserRepository)

    async def record_status(order_id, status):
        calls.append(("status", order_id, status))
        return 1

    async def record_payment(payment):
        calls.append(("payment", payment))
        return 55

    async def record_logistics(record):
        calls.append(("logistics", record))
        return 66

    orders.update_status.side_effect = record_status
    payments.create.side_effect = record_payment
    logistics.create.side_effect = record_logistics
    service = AdminService(orders=orders, payments=payments, logistics=logistics, users=users)
    return service, calls


async def test_approve_payment_marks_paid_then_records_payment(admin_parts) -> None:
    service, calls = admin_parts

    payment_id = await service.approve_payment(10)

    assert payment_id == 55
    assert calls[0] == ("status", 10, "Paid")
    kind, payment = calls[1]
    assert kind == "payment"
    assert payment["order_id"] == 10
    assert payment["payment_method"] == "Admin Approved"
    assert payment["reference"] == ""
    assert payment["payment_status"] == "completed"
    assert payment["payment_date"] is not None


async def test_approve_payment_keeps_status_when_insert_fails(admin_parts) -> None:
    service, calls = admin_parts
    service.payments.create.side_effect = RuntimeError("insert failed")

    with pytest.raises(RuntimeError):
        await service.approve_payment(10)

    assert calls == [("status", 10, "Paid")]


async def test_assign_driver_creates_record_then_ships(admin_parts) -> None:
    service, calls = admin_parts

    logistics_id = await service.assign_driver(10, {
        "vehicle_number_plate": "AS-555-21",
        "transport_mode": "van",
        "pickup_location": "Farm gate",
        "dropoff_location": "Kejetia",
    })

    assert logistics_id == 66
    kind, record = calls[0]
    assert kind == "logistics"
    assert record["order_id"] == 10
    assert record["delivered"] is False
    assert calls[1] == ("status", 10, "Shipped")


async def test_drivers_come_from_user_accounts(admin_parts) -> None:
    service, _ = admin_parts
    service.users.get_by_role.return_value = [{"user_id": 2, "role": "driver"}]

    assert await service.get_all_drivers() == [{"user_id": 2, "role": "driver"}]
    service.users.get_by_role.assert_awaited_once_with("driver")


@pytest.mark.parametrize("price", [0, -2.5])
async def test_add_product_rejects_non_positive_price(product_repo, price) -> None:
    with pytest.raises(ValueError, match="Price must be greater than zero."):
        await ProductService(product_repo).add_product({"product_name": "Cassava", "price": price})
    product_repo.create.assert_not_awaited()
