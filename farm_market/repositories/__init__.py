"""
Repository layer: one class per table, each wrapping an AsyncSession and
issuing parameterized statements.

    from farm_market.repositories import OrderRepository
"""

from .users import UserRepository
from .products import ProductRepository
from .orders import OrderRepository
from .payments import PaymentRepository
from .farmers import FarmerRepository
from .markets import MarketRepository
from .logistics import LogisticsRepository

__all__ = [
    "UserRepository",
    "ProductRepository",
    "OrderRepository",
    "PaymentRepository",
    "FarmerRepository",
    "MarketRepository",
    "LogisticsRepository",
]
