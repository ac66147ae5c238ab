"""
Service layer. Routers build these through their dependency factories and
never touch repositories directly.
"""

from .auth import AuthService
from .products import ProductService
from .orders import OrderService
from .payments import PaymentService
from .farmers import FarmerService
from .markets import MarketService
from .logistics import LogisticsService
from .admin import AdminService

__all__ = [
    "AuthService",
    "ProductService",
    "OrderService",
    "PaymentService",
    "FarmerService",
    "MarketService",
    "LogisticsService",
    "AdminService",
]
