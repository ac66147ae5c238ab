from sqlalchemy import (
    Boolean,
    String,
    Text,
    DateTime,
    Numeric,
    Integer,
    ForeignKey,
    CheckConstraint,
    UniqueConstraint,
    Index,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship, declarative_base
from typing import Optional, List
from datetime import datetime
from decimal import Decimal

Base = declarative_base()


class UserAccount(Base):
    """Registered marketplace user: customer, farmer, driver or admin"""
    __tablename__ = "user_account"
    __table_args__ = (
        UniqueConstraint("email", name="user_account_email_key"),
        CheckConstraint(
            "role IN ('farmer', 'customer', 'admin', 'driver')",
            name="user_account_role_check",
        ),
    )

    user_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    full_name: Mapped[str] = mapped_column(String(150), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(String(30))
    role: Mapped[str] = mapped_column(String(20), nullable=False, server_default=text("'customer'"))
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=text("CURRENT_TIMESTAMP")
    )

    products: Mapped[List["Product"]] = relationship("Product", back_populates="farmer")
    orders: Mapped[List["OrderTable"]] = relationship("OrderTable", back_populates="user")


class Product(Base):
    """Farm produce listed by a farmer"""
    __tablename__ = "product"
    __table_args__ = (
        Index("idx_product_farmer_id", "farmer_id"),
    )

    product_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    farmer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("user_account.user_id", ondelete="CASCADE"), nullable=False
    )
    product_name: Mapped[str] = mapped_column(String(200), nullable=False)
    category: Mapped[Optional[str]] = mapped_column(String(100))
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False, server_default=text("0"))
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=text("CURRENT_TIMESTAMP")
    )

    farmer: Mapped["UserAccount"] = relationship("UserAccount", back_populates="products")


class Market(Base):
    """Physical market where an order is collected"""
    __tablename__ = "market"

    market_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    market_name: Mapped[str] = mapped_column(String(150), nullable=False)
    location: Mapped[Optional[str]] = mapped_column(String(200))


class Farmer(Base):
    """Farmer registry entry, kept apart from login accounts"""
    __tablename__ = "farmers"

    farmer_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    full_name: Mapped[str] = mapped_column(String(150), nullable=False)
    phone_number: Mapped[Optional[str]] = mapped_column(String(30))
    location: Mapped[Optional[str]] = mapped_column(String(200))
    farm_name: Mapped[Optional[str]] = mapped_column(String(200))


class OrderTable(Base):
    """A purchase linking a buyer, a product and a market"""
    __tablename__ = "order_table"
    __table_args__ = (
        Index("idx_order_table_user_id", "user_id"),
        Index("idx_order_table_status", "status"),
    )

    order_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("user_account.user_id", ondelete="CASCADE"), nullable=False
    )
    product_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("product.product_id", ondelete="CASCADE"), nullable=False
    )
    market_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("market.market_id", ondelete="SET NULL")
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    total_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    order_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=text("CURRENT_TIMESTAMP")
    )
    status: Mapped[str] = mapped_column(String(50), nullable=False, server_default=text("'pending'"))

    user: Mapped["UserAccount"] = relationship("UserAccount", back_populates="orders")
    payments: Mapped[List["Payment"]] = relationship("Payment", back_populates="order")
    logistics: Mapped[List["Logistics"]] = relationship("Logistics", back_populates="order")


class Payment(Base):
    __tablename__ = "payment"

    payment_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("order_table.order_id", ondelete="CASCADE"), nullable=False
    )
    payment_method: Mapped[Optional[str]] = mapped_column(String(50))
    reference: Mapped[Optional[str]] = mapped_column(String(100))
    payment_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    payment_status: Mapped[str] = mapped_column(String(50), nullable=False, server_default=text("'pending'"))

    order: Mapped["OrderTable"] = relationship("OrderTable", back_populates="payments")


class Logistics(Base):
    """Delivery assignment for a shipped order"""
    __tablename__ = "logistics"

    logistics_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("order_table.order_id", ondelete="CASCADE"), nullable=False
    )
    vehicle_number_plate: Mapped[str] = mapped_column(String(20), nullable=False)
    transport_mode: Mapped[str] = mapped_column(String(50), nullable=False)
    pickup_location: Mapped[str] = mapped_column(String(200), nullable=False)
    dropoff_location: Mapped[str] = mapped_column(String(200), nullable=False)
    delivered: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("false"))

    order: Mapped["OrderTable"] = relationship("OrderTable", back_populates="logistics")
