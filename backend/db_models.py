"""
SQLAlchemy ORM models for the Washerman backend.

Tables:
    users   — registered accounts (customer, laundryman or rider)
    orders  — laundry orders tracked from intake to delivery
"""
from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime, Text, Index

from database import Base
from domain.enums import OrderStatus


class User(Base):
    """Registered account. Only the bcrypt hash of the password is stored."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    password_hash = Column(String(60), nullable=False)
    role = Column(String(20), nullable=False)  # "user" | "laundryman" | "rider"
    created_at = Column(DateTime, default=datetime.utcnow)

    def __repr__(self) -> str:
        return f"<User id={self.id} username={self.username!r} role={self.role!r}>"


class Order(Base):
    """
    Laundry order.

    customer and rider hold User ids as strings; neither is checked against
    the users table.
    """
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    customer = Column(String(64), nullable=True, index=True)
    customer_name = Column(String(200), nullable=True)
    clothes = Column(Text, nullable=True)
    wash_type = Column(String(100), nullable=True)
    return_time = Column(String(100), nullable=True)
    status = Column(String(20), nullable=False, default=OrderStatus.PENDING.value)
    rider = Column(String(64), nullable=True, default=None)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    __table_args__ = (
        # Dashboard filter: status, newest first
        Index("ix_orders_status_created", "status", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Order id={self.id} customer={self.customer!r} status={self.status!r}>"
