"""
Order service — create, list and update laundry orders.

Listings are always newest first (created_at DESC, id DESC as tie-break).
Status transitions are permissive: any of the five statuses may follow any
other.
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from db_models import Order
from domain.enums import OrderStatus
from domain.errors import NotFoundError
from utils.validators import parse_record_id, validate_order_status

logger = logging.getLogger(__name__)


def _newest_first(query):
    return query.order_by(Order.created_at.desc(), Order.id.desc())


async def create_order(
    db: AsyncSession,
    *,
    user_id: str,
    clothes: str | None,
    wash_type: str | None,
    return_time: str | None,
    customer_name: str | None = None,
    username: str | None = None,
) -> Order:
    """Create an order in Pending; customer_name falls back to username."""
    order = Order(
        customer=user_id,
        customer_name=customer_name or username,
        clothes=clothes,
        wash_type=wash_type,
        return_time=return_time,
        status=OrderStatus.PENDING.value,
    )
    db.add(order)
    await db.flush()
    logger.info(f"Order {order.id} created for customer {user_id}")
    return order


async def get_order(db: AsyncSession, *, order_id: str) -> Order | None:
    """Get a single order by its opaque id; malformed ids match nothing."""
    pk = parse_record_id(order_id)
    if pk is None:
        return None
    res = await db.execute(select(Order).where(Order.id == pk))
    return res.scalar_one_or_none()


async def list_orders_by_customer(db: AsyncSession, *, user_id: str) -> list[Order]:
    res = await db.execute(_newest_first(select(Order).where(Order.customer == user_id)))
    return res.scalars().all()


async def list_all_orders(db: AsyncSession) -> list[Order]:
    res = await db.execute(_newest_first(select(Order)))
    return res.scalars().all()


async def list_orders_by_status(db: AsyncSession, *, status: str) -> list[Order]:
    """Exact, case-sensitive match. Unknown statuses simply return nothing."""
    res = await db.execute(_newest_first(select(Order).where(Order.status == status)))
    return res.scalars().all()


async def update_order_status(db: AsyncSession, *, order_id: str, status: str) -> Order:
    """
    Set an order's status.

    Raises:
        ValidationError(400) for a status outside the five known values
        NotFoundError(404) when no order has that id
    """
    validate_order_status(status)

    order = await get_order(db, order_id=order_id)
    if not order:
        raise NotFoundError("Order", order_id)

    previous = order.status
    order.status = status
    await db.flush()
    logger.info(f"Order {order.id} status {previous!r} -> {status!r}")
    return order


async def assign_rider(db: AsyncSession, *, order_id: str, rider_id: str | None) -> Order | None:
    """
    Set (or clear) the rider on an order.

    The rider id is not checked against users or roles, and the order's
    status is not consulted. Returns None when the order does not exist;
    callers keep reporting success in that case.
    """
    order = await get_order(db, order_id=order_id)
    if not order:
        logger.warning(f"Rider assignment for unknown order {order_id!r}; returning null order")
        return None

    order.rider = rider_id
    await db.flush()
    logger.info(f"Order {order.id} assigned rider {rider_id}")
    return order
