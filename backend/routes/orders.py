"""
Order endpoints — customer order intake and dashboard listings/updates.

Listings return bare JSON arrays (newest first); mutations return
{"success": true, "order": {...}}.
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from domain.errors import StorageError
from domain.responses import StandardErrorResponse, success_response
from models import OrderCreateRequest, RiderAssignRequest, StatusUpdateRequest, serialize_order
from services import order_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": StandardErrorResponse}},
)
async def create_order(
    request: OrderCreateRequest,
    db: AsyncSession = Depends(get_db),
):
    try:
        order = await order_service.create_order(
            db,
            user_id=request.user_id,
            clothes=request.clothes,
            wash_type=request.wash_type,
            return_time=request.return_time,
            customer_name=request.customer_name,
            username=request.username,
        )
        await db.commit()
        await db.refresh(order)
    except SQLAlchemyError as e:
        await db.rollback()
        raise StorageError.from_exception(e, status.HTTP_400_BAD_REQUEST)

    return success_response(order=serialize_order(order))


@router.get("", responses={500: {"model": StandardErrorResponse}})
async def list_all_orders(db: AsyncSession = Depends(get_db)):
    """All orders, for the laundryman and rider dashboards."""
    try:
        orders = await order_service.list_all_orders(db)
    except SQLAlchemyError as e:
        raise StorageError.from_exception(e)
    return [serialize_order(o) for o in orders]


@router.get("/user/{user_id}", responses={500: {"model": StandardErrorResponse}})
async def list_user_orders(user_id: str, db: AsyncSession = Depends(get_db)):
    try:
        orders = await order_service.list_orders_by_customer(db, user_id=user_id)
    except SQLAlchemyError as e:
        raise StorageError.from_exception(e)
    return [serialize_order(o) for o in orders]


@router.get("/status/{order_status}", responses={500: {"model": StandardErrorResponse}})
async def list_orders_by_status(order_status: str, db: AsyncSession = Depends(get_db)):
    try:
        orders = await order_service.list_orders_by_status(db, status=order_status)
    except SQLAlchemyError as e:
        raise StorageError.from_exception(e)
    return [serialize_order(o) for o in orders]


@router.put(
    "/{order_id}/status",
    responses={400: {"model": StandardErrorResponse}, 404: {"model": StandardErrorResponse}},
)
async def update_order_status(
    order_id: str,
    request: StatusUpdateRequest,
    db: AsyncSession = Depends(get_db),
):
    try:
        order = await order_service.update_order_status(db, order_id=order_id, status=request.status)
        await db.commit()
        await db.refresh(order)
    except SQLAlchemyError as e:
        await db.rollback()
        raise StorageError.from_exception(e, status.HTTP_400_BAD_REQUEST)

    return success_response(order=serialize_order(order))


@router.put("/{order_id}/rider", responses={400: {"model": StandardErrorResponse}})
async def assign_rider(
    order_id: str,
    request: RiderAssignRequest,
    db: AsyncSession = Depends(get_db),
):
    # An unknown order id still yields {"success": true, "order": null}.
    try:
        order = await order_service.assign_rider(db, order_id=order_id, rider_id=request.rider_id)
        await db.commit()
        if order is not None:
            await db.refresh(order)
    except SQLAlchemyError as e:
        await db.rollback()
        raise StorageError.from_exception(e, status.HTTP_400_BAD_REQUEST)

    return success_response(order=serialize_order(order))
