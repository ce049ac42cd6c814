"""
Auth endpoints — username/password registration and login.

Flow:
  1) POST /api/register -> {success: true}           (no id returned)
  2) POST /api/login    -> {success, id, username, role}
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from domain.errors import StorageError
from domain.responses import StandardErrorResponse, success_response
from models import LoginRequest, LoginResponse, RegisterRequest
from services import auth_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["auth"])


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": StandardErrorResponse}},
)
async def register(
    request: RegisterRequest,
    db: AsyncSession = Depends(get_db),
):
    try:
        await auth_service.register_user(
            db,
            username=request.username,
            password=request.password,
            role=request.role,
        )
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        raise StorageError.from_exception(e, status.HTTP_400_BAD_REQUEST)

    return success_response()


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"model": StandardErrorResponse}, 500: {"model": StandardErrorResponse}},
)
async def login(
    request: LoginRequest,
    db: AsyncSession = Depends(get_db),
):
    try:
        user = await auth_service.authenticate(
            db,
            username=request.username,
            password=request.password,
            role=request.role,
        )
    except SQLAlchemyError as e:
        raise StorageError.from_exception(e, message="Server error")

    return LoginResponse(id=str(user.id), username=user.username, role=user.role)
