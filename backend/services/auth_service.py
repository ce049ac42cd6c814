"""
Auth service — account registration and credential checks.

Password hashing runs in the thread pool (services.async_executor) so the
event loop is not blocked by bcrypt.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from db_models import User
from domain.errors import DuplicateError, UnauthorizedError
from services.async_executor import run_blocking
from utils.passwords import hash_password, verify_password
from utils.validators import validate_required, validate_role

logger = logging.getLogger(__name__)

DUPLICATE_USERNAME_MESSAGE = "Username already exists"
INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"


async def get_user_by_username(db: AsyncSession, username: str) -> User | None:
    res = await db.execute(select(User).where(User.username == username))
    return res.scalar_one_or_none()


async def set_password(user: User, password: str) -> None:
    """Hash and store a new plaintext password on the user."""
    user.password_hash = await run_blocking(hash_password, password)


async def register_user(
    db: AsyncSession,
    *,
    username: str,
    password: str,
    role: str,
) -> User:
    """
    Create a new account.

    The username check is a lookup followed by an insert; a concurrent
    registration that slips between the two is caught by the unique
    constraint and reported as the same duplicate error.
    """
    validate_required(username, "username")
    validate_required(password, "password")
    validate_role(role)

    if await get_user_by_username(db, username):
        raise DuplicateError(DUPLICATE_USERNAME_MESSAGE)

    user = User(username=username, role=role)
    await set_password(user, password)
    db.add(user)
    try:
        await db.flush()
    except IntegrityError:
        await db.rollback()
        logger.info(f"Lost registration race for username {username!r}")
        raise DuplicateError(DUPLICATE_USERNAME_MESSAGE)

    logger.info(f"Registered user {user.id} ({role})")
    return user


async def authenticate(
    db: AsyncSession,
    *,
    username: str,
    password: str,
    role: str,
) -> User:
    """
    Return the user matching username, role and password.

    Unknown username, wrong role and wrong password are indistinguishable
    to the caller.
    """
    res = await db.execute(
        select(User).where(User.username == username, User.role == role)
    )
    user = res.scalar_one_or_none()

    if not user or not await run_blocking(verify_password, password, user.password_hash):
        logger.info(f"Failed login for username {username!r} as {role!r}")
        raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE)

    return user
