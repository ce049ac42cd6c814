"""
Input validation utilities for the Washerman backend.

Enum and required-field checks live here, at the handler boundary, rather
than in the storage schema.
"""
from typing import Optional

from domain.enums import ORDER_STATUS_VALUES, ROLE_VALUES
from domain.errors import ValidationError

# Largest value a 64-bit signed INTEGER column can hold
MAX_RECORD_ID = 2**63 - 1


def validate_required(value: Optional[str], field: str) -> str:
    """Reject missing or blank string fields."""
    if value is None or not str(value).strip():
        raise ValidationError(f"{field} is required", field=field)
    return value


def validate_role(role: Optional[str]) -> str:
    """
    Validate an account role.

    Raises:
        ValidationError(400) if the role is not user, laundryman or rider
    """
    validate_required(role, "role")
    if role not in ROLE_VALUES:
        raise ValidationError(
            f"Invalid role: must be one of {', '.join(ROLE_VALUES)}",
            field="role",
        )
    return role


def validate_order_status(status: Optional[str]) -> str:
    """
    Validate an order status (exact, case-sensitive).

    Raises:
        ValidationError(400) with message "Invalid status value"
    """
    if status not in ORDER_STATUS_VALUES:
        raise ValidationError("Invalid status value", field="status")
    return status


def parse_record_id(value: Optional[str]) -> Optional[int]:
    """
    Convert an opaque id from a URL or body into a primary key.

    Returns None for malformed ids so callers treat them as "no match".
    """
    if value is None:
        return None
    text = str(value).strip()
    # ASCII only: str.isdigit() also accepts superscripts and other Unicode digits
    if not (text.isascii() and text.isdigit()):
        return None
    pk = int(text)
    if pk > MAX_RECORD_ID:
        return None
    return pk
