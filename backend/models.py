"""
Pydantic models for request/response validation.
"""
from datetime import datetime, timezone
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class APIBase(BaseModel):
    """Shared base — allows construction by Python name or camelCase alias."""
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


def _id_to_str(value):
    # Clients may echo back ids as numbers; ids are opaque strings on the wire.
    if value is None:
        return None
    return str(value)


# ── Auth Models ─────────────────────────────────────────────────────

class RegisterRequest(APIBase):
    """Create a new account."""
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)
    role: str = Field(..., description="One of: user, laundryman, rider")


class LoginRequest(APIBase):
    """Credentials; the role must match the one used at registration."""
    username: str
    password: str
    role: str


class LoginResponse(APIBase):
    success: bool = True
    id: str
    username: str
    role: str


# ── Order Models ────────────────────────────────────────────────────

class OrderCreateRequest(APIBase):
    """
    New laundry order.

    Any status supplied by the caller is ignored; orders always start Pending.
    """
    user_id: Union[str, int] = Field(..., alias="userId")
    clothes: Optional[str] = None
    wash_type: Optional[str] = Field(default=None, alias="washType")
    return_time: Optional[str] = Field(default=None, alias="returnTime")
    customer_name: Optional[str] = Field(default=None, alias="customerName")
    username: Optional[str] = None

    @field_validator("user_id")
    @classmethod
    def _user_id_str(cls, v):
        return _id_to_str(v)


class StatusUpdateRequest(APIBase):
    status: str


class RiderAssignRequest(APIBase):
    rider_id: Optional[Union[str, int]] = Field(default=None, alias="riderId")

    @field_validator("rider_id")
    @classmethod
    def _rider_id_str(cls, v):
        return _id_to_str(v)


class OrderResponse(APIBase):
    """Order as returned to clients."""
    id: str
    customer: Optional[str] = None
    customer_name: Optional[str] = Field(default=None, alias="customerName")
    clothes: Optional[str] = None
    wash_type: Optional[str] = Field(default=None, alias="washType")
    return_time: Optional[str] = Field(default=None, alias="returnTime")
    status: str
    rider: Optional[str] = None
    created_at: datetime = Field(..., alias="createdAt")

    @field_validator("id", mode="before")
    @classmethod
    def _order_id_str(cls, v):
        return _id_to_str(v)

    @field_serializer("created_at")
    def _created_at_utc(self, value: datetime) -> str:
        # Stored naive in UTC; emit an explicit zone so JS clients do not read local time
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        text = value.astimezone(timezone.utc).isoformat()
        if text.endswith("+00:00"):
            text = text[:-6] + "Z"
        return text


def serialize_order(order) -> dict | None:
    """Render an ORM Order as its camelCase JSON dict (None passes through)."""
    if order is None:
        return None
    return OrderResponse.model_validate(order).model_dump(by_alias=True, mode="json")
