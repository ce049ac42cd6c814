"""
Domain enums for users and laundry orders.
"""

from enum import Enum


class Role(str, Enum):
    USER = "user"
    LAUNDRYMAN = "laundryman"
    RIDER = "rider"


class OrderStatus(str, Enum):
    """
    Order lifecycle values.

    No transition graph is enforced: any status may follow any other.
    """
    PENDING = "Pending"
    PICKED_UP = "Picked Up"
    WASHING = "Washing"
    READY = "Ready"
    DELIVERED = "Delivered"


ROLE_VALUES = tuple(r.value for r in Role)
ORDER_STATUS_VALUES = tuple(s.value for s in OrderStatus)
