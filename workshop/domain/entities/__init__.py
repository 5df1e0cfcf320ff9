"""Domain entities with business logic."""

from .base import BaseEntity
from .client import Client
from .service_order import (
    ALLOWED_TRANSITIONS,
    TERMINAL_STATUSES,
    ServiceOrder,
    ServiceOrderStatus,
)
from .vehicle import Vehicle

__all__ = [
    "BaseEntity",
    "Client",
    "Vehicle",
    "ServiceOrder",
    "ServiceOrderStatus",
    "ALLOWED_TRANSITIONS",
    "TERMINAL_STATUSES",
]
