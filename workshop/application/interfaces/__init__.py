"""Contracts the application layer expects infrastructure to fulfil."""

from .events import IEventPublisher, OrderCreatedEvent, OrderStatusUpdatedEvent
from .repositories import (
    IClientRepository,
    IServiceOrderRepository,
    IVehicleRepository,
    ServiceOrderFilters,
)

__all__ = [
    "IClientRepository",
    "IVehicleRepository",
    "IServiceOrderRepository",
    "ServiceOrderFilters",
    "IEventPublisher",
    "OrderCreatedEvent",
    "OrderStatusUpdatedEvent",
]
