"""Repository implementations for the workshop service."""

from .in_memory import (
    InMemoryClientRepository,
    InMemoryServiceOrderRepository,
    InMemoryVehicleRepository,
)

__all__ = [
    "InMemoryClientRepository",
    "InMemoryVehicleRepository",
    "InMemoryServiceOrderRepository",
]
