"""
Event Publisher Interface

Use cases publish these events after a service order is created or its status
changes. The transport behind the publisher is not part of this package.
"""

from abc import abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Protocol

from workshop.domain.entities import ServiceOrder, ServiceOrderStatus


@dataclass(frozen=True)
class OrderCreatedEvent:
    """Published once a new service order has been persisted."""

    order_id: str
    client_id: str
    vehicle_id: str
    status: ServiceOrderStatus
    request_date: datetime

    @classmethod
    def from_order(cls, order: ServiceOrder) -> "OrderCreatedEvent":
        return cls(
            order_id=order.id,
            client_id=order.client_id,
            vehicle_id=order.vehicle_id,
            status=order.status,
            request_date=order.request_date,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "event": "service_order.created",
            "order_id": self.order_id,
            "client_id": self.client_id,
            "vehicle_id": self.vehicle_id,
            "status": self.status.value,
            "request_date": self.request_date.isoformat(),
        }


@dataclass(frozen=True)
class OrderStatusUpdatedEvent:
    """Published once a status change has been persisted."""

    order_id: str
    client_id: str
    vehicle_id: str
    status: ServiceOrderStatus
    updated_at: datetime
    previous_status: ServiceOrderStatus | None = None

    @classmethod
    def from_order(
        cls, order: ServiceOrder, previous_status: ServiceOrderStatus | None = None
    ) -> "OrderStatusUpdatedEvent":
        return cls(
            order_id=order.id,
            client_id=order.client_id,
            vehicle_id=order.vehicle_id,
            status=order.status,
            updated_at=order.updated_at,
            previous_status=previous_status,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "event": "service_order.status_updated",
            "order_id": self.order_id,
            "client_id": self.client_id,
            "vehicle_id": self.vehicle_id,
            "status": self.status.value,
            "previous_status": self.previous_status.value if self.previous_status else None,
            "updated_at": self.updated_at.isoformat(),
        }


class IEventPublisher(Protocol):
    """Publishes service order lifecycle events."""

    @abstractmethod
    async def publish_order_created(self, event: OrderCreatedEvent) -> None:
        ...

    @abstractmethod
    async def publish_order_status_updated(self, event: OrderStatusUpdatedEvent) -> None:
        ...
