"""
Service Order Use Cases

Opening service orders, reading them back and driving them through the
status workflow. Status rules live on the ServiceOrder entity; these use cases
check cross-aggregate references, persist the result and publish events.
"""

from dataclasses import dataclass, field
from datetime import datetime

from workshop.application.exceptions import (
    ClientNotFoundError,
    ServiceOrderNotFoundError,
    VehicleNotFoundError,
    VehicleOwnershipError,
)
from workshop.application.interfaces.events import (
    IEventPublisher,
    OrderCreatedEvent,
    OrderStatusUpdatedEvent,
)
from workshop.application.interfaces.repositories import (
    IClientRepository,
    IServiceOrderRepository,
    IVehicleRepository,
    ServiceOrderFilters,
)
from workshop.domain.entities import ServiceOrder, ServiceOrderStatus
from workshop.domain.interfaces.clock import Clock

from .base import UseCase, UseCaseRequest


@dataclass
class ServiceOrderResponse:
    """Read model returned by service order use cases."""

    id: str
    status: str
    client_id: str
    vehicle_id: str
    request_date: datetime
    delivery_date: datetime | None
    cancellation_reason: str | None
    notes: str | None
    is_final: bool
    allowed_transitions: list[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, order: ServiceOrder) -> "ServiceOrderResponse":
        return cls(
            id=order.id,
            status=order.status.value,
            client_id=order.client_id,
            vehicle_id=order.vehicle_id,
            request_date=order.request_date,
            delivery_date=order.delivery_date,
            cancellation_reason=order.cancellation_reason,
            notes=order.notes,
            is_final=order.is_in_final_state(),
            allowed_transitions=[status.value for status in order.allowed_transitions()],
            created_at=order.created_at,
            updated_at=order.updated_at,
        )


@dataclass
class CreateServiceOrderRequest(UseCaseRequest):
    """
    Request to open a service order.

    ``received`` marks a staff intake, where the vehicle is already at the
    workshop and the order starts in RECEIVED instead of REQUESTED.
    """

    client_id: str
    vehicle_id: str
    notes: str | None = None
    received: bool = False


@dataclass
class GetOrderByIdRequest(UseCaseRequest):
    order_id: str


@dataclass
class ListOrdersRequest(UseCaseRequest):
    filters: ServiceOrderFilters = field(default_factory=ServiceOrderFilters)


@dataclass
class UpdateOrderStatusRequest(UseCaseRequest):
    """Request to move an order to a new status (member or its string value)."""

    order_id: str
    status: ServiceOrderStatus | str
    cancellation_reason: str | None = None


class CreateServiceOrderUseCase(UseCase[CreateServiceOrderRequest, ServiceOrderResponse]):
    """
    Opens a service order for a client's vehicle.

    The client is looked up first, then the vehicle, then ownership is checked;
    the first failing check aborts the request before anything is stored.
    """

    def __init__(
        self,
        order_repository: IServiceOrderRepository,
        client_repository: IClientRepository,
        vehicle_repository: IVehicleRepository,
        event_publisher: IEventPublisher,
        clock: Clock | None = None,
    ) -> None:
        super().__init__()
        self.order_repository = order_repository
        self.client_repository = client_repository
        self.vehicle_repository = vehicle_repository
        self.event_publisher = event_publisher
        self.clock = clock

    async def process(self, request: CreateServiceOrderRequest) -> ServiceOrderResponse:
        client = await self.client_repository.find_by_id(request.client_id)
        if client is None:
            raise ClientNotFoundError(request.client_id)

        vehicle = await self.vehicle_repository.find_by_id(request.vehicle_id)
        if vehicle is None:
            raise VehicleNotFoundError(request.vehicle_id)

        if not vehicle.belongs_to(client.id):
            raise VehicleOwnershipError(vehicle.id, client.id)

        factory = ServiceOrder.create_received if request.received else ServiceOrder.create
        order = factory(
            client_id=client.id,
            vehicle_id=vehicle.id,
            notes=request.notes,
            clock=self.clock,
        )

        created = await self.order_repository.create(order)
        await self.event_publisher.publish_order_created(OrderCreatedEvent.from_order(created))

        self.logger.info(
            f"Service order {created.id} opened with status {created.status.value}",
            extra={
                "request_id": str(request.request_id),
                "order_id": created.id,
                "client_id": created.client_id,
                "vehicle_id": created.vehicle_id,
            },
        )
        return ServiceOrderResponse.from_entity(created)


class GetOrderByIdUseCase(UseCase[GetOrderByIdRequest, ServiceOrderResponse]):
    def __init__(self, order_repository: IServiceOrderRepository) -> None:
        super().__init__()
        self.order_repository = order_repository

    async def process(self, request: GetOrderByIdRequest) -> ServiceOrderResponse:
        order = await self.order_repository.find_by_id(request.order_id)
        if order is None:
            raise ServiceOrderNotFoundError(request.order_id)
        return ServiceOrderResponse.from_entity(order)


class ListOrdersUseCase(UseCase[ListOrdersRequest, list[ServiceOrderResponse]]):
    def __init__(self, order_repository: IServiceOrderRepository) -> None:
        super().__init__()
        self.order_repository = order_repository

    async def process(self, request: ListOrdersRequest) -> list[ServiceOrderResponse]:
        orders = await self.order_repository.find_all(request.filters)
        return [ServiceOrderResponse.from_entity(order) for order in orders]


class UpdateOrderStatusUseCase(UseCase[UpdateOrderStatusRequest, ServiceOrderResponse]):
    """
    Moves a service order through its workflow.

    A rejected transition raises InvalidStatusTransition before the repository
    or the event publisher is touched.
    """

    def __init__(
        self,
        order_repository: IServiceOrderRepository,
        event_publisher: IEventPublisher,
    ) -> None:
        super().__init__()
        self.order_repository = order_repository
        self.event_publisher = event_publisher

    async def process(self, request: UpdateOrderStatusRequest) -> ServiceOrderResponse:
        new_status = ServiceOrderStatus.parse(request.status)

        order = await self.order_repository.find_by_id(request.order_id)
        if order is None:
            raise ServiceOrderNotFoundError(request.order_id)

        previous_status = order.status
        if new_status is ServiceOrderStatus.CANCELLED and request.cancellation_reason:
            order.cancel(request.cancellation_reason)
        else:
            order.update_status(new_status)

        updated = await self.order_repository.update(order.id, order)
        if updated is None:
            raise ServiceOrderNotFoundError(request.order_id)

        await self.event_publisher.publish_order_status_updated(
            OrderStatusUpdatedEvent.from_order(updated, previous_status=previous_status)
        )

        self.logger.info(
            f"Service order {updated.id} moved from {previous_status.value} "
            f"to {updated.status.value}",
            extra={
                "request_id": str(request.request_id),
                "order_id": updated.id,
                "previous_status": previous_status.value,
                "status": updated.status.value,
            },
        )
        return ServiceOrderResponse.from_entity(updated)
