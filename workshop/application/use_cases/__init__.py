"""
Application Use Cases Layer

Use cases coordinate repositories, the event publisher and the domain entities
to implement the workshop's workflows while keeping business rules inside the
domain layer.
"""

from .base import UseCase, UseCaseRequest

# Client use cases
from .clients import (
    ClientResponse,
    CreateClientRequest,
    CreateClientUseCase,
    GetClientByIdRequest,
    GetClientByIdUseCase,
    ListClientsRequest,
    ListClientsUseCase,
    UpdateClientRequest,
    UpdateClientUseCase,
)

# Service order use cases
from .service_orders import (
    CreateServiceOrderRequest,
    CreateServiceOrderUseCase,
    GetOrderByIdRequest,
    GetOrderByIdUseCase,
    ListOrdersRequest,
    ListOrdersUseCase,
    ServiceOrderResponse,
    UpdateOrderStatusRequest,
    UpdateOrderStatusUseCase,
)

# Vehicle use cases
from .vehicles import (
    GetVehicleByIdRequest,
    GetVehicleByIdUseCase,
    ListVehiclesByClientRequest,
    ListVehiclesByClientUseCase,
    RegisterVehicleRequest,
    RegisterVehicleUseCase,
    UpdateVehicleRequest,
    UpdateVehicleUseCase,
    VehicleResponse,
)

__all__ = [
    "UseCase",
    "UseCaseRequest",
    # Clients
    "ClientResponse",
    "CreateClientRequest",
    "CreateClientUseCase",
    "GetClientByIdRequest",
    "GetClientByIdUseCase",
    "ListClientsRequest",
    "ListClientsUseCase",
    "UpdateClientRequest",
    "UpdateClientUseCase",
    # Vehicles
    "VehicleResponse",
    "RegisterVehicleRequest",
    "RegisterVehicleUseCase",
    "GetVehicleByIdRequest",
    "GetVehicleByIdUseCase",
    "ListVehiclesByClientRequest",
    "ListVehiclesByClientUseCase",
    "UpdateVehicleRequest",
    "UpdateVehicleUseCase",
    # Service orders
    "ServiceOrderResponse",
    "CreateServiceOrderRequest",
    "CreateServiceOrderUseCase",
    "GetOrderByIdRequest",
    "GetOrderByIdUseCase",
    "ListOrdersRequest",
    "ListOrdersUseCase",
    "UpdateOrderStatusRequest",
    "UpdateOrderStatusUseCase",
]
