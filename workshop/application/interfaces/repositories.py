"""
Repository Interface Definitions

Defines the contracts that storage adapters must implement, one per aggregate.
Lookups report absence with None, False or an empty list; translating absence
into a "not found" error is the use case's job.
"""

# Standard library imports
from abc import abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

# Local imports
from workshop.domain.entities import Client, ServiceOrder, ServiceOrderStatus, Vehicle


@dataclass(frozen=True)
class ServiceOrderFilters:
    """Optional filters for listing and counting service orders."""

    client_id: str | None = None
    vehicle_id: str | None = None
    status: ServiceOrderStatus | None = None
    from_date: datetime | None = None
    to_date: datetime | None = None

    def matches(self, order: ServiceOrder) -> bool:
        """Check if an order satisfies every filter that is set."""
        if self.client_id is not None and order.client_id != self.client_id:
            return False
        if self.vehicle_id is not None and order.vehicle_id != self.vehicle_id:
            return False
        if self.status is not None and order.status is not self.status:
            return False
        if self.from_date is not None and order.request_date < self.from_date:
            return False
        if self.to_date is not None and order.request_date > self.to_date:
            return False
        return True


class IClientRepository(Protocol):
    """
    Client repository interface.

    Defines operations for persisting and retrieving Client entities.
    """

    @abstractmethod
    async def create(self, client: Client) -> Client:
        """
        Persist a new client and assign its identifier.

        Returns:
            The persisted client

        Raises:
            RepositoryError: If the client cannot be stored
        """
        ...

    @abstractmethod
    async def find_by_id(self, client_id: str) -> Client | None:
        """Retrieve a client by identifier, None if absent."""
        ...

    @abstractmethod
    async def find_by_email(self, email: str) -> Client | None:
        """Retrieve a client by normalized email, None if absent."""
        ...

    @abstractmethod
    async def find_by_tax_id(self, tax_id: str) -> Client | None:
        """Retrieve a client by digits-only tax id, None if absent."""
        ...

    @abstractmethod
    async def find_all(self, search: str | None = None) -> list[Client]:
        """
        List clients.

        Args:
            search: Optional case-insensitive text matched against name, email
                and tax id

        Returns:
            Matching clients, empty if none
        """
        ...

    @abstractmethod
    async def update(self, client_id: str, client: Client) -> Client | None:
        """Replace a stored client, None if it does not exist."""
        ...

    @abstractmethod
    async def delete(self, client_id: str) -> bool:
        """Delete a client; False if it did not exist."""
        ...


class IVehicleRepository(Protocol):
    """
    Vehicle repository interface.

    Defines operations for persisting and retrieving Vehicle entities.
    """

    @abstractmethod
    async def create(self, vehicle: Vehicle) -> Vehicle:
        """Persist a new vehicle and assign its identifier."""
        ...

    @abstractmethod
    async def find_by_id(self, vehicle_id: str) -> Vehicle | None:
        """Retrieve a vehicle by identifier, None if absent."""
        ...

    @abstractmethod
    async def find_by_license_plate(self, license_plate: str) -> Vehicle | None:
        """Retrieve a vehicle by clean license plate, None if absent."""
        ...

    @abstractmethod
    async def find_by_client_id(self, client_id: str) -> list[Vehicle]:
        """List the vehicles owned by a client."""
        ...

    @abstractmethod
    async def find_all(self, search: str | None = None) -> list[Vehicle]:
        """List vehicles, optionally matching plate, make or model."""
        ...

    @abstractmethod
    async def update(self, vehicle_id: str, vehicle: Vehicle) -> Vehicle | None:
        """Replace a stored vehicle, None if it does not exist."""
        ...

    @abstractmethod
    async def delete(self, vehicle_id: str) -> bool:
        """Delete a vehicle; False if it did not exist."""
        ...


class IServiceOrderRepository(Protocol):
    """
    ServiceOrder repository interface.

    Defines operations for persisting and retrieving ServiceOrder entities.
    """

    @abstractmethod
    async def create(self, service_order: ServiceOrder) -> ServiceOrder:
        """Persist a new service order and assign its identifier."""
        ...

    @abstractmethod
    async def find_by_id(self, order_id: str) -> ServiceOrder | None:
        """Retrieve a service order by identifier, None if absent."""
        ...

    @abstractmethod
    async def find_all(self, filters: ServiceOrderFilters | None = None) -> list[ServiceOrder]:
        """List service orders matching the filters, most recent request first."""
        ...

    @abstractmethod
    async def update(self, order_id: str, service_order: ServiceOrder) -> ServiceOrder | None:
        """Replace a stored service order, None if it does not exist."""
        ...

    @abstractmethod
    async def delete(self, order_id: str) -> bool:
        """Delete a service order; False if it did not exist."""
        ...

    @abstractmethod
    async def count(self, filters: ServiceOrderFilters | None = None) -> int:
        """Count service orders matching the filters."""
        ...
