"""
In-Memory Repository Implementations

Dictionary-backed implementations of the repository contracts. They assign
identifiers on create and keep their own copies of stored entities, so a
caller's changes only reach storage through ``update``.
"""

# Standard library imports
import copy
import logging
from typing import Generic, TypeVar
from uuid import uuid4

# Local imports
from workshop.application.exceptions import RepositoryError
from workshop.application.interfaces.repositories import (
    IClientRepository,
    IServiceOrderRepository,
    IVehicleRepository,
    ServiceOrderFilters,
)
from workshop.domain.entities import BaseEntity, Client, ServiceOrder, Vehicle

logger = logging.getLogger(__name__)

TEntity = TypeVar("TEntity", bound=BaseEntity)


class _InMemoryStore(Generic[TEntity]):
    """Identifier-keyed storage shared by the repositories below."""

    def __init__(self) -> None:
        self._items: dict[str, TEntity] = {}

    def __len__(self) -> int:
        return len(self._items)

    def insert(self, entity: TEntity) -> TEntity:
        if not entity.is_new():
            raise RepositoryError(
                f"{type(entity).__name__} {entity.id} already has an identifier"
            )

        stored = copy.copy(entity)
        stored.assign_id(str(uuid4()))
        self._items[stored.id] = stored
        logger.debug(f"Inserted {type(stored).__name__} {stored.id}")
        return copy.copy(stored)

    def get(self, entity_id: str) -> TEntity | None:
        stored = self._items.get(entity_id)
        return copy.copy(stored) if stored is not None else None

    def replace(self, entity_id: str, entity: TEntity) -> TEntity | None:
        if entity_id not in self._items:
            logger.debug(f"Update skipped, {entity_id} not stored")
            return None
        if entity.id and entity.id != entity_id:
            raise RepositoryError(
                f"Cannot store {type(entity).__name__} {entity.id} under identifier {entity_id}"
            )

        stored = copy.copy(entity)
        if stored.is_new():
            stored.assign_id(entity_id)
        self._items[entity_id] = stored
        logger.debug(f"Updated {type(stored).__name__} {entity_id}")
        return copy.copy(stored)

    def remove(self, entity_id: str) -> bool:
        if self._items.pop(entity_id, None) is None:
            return False
        logger.debug(f"Deleted {entity_id}")
        return True

    def values(self) -> list[TEntity]:
        """Stored instances; callers must copy before handing them out."""
        return list(self._items.values())

    def copies(self) -> list[TEntity]:
        return [copy.copy(entity) for entity in self._items.values()]


def _contains(term: str, *values: str | None) -> bool:
    return any(value is not None and term in value.lower() for value in values)


class InMemoryClientRepository(IClientRepository):
    """In-memory implementation of IClientRepository."""

    def __init__(self) -> None:
        self._clients: _InMemoryStore[Client] = _InMemoryStore()

    async def create(self, client: Client) -> Client:
        return self._clients.insert(client)

    async def find_by_id(self, client_id: str) -> Client | None:
        return self._clients.get(client_id)

    async def find_by_email(self, email: str) -> Client | None:
        normalized = email.strip().lower()
        for client in self._clients.values():
            if client.get_normalized_email() == normalized:
                return copy.copy(client)
        return None

    async def find_by_tax_id(self, tax_id: str) -> Client | None:
        """Look up by tax id, formatted or digits only."""
        digits = "".join(ch for ch in tax_id if ch.isdigit())
        for client in self._clients.values():
            if client.get_raw_tax_id() == digits:
                return copy.copy(client)
        return None

    async def find_all(self, search: str | None = None) -> list[Client]:
        """List clients, optionally matching name, email or tax id case-insensitively."""
        clients = self._clients.copies()
        if not search or not search.strip():
            return clients

        term = search.strip().lower()
        return [
            client
            for client in clients
            if _contains(
                term,
                client.name,
                client.get_normalized_email(),
                client.get_raw_tax_id(),
                client.get_formatted_tax_id(),
            )
        ]

    async def update(self, client_id: str, client: Client) -> Client | None:
        return self._clients.replace(client_id, client)

    async def delete(self, client_id: str) -> bool:
        return self._clients.remove(client_id)


class InMemoryVehicleRepository(IVehicleRepository):
    """In-memory implementation of IVehicleRepository."""

    def __init__(self) -> None:
        self._vehicles: _InMemoryStore[Vehicle] = _InMemoryStore()

    async def create(self, vehicle: Vehicle) -> Vehicle:
        return self._vehicles.insert(vehicle)

    async def find_by_id(self, vehicle_id: str) -> Vehicle | None:
        return self._vehicles.get(vehicle_id)

    async def find_by_license_plate(self, license_plate: str) -> Vehicle | None:
        """Look up by plate, with or without separators and in any case."""
        clean = "".join(ch for ch in license_plate.upper() if ch.isalnum())
        for vehicle in self._vehicles.values():
            if vehicle.get_clean_license_plate() == clean:
                return copy.copy(vehicle)
        return None

    async def find_by_client_id(self, client_id: str) -> list[Vehicle]:
        return [vehicle for vehicle in self._vehicles.copies() if vehicle.belongs_to(client_id)]

    async def find_all(self, search: str | None = None) -> list[Vehicle]:
        """List vehicles, optionally matching plate, make, model or VIN case-insensitively."""
        vehicles = self._vehicles.copies()
        if not search or not search.strip():
            return vehicles

        term = search.strip().lower()
        return [
            vehicle
            for vehicle in vehicles
            if _contains(
                term,
                vehicle.get_clean_license_plate(),
                vehicle.get_formatted_license_plate(),
                vehicle.make,
                vehicle.model,
                vehicle.get_clean_vin(),
            )
        ]

    async def update(self, vehicle_id: str, vehicle: Vehicle) -> Vehicle | None:
        return self._vehicles.replace(vehicle_id, vehicle)

    async def delete(self, vehicle_id: str) -> bool:
        return self._vehicles.remove(vehicle_id)


class InMemoryServiceOrderRepository(IServiceOrderRepository):
    """
    In-memory implementation of IServiceOrderRepository.

    Listings are ordered by request date, most recent first.
    """

    def __init__(self) -> None:
        self._orders: _InMemoryStore[ServiceOrder] = _InMemoryStore()

    async def create(self, service_order: ServiceOrder) -> ServiceOrder:
        return self._orders.insert(service_order)

    async def find_by_id(self, order_id: str) -> ServiceOrder | None:
        return self._orders.get(order_id)

    async def find_all(self, filters: ServiceOrderFilters | None = None) -> list[ServiceOrder]:
        orders = self._orders.copies()
        if filters is not None:
            orders = [order for order in orders if filters.matches(order)]
        return sorted(orders, key=lambda order: order.request_date, reverse=True)

    async def update(self, order_id: str, service_order: ServiceOrder) -> ServiceOrder | None:
        return self._orders.replace(order_id, service_order)

    async def delete(self, order_id: str) -> bool:
        return self._orders.remove(order_id)

    async def count(self, filters: ServiceOrderFilters | None = None) -> int:
        if filters is None:
            return len(self._orders)
        return sum(1 for order in self._orders.values() if filters.matches(order))

