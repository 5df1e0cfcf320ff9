"""
Application-level exception hierarchy for the workshop service.

Use cases raise these when a referenced entity is missing, duplicated or
breaks a cross-aggregate rule. Repositories report absence with None / False
and never raise "not found" themselves.
"""

from typing import Any


class ApplicationException(Exception):
    """Base exception for all application-level errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class RepositoryError(ApplicationException):
    """Raised when a storage operation cannot be carried out."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class EntityNotFoundError(ApplicationException):
    """Raised when a referenced entity does not exist."""

    def __init__(self, entity_type: str, identifier: str) -> None:
        super().__init__(
            f"{entity_type} with ID {identifier} not found",
            details={"entity_type": entity_type, "identifier": identifier},
        )
        self.entity_type = entity_type
        self.identifier = identifier


class ClientNotFoundError(EntityNotFoundError):
    def __init__(self, client_id: str) -> None:
        super().__init__("Client", client_id)
        self.client_id = client_id


class VehicleNotFoundError(EntityNotFoundError):
    def __init__(self, vehicle_id: str) -> None:
        super().__init__("Vehicle", vehicle_id)
        self.vehicle_id = vehicle_id


class ServiceOrderNotFoundError(EntityNotFoundError):
    def __init__(self, order_id: str) -> None:
        super().__init__("Service order", order_id)
        self.order_id = order_id


class DuplicateEntityError(ApplicationException):
    """Raised when attempting to create an entity that already exists."""

    def __init__(self, entity_type: str, field: str, value: str) -> None:
        super().__init__(
            f"{entity_type} with {field} {value} already exists",
            details={"entity_type": entity_type, "field": field, "value": value},
        )
        self.entity_type = entity_type
        self.field = field
        self.value = value


class VehicleOwnershipError(ApplicationException):
    """Raised when a vehicle is used on behalf of a client that does not own it."""

    def __init__(self, vehicle_id: str, client_id: str) -> None:
        super().__init__(
            f"Vehicle {vehicle_id} does not belong to client {client_id}",
            details={"vehicle_id": vehicle_id, "client_id": client_id},
        )
        self.vehicle_id = vehicle_id
        self.client_id = client_id
