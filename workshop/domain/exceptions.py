"""
Domain-level exceptions for the workshop service.

This module defines exceptions that are specific to domain logic and business rules.
These exceptions are raised within value objects and entities and are never
caught inside the domain layer.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .entities.service_order import ServiceOrderStatus


class DomainException(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(DomainException):
    """Exception raised when raw input fails a format, checksum or grammar rule."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
        constraint: str | None = None,
    ) -> None:
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        if constraint:
            details["constraint"] = constraint

        super().__init__(message, details)
        self.field = field
        self.value = value
        self.constraint = constraint


class InvalidStatusTransition(DomainException):
    """
    Raised when a service order transition is attempted outside the allowed table.

    Carries the current status, the attempted status and the statuses that are
    reachable from the current one, in table order.
    """

    def __init__(
        self,
        current_status: ServiceOrderStatus,
        attempted_status: ServiceOrderStatus,
        allowed_statuses: Sequence[ServiceOrderStatus],
    ) -> None:
        allowed = ", ".join(status.value for status in allowed_statuses) or "none"
        message = (
            f"Invalid status transition from {current_status.value} to "
            f"{attempted_status.value}. Allowed transitions: {allowed}"
        )

        super().__init__(
            message,
            details={
                "current_status": current_status.value,
                "attempted_status": attempted_status.value,
                "allowed_statuses": [status.value for status in allowed_statuses],
            },
        )
        self.current_status = current_status
        self.attempted_status = attempted_status
        self.allowed_statuses = tuple(allowed_statuses)


class EntityStateError(DomainException):
    """Raised when an entity lifecycle hook is used out of order."""

    def __init__(self, entity_type: str, message: str) -> None:
        super().__init__(f"{entity_type}: {message}", details={"entity_type": entity_type})
        self.entity_type = entity_type
