"""
ServiceOrder Entity - workflow aggregate with a status state machine
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from types import MappingProxyType

from ..exceptions import InvalidStatusTransition, ValidationError
from ..interfaces.clock import Clock
from .base import BaseEntity


class ServiceOrderStatus(Enum):
    """Service order status enumeration"""

    REQUESTED = "REQUESTED"
    RECEIVED = "RECEIVED"
    IN_DIAGNOSIS = "IN_DIAGNOSIS"
    AWAITING_APPROVAL = "AWAITING_APPROVAL"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    SCHEDULED = "SCHEDULED"
    IN_EXECUTION = "IN_EXECUTION"
    FINISHED = "FINISHED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"

    @classmethod
    def parse(cls, value: ServiceOrderStatus | str) -> ServiceOrderStatus:
        """
        Convert a raw status string into a status member.

        Args:
            value: Status member or its value, case-insensitive

        Raises:
            ValidationError: If the status is unknown
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise ValidationError(
            f"Invalid service order status: {value}",
            field="status",
            value=value,
            constraint="enum",
        )


_S = ServiceOrderStatus

# Single source of truth for the workflow; order within each tuple is preserved
# in InvalidStatusTransition.allowed_statuses.
ALLOWED_TRANSITIONS: Mapping[ServiceOrderStatus, tuple[ServiceOrderStatus, ...]] = (
    MappingProxyType(
        {
            _S.REQUESTED: (_S.RECEIVED, _S.CANCELLED, _S.REJECTED),
            _S.RECEIVED: (_S.IN_DIAGNOSIS, _S.CANCELLED, _S.REJECTED),
            _S.IN_DIAGNOSIS: (_S.AWAITING_APPROVAL, _S.CANCELLED, _S.REJECTED),
            _S.AWAITING_APPROVAL: (_S.APPROVED, _S.REJECTED, _S.CANCELLED),
            _S.APPROVED: (_S.SCHEDULED, _S.IN_EXECUTION, _S.CANCELLED, _S.REJECTED),
            _S.REJECTED: (_S.CANCELLED,),
            _S.SCHEDULED: (_S.IN_EXECUTION, _S.CANCELLED, _S.REJECTED),
            _S.IN_EXECUTION: (_S.FINISHED, _S.CANCELLED, _S.REJECTED),
            _S.FINISHED: (_S.DELIVERED, _S.CANCELLED, _S.REJECTED),
            _S.DELIVERED: (_S.CANCELLED, _S.REJECTED),
            _S.CANCELLED: (),
        }
    )
)

TERMINAL_STATUSES: frozenset[ServiceOrderStatus] = frozenset(
    {_S.DELIVERED, _S.CANCELLED, _S.REJECTED}
)


class ServiceOrder(BaseEntity):
    """
    ServiceOrder aggregate root.

    Status only changes through transitions permitted by
    ``ALLOWED_TRANSITIONS``; every successful transition refreshes the update
    timestamp. Client and vehicle are referenced by identifier and are fixed
    at construction.
    """

    def __init__(
        self,
        id: str,
        status: ServiceOrderStatus,
        client_id: str,
        vehicle_id: str,
        request_date: datetime | None = None,
        delivery_date: datetime | None = None,
        cancellation_reason: str | None = None,
        notes: str | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
        clock: Clock | None = None,
    ) -> None:
        super().__init__(id, created_at, updated_at, clock)
        self._status = status
        self._request_date = request_date or self.created_at
        self._client_id = client_id
        self._vehicle_id = vehicle_id
        self._delivery_date = delivery_date
        self._cancellation_reason = cancellation_reason
        self._notes = notes

    @classmethod
    def create(
        cls,
        client_id: str,
        vehicle_id: str,
        notes: str | None = None,
        clock: Clock | None = None,
    ) -> ServiceOrder:
        """Factory method for a customer-initiated order (REQUESTED)."""
        return cls._new(ServiceOrderStatus.REQUESTED, client_id, vehicle_id, notes, clock)

    @classmethod
    def create_received(
        cls,
        client_id: str,
        vehicle_id: str,
        notes: str | None = None,
        clock: Clock | None = None,
    ) -> ServiceOrder:
        """Factory method for a staff intake order (RECEIVED)."""
        return cls._new(ServiceOrderStatus.RECEIVED, client_id, vehicle_id, notes, clock)

    @classmethod
    def _new(
        cls,
        status: ServiceOrderStatus,
        client_id: str,
        vehicle_id: str,
        notes: str | None,
        clock: Clock | None,
    ) -> ServiceOrder:
        return cls(
            id="",
            status=status,
            client_id=client_id,
            vehicle_id=vehicle_id,
            notes=notes,
            clock=clock,
        )

    @property
    def status(self) -> ServiceOrderStatus:
        return self._status

    @property
    def request_date(self) -> datetime:
        return self._request_date

    @property
    def client_id(self) -> str:
        return self._client_id

    @property
    def vehicle_id(self) -> str:
        return self._vehicle_id

    @property
    def delivery_date(self) -> datetime | None:
        return self._delivery_date

    @property
    def cancellation_reason(self) -> str | None:
        return self._cancellation_reason

    @property
    def notes(self) -> str | None:
        return self._notes

    def allowed_transitions(self) -> tuple[ServiceOrderStatus, ...]:
        """Statuses reachable in one step from the current status."""
        return ALLOWED_TRANSITIONS[self._status]

    def can_transition_to(self, status: ServiceOrderStatus | str) -> bool:
        return ServiceOrderStatus.parse(status) in ALLOWED_TRANSITIONS[self._status]

    def _transition_to(self, status: ServiceOrderStatus) -> None:
        allowed = ALLOWED_TRANSITIONS[self._status]
        if status not in allowed:
            raise InvalidStatusTransition(self._status, status, allowed)

        self._status = status
        self._touch()

    def mark_received(self) -> None:
        self._transition_to(ServiceOrderStatus.RECEIVED)

    def mark_in_diagnosis(self) -> None:
        self._transition_to(ServiceOrderStatus.IN_DIAGNOSIS)

    def mark_awaiting_approval(self) -> None:
        self._transition_to(ServiceOrderStatus.AWAITING_APPROVAL)

    def mark_approved(self) -> None:
        self._transition_to(ServiceOrderStatus.APPROVED)

    def mark_rejected(self) -> None:
        self._transition_to(ServiceOrderStatus.REJECTED)

    def mark_scheduled(self) -> None:
        self._transition_to(ServiceOrderStatus.SCHEDULED)

    def mark_in_execution(self) -> None:
        self._transition_to(ServiceOrderStatus.IN_EXECUTION)

    def mark_finished(self) -> None:
        self._transition_to(ServiceOrderStatus.FINISHED)

    def mark_delivered(self) -> None:
        self._transition_to(ServiceOrderStatus.DELIVERED)

    def cancel(self, reason: str) -> None:
        """Cancel the order, recording the reason once the transition succeeds."""
        self._transition_to(ServiceOrderStatus.CANCELLED)
        self._cancellation_reason = reason

    def update_status(self, status: ServiceOrderStatus | str) -> None:
        """
        Move directly to any status the transition table permits.

        Raises:
            ValidationError: If the status is unknown
            InvalidStatusTransition: If the table does not allow the move
        """
        self._transition_to(ServiceOrderStatus.parse(status))

    def update_delivery_date(self, delivery_date: datetime | None) -> None:
        self._delivery_date = delivery_date
        self._touch()

    def update_notes(self, notes: str | None) -> None:
        self._notes = notes
        self._touch()

    def is_in_final_state(self) -> bool:
        """Check if order is in a terminal state"""
        return self._status in TERMINAL_STATUSES

    def __str__(self) -> str:
        return f"ServiceOrder({self._id or '<new>'}: {self._status.value})"

    def __repr__(self) -> str:
        return (
            f"ServiceOrder(id={self._id!r}, status={self._status.value!r}, "
            f"client_id={self._client_id!r}, vehicle_id={self._vehicle_id!r})"
        )
