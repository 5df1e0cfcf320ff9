"""
Client Entity - workshop customer record
"""

from __future__ import annotations

from datetime import datetime

from ..interfaces.clock import Clock
from ..value_objects import EmailAddress, TaxId
from .base import BaseEntity


def _has_text(value: str | None) -> bool:
    return value is not None and value.strip() != ""


class Client(BaseEntity):
    """
    Client entity representing a customer of the workshop.

    The tax id is set once at construction. Name, email, phone and address
    change only through the ``update_*`` operations, each of which refreshes
    the update timestamp.
    """

    def __init__(
        self,
        id: str,
        name: str,
        email: EmailAddress,
        tax_id: TaxId,
        phone: str | None = None,
        address: str | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
        clock: Clock | None = None,
    ) -> None:
        super().__init__(id, created_at, updated_at, clock)
        self._name = name
        self._email = email
        self._tax_id = tax_id
        self._phone = phone
        self._address = address

    @classmethod
    def create(
        cls,
        name: str,
        email: str,
        tax_id: str,
        phone: str | None = None,
        address: str | None = None,
        clock: Clock | None = None,
    ) -> Client:
        """
        Factory method to create a new, not yet persisted client.

        Raises:
            ValidationError: If the email or tax id is invalid
        """
        email_value = EmailAddress.create(email)
        tax_id_value = TaxId.create(tax_id)

        return cls(
            id="",
            name=name,
            email=email_value,
            tax_id=tax_id_value,
            phone=phone,
            address=address,
            clock=clock,
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> EmailAddress:
        return self._email

    @property
    def tax_id(self) -> TaxId:
        return self._tax_id

    @property
    def phone(self) -> str | None:
        return self._phone

    @property
    def address(self) -> str | None:
        return self._address

    def update_name(self, name: str) -> None:
        self._name = name
        self._touch()

    def update_email(self, email: str) -> None:
        """Replace the email; the client is left untouched if it is invalid."""
        self._email = EmailAddress.create(email)
        self._touch()

    def update_phone(self, phone: str | None = None) -> None:
        self._phone = phone
        self._touch()

    def update_address(self, address: str | None = None) -> None:
        self._address = address
        self._touch()

    def has_phone(self) -> bool:
        """Check if client has a phone number (blank counts as missing)."""
        return _has_text(self._phone)

    def has_address(self) -> bool:
        """Check if client has an address (blank counts as missing)."""
        return _has_text(self._address)

    def get_formatted_tax_id(self) -> str:
        return self._tax_id.formatted

    def get_raw_tax_id(self) -> str:
        return self._tax_id.clean

    def get_normalized_email(self) -> str:
        return self._email.normalized

    def __repr__(self) -> str:
        return f"Client(id={self._id!r}, name={self._name!r}, tax_id={self._tax_id.clean!r})"
