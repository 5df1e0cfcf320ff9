"""
Vehicle Entity - a customer's vehicle
"""

from __future__ import annotations

from datetime import datetime

from ..interfaces.clock import Clock
from ..value_objects import LicensePlate, VehicleIdentificationNumber
from .base import BaseEntity


class Vehicle(BaseEntity):
    """
    Vehicle entity owned by a client.

    The owning client is referenced by identifier only and is fixed at
    construction. Make, model and year are stored as given.
    """

    def __init__(
        self,
        id: str,
        license_plate: LicensePlate,
        make: str,
        model: str,
        year: int,
        client_id: str,
        vin: VehicleIdentificationNumber | None = None,
        color: str | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
        clock: Clock | None = None,
    ) -> None:
        super().__init__(id, created_at, updated_at, clock)
        self._license_plate = license_plate
        self._make = make
        self._model = model
        self._year = year
        self._client_id = client_id
        self._vin = vin
        self._color = color

    @classmethod
    def create(
        cls,
        license_plate: str,
        make: str,
        model: str,
        year: int,
        client_id: str,
        vin: str | None = None,
        color: str | None = None,
        clock: Clock | None = None,
    ) -> Vehicle:
        """
        Factory method to create a new, not yet persisted vehicle.

        Raises:
            ValidationError: If the license plate or VIN is invalid
        """
        plate_value = LicensePlate.create(license_plate)
        vin_value = VehicleIdentificationNumber.create(vin) if vin else None

        return cls(
            id="",
            license_plate=plate_value,
            make=make,
            model=model,
            year=year,
            client_id=client_id,
            vin=vin_value,
            color=color,
            clock=clock,
        )

    @property
    def license_plate(self) -> LicensePlate:
        return self._license_plate

    @property
    def make(self) -> str:
        return self._make

    @property
    def model(self) -> str:
        return self._model

    @property
    def year(self) -> int:
        return self._year

    @property
    def client_id(self) -> str:
        return self._client_id

    @property
    def vin(self) -> VehicleIdentificationNumber | None:
        return self._vin

    @property
    def color(self) -> str | None:
        return self._color

    def update_license_plate(self, license_plate: str) -> None:
        self._license_plate = LicensePlate.create(license_plate)
        self._touch()

    def update_make(self, make: str) -> None:
        self._make = make
        self._touch()

    def update_model(self, model: str) -> None:
        self._model = model
        self._touch()

    def update_year(self, year: int) -> None:
        self._year = year
        self._touch()

    def update_vin(self, vin: str | None = None) -> None:
        """Replace the VIN, or clear it when no value is given."""
        self._vin = VehicleIdentificationNumber.create(vin) if vin else None
        self._touch()

    def update_color(self, color: str | None = None) -> None:
        self._color = color
        self._touch()

    def has_vin(self) -> bool:
        return self._vin is not None

    def has_color(self) -> bool:
        return self._color is not None and self._color.strip() != ""

    def belongs_to(self, client_id: str) -> bool:
        return self._client_id == client_id

    def get_formatted_license_plate(self) -> str:
        return self._license_plate.formatted

    def get_clean_license_plate(self) -> str:
        return self._license_plate.clean

    def get_formatted_vin(self) -> str | None:
        return self._vin.formatted if self._vin else None

    def get_clean_vin(self) -> str | None:
        return self._vin.clean if self._vin else None

    def __str__(self) -> str:
        return f"{self._make} {self._model} {self._year} ({self._license_plate.formatted})"

    def __repr__(self) -> str:
        return (
            f"Vehicle(id={self._id!r}, license_plate={self._license_plate.clean!r}, "
            f"client_id={self._client_id!r})"
        )
