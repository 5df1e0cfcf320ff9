"""Immutable, self-validating value objects."""

from .base import ValueObject
from .email import EmailAddress
from .license_plate import LicensePlate
from .tax_id import TaxId
from .vin import VehicleIdentificationNumber

__all__ = [
    "ValueObject",
    "TaxId",
    "EmailAddress",
    "LicensePlate",
    "VehicleIdentificationNumber",
]
