"""Vehicle identification number value object."""

# Standard library imports
import re
from typing import ClassVar

from ..exceptions import ValidationError
from .base import ValueObject

VIN_LENGTH = 17


class VehicleIdentificationNumber(ValueObject):
    """Immutable value object representing a 17-character VIN.

    Letters I, O and Q are never allowed since they read like 1 and 0.
    """

    __slots__ = ("_value",)

    _FORBIDDEN_LETTERS: ClassVar[re.Pattern[str]] = re.compile(r"[IOQ]")
    _ALLOWED: ClassVar[re.Pattern[str]] = re.compile(r"[A-HJ-NPR-Z0-9]{17}")

    def __init__(self, value: str) -> None:
        """Initialize VIN with validation.

        Checks run in a fixed order: blank, length, forbidden letters, then
        character set, so callers always observe the first rule broken.

        Raises:
            ValidationError: If any rule fails
        """
        raw = self._ensure_not_blank(value, "VIN cannot be empty", "vin")
        clean = raw.upper().strip()

        if len(clean) != VIN_LENGTH:
            raise ValidationError(
                "VIN must be exactly 17 characters", field="vin", value=value, constraint="length"
            )

        if self._FORBIDDEN_LETTERS.search(clean):
            raise ValidationError(
                "VIN cannot contain letters I, O, or Q",
                field="vin",
                value=value,
                constraint="forbidden_letters",
            )

        if not self._ALLOWED.fullmatch(clean):
            raise ValidationError(
                "VIN must contain only alphanumeric characters",
                field="vin",
                value=value,
                constraint="charset",
            )

        self._value = clean

    @property
    def clean(self) -> str:
        return self._value

    @property
    def value(self) -> str:
        return self._value

    @property
    def formatted(self) -> str:
        """Get the value grouped 3-6-8 for readability."""
        return f"{self._value[:3]}-{self._value[3:9]}-{self._value[9:]}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VehicleIdentificationNumber):
            return False
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"VehicleIdentificationNumber('{self._value}')"

    def __str__(self) -> str:
        return self._value
