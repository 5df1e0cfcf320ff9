"""License plate value object supporting the legacy and regional plate grammars."""

# Standard library imports
import re
from typing import ClassVar

from ..exceptions import ValidationError
from .base import ValueObject

# ABC1234: 3 letters + 4 digits
LEGACY_PLATE_PATTERN = re.compile(r"[A-Z]{3}[0-9]{4}")
# ABC1D23: 3 letters + 1 digit + 1 letter + 2 digits
REGIONAL_PLATE_PATTERN = re.compile(r"[A-Z]{3}[0-9][A-Z][0-9]{2}")


class LicensePlate(ValueObject):
    """Immutable value object representing a vehicle license plate."""

    __slots__ = ("_value",)

    _SEPARATORS: ClassVar[re.Pattern[str]] = re.compile(r"[^A-Z0-9]")

    def __init__(self, value: str) -> None:
        """Initialize LicensePlate with validation.

        Separators and any other non-alphanumeric characters are stripped and
        the result is uppercased before the grammar check.

        Raises:
            ValidationError: If the plate is blank or matches neither grammar
        """
        raw = self._ensure_not_blank(value, "License plate cannot be empty", "license_plate")
        clean = self._SEPARATORS.sub("", raw.upper())

        if not (LEGACY_PLATE_PATTERN.fullmatch(clean) or REGIONAL_PLATE_PATTERN.fullmatch(clean)):
            raise ValidationError(
                "Invalid license plate format",
                field="license_plate",
                value=value,
                constraint="format",
            )

        self._value = clean

    @property
    def clean(self) -> str:
        """Get clean value (uppercase, no separators)."""
        return self._value

    @property
    def value(self) -> str:
        return self._value

    @property
    def is_legacy(self) -> bool:
        return LEGACY_PLATE_PATTERN.fullmatch(self._value) is not None

    @property
    def is_regional(self) -> bool:
        return REGIONAL_PLATE_PATTERN.fullmatch(self._value) is not None

    @property
    def formatted(self) -> str:
        """Get formatted value (ABC-1234 for legacy plates, ABC1D23 unchanged)."""
        if self.is_legacy:
            return f"{self._value[:3]}-{self._value[3:]}"
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LicensePlate):
            return False
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"LicensePlate('{self._value}')"

    def __str__(self) -> str:
        return self.formatted
