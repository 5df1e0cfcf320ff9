"""Email address value object."""

# Standard library imports
import re
from typing import ClassVar

from ..exceptions import ValidationError
from .base import ValueObject


class EmailAddress(ValueObject):
    """Immutable value object representing an email address.

    The canonical form is trimmed and lowercased; equality and formatting
    operate on it.
    """

    __slots__ = ("_value",)

    # local@domain.tld: no whitespace, a single "@", at least one dot in the domain
    _PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

    def __init__(self, value: str) -> None:
        """Initialize EmailAddress with validation.

        Args:
            value: The email string

        Raises:
            ValidationError: If the email is blank or malformed
        """
        raw = self._ensure_not_blank(value, "Email cannot be empty", "email")
        trimmed = raw.strip()

        if not self._PATTERN.fullmatch(trimmed):
            raise ValidationError(
                "Invalid email format", field="email", value=value, constraint="format"
            )

        self._value = trimmed.lower()

    @property
    def normalized(self) -> str:
        """Get normalized email (lowercase, trimmed)."""
        return self._value

    @property
    def value(self) -> str:
        return self._value

    @property
    def local_part(self) -> str:
        return self._value.split("@", 1)[0]

    @property
    def domain(self) -> str:
        return self._value.split("@", 1)[1]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EmailAddress):
            return False
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"EmailAddress('{self._value}')"

    def __str__(self) -> str:
        return self._value
