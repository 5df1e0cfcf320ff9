"""Tax id value object for Brazilian individual (CPF) and organization (CNPJ) ids."""

# Standard library imports
import re
from typing import ClassVar

from ..exceptions import ValidationError
from .base import ValueObject

CPF_LENGTH = 11
CNPJ_LENGTH = 14


def _check_digit(digits: str, weights: list[int]) -> int:
    """Weighted-sum modulo 11 check digit; remainders below 2 map to 0."""
    remainder = sum(int(digit) * weight for digit, weight in zip(digits, weights)) % 11
    return 0 if remainder < 2 else 11 - remainder


def _is_repeated_sequence(digits: str) -> bool:
    return len(set(digits)) == 1


def is_valid_cpf(digits: str) -> bool:
    """Validate an 11-digit CPF (weights 10..2, then 11..2)."""
    if len(digits) != CPF_LENGTH or not digits.isascii() or not digits.isdigit():
        return False
    if _is_repeated_sequence(digits):
        return False

    first = _check_digit(digits[:9], list(range(10, 1, -1)))
    if first != int(digits[9]):
        return False

    second = _check_digit(digits[:10], list(range(11, 1, -1)))
    return second == int(digits[10])


def is_valid_cnpj(digits: str) -> bool:
    """Validate a 14-digit CNPJ (weights cycling 9..2 from the right)."""
    if len(digits) != CNPJ_LENGTH or not digits.isascii() or not digits.isdigit():
        return False
    if _is_repeated_sequence(digits):
        return False

    first = _check_digit(digits[:12], [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2])
    if first != int(digits[12]):
        return False

    second = _check_digit(digits[:13], [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2])
    return second == int(digits[13])


class TaxId(ValueObject):
    """Immutable value object representing a CPF or CNPJ.

    The canonical form holds digits only. Separators such as dots, slashes
    and hyphens are stripped before validation.
    """

    __slots__ = ("_value", "_is_cpf")

    _NON_DIGITS: ClassVar[re.Pattern[str]] = re.compile(r"[^0-9]")
    _CPF_LAYOUT: ClassVar[re.Pattern[str]] = re.compile(r"(\d{3})(\d{3})(\d{3})(\d{2})")
    _CNPJ_LAYOUT: ClassVar[re.Pattern[str]] = re.compile(r"(\d{2})(\d{3})(\d{3})(\d{4})(\d{2})")

    def __init__(self, value: str) -> None:
        """Initialize TaxId with validation.

        Args:
            value: CPF or CNPJ, formatted or digits only

        Raises:
            ValidationError: If the value is blank, has the wrong length or
                fails its checksum
        """
        raw = self._ensure_not_blank(value, "CPF/CNPJ cannot be empty", "tax_id")
        clean = self._NON_DIGITS.sub("", raw)

        if len(clean) == CPF_LENGTH:
            if not is_valid_cpf(clean):
                raise ValidationError(
                    "Invalid CPF", field="tax_id", value=value, constraint="cpf_checksum"
                )
        elif len(clean) == CNPJ_LENGTH:
            if not is_valid_cnpj(clean):
                raise ValidationError(
                    "Invalid CNPJ", field="tax_id", value=value, constraint="cnpj_checksum"
                )
        else:
            raise ValidationError(
                "CPF/CNPJ must have 11 or 14 digits",
                field="tax_id",
                value=value,
                constraint="length",
            )

        self._value = clean
        self._is_cpf = len(clean) == CPF_LENGTH

    @property
    def clean(self) -> str:
        """Get the digits-only value."""
        return self._value

    @property
    def value(self) -> str:
        return self._value

    @property
    def formatted(self) -> str:
        """Get the human-readable form (###.###.###-## or ##.###.###/####-##)."""
        if self._is_cpf:
            return self._CPF_LAYOUT.sub(r"\1.\2.\3-\4", self._value)
        return self._CNPJ_LAYOUT.sub(r"\1.\2.\3/\4-\5", self._value)

    @property
    def is_cpf(self) -> bool:
        """Check if this is an individual taxpayer id."""
        return self._is_cpf

    @property
    def is_cnpj(self) -> bool:
        """Check if this is an organization taxpayer id."""
        return not self._is_cpf

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaxId):
            return False
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"TaxId('{self._value}')"

    def __str__(self) -> str:
        return self.formatted
