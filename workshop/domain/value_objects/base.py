"""Base class for value objects."""

# Standard library imports
from abc import ABC, abstractmethod
from typing import Any, Self

from ..exceptions import ValidationError


class ValueObject(ABC):
    """Abstract base class for all value objects.

    Provides common functionality for value objects including:
    - Immutability enforcement
    - Validating construction through ``create``
    - Non-raising format checks through ``validate``

    Subclasses validate in ``__init__`` so that no instance exists unless
    its raw input passed every rule.
    """

    __slots__ = ()  # Subclasses should define their own __slots__

    @abstractmethod
    def __init__(self, value: str) -> None:
        """Validate and normalize the raw value."""
        pass

    @abstractmethod
    def __eq__(self, other: object) -> bool:
        """Check equality with another value object."""
        pass

    @abstractmethod
    def __hash__(self) -> int:
        """Get hash for use in sets/dicts."""
        pass

    @abstractmethod
    def __repr__(self) -> str:
        """Get string representation for debugging."""
        pass

    def __setattr__(self, name: str, value: Any) -> None:
        """Prevent modification after initialization."""
        if hasattr(self, name):
            raise AttributeError(f"Cannot modify immutable value object attribute '{name}'")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Cannot delete immutable value object attribute '{name}'")

    @classmethod
    def create(cls, value: str) -> Self:
        """Factory method; raises ValidationError when the raw value is invalid."""
        return cls(value)

    @classmethod
    def validate(cls, value: str) -> bool:
        """Check if a raw string is valid without keeping the instance.

        Args:
            value: String to validate

        Returns:
            True if a value object could be created from it
        """
        try:
            cls(value)
        except ValidationError:
            return False
        return True

    @staticmethod
    def _ensure_not_blank(value: str | None, message: str, field: str) -> str:
        """Return the raw value, or raise if it is missing or whitespace-only."""
        if value is None or not isinstance(value, str) or not value.strip():
            raise ValidationError(message, field=field, value=value, constraint="required")
        return value
