"""
Base Use Case

Provides the foundation for all use cases in the application layer.
Implements the common execution template: request tracking, logging and
error reporting. Failures are logged and re-raised so callers can map them
to their own responses.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar
from uuid import UUID, uuid4

from workshop.application.exceptions import ApplicationException
from workshop.domain.exceptions import DomainException

logger = logging.getLogger(__name__)

# Type variables for request and response
TRequest = TypeVar("TRequest", bound="UseCaseRequest")
TResponse = TypeVar("TResponse")


@dataclass(kw_only=True)
class UseCaseRequest:
    """Base class for use case requests."""

    request_id: UUID = field(default_factory=uuid4)
    correlation_id: UUID | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


class UseCase(ABC, Generic[TRequest, TResponse]):
    """
    Abstract base class for all use cases.

    Provides a consistent interface and common functionality for
    business logic orchestration.
    """

    def __init__(self, name: str | None = None) -> None:
        """
        Initialize use case.

        Args:
            name: Optional name for the use case (defaults to class name)
        """
        self.name = name or self.__class__.__name__
        self.logger = logging.getLogger(f"{__name__}.{self.name}")

    async def execute(self, request: TRequest) -> TResponse:
        """
        Execute the use case.

        Args:
            request: The use case request

        Returns:
            The use case response

        Raises:
            DomainException: When a business rule rejects the request
            ApplicationException: When a referenced entity is missing or duplicated
        """
        request_id = str(request.request_id)
        self.logger.info(
            f"Executing {self.name}",
            extra={"request_id": request_id, "use_case": self.name},
        )

        try:
            response = await self.process(request)
        except (DomainException, ApplicationException) as e:
            self.logger.warning(
                f"{self.name} rejected: {e}",
                extra={"request_id": request_id, "error_type": type(e).__name__},
            )
            raise
        except Exception as e:
            self.logger.error(
                f"Error executing {self.name}: {e}",
                extra={"request_id": request_id},
                exc_info=True,
            )
            raise

        self.logger.info(
            f"Successfully executed {self.name}",
            extra={"request_id": request_id, "use_case": self.name},
        )
        return response

    @abstractmethod
    async def process(self, request: TRequest) -> TResponse:
        """
        Process the request and execute business logic.

        Args:
            request: The request

        Returns:
            The response
        """
        pass
