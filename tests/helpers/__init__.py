"""Test helper utilities for the workshop service test suite."""

from tests.helpers.clock import FrozenClock
from tests.helpers.factories import (
    create_test_client,
    create_test_service_order,
    create_test_vehicle,
)
from tests.helpers.fixtures import (
    create_mock_client_repository,
    create_mock_event_publisher,
    create_mock_service_order_repository,
    create_mock_vehicle_repository,
)

__all__ = [
    "FrozenClock",
    # Factories
    "create_test_client",
    "create_test_service_order",
    "create_test_vehicle",
    # Fixtures
    "create_mock_client_repository",
    "create_mock_event_publisher",
    "create_mock_service_order_repository",
    "create_mock_vehicle_repository",
]
