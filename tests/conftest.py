"""Global pytest configuration and fixtures."""

# Standard library imports
from pathlib import Path
from unittest.mock import AsyncMock

# Load test environment variables
from dotenv import load_dotenv

test_env_path = Path(__file__).parent.parent / ".env.test"
if test_env_path.exists():
    load_dotenv(test_env_path, override=True)

# Third-party imports
import pytest

# Local imports
from tests.helpers.clock import FrozenClock
from tests.helpers.fixtures import (
    create_mock_client_repository,
    create_mock_event_publisher,
    create_mock_service_order_repository,
    create_mock_vehicle_repository,
)
from workshop.application.config import reset_config


@pytest.fixture
def frozen_clock() -> FrozenClock:
    """Provides a clock fixed at 2025-01-15 09:30 UTC."""
    return FrozenClock()


@pytest.fixture
def mock_client_repository() -> AsyncMock:
    return create_mock_client_repository()


@pytest.fixture
def mock_vehicle_repository() -> AsyncMock:
    return create_mock_vehicle_repository()


@pytest.fixture
def mock_order_repository() -> AsyncMock:
    return create_mock_service_order_repository()


@pytest.fixture
def mock_event_publisher() -> AsyncMock:
    return create_mock_event_publisher()


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the configuration singleton between tests."""
    reset_config()
    yield
    reset_config()
