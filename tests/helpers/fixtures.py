"""Mock collaborators for use case tests."""

from unittest.mock import AsyncMock


def create_mock_client_repository() -> AsyncMock:
    """Client repository mock that finds nothing until told otherwise."""
    repo = AsyncMock()
    repo.find_by_id.return_value = None
    repo.find_by_email.return_value = None
    repo.find_by_tax_id.return_value = None
    repo.find_all.return_value = []
    repo.create.side_effect = _assign_id("client-123")
    repo.update.side_effect = lambda entity_id, entity: entity
    return repo


def create_mock_vehicle_repository() -> AsyncMock:
    repo = AsyncMock()
    repo.find_by_id.return_value = None
    repo.find_by_license_plate.return_value = None
    repo.find_by_client_id.return_value = []
    repo.find_all.return_value = []
    repo.create.side_effect = _assign_id("vehicle-456")
    repo.update.side_effect = lambda entity_id, entity: entity
    return repo


def create_mock_service_order_repository() -> AsyncMock:
    repo = AsyncMock()
    repo.find_by_id.return_value = None
    repo.find_all.return_value = []
    repo.count.return_value = 0
    repo.create.side_effect = _assign_id("order-789")
    repo.update.side_effect = lambda entity_id, entity: entity
    return repo


def create_mock_event_publisher() -> AsyncMock:
    publisher = AsyncMock()
    publisher.publish_order_created.return_value = None
    publisher.publish_order_status_updated.return_value = None
    return publisher


def _assign_id(identifier: str):
    """Side effect that mimics storage assigning an identifier on create."""

    def create(entity):
        entity.assign_id(identifier)
        return entity

    return create
