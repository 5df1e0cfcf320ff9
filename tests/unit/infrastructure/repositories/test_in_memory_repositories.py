"""Unit tests for the in-memory repository implementations."""

# Standard library imports
from datetime import UTC, datetime, timedelta

# Third-party imports
import pytest
import pytest_asyncio

# Local imports
from tests.helpers.factories import (
    OTHER_VALID_CPF,
    VALID_CNPJ,
    VALID_CPF,
    VALID_CPF_FORMATTED,
    VALID_VIN,
    create_test_client,
)
from workshop.application.exceptions import RepositoryError
from workshop.application.interfaces.repositories import ServiceOrderFilters
from workshop.domain.entities import Client, ServiceOrder, ServiceOrderStatus, Vehicle
from workshop.infrastructure.repositories import (
    InMemoryClientRepository,
    InMemoryServiceOrderRepository,
    InMemoryVehicleRepository,
)


class TestInMemoryClientRepository:
    @pytest.fixture
    def repo(self):
        return InMemoryClientRepository()

    @pytest.mark.asyncio
    async def test_create_assigns_id(self, repo):
        client = Client.create("Maria Silva", "maria@example.com", VALID_CPF)

        created = await repo.create(client)

        assert created.id
        assert not created.is_new()
        assert client.is_new()
        assert await repo.find_by_id(created.id) == created

    @pytest.mark.asyncio
    async def test_create_rejects_persisted_entity(self, repo):
        with pytest.raises(RepositoryError, match="already has an identifier"):
            await repo.create(create_test_client(client_id="client-1"))

    @pytest.mark.asyncio
    async def test_lookups(self, repo):
        created = await repo.create(Client.create("Maria", "Maria@Example.com", VALID_CPF))

        assert (await repo.find_by_email(" MARIA@example.com ")).id == created.id
        assert (await repo.find_by_tax_id(VALID_CPF_FORMATTED)).id == created.id
        assert await repo.find_by_tax_id(OTHER_VALID_CPF) is None
        assert await repo.find_by_email("other@example.com") is None
        assert await repo.find_by_id("missing") is None

    @pytest.mark.asyncio
    async def test_find_all_with_search(self, repo):
        await repo.create(Client.create("Maria Silva", "maria@example.com", VALID_CPF))
        await repo.create(Client.create("Oficina Centro", "contato@centro.com", VALID_CNPJ))

        assert len(await repo.find_all()) == 2
        assert len(await repo.find_all("  ")) == 2
        assert [c.name for c in await repo.find_all("SILVA")] == ["Maria Silva"]
        assert [c.name for c in await repo.find_all("centro.com")] == ["Oficina Centro"]
        assert [c.name for c in await repo.find_all("11.222")] == ["Oficina Centro"]
        assert await repo.find_all("nobody") == []

    @pytest.mark.asyncio
    async def test_stored_copy_isolated_from_caller(self, repo):
        created = await repo.create(Client.create("Maria", "maria@example.com", VALID_CPF))

        created.update_name("Changed without saving")

        assert (await repo.find_by_id(created.id)).name == "Maria"

    @pytest.mark.asyncio
    async def test_update(self, repo):
        created = await repo.create(Client.create("Maria", "maria@example.com", VALID_CPF))
        created.update_name("Maria Souza")

        updated = await repo.update(created.id, created)

        assert updated.name == "Maria Souza"
        assert (await repo.find_by_id(created.id)).name == "Maria Souza"

    @pytest.mark.asyncio
    async def test_update_missing_returns_none(self, repo):
        assert await repo.update("missing", create_test_client(client_id="missing")) is None

    @pytest.mark.asyncio
    async def test_update_with_mismatched_id(self, repo):
        created = await repo.create(Client.create("Maria", "maria@example.com", VALID_CPF))

        with pytest.raises(RepositoryError, match="Cannot store"):
            await repo.update(created.id, create_test_client(client_id="other"))

    @pytest.mark.asyncio
    async def test_delete(self, repo):
        created = await repo.create(Client.create("Maria", "maria@example.com", VALID_CPF))

        assert await repo.delete(created.id) is True
        assert await repo.delete(created.id) is False
        assert await repo.find_by_id(created.id) is None


class TestInMemoryVehicleRepository:
    @pytest.fixture
    def repo(self):
        return InMemoryVehicleRepository()

    @pytest.mark.asyncio
    async def test_create_and_lookups(self, repo):
        created = await repo.create(
            Vehicle.create("ABC1234", "Fiat", "Uno", 2012, "client-1", vin=VALID_VIN)
        )

        assert (await repo.find_by_id(created.id)).make == "Fiat"
        assert (await repo.find_by_license_plate("abc-1234")).id == created.id
        assert await repo.find_by_license_plate("BRA2E19") is None

    @pytest.mark.asyncio
    async def test_find_by_client_id(self, repo):
        await repo.create(Vehicle.create("ABC1234", "Fiat", "Uno", 2012, "client-1"))
        await repo.create(Vehicle.create("BRA2E19", "Honda", "Fit", 2018, "client-1"))
        await repo.create(Vehicle.create("XYZ9876", "Ford", "Ka", 2015, "client-2"))

        vehicles = await repo.find_by_client_id("client-1")

        assert sorted(v.get_clean_license_plate() for v in vehicles) == ["ABC1234", "BRA2E19"]
        assert await repo.find_by_client_id("client-3") == []

    @pytest.mark.asyncio
    async def test_find_all_with_search(self, repo):
        await repo.create(Vehicle.create("ABC1234", "Fiat", "Uno", 2012, "client-1"))
        await repo.create(
            Vehicle.create("BRA2E19", "Honda", "Fit", 2018, "client-1", vin=VALID_VIN)
        )

        assert len(await repo.find_all()) == 2
        assert [v.make for v in await repo.find_all("honda")] == ["Honda"]
        assert [v.make for v in await repo.find_all("abc-1")] == ["Fiat"]
        assert [v.make for v in await repo.find_all("1hgcm")] == ["Honda"]

    @pytest.mark.asyncio
    async def test_update_and_delete(self, repo):
        created = await repo.create(Vehicle.create("ABC1234", "Fiat", "Uno", 2012, "client-1"))
        created.update_color("Vermelho")

        assert (await repo.update(created.id, created)).color == "Vermelho"
        assert await repo.delete(created.id)
        assert await repo.update(created.id, created) is None


class TestInMemoryServiceOrderRepository:
    @pytest.fixture
    def repo(self):
        return InMemoryServiceOrderRepository()

    @pytest_asyncio.fixture
    async def seeded(self, repo, frozen_clock):
        orders = []
        for client_id, vehicle_id, received in [
            ("client-1", "vehicle-1", False),
            ("client-1", "vehicle-2", True),
            ("client-2", "vehicle-3", True),
        ]:
            factory = ServiceOrder.create_received if received else ServiceOrder.create
            orders.append(await repo.create(factory(client_id, vehicle_id, clock=frozen_clock)))
            frozen_clock.advance(days=1)
        return orders

    @pytest.mark.asyncio
    async def test_create_assigns_id(self, repo):
        created = await repo.create(ServiceOrder.create("client-1", "vehicle-1"))
        assert created.id
        assert (await repo.find_by_id(created.id)).status is ServiceOrderStatus.REQUESTED

    @pytest.mark.asyncio
    async def test_find_all_newest_first(self, repo, seeded):
        orders = await repo.find_all()
        assert [o.id for o in orders] == [o.id for o in reversed(seeded)]

    @pytest.mark.asyncio
    async def test_filters(self, repo, seeded):
        by_client = await repo.find_all(ServiceOrderFilters(client_id="client-1"))
        assert {o.vehicle_id for o in by_client} == {"vehicle-1", "vehicle-2"}

        by_status = await repo.find_all(ServiceOrderFilters(status=ServiceOrderStatus.RECEIVED))
        assert {o.vehicle_id for o in by_status} == {"vehicle-2", "vehicle-3"}

        by_vehicle = await repo.find_all(ServiceOrderFilters(vehicle_id="vehicle-3"))
        assert [o.client_id for o in by_vehicle] == ["client-2"]

    @pytest.mark.asyncio
    async def test_date_filters(self, repo, seeded):
        first_day = seeded[0].request_date
        window = ServiceOrderFilters(
            from_date=first_day + timedelta(hours=12),
            to_date=first_day + timedelta(days=1),
        )

        orders = await repo.find_all(window)

        assert [o.id for o in orders] == [seeded[1].id]

    @pytest.mark.asyncio
    async def test_count(self, repo, seeded):
        assert await repo.count() == 3
        assert await repo.count(ServiceOrderFilters(client_id="client-1")) == 2
        assert await repo.count(ServiceOrderFilters(status=ServiceOrderStatus.CANCELLED)) == 0

    @pytest.mark.asyncio
    async def test_update_persists_transition(self, repo, seeded):
        order = await repo.find_by_id(seeded[1].id)
        order.mark_in_diagnosis()

        await repo.update(order.id, order)

        stored = await repo.find_by_id(order.id)
        assert stored.status is ServiceOrderStatus.IN_DIAGNOSIS
        assert await repo.count(ServiceOrderFilters(status=ServiceOrderStatus.IN_DIAGNOSIS)) == 1

    @pytest.mark.asyncio
    async def test_delete(self, repo, seeded):
        assert await repo.delete(seeded[0].id)
        assert await repo.count() == 2
        assert not await repo.delete("missing")

    @pytest.mark.asyncio
    async def test_filters_use_request_date(self, repo):
        requested = datetime(2020, 1, 1, tzinfo=UTC)
        cutoff = datetime(2021, 1, 1, tzinfo=UTC)
        await repo.create(
            ServiceOrder("", ServiceOrderStatus.REQUESTED, "c", "v", request_date=requested)
        )

        assert await repo.count(ServiceOrderFilters(to_date=cutoff)) == 1
        assert await repo.count(ServiceOrderFilters(from_date=cutoff)) == 0
