"""Unit tests for the vehicle use cases."""

# Third-party imports
import pytest

# Local imports
from tests.helpers.factories import VALID_VIN, create_test_client, create_test_vehicle
from workshop.application.exceptions import (
    ClientNotFoundError,
    DuplicateEntityError,
    VehicleNotFoundError,
)
from workshop.application.use_cases.vehicles import (
    GetVehicleByIdRequest,
    GetVehicleByIdUseCase,
    ListVehiclesByClientRequest,
    ListVehiclesByClientUseCase,
    RegisterVehicleRequest,
    RegisterVehicleUseCase,
    UpdateVehicleRequest,
    UpdateVehicleUseCase,
)
from workshop.domain.exceptions import ValidationError


@pytest.fixture
def register_use_case(mock_vehicle_repository, mock_client_repository, frozen_clock):
    return RegisterVehicleUseCase(
        mock_vehicle_repository, mock_client_repository, clock=frozen_clock
    )


def _register_request(**overrides) -> RegisterVehicleRequest:
    data = {
        "license_plate": "abc-1234",
        "make": "Fiat",
        "model": "Uno",
        "year": 2012,
        "client_id": "client-123",
    }
    data.update(overrides)
    return RegisterVehicleRequest(**data)


class TestRegisterVehicleUseCase:
    @pytest.mark.asyncio
    async def test_registers_vehicle(
        self, register_use_case, mock_vehicle_repository, mock_client_repository
    ):
        mock_client_repository.find_by_id.return_value = create_test_client(client_id="client-123")

        response = await register_use_case.execute(_register_request(vin=VALID_VIN.lower()))

        assert response.id == "vehicle-456"
        assert response.license_plate == "ABC1234"
        assert response.formatted_license_plate == "ABC-1234"
        assert response.vin == VALID_VIN
        assert response.client_id == "client-123"
        mock_vehicle_repository.find_by_license_plate.assert_awaited_once_with("ABC1234")
        mock_vehicle_repository.create.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unknown_client(self, register_use_case, mock_vehicle_repository):
        with pytest.raises(ClientNotFoundError, match="Client with ID client-123 not found"):
            await register_use_case.execute(_register_request())

        mock_vehicle_repository.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_duplicate_plate(
        self, register_use_case, mock_vehicle_repository, mock_client_repository
    ):
        mock_client_repository.find_by_id.return_value = create_test_client(client_id="client-123")
        mock_vehicle_repository.find_by_license_plate.return_value = create_test_vehicle()

        with pytest.raises(DuplicateEntityError, match="ABC-1234"):
            await register_use_case.execute(_register_request())

        mock_vehicle_repository.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_plate(self, register_use_case, mock_client_repository):
        with pytest.raises(ValidationError, match="Invalid license plate format"):
            await register_use_case.execute(_register_request(license_plate="AB-12"))

        mock_client_repository.find_by_id.assert_not_awaited()


class TestGetVehicleByIdUseCase:
    @pytest.mark.asyncio
    async def test_found(self, mock_vehicle_repository):
        mock_vehicle_repository.find_by_id.return_value = create_test_vehicle(vehicle_id="v-1")

        response = await GetVehicleByIdUseCase(mock_vehicle_repository).execute(
            GetVehicleByIdRequest(vehicle_id="v-1")
        )

        assert response.id == "v-1"
        assert response.vin is None

    @pytest.mark.asyncio
    async def test_not_found(self, mock_vehicle_repository):
        with pytest.raises(VehicleNotFoundError, match="Vehicle with ID v-404 not found"):
            await GetVehicleByIdUseCase(mock_vehicle_repository).execute(
                GetVehicleByIdRequest(vehicle_id="v-404")
            )


class TestListVehiclesByClientUseCase:
    @pytest.mark.asyncio
    async def test_lists_client_vehicles(self, mock_vehicle_repository, mock_client_repository):
        mock_client_repository.find_by_id.return_value = create_test_client(client_id="client-1")
        mock_vehicle_repository.find_by_client_id.return_value = [
            create_test_vehicle(vehicle_id="v-1", client_id="client-1"),
            create_test_vehicle(vehicle_id="v-2", client_id="client-1", license_plate="BRA2E19"),
        ]

        responses = await ListVehiclesByClientUseCase(
            mock_vehicle_repository, mock_client_repository
        ).execute(ListVehiclesByClientRequest(client_id="client-1"))

        assert [r.id for r in responses] == ["v-1", "v-2"]
        mock_vehicle_repository.find_by_client_id.assert_awaited_once_with("client-1")

    @pytest.mark.asyncio
    async def test_unknown_client(self, mock_vehicle_repository, mock_client_repository):
        with pytest.raises(ClientNotFoundError):
            await ListVehiclesByClientUseCase(
                mock_vehicle_repository, mock_client_repository
            ).execute(ListVehiclesByClientRequest(client_id="missing"))

        mock_vehicle_repository.find_by_client_id.assert_not_awaited()


class TestUpdateVehicleUseCase:
    @pytest.fixture
    def existing(self, mock_vehicle_repository, frozen_clock):
        vehicle = create_test_vehicle(
            vehicle_id="v-1", vin=VALID_VIN, color="Prata", clock=frozen_clock
        )
        mock_vehicle_repository.find_by_id.return_value = vehicle
        return vehicle

    @pytest.mark.asyncio
    async def test_partial_update(self, existing, mock_vehicle_repository, frozen_clock):
        later = frozen_clock.advance(minutes=1)

        response = await UpdateVehicleUseCase(mock_vehicle_repository).execute(
            UpdateVehicleRequest(vehicle_id="v-1", model="Mobi", year=2020)
        )

        assert response.model == "Mobi"
        assert response.year == 2020
        assert response.make == "Volkswagen"
        assert response.updated_at == later
        mock_vehicle_repository.update.assert_awaited_once_with("v-1", existing)

    @pytest.mark.asyncio
    async def test_change_plate(self, existing, mock_vehicle_repository):
        response = await UpdateVehicleUseCase(mock_vehicle_repository).execute(
            UpdateVehicleRequest(vehicle_id="v-1", license_plate="bra2e19")
        )

        assert response.license_plate == "BRA2E19"
        mock_vehicle_repository.find_by_license_plate.assert_awaited_once_with("BRA2E19")

    @pytest.mark.asyncio
    async def test_plate_taken(self, existing, mock_vehicle_repository):
        mock_vehicle_repository.find_by_license_plate.return_value = create_test_vehicle(
            vehicle_id="v-2", license_plate="BRA2E19"
        )

        with pytest.raises(DuplicateEntityError):
            await UpdateVehicleUseCase(mock_vehicle_repository).execute(
                UpdateVehicleRequest(vehicle_id="v-1", license_plate="BRA2E19")
            )

        mock_vehicle_repository.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_clear_vin_and_color(self, existing, mock_vehicle_repository):
        response = await UpdateVehicleUseCase(mock_vehicle_repository).execute(
            UpdateVehicleRequest(vehicle_id="v-1", clear_fields=("vin", "color"))
        )

        assert response.vin is None
        assert response.color is None

    @pytest.mark.asyncio
    async def test_cannot_clear_plate(self, existing, mock_vehicle_repository):
        with pytest.raises(ValidationError, match="cannot be cleared"):
            await UpdateVehicleUseCase(mock_vehicle_repository).execute(
                UpdateVehicleRequest(vehicle_id="v-1", clear_fields=("license_plate",))
            )

    @pytest.mark.asyncio
    async def test_missing_vehicle(self, mock_vehicle_repository):
        with pytest.raises(VehicleNotFoundError):
            await UpdateVehicleUseCase(mock_vehicle_repository).execute(
                UpdateVehicleRequest(vehicle_id="missing", make="Fiat")
            )
