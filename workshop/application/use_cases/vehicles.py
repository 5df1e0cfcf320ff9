"""
Vehicle Use Cases

Register, read, list and update vehicles belonging to workshop clients.
"""

from dataclasses import dataclass
from datetime import datetime

from workshop.application.exceptions import (
    ClientNotFoundError,
    DuplicateEntityError,
    VehicleNotFoundError,
)
from workshop.application.interfaces.repositories import IClientRepository, IVehicleRepository
from workshop.domain.entities import Vehicle
from workshop.domain.exceptions import ValidationError
from workshop.domain.interfaces.clock import Clock
from workshop.domain.value_objects import LicensePlate

from .base import UseCase, UseCaseRequest


@dataclass
class VehicleResponse:
    """Read model returned by vehicle use cases."""

    id: str
    license_plate: str
    formatted_license_plate: str
    make: str
    model: str
    year: int
    client_id: str
    vin: str | None
    color: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, vehicle: Vehicle) -> "VehicleResponse":
        return cls(
            id=vehicle.id,
            license_plate=vehicle.get_clean_license_plate(),
            formatted_license_plate=vehicle.get_formatted_license_plate(),
            make=vehicle.make,
            model=vehicle.model,
            year=vehicle.year,
            client_id=vehicle.client_id,
            vin=vehicle.get_clean_vin(),
            color=vehicle.color,
            created_at=vehicle.created_at,
            updated_at=vehicle.updated_at,
        )


@dataclass
class RegisterVehicleRequest(UseCaseRequest):
    """Request to register a vehicle for an existing client."""

    license_plate: str
    make: str
    model: str
    year: int
    client_id: str
    vin: str | None = None
    color: str | None = None


@dataclass
class GetVehicleByIdRequest(UseCaseRequest):
    vehicle_id: str


@dataclass
class ListVehiclesByClientRequest(UseCaseRequest):
    client_id: str


@dataclass
class UpdateVehicleRequest(UseCaseRequest):
    """
    Partial update of a vehicle.

    Fields left as None are not touched; vin and color are cleared by listing
    them in ``clear_fields``. Ownership cannot be changed.
    """

    vehicle_id: str
    license_plate: str | None = None
    make: str | None = None
    model: str | None = None
    year: int | None = None
    vin: str | None = None
    color: str | None = None
    clear_fields: tuple[str, ...] = ()


class RegisterVehicleUseCase(UseCase[RegisterVehicleRequest, VehicleResponse]):
    """Registers a vehicle, requiring an existing owner and a unique license plate."""

    def __init__(
        self,
        vehicle_repository: IVehicleRepository,
        client_repository: IClientRepository,
        clock: Clock | None = None,
    ) -> None:
        super().__init__()
        self.vehicle_repository = vehicle_repository
        self.client_repository = client_repository
        self.clock = clock

    async def process(self, request: RegisterVehicleRequest) -> VehicleResponse:
        vehicle = Vehicle.create(
            license_plate=request.license_plate,
            make=request.make,
            model=request.model,
            year=request.year,
            client_id=request.client_id,
            vin=request.vin,
            color=request.color,
            clock=self.clock,
        )

        if await self.client_repository.find_by_id(request.client_id) is None:
            raise ClientNotFoundError(request.client_id)

        plate = vehicle.get_clean_license_plate()
        if await self.vehicle_repository.find_by_license_plate(plate) is not None:
            raise DuplicateEntityError(
                "Vehicle", "license plate", vehicle.get_formatted_license_plate()
            )

        created = await self.vehicle_repository.create(vehicle)
        self.logger.info(
            f"Vehicle {created.id} registered for client {created.client_id}",
            extra={
                "request_id": str(request.request_id),
                "vehicle_id": created.id,
                "client_id": created.client_id,
            },
        )
        return VehicleResponse.from_entity(created)


class GetVehicleByIdUseCase(UseCase[GetVehicleByIdRequest, VehicleResponse]):
    def __init__(self, vehicle_repository: IVehicleRepository) -> None:
        super().__init__()
        self.vehicle_repository = vehicle_repository

    async def process(self, request: GetVehicleByIdRequest) -> VehicleResponse:
        vehicle = await self.vehicle_repository.find_by_id(request.vehicle_id)
        if vehicle is None:
            raise VehicleNotFoundError(request.vehicle_id)
        return VehicleResponse.from_entity(vehicle)


class ListVehiclesByClientUseCase(UseCase[ListVehiclesByClientRequest, list[VehicleResponse]]):
    """Lists a client's vehicles; an unknown client is reported, not an empty list."""

    def __init__(
        self, vehicle_repository: IVehicleRepository, client_repository: IClientRepository
    ) -> None:
        super().__init__()
        self.vehicle_repository = vehicle_repository
        self.client_repository = client_repository

    async def process(self, request: ListVehiclesByClientRequest) -> list[VehicleResponse]:
        if await self.client_repository.find_by_id(request.client_id) is None:
            raise ClientNotFoundError(request.client_id)

        vehicles = await self.vehicle_repository.find_by_client_id(request.client_id)
        return [VehicleResponse.from_entity(vehicle) for vehicle in vehicles]


class UpdateVehicleUseCase(UseCase[UpdateVehicleRequest, VehicleResponse]):
    CLEARABLE_FIELDS = ("vin", "color")

    def __init__(self, vehicle_repository: IVehicleRepository) -> None:
        super().__init__()
        self.vehicle_repository = vehicle_repository

    async def process(self, request: UpdateVehicleRequest) -> VehicleResponse:
        for field_name in request.clear_fields:
            if field_name not in self.CLEARABLE_FIELDS:
                raise ValidationError(
                    f"Field '{field_name}' cannot be cleared",
                    field="clear_fields",
                    value=field_name,
                )

        vehicle = await self.vehicle_repository.find_by_id(request.vehicle_id)
        if vehicle is None:
            raise VehicleNotFoundError(request.vehicle_id)

        if request.license_plate is not None:
            new_plate = LicensePlate.create(request.license_plate)
            if new_plate != vehicle.license_plate:
                owner = await self.vehicle_repository.find_by_license_plate(new_plate.clean)
                if owner is not None and owner.id != vehicle.id:
                    raise DuplicateEntityError("Vehicle", "license plate", new_plate.formatted)
            vehicle.update_license_plate(new_plate.clean)

        if request.make is not None:
            vehicle.update_make(request.make)
        if request.model is not None:
            vehicle.update_model(request.model)
        if request.year is not None:
            vehicle.update_year(request.year)
        if request.vin is not None or "vin" in request.clear_fields:
            vehicle.update_vin(request.vin)
        if request.color is not None or "color" in request.clear_fields:
            vehicle.update_color(request.color)

        updated = await self.vehicle_repository.update(vehicle.id, vehicle)
        if updated is None:
            raise VehicleNotFoundError(request.vehicle_id)
        return VehicleResponse.from_entity(updated)
