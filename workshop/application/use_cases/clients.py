"""
Client Use Cases

Create, read, list and update workshop customers.
"""

from dataclasses import dataclass
from datetime import datetime

from workshop.application.exceptions import ClientNotFoundError, DuplicateEntityError
from workshop.application.interfaces.repositories import IClientRepository
from workshop.domain.entities import Client
from workshop.domain.exceptions import ValidationError
from workshop.domain.interfaces.clock import Clock
from workshop.domain.value_objects import EmailAddress

from .base import UseCase, UseCaseRequest


@dataclass
class ClientResponse:
    """Read model returned by client use cases."""

    id: str
    name: str
    email: str
    tax_id: str
    formatted_tax_id: str
    phone: str | None
    address: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, client: Client) -> "ClientResponse":
        return cls(
            id=client.id,
            name=client.name,
            email=client.get_normalized_email(),
            tax_id=client.get_raw_tax_id(),
            formatted_tax_id=client.get_formatted_tax_id(),
            phone=client.phone,
            address=client.address,
            created_at=client.created_at,
            updated_at=client.updated_at,
        )


@dataclass
class CreateClientRequest(UseCaseRequest):
    """Request to register a new client."""

    name: str
    email: str
    tax_id: str
    phone: str | None = None
    address: str | None = None


@dataclass
class GetClientByIdRequest(UseCaseRequest):
    client_id: str


@dataclass
class ListClientsRequest(UseCaseRequest):
    search: str | None = None


@dataclass
class UpdateClientRequest(UseCaseRequest):
    """
    Partial update of a client.

    Fields left as None are not touched; phone and address are cleared by
    listing them in ``clear_fields``.
    """

    client_id: str
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    clear_fields: tuple[str, ...] = ()


class CreateClientUseCase(UseCase[CreateClientRequest, ClientResponse]):
    """Validates and persists a new client, rejecting duplicate tax ids and emails."""

    def __init__(self, client_repository: IClientRepository, clock: Clock | None = None) -> None:
        super().__init__()
        self.client_repository = client_repository
        self.clock = clock

    async def process(self, request: CreateClientRequest) -> ClientResponse:
        client = Client.create(
            name=request.name,
            email=request.email,
            tax_id=request.tax_id,
            phone=request.phone,
            address=request.address,
            clock=self.clock,
        )

        if await self.client_repository.find_by_tax_id(client.get_raw_tax_id()) is not None:
            raise DuplicateEntityError("Client", "CPF/CNPJ", client.get_formatted_tax_id())
        if await self.client_repository.find_by_email(client.get_normalized_email()) is not None:
            raise DuplicateEntityError("Client", "email", client.get_normalized_email())

        created = await self.client_repository.create(client)
        self.logger.info(
            f"Client {created.id} created",
            extra={"request_id": str(request.request_id), "client_id": created.id},
        )
        return ClientResponse.from_entity(created)


class GetClientByIdUseCase(UseCase[GetClientByIdRequest, ClientResponse]):
    def __init__(self, client_repository: IClientRepository) -> None:
        super().__init__()
        self.client_repository = client_repository

    async def process(self, request: GetClientByIdRequest) -> ClientResponse:
        client = await self.client_repository.find_by_id(request.client_id)
        if client is None:
            raise ClientNotFoundError(request.client_id)
        return ClientResponse.from_entity(client)


class ListClientsUseCase(UseCase[ListClientsRequest, list[ClientResponse]]):
    def __init__(self, client_repository: IClientRepository) -> None:
        super().__init__()
        self.client_repository = client_repository

    async def process(self, request: ListClientsRequest) -> list[ClientResponse]:
        clients = await self.client_repository.find_all(request.search)
        return [ClientResponse.from_entity(client) for client in clients]


class UpdateClientUseCase(UseCase[UpdateClientRequest, ClientResponse]):
    """Applies a partial update through the client's named update operations."""

    CLEARABLE_FIELDS = ("phone", "address")

    def __init__(self, client_repository: IClientRepository) -> None:
        super().__init__()
        self.client_repository = client_repository

    async def process(self, request: UpdateClientRequest) -> ClientResponse:
        for field_name in request.clear_fields:
            if field_name not in self.CLEARABLE_FIELDS:
                raise ValidationError(
                    f"Field '{field_name}' cannot be cleared",
                    field="clear_fields",
                    value=field_name,
                )

        client = await self.client_repository.find_by_id(request.client_id)
        if client is None:
            raise ClientNotFoundError(request.client_id)

        if request.email is not None:
            new_email = EmailAddress.create(request.email)
            if new_email != client.email:
                owner = await self.client_repository.find_by_email(new_email.normalized)
                if owner is not None and owner.id != client.id:
                    raise DuplicateEntityError("Client", "email", new_email.normalized)
            client.update_email(new_email.normalized)

        if request.name is not None:
            client.update_name(request.name)
        if request.phone is not None or "phone" in request.clear_fields:
            client.update_phone(request.phone)
        if request.address is not None or "address" in request.clear_fields:
            client.update_address(request.address)

        updated = await self.client_repository.update(client.id, client)
        if updated is None:
            raise ClientNotFoundError(request.client_id)
        return ClientResponse.from_entity(updated)
