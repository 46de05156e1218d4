"""
Client service with business logic.
"""

from collections import defaultdict
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from bizdesk.core.exceptions import ConflictError, NotFoundError, ValidationError
from bizdesk.core.logging import get_logger
from bizdesk.db.repositories.client_repository import ClientRepository
from bizdesk.schemas.client import (
    ClientCreate,
    ClientUpdate,
    ClientResponse,
    ClientWithProjectsResponse,
    DashboardStatsResponse,
)
from bizdesk.services.base_service import BaseService
from bizdesk.services.project_service import ProjectService

logger = get_logger(__name__)


class ClientService(BaseService):
    """Service for client operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.client_repo = ClientRepository(session)
        self.project_service = ProjectService(session)

    async def list_clients(self) -> List[ClientWithProjectsResponse]:
        """List all clients, each with its projects attached."""
        clients = await self.client_repo.list()
        projects = await self.project_service.list_projects()

        projects_by_client = defaultdict(list)
        for project in projects:
            if project.client_id is not None:
                projects_by_client[project.client_id].append(project)

        return [
            ClientWithProjectsResponse(
                **ClientResponse.model_validate(client).model_dump(),
                projects=projects_by_client.get(client.id, []),
            )
            for client in clients
        ]

    async def get_client(self, client_id: int) -> ClientWithProjectsResponse:
        """Get client by ID with its projects."""
        client = await self.client_repo.get(client_id)
        if not client:
            raise NotFoundError("Client", client_id)

        projects = await self.project_service.list_projects(client_id=client_id)
        return ClientWithProjectsResponse(
            **ClientResponse.model_validate(client).model_dump(),
            projects=projects,
        )

    async def create_client(self, client_data: ClientCreate) -> ClientResponse:
        """Create a new client."""
        if await self.client_repo.get_by_email(client_data.email):
            raise ConflictError(
                f"A client with email {client_data.email} already exists",
                details={"field": "email"},
            )

        client = await self.client_repo.create(**client_data.model_dump())
        await self.session.commit()
        logger.info("Client created", extra={"client_id": client.id, "company_name": client.company_name})
        return ClientResponse.model_validate(client)

    async def update_client(self, client_id: int, client_data: ClientUpdate) -> ClientResponse:
        """Update the provided fields of a client."""
        client = await self.client_repo.get(client_id)
        if not client:
            raise NotFoundError("Client", client_id)

        update_dict = client_data.model_dump(exclude_unset=True)
        cleared = [
            field for field in ("company_name", "contact_person", "email", "status")
            if field in update_dict and update_dict[field] is None
        ]
        if cleared:
            raise ValidationError("Required fields cannot be cleared", details={"fields": cleared})

        new_email = update_dict.get("email")
        if new_email and new_email != client.email:
            existing = await self.client_repo.get_by_email(new_email)
            if existing and existing.id != client_id:
                raise ConflictError(
                    f"A client with email {new_email} already exists",
                    details={"field": "email"},
                )

        updated = await self.client_repo.update(client_id, **update_dict)
        await self.session.commit()
        logger.info("Client updated", extra={"client_id": client_id, "fields": sorted(update_dict)})
        return ClientResponse.model_validate(updated)

    async def delete_client(self, client_id: int) -> None:
        """Delete a client; its projects keep existing with no client."""
        deleted = await self.client_repo.delete(client_id)
        if not deleted:
            raise NotFoundError("Client", client_id)
        await self.session.commit()
        logger.info("Client deleted", extra={"client_id": client_id})

    async def get_dashboard_stats(self) -> DashboardStatsResponse:
        stats = await self.client_repo.get_dashboard_stats()
        return DashboardStatsResponse(**stats)
