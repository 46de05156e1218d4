"""
Client controller.
"""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from bizdesk.controllers.base_controller import BaseController
from bizdesk.services.client_service import ClientService
from bizdesk.schemas.client import (
    ClientCreate,
    ClientUpdate,
    ClientResponse,
    ClientWithProjectsResponse,
    DashboardStatsResponse,
)


class ClientController(BaseController):
    """Controller for client operations."""

    def __init__(self, session: AsyncSession):
        self.client_service = ClientService(session)

    async def create_client(self, client_data: ClientCreate) -> ClientResponse:
        """Create a new client."""
        return await self.client_service.create_client(client_data)

    async def get_client(self, client_id: int) -> ClientWithProjectsResponse:
        """Get client by ID."""
        return await self.client_service.get_client(client_id)

    async def list_clients(self) -> List[ClientWithProjectsResponse]:
        """List clients with their projects."""
        return await self.client_service.list_clients()

    async def update_client(self, client_id: int, client_data: ClientUpdate) -> ClientResponse:
        """Update a client."""
        return await self.client_service.update_client(client_id, client_data)

    async def delete_client(self, client_id: int) -> None:
        """Delete a client."""
        await self.client_service.delete_client(client_id)

    async def get_dashboard_stats(self) -> DashboardStatsResponse:
        return await self.client_service.get_dashboard_stats()
