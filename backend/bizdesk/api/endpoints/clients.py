"""
Client API endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from bizdesk.db.session import get_db
from bizdesk.controllers.client_controller import ClientController
from bizdesk.schemas.client import (
    ClientCreate,
    ClientUpdate,
    ClientResponse,
    ClientWithProjectsResponse,
    DashboardStatsResponse,
)

router = APIRouter()


@router.get("", response_model=List[ClientWithProjectsResponse])
async def list_clients(
    db: AsyncSession = Depends(get_db),
) -> List[ClientWithProjectsResponse]:
    """List clients with their projects."""
    controller = ClientController(db)
    return await controller.list_clients()


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(
    client_data: ClientCreate,
    db: AsyncSession = Depends(get_db),
) -> ClientResponse:
    """Create a new client."""
    controller = ClientController(db)
    return await controller.create_client(client_data)


# Declared before /{client_id} so "dashboard" is not parsed as an id
@router.get("/dashboard/stats", response_model=DashboardStatsResponse)
async def get_dashboard_stats(
    db: AsyncSession = Depends(get_db),
) -> DashboardStatsResponse:
    """Client and project counts for the dashboard."""
    controller = ClientController(db)
    return await controller.get_dashboard_stats()


@router.get("/{client_id}", response_model=ClientWithProjectsResponse)
async def get_client(
    client_id: int,
    db: AsyncSession = Depends(get_db),
) -> ClientWithProjectsResponse:
    """Get client by ID, with its projects."""
    controller = ClientController(db)
    return await controller.get_client(client_id)


@router.put("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: int,
    client_data: ClientUpdate,
    db: AsyncSession = Depends(get_db),
) -> ClientResponse:
    """Update a client."""
    controller = ClientController(db)
    return await controller.update_client(client_id, client_data)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_client(
    client_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a client. Its projects are kept without a client."""
    controller = ClientController(db)
    await controller.delete_client(client_id)
