"""
API router that aggregates all endpoint routers.
No route requires authentication.
"""

from fastapi import APIRouter

from bizdesk.api.endpoints import (
    health,
    clients,
    projects,
    tasks,
    finance,
    users,
    lookups,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(clients.router, prefix="/clients", tags=["clients"])
api_router.include_router(projects.router, prefix="/projects", tags=["projects"])
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
api_router.include_router(finance.router, prefix="/finance", tags=["finance"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(lookups.router, tags=["lookups"])
