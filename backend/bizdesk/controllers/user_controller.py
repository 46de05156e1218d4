"""
User controller.
"""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from bizdesk.controllers.base_controller import BaseController
from bizdesk.services.user_service import UserService
from bizdesk.schemas.user import UserCreate, UserUpdate, UserResponse


class UserController(BaseController):
    """Controller for user operations."""

    def __init__(self, session: AsyncSession):
        self.user_service = UserService(session)

    async def create_user(self, user_data: UserCreate) -> UserResponse:
        """Create a new user."""
        return await self.user_service.create_user(user_data)

    async def get_user(self, user_id: int) -> UserResponse:
        """Get user by ID."""
        return await self.user_service.get_user(user_id)

    async def list_users(self) -> List[UserResponse]:
        return await self.user_service.list_users()

    async def update_user(self, user_id: int, user_data: UserUpdate) -> UserResponse:
        """Update a user."""
        return await self.user_service.update_user(user_id, user_data)

    async def delete_user(self, user_id: int) -> None:
        """Delete a user."""
        await self.user_service.delete_user(user_id)
