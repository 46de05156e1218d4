"""
User service with business logic.
"""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from bizdesk.core.exceptions import ConflictError, NotFoundError
from bizdesk.core.logging import get_logger
from bizdesk.db.repositories.user_repository import UserRepository
from bizdesk.schemas.user import UserCreate, UserUpdate, UserResponse
from bizdesk.services.base_service import BaseService

logger = get_logger(__name__)


class UserService(BaseService):
    """Service for user operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repo = UserRepository(session)

    async def _ensure_email_free(self, email: str, user_id: int = None) -> None:
        existing = await self.user_repo.get_by_email(email)
        if existing and existing.id != user_id:
            raise ConflictError(f"A user with email {email} already exists", details={"field": "email"})

    async def list_users(self) -> List[UserResponse]:
        users = await self.user_repo.list()
        return [UserResponse.model_validate(user) for user in users]

    async def get_user(self, user_id: int) -> UserResponse:
        user = await self.user_repo.get(user_id)
        if not user:
            raise NotFoundError("User", user_id)
        return UserResponse.model_validate(user)

    async def create_user(self, user_data: UserCreate) -> UserResponse:
        await self._ensure_email_free(user_data.email)
        user = await self.user_repo.create(**user_data.model_dump())
        await self.session.commit()
        logger.info("User created", extra={"user_id": user.id})
        return UserResponse.model_validate(user)

    async def update_user(self, user_id: int, user_data: UserUpdate) -> UserResponse:
        if not await self.user_repo.exists(user_id):
            raise NotFoundError("User", user_id)

        update_dict = user_data.model_dump(exclude_unset=True)
        if update_dict.get("email"):
            await self._ensure_email_free(update_dict["email"], user_id)

        user = await self.user_repo.update(user_id, **update_dict)
        await self.session.commit()
        logger.info("User updated", extra={"user_id": user_id, "fields": sorted(update_dict)})
        return UserResponse.model_validate(user)

    async def delete_user(self, user_id: int) -> None:
        """Delete a user; tasks assigned to them become unassigned."""
        if not await self.user_repo.delete(user_id):
            raise NotFoundError("User", user_id)
        await self.session.commit()
        logger.info("User deleted", extra={"user_id": user_id})
