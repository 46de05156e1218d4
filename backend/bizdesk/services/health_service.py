"""
Health service.
Provides health check functionality.
"""

import time

from sqlalchemy.exc import SQLAlchemyError

from bizdesk.core.logging import get_logger
from bizdesk.db.repositories.health_repository import HealthRepository
from bizdesk.db.session import Database
from bizdesk.schemas.health import HealthResponse
from bizdesk.services.base_service import BaseService

logger = get_logger(__name__)


class HealthService(BaseService):
    """Service for health check operations."""

    def __init__(self, database: Database):
        self.database = database
        self.start_time = time.time()

    async def get_health(self) -> HealthResponse:
        """
        Get system health status.

        Returns:
            HealthResponse with status, uptime, and checks
        """
        uptime_seconds = int(time.time() - self.start_time)
        uptime_str = f"PT{uptime_seconds}S"  # ISO 8601 duration format

        checks = {}
        try:
            async with self.database.session_maker() as session:
                repo = HealthRepository(session=session)
                db_status = await repo.check_database()
                checks["database"] = "ok" if db_status else "error"
        except (SQLAlchemyError, OSError) as e:
            logger.warning("Database health check failed", extra={"error": str(e)})
            checks["database"] = f"error: {str(e)}"

        status = "ok" if all(check == "ok" for check in checks.values()) else "degraded"

        return HealthResponse(
            status=status,
            uptime=uptime_str,
            checks=checks,
        )
