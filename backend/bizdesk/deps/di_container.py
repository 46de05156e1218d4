"""
Dependency injection container using dependency-injector.
Wires the database handle and the health check chain.
"""

from dependency_injector import containers, providers

from bizdesk.db.session import Database
from bizdesk.services.health_service import HealthService
from bizdesk.controllers.health_controller import HealthController


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Configuration
    config = providers.Configuration()

    # One database handle per process; disposed by the application lifespan
    database = providers.Singleton(
        Database,
        url=config.database_url,
        pool_size=config.pool_size,
        max_overflow=config.max_overflow,
        echo=config.echo,
    )

    # Services
    health_service = providers.Singleton(
        HealthService,
        database=database,
    )

    # Controllers
    health_controller = providers.Factory(
        HealthController,
        health_service=health_service,
    )


def build_container(settings) -> Container:
    """Create a container configured from application settings."""
    container = Container()
    container.config.from_dict({
        "database_url": settings.database_url,
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "echo": settings.DB_ECHO,
    })
    return container
