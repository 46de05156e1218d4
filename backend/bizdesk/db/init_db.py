"""
Database initialization and bootstrapping.
Table creation and optional sample data.
"""

from datetime import date, timedelta
from decimal import Decimal

from bizdesk.core.logging import get_logger
from bizdesk.db.repositories.client_repository import ClientRepository
from bizdesk.db.repositories.project_repository import ProjectRepository
from bizdesk.db.repositories.task_repository import TaskRepository
from bizdesk.db.repositories.transaction_repository import TransactionRepository
from bizdesk.db.repositories.user_repository import UserRepository
from bizdesk.db.session import Database
from bizdesk.models import (
    ClientStatus,
    ProjectStatus,
    TaskPriority,
    TaskStatus,
    TaskType,
    TransactionStatus,
    TransactionType,
)

logger = get_logger(__name__)


async def create_tables(database: Database, drop_existing: bool = False) -> None:
    """
    Create all database tables from the models.

    Args:
        database: Target database handle
        drop_existing: Drop every table first
    """
    if drop_existing:
        await database.drop_tables()
    await database.create_tables()


async def seed_initial_data(database: Database) -> bool:
    """
    Insert a small sample data set.

    Returns:
        False when clients already exist and nothing was inserted
    """
    async with database.session_maker() as session:
        client_repo = ClientRepository(session)
        if await client_repo.list():
            logger.info("Sample data skipped, clients already present")
            return False

        user_repo = UserRepository(session)
        project_repo = ProjectRepository(session)
        task_repo = TaskRepository(session)
        transaction_repo = TransactionRepository(session)

        today = date.today()
        designer = await user_repo.create(name="Nadia Rahman", email="nadia@example.com")
        developer = await user_repo.create(name="Tom Becker", email="tom@example.com")

        acme = await client_repo.create(
            company_name="Acme Corp",
            contact_person="Jane Smith",
            email="jane@acme.example",
            phone="+1 555 0100",
            country="United States",
            social_contacts={"whatsapp": "+15550100", "linkedin": "acme-corp"},
            status=ClientStatus.ACTIVE,
        )
        padma = await client_repo.create(
            company_name="Padma Textiles",
            contact_person="Arif Hossain",
            email="arif@padma.example",
            country="Bangladesh",
            status=ClientStatus.ACTIVE,
        )

        website = await project_repo.create(
            title="Corporate website",
            description="Marketing site redesign",
            client_id=acme.id,
            status=ProjectStatus.IN_PROGRESS,
            start_date=today - timedelta(days=30),
            end_date=today + timedelta(days=30),
            budget=Decimal("5000.00"),
            project_live_url="https://acme.example",
        )
        catalog = await project_repo.create(
            title="Product catalog",
            client_id=padma.id,
            status=ProjectStatus.COMPLETED,
            start_date=today - timedelta(days=90),
            end_date=today - timedelta(days=10),
            budget=Decimal("2500.00"),
        )

        await task_repo.create(
            title="Homepage mockups",
            project_id=website.id,
            client_id=acme.id,
            assigned_to=designer.id,
            status=TaskStatus.COMPLETED,
            type=TaskType.DESIGN,
            priority=TaskPriority.HIGH,
            due_date=today - timedelta(days=14),
            budget=Decimal("800.00"),
        )
        await task_repo.create(
            title="Contact form",
            project_id=website.id,
            client_id=acme.id,
            assigned_to=developer.id,
            status=TaskStatus.IN_PROGRESS,
            type=TaskType.DEVELOPMENT,
            priority=TaskPriority.MEDIUM,
            due_date=today + timedelta(days=7),
        )
        await task_repo.create(
            title="Client feedback round",
            project_id=catalog.id,
            client_id=padma.id,
            status=TaskStatus.COMPLETED,
            type=TaskType.ROUND_R1,
            priority=TaskPriority.LOW,
            due_date=today - timedelta(days=20),
        )

        await transaction_repo.create(
            type=TransactionType.PAYMENT,
            amount=Decimal("1500.00"),
            description="Website deposit",
            project_id=website.id,
            status=TransactionStatus.COMPLETED,
        )
        await transaction_repo.create(
            type=TransactionType.EXPENSE,
            amount=Decimal("120.00"),
            description="Stock photography",
            project_id=website.id,
            status=TransactionStatus.COMPLETED,
        )
        await transaction_repo.create(
            type=TransactionType.INVOICE,
            amount=Decimal("2500.00"),
            description="Catalog final invoice",
            project_id=catalog.id,
            status=TransactionStatus.PENDING,
        )

        await session.commit()

    logger.info("Sample data inserted")
    return True
