#!/usr/bin/env python3
"""
Create the database schema from the models, optionally with sample data.
Run with: python setup_database.py [--drop] [--sample-data]
"""

import argparse
import asyncio
import sys

from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError

from bizdesk.core.config import settings
from bizdesk.core.logging import setup_logging
from bizdesk.db.init_db import create_tables, seed_initial_data
from bizdesk.db.session import Database


async def run(drop: bool, sample_data: bool) -> None:
    database = Database(settings.database_url, echo=settings.DB_ECHO)
    try:
        await create_tables(database, drop_existing=drop)
        print("Tables created")
        if sample_data:
            inserted = await seed_initial_data(database)
            print("Sample data added" if inserted else "Sample data skipped (clients already exist)")
    finally:
        await database.dispose()


def main() -> int:
    parser = argparse.ArgumentParser(description="Set up the Bizdesk database")
    parser.add_argument("--drop", action="store_true", help="drop existing tables first")
    parser.add_argument("--sample-data", action="store_true", help="insert sample clients, projects and transactions")
    args = parser.parse_args()

    setup_logging()
    print(f"Setting up database: {make_url(settings.database_url).render_as_string(hide_password=True)}")
    try:
        asyncio.run(run(args.drop, args.sample_data))
    except (SQLAlchemyError, OSError) as e:
        print(f"ERROR: database setup failed: {e}")
        return 1
    print("Database setup complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
