"""
Create Tables Script
Creates the jobs table in the configured database if it does not exist
"""
import asyncio
import sys

from loguru import logger

from jobly.core.config import settings
from jobly.core.database import Database
from jobly.core.logging_config import configure_logging


async def create_tables() -> bool:
    db = Database.from_settings(settings)
    try:
        if not await db.health_check():
            logger.error(f"Cannot reach database for {settings.APP_NAME}")
            return False
        await db.init_db()
        return True
    finally:
        await db.close()


if __name__ == "__main__":
    configure_logging(settings)
    if not asyncio.run(create_tables()):
        sys.exit(1)
