"""
Database connection and pool management
"""

import asyncpg
import logging
from typing import Optional

from readers_api.config.settings import DatabaseConfig
from readers_api.database.schema import sync_readers_table

logger = logging.getLogger(__name__)

# Global database pool
db_pool = None

async def init_database(config: Optional[DatabaseConfig] = None):
    """Initialize database connection pool and synchronize the readers table"""
    global db_pool
    config = config or DatabaseConfig.from_env()

    db_pool = await asyncpg.create_pool(
        **config.connect_kwargs(),
        min_size=2,
        max_size=10,
        command_timeout=60,
    )

    # Test connection and make sure the table is there
    async with db_pool.acquire() as conn:
        await conn.fetchval("SELECT 1")
        await sync_readers_table(conn)

    logger.info(f"Database initialized successfully ({config.host}:{config.port}/{config.database})")


async def close_database():
    """Close database connection pool"""
    global db_pool
    if db_pool:
        await db_pool.close()
        db_pool = None
    logger.info("Database connections closed")

def get_db_pool():
    """Get the database pool instance"""
    return db_pool
