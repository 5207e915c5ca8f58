"""
Database schema provisioning - create/drop the readers database and table
"""

import logging
from typing import Optional

import asyncpg

from readers_api.config.settings import DatabaseConfig
from readers_api.utils.error_handling import ErrorHandlingConfig

logger = logging.getLogger(__name__)

# Maintenance database used to create/drop the application database
MAINTENANCE_DATABASE = "postgres"

READERS_TABLE_DDL = """
    CREATE TABLE IF NOT EXISTS readers (
        id SERIAL PRIMARY KEY,
        name VARCHAR(255),
        email VARCHAR(255),
        created_at TIMESTAMP NOT NULL DEFAULT NOW(),
        updated_at TIMESTAMP NOT NULL DEFAULT NOW()
    )
"""


def _quote_identifier(name: str) -> str:
    """Quote a database name for use in CREATE/DROP DATABASE"""
    return '"' + name.replace('"', '""') + '"'


async def sync_readers_table(conn) -> None:
    """Create the readers table if it does not exist yet"""
    await conn.execute(READERS_TABLE_DDL)
    logger.info("Readers table synchronized")


async def ensure_schema_exists(config: Optional[DatabaseConfig] = None) -> bool:
    """
    Create the application database if it is absent

    Never raises: failures are logged with the (redacted) connection
    parameters so a misconfigured environment is easy to spot.

    Returns:
        True if the database exists afterwards, False otherwise
    """
    config = config or DatabaseConfig.from_env()

    try:
        if not config.database:
            raise ValueError("DB_NAME environment variable is required")

        conn = await asyncpg.connect(**config.connect_kwargs(database=MAINTENANCE_DATABASE))
        try:
            exists = await conn.fetchval(
                "SELECT 1 FROM pg_database WHERE datname = $1", config.database
            )
            if exists:
                logger.info(f"Database {config.database} already exists")
            else:
                # CREATE DATABASE cannot take bind parameters
                await conn.execute(f"CREATE DATABASE {_quote_identifier(config.database)}")
                logger.info(f"Database {config.database} created")
        finally:
            await conn.close()

        return True

    except Exception as e:
        logger.error("Your environment variables might be wrong. Please double check your .env file")
        logger.error(f"Environment variables are: {ErrorHandlingConfig.sanitize_data(config.as_env())}")
        logger.error(f"Database provisioning failed: {e}")
        return False


async def drop_schema(config: Optional[DatabaseConfig] = None) -> None:
    """Drop the application database (best-effort)"""
    config = config or DatabaseConfig.from_env()

    try:
        if not config.database:
            raise ValueError("DB_NAME environment variable is required")

        conn = await asyncpg.connect(**config.connect_kwargs(database=MAINTENANCE_DATABASE))
        try:
            await conn.execute(f"DROP DATABASE IF EXISTS {_quote_identifier(config.database)}")
            logger.info(f"Database {config.database} dropped")
        finally:
            await conn.close()

    except Exception as e:
        logger.warning(f"Failed to drop database {config.database}: {e}")
