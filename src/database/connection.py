"""
Database connection and pool management
"""

import asyncpg
import logging
from typing import Optional

from config.settings import Settings

logger = logging.getLogger(__name__)

INVOICES_TABLE_DDL = """
    CREATE TABLE IF NOT EXISTS invoices (
        id BIGINT PRIMARY KEY,
        bill_no TEXT NOT NULL,
        slip_no TEXT NOT NULL,
        customer_id TEXT NOT NULL,
        customer_name TEXT NOT NULL,
        products TEXT NOT NULL,
        quantity DOUBLE PRECISION NOT NULL,
        unit_price DOUBLE PRECISION NOT NULL,
        invoice_date TEXT NOT NULL
    )
"""

# Global database pool
db_pool: Optional[asyncpg.Pool] = None

async def init_database(settings: Settings):
    """Initialize database connection pool"""
    global db_pool
    if not settings.database_url:
        raise ValueError("DATABASE_URL environment variable is required")

    db_pool = await asyncpg.create_pool(
        settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        command_timeout=settings.db_command_timeout,
        statement_cache_size=0  # pgbouncer compatibility
    )

    # Test connection
    async with db_pool.acquire() as conn:
        await conn.fetchval("SELECT 1")
        if settings.auto_create_schema:
            await conn.execute(INVOICES_TABLE_DDL)
            logger.info("Invoices table ensured")

    logger.info("Database initialized successfully")


async def close_database():
    """Close database connection pool"""
    global db_pool
    if db_pool:
        await db_pool.close()
        db_pool = None
    logger.info("Database connections closed")

def get_db_pool() -> Optional[asyncpg.Pool]:
    """Get the database pool instance"""
    return db_pool
