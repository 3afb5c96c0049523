"""
Base service layer for single-table database operations
"""

import asyncio
import logging
from typing import Dict, Any, List, Optional, Sequence, Tuple
from dataclasses import dataclass

import asyncpg

from contracts.base import ResourceContract

logger = logging.getLogger(__name__)

VALIDATION_ERROR = "VALIDATION_ERROR"
STORAGE_ERROR = "STORAGE_ERROR"

# Failures raised by asyncpg or the network while talking to the backend
BACKEND_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError)


class StorageError(RuntimeError):
    """Any failure reported by the persistence backend"""


@dataclass
class ServiceResult:
    """Result from service operation"""
    success: bool
    data: Optional[List[Dict[str, Any]]] = None
    count: int = 0
    error: Optional[str] = None
    error_type: Optional[str] = None
    meta: Optional[Dict[str, Any]] = None

    @classmethod
    def failure(cls, error: str, error_type: str) -> "ServiceResult":
        return cls(success=False, error=error, error_type=error_type)


class BaseService:
    """Base service that runs one parameterized statement per operation against a pool"""

    def __init__(self, contract: ResourceContract, db_pool: Optional[asyncpg.Pool]):
        self.contract = contract
        self.resource_name = contract.resource
        self.db_pool = db_pool
        logger.debug(f"BaseService initialized for resource: {self.resource_name}")

    # Statement execution

    async def _fetch(self, query: str, params: Sequence[Any]) -> List[Dict[str, Any]]:
        """Run a SELECT and return rows as column-keyed dicts"""
        if not self.db_pool:
            raise StorageError("Database pool not initialized")

        logger.info(f"Executing query: {query}")
        logger.info(f"Parameters: {list(params)}")

        try:
            async with self.db_pool.acquire() as conn:
                rows = await conn.fetch(query, *params)
        except BACKEND_ERRORS as e:
            logger.error(f"Database error during {self.resource_name} read: {e}")
            raise StorageError(str(e)) from e

        return [dict(row) for row in rows]

    async def _execute(self, query: str, params: Sequence[Any]) -> Dict[str, Any]:
        """Run a write statement and return its write metadata"""
        if not self.db_pool:
            raise StorageError("Database pool not initialized")

        logger.info(f"Executing statement: {query}")
        logger.info(f"Parameters: {list(params)}")

        try:
            async with self.db_pool.acquire() as conn:
                status = await conn.execute(query, *params)
        except asyncpg.UniqueViolationError as e:
            logger.warning(f"Unique constraint violation on {self.resource_name}: {e}")
            raise StorageError(str(e)) from e
        except BACKEND_ERRORS as e:
            logger.error(f"Database error during {self.resource_name} write: {e}")
            raise StorageError(str(e)) from e

        return self._write_meta(status)

    @staticmethod
    def _write_meta(status: Optional[str]) -> Dict[str, Any]:
        """
        Convert an asyncpg command status into write metadata

        asyncpg returns e.g. "INSERT 0 1", "UPDATE 3" or "DELETE 0"; the last
        token is the number of affected rows.
        """
        changes = 0
        if status:
            try:
                changes = int(status.split()[-1])
            except ValueError:
                changes = 0
        return {
            "success": True,
            "meta": {
                "command": status,
                "changes": changes
            }
        }

    # Statement builders: values are always bound, never interpolated

    def _build_select_query(self, record_id: Optional[Any] = None) -> Tuple[str, List[Any]]:
        query = f"SELECT {', '.join(self.contract.columns)} FROM {self.contract.table}"
        params = []
        if record_id is not None:
            query += f" WHERE {self.contract.primary_key.column} = $1"
            params.append(record_id)
        return query, params

    def _build_insert_query(self, values: Dict[str, Any]) -> Tuple[str, List[Any]]:
        """Build INSERT for every contract column, in contract order"""
        columns = self.contract.columns
        placeholders = [f"${index}" for index in range(1, len(columns) + 1)]
        params = [values[column] for column in columns]

        query = (
            f"INSERT INTO {self.contract.table} ({', '.join(columns)}) "
            f"VALUES ({', '.join(placeholders)})"
        )
        return query, params

    def _build_update_query(self, record_id: Any, assignments: List[Tuple[str, Any]]) -> Tuple[str, List[Any]]:
        """Build UPDATE ... SET from (column, value) pairs keyed by primary key"""
        if not assignments:
            raise ValueError("UPDATE requires at least one assignment")

        set_parts = []
        params = []
        param_counter = 1
        for column, value in assignments:
            set_parts.append(f"{column} = ${param_counter}")
            params.append(value)
            param_counter += 1

        query = (
            f"UPDATE {self.contract.table} SET {', '.join(set_parts)} "
            f"WHERE {self.contract.primary_key.column} = ${param_counter}"
        )
        params.append(record_id)
        return query, params

    def _build_delete_query(self, record_id: Any) -> Tuple[str, List[Any]]:
        query = f"DELETE FROM {self.contract.table} WHERE {self.contract.primary_key.column} = $1"
        return query, [record_id]
