"""
Base service layer for single-table database operations
"""

import logging
from typing import Dict, Any, List, Optional, Sequence

import asyncpg

from readers_api.database.connection import get_db_pool

logger = logging.getLogger(__name__)

# Range of a PostgreSQL INTEGER (SERIAL) key
INT4_MIN = -2**31
INT4_MAX = 2**31 - 1


def parse_affected_rows(status: str) -> int:
    """
    Parse the number of affected rows from an asyncpg command status

    asyncpg returns tags like "UPDATE 1" or "DELETE 0"
    """
    if not status:
        return 0
    count = status.split()[-1]
    return int(count) if count.isdigit() else 0


class BaseService:
    """Base service with direct SQL access to one table"""

    def __init__(
        self,
        table_name: str,
        writable_fields: Sequence[str],
        pk_field: str = "id",
        updated_at_field: Optional[str] = "updated_at"
    ):
        self.table_name = table_name
        self.writable_fields = list(writable_fields)
        self.pk_field = pk_field
        self.updated_at_field = updated_at_field
        logger.info(f"BaseService initialized for table: {table_name}")

    def _get_pool(self):
        db_pool = get_db_pool()
        if not db_pool:
            raise RuntimeError("Database pool not initialized")
        return db_pool

    def _writable_values(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Keep only columns that may be written through the service"""
        unknown = set(data) - set(self.writable_fields)
        if unknown:
            logger.warning(f"Ignoring non-writable fields for {self.table_name}: {sorted(unknown)}")
        return {key: value for key, value in data.items() if key in self.writable_fields}

    def _key_in_range(self, record_id: Any) -> bool:
        """An integer key outside the INTEGER column range cannot match any row"""
        if isinstance(record_id, int) and not INT4_MIN <= record_id <= INT4_MAX:
            logger.info(f"Key {record_id} is outside the {self.table_name}.{self.pk_field} range - no rows match")
            return False
        return True

    async def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a new record

        Args:
            data: Dictionary of field values to insert

        Returns:
            The persisted record, including generated columns
        """
        values = self._writable_values(data)
        query, params = self._build_insert_query(values)

        logger.info(f"Executing INSERT: {query}")
        logger.info(f"Parameters: {params}")

        async with self._get_pool().acquire() as conn:
            try:
                row = await conn.fetchrow(query, *params)
            except asyncpg.PostgresError as e:
                logger.error(f"Database error during INSERT: {e}")
                raise RuntimeError(f"Database INSERT failed: {str(e)}") from e

        if not row:
            raise RuntimeError("Insert operation failed - no data returned")

        return dict(row)

    async def read_all(self) -> List[Dict[str, Any]]:
        """Read every record ordered by primary key"""
        query = f"SELECT * FROM {self.table_name} ORDER BY {self.pk_field}"

        logger.info(f"Executing READ query: {query}")

        async with self._get_pool().acquire() as conn:
            try:
                rows = await conn.fetch(query)
            except asyncpg.PostgresError as e:
                logger.error(f"Database error: {e}")
                raise RuntimeError(f"Database query failed: {str(e)}") from e

        return [dict(row) for row in rows]

    async def get_by_id(self, record_id: Any) -> Optional[Dict[str, Any]]:
        """
        Get a single record by primary key

        Returns:
            The record, or None when no record matches
        """
        if not self._key_in_range(record_id):
            return None

        query = f"SELECT * FROM {self.table_name} WHERE {self.pk_field} = $1"

        logger.info(f"Executing READ query: {query}")
        logger.info(f"Parameters: [{record_id}]")

        async with self._get_pool().acquire() as conn:
            try:
                row = await conn.fetchrow(query, record_id)
            except asyncpg.PostgresError as e:
                logger.error(f"Database error: {e}")
                raise RuntimeError(f"Database query failed: {str(e)}") from e

        return dict(row) if row else None

    async def update(self, record_id: Any, data: Dict[str, Any]) -> int:
        """
        Update the supplied fields of a record

        Args:
            record_id: Primary key value of record to update
            data: Dictionary of field values to update; omitted fields are untouched

        Returns:
            Number of rows affected (0 when the record does not exist)
        """
        if not self._key_in_range(record_id):
            return 0

        values = self._writable_values(data)
        query, params = self._build_update_query(record_id, values)

        logger.info(f"Executing UPDATE: {query}")
        logger.info(f"Parameters: {params}")

        async with self._get_pool().acquire() as conn:
            try:
                status = await conn.execute(query, *params)
            except asyncpg.PostgresError as e:
                logger.error(f"Database error during UPDATE: {e}")
                raise RuntimeError(f"Database UPDATE failed: {str(e)}") from e

        return parse_affected_rows(status)

    async def delete(self, record_id: Any) -> int:
        """
        Delete a record by primary key

        Returns:
            Number of rows affected (0 when the record does not exist)
        """
        if not self._key_in_range(record_id):
            return 0

        query = f"DELETE FROM {self.table_name} WHERE {self.pk_field} = $1"

        logger.info(f"Executing DELETE: {query}")
        logger.info(f"Parameters: [{record_id}]")

        async with self._get_pool().acquire() as conn:
            try:
                status = await conn.execute(query, record_id)
            except asyncpg.PostgresError as e:
                logger.error(f"Database error during DELETE: {e}")
                raise RuntimeError(f"Database DELETE failed: {str(e)}") from e

        return parse_affected_rows(status)

    def _build_insert_query(self, values: Dict[str, Any]) -> tuple[str, List[Any]]:
        """Build SQL INSERT query"""
        if not values:
            return f"INSERT INTO {self.table_name} DEFAULT VALUES RETURNING *", []

        field_names = list(values.keys())
        placeholders = [f"${index}" for index in range(1, len(field_names) + 1)]

        query = (
            f"INSERT INTO {self.table_name} ({', '.join(field_names)}) "
            f"VALUES ({', '.join(placeholders)}) RETURNING *"
        )
        return query, list(values.values())

    def _build_update_query(self, record_id: Any, values: Dict[str, Any]) -> tuple[str, List[Any]]:
        """Build SQL UPDATE query; the primary key is always the last parameter"""
        params = []
        set_parts = []
        param_counter = 1

        for field_name, value in values.items():
            set_parts.append(f"{field_name} = ${param_counter}")
            params.append(value)
            param_counter += 1

        if self.updated_at_field:
            set_parts.append(f"{self.updated_at_field} = NOW()")
        elif not set_parts:
            # Keep the statement valid so the row count still reports existence
            set_parts.append(f"{self.pk_field} = {self.pk_field}")

        query = f"UPDATE {self.table_name} SET {', '.join(set_parts)} WHERE {self.pk_field} = ${param_counter}"
        params.append(record_id)

        return query, params
