"""
Readers service - storage operations for library reader records
"""

import logging
from typing import Dict, Any, List, Optional

from readers_api.services.base_service import BaseService

logger = logging.getLogger(__name__)

class ReadersService(BaseService):
    """Service for reader record operations"""

    def __init__(self):
        super().__init__("readers", writable_fields=("name", "email"))

    async def insert(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a new reader

        Args:
            fields: name and email of the reader

        Returns:
            The persisted reader including its generated id
        """
        logger.info("Creating reader")
        return await self.create(fields)

    async def fetch_all(self) -> List[Dict[str, Any]]:
        """Get every reader in insertion order"""
        return await self.read_all()

    async def fetch_by_id(self, reader_id: int) -> Optional[Dict[str, Any]]:
        """Get a reader by id, or None when it does not exist"""
        return await self.get_by_id(reader_id)

    async def update_by_id(self, reader_id: int, fields: Dict[str, Any]) -> int:
        """
        Apply a partial update to a reader

        Args:
            reader_id: Id of the reader
            fields: Subset of name/email to change

        Returns:
            Number of readers updated (0 or 1)
        """
        logger.info(f"Updating reader {reader_id} with fields: {list(fields.keys())}")
        return await self.update(reader_id, fields)

    async def delete_by_id(self, reader_id: int) -> int:
        """Delete a reader; returns the number of readers removed (0 or 1)"""
        logger.info(f"Deleting reader {reader_id}")
        return await self.delete(reader_id)

# Global service instance
_readers_service: Optional[ReadersService] = None

def get_readers_service() -> ReadersService:
    """Get the global readers service instance"""
    global _readers_service
    if _readers_service is None:
        _readers_service = ReadersService()
    return _readers_service
