"""
pytest configuration and fixtures for the Readers API test suite
Route tests run against an in-memory readers service, no database required.
"""

import sys
from datetime import datetime
from pathlib import Path
from typing import Dict, Any, List, Optional

import httpx
import pytest
import pytest_asyncio

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from readers_api.app import app
from readers_api.services.readers_service import ReadersService, get_readers_service


class InMemoryReadersService(ReadersService):
    """Readers service double keeping records in a dict"""

    def __init__(self):
        super().__init__()
        self.records: Dict[int, Dict[str, Any]] = {}
        self._next_id = 1

    async def insert(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        now = datetime.utcnow()
        record = {
            "id": self._next_id,
            "name": fields.get("name"),
            "email": fields.get("email"),
            "created_at": now,
            "updated_at": now,
        }
        self.records[record["id"]] = record
        self._next_id += 1
        return dict(record)

    async def fetch_all(self) -> List[Dict[str, Any]]:
        return [dict(record) for _, record in sorted(self.records.items())]

    async def fetch_by_id(self, reader_id: int) -> Optional[Dict[str, Any]]:
        record = self.records.get(reader_id)
        return dict(record) if record else None

    async def update_by_id(self, reader_id: int, fields: Dict[str, Any]) -> int:
        record = self.records.get(reader_id)
        if record is None:
            return 0
        record.update(self._writable_values(fields))
        record["updated_at"] = datetime.utcnow()
        return 1

    async def delete_by_id(self, reader_id: int) -> int:
        return 1 if self.records.pop(reader_id, None) else 0


@pytest.fixture
def readers_service():
    """Fresh in-memory readers service for each test"""
    return InMemoryReadersService()


@pytest_asyncio.fixture
async def client(readers_service):
    """HTTP client bound to the app with the in-memory service swapped in"""
    app.dependency_overrides[get_readers_service] = lambda: readers_service
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def seeded_readers(readers_service):
    """Three readers already in the store"""
    return [
        await readers_service.insert({"name": "Mia Corvere", "email": "mia@redchurch.com"}),
        await readers_service.insert({"name": "Bilbo Baggins", "email": "bilbo@bagend.com"}),
        await readers_service.insert({"name": "Rand al'Thor", "email": "rand@tworivers.com"}),
    ]
