"""
Reader-related Pydantic models
"""

import json
from typing import Any, Optional
from datetime import datetime
from pydantic import BaseModel, field_validator


def as_text(value: Any) -> Optional[str]:
    """Store any JSON value in a text column; strings and null pass through"""
    if value is None or isinstance(value, str):
        return value
    return json.dumps(value)


class ReaderFields(BaseModel):
    """Reader columns as sent by clients; values are not validated, only stored as text"""
    name: Any = None
    email: Any = None

    @field_validator("name", "email")
    @classmethod
    def store_as_text(cls, value: Any) -> Optional[str]:
        return as_text(value)


class ReaderCreateRequest(ReaderFields):
    pass


class ReaderUpdateRequest(ReaderFields):
    pass


class ReaderResponse(BaseModel):
    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ReaderUpdateResponse(BaseModel):
    updated: int


class ErrorResponse(BaseModel):
    error: str
    trace_id: Optional[str] = None
    timestamp: Optional[str] = None
