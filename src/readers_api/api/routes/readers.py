"""
Reader management API routes
All database access goes through the readers service.
"""

import logging
from typing import List
from fastapi import APIRouter, HTTPException, Depends, Response

from readers_api.models.reader import (
    ReaderCreateRequest,
    ReaderUpdateRequest,
    ReaderResponse,
    ReaderUpdateResponse,
    ErrorResponse
)
from readers_api.services.readers_service import ReadersService, get_readers_service
from readers_api.utils.error_handling import set_endpoint_context

router = APIRouter()
logger = logging.getLogger(__name__)

READER_NOT_FOUND = "The reader does not exist."

@router.post("", response_model=ReaderResponse, status_code=201)
async def create_reader(
    request: ReaderCreateRequest,
    readers_service: ReadersService = Depends(get_readers_service)
):
    """Create a new reader"""
    set_endpoint_context("readers.create")

    reader = await readers_service.insert(request.model_dump())

    logger.info(f"Created reader {reader['id']}")
    return reader

@router.get("", response_model=List[ReaderResponse])
async def list_readers(
    readers_service: ReadersService = Depends(get_readers_service)
):
    """List all readers"""
    set_endpoint_context("readers.list")

    return await readers_service.fetch_all()

@router.patch(
    "/{reader_id}",
    response_model=ReaderUpdateResponse,
    responses={404: {"model": ErrorResponse}}
)
async def update_reader(
    reader_id: int,
    request: ReaderUpdateRequest,
    readers_service: ReadersService = Depends(get_readers_service)
):
    """Update the supplied fields of a reader"""
    set_endpoint_context("readers.update")

    # Only fields present in the body are written
    updated = await readers_service.update_by_id(reader_id, request.model_dump(exclude_unset=True))

    if updated == 0:
        logger.warning(f"Update requested for missing reader {reader_id}")
        raise HTTPException(status_code=404, detail=READER_NOT_FOUND)

    return ReaderUpdateResponse(updated=updated)

@router.delete(
    "/{reader_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"model": ErrorResponse}}
)
async def delete_reader(
    reader_id: int,
    readers_service: ReadersService = Depends(get_readers_service)
):
    """Delete a reader"""
    set_endpoint_context("readers.delete")

    deleted = await readers_service.delete_by_id(reader_id)

    if deleted == 0:
        logger.warning(f"Delete requested for missing reader {reader_id}")
        raise HTTPException(status_code=404, detail=READER_NOT_FOUND)

    logger.info(f"Deleted reader {reader_id}")
    return Response(status_code=204)
