"""
Record management endpoints.

Provides CRUD operations for records (mounted under the configured
resource prefix, /teas by default):
- POST /            - Create new record
- GET /             - List records
- GET /{record_id}  - Get one record
- PUT /{record_id}  - Replace a record's name and price
- DELETE /{record_id} - Delete a record

Domain errors raised by the service are turned into responses by the
exception handlers registered in api.server.
"""

from fastapi import APIRouter, Depends, status

from api.dependencies import access_operation, get_resource_service
from api.schemas.record import (
    RecordDeleteResponse,
    RecordResponse,
    RecordWriteRequest,
)
from core.logging import get_logger
from services.resource_service import ResourceService


logger = get_logger(__name__)
router = APIRouter(tags=["Records"])


@router.post(
    "",
    response_model=RecordResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(access_operation("create"))],
)
async def create_record(
    request: RecordWriteRequest,
    service: ResourceService = Depends(get_resource_service),
) -> RecordResponse:
    """Create a record. The response carries the newly assigned id."""
    record = service.create(request.name, request.price)
    return RecordResponse.from_record(record)


@router.get(
    "",
    response_model=list[RecordResponse],
    dependencies=[Depends(access_operation("list_all"))],
)
async def list_records(
    service: ResourceService = Depends(get_resource_service),
) -> list[RecordResponse]:
    """Return every record in creation order."""
    return [RecordResponse.from_record(record) for record in service.list_all()]


@router.get(
    "/{record_id}",
    response_model=RecordResponse,
    dependencies=[Depends(access_operation("get"))],
)
async def get_record(
    record_id: str,
    service: ResourceService = Depends(get_resource_service),
) -> RecordResponse:
    """
    Get a single record.

    Returns 400 if record_id is not a positive integer and 404 if no
    record has it.
    """
    record = service.get(service.parse_record_id(record_id))
    return RecordResponse.from_record(record)


@router.put(
    "/{record_id}",
    response_model=RecordResponse,
    dependencies=[Depends(access_operation("update"))],
)
async def update_record(
    record_id: str,
    request: RecordWriteRequest,
    service: ResourceService = Depends(get_resource_service),
) -> RecordResponse:
    """Replace name and price of an existing record. The id never changes."""
    record = service.update(
        service.parse_record_id(record_id),
        request.name,
        request.price,
    )
    return RecordResponse.from_record(record)


@router.delete(
    "/{record_id}",
    response_model=RecordDeleteResponse,
    dependencies=[Depends(access_operation("delete"))],
)
async def delete_record(
    record_id: str,
    service: ResourceService = Depends(get_resource_service),
) -> RecordDeleteResponse:
    """Delete a record permanently. Its id is never handed out again."""
    deleted_id = service.delete(service.parse_record_id(record_id))
    return RecordDeleteResponse(id=deleted_id)
