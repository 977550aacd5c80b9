"""
Record Controller
=================

FastAPI controller for record creation.
"""
import logging
from typing import Any, Optional

from bson import ObjectId
from fastapi import APIRouter, Depends, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from mpocket.application.dto.record_dto import (
    ErrorResponse,
    RecordCreateRequest,
    RecordCreatedResponse,
)
from mpocket.application.services.record_service import RecordService
from mpocket.api.v1.dependencies import get_record_service
from mpocket.domain.exceptions import DuplicateKeyError, DuplicateRecordError, StoreError

logger = logging.getLogger(__name__)
router = APIRouter(tags=["records"])

CREATED_MESSAGE = "✅ Product created"
DUPLICATE_KEY_MESSAGE = "❌ Duplicate key error"
CREATE_FAILED_MESSAGE = "❌ Error creating product"


def _error_response(status_code: int, message: str, error: Optional[Any] = None) -> JSONResponse:
    """Create a JSON error response ({message} or {message, error})."""
    body = ErrorResponse(message=message, error=error).model_dump(exclude_none=True)
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body, custom_encoder={ObjectId: str}),
    )


@router.post(
    "/products",
    response_model=RecordCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Mobile, email or PAN already exists"},
        500: {"model": ErrorResponse, "description": "Storage error"},
    },
    summary="Create a record",
    description="""
    Create a person/employee record.

    The record is rejected when another record already uses the same mobile,
    email or pancard. Undeclared fields in the body are stored as-is.
    """
)
def create_record(
    request: RecordCreateRequest,
    service: RecordService = Depends(get_record_service),
):
    """Create a record iff no conflicting record exists."""
    try:
        record = service.create_record(
            mobile=request.mobile,
            name=request.name,
            dob=request.dob,
            email=request.email,
            employee_type=request.employee_type,
            pancard=request.pancard,
            extra=request.extra_fields,
        )
    except DuplicateRecordError as e:
        return _error_response(status.HTTP_400_BAD_REQUEST, e.message)
    except DuplicateKeyError as e:
        # Lost the race between the lookup and the insert
        logger.warning("Insert rejected by unique index: %s", e.message)
        return _error_response(status.HTTP_400_BAD_REQUEST, DUPLICATE_KEY_MESSAGE, e.details)
    except StoreError as e:
        logger.exception("Failed to create record")
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, CREATE_FAILED_MESSAGE, e.message)

    payload = record.to_dict()
    return RecordCreatedResponse(message=CREATED_MESSAGE, record=payload, product=payload)
