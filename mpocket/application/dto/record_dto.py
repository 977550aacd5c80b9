"""
Record DTO
==========

Pydantic models for record API requests and responses.
"""
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field


class RecordCreateRequest(BaseModel):
    """DTO for creating a record. Undeclared fields are accepted and kept."""
    model_config = ConfigDict(
        extra="allow",
        coerce_numbers_to_str=True,
        json_schema_extra={
            "example": {
                "mobile": "9990001111",
                "name": "A",
                "dob": "2000-01-01",
                "email": "a@x.com",
                "employeeType": "staff",
                "pancard": "ABCDE1234F",
            }
        },
    )

    mobile: str = Field(..., min_length=1, description="Mobile number (unique)")
    name: str = Field(..., min_length=1, description="Full name")
    dob: str = Field(..., min_length=1, description="Date of birth, stored as given")
    email: str = Field(..., min_length=1, description="Email address (unique)")
    employee_type: str = Field(..., alias="employeeType", min_length=1, description="Employee type")
    pancard: str = Field(..., min_length=1, description="PAN card number (unique)")

    @property
    def extra_fields(self) -> Dict[str, Any]:
        """Fields sent by the caller that are not declared above."""
        return dict(self.model_extra or {})


class RecordCreatedResponse(BaseModel):
    """DTO for a created record. ``product`` mirrors ``record`` for older clients."""
    message: str
    record: Dict[str, Any]
    product: Dict[str, Any]


class ErrorResponse(BaseModel):
    """DTO for duplicate and storage errors."""
    message: str
    error: Optional[Any] = None
