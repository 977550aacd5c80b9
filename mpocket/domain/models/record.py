"""
Record Model
============

Domain model representing a person/employee record.
This is a pure domain object with no infrastructure dependencies.
"""
from typing import Any, Dict, Optional
from dataclasses import dataclass, field

from mpocket.domain.constants.record_fields import RecordFields


@dataclass
class Record:
    """
    Record domain model.

    The six declared fields are required. Any other field supplied by the
    caller is kept in ``extra`` and persisted alongside them.
    ``id`` is assigned by the store on insert.
    """
    mobile: str
    name: str
    dob: str  # Opaque text, never parsed
    email: str
    employee_type: str
    pancard: str
    extra: Dict[str, Any] = field(default_factory=dict)
    id: Optional[str] = None

    def unique_keys(self) -> Dict[str, str]:
        """Return the values that must not collide with another record."""
        return {
            RecordFields.MOBILE: self.mobile,
            RecordFields.EMAIL: self.email,
            RecordFields.PANCARD: self.pancard,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Flatten declared and extra fields into one mapping."""
        data: Dict[str, Any] = dict(self.extra)
        data.update({
            RecordFields.MOBILE: self.mobile,
            RecordFields.NAME: self.name,
            RecordFields.DOB: self.dob,
            RecordFields.EMAIL: self.email,
            RecordFields.EMPLOYEE_TYPE: self.employee_type,
            RecordFields.PANCARD: self.pancard,
        })
        if self.id is not None:
            data[RecordFields.MONGO_ID] = self.id
        return data
