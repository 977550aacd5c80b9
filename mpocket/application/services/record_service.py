"""
Record Service
==============

Application service that coordinates record-related operations.
"""
from typing import Any, Dict, Optional

from mpocket.domain.models.record import Record
from mpocket.domain.repositories.record_repository import RecordRepository
from mpocket.application.use_cases.record.create_record import CreateRecordUseCase


class RecordService:
    """
    Application service for record operations.

    Holds no per-request state; one instance serves every request.
    """

    def __init__(self, record_repository: RecordRepository):
        """
        Initialize service with repository.

        Args:
            record_repository: Repository for record persistence
        """
        self._create_use_case = CreateRecordUseCase(record_repository)

    def create_record(
        self,
        mobile: str,
        name: str,
        dob: str,
        email: str,
        employee_type: str,
        pancard: str,
        extra: Optional[Dict[str, Any]] = None,
    ) -> Record:
        """
        Create a record.

        Args:
            mobile: Mobile number (unique)
            name: Full name
            dob: Date of birth, kept as text
            email: Email address (unique)
            employee_type: Employee type
            pancard: PAN card number (unique)
            extra: Undeclared fields to persist alongside the record

        Returns:
            Created record entity
        """
        record = Record(
            mobile=mobile,
            name=name,
            dob=dob,
            email=email,
            employee_type=employee_type,
            pancard=pancard,
            extra=dict(extra or {}),
        )
        return self._create_use_case.execute(record)
