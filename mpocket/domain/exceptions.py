"""
Domain Exceptions
=================

Errors raised by the record repository and the create-record use case.
"""
from typing import Any, Dict, Optional


class RecordError(Exception):
    """Base class for record errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DuplicateRecordError(RecordError):
    """A record sharing mobile, email or pancard already exists."""

    def __init__(self, message: str, conflicting_fields: Optional[list] = None):
        super().__init__(message)
        self.conflicting_fields = conflicting_fields or []


class DuplicateKeyError(RecordError):
    """The store rejected an insert on a unique index."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class StoreError(RecordError):
    """Any other storage fault."""


class StoreConnectionError(RecordError):
    """
    The store could not be reached.

    Not a StoreError: this is fatal for the process, never a per-request
    failure.
    """
