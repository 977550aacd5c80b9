"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .record_provider import RecordProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "RecordProvider",
]
