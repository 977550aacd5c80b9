"""
API v1 Package
===============

Version 1 API controllers.
"""
from .record_controller import router as record_router

__all__ = ["record_router"]
