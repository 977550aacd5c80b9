"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
This layer handles HTTP requests and responses.

Contains:
- Routes: FastAPI route handlers
- Middleware: Access gates applied before any route runs
- Dependencies: Dependency injection setup
"""
