"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain entities and repositories.

Contains:
- Use Cases: Business operations (create record)
- Services: Application services that coordinate use cases
- DTOs: Pydantic models for API requests and responses
"""
