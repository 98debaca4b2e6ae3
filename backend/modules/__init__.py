"""
Feature modules for Campus Aid backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models (request drafts and stored entities)
- service.py: Business logic over an in-memory EntityStore
- routes.py: FastAPI route handlers
- exceptions.py: Module-specific exceptions

Modules communicate through interfaces, not concrete implementations.
"""
