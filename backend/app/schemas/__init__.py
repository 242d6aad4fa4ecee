"""Pydantic Schemas: request parsing and response shaping for API endpoints.

Invariants:
    - Schemas parse at the system boundary (request bodies)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
