"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, responses)
    - Required string fields reject empty strings
    - Update schemas mark every field optional; None means "leave as stored"

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
