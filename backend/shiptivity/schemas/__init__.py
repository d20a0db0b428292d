"""Pydantic Schemas: request/response shapes for API endpoints.

Invariants:
    - Schemas describe the wire format; semantic validation lives in core/validation.py

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
