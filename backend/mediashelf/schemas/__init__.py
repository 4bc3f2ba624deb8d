"""Pydantic Schemas - request bodies and response serializers for API endpoints.

Invariants:
    - Wire format is camelCase; Python attributes are snake_case
    - Schemas check shape only; domain rules run in core/validators.py

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
