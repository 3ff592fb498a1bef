"""Pydantic Schemas: request/response contracts for API endpoints.

Invariants:
    - Schemas decode at the system boundary (type and range only)
    - Business rules (empty name, age bounds) live in core/validation
"""
