"""API Layer: FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - JSON endpoints return MessageResponse or ErrorResponse only
"""
