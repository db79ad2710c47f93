"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses (except 204 No Content)

Design Decisions:
    - Thin routes delegate to the core store and validation function
"""
