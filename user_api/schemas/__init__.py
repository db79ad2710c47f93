"""Pydantic Schemas — request/response shapes for the user endpoints.

Invariants:
    - Schemas fix field types and reject unknown fields at the system boundary
    - Value rules (lengths, email syntax) are NOT declared here (see core/validate_user.py)
"""
