"""User API Package — in-memory user CRUD service.

Invariants:
    - Package root has no import side-effects (only the version constant)

Design Decisions:
    - No star exports: explicit imports only
"""

__version__ = "1.0.0"
