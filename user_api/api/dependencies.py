"""Route Dependencies — hand the app-owned store and validation rules to routes.

Invariants:
    - The UserStore lives on app.state, created once per app in create_app()
    - Routes never construct or cache a store themselves

Design Decisions:
    - Depends() over module globals: tests swap the store via app.dependency_overrides
"""

from fastapi import Request

from user_api.config import get_settings
from user_api.core.user_store import UserStore
from user_api.core.validate_user import UserFieldRules


def get_user_store(request: Request) -> UserStore:
    """FastAPI dependency for the application's user store."""
    return request.app.state.user_store


def get_field_rules() -> UserFieldRules:
    return get_settings().field_rules()
