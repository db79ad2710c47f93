"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 if the process is up
"""

from fastapi import APIRouter, Depends, status

from user_api import __version__
from user_api.api.dependencies import get_user_store
from user_api.core.user_store import UserStore

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check(store: UserStore = Depends(get_user_store)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "user-api",
        "version": __version__,
        "users": len(store),
    }
