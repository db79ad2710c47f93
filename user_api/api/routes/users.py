"""User Routes — CRUD endpoints over the in-memory UserStore.

Invariants:
    - Body shape checked by Pydantic, field values by validate_user_fields, before the store
    - PATCH validates only the fields the client sent, with the create rules
    - UserNotFoundError propagates to the global handler → 404 (no recovery, no retry)
    - DELETE returns 204 with an empty body
    - Non-integer ids rejected by FastAPI path parsing → 400

Design Decisions:
    - async routes over a synchronous store: the store never awaits, so no thread hop needed
"""


from fastapi import APIRouter, Depends, Response, status

from user_api.api.dependencies import get_field_rules, get_user_store
from user_api.core.errors import UserValidationError
from user_api.core.user_store import UserStore
from user_api.core.validate_user import UserFieldRules, validate_user_fields
from user_api.schemas.user import UserCreate, UserResponse, UserUpdate

router = APIRouter(prefix="/user", tags=["users"])


def _ensure_valid(fields: dict, rules: UserFieldRules, *, partial: bool) -> None:
    result = validate_user_fields(fields, rules, partial=partial)
    if not result.ok:
        raise UserValidationError(result.to_details())


@router.post(
    "", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreate,
    store: UserStore = Depends(get_user_store),
    rules: UserFieldRules = Depends(get_field_rules),
):
    """Create a user; the store assigns the id."""
    _ensure_valid(body.model_dump(), rules, partial=False)
    user = store.create(body.name, body.email)
    return UserResponse.from_user(user)


@router.get("", response_model=list[UserResponse])
async def list_users(store: UserStore = Depends(get_user_store)):
    """List all users in creation order."""
    return [UserResponse.from_user(u) for u in store.list_all()]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, store: UserStore = Depends(get_user_store)):
    return UserResponse.from_user(store.get(user_id))


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    body: UserUpdate,
    store: UserStore = Depends(get_user_store),
    rules: UserFieldRules = Depends(get_field_rules),
):
    """Partially update a user."""
    changes = body.changes()
    _ensure_valid(changes, rules, partial=True)
    return UserResponse.from_user(store.update(user_id, changes))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int, store: UserStore = Depends(get_user_store),
):
    store.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
