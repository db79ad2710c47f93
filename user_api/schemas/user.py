"""User Schemas — request bodies and the public user representation.

Invariants:
    - UserCreate requires name and email; UserUpdate makes both optional
    - Unknown fields rejected (extra="forbid"), including `id` in any request body
    - UserUpdate.changes() returns only the fields the client actually sent

Design Decisions:
    - Type-only schemas: value checks run in validate_user_fields so create and update
      share one rule set
"""

from pydantic import BaseModel, ConfigDict

from user_api.core.user_store import User


class UserCreate(BaseModel):
    """User creation body."""
    model_config = ConfigDict(extra="forbid")

    name: str
    email: str


class UserUpdate(BaseModel):
    """Partial update body; absent fields are left unchanged."""
    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    email: str | None = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class UserResponse(BaseModel):
    """Public-facing user data."""
    id: int
    name: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(**user.to_dict())
