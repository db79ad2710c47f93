"""User Store — sole authority over in-memory user records.

Invariants:
    - Ids start at 1, increase by one per create, and are never reused (even after delete)
    - Insertion order preserved: create appends, update writes back at the same index
    - `id` is never merged on update; only mutable fields change
    - Missing ids raise UserNotFoundError, which is never masked here
    - Records are frozen dataclasses; list_all() returns a fresh list (no live aliases)

Design Decisions:
    - Linear scan over an index: the data set is small and ephemeral
    - State held in an injected UserStoreState, never module scope: tests get a clean store,
      and a persistent backend can replace it later
    - threading.Lock around every operation: keeps id uniqueness and no-lost-update
      under a threaded server
"""

import logging
import threading
from dataclasses import asdict, dataclass, field, replace
from typing import Any, Mapping

from user_api.core.domain_types import FIRST_USER_ID, MUTABLE_FIELDS, UserId
from user_api.core.errors import UserNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class User:
    id: UserId
    name: str
    email: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class UserStoreState:
    """Growable record list plus the next id to hand out."""
    users: list[User] = field(default_factory=list)
    next_id: int = FIRST_USER_ID


class UserStore:
    """Create/list_all/get/update/delete over a UserStoreState."""

    def __init__(self, state: UserStoreState | None = None):
        self._state = state if state is not None else UserStoreState()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._state.users)

    def create(self, name: str, email: str) -> User:
        with self._lock:
            user = User(id=UserId(self._state.next_id), name=name, email=email)
            self._state.next_id += 1
            self._state.users.append(user)
        logger.info("User created", extra={"user_id": user.id})
        return user

    def list_all(self) -> list[User]:
        with self._lock:
            return list(self._state.users)

    def get(self, user_id: int) -> User:
        with self._lock:
            return self._state.users[self._index_of(user_id)]

    def update(self, user_id: int, fields: Mapping[str, Any]) -> User:
        """Merge the mutable keys present in `fields` over the stored record."""
        changes = {k: v for k, v in fields.items() if k in MUTABLE_FIELDS}
        with self._lock:
            index = self._index_of(user_id)
            updated = replace(self._state.users[index], **changes)
            self._state.users[index] = updated
        logger.info(
            f"User updated: {', '.join(sorted(changes)) or 'no fields'}",
            extra={"user_id": user_id},
        )
        return updated

    def delete(self, user_id: int) -> None:
        with self._lock:
            index = self._index_of(user_id)
            del self._state.users[index]
        logger.info("User deleted", extra={"user_id": user_id})

    def _index_of(self, user_id: int) -> int:
        # caller holds the lock
        for index, user in enumerate(self._state.users):
            if user.id == user_id:
                return index
        raise UserNotFoundError(user_id)
