"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps int; ids start at 1 and are never reused
    - Mutable user fields encoded as an Enum; `id` is never one of them
"""

from enum import Enum
from typing import NewType


UserId = NewType("UserId", int)

FIRST_USER_ID = UserId(1)


class UserField(str, Enum):
    """Fields a client may set on create and change on update."""
    NAME = "name"
    EMAIL = "email"


MUTABLE_FIELDS: frozenset[str] = frozenset(f.value for f in UserField)
