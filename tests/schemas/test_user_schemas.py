"""User Schemas — request body shape checks.

Invariants:
    - Unknown fields (including id) rejected
    - UserUpdate.changes() reports only fields explicitly sent, null included
"""

import pytest
from pydantic import ValidationError

from user_api.core.user_store import User
from user_api.schemas.user import UserCreate, UserResponse, UserUpdate


def test_create_requires_name_and_email():
    with pytest.raises(ValidationError):
        UserCreate(name="John Doe")


def test_create_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        UserCreate(name="John Doe", email="john@example.com", admin=True)


def test_create_rejects_client_supplied_id():
    with pytest.raises(ValidationError):
        UserCreate(id=5, name="John Doe", email="john@example.com")


def test_create_rejects_non_string_name():
    with pytest.raises(ValidationError):
        UserCreate(name=123, email="john@example.com")


def test_update_all_optional():
    assert UserUpdate().changes() == {}


def test_update_changes_only_sent_fields():
    assert UserUpdate(name="Jonathan").changes() == {"name": "Jonathan"}


def test_update_changes_keep_explicit_null():
    assert UserUpdate(email=None).changes() == {"email": None}


def test_update_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        UserUpdate(nickname="JD")


def test_response_from_user():
    resp = UserResponse.from_user(User(id=1, name="John Doe", email="john@example.com"))
    assert resp.model_dump() == {"id": 1, "name": "John Doe", "email": "john@example.com"}


def test_response_matches_record_dict():
    user = User(id=4, name="Jane", email="jane@example.com")
    assert UserResponse.from_user(user).model_dump() == user.to_dict()
