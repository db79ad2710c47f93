"""Domain Types — verifies id type and mutable field set."""

from user_api.core.domain_types import (
    FIRST_USER_ID, MUTABLE_FIELDS, UserField, UserId,
)


def test_user_id_wraps_int():
    assert UserId(5) == 5
    assert FIRST_USER_ID == 1


def test_mutable_fields_exclude_id():
    assert MUTABLE_FIELDS == {"name", "email"}
    assert "id" not in MUTABLE_FIELDS


def test_user_field_values():
    assert [f.value for f in UserField] == ["name", "email"]
