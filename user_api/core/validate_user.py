"""User Field Validation — explicit, pure validation over plain-data rules.

Invariants:
    - validate_user_fields is PURE: returns a ValidationResult, never raises
    - Create (partial=False) requires every mutable field; update checks only present keys
    - Update re-validates provided values with the same rules as create
    - A present key with value None is an error (null never clears a field)

Design Decisions:
    - Rules as a dataclass built from Settings, not constraints on the schema types:
      the same rules serve create and update, and can be tuned per deployment
    - email-validator for address syntax only; neither DNS deliverability nor
      special-use domains (.test, .local) are checked
"""

from dataclasses import dataclass, field
from typing import Any, Mapping

from email_validator import EmailNotValidError, validate_email

from user_api.core.domain_types import UserField


@dataclass(frozen=True)
class UserFieldRules:
    """Bounds applied to user field values."""
    name_min_length: int = 2
    name_max_length: int = 50


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str
    type: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message, "type": self.type}


@dataclass
class ValidationResult:
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_details(self) -> list[dict]:
        return [e.to_dict() for e in self.errors]


def validate_user_fields(
    fields: Mapping[str, Any], rules: UserFieldRules, *, partial: bool,
) -> ValidationResult:
    """Check name/email values. partial=True for updates (absent keys skipped)."""
    result = ValidationResult()
    for user_field in UserField:
        key = user_field.value
        if key not in fields:
            if not partial:
                result.errors.append(
                    FieldError(key, f"{key} is required", "missing"),
                )
            continue
        value = fields[key]
        if value is None:
            result.errors.append(
                FieldError(key, f"{key} cannot be null", "null"),
            )
            continue
        if user_field is UserField.NAME:
            error = _check_name(value, rules)
        else:
            error = _check_email(value)
        if error:
            result.errors.append(error)
    return result


def _check_name(value: Any, rules: UserFieldRules) -> FieldError | None:
    if not isinstance(value, str):
        return FieldError("name", "name must be a string", "string_type")
    if not value:
        return FieldError("name", "name should not be empty", "empty")
    if not rules.name_min_length <= len(value) <= rules.name_max_length:
        return FieldError(
            "name",
            f"name must be between {rules.name_min_length} and "
            f"{rules.name_max_length} characters",
            "length",
        )
    return None


def _check_email(value: Any) -> FieldError | None:
    if not isinstance(value, str):
        return FieldError("email", "email must be a string", "string_type")
    try:
        validate_email(
            value, check_deliverability=False, globally_deliverable=False,
        )
    except EmailNotValidError as e:
        return FieldError("email", f"email must be an email: {e}", "email")
    return None
