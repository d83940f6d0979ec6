"""Tests for exceptions module."""

from __future__ import annotations

from validation_models import Employee, employee_rules

from cqrs_ddd_validation import (
    BuilderStateError,
    DeclarativeValidationError,
    InvalidDeclarationError,
    Simple,
    ValidationError,
    validate,
)


def test_all_inherit_from_declarative_validation_error() -> None:
    assert issubclass(ValidationError, DeclarativeValidationError)
    assert issubclass(InvalidDeclarationError, DeclarativeValidationError)
    assert issubclass(BuilderStateError, DeclarativeValidationError)


def test_base_to_dict() -> None:
    err = BuilderStateError("already finalized")

    assert err.to_dict() == {
        "error": "BuilderStateError",
        "message": "already finalized",
    }


def test_validation_error_to_dict(bob: Employee) -> None:
    try:
        validate(bob, employee_rules).unwrap()
    except ValidationError as exc:
        d = exc.to_dict()
    else:
        raise AssertionError("unwrap of a failure must raise")

    assert d["error"] == "VALIDATION_FAILED"
    assert d["source"] == "Bob"
    assert d["reasons"] == [Simple("should be 18 or older").to_dict()]
    assert d["message"].startswith("Bob failed 1 validation checks: ")


def test_validation_error_defaults() -> None:
    err = ValidationError("broken")

    assert err.source is None
    assert err.reasons == ()
    assert str(err) == "broken"
