"""Tests for ValidationResult accessors."""

from __future__ import annotations

import os

import pytest
from validation_models import (
    EMPLOYEE_AGE_REQUIREMENT,
    EMPLOYEE_NAME_REQUIREMENT,
    Employee,
    employee_rules,
)

from cqrs_ddd_validation import (
    Failure,
    InvalidDeclarationError,
    Simple,
    Success,
    ValidationError,
    validate,
)


def test_success_accessors(alice: Employee) -> None:
    result = validate(alice, employee_rules)

    assert result.unwrap() is alice
    assert result() is alice
    assert result.or_none() is alice
    assert result.was_successful()
    assert bool(result)
    assert result.reasons == ()


def test_failure_accessors(bob: Employee) -> None:
    result = validate(bob, employee_rules)

    assert result.or_none() is None
    assert not result.was_successful()
    assert not result


def test_accessors_are_idempotent(bob: Employee) -> None:
    result = validate(bob, employee_rules)

    assert [result.or_none() for _ in range(3)] == [None, None, None]
    assert [result.was_successful() for _ in range(3)] == [False, False, False]


def test_unwrap_failure_raises_with_report() -> None:
    source = Employee("", 5)
    result = validate(source, employee_rules)

    with pytest.raises(ValidationError) as exc_info:
        result.unwrap()

    assert str(exc_info.value) == (
        " failed 2 validation checks: "
        + os.linesep
        + "- should be 18 or older"
        + os.linesep
        + "- name must be at least 1 character"
    )
    assert exc_info.value.source is source
    assert set(exc_info.value.reasons) == {
        Simple(EMPLOYEE_AGE_REQUIREMENT),
        Simple(EMPLOYEE_NAME_REQUIREMENT),
    }


def test_call_is_unwrap(bob: Employee) -> None:
    with pytest.raises(ValidationError, match="Bob failed 1 validation checks"):
        validate(bob, employee_rules)()


def test_error_message_is_rendered_lazily(bob: Employee) -> None:
    result = validate(bob, employee_rules)
    assert isinstance(result, Failure)

    result.or_none()
    result.was_successful()
    assert "error_message" not in vars(result)

    message = result.error_message
    assert vars(result)["error_message"] is message
    assert result.error_message is message


def test_failure_requires_reasons(bob: Employee) -> None:
    with pytest.raises(InvalidDeclarationError):
        Failure(bob, ())


def test_failure_dedupes_reasons(bob: Employee) -> None:
    result = Failure(bob, (Simple("a"), Simple("a"), Simple("b")))

    assert result.reasons == (Simple("a"), Simple("b"))


def test_success_equality(alice: Employee) -> None:
    assert Success(alice) == Success(Employee("Alice", 40))


def test_failure_to_dict(bob: Employee) -> None:
    result = validate(bob, employee_rules)
    assert isinstance(result, Failure)

    assert result.to_dict() == {
        "source": "Bob",
        "reasons": [{"type": "simple", "text": EMPLOYEE_AGE_REQUIREMENT}],
    }


def test_failure_equality_is_structural(bob: Employee) -> None:
    left = Failure(bob, (Simple("a"), Simple("b")))
    right = Failure(Employee("Bob", 5), (Simple("b"), Simple("a")))

    assert left == right
    assert hash(left) == hash(right)
    assert left != Failure(bob, (Simple("a"),))
    assert left != Success(bob)


def test_repeated_validation_gives_equal_failures(bob: Employee) -> None:
    assert validate(bob, employee_rules) == validate(bob, employee_rules)
