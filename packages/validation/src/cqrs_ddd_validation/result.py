"""ValidationResult — outcome of one validation pass."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import cached_property
from typing import Any, Generic, TypeVar

from .exceptions import InvalidDeclarationError, ValidationError
from .reasons import FailureReason, dedupe
from .report import render

T = TypeVar("T")


class ValidationResult(ABC, Generic[T]):
    """Either a :class:`Success` holding the validated value or a
    :class:`Failure` holding the original value and why it failed.

    Usage::

        result = validate(employee, employee_rules)
        if result:
            save(result.unwrap())
        else:
            print(result.error_message)
    """

    @property
    @abstractmethod
    def reasons(self) -> tuple[FailureReason, ...]:
        """Top-level failure reasons; empty for a success."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Return the validated value or raise :class:`ValidationError`."""
        ...

    @abstractmethod
    def or_none(self) -> T | None:
        """Return the validated value, or ``None`` on failure."""
        ...

    @abstractmethod
    def was_successful(self) -> bool: ...

    def __call__(self) -> T:
        return self.unwrap()

    def __bool__(self) -> bool:
        return self.was_successful()


@dataclass(frozen=True)
class Success(ValidationResult[T]):
    value: T

    @property
    def reasons(self) -> tuple[FailureReason, ...]:
        return ()

    def unwrap(self) -> T:
        return self.value

    def or_none(self) -> T | None:
        return self.value

    def was_successful(self) -> bool:
        return True


@dataclass(frozen=True, eq=False)
class Failure(ValidationResult[T]):
    """A failed validation pass.

    Two failures are equal when their sources are equal and they failed the
    same reasons, in any order.

    The report text is rendered on first access to :attr:`error_message`
    and cached; inspecting the failure via :meth:`or_none` or
    :meth:`was_successful` never renders it.
    """

    source: T
    failure_reasons: tuple[FailureReason, ...]

    def __post_init__(self) -> None:
        failure_reasons = dedupe(self.failure_reasons)
        if not failure_reasons:
            raise InvalidDeclarationError(
                "A failed validation must carry at least one failure reason"
            )
        object.__setattr__(self, "failure_reasons", failure_reasons)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Failure):
            return NotImplemented
        return bool(self.source == other.source) and set(
            self.failure_reasons
        ) == set(other.failure_reasons)

    def __hash__(self) -> int:
        return hash(frozenset(self.failure_reasons))

    @property
    def reasons(self) -> tuple[FailureReason, ...]:
        return self.failure_reasons

    @cached_property
    def error_message(self) -> str:
        return (
            f"{self.source!s} failed {len(self.failure_reasons)} validation checks: "
            + os.linesep
            + render(self.failure_reasons)
        )

    def unwrap(self) -> T:
        raise ValidationError(
            self.error_message, source=self.source, reasons=self.failure_reasons
        )

    def or_none(self) -> T | None:
        return None

    def was_successful(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": str(self.source),
            "reasons": [reason.to_dict() for reason in self.failure_reasons],
        }
