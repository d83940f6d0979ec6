"""
Validation exception hierarchy.

All exceptions inherit from ``DeclarativeValidationError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .reasons import FailureReason


class DeclarativeValidationError(Exception):
    """Base exception for all declarative validation errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ValidationError(DeclarativeValidationError):
    """
    Raised when a failed :class:`~cqrs_ddd_validation.result.Failure` is
    unwrapped.

    Carries the unvalidated ``source`` and its top-level ``reasons`` so
    callers can inspect the failure tree instead of parsing the message.
    """

    def __init__(
        self,
        message: str,
        source: Any = None,
        reasons: tuple[FailureReason, ...] = (),
    ) -> None:
        self.message = message
        self.source = source
        self.reasons = reasons
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_FAILED",
            "message": self.message,
            "source": str(self.source),
            "reasons": [reason.to_dict() for reason in self.reasons],
        }


class InvalidDeclarationError(DeclarativeValidationError):
    """A declaration or reason breaks the engine's contract.

    Raised for empty requirement text, impossible size bounds and
    reason trees that violate their structural invariants.
    """


class BuilderStateError(DeclarativeValidationError):
    """A validation builder was used after it had been finalized."""
