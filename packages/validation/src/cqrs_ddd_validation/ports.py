"""Protocols for collaborators supplied by callers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from .builder import ValidationBuilder

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class ISatisfiable(Protocol[T_contra]):
    """
    Anything that can judge a candidate, such as the toolkit's
    specifications (``cqrs_ddd_specifications.BaseSpecification``).
    """

    def is_satisfied_by(self, candidate: T_contra) -> bool: ...


class Declaration(Protocol[T]):
    """A block of checks applied to a :class:`ValidationBuilder`."""

    def __call__(self, builder: ValidationBuilder[T], /) -> None: ...
