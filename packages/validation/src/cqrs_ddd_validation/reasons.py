"""
Failure reason tree.

A failure reason is either a :class:`Simple` leaf holding the text of one
failed requirement, or a :class:`Group` naming a collection and holding an
:class:`Element` for every member of that collection which failed.

Reason collections are ordered tuples with duplicates removed (see
:func:`dedupe`), so reports come out in declaration order.  Equality is
structural and order-insensitive.  Element hashes include the member when
it is hashable; unhashable members are supported and only need ``__eq__``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from .exceptions import InvalidDeclarationError

A = TypeVar("A")
R = TypeVar("R")


def dedupe(items: Iterable[R]) -> tuple[R, ...]:
    """Return *items* as a tuple, keeping the first of any equal entries.

    Reasons and elements always hash, so lookups go through a set.  Elements
    whose members are unhashable share a hash per reason set and are told
    apart by ``__eq__``.
    """
    unique: list[R] = []
    seen: set[R] = set()
    for item in items:
        if item not in seen:
            seen.add(item)
            unique.append(item)
    return tuple(unique)


def _same_members(left: tuple[Any, ...], right: tuple[Any, ...]) -> bool:
    return len(left) == len(right) and set(left) == set(right)


def _member_hash(member: Any) -> int | None:
    try:
        return hash(member)
    except TypeError:
        return None


class FailureReason(ABC):
    """One node of a failure tree."""

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation of this node."""
        ...


@dataclass(frozen=True)
class Simple(FailureReason):
    """A single failed requirement, identified by its text."""

    text: str

    def __post_init__(self) -> None:
        if not self.text:
            raise InvalidDeclarationError("Requirement text must not be empty")

    def __str__(self) -> str:
        return self.text

    def to_dict(self) -> dict[str, Any]:
        return {"type": "simple", "text": self.text}


@dataclass(frozen=True, eq=False)
class Element(Generic[A]):
    """A failing collection member paired with the reasons it failed."""

    member: A
    reasons: tuple[FailureReason, ...]
    _hash: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        reasons = dedupe(self.reasons)
        if not reasons:
            raise InvalidDeclarationError(
                f"Element {self.member!s} must carry at least one failure reason"
            )
        object.__setattr__(self, "reasons", reasons)
        object.__setattr__(
            self, "_hash", hash((_member_hash(self.member), frozenset(reasons)))
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return bool(self.member == other.member) and _same_members(
            self.reasons, other.reasons
        )

    def __hash__(self) -> int:
        return self._hash

    def to_dict(self) -> dict[str, Any]:
        return {
            "member": str(self.member),
            "reasons": [reason.to_dict() for reason in self.reasons],
        }


@dataclass(frozen=True, eq=False)
class Group(FailureReason):
    """Aggregated failure of the members of a named collection."""

    group_name: str
    elements: tuple[Element[Any], ...]

    def __post_init__(self) -> None:
        elements = dedupe(self.elements)
        if not elements:
            raise InvalidDeclarationError(
                f"Group '{self.group_name}' must contain at least one element"
            )
        object.__setattr__(self, "elements", elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return self.group_name == other.group_name and _same_members(
            self.elements, other.elements
        )

    def __hash__(self) -> int:
        return hash((self.group_name, len(self.elements)))

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "group",
            "name": self.group_name,
            "elements": [element.to_dict() for element in self.elements],
        }
