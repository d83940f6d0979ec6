"""ValidationBuilder — collects every failed check for a single value."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .exceptions import BuilderStateError, InvalidDeclarationError
from .reasons import Element, FailureReason, Group, Simple
from .result import Failure, Success, ValidationResult

if TYPE_CHECKING:
    from .ports import Declaration, ISatisfiable

logger = logging.getLogger("cqrs_ddd.validation")

T = TypeVar("T")
A = TypeVar("A")


def validate(value: T, *declarations: Declaration[T]) -> ValidationResult[T]:
    """Run *declarations* against *value* and return the outcome.

    Every check runs; failures are collected rather than raised.

    Usage::

        def employee_rules(v: ValidationBuilder[Employee]) -> None:
            v.check("should be 18 or older", lambda e: e.age >= 18)
            v.check("name must be at least 1 character", lambda e: bool(e.name))

        result = validate(employee, employee_rules)
    """
    builder = ValidationBuilder(value)
    builder.apply(*declarations)
    return builder.execute()


def collection_too_small(name: str, min_inclusive: int) -> Simple:
    return Simple(f"{name} must have at least {min_inclusive} elements")


def collection_too_big(name: str, max_inclusive: int) -> Simple:
    return Simple(f"{name} must have no more than {max_inclusive} elements")


class ValidationBuilder(Generic[T]):
    """
    Single-use accumulator bound to one value.

    Failures only ever grow while declarations run; :meth:`execute` freezes
    them into a :class:`~cqrs_ddd_validation.result.ValidationResult` and
    retires the builder.
    """

    def __init__(self, value: T) -> None:
        self._value = value
        self._failures: list[FailureReason] = []
        self._finalized = False

    @property
    def value(self) -> T:
        return self._value

    @property
    def failures(self) -> tuple[FailureReason, ...]:
        """Failures recorded so far."""
        return tuple(self._failures)

    # ── Declarations ─────────────────────────────────────────────

    def apply(self, *declarations: Declaration[T]) -> None:
        """Run declaration blocks against this builder, in order."""
        self._ensure_open()
        for declaration in declarations:
            declaration(self)

    def check(self, description: str, predicate: Callable[[T], bool]) -> None:
        """Record *description* as a failure unless ``predicate(value)`` holds."""
        self._ensure_open()
        if not description:
            raise InvalidDeclarationError("Requirement text must not be empty")
        if not predicate(self._value):
            logger.debug("Check failed: %s", description)
            self._add(Simple(description))

    def fail(self, description: str) -> None:
        """Record *description* as a failure unconditionally."""
        self.check(description, _never)

    def satisfies(self, description: str, specification: ISatisfiable[T]) -> None:
        """Named check backed by a specification's ``is_satisfied_by``."""
        self.check(description, specification.is_satisfied_by)

    def validate_collection(
        self,
        prop: str | Callable[[T], Iterable[A]],
        *declarations: Declaration[A],
        min_inclusive: int | None = None,
        max_inclusive: int | None = None,
        name: str | None = None,
    ) -> None:
        """
        Validate every member of a collection reachable from the value.

        Args:
            prop: Attribute name of the collection, or a callable returning it.
            declarations: Checks applied to each member in its own pass.
            min_inclusive: Smallest allowed collection size.
            max_inclusive: Largest allowed collection size.
            name: Collection name used in reasons. Defaults to *prop* when
                *prop* is an attribute name; required otherwise.

        Size violations and the group of failing members are recorded
        independently, so both may be present.
        """
        self._ensure_open()
        collection_name = self._collection_name(prop, name)
        _check_bounds(collection_name, min_inclusive, max_inclusive)

        if isinstance(prop, str):
            collection = list(getattr(self._value, prop))
        else:
            collection = list(prop(self._value))

        size = len(collection)
        if min_inclusive is not None and size < min_inclusive:
            logger.debug(
                "Collection %s has %d elements, minimum is %d",
                collection_name,
                size,
                min_inclusive,
            )
            self._add(collection_too_small(collection_name, min_inclusive))
        if max_inclusive is not None and size > max_inclusive:
            logger.debug(
                "Collection %s has %d elements, maximum is %d",
                collection_name,
                size,
                max_inclusive,
            )
            self._add(collection_too_big(collection_name, max_inclusive))

        elements: list[Element[A]] = []
        for member in collection:
            result = validate(member, *declarations)
            if isinstance(result, Failure):
                elements.append(Element(member, result.reasons))

        if elements:
            group = Group(collection_name, tuple(elements))
            logger.debug(
                "%d of %d members of %s failed validation",
                len(group.elements),
                size,
                collection_name,
            )
            self._add(group)

    # ── Finalization ─────────────────────────────────────────────

    def execute(self) -> ValidationResult[T]:
        """Finalize the builder. May only be called once."""
        self._ensure_open()
        self._finalized = True
        if not self._failures:
            return Success(self._value)
        logger.debug(
            "Validation of %s failed %d checks",
            type(self._value).__name__,
            len(self._failures),
        )
        return Failure(self._value, tuple(self._failures))

    # ── Internals ────────────────────────────────────────────────

    def _add(self, reason: FailureReason) -> None:
        if reason not in self._failures:
            self._failures.append(reason)

    def _ensure_open(self) -> None:
        if self._finalized:
            raise BuilderStateError(
                f"Builder for {type(self._value).__name__} has already been finalized"
            )

    @staticmethod
    def _collection_name(prop: Any, name: str | None) -> str:
        if name:
            return name
        if isinstance(prop, str) and prop:
            return prop
        raise InvalidDeclarationError(
            "A collection obtained from a callable needs an explicit name"
        )


def _never(_value: Any) -> bool:
    return False


def _check_bounds(
    name: str, min_inclusive: int | None, max_inclusive: int | None
) -> None:
    if min_inclusive is not None and min_inclusive < 0:
        raise InvalidDeclarationError(
            f"{name}: min_inclusive must not be negative, got {min_inclusive}"
        )
    if max_inclusive is not None and max_inclusive < 0:
        raise InvalidDeclarationError(
            f"{name}: max_inclusive must not be negative, got {max_inclusive}"
        )
    if (
        min_inclusive is not None
        and max_inclusive is not None
        and min_inclusive > max_inclusive
    ):
        raise InvalidDeclarationError(
            f"{name}: min_inclusive ({min_inclusive}) exceeds "
            f"max_inclusive ({max_inclusive})"
        )
