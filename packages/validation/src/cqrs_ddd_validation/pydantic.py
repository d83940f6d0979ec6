"""Pydantic integration — turn model validation errors into failure reasons."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .reasons import Simple

if TYPE_CHECKING:
    from .builder import ValidationBuilder
    from .ports import Declaration


def reasons_from_pydantic(exc: PydanticValidationError) -> list[Simple]:
    """Convert every pydantic error into a ``"<loc>: <msg>"`` reason."""
    reasons: list[Simple] = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error.get("loc", ())) or "__root__"
        msg = error.get("msg", "validation error")
        reasons.append(Simple(f"{loc}: {msg}"))
    return reasons


def model_declaration(
    model_type: type[BaseModel],
    extract: Callable[[Any], Any] | None = None,
) -> Declaration[Any]:
    """Build a declaration that validates the value through *model_type*.

    The bound value (or ``extract(value)``) is passed to
    ``model_type.model_validate``; model instances are re-validated from
    their dumped data.  Each pydantic error becomes its own failure.

    Usage::

        result = validate(payload, model_declaration(CreateUser))
    """

    def declaration(builder: ValidationBuilder[Any]) -> None:
        data = extract(builder.value) if extract else builder.value
        if isinstance(data, BaseModel):
            data = data.model_dump()
        try:
            model_type.model_validate(data)
        except PydanticValidationError as exc:
            for reason in reasons_from_pydantic(exc):
                builder.fail(reason.text)

    return declaration
