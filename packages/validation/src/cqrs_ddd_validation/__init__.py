"""cqrs-ddd-validation — declarative, accumulating validation.

Attach named predicates to a value (and to collections nested inside it),
run them all, and get back either the validated value or a failure tree
that mirrors the shape of the data.
"""

from __future__ import annotations

# ── Builder ──────────────────────────────────────────────────────
from .builder import (
    ValidationBuilder,
    collection_too_big,
    collection_too_small,
    validate,
)

# ── Exceptions ───────────────────────────────────────────────────
from .exceptions import (
    BuilderStateError,
    DeclarativeValidationError,
    InvalidDeclarationError,
    ValidationError,
)

# ── Ports ────────────────────────────────────────────────────────
from .ports import Declaration, ISatisfiable

# ── Pydantic ─────────────────────────────────────────────────────
from .pydantic import model_declaration, reasons_from_pydantic

# ── Failure tree ─────────────────────────────────────────────────
from .reasons import Element, FailureReason, Group, Simple, dedupe
from .report import ReportOptions, render, render_lines
from .result import Failure, Success, ValidationResult

__all__ = [
    "validate",
    "ValidationBuilder",
    "collection_too_small",
    "collection_too_big",
    "FailureReason",
    "Simple",
    "Group",
    "Element",
    "dedupe",
    "ValidationResult",
    "Success",
    "Failure",
    "ReportOptions",
    "render",
    "render_lines",
    "Declaration",
    "ISatisfiable",
    "model_declaration",
    "reasons_from_pydantic",
    "DeclarativeValidationError",
    "ValidationError",
    "InvalidDeclarationError",
    "BuilderStateError",
]
