"""
Failure tree rendering.

Turns a collection of :class:`~cqrs_ddd_validation.reasons.FailureReason`
into indented report lines::

    - should have at least one employee
    - 1 members of collection 'employees' failed validation:
      - [0] Bob
        - should be 18 or older

Rendering is pure: the same reasons always produce the same lines.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict

from .reasons import FailureReason, Group, Simple


class ReportOptions(BaseModel):
    """Layout of a rendered failure report.

    The defaults produce two-space indentation per nesting level, ``"- "``
    bullets, ``str()`` for member display and the platform line separator.
    """

    model_config = ConfigDict(frozen=True)

    indent: str = "  "
    bullet: str = "- "
    line_separator: str = os.linesep
    display: Callable[[Any], str] = str


DEFAULT_OPTIONS = ReportOptions()


def render_lines(
    reasons: Iterable[FailureReason],
    options: ReportOptions | None = None,
) -> list[str]:
    """Render *reasons* at depth 0, in iteration order."""
    opts = options or DEFAULT_OPTIONS
    lines: list[str] = []
    for reason in reasons:
        lines.extend(_render_reason(reason, 0, opts))
    return lines


def render(
    reasons: Iterable[FailureReason],
    options: ReportOptions | None = None,
) -> str:
    """Render *reasons* as one block of text."""
    opts = options or DEFAULT_OPTIONS
    return opts.line_separator.join(render_lines(reasons, opts))


def _line(depth: int, text: str, opts: ReportOptions) -> str:
    return opts.indent * depth + opts.bullet + text


def _render_reason(
    reason: FailureReason, depth: int, opts: ReportOptions
) -> list[str]:
    if isinstance(reason, Simple):
        return [_line(depth, reason.text, opts)]
    if isinstance(reason, Group):
        return _render_group(reason, depth, opts)
    raise TypeError(f"Cannot render failure reason of type {type(reason).__name__}")


def _render_group(group: Group, depth: int, opts: ReportOptions) -> list[str]:
    lines = [
        _line(
            depth,
            f"{len(group.elements)} members of collection "
            f"'{group.group_name}' failed validation:",
            opts,
        )
    ]
    for index, element in enumerate(group.elements):
        header = f"[{index}] {opts.display(element.member)}"
        lines.append(_line(depth + 1, header, opts))
        for nested in element.reasons:
            lines.extend(_render_reason(nested, depth + 2, opts))
    return lines
