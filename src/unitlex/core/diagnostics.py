"""
unitlex.core.diagnostics
========================

Plain descriptors for compiler-style diagnostics.

The resolver only *builds* these; turning them into annotated source
snippets is the job of whatever front-end renders errors.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Literal, Tuple

Severity = Literal["bug", "error", "warning", "note", "help"]
LabelStyle = Literal["primary", "secondary"]


@dataclass(frozen=True, slots=True)
class Label:
    style: LabelStyle
    code_source_index: int
    byte_range: range
    message: str = ""

    @classmethod
    def primary(cls, code_source_index: int, byte_range: range) -> Label:
        return cls("primary", code_source_index, byte_range)

    @classmethod
    def secondary(cls, code_source_index: int, byte_range: range) -> Label:
        return cls("secondary", code_source_index, byte_range)

    def with_message(self, message: str) -> Label:
        return replace(self, message=message)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Severity, top-level message and the source labels it points at.

    Builder methods return new instances, so a partially built diagnostic
    can be shared safely::

        Diagnostic.error().with_message("oops").with_labels([label])
    """

    severity: Severity
    message: str = ""
    labels: Tuple[Label, ...] = ()

    @classmethod
    def error(cls) -> Diagnostic:
        return cls("error")

    @classmethod
    def warning(cls) -> Diagnostic:
        return cls("warning")

    def with_message(self, message: str) -> Diagnostic:
        return replace(self, message=message)

    def with_labels(self, labels: Iterable[Label]) -> Diagnostic:
        return replace(self, labels=self.labels + tuple(labels))

    @property
    def primary_labels(self) -> Tuple[Label, ...]:
        return tuple(lb for lb in self.labels if lb.style == "primary")


__all__ = ["Diagnostic", "Label", "Severity", "LabelStyle"]
