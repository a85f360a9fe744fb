# unitlex.core.errors

from __future__ import annotations

from unitlex.core.diagnostics import Diagnostic, Label
from unitlex.core.span import Span


class NameResolutionError(ValueError):
    """Base class for errors raised while resolving or defining names."""


class IdentifierClashError(NameResolutionError):
    """A definition would claim a name that is already in use."""

    MESSAGE = "identifier clash in definition"
    LABEL_MESSAGE = "Identifier is already in use"

    def __init__(self, name: str, diagnostic: Diagnostic) -> None:
        super().__init__(f"{self.MESSAGE}: {name!r}")
        self.name = name
        self.diagnostic = diagnostic

    @classmethod
    def at(cls, name: str, definition_span: Span) -> IdentifierClashError:
        """Build the error with a primary label on the offending definition."""
        label = Label.primary(
            definition_span.code_source_index, definition_span.byte_range
        ).with_message(cls.LABEL_MESSAGE)
        diagnostic = Diagnostic.error().with_message(cls.MESSAGE).with_labels([label])
        return cls(name, diagnostic)


__all__ = ["NameResolutionError", "IdentifierClashError"]
