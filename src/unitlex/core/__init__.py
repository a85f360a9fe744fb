from unitlex.core.diagnostics import Diagnostic, Label
from unitlex.core.errors import IdentifierClashError, NameResolutionError
from unitlex.core.prefix import Prefix
from unitlex.core.span import Span

__all__ = [
    "Diagnostic",
    "Label",
    "IdentifierClashError",
    "NameResolutionError",
    "Prefix",
    "Span",
]
