"""
unitlex: prefix-aware identifier resolution for a units-of-measurement language.

Given an identifier token, unitlex decides whether it names a known unit
(optionally carrying an SI or IEC prefix, as in ``km`` or ``MiB``) or some
other identifier, and keeps unit names, their prefixed forms and all other
identifiers in one collision-free namespace.
This module exposes a minimal, stable public API. The default parser is
bootstrapped lazily to avoid import-time side effects.
"""

from importlib import metadata as _metadata


__author__ = "unitlex developers"
__license__ = "MIT"

# Try to read the installed package version first; fall back to pyproject.toml for local dev.
try:
    __version__ = _metadata.version("unitlex")
except _metadata.PackageNotFoundError:
    import tomllib
    from pathlib import Path

    _pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    with open(_pyproject, "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

from unitlex.core.errors import IdentifierClashError, NameResolutionError
from unitlex.core.prefix import Prefix
from unitlex.core.span import Span
from unitlex.units.prefix_parser import (
    AcceptsPrefix,
    Identifier,
    PrefixParser,
    UnitIdentifier,
)

# Public names exposed by the package. Keep this minimal and stable.
__all__ = [
    "__version__", "__author__", "__license__",
    "AcceptsPrefix", "Identifier", "IdentifierClashError", "NameResolutionError",
    "Prefix", "PrefixParser", "Span", "UnitIdentifier",
]

from typing import Any

# Lazy access helpers -------------------------------------------------------

def _get_default_parser() -> "PrefixParser":
    # Import here to avoid bootstrapping the default corpus at import time.
    from unitlex.units.registry import DEFAULT_PARSER  # local import
    return DEFAULT_PARSER

def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. Accessing 'parser' returns the default parser,
    built on first use.
    """
    if name == "parser":
        return _get_default_parser()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(list(globals().keys()) + ["parser"])
