from typing import Any

from unitlex.units.prefix_parser import (
    AcceptsPrefix,
    Identifier,
    PrefixParser,
    PrefixParserResult,
    UnitIdentifier,
    UnitInfo,
)
from unitlex.units.prefixes import PrefixTriple, lookup_prefix, prefixes, spellings_of

# Lazy access helpers -------------------------------------------------------

def _get_default_parser() -> PrefixParser:
    # Import here so importing unitlex.units does not bootstrap the corpus.
    from unitlex.units.registry import DEFAULT_PARSER  # local import
    return DEFAULT_PARSER

def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. Accessing 'parser' returns the package's default
    parser, bootstrapping it on first use.
    """
    if name == "parser":
        return _get_default_parser()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(list(globals().keys()) + ["parser"])


__all__ = [
    "AcceptsPrefix",
    "Identifier",
    "PrefixParser",
    "PrefixParserResult",
    "PrefixTriple",
    "UnitIdentifier",
    "UnitInfo",
    "lookup_prefix",
    "prefixes",
    "spellings_of",
]
