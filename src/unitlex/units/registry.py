"""
unitlex.units.registry
======================

Data-driven bootstrap of a `PrefixParser` preloaded with a standard set of
units and builtin identifiers.

Every unit is registered with both a long spelling (``meter``, which takes
``kilo``/``milli``) and a short spelling (``m``, which takes ``k``/``m``).
Both spellings share one full name. Information units additionally take
the binary (IEC) prefixes.

Embedders that need a different corpus should build their own
`PrefixParser`; `DEFAULT_PARSER` is shared and should be treated as
read-only.
"""
from __future__ import annotations

from unitlex.units.prefix_parser import AcceptsPrefix, PrefixParser

# (long spelling, short spelling)
_SI_UNITS = (
    ("meter", "m"),        # length
    ("second", "s"),       # time
    ("gram", "g"),         # mass
    ("ampere", "A"),       # electric current
    ("kelvin", "K"),       # temperature
    ("mole", "mol"),       # amount of substance
    ("candela", "cd"),     # luminous intensity

    ("hertz", "Hz"),
    ("newton", "N"),
    ("joule", "J"),
    ("watt", "W"),
    ("volt", "V"),
)

_INFORMATION_UNITS = (
    ("byte", "B"),
)

# (name, accepts_prefix) for units spelled the same in long and short form
_SAME_SPELLING_UNITS = (
    ("bit", AcceptsPrefix.both()),
)

# Builtin functions and constants that live in the same namespace.
_BUILTIN_IDENTIFIERS = (
    "pi", "sqrt", "abs", "exp", "ln", "log", "sin", "cos", "tan",
)


def _bootstrap_default_parser() -> PrefixParser:
    parser = PrefixParser()

    for long_name, short_name in _SI_UNITS:
        parser.add_unit(long_name, AcceptsPrefix.only_long(), True, False, long_name)
        parser.add_unit(short_name, AcceptsPrefix.only_short(), True, False, long_name)

    for long_name, short_name in _INFORMATION_UNITS:
        parser.add_unit(long_name, AcceptsPrefix.only_long(), True, True, long_name)
        parser.add_unit(short_name, AcceptsPrefix.only_short(), True, True, long_name)

    for name, accepts in _SAME_SPELLING_UNITS:
        parser.add_unit(name, accepts, True, True, name)

    for name in _BUILTIN_IDENTIFIERS:
        parser.add_other_identifier(name)

    return parser


# Public, shared default parser
DEFAULT_PARSER: PrefixParser = _bootstrap_default_parser()


__all__ = [
    "PrefixParser",
    "DEFAULT_PARSER",
]
