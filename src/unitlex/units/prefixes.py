"""
unitlex.units.prefixes
======================

The fixed table of SI (metric) and IEC (binary) prefixes.

Row order matters: the prefix parser tries rows top to bottom and stops at
the first decomposition that names a registered unit. Metric rows come
first, from the smallest exponent to the largest, followed by the binary
rows.
"""

from __future__ import annotations

from functools import lru_cache
from typing import NamedTuple, Optional, Tuple

from unitlex.core.prefix import Prefix


class PrefixTriple(NamedTuple):
    long: str
    short: str
    prefix: Prefix


# (long spelling, short spelling, kind, exponent)
_METRIC_ROWS = (
    ("quecto", "q", -30),
    ("ronto", "r", -27),
    ("yocto", "y", -24),
    ("zepto", "z", -21),
    ("atto", "a", -18),
    ("femto", "f", -15),
    ("pico", "p", -12),
    ("nano", "n", -9),
    ("micro", "µ", -6),  # U+00B5 MICRO SIGN, matched exactly
    ("milli", "m", -3),
    ("centi", "c", -2),
    ("deci", "d", -1),
    ("deca", "da", 1),
    ("hecto", "h", 2),
    ("kilo", "k", 3),
    ("mega", "M", 6),
    ("giga", "G", 9),
    ("tera", "T", 12),
    ("peta", "P", 15),
    ("exa", "E", 18),
    ("zetta", "Z", 21),
    ("yotta", "Y", 24),
    ("ronna", "R", 27),
    ("quetta", "Q", 30),
)

# robi/quebi (Ri, Qi) are still only proposals at the IEC and stay out.
_BINARY_ROWS = (
    ("kibi", "Ki", 10),
    ("mebi", "Mi", 20),
    ("gibi", "Gi", 30),
    ("tebi", "Ti", 40),
    ("pebi", "Pi", 50),
    ("exbi", "Ei", 60),
    ("zebi", "Zi", 70),
    ("yobi", "Yi", 80),
)


@lru_cache(maxsize=None)
def prefixes() -> Tuple[PrefixTriple, ...]:
    """Return the prefix table in declaration order (built once)."""
    metric = (PrefixTriple(lng, sht, Prefix.metric(e)) for lng, sht, e in _METRIC_ROWS)
    binary = (PrefixTriple(lng, sht, Prefix.binary(e)) for lng, sht, e in _BINARY_ROWS)
    return (*metric, *binary)


def lookup_prefix(spelling: str) -> Optional[Prefix]:
    """Resolve an exact long or short spelling like ``"kilo"`` or ``"Ki"``."""
    for long, short, prefix in prefixes():
        if spelling == long or spelling == short:
            return prefix
    return None


def spellings_of(prefix: Prefix) -> Tuple[str, str]:
    """Return the ``(long, short)`` spellings of a prefix from the table."""
    for long, short, candidate in prefixes():
        if candidate == prefix:
            return long, short
    raise KeyError(f"No spelling for prefix {prefix!r}")


__all__ = ["PrefixTriple", "prefixes", "lookup_prefix", "spellings_of"]
