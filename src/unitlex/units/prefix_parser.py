"""
unitlex.units.prefix_parser
===========================

Prefix-aware resolution of identifier tokens.

A `PrefixParser` knows every unit name defined so far together with the
prefix families and spellings each unit admits, plus the set of other
(non-unit) identifiers. It answers one question for the front-end: is
this token a (possibly prefixed) unit, or just an identifier?

Unit names, other identifiers and every prefixed spelling a unit admits
share one flat namespace. Each registration checks all the names it would
claim before touching any state, so a rejected definition leaves the
parser exactly as it was.

Example
-------
>>> p = PrefixParser()
>>> p.add_unit("m", AcceptsPrefix.only_short(), True, False, "meter")
>>> p.parse("km")
UnitIdentifier(prefix=Prefix.metric(3), unit_name='m', full_name='meter')
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from fractions import Fraction
from typing import Dict, List, Mapping, Optional, Set, Union

from unitlex.core.errors import IdentifierClashError
from unitlex.core.prefix import Prefix
from unitlex.core.span import Span
from unitlex.units.prefixes import prefixes

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Registration metadata
# ---------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class AcceptsPrefix:
    """Which spellings of a prefix a unit accepts (``kilo`` vs ``k``)."""

    long: bool = False
    short: bool = False

    @classmethod
    def only_long(cls) -> AcceptsPrefix:
        return cls(long=True, short=False)

    @classmethod
    def only_short(cls) -> AcceptsPrefix:
        return cls(long=False, short=True)

    @classmethod
    def both(cls) -> AcceptsPrefix:
        return cls(long=True, short=True)

    @classmethod
    def none(cls) -> AcceptsPrefix:
        return cls(long=False, short=False)


@dataclass(frozen=True, slots=True)
class UnitInfo:
    accepts_prefix: AcceptsPrefix
    metric_prefixes: bool
    binary_prefixes: bool
    full_name: str

    def admits(self, prefix: Prefix) -> bool:
        """True if the unit participates in the family of `prefix`."""
        return (prefix.is_metric and self.metric_prefixes) or (
            prefix.is_binary and self.binary_prefixes
        )


# ---------------------------------------------------------------------------
# Parse results
# ---------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class Identifier:
    name: str


@dataclass(frozen=True, slots=True)
class UnitIdentifier:
    prefix: Prefix
    unit_name: str   # as registered, e.g. 'm'
    full_name: str   # e.g. 'meter'

    @property
    def factor(self) -> Fraction:
        return self.prefix.factor


PrefixParserResult = Union[Identifier, UnitIdentifier]


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------
class PrefixParser:
    """Registry of unit and non-unit names with prefix-aware lookup.

    Registration happens during a setup phase; afterwards `parse` is a pure
    read and may be called from several threads.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._units: Dict[str, UnitInfo] = {}
        self._other_identifiers: Set[str] = set()

    def __contains__(self, name: str) -> bool:
        return name in self._other_identifiers or isinstance(
            self.parse(name), UnitIdentifier
        )

    def __repr__(self) -> str:
        return (
            f"PrefixParser(units={len(self._units)}, "
            f"other_identifiers={len(self._other_identifiers)})"
        )

    # -------------------------- registration -------------------------------
    def add_unit(
        self,
        unit_name: str,
        accepts_prefix: AcceptsPrefix,
        metric: bool,
        binary: bool,
        full_name: str,
        definition_span: Span = Span.dummy(),
    ) -> None:
        """Register `unit_name` and reserve every prefixed form it admits.

        Raises `IdentifierClashError` naming the first claimed name found
        (the bare unit name or a prefixed spelling such as ``"kilometer"``).
        """
        if not unit_name:
            raise ValueError("unit name must be a non-empty string")

        info = UnitInfo(
            accepts_prefix=accepts_prefix,
            metric_prefixes=metric,
            binary_prefixes=binary,
            full_name=full_name,
        )
        with self._lock:
            self._ensure_name_is_available(unit_name, definition_span)
            for name in self._prefixed_names(unit_name, info):
                self._ensure_name_is_available(name, definition_span)

            self._units[unit_name] = info

        logger.debug("registered unit %r (%s)", unit_name, full_name)

    def add_other_identifier(
        self, identifier: str, definition_span: Span = Span.dummy()
    ) -> None:
        """Register a non-unit identifier (variable, function, dimension)."""
        with self._lock:
            self._ensure_name_is_available(identifier, definition_span)
            if identifier in self._other_identifiers:
                raise self._clash(identifier, definition_span)
            self._other_identifiers.add(identifier)

        logger.debug("registered identifier %r", identifier)

    # ---------------------------- lookup -----------------------------------
    def parse(self, token: str) -> PrefixParserResult:
        """Resolve a token to a (possibly prefixed) unit or a plain identifier.

        An exact unit name always wins. Otherwise the prefix table is tried
        in order, long spelling before short spelling within each row, and
        the first decomposition naming a unit that admits that prefix wins.
        """
        info = self._units.get(token)
        if info is not None:
            return UnitIdentifier(Prefix.none(), token, info.full_name)

        for prefix_long, prefix_short, prefix in prefixes():
            if token.startswith(prefix_long):
                unit_name = token[len(prefix_long):]
                info = self._units.get(unit_name)
                if info is not None and info.accepts_prefix.long and info.admits(prefix):
                    return UnitIdentifier(prefix, unit_name, info.full_name)

            if token.startswith(prefix_short):
                unit_name = token[len(prefix_short):]
                info = self._units.get(unit_name)
                if info is not None and info.accepts_prefix.short and info.admits(prefix):
                    return UnitIdentifier(prefix, unit_name, info.full_name)

        return Identifier(token)

    def is_unit(self, name: str) -> bool:
        return name in self._units

    def is_other_identifier(self, name: str) -> bool:
        return name in self._other_identifiers

    def unit_info(self, unit_name: str) -> Optional[UnitInfo]:
        return self._units.get(unit_name)

    def units(self) -> Mapping[str, UnitInfo]:
        with self._lock:
            return dict(self._units)

    def other_identifiers(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._other_identifiers)

    def prefixed_forms(self, unit_name: str) -> List[str]:
        """All prefixed spellings reserved for a registered unit, in table order."""
        info = self._units.get(unit_name)
        if info is None:
            raise KeyError(f"Unknown unit: {unit_name}")
        return self._prefixed_names(unit_name, info)

    # ------------------------- internals -----------------------------------
    @staticmethod
    def _prefixed_names(unit_name: str, info: UnitInfo) -> List[str]:
        names: List[str] = []
        for prefix_long, prefix_short, prefix in prefixes():
            if not info.admits(prefix):
                continue
            if info.accepts_prefix.long:
                names.append(f"{prefix_long}{unit_name}")
            if info.accepts_prefix.short:
                names.append(f"{prefix_short}{unit_name}")
        return names

    def _clash(self, name: str, definition_span: Span) -> IdentifierClashError:
        logger.debug("identifier clash on %r", name)
        return IdentifierClashError.at(name, definition_span)

    def _ensure_name_is_available(self, name: str, definition_span: Span) -> None:
        if name in self._other_identifiers:
            raise self._clash(name, definition_span)
        if isinstance(self.parse(name), UnitIdentifier):
            raise self._clash(name, definition_span)


__all__ = [
    "AcceptsPrefix",
    "UnitInfo",
    "Identifier",
    "UnitIdentifier",
    "PrefixParserResult",
    "PrefixParser",
]
