# pytest tests for unitlex.units.registry (default corpus)
import pytest

import unitlex.units.registry as regmod
from unitlex.core.errors import IdentifierClashError
from unitlex.core.prefix import Prefix
from unitlex.units.prefix_parser import AcceptsPrefix, Identifier, UnitIdentifier


@pytest.fixture()
def reg():
    """Fresh, fully-bootstrapped parser for isolation per test."""
    return regmod._bootstrap_default_parser()


@pytest.mark.parametrize("long_name, short_name", regmod._SI_UNITS + regmod._INFORMATION_UNITS)
def test_both_spellings_share_full_name(reg, long_name, short_name):
    assert reg.parse(long_name) == UnitIdentifier(Prefix.none(), long_name, long_name)
    assert reg.parse(short_name) == UnitIdentifier(Prefix.none(), short_name, long_name)


@pytest.mark.parametrize("token, prefix, unit, full", [
    ("km", Prefix.kilo(), "m", "meter"),
    ("kg", Prefix.kilo(), "g", "gram"),
    ("kilogram", Prefix.kilo(), "gram", "gram"),
    ("µs", Prefix.metric(-6), "s", "second"),
    ("das", Prefix.metric(1), "s", "second"),
    ("mmol", Prefix.milli(), "mol", "mole"),
    ("millimole", Prefix.milli(), "mole", "mole"),
    ("GHz", Prefix.metric(9), "Hz", "hertz"),
    ("kN", Prefix.kilo(), "N", "newton"),
    ("mA", Prefix.milli(), "A", "ampere"),
    ("MiB", Prefix.mebi(), "B", "byte"),
    ("gibibyte", Prefix.binary(30), "byte", "byte"),
    ("kbit", Prefix.kilo(), "bit", "bit"),
    ("kilobit", Prefix.kilo(), "bit", "bit"),
    ("Gibit", Prefix.binary(30), "bit", "bit"),
])
def test_default_prefixed_units(reg, token, prefix, unit, full):
    assert reg.parse(token) == UnitIdentifier(prefix, unit, full)


@pytest.mark.parametrize("token", ["KiHz", "kibimeter", "kmeter", "kilom", "um", "x"])
def test_default_identifiers(reg, token):
    assert reg.parse(token) == Identifier(token)


def test_builtin_identifiers_are_claimed(reg):
    for name in regmod._BUILTIN_IDENTIFIERS:
        assert reg.is_other_identifier(name)
        assert name in reg
        with pytest.raises(IdentifierClashError):
            reg.add_unit(name, AcceptsPrefix.none(), False, False, name)


def test_user_definitions_extend_default(reg):
    reg.add_unit("inch", AcceptsPrefix.none(), False, False, "inch")
    reg.add_other_identifier("speed")
    with pytest.raises(IdentifierClashError):
        reg.add_other_identifier("kilometer")


def test_bootstrap_returns_independent_instances():
    a = regmod._bootstrap_default_parser()
    b = regmod._bootstrap_default_parser()
    a.add_other_identifier("only_in_a")
    assert not b.is_other_identifier("only_in_a")


def test_default_parser_is_bootstrapped():
    assert regmod.DEFAULT_PARSER.is_unit("meter")
    assert regmod.DEFAULT_PARSER.is_unit("B")
