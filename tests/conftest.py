# tests/conftest.py
import pytest

from unitlex.units.prefix_parser import AcceptsPrefix, PrefixParser


def _seeded_parser() -> PrefixParser:
    p = PrefixParser()
    p.add_unit("meter", AcceptsPrefix.only_long(), True, False, "meter")
    p.add_unit("m", AcceptsPrefix.only_short(), True, False, "meter")
    p.add_unit("byte", AcceptsPrefix.only_long(), True, True, "byte")
    p.add_unit("B", AcceptsPrefix.only_short(), True, True, "byte")
    p.add_unit("me", AcceptsPrefix.only_short(), False, False, "me")
    return p


@pytest.fixture
def parser():
    """Fresh parser holding meter/m, byte/B and the prefix-less unit 'me'."""
    return _seeded_parser()


@pytest.fixture
def empty_parser():
    return PrefixParser()
