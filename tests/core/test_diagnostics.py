# pytest tests for unitlex.core.span, unitlex.core.diagnostics and unitlex.core.errors
import pytest

from unitlex.core.diagnostics import Diagnostic, Label
from unitlex.core.errors import IdentifierClashError, NameResolutionError
from unitlex.core.span import Span


# ---------------------------------------------------------------------------
# Span
# ---------------------------------------------------------------------------

def test_span_byte_range_and_len():
    s = Span(1, 4, 9)
    assert s.byte_range == range(4, 9)
    assert len(s) == 5


def test_dummy_span_is_empty():
    s = Span.dummy()
    assert s.code_source_index == 0
    assert len(s) == 0


@pytest.mark.parametrize("start, end", [(5, 2), (-1, 3), (0, -1)])
def test_invalid_span_rejected(start, end):
    with pytest.raises(ValueError):
        Span(0, start, end)


# ---------------------------------------------------------------------------
# Diagnostic builders
# ---------------------------------------------------------------------------

def test_builders_return_new_instances():
    base = Diagnostic.error()
    msg = base.with_message("boom")
    assert base.message == ""
    assert msg.message == "boom"
    assert msg.severity == "error"


def test_with_labels_appends():
    a = Label.primary(0, range(0, 1)).with_message("a")
    b = Label.secondary(0, range(2, 3))
    d = Diagnostic.warning().with_labels([a]).with_labels([b])
    assert d.labels == (a, b)
    assert d.primary_labels == (a,)


# ---------------------------------------------------------------------------
# IdentifierClashError
# ---------------------------------------------------------------------------

def test_identifier_clash_diagnostic_payload():
    err = IdentifierClashError.at("kilometer", Span(3, 10, 19))

    assert err.name == "kilometer"
    assert err.diagnostic.severity == "error"
    assert err.diagnostic.message == "identifier clash in definition"

    (label,) = err.diagnostic.labels
    assert label.style == "primary"
    assert label.code_source_index == 3
    assert label.byte_range == range(10, 19)
    assert label.message == "Identifier is already in use"


def test_identifier_clash_is_a_value_error():
    err = IdentifierClashError.at("x", Span.dummy())
    assert isinstance(err, NameResolutionError)
    assert isinstance(err, ValueError)
    assert "'x'" in str(err)
