from __future__ import annotations

import pytest

from timebenchy import MarkLedger, get_ledger, mark, measure, scoped_ledger

from ._helpers import FakeClock


def test_no_ledger_in_scope_by_default():
    assert get_ledger() is None
    mark("ignored")


def test_scoped_ledger_receives_marks():
    ledger = MarkLedger(clock=FakeClock([1.0, 2.5]))

    with scoped_ledger(ledger) as scoped:
        assert scoped is ledger
        assert get_ledger() is ledger
        mark("a")
        mark("b")

    assert get_ledger() is None
    assert ledger.labels() == ["a", "b"]
    assert ledger.span("a", "b") == 1.5


def test_nested_scopes_restore_outer_ledger():
    outer = MarkLedger(clock=FakeClock())
    inner = MarkLedger(clock=FakeClock())

    with scoped_ledger(outer):
        with scoped_ledger(inner):
            mark("inner")
        mark("outer")

    assert inner.labels() == ["inner"]
    assert outer.labels() == ["outer"]


def test_scope_can_disable_marking():
    ledger = MarkLedger(clock=FakeClock())

    with scoped_ledger(ledger):
        with scoped_ledger(None):
            mark("hidden")
        mark("visible")

    assert ledger.labels() == ["visible"]


def test_measure_marks_current_ledger_on_exit():
    ledger = MarkLedger(clock=FakeClock([1.0, 4.0]))

    with scoped_ledger(ledger):
        mark("before")
        with pytest.raises(RuntimeError):
            with measure("work"):
                assert "work" not in ledger
                raise RuntimeError("boom")

    assert ledger.span("before", "work") == 3.0


def test_measure_without_ledger_runs_block():
    ran = []
    with measure("unscoped"):
        ran.append(True)
    assert ran == [True]
