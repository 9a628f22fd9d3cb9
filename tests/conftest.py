from __future__ import annotations

import pytest

from timebenchy import MarkLedger

from ._helpers import FakeClock


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def ledger(clock: FakeClock) -> MarkLedger:
    return MarkLedger(clock=clock)


@pytest.fixture
def scenario_ledger() -> MarkLedger:
    ledger = MarkLedger(clock=FakeClock([0.0, 1.2345, 3.0]))
    ledger.mark("Start")
    ledger.mark("Mid")
    ledger.mark("End")
    return ledger
