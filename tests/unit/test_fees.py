from __future__ import annotations

import pytest

from tests.unit._fakes import StubExecution
from tradesim.fees import FeeModel, FixedFeeModel, NoFeeModel, PercentageFeeModel


def test_models_satisfy_protocol() -> None:
    for m in (NoFeeModel(), PercentageFeeModel(), FixedFeeModel(1.0)):
        assert isinstance(m, FeeModel)


def test_no_fee() -> None:
    assert NoFeeModel().calculate(StubExecution(size=10, price=100.0)) == 0.0


def test_percentage_fee_on_notional_both_sides() -> None:
    m = PercentageFeeModel(fee_bps=10.0)
    assert m.calculate(StubExecution(size=10, price=100.0)) == pytest.approx(1.0)
    assert m.calculate(StubExecution(size=-10, price=100.0)) == pytest.approx(1.0)


def test_percentage_fee_minimum() -> None:
    m = PercentageFeeModel(fee_bps=10.0, minimum=2.5)
    assert m.calculate(StubExecution(size=1, price=100.0)) == 2.5


def test_percentage_fee_rejects_negative_rate() -> None:
    with pytest.raises(ValueError):
        PercentageFeeModel(fee_bps=-1.0)


def test_fixed_fee_is_pure() -> None:
    m = FixedFeeModel(fee=1.5)
    ex = StubExecution(size=3, price=9.0)
    assert m.calculate(ex) == m.calculate(ex) == 1.5
