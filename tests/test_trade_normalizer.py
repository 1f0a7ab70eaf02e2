from __future__ import annotations

from app.domain.entities.orderbook import TradeRecord
from app.domain.services.trade_normalizer import dedupe_trades


def _trade(amount: float, ratio: float, distribution=(100.0,)) -> TradeRecord:
    size = len(distribution)
    return TradeRecord(
        amount=amount,
        output=amount * ratio,
        distribution=tuple(distribution),
        gas_costs=(0.0,) * size,
        gas_costs_usd=(0.0,) * size,
        gas_costs_output=(0.0,) * size,
        ratio=ratio,
    )


def test_duplicate_amount_keeps_first_occurrence():
    first = _trade(1.0, 2000.0, distribution=(100.0,))
    resampled = _trade(1.0, 1999.0, distribution=(50.0,))
    other = _trade(2.0, 1998.0)

    result = dedupe_trades([first, other, resampled])

    assert result == [first, other]
    assert [trade.amount for trade in result].count(1.0) == 1


def test_order_is_preserved_and_nothing_is_validated():
    trades = [_trade(3.0, 10.0), _trade(-1.0, 0.0), _trade(2.0, 12.0), _trade(3.0, 11.0)]

    result = dedupe_trades(trades)

    assert [trade.amount for trade in result] == [3.0, -1.0, 2.0]


def test_empty_in_empty_out():
    assert dedupe_trades([]) == []
