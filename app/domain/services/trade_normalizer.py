from __future__ import annotations

from collections.abc import Iterable

from app.domain.entities.orderbook import TradeRecord


def dedupe_trades(trades: Iterable[TradeRecord]) -> list[TradeRecord]:
    """Drop records re-sampled at an already seen input amount.

    The first occurrence wins and the upstream order is kept.
    """
    seen: set[float] = set()
    unique: list[TradeRecord] = []
    for trade in trades:
        if trade.amount in seen:
            continue
        seen.add(trade.amount)
        unique.append(trade)
    return unique
