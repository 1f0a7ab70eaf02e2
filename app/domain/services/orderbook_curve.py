from __future__ import annotations

import logging
from collections.abc import Iterable

from app.domain.entities.orderbook import CurvePoint, OrderbookSide, TradeRecord
from app.domain.services.pair_orientation import invert_float_price


logger = logging.getLogger(__name__)


def _sorted_by_price(points: list[CurvePoint]) -> list[CurvePoint]:
    # sorted() is stable: equal prices keep the upstream size order.
    return sorted(points, key=lambda point: point.price)


def build_bid_curve(trades: Iterable[TradeRecord]) -> list[CurvePoint]:
    """token0 -> token1 trades. The ratio is already token1 per token0."""
    points = [
        CurvePoint(
            price=trade.ratio,
            input=trade.amount,
            side=OrderbookSide.BID,
            distribution=tuple(trade.distribution),
            output=trade.ratio * trade.amount,
        )
        for trade in trades
    ]
    return _sorted_by_price(points)


def build_ask_curve(trades: Iterable[TradeRecord]) -> list[CurvePoint]:
    """token1 -> token0 trades, re-expressed as token1 per token0.

    Output stays ratio * amount, i.e. token0 bought for the token1 sold.
    """
    points: list[CurvePoint] = []
    for trade in trades:
        try:
            price = invert_float_price(trade.ratio, field_name="ratio")
        except ValueError:
            logger.debug(
                "orderbook_curve: skip_ask_point amount=%s ratio=%s",
                trade.amount,
                trade.ratio,
            )
            continue
        points.append(
            CurvePoint(
                price=price,
                input=trade.amount,
                side=OrderbookSide.ASK,
                distribution=tuple(trade.distribution),
                output=trade.ratio * trade.amount,
            )
        )
    return _sorted_by_price(points)


def build_curves(
    trades0to1: Iterable[TradeRecord],
    trades1to0: Iterable[TradeRecord],
) -> tuple[list[CurvePoint], list[CurvePoint]]:
    return build_bid_curve(trades0to1), build_ask_curve(trades1to0)
