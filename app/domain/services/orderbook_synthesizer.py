from __future__ import annotations

from collections.abc import Iterable
import logging

from app.domain.entities.orderbook import (
    MidPriceDescriptor,
    Orderbook,
    OrderbookPayload,
    TradeRecord,
)
from app.domain.exceptions import TradeRecordShapeError
from app.domain.services.mid_price import compute_mid_price, invert_mid_price
from app.domain.services.orderbook_curve import build_curves
from app.domain.services.trade_normalizer import dedupe_trades


logger = logging.getLogger(__name__)


def _split_by_shape(
    trades: Iterable[TradeRecord],
    pool_count: int,
) -> tuple[list[TradeRecord], int]:
    kept: list[TradeRecord] = []
    dropped = 0
    for trade in trades:
        try:
            trade.check_shape(pool_count)
        except TradeRecordShapeError as exc:
            logger.warning(
                "orderbook_synthesizer: drop_trade amount=%s error=%s",
                trade.amount,
                exc,
            )
            dropped += 1
            continue
        kept.append(trade)
    return kept, dropped


def synthesize_orderbook(payload: OrderbookPayload) -> Orderbook:
    """Build curves and mid-price descriptors from one upstream payload.

    Records whose vectors do not line up with the pool list are dropped.
    When that happens the snapshot is still built from the remaining records,
    but it is marked degraded and both descriptors stay undefined.
    """
    pool_count = len(payload.pools)
    shaped0to1, dropped0to1 = _split_by_shape(payload.trades0to1, pool_count)
    shaped1to0, dropped1to0 = _split_by_shape(payload.trades1to0, pool_count)
    degraded = bool(dropped0to1 or dropped1to0)

    trades0to1 = dedupe_trades(shaped0to1)
    trades1to0 = dedupe_trades(shaped1to0)
    bids, asks = build_curves(trades0to1, trades1to0)
    if degraded:
        mpd0to1 = MidPriceDescriptor()
        mpd1to0 = MidPriceDescriptor()
    else:
        mpd0to1 = compute_mid_price(bids, asks)
        mpd1to0 = invert_mid_price(mpd0to1)

    return Orderbook(
        token0=payload.token0,
        token1=payload.token1,
        trades0to1=tuple(trades0to1),
        trades1to0=tuple(trades1to0),
        pools=payload.pools,
        bids=tuple(bids),
        asks=tuple(asks),
        mpd0to1=mpd0to1,
        mpd1to0=mpd1to0,
        eth_usd=payload.eth_usd,
        prices0to1=payload.prices0to1,
        prices1to0=payload.prices1to0,
        aggt0lqdty=payload.aggt0lqdty,
        aggt1lqdty=payload.aggt1lqdty,
        block=payload.block,
        timestamp=payload.timestamp,
        degraded=degraded,
    )
