from __future__ import annotations

from collections.abc import Sequence

from app.domain.entities.orderbook import (
    CurvePoint,
    OrderbookSide,
    Pool,
    SwapSelection,
    Token,
)
from app.domain.exceptions import SelectionInputError, TradeRecordShapeError
from app.domain.services.distribution_attribution import attribute_distribution


def select_curve_point(
    point: CurvePoint,
    *,
    token0: Token,
    token1: Token,
    bids_pools: Sequence[Pool],
    asks_pools: Sequence[Pool],
    min_percent: float = 0.0,
) -> SwapSelection:
    """Project a clicked curve point onto swap composer inputs.

    BID points sell token0 for token1, ASK points sell token1 for token0.
    """
    try:
        side = OrderbookSide(point.side)
    except ValueError as exc:
        raise SelectionInputError(f"Unknown side: {point.side}") from exc
    if point.input < 0 or point.output < 0:
        raise SelectionInputError("Selected amounts must not be negative.")

    pools = bids_pools if side is OrderbookSide.BID else asks_pools
    try:
        attributions = attribute_distribution(point.distribution, pools, min_percent=min_percent)
    except TradeRecordShapeError as exc:
        raise SelectionInputError(str(exc)) from exc

    sell_token, buy_token = (token0, token1) if side is OrderbookSide.BID else (token1, token0)
    return SwapSelection(
        datapoint=CurvePoint(
            price=point.price,
            input=point.input,
            side=side,
            distribution=tuple(point.distribution),
            output=point.output,
        ),
        bids_pools=tuple(bids_pools),
        asks_pools=tuple(asks_pools),
        side=side,
        sell_token=sell_token,
        buy_token=buy_token,
        sell_amount=point.input,
        buy_amount=point.output,
        attributions=tuple(attributions),
    )
