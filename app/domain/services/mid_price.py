from __future__ import annotations

from collections.abc import Sequence

from app.domain.entities.orderbook import CurvePoint, MidPriceDescriptor
from app.domain.services.pair_orientation import invert_optional_price


def describe_mid_price(best_bid: float | None, best_ask: float | None) -> MidPriceDescriptor:
    if best_bid is None or best_ask is None:
        return MidPriceDescriptor()

    mid = (best_bid + best_ask) / 2
    spread = best_ask - best_bid
    spread_pct = spread / mid if mid != 0 else None
    return MidPriceDescriptor(
        best_bid=best_bid,
        best_ask=best_ask,
        mid=mid,
        spread=spread,
        spread_pct=spread_pct,
    )


def compute_mid_price(
    bids: Sequence[CurvePoint],
    asks: Sequence[CurvePoint],
) -> MidPriceDescriptor:
    """Curves are sorted ascending by price, so both reads are at the boundary."""
    if not bids or not asks:
        return MidPriceDescriptor()
    return describe_mid_price(bids[-1].price, asks[0].price)


def invert_mid_price(descriptor: MidPriceDescriptor) -> MidPriceDescriptor:
    """Same book quoted in token0 per token1: the best bid becomes 1 / best ask."""
    if not descriptor.has_liquidity:
        return MidPriceDescriptor()
    try:
        best_bid = invert_optional_price(descriptor.best_ask, field_name="best_ask")
        best_ask = invert_optional_price(descriptor.best_bid, field_name="best_bid")
    except ValueError:
        return MidPriceDescriptor()
    return describe_mid_price(best_bid, best_ask)
