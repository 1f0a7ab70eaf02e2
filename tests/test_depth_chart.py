from __future__ import annotations

import pytest

from app.domain.entities.orderbook import (
    AxisMode,
    CurvePoint,
    MidPriceDescriptor,
    Orderbook,
    OrderbookSide,
    PoolAttribution,
    Token,
)
from app.domain.exceptions import DepthChartInputError
from app.domain.services.depth_chart import build_depth_chart, format_tooltip, resolve_axis


WETH = Token(address="0xc02a", decimals=18, symbol="WETH")
USDC = Token(address="0xa0b8", decimals=6, symbol="USDC")


def _orderbook(bids=(), asks=()) -> Orderbook:
    return Orderbook(
        token0=WETH,
        token1=USDC,
        trades0to1=(),
        trades1to0=(),
        pools=(),
        bids=tuple(bids),
        asks=tuple(asks),
        mpd0to1=MidPriceDescriptor(),
        mpd1to0=MidPriceDescriptor(),
    )


BIDS = (
    CurvePoint(1949.0, 16.0, OrderbookSide.BID, (100.0,), 31184.0),
    CurvePoint(1955.5, 2.0, OrderbookSide.BID, (100.0,), 3911.0),
)
ASKS = (
    CurvePoint(1960.0, 2000.0, OrderbookSide.ASK, (100.0,), 1.0204),
    CurvePoint(1971.0, 8000.0, OrderbookSide.ASK, (100.0,), 4.0589),
)


def test_missing_snapshot_reports_loading():
    view = build_depth_chart(None)

    assert view.status == "loading"
    assert view.message == "Loading orderbook"
    assert view.series == ()


def test_empty_snapshot_reports_no_liquidity():
    view = build_depth_chart(_orderbook())

    assert view.status == "empty"
    assert view.message == "No liquidity for this pair"


def test_ready_chart_uses_snapshot_points_unchanged():
    orderbook = _orderbook(BIDS, ASKS)

    view = build_depth_chart(orderbook)

    assert view.status == "ready"
    bids_series, asks_series = view.series
    assert (bids_series.name, bids_series.step) == ("Bids", "start")
    assert (asks_series.name, asks_series.step) == ("Asks", "end")
    assert bids_series.data is orderbook.bids
    assert asks_series.data is orderbook.asks
    assert view.x_min == 1949.0
    assert view.x_max == 1971.0


def test_axis_switch_keeps_the_same_points():
    orderbook = _orderbook(BIDS, ASKS)

    linear = build_depth_chart(orderbook, axis_mode=AxisMode.VALUE)
    logarithmic = build_depth_chart(orderbook, axis_mode=AxisMode.LOG, log_base=2)

    assert linear.series == logarithmic.series
    assert linear.y_axis.log_base is None
    assert logarithmic.y_axis.type is AxisMode.LOG
    assert logarithmic.y_axis.log_base == 2


@pytest.mark.parametrize("log_base", [0, -10, 1])
def test_invalid_log_base_is_rejected(log_base: float):
    with pytest.raises(DepthChartInputError):
        resolve_axis(AxisMode.LOG, log_base)


def test_log_base_is_ignored_on_linear_axis():
    assert resolve_axis("value", 0).log_base is None


def test_unknown_axis_mode_is_rejected():
    with pytest.raises(DepthChartInputError):
        resolve_axis("sqrt", 10)


def test_bid_tooltip_lines():
    attributions = [
        PoolAttribution(percent=20.0, protocol="uniswap_v2", fee_bps=30.0),
        PoolAttribution(percent=30.0, protocol="uniswap_v3", fee_bps=5.0),
        PoolAttribution(percent=50.0, protocol="uniswap_v4", fee_bps=1.0),
    ]

    lines = format_tooltip(
        BIDS[1],
        token0_symbol="WETH",
        token1_symbol="USDC",
        attributions=attributions,
    )

    assert lines == [
        "You sell",
        "= 2 WETH",
        "Simulated price",
        "= 1,955.5 USDC for 1 WETH",
        "= 0.0005114 WETH for 1 USDC",
        "You buy",
        "= 3,911 USDC",
        "Distribution",
        "- 20% in uniswap_v2 30bps",
        "- 30% in uniswap_v3 5bps",
        "- 50% in uniswap_v4 1bps",
    ]


def test_ask_tooltip_sells_token1():
    lines = format_tooltip(
        ASKS[0],
        token0_symbol="WETH",
        token1_symbol="USDC",
        attributions=[PoolAttribution(percent=100.0, protocol="uniswap_v3", fee_bps=0.3)],
    )

    assert lines[1] == "= 2,000 USDC"
    assert lines[6] == "= 1.0204 WETH"
    assert lines[-1] == "- 100% in uniswap_v3 0.3bps"
