from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from app.domain.entities.orderbook import (
    AxisMode,
    CurvePoint,
    Orderbook,
    OrderbookSide,
    PoolAttribution,
)
from app.domain.exceptions import DepthChartInputError


DepthChartStatus = Literal["loading", "empty", "ready"]

BIDS_SERIES = "Bids"
ASKS_SERIES = "Asks"


@dataclass(frozen=True)
class DepthSeries:
    name: str
    step: str
    data: tuple[CurvePoint, ...]


@dataclass(frozen=True)
class AxisConfig:
    type: AxisMode
    log_base: float | None = None


@dataclass(frozen=True)
class DepthChartView:
    status: DepthChartStatus
    message: str | None
    series: tuple[DepthSeries, ...]
    y_axis: AxisConfig
    x_min: float | None = None
    x_max: float | None = None


def resolve_axis(axis_mode: AxisMode | str, log_base: float) -> AxisConfig:
    try:
        mode = AxisMode(axis_mode)
    except ValueError as exc:
        raise DepthChartInputError(f"Unsupported axis mode: {axis_mode}") from exc
    if mode is AxisMode.VALUE:
        return AxisConfig(type=mode)
    if log_base <= 0 or log_base == 1:
        raise DepthChartInputError("log_base must be positive and different from 1.")
    return AxisConfig(type=mode, log_base=log_base)


def build_depth_chart(
    orderbook: Orderbook | None,
    *,
    axis_mode: AxisMode | str = AxisMode.VALUE,
    log_base: float = 10,
) -> DepthChartView:
    """Map a snapshot onto the two chart series.

    The axis only changes how the chart is drawn: the CurvePoints are the
    snapshot's own, never recomputed.
    """
    y_axis = resolve_axis(axis_mode, log_base)

    if orderbook is None:
        return DepthChartView(
            status="loading",
            message="Loading orderbook",
            series=(),
            y_axis=y_axis,
        )
    if orderbook.is_empty:
        return DepthChartView(
            status="empty",
            message="No liquidity for this pair",
            series=(),
            y_axis=y_axis,
        )

    prices = [point.price for point in (*orderbook.bids, *orderbook.asks)]
    return DepthChartView(
        status="ready",
        message=None,
        series=(
            DepthSeries(name=BIDS_SERIES, step="start", data=orderbook.bids),
            DepthSeries(name=ASKS_SERIES, step="end", data=orderbook.asks),
        ),
        y_axis=y_axis,
        x_min=min(prices),
        x_max=max(prices),
    )


def _format_amount(value: float) -> str:
    return f"{value:,.7f}".rstrip("0").rstrip(".")


def _format_percent(value: float) -> str:
    return f"{value:,.2f}".rstrip("0").rstrip(".") + "%"


def format_distribution_line(attribution: PoolAttribution) -> str:
    fee = f"{attribution.fee_bps:,.1f}".rstrip("0").rstrip(".")
    return f"- {_format_percent(attribution.percent)} in {attribution.protocol} {fee}bps"


def format_tooltip(
    point: CurvePoint,
    *,
    token0_symbol: str,
    token1_symbol: str,
    attributions: Sequence[PoolAttribution],
) -> list[str]:
    sold, bought = (
        (token0_symbol, token1_symbol)
        if point.side == OrderbookSide.BID
        else (token1_symbol, token0_symbol)
    )
    lines = [
        "You sell",
        f"= {_format_amount(point.input)} {sold}",
        "Simulated price",
        f"= {_format_amount(point.price)} {token1_symbol} for 1 {token0_symbol}",
    ]
    if point.price > 0:
        lines.append(f"= {_format_amount(1 / point.price)} {token0_symbol} for 1 {token1_symbol}")
    lines.extend(
        [
            "You buy",
            f"= {_format_amount(point.output)} {bought}",
            "Distribution",
        ]
    )
    lines.extend(format_distribution_line(item) for item in attributions)
    return lines
