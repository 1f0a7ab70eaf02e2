from __future__ import annotations

from dataclasses import dataclass

from app.domain.entities.orderbook import AxisMode, CurvePoint, Orderbook, PoolAttribution
from app.domain.services.depth_chart import DepthChartView


@dataclass(frozen=True)
class RefreshOrderbookInput:
    token0_address: str
    token1_address: str


@dataclass(frozen=True)
class RefreshOrderbookOutput:
    orderbook: Orderbook
    refreshed_at: int
    published: bool


@dataclass(frozen=True)
class GetDepthChartInput:
    token0_address: str
    token1_address: str
    axis_mode: AxisMode | None = None
    log_base: float | None = None


@dataclass(frozen=True)
class GetDepthChartOutput:
    view: DepthChartView
    refreshed_at: int | None
    token0_symbol: str | None
    token1_symbol: str | None


@dataclass(frozen=True)
class CurvePointInput:
    token0_address: str
    token1_address: str
    datapoint: CurvePoint


@dataclass(frozen=True)
class DescribeCurvePointOutput:
    lines: list[str]
    attributions: list[PoolAttribution]
