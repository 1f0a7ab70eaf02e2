from __future__ import annotations

from pydantic import BaseModel, Field

from app.domain.entities.orderbook import AxisMode, OrderbookSide


# [price, input, side, distribution, output], the array the chart exchanges.
CurvePointPayload = tuple[float, float, OrderbookSide, list[float], float]


class TokenResponse(BaseModel):
    address: str
    decimals: int
    symbol: str
    gas: str


class PoolResponse(BaseModel):
    address: str
    id: str
    tokens: list[TokenResponse]
    protocol_system: str
    protocol_type_name: str
    static_attributes: list[tuple[str, str]]
    creation_tx: str
    fee: int


class MidPriceResponse(BaseModel):
    best_bid: float | None
    best_ask: float | None
    mid: float | None
    spread: float | None
    spread_pct: float | None


class OrderbookResponse(BaseModel):
    token0: TokenResponse
    token1: TokenResponse
    pools: list[PoolResponse]
    bids: list[CurvePointPayload]
    asks: list[CurvePointPayload]
    mpd0to1: MidPriceResponse
    mpd1to0: MidPriceResponse
    eth_usd: float | None
    prices0to1: list[float]
    prices1to0: list[float]
    aggt0lqdty: list[float]
    aggt1lqdty: list[float]
    block: int | None
    timestamp: int | None
    degraded: bool
    refreshed_at: int
    published: bool


class AxisResponse(BaseModel):
    type: AxisMode
    log_base: float | None


class DepthSeriesResponse(BaseModel):
    name: str
    step: str
    data: list[CurvePointPayload]


class DepthChartResponse(BaseModel):
    status: str
    message: str | None
    token0: str | None
    token1: str | None
    refreshed_at: int | None
    y_axis: AxisResponse
    x_min: float | None
    x_max: float | None
    series: list[DepthSeriesResponse]


class CurvePointRequest(BaseModel):
    token0: str = Field(..., description="token0 address of the loaded pair.")
    token1: str = Field(..., description="token1 address of the loaded pair.")
    datapoint: CurvePointPayload = Field(
        ...,
        description="Clicked point as [price, input, side, distribution, output].",
    )


class PoolAttributionResponse(BaseModel):
    percent: float
    protocol: str
    fee_bps: float
    pool_address: str


class SelectionResponse(BaseModel):
    datapoint: CurvePointPayload
    bidsPools: list[PoolResponse]
    asksPools: list[PoolResponse]
    side: OrderbookSide
    sell_token: TokenResponse
    buy_token: TokenResponse
    sell_amount: float
    buy_amount: float
    attributions: list[PoolAttributionResponse]


class TooltipResponse(BaseModel):
    lines: list[str]
    attributions: list[PoolAttributionResponse]
