from __future__ import annotations

from pydantic import BaseModel, Field


class TokenPayload(BaseModel):
    address: str
    decimals: int
    symbol: str
    gas: str | int = "0"


class TradePayload(BaseModel):
    amount: float
    output: float
    distribution: list[float]
    gas_costs: list[float]
    gas_costs_usd: list[float]
    gas_costs_output: list[float]
    ratio: float


class PoolPayload(BaseModel):
    address: str
    id: str
    tokens: list[TokenPayload] = Field(..., min_length=2, max_length=2)
    protocol_system: str
    protocol_type_name: str = ""
    contract_ids: list[str] = Field(default_factory=list)
    static_attributes: list[tuple[str, str]] = Field(default_factory=list)
    creation_tx: str = ""
    fee: int = 0


class OrderbookPayloadModel(BaseModel):
    token0: TokenPayload
    token1: TokenPayload
    prices0to1: list[float] = Field(default_factory=list)
    prices1to0: list[float] = Field(default_factory=list)
    trades0to1: list[TradePayload] = Field(default_factory=list)
    trades1to0: list[TradePayload] = Field(default_factory=list)
    aggt0lqdty: list[float] = Field(default_factory=list)
    aggt1lqdty: list[float] = Field(default_factory=list)
    pools: list[PoolPayload] = Field(default_factory=list)
    eth_usd: float | None = None
    block: int | None = None
    timestamp: int | None = None


class OrderbookResponseModel(BaseModel):
    """Upstream body: `orderbook`, or the API envelope's `data`."""

    orderbook: OrderbookPayloadModel | None = None
    data: OrderbookPayloadModel | None = None

    def resolve(self) -> OrderbookPayloadModel | None:
        return self.orderbook if self.orderbook is not None else self.data
