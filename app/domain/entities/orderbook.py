from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple

from app.domain.exceptions import TradeRecordShapeError


class OrderbookSide(str, Enum):
    """Side of a curve point, seen from the liquidity provider.

    BID: traders sell token0 for token1, so LPs are buying token0.
    ASK: traders sell token1 for token0, so LPs are selling token0.
    """

    BID = "bid"
    ASK = "ask"


class AxisMode(str, Enum):
    VALUE = "value"
    LOG = "log"


@dataclass(frozen=True)
class Token:
    address: str
    decimals: int
    symbol: str
    gas: str = "0"


@dataclass(frozen=True)
class Pool:
    address: str
    id: str
    tokens: tuple[Token, Token]
    protocol_system: str
    protocol_type_name: str
    static_attributes: tuple[tuple[str, str], ...] = ()
    contract_ids: tuple[str, ...] = ()
    creation_tx: str = ""
    fee: int = 0


@dataclass(frozen=True)
class TradeRecord:
    amount: float
    output: float
    distribution: tuple[float, ...]
    gas_costs: tuple[float, ...]
    gas_costs_usd: tuple[float, ...]
    gas_costs_output: tuple[float, ...]
    ratio: float

    def check_shape(self, pool_count: int) -> None:
        vectors = {
            "distribution": self.distribution,
            "gas_costs": self.gas_costs,
            "gas_costs_usd": self.gas_costs_usd,
            "gas_costs_output": self.gas_costs_output,
        }
        for name, values in vectors.items():
            if len(values) != pool_count:
                raise TradeRecordShapeError(
                    f"{name} has {len(values)} entries, expected {pool_count} (one per pool)."
                )


class CurvePoint(NamedTuple):
    price: float
    input: float
    side: OrderbookSide
    distribution: tuple[float, ...]
    output: float


@dataclass(frozen=True)
class MidPriceDescriptor:
    best_bid: float | None = None
    best_ask: float | None = None
    mid: float | None = None
    spread: float | None = None
    spread_pct: float | None = None

    @property
    def has_liquidity(self) -> bool:
        return self.best_bid is not None and self.best_ask is not None


@dataclass(frozen=True)
class OrderbookPayload:
    """Validated upstream payload, before curves are built."""

    token0: Token
    token1: Token
    trades0to1: tuple[TradeRecord, ...]
    trades1to0: tuple[TradeRecord, ...]
    pools: tuple[Pool, ...]
    eth_usd: float | None = None
    prices0to1: tuple[float, ...] = ()
    prices1to0: tuple[float, ...] = ()
    aggt0lqdty: tuple[float, ...] = ()
    aggt1lqdty: tuple[float, ...] = ()
    block: int | None = None
    timestamp: int | None = None


@dataclass(frozen=True)
class Orderbook:
    token0: Token
    token1: Token
    trades0to1: tuple[TradeRecord, ...]
    trades1to0: tuple[TradeRecord, ...]
    pools: tuple[Pool, ...]
    bids: tuple[CurvePoint, ...]
    asks: tuple[CurvePoint, ...]
    mpd0to1: MidPriceDescriptor
    mpd1to0: MidPriceDescriptor
    eth_usd: float | None = None
    prices0to1: tuple[float, ...] = ()
    prices1to0: tuple[float, ...] = ()
    aggt0lqdty: tuple[float, ...] = ()
    aggt1lqdty: tuple[float, ...] = ()
    block: int | None = None
    timestamp: int | None = None
    degraded: bool = False

    @property
    def tag(self) -> str:
        return pair_tag(self.token0.address, self.token1.address)

    @property
    def is_empty(self) -> bool:
        return not self.bids and not self.asks


@dataclass(frozen=True)
class PoolAttribution:
    percent: float
    protocol: str
    fee_bps: float
    pool_address: str = ""


@dataclass(frozen=True)
class SwapSelection:
    datapoint: CurvePoint
    bids_pools: tuple[Pool, ...]
    asks_pools: tuple[Pool, ...]
    side: OrderbookSide
    sell_token: Token
    buy_token: Token
    sell_amount: float
    buy_amount: float
    attributions: tuple[PoolAttribution, ...] = field(default_factory=tuple)


def pair_tag(token0_address: str, token1_address: str) -> str:
    return f"{token0_address.lower()}-{token1_address.lower()}"
