from __future__ import annotations

from app.domain.entities.orderbook import OrderbookPayload, Pool, Token, TradeRecord
from app.infrastructure.clients.orderbook_payload import (
    OrderbookPayloadModel,
    PoolPayload,
    TokenPayload,
    TradePayload,
)


def map_token(model: TokenPayload) -> Token:
    return Token(
        address=model.address,
        decimals=model.decimals,
        symbol=model.symbol,
        gas=str(model.gas),
    )


def map_trade(model: TradePayload) -> TradeRecord:
    return TradeRecord(
        amount=model.amount,
        output=model.output,
        distribution=tuple(model.distribution),
        gas_costs=tuple(model.gas_costs),
        gas_costs_usd=tuple(model.gas_costs_usd),
        gas_costs_output=tuple(model.gas_costs_output),
        ratio=model.ratio,
    )


def map_pool(model: PoolPayload) -> Pool:
    token_a, token_b = (map_token(token) for token in model.tokens)
    return Pool(
        address=model.address,
        id=model.id,
        tokens=(token_a, token_b),
        protocol_system=model.protocol_system,
        protocol_type_name=model.protocol_type_name,
        static_attributes=tuple((key, value) for key, value in model.static_attributes),
        contract_ids=tuple(model.contract_ids),
        creation_tx=model.creation_tx,
        fee=model.fee,
    )


def map_orderbook_payload(model: OrderbookPayloadModel) -> OrderbookPayload:
    return OrderbookPayload(
        token0=map_token(model.token0),
        token1=map_token(model.token1),
        trades0to1=tuple(map_trade(trade) for trade in model.trades0to1),
        trades1to0=tuple(map_trade(trade) for trade in model.trades1to0),
        pools=tuple(map_pool(pool) for pool in model.pools),
        eth_usd=model.eth_usd,
        prices0to1=tuple(model.prices0to1),
        prices1to0=tuple(model.prices1to0),
        aggt0lqdty=tuple(model.aggt0lqdty),
        aggt1lqdty=tuple(model.aggt1lqdty),
        block=model.block,
        timestamp=model.timestamp,
    )
