from __future__ import annotations

from typing import Protocol

from app.domain.entities.orderbook import OrderbookPayload


class OrderbookSourcePort(Protocol):
    def fetch_orderbook(self, *, token0_address: str, token1_address: str) -> OrderbookPayload:
        ...
