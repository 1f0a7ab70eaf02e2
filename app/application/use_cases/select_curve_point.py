from __future__ import annotations

import logging

from app.application.dto.orderbook import CurvePointInput, DescribeCurvePointOutput
from app.application.orderbook_state import OrderbookStore
from app.domain.entities.orderbook import Orderbook, OrderbookSide, SwapSelection, pair_tag
from app.domain.exceptions import (
    OrderbookNotFoundError,
    SelectionInputError,
    TradeRecordShapeError,
)
from app.domain.services.depth_chart import format_tooltip
from app.domain.services.distribution_attribution import attribute_distribution
from app.domain.services.selection import select_curve_point


logger = logging.getLogger(__name__)


def _current_orderbook(store: OrderbookStore, command: CurvePointInput) -> Orderbook:
    published = store.get(pair_tag(command.token0_address, command.token1_address))
    if published is None:
        raise OrderbookNotFoundError("Orderbook not loaded for this pair.")
    return published.orderbook


class SelectCurvePointUseCase:
    def __init__(self, *, store: OrderbookStore, min_percent: float = 0.0):
        self._store = store
        self._min_percent = min_percent

    def execute(self, command: CurvePointInput) -> SwapSelection:
        orderbook = _current_orderbook(self._store, command)
        # Both curves share one pool list.
        selection = select_curve_point(
            command.datapoint,
            token0=orderbook.token0,
            token1=orderbook.token1,
            bids_pools=orderbook.pools,
            asks_pools=orderbook.pools,
            min_percent=self._min_percent,
        )
        self._store.select(orderbook.tag, selection)
        logger.debug(
            "select_curve_point: selected tag=%s side=%s sell_amount=%s",
            orderbook.tag,
            selection.side.value,
            selection.sell_amount,
        )
        return selection


class DescribeCurvePointUseCase:
    def __init__(self, *, store: OrderbookStore, min_percent: float = 0.0):
        self._store = store
        self._min_percent = min_percent

    def execute(self, command: CurvePointInput) -> DescribeCurvePointOutput:
        orderbook = _current_orderbook(self._store, command)
        point = command.datapoint
        try:
            OrderbookSide(point.side)
            attributions = attribute_distribution(
                point.distribution,
                orderbook.pools,
                min_percent=self._min_percent,
            )
        except (ValueError, TradeRecordShapeError) as exc:
            raise SelectionInputError(str(exc)) from exc

        lines = format_tooltip(
            point,
            token0_symbol=orderbook.token0.symbol,
            token1_symbol=orderbook.token1.symbol,
            attributions=attributions,
        )
        return DescribeCurvePointOutput(lines=lines, attributions=attributions)
