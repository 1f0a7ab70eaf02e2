from __future__ import annotations

from app.application.dto.orderbook import GetDepthChartInput, GetDepthChartOutput
from app.application.orderbook_state import OrderbookStore
from app.domain.entities.orderbook import pair_tag
from app.domain.services.depth_chart import build_depth_chart, resolve_axis


class GetDepthChartUseCase:
    def __init__(self, *, store: OrderbookStore):
        self._store = store

    def execute(self, command: GetDepthChartInput) -> GetDepthChartOutput:
        display = self._store.display
        axis_mode = command.axis_mode if command.axis_mode is not None else display.axis_mode
        log_base = command.log_base if command.log_base is not None else display.log_base
        # Validate before touching shared state.
        y_axis = resolve_axis(axis_mode, log_base)
        if command.axis_mode is not None or command.log_base is not None:
            # log_base is only kept when it was validated for a log axis.
            self._store.set_display(axis_mode=y_axis.type, log_base=y_axis.log_base)

        published = self._store.get(pair_tag(command.token0_address, command.token1_address))
        orderbook = published.orderbook if published is not None else None
        view = build_depth_chart(orderbook, axis_mode=y_axis.type, log_base=log_base)
        return GetDepthChartOutput(
            view=view,
            refreshed_at=published.refreshed_at if published is not None else None,
            token0_symbol=orderbook.token0.symbol if orderbook is not None else None,
            token1_symbol=orderbook.token1.symbol if orderbook is not None else None,
        )
