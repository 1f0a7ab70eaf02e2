from __future__ import annotations

from collections.abc import Callable
import logging
import time

from app.application.dto.orderbook import RefreshOrderbookInput, RefreshOrderbookOutput
from app.application.orderbook_state import OrderbookStore
from app.application.ports.orderbook_source_port import OrderbookSourcePort
from app.domain.entities.orderbook import pair_tag
from app.domain.exceptions import OrderbookFetchError, OrderbookPayloadError
from app.domain.services.orderbook_synthesizer import synthesize_orderbook


logger = logging.getLogger(__name__)


class RefreshOrderbookUseCase:
    def __init__(
        self,
        *,
        source_port: OrderbookSourcePort,
        store: OrderbookStore,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._source_port = source_port
        self._store = store
        self._clock = clock

    def execute(self, command: RefreshOrderbookInput) -> RefreshOrderbookOutput:
        tag = pair_tag(command.token0_address, command.token1_address)
        requested_at = self._clock()
        try:
            payload = self._source_port.fetch_orderbook(
                token0_address=command.token0_address,
                token1_address=command.token1_address,
            )
        except (OrderbookFetchError, OrderbookPayloadError) as exc:
            logger.warning(
                "refresh_orderbook: fetch_failed tag=%s kept_refreshed_at=%s error=%s",
                tag,
                self._store.refreshed_at(tag),
                exc,
            )
            raise

        orderbook = synthesize_orderbook(payload)
        if not orderbook.mpd0to1.has_liquidity:
            logger.info(
                "refresh_orderbook: no_liquidity tag=%s bids=%s asks=%s degraded=%s",
                tag,
                len(orderbook.bids),
                len(orderbook.asks),
                orderbook.degraded,
            )

        published = self._store.publish(orderbook, requested_at=requested_at)
        if published is not None:
            return RefreshOrderbookOutput(
                orderbook=published.orderbook,
                refreshed_at=published.refreshed_at,
                published=True,
            )

        current = self._store.get(orderbook.tag)
        if current is None:
            raise OrderbookFetchError("Orderbook refresh was superseded.")
        return RefreshOrderbookOutput(
            orderbook=current.orderbook,
            refreshed_at=current.refreshed_at,
            published=False,
        )
