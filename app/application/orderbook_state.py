from __future__ import annotations

from dataclasses import dataclass, replace
import logging
from threading import Lock

from app.domain.entities.orderbook import AxisMode, Orderbook, SwapSelection


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PublishedOrderbook:
    orderbook: Orderbook
    refreshed_at: int
    requested_at: float


@dataclass(frozen=True)
class DisplayConfig:
    axis_mode: AxisMode = AxisMode.VALUE
    log_base: float = 10


class OrderbookStore:
    """Current snapshot per token pair, plus display and selection state.

    Snapshots are replaced, never mutated. Each publish bumps `refreshed_at`,
    so readers can tell a new snapshot arrived without comparing contents.
    """

    def __init__(self, *, display: DisplayConfig | None = None):
        self._lock = Lock()
        self._snapshots: dict[str, PublishedOrderbook] = {}
        self._selections: dict[str, SwapSelection] = {}
        self._display = display or DisplayConfig()
        self._sequence = 0

    def publish(self, orderbook: Orderbook, *, requested_at: float) -> PublishedOrderbook | None:
        tag = orderbook.tag
        with self._lock:
            current = self._snapshots.get(tag)
            if current is not None and requested_at < current.requested_at:
                logger.info(
                    "orderbook_store: discard_superseded tag=%s requested_at=%s current_requested_at=%s",
                    tag,
                    requested_at,
                    current.requested_at,
                )
                return None
            self._sequence += 1
            published = PublishedOrderbook(
                orderbook=orderbook,
                refreshed_at=self._sequence,
                requested_at=requested_at,
            )
            self._snapshots[tag] = published
            self._selections.pop(tag, None)

        logger.info(
            "orderbook_store: published tag=%s refreshed_at=%s bids=%s asks=%s",
            tag,
            published.refreshed_at,
            len(orderbook.bids),
            len(orderbook.asks),
        )
        return published

    def get(self, tag: str) -> PublishedOrderbook | None:
        with self._lock:
            return self._snapshots.get(tag)

    def refreshed_at(self, tag: str) -> int | None:
        published = self.get(tag)
        return published.refreshed_at if published is not None else None

    @property
    def display(self) -> DisplayConfig:
        with self._lock:
            return self._display

    def set_display(self, *, axis_mode: AxisMode | None = None, log_base: float | None = None) -> DisplayConfig:
        with self._lock:
            changes = {}
            if axis_mode is not None:
                changes["axis_mode"] = axis_mode
            if log_base is not None:
                changes["log_base"] = log_base
            self._display = replace(self._display, **changes)
            return self._display

    def select(self, tag: str, selection: SwapSelection) -> None:
        with self._lock:
            self._selections[tag] = selection

    def selection(self, tag: str) -> SwapSelection | None:
        with self._lock:
            return self._selections.get(tag)
