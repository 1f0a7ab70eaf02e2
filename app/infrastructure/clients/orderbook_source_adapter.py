from __future__ import annotations

import logging

from pydantic import ValidationError

from app.application.ports.orderbook_source_port import OrderbookSourcePort
from app.domain.entities.orderbook import OrderbookPayload
from app.domain.exceptions import (
    InvalidTokenAddressError,
    OrderbookBackendError,
    OrderbookFetchError,
    OrderbookPayloadError,
)
from app.infrastructure.clients.orderbook_api_client import (
    InvalidAddressError,
    OrderbookApiBackendError,
    OrderbookApiClient,
    OrderbookApiError,
)
from app.infrastructure.clients.orderbook_payload import OrderbookResponseModel
from app.infrastructure.mappers.orderbook_mapper import map_orderbook_payload


logger = logging.getLogger(__name__)


class OrderbookApiSourceAdapter(OrderbookSourcePort):
    def __init__(self, client: OrderbookApiClient):
        self._client = client

    def fetch_orderbook(self, *, token0_address: str, token1_address: str) -> OrderbookPayload:
        try:
            raw = self._client.fetch_orderbook(
                token0_address=token0_address,
                token1_address=token1_address,
            )
        except InvalidAddressError as exc:
            raise InvalidTokenAddressError(str(exc)) from exc
        except OrderbookApiBackendError as exc:
            raise OrderbookBackendError(str(exc)) from exc
        except OrderbookApiError as exc:
            raise OrderbookFetchError(str(exc)) from exc

        try:
            model = OrderbookResponseModel.model_validate(raw).resolve()
        except ValidationError as exc:
            logger.warning(
                "orderbook_source: payload_rejected errors=%s",
                exc.error_count(),
            )
            raise OrderbookPayloadError(f"Malformed orderbook payload: {exc}") from exc
        if model is None:
            raise OrderbookPayloadError("Orderbook payload is missing.")
        return map_orderbook_payload(model)
