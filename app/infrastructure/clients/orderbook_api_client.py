from __future__ import annotations

from dataclasses import dataclass
import json
import logging
import re
import time

import httpx


logger = logging.getLogger(__name__)


ADDRESS_PATTERN = re.compile(r"^0x[0-9a-fA-F]{40}$")
API_KEY_HEADER = "tycho-orderbook-web-api-key"


class OrderbookApiError(RuntimeError):
    pass


class OrderbookApiTimeoutError(OrderbookApiError):
    pass


class OrderbookApiBackendError(OrderbookApiError):
    """The upstream answered 2xx but reported a failure inside the body."""


class InvalidAddressError(ValueError):
    pass


@dataclass(frozen=True)
class OrderbookApiClientSettings:
    api_base: str
    api_key: str
    timeout_seconds: float
    max_retries: int
    error_marker: str


def validate_address(value: str, *, field_name: str) -> str:
    candidate = (value or "").strip()
    if not ADDRESS_PATTERN.match(candidate):
        raise InvalidAddressError(f"{field_name} must be a valid address.")
    return candidate.lower()


class OrderbookApiClient:
    def __init__(
        self,
        settings: OrderbookApiClientSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ):
        self._settings = settings
        self._transport = transport

    @property
    def orderbook_url(self) -> str:
        return f"{self._settings.api_base.rstrip('/')}/orderbook"

    def fetch_orderbook(self, *, token0_address: str, token1_address: str) -> dict:
        token0 = validate_address(token0_address, field_name="token0")
        token1 = validate_address(token1_address, field_name="token1")
        body = {
            "tag": f"{token0}-{token1}",
            "single": False,
            "sp_input": "todo",
            "sp_amount": 0,
        }
        payload = self._post_json(url=self.orderbook_url, body=body)
        logger.info(
            "orderbook_api_client: fetched_orderbook tag=%s trades0to1=%s trades1to0=%s",
            body["tag"],
            len(_orderbook_section(payload).get("trades0to1") or []),
            len(_orderbook_section(payload).get("trades1to0") or []),
        )
        return payload

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        api_key = self._settings.api_key.strip()
        if api_key:
            headers[API_KEY_HEADER] = api_key
        return headers

    def _post_json(self, *, url: str, body: dict) -> dict:
        attempts = max(1, self._settings.max_retries)
        delay = 0.25
        last_exc: Exception | None = None

        for attempt in range(1, attempts + 1):
            try:
                with httpx.Client(
                    timeout=self._settings.timeout_seconds,
                    transport=self._transport,
                ) as client:
                    response = client.post(url, json=body, headers=self._headers())
                    response.raise_for_status()
                    payload = response.json()

                self._raise_on_embedded_error(payload)
                if not isinstance(payload, dict):
                    raise OrderbookApiError("Orderbook response is not a JSON object.")
                return payload
            except OrderbookApiBackendError:
                raise
            except httpx.HTTPStatusError as exc:
                status_code = exc.response.status_code
                if status_code < 500:
                    raise OrderbookApiError(
                        f"Orderbook request rejected with status {status_code}"
                    ) from exc
                last_exc = exc
            except (httpx.HTTPError, OrderbookApiError, ValueError) as exc:
                last_exc = exc

            if attempt == attempts:
                break
            logger.warning(
                "orderbook_api_client: retry attempt=%s/%s error=%s",
                attempt,
                attempts,
                last_exc,
            )
            time.sleep(delay)
            delay *= 2

        if isinstance(last_exc, httpx.TimeoutException):
            raise OrderbookApiTimeoutError(f"Timed out fetching {url}") from last_exc
        raise OrderbookApiError(f"Error fetching {url}: {last_exc}") from last_exc

    def _raise_on_embedded_error(self, payload: object) -> None:
        marker = self._settings.error_marker
        if not marker:
            return
        stringified = json.dumps(payload, separators=(",", ":"))
        if marker in stringified:
            error = payload.get("error") if isinstance(payload, dict) else None
            logger.warning(
                "orderbook_api_client: embedded_error marker=%s error=%s",
                marker,
                error,
            )
            raise OrderbookApiBackendError(str(error) if error else f"Upstream reported a failure ({marker}).")


def _orderbook_section(payload: dict) -> dict:
    section = payload.get("orderbook") or payload.get("data")
    return section if isinstance(section, dict) else {}
