from __future__ import annotations

import pytest

from app.domain.exceptions import (
    InvalidTokenAddressError,
    OrderbookBackendError,
    OrderbookFetchError,
    OrderbookPayloadError,
)
from app.infrastructure.clients.orderbook_api_client import (
    InvalidAddressError,
    OrderbookApiBackendError,
    OrderbookApiTimeoutError,
)
from app.infrastructure.clients.orderbook_source_adapter import OrderbookApiSourceAdapter


def _token(address: str, symbol: str, decimals: int) -> dict:
    return {"address": address, "decimals": decimals, "symbol": symbol, "gas": "29962"}


def _trade(amount: float, ratio: float, pools: int = 2) -> dict:
    return {
        "amount": amount,
        "output": amount * ratio,
        "distribution": [50.0] * pools,
        "gas_costs": [100000.0] * pools,
        "gas_costs_usd": [0.2] * pools,
        "gas_costs_output": [0.0] * pools,
        "ratio": ratio,
    }


def _body(*, trade_pools: int = 2) -> dict:
    weth = _token("0xc02a", "WETH", 18)
    usdc = _token("0xa0b8", "USDC", 6)
    return {
        "orderbook": {
            "token0": weth,
            "token1": usdc,
            "prices0to1": [1955.5],
            "prices1to0": [0.000511],
            "trades0to1": [_trade(1.0, 1955.5, trade_pools), _trade(1.0, 1955.0, trade_pools)],
            "trades1to0": [_trade(2000.0, 0.00051, trade_pools)],
            "aggt0lqdty": [120.5],
            "aggt1lqdty": [250000.0],
            "pools": [
                {
                    "address": "0xp1",
                    "id": "0xp1",
                    "tokens": [weth, usdc],
                    "protocol_system": "uniswap_v2",
                    "protocol_type_name": "uniswap_v2_pool",
                    "contract_ids": [],
                    "static_attributes": [["fee", "0x0bb8"]],
                    "creation_tx": "0xtx",
                    "fee": 3000,
                },
                {
                    "address": "0xp2",
                    "id": "0xp2",
                    "tokens": [weth, usdc],
                    "protocol_system": "uniswap_v3",
                    "protocol_type_name": "uniswap_v3_pool",
                    "static_attributes": [["fee", "0x01f4"]],
                    "fee": 500,
                },
            ],
            "eth_usd": 1955.4,
            "block": 22000000,
            "timestamp": 1740000000,
        }
    }


class FakeOrderbookApiClient:
    def __init__(self, result):
        self._result = result

    def fetch_orderbook(self, *, token0_address: str, token1_address: str) -> dict:
        _ = (token0_address, token1_address)
        if isinstance(self._result, Exception):
            raise self._result
        return self._result


def _fetch(result):
    adapter = OrderbookApiSourceAdapter(FakeOrderbookApiClient(result))
    return adapter.fetch_orderbook(token0_address="0xt0", token1_address="0xt1")


def test_valid_body_maps_to_domain_payload():
    payload = _fetch(_body())

    assert payload.token0.symbol == "WETH"
    assert len(payload.trades0to1) == 2
    assert payload.trades0to1[0].distribution == (50.0, 50.0)
    assert payload.pools[1].static_attributes == (("fee", "0x01f4"),)
    assert payload.pools[0].tokens[1].symbol == "USDC"
    assert payload.eth_usd == 1955.4
    assert payload.block == 22000000


def test_data_envelope_is_accepted():
    payload = _fetch({"success": True, "data": _body()["orderbook"]})

    assert payload.token1.symbol == "USDC"


def test_trade_vector_length_is_left_to_the_synthesizer():
    payload = _fetch(_body(trade_pools=3))

    assert len(payload.pools) == 2
    assert payload.trades0to1[0].distribution == (50.0, 50.0, 50.0)


def test_wrong_field_type_is_rejected():
    body = _body()
    body["orderbook"]["pools"][0]["tokens"] = "WETH/USDC"

    with pytest.raises(OrderbookPayloadError):
        _fetch(body)


def test_missing_orderbook_is_rejected():
    with pytest.raises(OrderbookPayloadError):
        _fetch({"success": True})


def test_missing_required_field_is_rejected():
    body = _body()
    del body["orderbook"]["trades0to1"][0]["ratio"]

    with pytest.raises(OrderbookPayloadError):
        _fetch(body)


@pytest.mark.parametrize(
    ("client_error", "domain_error"),
    [
        (InvalidAddressError("token0 must be a valid address."), InvalidTokenAddressError),
        (OrderbookApiBackendError("simulation failed"), OrderbookBackendError),
        (OrderbookApiTimeoutError("timed out"), OrderbookFetchError),
    ],
)
def test_client_errors_become_domain_errors(client_error, domain_error):
    with pytest.raises(domain_error):
        _fetch(client_error)
