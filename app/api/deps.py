from __future__ import annotations

from functools import lru_cache

from app.application.orderbook_state import DisplayConfig, OrderbookStore
from app.application.use_cases.get_depth_chart import GetDepthChartUseCase
from app.application.use_cases.refresh_orderbook import RefreshOrderbookUseCase
from app.application.use_cases.select_curve_point import (
    DescribeCurvePointUseCase,
    SelectCurvePointUseCase,
)
from app.domain.entities.orderbook import AxisMode
from app.infrastructure.clients.orderbook_api_client import (
    OrderbookApiClient,
    OrderbookApiClientSettings,
)
from app.infrastructure.clients.orderbook_source_adapter import OrderbookApiSourceAdapter
from app.shared.config import get_settings


@lru_cache(maxsize=1)
def get_orderbook_store() -> OrderbookStore:
    settings = get_settings()
    return OrderbookStore(
        display=DisplayConfig(
            axis_mode=AxisMode(settings.depth_chart_axis),
            log_base=settings.depth_chart_log_base,
        )
    )


@lru_cache(maxsize=1)
def _get_orderbook_api_client() -> OrderbookApiClient:
    settings = get_settings()
    return OrderbookApiClient(
        OrderbookApiClientSettings(
            api_base=settings.orderbook_api_base,
            api_key=settings.orderbook_api_key,
            timeout_seconds=settings.orderbook_timeout_seconds,
            max_retries=settings.orderbook_max_retries,
            error_marker=settings.orderbook_error_marker,
        )
    )


def get_refresh_orderbook_use_case() -> RefreshOrderbookUseCase:
    return RefreshOrderbookUseCase(
        source_port=OrderbookApiSourceAdapter(_get_orderbook_api_client()),
        store=get_orderbook_store(),
    )


def get_depth_chart_use_case() -> GetDepthChartUseCase:
    return GetDepthChartUseCase(store=get_orderbook_store())


def get_select_curve_point_use_case() -> SelectCurvePointUseCase:
    return SelectCurvePointUseCase(
        store=get_orderbook_store(),
        min_percent=get_settings().attribution_min_percent,
    )


def get_describe_curve_point_use_case() -> DescribeCurvePointUseCase:
    return DescribeCurvePointUseCase(
        store=get_orderbook_store(),
        min_percent=get_settings().attribution_min_percent,
    )
