from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _csv(name: str, default: str = "") -> list[str]:
    value = _env(name, default) or ""
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    orderbook_api_base: str
    orderbook_api_key: str
    orderbook_timeout_seconds: float
    orderbook_max_retries: int
    orderbook_error_marker: str
    depth_chart_axis: str
    depth_chart_log_base: float
    attribution_min_percent: float
    api_key: str
    cors_origins: list[str]


def get_settings() -> Settings:
    return Settings(
        orderbook_api_base=_env("ORDERBOOK_API_BASE", "http://localhost:42042/api"),
        orderbook_api_key=_env("ORDERBOOK_API_KEY", ""),
        orderbook_timeout_seconds=float(_env("ORDERBOOK_TIMEOUT_SECONDS", "60")),
        orderbook_max_retries=int(_env("ORDERBOOK_MAX_RETRIES", "1")),
        orderbook_error_marker=_env("ORDERBOOK_ERROR_MARKER", '"success":false'),
        depth_chart_axis=_env("DEPTH_CHART_AXIS", "value"),
        depth_chart_log_base=float(_env("DEPTH_CHART_LOG_BASE", "10")),
        attribution_min_percent=float(_env("ATTRIBUTION_MIN_PERCENT", "0")),
        api_key=_env("API_KEY", ""),
        cors_origins=_csv("CORS_ORIGINS", "*"),
    )
