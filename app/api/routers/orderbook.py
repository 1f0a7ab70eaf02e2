from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.auth import require_api_key
from app.api.deps import (
    get_describe_curve_point_use_case,
    get_depth_chart_use_case,
    get_refresh_orderbook_use_case,
    get_select_curve_point_use_case,
)
from app.api.schemas.orderbook import (
    AxisResponse,
    CurvePointRequest,
    DepthChartResponse,
    DepthSeriesResponse,
    MidPriceResponse,
    OrderbookResponse,
    PoolAttributionResponse,
    PoolResponse,
    SelectionResponse,
    TokenResponse,
    TooltipResponse,
)
from app.application.dto.orderbook import (
    CurvePointInput,
    GetDepthChartInput,
    RefreshOrderbookInput,
)
from app.application.use_cases.get_depth_chart import GetDepthChartUseCase
from app.application.use_cases.refresh_orderbook import RefreshOrderbookUseCase
from app.application.use_cases.select_curve_point import (
    DescribeCurvePointUseCase,
    SelectCurvePointUseCase,
)
from app.domain.entities.orderbook import (
    AxisMode,
    CurvePoint,
    MidPriceDescriptor,
    OrderbookSide,
    Pool,
    PoolAttribution,
    Token,
)
from app.domain.exceptions import (
    DepthChartInputError,
    InvalidTokenAddressError,
    OrderbookFetchError,
    OrderbookNotFoundError,
    OrderbookPayloadError,
    SelectionInputError,
)

router = APIRouter()


def _token(token: Token) -> TokenResponse:
    return TokenResponse(
        address=token.address,
        decimals=token.decimals,
        symbol=token.symbol,
        gas=token.gas,
    )


def _pool(pool: Pool) -> PoolResponse:
    return PoolResponse(
        address=pool.address,
        id=pool.id,
        tokens=[_token(token) for token in pool.tokens],
        protocol_system=pool.protocol_system,
        protocol_type_name=pool.protocol_type_name,
        static_attributes=list(pool.static_attributes),
        creation_tx=pool.creation_tx,
        fee=pool.fee,
    )


def _point(point: CurvePoint) -> tuple:
    return (point.price, point.input, point.side, list(point.distribution), point.output)


def _mid_price(descriptor: MidPriceDescriptor) -> MidPriceResponse:
    return MidPriceResponse(
        best_bid=descriptor.best_bid,
        best_ask=descriptor.best_ask,
        mid=descriptor.mid,
        spread=descriptor.spread,
        spread_pct=descriptor.spread_pct,
    )


def _attribution(item: PoolAttribution) -> PoolAttributionResponse:
    return PoolAttributionResponse(
        percent=item.percent,
        protocol=item.protocol,
        fee_bps=item.fee_bps,
        pool_address=item.pool_address,
    )


def _curve_point_input(req: CurvePointRequest) -> CurvePointInput:
    price, size, side, distribution, output = req.datapoint
    return CurvePointInput(
        token0_address=req.token0,
        token1_address=req.token1,
        datapoint=CurvePoint(
            price=price,
            input=size,
            side=OrderbookSide(side),
            distribution=tuple(distribution),
            output=output,
        ),
    )


@router.get("/v1/orderbook", response_model=OrderbookResponse)
def get_orderbook(
    token0: str,
    token1: str,
    _api_key: str | None = Depends(require_api_key),
    use_case: RefreshOrderbookUseCase = Depends(get_refresh_orderbook_use_case),
):
    try:
        result = use_case.execute(
            RefreshOrderbookInput(token0_address=token0, token1_address=token1)
        )
    except InvalidTokenAddressError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except OrderbookPayloadError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except OrderbookFetchError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    orderbook = result.orderbook
    return OrderbookResponse(
        token0=_token(orderbook.token0),
        token1=_token(orderbook.token1),
        pools=[_pool(pool) for pool in orderbook.pools],
        bids=[_point(point) for point in orderbook.bids],
        asks=[_point(point) for point in orderbook.asks],
        mpd0to1=_mid_price(orderbook.mpd0to1),
        mpd1to0=_mid_price(orderbook.mpd1to0),
        eth_usd=orderbook.eth_usd,
        prices0to1=list(orderbook.prices0to1),
        prices1to0=list(orderbook.prices1to0),
        aggt0lqdty=list(orderbook.aggt0lqdty),
        aggt1lqdty=list(orderbook.aggt1lqdty),
        block=orderbook.block,
        timestamp=orderbook.timestamp,
        degraded=orderbook.degraded,
        refreshed_at=result.refreshed_at,
        published=result.published,
    )


@router.get("/v1/orderbook/depth-chart", response_model=DepthChartResponse)
def get_depth_chart(
    token0: str,
    token1: str,
    axis: AxisMode | None = Query(None, description="value (linear) or log."),
    log_base: float | None = Query(None, description="Log base when axis=log."),
    _api_key: str | None = Depends(require_api_key),
    use_case: GetDepthChartUseCase = Depends(get_depth_chart_use_case),
):
    try:
        result = use_case.execute(
            GetDepthChartInput(
                token0_address=token0,
                token1_address=token1,
                axis_mode=axis,
                log_base=log_base,
            )
        )
    except DepthChartInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    view = result.view
    return DepthChartResponse(
        status=view.status,
        message=view.message,
        token0=result.token0_symbol,
        token1=result.token1_symbol,
        refreshed_at=result.refreshed_at,
        y_axis=AxisResponse(type=view.y_axis.type, log_base=view.y_axis.log_base),
        x_min=view.x_min,
        x_max=view.x_max,
        series=[
            DepthSeriesResponse(
                name=series.name,
                step=series.step,
                data=[_point(point) for point in series.data],
            )
            for series in view.series
        ],
    )


@router.post("/v1/orderbook/select", response_model=SelectionResponse)
def select_point(
    req: CurvePointRequest,
    _api_key: str | None = Depends(require_api_key),
    use_case: SelectCurvePointUseCase = Depends(get_select_curve_point_use_case),
):
    try:
        selection = use_case.execute(_curve_point_input(req))
    except OrderbookNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except SelectionInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return SelectionResponse(
        datapoint=_point(selection.datapoint),
        bidsPools=[_pool(pool) for pool in selection.bids_pools],
        asksPools=[_pool(pool) for pool in selection.asks_pools],
        side=selection.side,
        sell_token=_token(selection.sell_token),
        buy_token=_token(selection.buy_token),
        sell_amount=selection.sell_amount,
        buy_amount=selection.buy_amount,
        attributions=[_attribution(item) for item in selection.attributions],
    )


@router.post("/v1/orderbook/tooltip", response_model=TooltipResponse)
def describe_point(
    req: CurvePointRequest,
    _api_key: str | None = Depends(require_api_key),
    use_case: DescribeCurvePointUseCase = Depends(get_describe_curve_point_use_case),
):
    try:
        result = use_case.execute(_curve_point_input(req))
    except OrderbookNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except SelectionInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return TooltipResponse(
        lines=result.lines,
        attributions=[_attribution(item) for item in result.attributions],
    )
