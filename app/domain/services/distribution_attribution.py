from __future__ import annotations

from collections.abc import Sequence

from app.domain.entities.orderbook import Pool, PoolAttribution
from app.domain.exceptions import TradeRecordShapeError


def decode_fee_bps(static_attributes: Sequence[tuple[str, str]]) -> float:
    """Fee stored as hex in hundredths of a bip ("0x01f4" -> 5 bps)."""
    raw = next(
        (value for key, value in static_attributes if key.lower() == "fee"),
        "",
    )
    raw = (raw or "").strip()
    if not raw or raw.lower() == "0x":
        return 0.0
    return int(raw, 16) / 100


def attribute_distribution(
    distribution: Sequence[float],
    pools: Sequence[Pool],
    *,
    min_percent: float = 0.0,
) -> list[PoolAttribution]:
    if len(distribution) > len(pools):
        raise TradeRecordShapeError(
            f"distribution has {len(distribution)} entries for {len(pools)} pools."
        )

    attributions: list[PoolAttribution] = []
    for pool, percent in zip(pools, distribution):
        if percent <= min_percent:
            continue
        attributions.append(
            PoolAttribution(
                percent=percent,
                protocol=pool.protocol_system,
                fee_bps=decode_fee_bps(pool.static_attributes),
                pool_address=pool.address,
            )
        )
    return attributions
