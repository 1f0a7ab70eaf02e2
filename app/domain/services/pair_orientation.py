from __future__ import annotations


def invert_float_price(price: float, *, field_name: str = "price") -> float:
    if price <= 0:
        raise ValueError(f"{field_name} must be positive.")
    return 1.0 / price


def invert_optional_price(price: float | None, *, field_name: str = "price") -> float | None:
    if price is None:
        return None
    return invert_float_price(price, field_name=field_name)
