from __future__ import annotations

import secrets

from fastapi import Header, HTTPException

from app.shared.config import get_settings


def require_api_key(x_api_key: str | None = Header(None)) -> str | None:
    expected = get_settings().api_key
    if not expected:
        return None
    if not x_api_key or not secrets.compare_digest(x_api_key.strip(), expected):
        raise HTTPException(status_code=401, detail="Invalid API key.")
    return x_api_key
