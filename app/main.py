from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routers.orderbook import router as orderbook_router
from app.shared.config import get_settings


app = FastAPI(title="AMM Orderbook API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(orderbook_router)


@app.get("/version")
def version():
    return {"version": "0.1.0"}
