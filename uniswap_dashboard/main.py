from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from uniswap_dashboard.api.routers import health, pages, relay
from uniswap_dashboard.shared.config import get_settings
from uniswap_dashboard.shared.logging_config import configure_logging


settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(title="Uniswap Dashboard")
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allow_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(relay.router, tags=["relay"])
app.include_router(pages.router, tags=["pages"])
app.include_router(health.router, tags=["health"])
