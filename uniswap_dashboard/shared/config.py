from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


UNISWAP_SUBGRAPH_ID = "5zvR82QoaXYFyDEKLZ9t6v9adgnptxYpKpSbxtgVENFV"
MESSARI_SUBGRAPH_ID = "8cLf29KxAedWLVaEqjV8qKomdwwXQxjptBZFrqWNH5u2"
DEFAULT_POOL_ID = "0x357596DD7a0EF5CB703C5AAe4dA01EDFf176aE95"


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _csv(name: str, default: str) -> tuple[str, ...]:
    value = _env(name, default) or ""
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    graph_api_key: str
    graph_gateway_base: str
    graph_subgraph_ids: dict
    graph_request_timeout_seconds: float
    dashboard_api_base: str
    dashboard_pool_id: str
    token0_default_decimals: int
    token1_default_decimals: int
    cors_allow_origins: tuple[str, ...]
    log_level: str


def get_settings() -> Settings:
    subgraphs = {
        "uniswap": _env("GRAPH_SUBGRAPH_ID_UNISWAP", UNISWAP_SUBGRAPH_ID),
        "messari": _env("GRAPH_SUBGRAPH_ID_MESSARI", MESSARI_SUBGRAPH_ID),
    }
    return Settings(
        graph_api_key=_env("GRAPH_API_KEY", ""),
        graph_gateway_base=_env("GRAPH_GATEWAY_BASE", "https://gateway.thegraph.com/api"),
        graph_subgraph_ids=subgraphs,
        graph_request_timeout_seconds=float(_env("GRAPH_REQUEST_TIMEOUT_SECONDS", "10")),
        dashboard_api_base=_env("DASHBOARD_API_BASE", "http://localhost:8000"),
        dashboard_pool_id=_env("DASHBOARD_POOL_ID", DEFAULT_POOL_ID),
        token0_default_decimals=int(_env("TOKEN0_DEFAULT_DECIMALS", "18")),
        token1_default_decimals=int(_env("TOKEN1_DEFAULT_DECIMALS", "6")),
        cors_allow_origins=_csv("CORS_ALLOW_ORIGINS", "*"),
        log_level=(_env("LOG_LEVEL", "INFO") or "INFO").upper(),
    )
