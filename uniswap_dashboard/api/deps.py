from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from uniswap_dashboard.application.use_cases.relay_query import RelayQueryUseCase
from uniswap_dashboard.infrastructure.clients.dashboard_api_client import DashboardApiClient
from uniswap_dashboard.infrastructure.clients.graph_gateway_client import (
    GraphGatewayClient,
    GraphGatewayClientSettings,
)
from uniswap_dashboard.shared.config import get_settings
from uniswap_dashboard.ui.factories import Factories
from uniswap_dashboard.ui.pool_dashboard import PoolDashboard


@lru_cache(maxsize=1)
def _get_graph_gateway_client() -> GraphGatewayClient:
    settings = get_settings()
    return GraphGatewayClient(
        GraphGatewayClientSettings(
            graph_gateway_base=settings.graph_gateway_base,
            graph_api_key=settings.graph_api_key,
            graph_subgraph_ids=settings.graph_subgraph_ids,
            timeout_seconds=settings.graph_request_timeout_seconds,
        )
    )


def get_relay_query_use_case() -> RelayQueryUseCase:
    return RelayQueryUseCase(gateway_port=_get_graph_gateway_client())


def get_dashboard_api_client() -> DashboardApiClient:
    settings = get_settings()
    return DashboardApiClient(
        api_base=settings.dashboard_api_base,
        pool_id=settings.dashboard_pool_id,
        timeout_seconds=settings.graph_request_timeout_seconds,
    )


def get_pool_dashboard(
    client: DashboardApiClient = Depends(get_dashboard_api_client),
) -> PoolDashboard:
    settings = get_settings()
    return PoolDashboard(
        data_port=client,
        decimals_fallbacks=(settings.token0_default_decimals, settings.token1_default_decimals),
    )


def get_factories(
    client: DashboardApiClient = Depends(get_dashboard_api_client),
) -> Factories:
    return Factories(data_port=client)
