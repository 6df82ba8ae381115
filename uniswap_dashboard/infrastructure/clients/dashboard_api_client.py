from __future__ import annotations

import logging

import httpx

from uniswap_dashboard.domain.exceptions import DashboardFetchError
from uniswap_dashboard.infrastructure.clients.queries import (
    FACTORIES_OPERATION_NAME,
    FACTORIES_QUERY,
    POOL_QUERY,
)


logger = logging.getLogger(__name__)


SUBGRAPH_RELAY_PATH = "/api/subgraph"
MESSARI_RELAY_PATH = "/api/messari"


class DashboardApiClient:
    def __init__(
        self,
        *,
        api_base: str,
        pool_id: str,
        timeout_seconds: float = 10,
        transport: httpx.BaseTransport | None = None,
    ):
        self.api_base = api_base.rstrip("/")
        self.pool_id = pool_id
        self.timeout = timeout_seconds
        self._transport = transport

    def get_pool_data(self) -> dict | None:
        return self._post_query(
            MESSARI_RELAY_PATH,
            {"query": POOL_QUERY, "variables": {"id": self.pool_id.lower()}},
        )

    def get_factories_data(self) -> dict | None:
        return self._post_query(
            SUBGRAPH_RELAY_PATH,
            {"query": FACTORIES_QUERY, "variables": {}, "operationName": FACTORIES_OPERATION_NAME},
        )

    def _post_query(self, path: str, body: dict) -> dict | None:
        try:
            with httpx.Client(
                base_url=self.api_base,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = client.post(path, json=body)
        except httpx.HTTPError as exc:
            logger.warning("dashboard_api_client: request_failed path=%s error=%s", path, exc)
            raise DashboardFetchError(str(exc)) from exc

        if not response.is_success:
            logger.warning(
                "dashboard_api_client: response_not_ok path=%s status=%s",
                path,
                response.status_code,
            )
            raise DashboardFetchError(f"{response.status_code} {response.reason_phrase}")

        try:
            payload = response.json()
        except ValueError as exc:
            raise DashboardFetchError(f"Invalid JSON from {path}") from exc
        if not isinstance(payload, dict):
            return None
        return payload.get("data")
