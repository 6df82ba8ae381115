from __future__ import annotations

from dataclasses import dataclass
import json
import logging

import httpx

from uniswap_dashboard.domain.entities.query import QueryEnvelope, UpstreamResponse
from uniswap_dashboard.domain.exceptions import SubgraphNotConfiguredError


logger = logging.getLogger(__name__)


def _reject_non_finite(token: str):
    raise ValueError(f"Non-finite JSON number in upstream body: {token}")


@dataclass(frozen=True)
class GraphGatewayClientSettings:
    graph_gateway_base: str
    graph_api_key: str
    graph_subgraph_ids: dict
    timeout_seconds: float


class GraphGatewayClient:
    """Posts GraphQL envelopes to The Graph gateway with the bearer key attached.

    The upstream body and status are returned as-is; a body that is not strict
    JSON (including NaN or Infinity literals) raises ``ValueError``.
    """

    def __init__(
        self,
        settings: GraphGatewayClientSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._settings = settings
        self._transport = transport

    async def post_query(self, *, subgraph: str, envelope: QueryEnvelope) -> UpstreamResponse:
        url = self._resolve_subgraph_url(subgraph)
        api_key = self._settings.graph_api_key.strip()
        if not api_key:
            raise SubgraphNotConfiguredError("GRAPH_API_KEY is required for subgraph access.")

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        }
        async with httpx.AsyncClient(
            timeout=self._settings.timeout_seconds,
            transport=self._transport,
        ) as client:
            response = await client.post(url, json=envelope.to_body(), headers=headers)

        payload = json.loads(response.content, parse_constant=_reject_non_finite)
        if not response.is_success:
            logger.warning(
                "graph_gateway_client: upstream_not_ok subgraph=%s status=%s",
                subgraph,
                response.status_code,
            )
        logger.debug(
            "graph_gateway_client: upstream_request subgraph=%s status=%s",
            subgraph,
            response.status_code,
        )
        return UpstreamResponse(status_code=response.status_code, body=payload)

    def _resolve_subgraph_url(self, subgraph: str) -> str:
        subgraph_id = str(self._settings.graph_subgraph_ids.get(subgraph) or "").strip()
        if not subgraph_id:
            raise SubgraphNotConfiguredError(f"Subgraph ID not configured for: {subgraph}")
        return self._build_gateway_url(subgraph_id)

    def _build_gateway_url(self, subgraph_id: str) -> str:
        if subgraph_id.startswith("http://") or subgraph_id.startswith("https://"):
            return subgraph_id.rstrip("/")
        base = self._settings.graph_gateway_base.rstrip("/")
        return f"{base}/subgraphs/id/{subgraph_id}"
