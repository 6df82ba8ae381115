from __future__ import annotations

from typing import Protocol

from uniswap_dashboard.domain.entities.query import QueryEnvelope, UpstreamResponse


class SubgraphGatewayPort(Protocol):
    async def post_query(self, *, subgraph: str, envelope: QueryEnvelope) -> UpstreamResponse:
        ...
