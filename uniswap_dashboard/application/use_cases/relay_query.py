from __future__ import annotations

import logging

from uniswap_dashboard.application.dto.relay import RelayQueryInput, RelayQueryOutput
from uniswap_dashboard.application.ports.subgraph_gateway_port import SubgraphGatewayPort
from uniswap_dashboard.domain.exceptions import RelayUpstreamError


logger = logging.getLogger(__name__)


RELAY_LABELS = {
    "uniswap": "subgraph",
    "messari": "Messari subgraph",
}


def relay_error_message(subgraph: str) -> str:
    label = RELAY_LABELS.get(subgraph, subgraph)
    return f"Failed to fetch {label} data"


class RelayQueryUseCase:
    def __init__(self, *, gateway_port: SubgraphGatewayPort):
        self._gateway_port = gateway_port

    async def execute(self, command: RelayQueryInput) -> RelayQueryOutput:
        try:
            response = await self._gateway_port.post_query(
                subgraph=command.subgraph,
                envelope=command.envelope,
            )
        except Exception as exc:
            logger.error(
                "relay_query: upstream_failed subgraph=%s error_type=%s error=%s",
                command.subgraph,
                type(exc).__name__,
                exc,
            )
            raise RelayUpstreamError(relay_error_message(command.subgraph)) from exc

        logger.info(
            "relay_query: relayed subgraph=%s status=%s",
            command.subgraph,
            response.status_code,
        )
        return RelayQueryOutput(status_code=response.status_code, body=response.body)
