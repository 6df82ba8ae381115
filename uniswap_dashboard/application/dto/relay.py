from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from uniswap_dashboard.domain.entities.query import QueryEnvelope


@dataclass(frozen=True)
class RelayQueryInput:
    subgraph: str
    envelope: QueryEnvelope


@dataclass(frozen=True)
class RelayQueryOutput:
    status_code: int
    body: Any
