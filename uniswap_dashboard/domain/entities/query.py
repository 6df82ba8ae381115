from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class QueryEnvelope:
    query: Any
    variables: Any = None
    operation_name: Any = None

    def to_body(self) -> dict:
        body: dict[str, Any] = {"query": self.query}
        if self.variables is not None:
            body["variables"] = self.variables
        if self.operation_name is not None:
            body["operationName"] = self.operation_name
        return body


@dataclass(frozen=True)
class UpstreamResponse:
    status_code: int
    body: Any
