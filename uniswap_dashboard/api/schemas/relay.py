from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from uniswap_dashboard.domain.entities.query import QueryEnvelope


class RelayQueryRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    query: Any = Field(None, description="GraphQL document, forwarded unmodified.")
    variables: Any = Field(None, description="GraphQL variables, forwarded when present.")
    operation_name: Any = Field(None, alias="operationName")

    def to_envelope(self) -> QueryEnvelope:
        return QueryEnvelope(
            query=self.query,
            variables=self.variables,
            operation_name=self.operation_name,
        )


class RelayErrorResponse(BaseModel):
    error: str
