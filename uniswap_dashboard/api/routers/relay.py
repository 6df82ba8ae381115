from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from uniswap_dashboard.api.deps import get_relay_query_use_case
from uniswap_dashboard.api.schemas.relay import RelayErrorResponse, RelayQueryRequest
from uniswap_dashboard.application.dto.relay import RelayQueryInput
from uniswap_dashboard.application.use_cases.relay_query import RelayQueryUseCase, relay_error_message
from uniswap_dashboard.domain.exceptions import RelayUpstreamError


logger = logging.getLogger(__name__)

router = APIRouter()


def _error_response(message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content=RelayErrorResponse(error=message).model_dump())


async def _relay(request: Request, *, subgraph: str, use_case: RelayQueryUseCase) -> JSONResponse:
    try:
        payload = await request.json()
        body = RelayQueryRequest.model_validate(payload)
    except ValueError as exc:
        logger.error("relay_router: invalid_request_body subgraph=%s error=%s", subgraph, exc)
        return _error_response(relay_error_message(subgraph))

    try:
        result = await use_case.execute(RelayQueryInput(subgraph=subgraph, envelope=body.to_envelope()))
    except RelayUpstreamError as exc:
        return _error_response(str(exc))

    return JSONResponse(status_code=result.status_code, content=result.body)


@router.post("/api/subgraph", responses={500: {"model": RelayErrorResponse}})
async def relay_subgraph(
    request: Request,
    use_case: RelayQueryUseCase = Depends(get_relay_query_use_case),
):
    return await _relay(request, subgraph="uniswap", use_case=use_case)


@router.post("/api/messari", responses={500: {"model": RelayErrorResponse}})
async def relay_messari(
    request: Request,
    use_case: RelayQueryUseCase = Depends(get_relay_query_use_case),
):
    return await _relay(request, subgraph="messari", use_case=use_case)
