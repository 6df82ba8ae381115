from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from uniswap_dashboard.domain.entities.query import QueryEnvelope
from uniswap_dashboard.domain.exceptions import SubgraphNotConfiguredError
from uniswap_dashboard.infrastructure.clients.graph_gateway_client import (
    GraphGatewayClient,
    GraphGatewayClientSettings,
)


def _make_client(handler, *, api_key: str = "api-key") -> GraphGatewayClient:
    return GraphGatewayClient(
        GraphGatewayClientSettings(
            graph_gateway_base="https://gateway.thegraph.com/api",
            graph_api_key=api_key,
            graph_subgraph_ids={"uniswap": "uniswap-id", "messari": "https://example.com/messari/"},
            timeout_seconds=10,
        ),
        transport=httpx.MockTransport(handler),
    )


def test_post_query_forwards_envelope_with_bearer_token():
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["url"] = str(request.url)
        captured["authorization"] = request.headers.get("Authorization")
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json={"data": {"factories": []}})

    client = _make_client(handler)
    envelope = QueryEnvelope(query="{ factories { id } }", variables={"first": 5}, operation_name="Factories")

    response = asyncio.run(client.post_query(subgraph="uniswap", envelope=envelope))

    assert captured["url"] == "https://gateway.thegraph.com/api/subgraphs/id/uniswap-id"
    assert captured["authorization"] == "Bearer api-key"
    assert captured["body"] == {
        "query": "{ factories { id } }",
        "variables": {"first": 5},
        "operationName": "Factories",
    }
    assert response.status_code == 200
    assert response.body == {"data": {"factories": []}}


def test_post_query_omits_absent_optional_keys():
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json={"data": {}})

    client = _make_client(handler)
    asyncio.run(client.post_query(subgraph="uniswap", envelope=QueryEnvelope(query="{ bundles { id } }")))

    assert captured["body"] == {"query": "{ bundles { id } }"}


def test_post_query_returns_non_ok_status_and_body_verbatim():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"errors": [{"message": "bad query"}]})

    client = _make_client(handler)
    response = asyncio.run(client.post_query(subgraph="uniswap", envelope=QueryEnvelope(query="{")))

    assert response.status_code == 400
    assert response.body == {"errors": [{"message": "bad query"}]}


def test_post_query_uses_full_url_subgraph_setting_unchanged():
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["url"] = str(request.url)
        return httpx.Response(200, json={"data": {}})

    client = _make_client(handler)
    asyncio.run(client.post_query(subgraph="messari", envelope=QueryEnvelope(query="{ a }")))

    assert captured["url"] == "https://example.com/messari"


def test_post_query_raises_on_non_json_body():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="<html>bad gateway</html>")

    client = _make_client(handler)
    with pytest.raises(ValueError):
        asyncio.run(client.post_query(subgraph="uniswap", envelope=QueryEnvelope(query="{ a }")))


def test_post_query_requires_api_key():
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected without an api key")

    client = _make_client(handler, api_key="  ")
    with pytest.raises(SubgraphNotConfiguredError):
        asyncio.run(client.post_query(subgraph="uniswap", envelope=QueryEnvelope(query="{ a }")))


def test_post_query_rejects_unknown_subgraph():
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected for an unknown subgraph")

    client = _make_client(handler)
    with pytest.raises(SubgraphNotConfiguredError):
        asyncio.run(client.post_query(subgraph="sushiswap", envelope=QueryEnvelope(query="{ a }")))


def test_post_query_rejects_non_finite_numbers():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            content=b'{"data": {"pool": {"price": NaN}}}',
            headers={"Content-Type": "application/json"},
        )

    client = _make_client(handler)
    with pytest.raises(ValueError):
        asyncio.run(client.post_query(subgraph="uniswap", envelope=QueryEnvelope(query="{ a }")))
