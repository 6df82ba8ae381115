from __future__ import annotations

import pytest

from uniswap_dashboard.domain.entities.pool import InputToken, PoolSnapshot
from uniswap_dashboard.domain.exceptions import DashboardFetchError
from uniswap_dashboard.ui.components import DataComponent, LoadState
from uniswap_dashboard.ui.factories import Factories
from uniswap_dashboard.ui.pool_dashboard import PoolDashboard, format_pool_balances


POOL_PAYLOAD = {
    "liquidityPool": {
        "id": "0x357596dd7a0ef5cb703c5aae4da01edff176ae95",
        "name": "Uniswap V3 Wrapped Ether/USD Coin 0.05%",
        "symbol": "WETH/USDC",
        "inputTokenBalances": ["1000000000000000000000", "500000000"],
        "totalValueLockedUSD": "1234567.891",
        "cumulativeSwapCount": "1523400",
    }
}


class FakeDashboardDataPort:
    def __init__(self, *, pool_responses=None, factories_responses=None):
        self._pool_responses = list(pool_responses or [])
        self._factories_responses = list(factories_responses or [])
        self.pool_calls = 0
        self.factories_calls = 0

    def get_pool_data(self):
        self.pool_calls += 1
        return self._next(self._pool_responses)

    def get_factories_data(self):
        self.factories_calls += 1
        return self._next(self._factories_responses)

    @staticmethod
    def _next(responses):
        item = responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


def _pool(*, balances, tokens=()) -> PoolSnapshot:
    return PoolSnapshot(
        id="0xpool",
        name=None,
        symbol=None,
        input_token_balances=list(balances),
        input_tokens=list(tokens),
        total_value_locked_usd=None,
        cumulative_swap_count=None,
    )


def test_format_pool_balances_uses_fallback_decimals():
    pool = _pool(balances=["1000000000000000000000", "500000000"])

    assert format_pool_balances(pool, decimals_fallbacks=(18, 6)) == ["1,000", "500.00"]


def test_format_pool_balances_prefers_token_decimals_from_subgraph():
    pool = _pool(
        balances=["2500000000", "1000000000000000000"],
        tokens=[
            InputToken(id="0xusdc", symbol="USDC", decimals=6),
            InputToken(id="0xweth", symbol="WETH", decimals=18),
        ],
    )

    assert format_pool_balances(pool, decimals_fallbacks=(18, 6)) == ["2,500", "1.00"]


def test_pool_dashboard_starts_idle_and_renders_loading():
    component = PoolDashboard(data_port=FakeDashboardDataPort())

    assert component.state is LoadState.IDLE
    assert "Loading Pool Data..." in component.render()


def test_pool_dashboard_mount_renders_formatted_pool():
    port = FakeDashboardDataPort(pool_responses=[POOL_PAYLOAD])
    component = PoolDashboard(data_port=port).mount()

    html = component.render()

    assert component.state is LoadState.LOADED
    assert port.pool_calls == 1
    assert "Uniswap V3 Wrapped Ether/USD Coin 0.05%" in html
    assert "WETH/USDC" in html
    assert "ID: 0x3575...ae95" in html
    assert "1.52M" in html
    assert "$1,234,567.89" in html
    assert "1,000" in html
    assert "500.00" in html
    assert 'href="/pool"' in html


def test_pool_dashboard_error_renders_panel_with_retry():
    port = FakeDashboardDataPort(pool_responses=[DashboardFetchError("500 Internal Server Error")])
    component = PoolDashboard(data_port=port).mount()

    html = component.render()

    assert component.state is LoadState.ERROR
    assert "Error Loading Pool Data" in html
    assert "500 Internal Server Error" in html
    assert ">Retry</a>" in html


def test_pool_dashboard_without_pool_renders_empty_state():
    port = FakeDashboardDataPort(pool_responses=[{"liquidityPool": None}])
    html = PoolDashboard(data_port=port).mount().render()

    assert "No Pool Data Available" in html


def test_retry_issues_independent_fetch_without_stale_data():
    port = FakeDashboardDataPort(
        pool_responses=[POOL_PAYLOAD, DashboardFetchError("502 Bad Gateway"), {"liquidityPool": None}]
    )
    component = PoolDashboard(data_port=port).mount()
    assert component.data.pool is not None

    component.retry()
    assert port.pool_calls == 2
    assert component.state is LoadState.ERROR
    assert component.data is None
    assert "Wrapped Ether" not in component.render()

    component.retry()
    assert port.pool_calls == 3
    assert component.error is None
    assert component.data.pool is None
    assert "No Pool Data Available" in component.render()


def test_factories_renders_tables_and_eth_price():
    payload = {
        "factories": [
            {
                "id": "0x1f98431c8ad98523631ae4a59f267346ea31f984",
                "poolCount": "45000",
                "txCount": "123456789",
                "totalVolumeUSD": "1500000000.5",
            }
        ],
        "bundles": [{"id": "1", "ethPriceUSD": "3500.456"}],
    }
    port = FakeDashboardDataPort(factories_responses=[payload])

    html = Factories(data_port=port).mount().render()

    assert "0x1f98...f984" in html
    assert "45.00K" in html
    assert "123.46M" in html
    assert "$1,500,000,000.50" in html
    assert "$3,500.46" in html
    assert "&quot;ethPriceUSD&quot;: &quot;3500.456&quot;" in html


def test_factories_error_then_retry_recovers():
    port = FakeDashboardDataPort(
        factories_responses=[DashboardFetchError("500 Internal Server Error"), {"factories": [], "bundles": []}]
    )
    component = Factories(data_port=port).mount()
    assert "Error Loading Factories" in component.render()

    component.retry()

    assert component.state is LoadState.LOADED
    assert port.factories_calls == 2
    assert "Error Loading" not in component.render()


def test_format_pool_balances_pads_missing_balances_with_zero():
    pool = _pool(balances=[])

    assert format_pool_balances(pool, decimals_fallbacks=(18, 6)) == ["0", "0.00"]


def test_pool_dashboard_without_balances_renders_both_token_slots():
    payload = {"liquidityPool": {"id": "0xpool", "name": "WETH/USDC"}}
    html = PoolDashboard(data_port=FakeDashboardDataPort(pool_responses=[payload])).mount().render()

    assert "Token 0 Balance" in html
    assert "Token 1 Balance" in html
    assert "0.00" in html


def test_pool_dashboard_renders_uint256_sized_balance():
    payload = {"liquidityPool": {"id": "0xpool", "inputTokenBalances": ["1", str(10**40)]}}
    component = PoolDashboard(data_port=FakeDashboardDataPort(pool_responses=[payload])).mount()

    html = component.render()

    assert component.state is LoadState.LOADED
    assert str(10**34) + ".00" in html


def test_data_component_subclass_must_implement_fetch_and_render():
    class HalfBuilt(DataComponent[dict]):
        def fetch(self) -> dict:
            return {}

    with pytest.raises(TypeError):
        HalfBuilt(retry_href="/")
