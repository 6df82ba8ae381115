from __future__ import annotations

from html import escape

from uniswap_dashboard.application.dto.dashboard import PoolDashboardData
from uniswap_dashboard.application.ports.dashboard_data_port import DashboardDataPort
from uniswap_dashboard.domain.entities.pool import PoolSnapshot
from uniswap_dashboard.domain.services.formatting import (
    BalanceStyle,
    format_compact_number,
    format_token_balance,
    format_usd,
    shorten_address,
)
from uniswap_dashboard.domain.services.token_decimals import resolve_token_decimals
from uniswap_dashboard.infrastructure.mappers.snapshot_mapper import map_pool_dashboard_data
from uniswap_dashboard.ui.components import DataComponent, action_link, metric


MIN_BALANCE_SLOTS = 2


def format_pool_balances(pool: PoolSnapshot, *, decimals_fallbacks: tuple[int, ...]) -> list[str]:
    """Formatted balances, one per input token and never fewer than two.

    Missing balances render as zero. The first token renders as a rounded
    whole number, the rest with two decimal places.
    """
    balances = list(pool.input_token_balances)
    balances += ["0"] * (MIN_BALANCE_SLOTS - len(balances))
    formatted = []
    for index, raw in enumerate(balances):
        decimals = resolve_token_decimals(pool, index=index, fallbacks=decimals_fallbacks)
        style = BalanceStyle.INTEGER if index == 0 else BalanceStyle.FIXED
        formatted.append(format_token_balance(raw, decimals=decimals, style=style))
    return formatted


class PoolDashboard(DataComponent[PoolDashboardData]):
    title = "Pool Data"

    def __init__(
        self,
        *,
        data_port: DashboardDataPort,
        decimals_fallbacks: tuple[int, ...] = (18, 6),
        retry_href: str = "/pool",
    ):
        super().__init__(retry_href=retry_href)
        self._data_port = data_port
        self.decimals_fallbacks = decimals_fallbacks

    def fetch(self) -> PoolDashboardData:
        return map_pool_dashboard_data(self._data_port.get_pool_data())

    def render_loaded(self) -> str:
        pool = self.data.pool if self.data is not None else None
        if pool is None:
            return (
                '<section class="component empty">'
                "<h2>No Pool Data Available</h2>"
                "<p>Unable to load pool information at this time.</p>"
                f"{action_link(self.retry_href, 'Retry')}"
                "</section>"
            )

        balances = format_pool_balances(pool, decimals_fallbacks=self.decimals_fallbacks)
        balance_cards = []
        for index, value in enumerate(balances):
            label = f"Token {index} Balance"
            if index < len(pool.input_tokens) and pool.input_tokens[index].symbol:
                label = f"{label} ({pool.input_tokens[index].symbol})"
            balance_cards.append(metric(label, value, css_class="balance"))

        return (
            '<section class="component pool">'
            "<header>"
            f"<h2>{escape(pool.name or 'Uniswap Pool')}</h2>"
            f"<p>{escape(pool.symbol or 'N/A')}</p>"
            f"<p class=\"mono\">ID: {escape(shorten_address(pool.id))}</p>"
            "</header>"
            '<div class="grid">'
            f"{metric('Cumulative Swaps', format_compact_number(pool.cumulative_swap_count or 0))}"
            f"{metric('Total Value Locked', format_usd(pool.total_value_locked_usd))}"
            f"{metric('Pool ID', pool.id)}"
            "</div>"
            "<h3>Token Balances</h3>"
            f'<div class="grid">{"".join(balance_cards)}</div>'
            f"{action_link(self.retry_href, 'Refresh Data')}"
            "</section>"
        )
