from __future__ import annotations

from html import escape
import json

from uniswap_dashboard.application.dto.dashboard import FactoriesData
from uniswap_dashboard.application.ports.dashboard_data_port import DashboardDataPort
from uniswap_dashboard.domain.services.formatting import format_compact_number, format_usd, shorten_address
from uniswap_dashboard.infrastructure.mappers.snapshot_mapper import map_factories_data
from uniswap_dashboard.ui.components import DataComponent, action_link


class Factories(DataComponent[FactoriesData]):
    title = "Factories"

    def __init__(self, *, data_port: DashboardDataPort, retry_href: str = "/factories"):
        super().__init__(retry_href=retry_href)
        self._data_port = data_port

    def fetch(self) -> FactoriesData:
        return map_factories_data(self._data_port.get_factories_data())

    def render_loaded(self) -> str:
        if self.data is None or self.data.raw is None:
            return f'<section class="component factories"><h2>{escape(self.title)}</h2></section>'

        factory_rows = "".join(
            "<tr>"
            f'<td class="mono">{escape(shorten_address(row.id))}</td>'
            f"<td>{escape(format_compact_number(row.pool_count))}</td>"
            f"<td>{escape(format_compact_number(row.tx_count))}</td>"
            f"<td>{escape(format_usd(row.total_volume_usd))}</td>"
            "</tr>"
            for row in self.data.factories
        )
        bundle_rows = "".join(
            "<tr>"
            f"<td>{escape(row.id)}</td>"
            f"<td>{escape(format_usd(row.eth_price_usd))}</td>"
            "</tr>"
            for row in self.data.bundles
        )
        raw_json = json.dumps(self.data.raw, indent=2)

        return (
            '<section class="component factories">'
            f"<h2>{escape(self.title)}</h2>"
            "<table><thead><tr>"
            "<th>Factory</th><th>Pools</th><th>Transactions</th><th>Total Volume</th>"
            f"</tr></thead><tbody>{factory_rows}</tbody></table>"
            "<h3>ETH Price</h3>"
            "<table><thead><tr><th>Bundle</th><th>ETH Price</th></tr></thead>"
            f"<tbody>{bundle_rows}</tbody></table>"
            f"<pre><span>{escape(raw_json)}</span></pre>"
            f"{action_link(self.retry_href, 'Refresh Data')}"
            "</section>"
        )
