from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from uniswap_dashboard.application.dto.dashboard import FactoriesData, PoolDashboardData
from uniswap_dashboard.domain.entities.factory import BundleSnapshot, FactorySnapshot
from uniswap_dashboard.domain.entities.pool import InputToken, PoolSnapshot


def _str_or_none(value: Any) -> str | None:
    return str(value) if value is not None else None


def _int_or_none(value: Any) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def map_row_to_input_token(row: Mapping[str, Any]) -> InputToken:
    return InputToken(
        id=str(row.get("id") or ""),
        symbol=_str_or_none(row.get("symbol")),
        decimals=_int_or_none(row.get("decimals")),
    )


def map_row_to_pool_snapshot(row: Mapping[str, Any]) -> PoolSnapshot:
    balances = row.get("inputTokenBalances") or []
    tokens = row.get("inputTokens") or []
    return PoolSnapshot(
        id=str(row.get("id") or ""),
        name=_str_or_none(row.get("name")),
        symbol=_str_or_none(row.get("symbol")),
        input_token_balances=[str(value) for value in balances if value is not None],
        input_tokens=[map_row_to_input_token(token) for token in tokens if isinstance(token, Mapping)],
        total_value_locked_usd=_str_or_none(row.get("totalValueLockedUSD")),
        cumulative_swap_count=_str_or_none(row.get("cumulativeSwapCount")),
    )


def map_row_to_factory_snapshot(row: Mapping[str, Any]) -> FactorySnapshot:
    return FactorySnapshot(
        id=str(row.get("id") or ""),
        pool_count=_str_or_none(row.get("poolCount")),
        tx_count=_str_or_none(row.get("txCount")),
        total_volume_usd=_str_or_none(row.get("totalVolumeUSD")),
    )


def map_row_to_bundle_snapshot(row: Mapping[str, Any]) -> BundleSnapshot:
    return BundleSnapshot(
        id=str(row.get("id") or ""),
        eth_price_usd=_str_or_none(row.get("ethPriceUSD")),
    )


def map_pool_dashboard_data(data: Mapping[str, Any] | None) -> PoolDashboardData:
    row = data.get("liquidityPool") if isinstance(data, Mapping) else None
    pool = map_row_to_pool_snapshot(row) if isinstance(row, Mapping) else None
    return PoolDashboardData(pool=pool, raw=dict(data) if isinstance(data, Mapping) else None)


def map_factories_data(data: Mapping[str, Any] | None) -> FactoriesData:
    if not isinstance(data, Mapping):
        return FactoriesData(factories=[], bundles=[], raw=None)
    return FactoriesData(
        factories=[
            map_row_to_factory_snapshot(row)
            for row in data.get("factories") or []
            if isinstance(row, Mapping)
        ],
        bundles=[
            map_row_to_bundle_snapshot(row)
            for row in data.get("bundles") or []
            if isinstance(row, Mapping)
        ],
        raw=dict(data),
    )
