from __future__ import annotations

from dataclasses import dataclass

from uniswap_dashboard.domain.entities.factory import BundleSnapshot, FactorySnapshot
from uniswap_dashboard.domain.entities.pool import PoolSnapshot


@dataclass(frozen=True)
class PoolDashboardData:
    pool: PoolSnapshot | None
    raw: dict | None


@dataclass(frozen=True)
class FactoriesData:
    factories: list[FactorySnapshot]
    bundles: list[BundleSnapshot]
    raw: dict | None
