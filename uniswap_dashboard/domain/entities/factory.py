from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FactorySnapshot:
    id: str
    pool_count: str | None
    tx_count: str | None
    total_volume_usd: str | None


@dataclass(frozen=True)
class BundleSnapshot:
    id: str
    eth_price_usd: str | None
