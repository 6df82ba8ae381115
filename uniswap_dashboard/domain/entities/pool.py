from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class InputToken:
    id: str
    symbol: str | None
    decimals: int | None


@dataclass(frozen=True)
class PoolSnapshot:
    id: str
    name: str | None
    symbol: str | None
    input_token_balances: list[str]
    input_tokens: list[InputToken]
    total_value_locked_usd: str | None
    cumulative_swap_count: str | None
