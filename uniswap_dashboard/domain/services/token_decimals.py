from __future__ import annotations

from uniswap_dashboard.domain.entities.pool import PoolSnapshot


def resolve_token_decimals(pool: PoolSnapshot, *, index: int, fallbacks: tuple[int, ...]) -> int:
    """Decimals reported by the subgraph for the token at ``index``.

    Falls back to ``fallbacks[index]`` (or the last fallback) when the pool
    payload does not carry the token's decimals.
    """
    if 0 <= index < len(pool.input_tokens):
        decimals = pool.input_tokens[index].decimals
        if decimals is not None and decimals >= 0:
            return decimals
    if not fallbacks:
        return 18
    return fallbacks[min(index, len(fallbacks) - 1)]
