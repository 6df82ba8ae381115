"""GraphQL queries sent by the dashboard through the relay endpoints."""

# Messari schema: one liquidity pool with its input tokens.
POOL_QUERY = """
query LiquidityPool($id: ID!) {
  liquidityPool(id: $id) {
    id
    name
    symbol
    inputTokenBalances
    inputTokens {
      id
      symbol
      decimals
    }
    totalValueLockedUSD
    cumulativeSwapCount
  }
}
"""

# Uniswap schema: top factories and ETH price bundles.
FACTORIES_QUERY = """
query Subgraphs {
  factories(first: 5) {
    id
    poolCount
    txCount
    totalVolumeUSD
  }
  bundles(first: 5) {
    id
    ethPriceUSD
  }
}
"""

FACTORIES_OPERATION_NAME = "Subgraphs"
