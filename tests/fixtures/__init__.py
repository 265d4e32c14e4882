"""
Test fixtures for chain alert tests.

Exports:
- make_enriched: Build an EnrichedOption with hand-picked Greeks
- trading_config: Default TradingConfig
- nifty_payload / nifty_snapshot: Realistic NIFTY chain around 24000
- empty_snapshot: Snapshot without options
- steep_gamma_snapshot / steep_gamma_config: Chain whose ATM gamma dwarfs its neighbours
"""

from tests.fixtures.chain_fixtures import (
    empty_snapshot,
    make_enriched,
    nifty_payload,
    nifty_snapshot,
    steep_gamma_config,
    steep_gamma_snapshot,
    trading_config,
)

__all__ = [
    "make_enriched",
    "trading_config",
    "nifty_payload",
    "nifty_snapshot",
    "empty_snapshot",
    "steep_gamma_snapshot",
    "steep_gamma_config",
]
