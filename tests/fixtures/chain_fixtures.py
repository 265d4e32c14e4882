"""
Option chain fixtures for testing.

Provides hand-built enriched options (exact Greeks for detector tests) and
realistic broker payloads for end-to-end tests.
"""

from datetime import date, datetime, timezone

import pytest

from src.chain_alerts.config.trading_config import TradingConfig
from src.chain_alerts.models.broker_models import parse_chain_payload
from src.chain_alerts.models.chain import (
    ContractType,
    EnrichedOption,
    Greeks,
    OptionChainSnapshot,
    OptionQuote,
)

NIFTY = "NSE:NIFTY50-INDEX"
SNAPSHOT_TIME = datetime(2026, 10, 15, 5, 0, tzinfo=timezone.utc)


def make_enriched(
    strike: float,
    contract_type: ContractType = ContractType.CALL,
    gamma: float = 0.0,
    theta: float = 0.0,
    delta: float = 0.0,
    vega: float = 0.0,
    ltp: float = 100.0,
    iv: float = 15.0,
) -> EnrichedOption:
    """Build an EnrichedOption with explicit Greeks (bypasses Black-Scholes)."""
    return EnrichedOption(
        quote=OptionQuote(
            strike=strike,
            contract_type=contract_type,
            last_traded_price=ltp,
            implied_volatility_percent=iv,
        ),
        greeks=Greeks(delta=delta, gamma=gamma, theta=theta, vega=vega),
    )


@pytest.fixture
def trading_config():
    """Default thresholds: gamma 0.05, theta -0.1, width 50."""
    return TradingConfig()


@pytest.fixture
def nifty_payload():
    """
    Raw NIFTY chain payload: spot 24000, five strikes each side, IV 15%.

    Returns:
        dict: Payload as the snapshot collector writes it
    """
    options = []
    for contract_type in ("CE", "PE"):
        for strike in (23900, 23950, 24000, 24050, 24100):
            options.append({
                "strike": strike,
                "type": contract_type,
                "ltp": 150.0,
                "iv": 15.0,
                "volume": 100000,
                "oi": 50000,
                "expiry": "2026-11-05",
            })

    return {
        "symbol": NIFTY,
        "spot": 24000.0,
        "timestamp": SNAPSHOT_TIME.isoformat(),
        "options": options,
    }


@pytest.fixture
def nifty_snapshot(nifty_payload):
    """Parsed NIFTY snapshot."""
    return parse_chain_payload(nifty_payload)


@pytest.fixture
def empty_snapshot():
    """Snapshot with no options."""
    return OptionChainSnapshot(symbol=NIFTY, spot=24000.0, timestamp=SNAPSHOT_TIME, options=())


@pytest.fixture
def steep_gamma_snapshot():
    """
    Spot 100 with 95/100/105 calls at the 1% volatility floor.

    With a one-day horizon the 100 strike carries gamma around 7 while its
    neighbours are effectively zero.
    """
    return OptionChainSnapshot(
        symbol=NIFTY,
        spot=100.0,
        timestamp=SNAPSHOT_TIME,
        options=tuple(
            OptionQuote(
                strike=strike,
                contract_type=ContractType.CALL,
                last_traded_price=1.0,
                implied_volatility_percent=1.0,
                expiry=date(2026, 10, 16),
            )
            for strike in (95.0, 100.0, 105.0)
        ),
    )


@pytest.fixture
def steep_gamma_config():
    """One-day horizon to pair with steep_gamma_snapshot."""
    return TradingConfig(time_to_expiry_days=1.0)
