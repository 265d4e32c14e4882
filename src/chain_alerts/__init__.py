"""
Chain Alerts

Options chain alert engine: Black-Scholes Greeks plus gamma spread and
theta decay detection over an option chain snapshot.

Entry points:
- compute_greeks(spot, strike, iv_percent, ...) -> Greeks
- generate_alerts(snapshot, config) -> list[Alert]
"""

from src.chain_alerts.config.trading_config import TradingConfig
from src.chain_alerts.engine import generate_alerts, generate_alerts_async
from src.chain_alerts.greeks.calculator import compute_greeks
from src.chain_alerts.models.alert import Alert, AlertPriority, AlertType
from src.chain_alerts.models.chain import (
    ContractType,
    EnrichedOption,
    Greeks,
    OptionChainSnapshot,
    OptionQuote,
)

__version__ = "0.1.0"

__all__ = [
    "Alert",
    "AlertPriority",
    "AlertType",
    "ContractType",
    "EnrichedOption",
    "Greeks",
    "OptionChainSnapshot",
    "OptionQuote",
    "TradingConfig",
    "compute_greeks",
    "generate_alerts",
    "generate_alerts_async",
]
