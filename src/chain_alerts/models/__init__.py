"""
Chain Alerts Data Models Package

This package provides type-safe data structures for the alert engine:
- Pydantic models: For validating external broker chain payloads
- Dataclasses: For high-performance internal chain and alert state

Usage:
    from src.chain_alerts.models import OptionChainSnapshot, OptionQuote, ContractType
    from src.chain_alerts.models import Alert, AlertType, AlertPriority
    from src.chain_alerts.models import parse_chain_payload
"""

# Dataclasses for internal state
from src.chain_alerts.models.alert import (
    Alert,
    AlertIdFactory,
    AlertPriority,
    AlertQuery,
    AlertSummary,
    AlertType,
    generate_alert_id,
    summarize_alerts,
)
from src.chain_alerts.models.chain import (
    DEFAULT_IV_PERCENT,
    ContractType,
    EnrichedOption,
    Greeks,
    OptionChainSnapshot,
    OptionQuote,
)

# Pydantic models for external broker data validation
from src.chain_alerts.models.broker_models import (
    ChainSnapshotPayload,
    OptionRowPayload,
    parse_chain_payload,
)

__all__ = [
    # Alerts
    "Alert",
    "AlertIdFactory",
    "AlertPriority",
    "AlertQuery",
    "AlertSummary",
    "AlertType",
    "generate_alert_id",
    "summarize_alerts",
    # Chain
    "DEFAULT_IV_PERCENT",
    "ContractType",
    "EnrichedOption",
    "Greeks",
    "OptionChainSnapshot",
    "OptionQuote",
    # Pydantic models
    "ChainSnapshotPayload",
    "OptionRowPayload",
    "parse_chain_payload",
]
