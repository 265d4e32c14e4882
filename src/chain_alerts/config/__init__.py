"""
Chain Alerts Configuration Module

This module provides configuration classes and loaders for the alert engine.
"""

from src.chain_alerts.config.logging_config import configure_logging
from src.chain_alerts.config.trading_config import (
    AlertEngineConfig,
    LoggingConfig,
    MonitorConfig,
    TradingConfig,
    load_config,
)

__all__ = [
    "AlertEngineConfig",
    "LoggingConfig",
    "MonitorConfig",
    "TradingConfig",
    "configure_logging",
    "load_config",
]
