"""
Monitoring Loop

Exports:
- ChainMonitor: Periodic alert generation across symbols
- NSECalendar: NSE market hours
- SnapshotProvider, JsonSnapshotProvider: Snapshot sources
"""

from src.chain_alerts.monitoring.monitor import ChainMonitor
from src.chain_alerts.monitoring.nse_calendar import IST, NSECalendar
from src.chain_alerts.monitoring.snapshot_provider import (
    JsonSnapshotProvider,
    SnapshotProvider,
    snapshot_filename,
)

__all__ = [
    "ChainMonitor",
    "IST",
    "NSECalendar",
    "JsonSnapshotProvider",
    "SnapshotProvider",
    "snapshot_filename",
]
