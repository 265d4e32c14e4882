"""
Alert Formatting and Delivery

This package turns detections into alerts and delivers them to sinks.

Exports:
- build_alerts: Detections → Alert list (gamma first, then theta)
- AlertSink, DeltaLakeAlertSink, LogAlertSink: Alert destinations
- AlertDispatcher: Fire-and-forget hand-off to a sink

Example:
    ```python
    from src.chain_alerts.alerts import AlertDispatcher, DeltaLakeAlertSink

    sink = DeltaLakeAlertSink("data/lake/alerts")
    await sink.initialize()

    dispatcher = AlertDispatcher(sink)
    dispatcher.dispatch(alerts)
    ```
"""

from src.chain_alerts.alerts.dispatcher import AlertDispatcher
from src.chain_alerts.alerts.formatter import (
    build_alerts,
    format_gamma_alert,
    format_strike,
    format_theta_alert,
)
from src.chain_alerts.alerts.sink import AlertSink, DeltaLakeAlertSink, LogAlertSink

__all__ = [
    "AlertDispatcher",
    "AlertSink",
    "DeltaLakeAlertSink",
    "LogAlertSink",
    "build_alerts",
    "format_gamma_alert",
    "format_strike",
    "format_theta_alert",
]
