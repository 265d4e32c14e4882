"""
Chain Monitor

Runs the alert engine for every configured symbol on a fixed interval.

Cycle:
1. Skip the cycle while the NSE market is closed (unless disabled)
2. For each symbol: fetch snapshot → generate alerts → dispatch to sink
3. Keep the newest alerts in memory for display

A failed fetch is logged and the cycle moves on to the next symbol.
Alert persistence is fire-and-forget and never delays the cycle.
"""

import asyncio
from collections import deque
from datetime import datetime
from typing import Callable, Optional

from loguru import logger

from src.chain_alerts.alerts.dispatcher import AlertDispatcher
from src.chain_alerts.config.trading_config import MonitorConfig, TradingConfig
from src.chain_alerts.engine import generate_alerts_async
from src.chain_alerts.models.alert import Alert, summarize_alerts
from src.chain_alerts.monitoring.nse_calendar import IST, NSECalendar
from src.chain_alerts.monitoring.snapshot_provider import SnapshotProvider


class ChainMonitor:
    """
    Periodic alert generation across symbols.

    Attributes:
        trading: Detection thresholds and symbols
        monitor: Interval and retention settings
        provider: Snapshot source
        dispatcher: Fire-and-forget sink hand-off
        calendar: Market hours check
        recent_alerts: Newest alerts first, capped at monitor.max_recent_alerts

    Example:
        ```python
        monitor = ChainMonitor(config.trading, config.monitor, provider, dispatcher)
        await monitor.run()  # until monitor.stop()
        ```
    """

    def __init__(
        self,
        trading: TradingConfig,
        monitor: MonitorConfig,
        provider: SnapshotProvider,
        dispatcher: AlertDispatcher,
        calendar: Optional[NSECalendar] = None,
        clock: Callable[[], datetime] = lambda: datetime.now(IST),
    ):
        self.trading = trading
        self.monitor = monitor
        self.provider = provider
        self.dispatcher = dispatcher
        self.calendar = calendar or NSECalendar()
        self.clock = clock

        self.recent_alerts: deque[Alert] = deque(maxlen=monitor.max_recent_alerts)
        self.cycles_completed = 0
        self._shutdown_event = asyncio.Event()

        logger.debug(
            f"ChainMonitor initialized: symbols={sorted(trading.symbols)}, "
            f"interval={monitor.interval_secs}s"
        )

    async def run_cycle(self) -> list[Alert]:
        """
        Run one monitoring cycle over every configured symbol.

        Returns:
            Alerts generated in this cycle (symbol order, engine order within)
        """
        if self.monitor.respect_market_hours and not self.calendar.is_market_open(self.clock()):
            logger.info("Market is closed. Monitoring paused.")
            return []

        logger.info("Starting monitoring cycle...")
        cycle_alerts: list[Alert] = []

        for symbol in sorted(self.trading.symbols):
            try:
                snapshot = await self.provider.fetch_snapshot(symbol)
            except Exception as e:
                logger.error(f"Failed to fetch data for {symbol}: {e}")
                continue

            alerts = await generate_alerts_async(snapshot, self.trading)
            if not alerts:
                continue

            self.dispatcher.dispatch(alerts)

            # Newest first
            for alert in reversed(alerts):
                self.recent_alerts.appendleft(alert)

            cycle_alerts.extend(alerts)
            logger.info(f"Generated {len(alerts)} alerts for {symbol}")

        summary = summarize_alerts(cycle_alerts)
        self.cycles_completed += 1
        logger.info(
            f"Monitoring cycle completed: {summary.total} alerts "
            f"({summary.gamma_spread} gamma spread, {summary.theta_decay} theta decay, "
            f"{summary.high_priority} high priority)"
        )
        return cycle_alerts

    async def run(self) -> None:
        """
        Run cycles every interval_secs until stop() is called.
        """
        logger.info("Entering monitoring loop...")

        while not self._shutdown_event.is_set():
            try:
                await self.run_cycle()
            except asyncio.CancelledError:
                break
            except Exception as e:
                logger.error(f"Monitoring error: {e}")

            try:
                await asyncio.wait_for(self._shutdown_event.wait(), timeout=self.monitor.interval_secs)
            except asyncio.TimeoutError:
                pass

        await self.dispatcher.drain()
        logger.info("Exited monitoring loop")

    async def stop(self) -> None:
        """Request the monitoring loop to exit after the current cycle."""
        logger.info("Stopping monitor...")
        self._shutdown_event.set()
