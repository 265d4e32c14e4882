#!/usr/bin/env python3
"""
Run Chain Monitor

Runs the monitoring loop over every configured symbol, reading snapshots
from a directory and persisting alerts to Delta Lake.

Usage:
    # Run with default config (config/alert_config.yaml)
    python scripts/run_monitor.py --snapshots data/snapshots

    # Run outside market hours with verbose logging
    python scripts/run_monitor.py --snapshots data/snapshots --ignore-market-hours --verbose

    # Single cycle, then exit
    python scripts/run_monitor.py --snapshots data/snapshots --once
"""

import argparse
import asyncio
import signal
import sys
from dataclasses import replace
from pathlib import Path

from loguru import logger

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.chain_alerts.alerts import AlertDispatcher, DeltaLakeAlertSink
from src.chain_alerts.config import configure_logging, load_config
from src.chain_alerts.monitoring import ChainMonitor, JsonSnapshotProvider


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run the option chain alert monitor",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--snapshots",
        type=str,
        required=True,
        help="Directory with one <symbol>.json payload per underlying",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to alert config file (default: config/alert_config.yaml)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument(
        "--ignore-market-hours",
        action="store_true",
        help="Run cycles even while the NSE market is closed",
    )
    parser.add_argument("--once", action="store_true", help="Run a single cycle and exit")

    return parser.parse_args()


async def main() -> int:
    """Main entry point for the monitor."""
    args = parse_args()

    try:
        config = load_config(args.config)
    except ValueError as e:
        configure_logging("INFO")
        logger.error(f"Failed to load config: {e}")
        return 1

    configure_logging(
        "DEBUG" if args.verbose else config.logging.level,
        config.logging.log_file,
    )

    monitor_config = config.monitor
    if args.ignore_market_hours:
        monitor_config = replace(monitor_config, respect_market_hours=False)

    logger.info("=" * 70)
    logger.info("OPTION CHAIN ALERT MONITOR")
    logger.info("=" * 70)

    sink = DeltaLakeAlertSink(monitor_config.alert_lake_path)
    await sink.initialize()

    monitor = ChainMonitor(
        trading=config.trading,
        monitor=monitor_config,
        provider=JsonSnapshotProvider(args.snapshots),
        dispatcher=AlertDispatcher(sink),
    )

    if args.once:
        await monitor.run_cycle()
        await monitor.dispatcher.drain()
        return 0

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, lambda: asyncio.ensure_future(monitor.stop()))

    await monitor.run()

    logger.info(
        f"Monitor stopped after {monitor.cycles_completed} cycles "
        f"({monitor.dispatcher.persisted_count} alerts persisted, "
        f"{monitor.dispatcher.failed_count} failed)"
    )
    return 0


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(0)
