#!/usr/bin/env python3
"""
Generate Alerts for One Snapshot

Reads an option chain payload from a JSON file, runs the alert engine once
and prints the resulting alerts.

Usage:
    # Default config (config/alert_config.yaml)
    python scripts/generate_alerts.py --snapshot examples/snapshots/NSE_NIFTY50-INDEX.json \
        --symbol NSE:NIFTY50-INDEX

    # Also print the Greeks-enriched chain
    python scripts/generate_alerts.py --snapshot chain.json --symbol NSE:NIFTY50-INDEX --show-chain
"""

import argparse
import json
import sys
from pathlib import Path

import polars as pl
from loguru import logger

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.chain_alerts.config import configure_logging, load_config
from src.chain_alerts.engine import generate_alerts
from src.chain_alerts.greeks import enrich_chain, enriched_chain_frame
from src.chain_alerts.models import parse_chain_payload, summarize_alerts


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Generate gamma spread and theta decay alerts for one snapshot",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument("--snapshot", type=str, required=True, help="Path to chain payload JSON")
    parser.add_argument("--symbol", type=str, default=None, help="Underlying symbol")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to alert config file (default: config/alert_config.yaml)",
    )
    parser.add_argument("--show-chain", action="store_true", help="Print the enriched chain")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()
    configure_logging("DEBUG" if args.verbose else "INFO")

    try:
        config = load_config(args.config)
    except ValueError as e:
        logger.error(f"Failed to load config: {e}")
        return 1

    try:
        with open(args.snapshot, "r") as f:
            snapshot = parse_chain_payload(json.load(f), args.symbol)
    except Exception as e:
        logger.error(f"Failed to load snapshot {args.snapshot}: {e}")
        return 1

    if args.show_chain:
        with pl.Config(tbl_rows=-1, tbl_cols=-1):
            print(enriched_chain_frame(enrich_chain(snapshot, config.trading)))

    alerts = generate_alerts(snapshot, config.trading)

    for alert in alerts:
        print(f"[{alert.priority.value:<6}] {alert.type.value:<12} {alert.message}")
        print(f"         {alert.details}")
        print(f"         → {alert.recommendation}")

    summary = summarize_alerts(alerts)
    logger.info(
        f"{summary.total} alerts ({summary.gamma_spread} gamma spread, "
        f"{summary.theta_decay} theta decay, {summary.high_priority} high priority)"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
