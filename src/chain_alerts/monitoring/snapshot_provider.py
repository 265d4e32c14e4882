"""
Snapshot Providers

The monitor consumes option chain snapshots through the SnapshotProvider
protocol. Network retrieval from the broker lives outside this package;
JsonSnapshotProvider reads payloads that a collector has written to disk.
"""

import json
from pathlib import Path
from typing import Protocol, runtime_checkable

from loguru import logger

from src.chain_alerts.models.broker_models import parse_chain_payload
from src.chain_alerts.models.chain import OptionChainSnapshot


@runtime_checkable
class SnapshotProvider(Protocol):
    """Source of parsed option chain snapshots."""

    async def fetch_snapshot(self, symbol: str) -> OptionChainSnapshot:
        """
        Fetch the latest snapshot for a symbol.

        Raises:
            Exception: Any retrieval failure (the monitor logs and skips the symbol)
        """
        ...


def snapshot_filename(symbol: str) -> str:
    """File name for a symbol's payload ("NSE:NIFTY50-INDEX" → "NSE_NIFTY50-INDEX.json")."""
    return symbol.replace(":", "_") + ".json"


class JsonSnapshotProvider:
    """
    Read snapshot payloads from a directory of JSON files.

    Attributes:
        directory: Directory holding one <symbol>.json per underlying
    """

    def __init__(self, directory: str):
        self.directory = Path(directory)

    async def fetch_snapshot(self, symbol: str) -> OptionChainSnapshot:
        """
        Load and validate the payload for a symbol.

        Raises:
            FileNotFoundError: If no payload exists for the symbol
            pydantic.ValidationError: If the payload is malformed
        """
        path = self.directory / snapshot_filename(symbol)

        with open(path, "r") as f:
            data = json.load(f)

        snapshot = parse_chain_payload(data, symbol)
        logger.debug(f"Loaded {len(snapshot.options)} options for {symbol} from {path}")
        return snapshot
