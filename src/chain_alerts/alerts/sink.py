"""
Alert Sinks with Delta Lake Persistence

This module provides the AlertSink protocol and a Delta Lake implementation
for durable alert storage.

Key patterns:
- Protocol-based sink (duck-typing, no inheritance required)
- Delta Lake for persistence, PyArrow schema for table creation
- Polars for efficient querying
- Async design so the monitor can hand off without blocking

The alert engine never calls a sink directly; alerts reach sinks through
AlertDispatcher (fire-and-forget).
"""

from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

import polars as pl
import pyarrow as pa
from deltalake import DeltaTable, write_deltalake
from loguru import logger

from src.chain_alerts.models.alert import Alert, AlertPriority, AlertQuery

ALERT_SCHEMA = pa.schema([
    ("alert_id", pa.string()),
    ("type", pa.string()),
    ("symbol", pa.string()),
    ("message", pa.string()),
    ("details", pa.string()),
    ("priority", pa.string()),
    ("recommendation", pa.string()),
    ("created_at", pa.timestamp("us", tz="UTC")),
])


@runtime_checkable
class AlertSink(Protocol):
    """
    Alert sink protocol.

    Any class with an async persist(alert) method can receive alerts.
    """

    async def persist(self, alert: Alert) -> None:
        """
        Persist one alert.

        Args:
            alert: Finished alert (immutable)
        """
        ...


class LogAlertSink:
    """Sink that only logs alerts (useful when no storage is configured)."""

    async def persist(self, alert: Alert) -> None:
        message = f"[{alert.symbol}] {alert.message} | {alert.details} | {alert.recommendation}"
        if alert.priority == AlertPriority.HIGH:
            logger.warning(message)
        else:
            logger.info(message)


class DeltaLakeAlertSink:
    """
    Persist alerts to a Delta Lake table and query them back.

    **Delta Lake Persistence:**
    - One row appended per alert
    - Schema matching Alert.to_dict()
    - Supports time-travel queries

    Attributes:
        table_path: Path to Delta Lake table
        _table: DeltaTable instance

    Example:
        ```python
        sink = DeltaLakeAlertSink()
        await sink.initialize()

        await sink.persist(alert)

        alerts = await sink.query_alerts(
            AlertQuery(symbol='NSE:NIFTY50-INDEX', type=AlertType.GAMMA_SPREAD)
        )
        ```
    """

    def __init__(self, delta_lake_path: str = "data/lake/alerts"):
        """
        Initialize alert sink.

        Args:
            delta_lake_path: Path to Delta Lake table (default: data/lake/alerts)
        """
        self.table_path = Path(delta_lake_path)
        self._table: Optional[DeltaTable] = None

    async def initialize(self) -> None:
        """
        Load the Delta Lake table, creating it if needed.
        """
        if DeltaTable.is_deltatable(str(self.table_path)):
            self._table = DeltaTable(str(self.table_path))
            logger.info(f"✓ Loaded existing Delta Lake table: {self.table_path}")
            return

        self.table_path.parent.mkdir(parents=True, exist_ok=True)

        # Create empty table with PyArrow schema
        table = pa.Table.from_pylist([], schema=ALERT_SCHEMA)
        write_deltalake(str(self.table_path), table, mode="overwrite")

        self._table = DeltaTable(str(self.table_path))
        logger.info(f"✓ Created Delta Lake table: {self.table_path}")

    async def persist(self, alert: Alert) -> None:
        """
        Append one alert to the table.

        Args:
            alert: Alert to write

        Raises:
            RuntimeError: If initialize() has not been called
        """
        if self._table is None:
            raise RuntimeError("DeltaLakeAlertSink not initialized")

        row = alert.to_dict()
        table = pa.Table.from_pylist([row], schema=ALERT_SCHEMA)

        write_deltalake(str(self.table_path), table, mode="append")

        # Reload to see new data
        self._table = DeltaTable(str(self.table_path))

        logger.debug(f"Wrote alert to Delta Lake: {alert.alert_id[:13]}...")

    def _read_frame(self) -> pl.DataFrame:
        if self._table is None:
            raise RuntimeError("DeltaLakeAlertSink not initialized")
        return pl.from_arrow(self._table.to_pyarrow_table())

    async def query_alerts(self, query: AlertQuery) -> list[Alert]:
        """
        Query alerts from Delta Lake.

        Filters by query fields using Polars for efficiency.

        Args:
            query: AlertQuery with filters

        Returns:
            List of Alert objects matching query, newest first
        """
        df = self._read_frame()

        if query.symbol:
            df = df.filter(pl.col("symbol") == query.symbol)

        if query.type:
            df = df.filter(pl.col("type") == query.type.value)

        if query.priority:
            df = df.filter(pl.col("priority") == query.priority.value)

        if query.start_time:
            df = df.filter(pl.col("created_at") >= query.start_time)

        if query.end_time:
            df = df.filter(pl.col("created_at") <= query.end_time)

        df = df.sort("created_at", descending=True).head(query.limit)

        alerts = [Alert.from_dict(row) for row in df.iter_rows(named=True)]
        logger.debug(f"Query returned {len(alerts)} alerts")

        return alerts

    async def count(self) -> int:
        """Number of stored alerts."""
        return self._read_frame().height
