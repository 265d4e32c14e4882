"""
Alert Data Models and Enums

This module provides the alert data model emitted by the alert engine.
Uses dataclasses with slots=True for performance (internal data, validated on entry).

Key patterns:
- dataclass(slots=True, frozen=True): alerts are immutable once emitted
- str Enum for alert type and priority
- AlertIdFactory: per-batch sequence plus random suffix for ids
"""

import itertools
import secrets
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional


class AlertType(str, Enum):
    """
    Alert type enum.

    The only two signal classes the engine emits.
    """

    GAMMA_SPREAD = "GAMMA_SPREAD"
    THETA_DECAY = "THETA_DECAY"


class AlertPriority(str, Enum):
    """Alert priority enum."""

    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class AlertIdFactory:
    """
    Generate alert ids for one emission batch.

    Format: "<epoch millis>-<sequence>-<random hex>". The sequence guarantees
    uniqueness within the batch; millis plus 48 random bits keep ids apart
    across batches.

    Example:
        ```python
        ids = AlertIdFactory()
        ids.next_id()  # '1760601600000-0000-3f9a1c2b7d4e'
        ```
    """

    def __init__(self):
        self._sequence = itertools.count()

    def next_id(self) -> str:
        """Return the next unique alert id."""
        millis = time.time_ns() // 1_000_000
        return f"{millis}-{next(self._sequence):04d}-{secrets.token_hex(6)}"


def generate_alert_id() -> str:
    """Generate a single alert id outside of a batch."""
    return AlertIdFactory().next_id()


@dataclass(slots=True, frozen=True)
class Alert:
    """
    Alert data model.

    Attributes:
        alert_id: Unique alert id
        timestamp: When the alert was created (UTC)
        type: GAMMA_SPREAD or THETA_DECAY
        symbol: Underlying symbol
        message: Short headline
        details: Numeric evidence
        priority: MEDIUM or HIGH (derived from the detection)
        recommendation: Suggested trade

    Raises:
        ValueError: If type/priority are not enum members or message is empty
    """

    alert_id: str
    type: AlertType
    symbol: str
    message: str
    details: str
    priority: AlertPriority
    recommendation: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        if not isinstance(self.type, AlertType):
            raise ValueError(f"Invalid alert type: {self.type}")

        if not isinstance(self.priority, AlertPriority):
            raise ValueError(f"Invalid alert priority: {self.priority}")

        if not self.message or not self.message.strip():
            raise ValueError("Alert message cannot be empty")

    def to_dict(self) -> dict[str, Any]:
        """Convert alert to a flat dict (enum values as strings)."""
        return {
            "alert_id": self.alert_id,
            "type": self.type.value,
            "symbol": self.symbol,
            "message": self.message,
            "details": self.details,
            "priority": self.priority.value,
            "recommendation": self.recommendation,
            "created_at": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Alert":
        """Create alert from a dict produced by to_dict() or a stored row."""
        timestamp = data.get("created_at") or data.get("timestamp")
        if isinstance(timestamp, str):
            timestamp = datetime.fromisoformat(timestamp)
        if timestamp is not None and timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)

        return cls(
            alert_id=data["alert_id"],
            type=AlertType(data["type"]),
            symbol=data["symbol"],
            message=data["message"],
            details=data.get("details") or "",
            priority=AlertPriority(data["priority"]),
            recommendation=data.get("recommendation") or "",
            timestamp=timestamp or datetime.now(timezone.utc),
        )

    def __repr__(self) -> str:
        return (
            f"Alert({self.alert_id[:13]}... {self.type.value} {self.priority.value} "
            f"{self.symbol}: {self.message})"
        )


@dataclass(slots=True)
class AlertQuery:
    """
    Query model for filtering stored alerts.

    Attributes:
        symbol: Filter by underlying symbol
        type: Filter by alert type
        priority: Filter by priority
        start_time: Only alerts created at or after this time
        end_time: Only alerts created at or before this time
        limit: Maximum number of results (newest first)
    """

    symbol: Optional[str] = None
    type: Optional[AlertType] = None
    priority: Optional[AlertPriority] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    limit: int = 100

    def __post_init__(self):
        if self.limit < 1:
            raise ValueError(f"Limit must be >= 1, got {self.limit}")


@dataclass(slots=True, frozen=True)
class AlertSummary:
    """Counts over one batch of alerts."""

    total: int
    gamma_spread: int
    theta_decay: int
    high_priority: int


def summarize_alerts(alerts: list[Alert]) -> AlertSummary:
    """Summarize a batch of alerts by type and priority."""
    return AlertSummary(
        total=len(alerts),
        gamma_spread=sum(1 for a in alerts if a.type == AlertType.GAMMA_SPREAD),
        theta_decay=sum(1 for a in alerts if a.type == AlertType.THETA_DECAY),
        high_priority=sum(1 for a in alerts if a.priority == AlertPriority.HIGH),
    )
