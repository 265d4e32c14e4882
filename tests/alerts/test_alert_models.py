"""
Unit tests for alert data models.
"""

from datetime import datetime, timezone

import pytest

from src.chain_alerts.models.alert import (
    Alert,
    AlertIdFactory,
    AlertPriority,
    AlertQuery,
    AlertType,
    generate_alert_id,
    summarize_alerts,
)


def _alert(alert_type=AlertType.THETA_DECAY, priority=AlertPriority.MEDIUM, **overrides):
    data = dict(
        alert_id=generate_alert_id(),
        type=alert_type,
        symbol="NSE:NIFTY50-INDEX",
        message="High Theta Decay: 24000 CE",
        details="Theta: -0.1200/day",
        priority=priority,
        recommendation="Consider selling CE at 24000 strike for theta decay strategy",
    )
    data.update(overrides)
    return Alert(**data)


class TestAlert:
    """Tests for Alert validation and conversion."""

    def test_defaults_timestamp_to_utc_now(self):
        before = datetime.now(timezone.utc)
        alert = _alert()

        assert alert.timestamp.tzinfo is not None
        assert alert.timestamp >= before

    def test_rejects_plain_string_type(self):
        with pytest.raises(ValueError, match="Invalid alert type"):
            _alert(alert_type="GAMMA_SPREAD")

    def test_rejects_plain_string_priority(self):
        with pytest.raises(ValueError, match="Invalid alert priority"):
            _alert(priority="HIGH")

    def test_rejects_empty_message(self):
        with pytest.raises(ValueError, match="message cannot be empty"):
            _alert(message="   ")

    def test_is_immutable(self):
        alert = _alert()

        with pytest.raises(AttributeError):
            alert.message = "changed"

    def test_to_dict_from_dict(self):
        alert = _alert(AlertType.GAMMA_SPREAD, AlertPriority.HIGH)

        data = alert.to_dict()
        assert data["type"] == "GAMMA_SPREAD"
        assert data["priority"] == "HIGH"
        assert data["created_at"] == alert.timestamp

        assert Alert.from_dict(data) == alert

    def test_from_dict_naive_iso_timestamp(self):
        data = _alert().to_dict()
        data["created_at"] = "2026-10-15T05:00:00"

        restored = Alert.from_dict(data)

        assert restored.timestamp == datetime(2026, 10, 15, 5, 0, tzinfo=timezone.utc)


class TestAlertIds:
    """Tests for id generation."""

    def test_unique_within_factory(self):
        ids = AlertIdFactory()
        generated = [ids.next_id() for _ in range(1000)]

        assert len(set(generated)) == 1000

    def test_unique_across_factories(self):
        generated = {generate_alert_id() for _ in range(500)}

        assert len(generated) == 500

    def test_format(self):
        millis, sequence, suffix = AlertIdFactory().next_id().split("-")

        assert millis.isdigit()
        assert sequence == "0000"
        assert len(suffix) == 12


class TestAlertQuery:
    def test_defaults(self):
        query = AlertQuery()

        assert query.limit == 100
        assert query.symbol is None

    def test_invalid_limit(self):
        with pytest.raises(ValueError):
            AlertQuery(limit=0)


def test_summarize_alerts():
    alerts = [
        _alert(AlertType.GAMMA_SPREAD, AlertPriority.HIGH),
        _alert(AlertType.GAMMA_SPREAD, AlertPriority.MEDIUM),
        _alert(AlertType.THETA_DECAY, AlertPriority.HIGH),
    ]

    summary = summarize_alerts(alerts)

    assert summary.total == 3
    assert summary.gamma_spread == 2
    assert summary.theta_decay == 1
    assert summary.high_priority == 2
    assert summarize_alerts([]).total == 0
