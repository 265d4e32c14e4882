"""
Alert Formatter

Turns raw detections into Alert records with human-readable text.

Formatting:
- Greeks and gamma spreads: 4 decimals (spreads below 5e-5 print as 0.0000
  when gamma_threshold is set that low)
- Percentages (confidence, IV): 1 decimal
- Prices: 2 decimals (₹)
- Strikes: trailing zeros dropped (24000.0 → "24000", 24012.5 → "24012.5")

Ordering: gamma spread alerts in detection order, then theta decay alerts in
detection order. No re-sorting by priority.
"""

from datetime import datetime, timezone
from typing import Optional, Sequence

from src.chain_alerts.detectors.gamma_spread import GammaDirection, GammaSpreadDetection
from src.chain_alerts.detectors.theta_decay import ThetaDecayDetection
from src.chain_alerts.models.alert import Alert, AlertIdFactory, AlertType


def format_strike(strike: float) -> str:
    """Render a strike without trailing zeros."""
    return f"{strike:.2f}".rstrip("0").rstrip(".")


def format_gamma_alert(
    detection: GammaSpreadDetection,
    symbol: str,
    alert_id: str,
    timestamp: datetime,
) -> Alert:
    """Build a GAMMA_SPREAD alert from a detection."""
    code = detection.contract_type.value
    strike = format_strike(detection.strike)
    next_strike = format_strike(detection.next_strike)

    if detection.direction == GammaDirection.LONG_GAMMA:
        recommendation = f"Long Gamma: Buy {strike} {code}, Sell {next_strike} {code}"
    else:
        recommendation = f"Short Gamma: Sell {strike} {code}, Buy {next_strike} {code}"

    return Alert(
        alert_id=alert_id,
        timestamp=timestamp,
        type=AlertType.GAMMA_SPREAD,
        symbol=symbol,
        message=f"Gamma Spread: {strike}/{next_strike} {code}",
        details=(
            f"Spread: {detection.gamma_spread:.4f}, "
            f"Confidence: {detection.confidence:.1f}%, "
            f"Current Γ: {detection.current_gamma:.4f}, "
            f"Next Γ: {detection.next_gamma:.4f}"
        ),
        priority=detection.priority,
        recommendation=recommendation,
    )


def format_theta_alert(
    detection: ThetaDecayDetection,
    symbol: str,
    alert_id: str,
    timestamp: datetime,
) -> Alert:
    """Build a THETA_DECAY alert from a detection."""
    option = detection.option
    code = option.contract_type.value
    strike = format_strike(option.strike)

    return Alert(
        alert_id=alert_id,
        timestamp=timestamp,
        type=AlertType.THETA_DECAY,
        symbol=symbol,
        message=f"High Theta Decay: {strike} {code}",
        details=(
            f"Theta: {option.theta:.4f}/day, "
            f"IV: {option.implied_volatility_percent:.1f}%, "
            f"Delta: {option.delta:.4f}, "
            f"LTP: ₹{option.last_traded_price:.2f}"
        ),
        priority=detection.priority,
        recommendation=f"Consider selling {code} at {strike} strike for theta decay strategy",
    )


def build_alerts(
    symbol: str,
    gamma_detections: Sequence[GammaSpreadDetection],
    theta_detections: Sequence[ThetaDecayDetection],
    id_factory: Optional[AlertIdFactory] = None,
    now: Optional[datetime] = None,
) -> list[Alert]:
    """
    Convert detections into a batch of alerts.

    Args:
        symbol: Underlying symbol stamped on every alert
        gamma_detections: Gamma spread detections (detection order kept)
        theta_detections: Theta decay detections (detection order kept)
        id_factory: Id generator for this batch (default: fresh factory)
        now: Timestamp for the batch (default: current UTC time)

    Returns:
        Gamma spread alerts followed by theta decay alerts
    """
    ids = id_factory or AlertIdFactory()
    timestamp = now or datetime.now(timezone.utc)

    alerts = [format_gamma_alert(d, symbol, ids.next_id(), timestamp) for d in gamma_detections]
    alerts.extend(format_theta_alert(d, symbol, ids.next_id(), timestamp) for d in theta_detections)
    return alerts
