"""
Gamma Spread Detector

Scans adjacent strikes of the same contract type for abnormal gamma
differences.

Algorithm:
1. Partition enriched options by contract type (calls scanned before puts)
2. Sort each group ascending by strike
3. For each consecutive pair within spread_width, emit a detection when
   |gamma difference| >= gamma_threshold

Overlapping pairs are all emitted; nothing is deduplicated.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from loguru import logger

from src.chain_alerts.config.trading_config import TradingConfig
from src.chain_alerts.models.alert import AlertPriority
from src.chain_alerts.models.chain import ContractType, EnrichedOption

CONFIDENCE_SCALE = 1000.0
MAX_CONFIDENCE = 100.0
HIGH_CONFIDENCE_PCT = 70.0


class GammaDirection(str, Enum):
    """Trade direction implied by a gamma spread."""

    LONG_GAMMA = "long_gamma"  # Buy higher-gamma (current), sell next
    SHORT_GAMMA = "short_gamma"  # Sell current, buy next


@dataclass(slots=True, frozen=True)
class GammaSpreadDetection:
    """
    Raw gamma spread detection.

    Attributes:
        contract_type: Contract type of both legs
        strike: Lower strike (current)
        next_strike: Next strike up
        gamma_spread: |current gamma - next gamma|
        confidence: min(gamma_spread * 1000, 100), in percent
        current_gamma: Gamma at strike
        next_gamma: Gamma at next_strike
        direction: LONG_GAMMA when current gamma > next gamma
    """

    contract_type: ContractType
    strike: float
    next_strike: float
    gamma_spread: float
    confidence: float
    current_gamma: float
    next_gamma: float
    direction: GammaDirection

    @property
    def priority(self) -> AlertPriority:
        """HIGH when confidence exceeds 70%."""
        return AlertPriority.HIGH if self.confidence > HIGH_CONFIDENCE_PCT else AlertPriority.MEDIUM


def _scan_group(
    options: Sequence[EnrichedOption],
    config: TradingConfig,
) -> list[GammaSpreadDetection]:
    ordered = sorted(options, key=lambda o: o.strike)
    detections = []

    for current, nxt in zip(ordered, ordered[1:]):
        if abs(current.strike - nxt.strike) > config.spread_width:
            continue

        gamma_spread = abs(current.gamma - nxt.gamma)
        if gamma_spread < config.gamma_threshold:
            continue

        detections.append(
            GammaSpreadDetection(
                contract_type=current.contract_type,
                strike=current.strike,
                next_strike=nxt.strike,
                gamma_spread=gamma_spread,
                confidence=min(gamma_spread * CONFIDENCE_SCALE, MAX_CONFIDENCE),
                current_gamma=current.gamma,
                next_gamma=nxt.gamma,
                direction=(
                    GammaDirection.LONG_GAMMA
                    if current.gamma > nxt.gamma
                    else GammaDirection.SHORT_GAMMA
                ),
            )
        )

    return detections


def detect_gamma_spreads(
    enriched: Sequence[EnrichedOption],
    config: TradingConfig,
) -> list[GammaSpreadDetection]:
    """
    Detect adjacent-strike gamma anomalies, independently for calls and puts.

    Args:
        enriched: Enriched option chain (not mutated)
        config: Thresholds (gamma_threshold, spread_width)

    Returns:
        Detections in scan order: calls by ascending strike, then puts
    """
    detections = []
    for contract_type in (ContractType.CALL, ContractType.PUT):
        group = [o for o in enriched if o.contract_type == contract_type]
        detections.extend(_scan_group(group, config))

    logger.debug(f"Gamma spread scan: {len(enriched)} options -> {len(detections)} detections")
    return detections
