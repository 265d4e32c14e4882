"""
Theta Decay Detector

Ranks contracts by steep negative theta (premium-selling candidates).
"""

from dataclasses import dataclass
from typing import Sequence

from loguru import logger

from src.chain_alerts.config.trading_config import TradingConfig
from src.chain_alerts.models.alert import AlertPriority
from src.chain_alerts.models.chain import EnrichedOption

MAX_THETA_CANDIDATES = 5

# Independent of TradingConfig.theta_decay_min
HIGH_PRIORITY_THETA = -0.15


@dataclass(slots=True, frozen=True)
class ThetaDecayDetection:
    """
    Raw theta decay detection.

    Attributes:
        option: The qualifying enriched option
    """

    option: EnrichedOption

    @property
    def theta(self) -> float:
        return self.option.theta

    @property
    def priority(self) -> AlertPriority:
        """HIGH when theta is below -0.15 per day."""
        return AlertPriority.HIGH if self.theta < HIGH_PRIORITY_THETA else AlertPriority.MEDIUM


def detect_theta_decay(
    enriched: Sequence[EnrichedOption],
    config: TradingConfig,
) -> list[ThetaDecayDetection]:
    """
    Select the steepest-decay contracts.

    Args:
        enriched: Enriched option chain (not mutated)
        config: Thresholds (theta_decay_min)

    Returns:
        At most 5 detections, most negative theta first
    """
    candidates = [o for o in enriched if o.theta <= config.theta_decay_min]
    candidates.sort(key=lambda o: o.theta)

    detections = [ThetaDecayDetection(option=o) for o in candidates[:MAX_THETA_CANDIDATES]]

    logger.debug(
        f"Theta decay scan: {len(candidates)} qualify (theta <= {config.theta_decay_min}), "
        f"keeping {len(detections)}"
    )
    return detections
