"""
Signal Detectors

Exports:
- detect_gamma_spreads / GammaSpreadDetection / GammaDirection
- detect_theta_decay / ThetaDecayDetection
"""

from src.chain_alerts.detectors.gamma_spread import (
    GammaDirection,
    GammaSpreadDetection,
    detect_gamma_spreads,
)
from src.chain_alerts.detectors.theta_decay import (
    ThetaDecayDetection,
    detect_theta_decay,
)

__all__ = [
    "GammaDirection",
    "GammaSpreadDetection",
    "detect_gamma_spreads",
    "ThetaDecayDetection",
    "detect_theta_decay",
]
