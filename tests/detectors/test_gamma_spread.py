"""
Unit tests for the gamma spread detector.
"""

import pytest

from src.chain_alerts.config.trading_config import TradingConfig
from src.chain_alerts.detectors.gamma_spread import GammaDirection, detect_gamma_spreads
from src.chain_alerts.models.alert import AlertPriority
from src.chain_alerts.models.chain import ContractType
from tests.fixtures.chain_fixtures import make_enriched

CE = ContractType.CALL
PE = ContractType.PUT


def test_adjacent_calls_detected():
    """Gammas 0.10 and 0.03 at 100/150: spread 0.07, confidence 70%, MEDIUM."""
    config = TradingConfig(gamma_threshold=0.05, spread_width=50)
    enriched = [make_enriched(100, CE, gamma=0.10), make_enriched(150, CE, gamma=0.03)]

    detections = detect_gamma_spreads(enriched, config)

    assert len(detections) == 1
    detection = detections[0]
    assert detection.strike == 100
    assert detection.next_strike == 150
    assert detection.gamma_spread == pytest.approx(0.07)
    assert detection.confidence == pytest.approx(70.0)
    assert detection.priority == AlertPriority.MEDIUM
    assert detection.direction == GammaDirection.LONG_GAMMA
    assert detection.current_gamma == 0.10
    assert detection.next_gamma == 0.03


def test_short_gamma_when_next_strike_higher():
    config = TradingConfig()
    enriched = [make_enriched(100, CE, gamma=0.01), make_enriched(150, CE, gamma=0.09)]

    (detection,) = detect_gamma_spreads(enriched, config)

    assert detection.direction == GammaDirection.SHORT_GAMMA
    assert detection.gamma_spread == pytest.approx(0.08)


def test_strikes_too_far_apart_skipped():
    config = TradingConfig(spread_width=50)
    enriched = [make_enriched(100, CE, gamma=0.10), make_enriched(151, CE, gamma=0.0)]

    assert detect_gamma_spreads(enriched, config) == []


def test_spread_below_threshold_skipped():
    config = TradingConfig(gamma_threshold=0.05)
    enriched = [make_enriched(100, CE, gamma=0.06), make_enriched(150, CE, gamma=0.02)]

    assert detect_gamma_spreads(enriched, config) == []


def test_spread_equal_to_threshold_detected():
    config = TradingConfig(gamma_threshold=0.25)
    enriched = [make_enriched(100, CE, gamma=0.5), make_enriched(150, CE, gamma=0.25)]

    assert len(detect_gamma_spreads(enriched, config)) == 1


def test_high_priority_and_confidence_cap():
    config = TradingConfig()
    enriched = [make_enriched(100, CE, gamma=0.30), make_enriched(150, CE, gamma=0.0)]

    (detection,) = detect_gamma_spreads(enriched, config)

    assert detection.confidence == 100.0
    assert detection.priority == AlertPriority.HIGH


def test_unsorted_input_scanned_by_strike():
    config = TradingConfig()
    enriched = [
        make_enriched(200, CE, gamma=0.0),
        make_enriched(100, CE, gamma=0.0),
        make_enriched(150, CE, gamma=0.2),
    ]

    detections = detect_gamma_spreads(enriched, config)

    assert [(d.strike, d.next_strike) for d in detections] == [(100, 150), (150, 200)]
    assert [d.direction for d in detections] == [
        GammaDirection.SHORT_GAMMA,
        GammaDirection.LONG_GAMMA,
    ]


def test_calls_and_puts_never_paired():
    config = TradingConfig()
    enriched = [make_enriched(100, CE, gamma=0.5), make_enriched(150, PE, gamma=0.0)]

    assert detect_gamma_spreads(enriched, config) == []


def test_calls_scanned_before_puts():
    config = TradingConfig()
    enriched = [
        make_enriched(100, PE, gamma=0.2),
        make_enriched(150, PE, gamma=0.0),
        make_enriched(300, CE, gamma=0.2),
        make_enriched(350, CE, gamma=0.0),
    ]

    detections = detect_gamma_spreads(enriched, config)

    assert [d.contract_type for d in detections] == [CE, PE]
    assert [d.strike for d in detections] == [300, 100]


def test_input_not_mutated():
    config = TradingConfig()
    enriched = [make_enriched(150, CE, gamma=0.0), make_enriched(100, CE, gamma=0.2)]
    before = list(enriched)

    detect_gamma_spreads(enriched, config)

    assert enriched == before


@pytest.mark.parametrize("size", [0, 1])
def test_fewer_than_two_strikes(size):
    enriched = [make_enriched(100, CE, gamma=1.0)][:size]

    assert detect_gamma_spreads(enriched, TradingConfig()) == []
