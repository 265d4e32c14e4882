"""
Alert Engine

Entry points that turn one option chain snapshot into a batch of alerts.

Pipeline:
    snapshot + config
    └─ enrich_chain()
       ├─ detect_gamma_spreads()  ┐ independent, read-only over the
       └─ detect_theta_decay()    ┘ same enriched chain
          └─ build_alerts() → list[Alert]

Every call is stateless: the result depends only on the snapshot, the
config and the clock (alert ids and timestamps). Persistence is not part of
the engine; callers hand alerts to an AlertDispatcher.
"""

import asyncio

from loguru import logger

from src.chain_alerts.alerts.formatter import build_alerts
from src.chain_alerts.config.trading_config import TradingConfig
from src.chain_alerts.detectors.gamma_spread import detect_gamma_spreads
from src.chain_alerts.detectors.theta_decay import detect_theta_decay
from src.chain_alerts.greeks.enricher import enrich_chain
from src.chain_alerts.models.alert import Alert
from src.chain_alerts.models.chain import OptionChainSnapshot


def generate_alerts(snapshot: OptionChainSnapshot, config: TradingConfig) -> list[Alert]:
    """
    Generate gamma spread and theta decay alerts for a snapshot.

    Args:
        snapshot: Parsed option chain snapshot
        config: Detection thresholds and pricing inputs

    Returns:
        Gamma spread alerts followed by theta decay alerts; empty when the
        snapshot has no options or nothing qualifies
    """
    if not snapshot.options:
        logger.debug(f"No options in snapshot for {snapshot.symbol}")
        return []

    enriched = enrich_chain(snapshot, config)
    gamma = detect_gamma_spreads(enriched, config)
    theta = detect_theta_decay(enriched, config)

    alerts = build_alerts(snapshot.symbol, gamma, theta)
    logger.debug(
        f"{snapshot.symbol}: {len(alerts)} alerts "
        f"({len(gamma)} gamma spread, {len(theta)} theta decay)"
    )
    return alerts


async def generate_alerts_async(snapshot: OptionChainSnapshot, config: TradingConfig) -> list[Alert]:
    """
    Same as generate_alerts(), running both detectors concurrently.

    Detectors run in worker threads; neither mutates the enriched chain.
    """
    if not snapshot.options:
        logger.debug(f"No options in snapshot for {snapshot.symbol}")
        return []

    enriched = enrich_chain(snapshot, config)
    gamma, theta = await asyncio.gather(
        asyncio.to_thread(detect_gamma_spreads, enriched, config),
        asyncio.to_thread(detect_theta_decay, enriched, config),
    )

    alerts = build_alerts(snapshot.symbol, gamma, theta)
    logger.debug(
        f"{snapshot.symbol}: {len(alerts)} alerts "
        f"({len(gamma)} gamma spread, {len(theta)} theta decay)"
    )
    return alerts
