"""
Chain Enricher

Applies the Greeks calculator to every quote of a snapshot.
Output has the same length and order as the snapshot's options.
"""

from datetime import date
from typing import Optional, Sequence

import polars as pl
from loguru import logger

from src.chain_alerts.config.trading_config import TradingConfig
from src.chain_alerts.greeks.calculator import compute_greeks
from src.chain_alerts.models.chain import IST, EnrichedOption, OptionChainSnapshot, OptionQuote


def _exchange_date(snapshot: OptionChainSnapshot) -> date:
    """Snapshot date on the IST calendar (naive timestamps are taken as IST)."""
    if snapshot.timestamp.tzinfo is None:
        return snapshot.timestamp.date()
    return snapshot.timestamp.astimezone(IST).date()


def _time_to_expiry(
    quote: OptionQuote,
    snapshot: OptionChainSnapshot,
    config: Optional[TradingConfig],
) -> Optional[float]:
    """Years to expiry for a quote (None lets the calculator apply its default)."""
    if config is None:
        return None

    if config.use_quote_expiry and quote.expiry is not None:
        days = (quote.expiry - _exchange_date(snapshot)).days
        return days / 365

    return config.time_to_expiry_days / 365


def enrich_chain(
    snapshot: OptionChainSnapshot,
    config: Optional[TradingConfig] = None,
) -> tuple[EnrichedOption, ...]:
    """
    Compute Greeks for every quote in the snapshot.

    Args:
        snapshot: Parsed option chain snapshot
        config: Optional config supplying risk-free rate and expiry horizon

    Returns:
        Enriched options in snapshot order
    """
    risk_free_rate = config.risk_free_rate if config is not None else None

    enriched = tuple(
        EnrichedOption(
            quote=quote,
            greeks=compute_greeks(
                spot=snapshot.spot,
                strike=quote.strike,
                iv_percent=quote.implied_volatility_percent,
                time_to_expiry=_time_to_expiry(quote, snapshot, config),
                risk_free_rate=risk_free_rate,
                contract_type=quote.contract_type,
            ),
        )
        for quote in snapshot.options
    )

    logger.debug(f"Enriched {len(enriched)} options for {snapshot.symbol} (spot={snapshot.spot})")
    return enriched


def enriched_chain_frame(enriched: Sequence[EnrichedOption]) -> pl.DataFrame:
    """
    Render an enriched chain as a polars DataFrame.

    Columns: strike, type, ltp, iv, volume, oi, delta, gamma, theta, vega.
    """
    return pl.DataFrame(
        {
            "strike": [o.strike for o in enriched],
            "type": [o.contract_type.value for o in enriched],
            "ltp": [o.last_traded_price for o in enriched],
            "iv": [o.implied_volatility_percent for o in enriched],
            "volume": [o.quote.volume for o in enriched],
            "oi": [o.quote.open_interest for o in enriched],
            "delta": [o.delta for o in enriched],
            "gamma": [o.gamma for o in enriched],
            "theta": [o.theta for o in enriched],
            "vega": [o.vega for o in enriched],
        },
        schema={
            "strike": pl.Float64,
            "type": pl.Utf8,
            "ltp": pl.Float64,
            "iv": pl.Float64,
            "volume": pl.Int64,
            "oi": pl.Int64,
            "delta": pl.Float64,
            "gamma": pl.Float64,
            "theta": pl.Float64,
            "vega": pl.Float64,
        },
    )
