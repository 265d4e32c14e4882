"""
Unit tests for chain enrichment.
"""

from datetime import date, datetime, timezone

import polars as pl

from src.chain_alerts.config.trading_config import TradingConfig
from src.chain_alerts.greeks.calculator import compute_greeks
from src.chain_alerts.greeks.enricher import enrich_chain, enriched_chain_frame
from src.chain_alerts.models.chain import ContractType, Greeks, OptionChainSnapshot, OptionQuote


def test_enrich_preserves_length_and_order(nifty_snapshot):
    enriched = enrich_chain(nifty_snapshot)

    assert len(enriched) == len(nifty_snapshot.options)
    for option, quote in zip(enriched, nifty_snapshot.options):
        assert option.quote is quote
        assert option.strike == quote.strike
        assert option.contract_type == quote.contract_type


def test_enrich_without_config_uses_calculator_defaults(nifty_snapshot):
    enriched = enrich_chain(nifty_snapshot)

    for option in enriched:
        expected = compute_greeks(
            nifty_snapshot.spot,
            option.strike,
            option.implied_volatility_percent,
            contract_type=option.contract_type,
        )
        assert option.greeks == expected


def test_enrich_uses_config_rate_and_horizon(nifty_snapshot):
    config = TradingConfig(risk_free_rate=0.05, time_to_expiry_days=7.0)
    enriched = enrich_chain(nifty_snapshot, config)

    first = enriched[0]
    expected = compute_greeks(
        nifty_snapshot.spot,
        first.strike,
        first.implied_volatility_percent,
        time_to_expiry=7.0 / 365,
        risk_free_rate=0.05,
        contract_type=first.contract_type,
    )
    assert first.greeks == expected


def test_enrich_with_quote_expiry(nifty_snapshot):
    """Snapshot on 2026-10-15, expiry 2026-11-05: 21 days, same as the default horizon."""
    config = TradingConfig(use_quote_expiry=True)

    with_expiry = enrich_chain(nifty_snapshot, config)
    default = enrich_chain(nifty_snapshot, TradingConfig())

    assert [o.greeks for o in with_expiry] == [o.greeks for o in default]


def test_quote_expiry_counted_from_ist_date():
    """19:00 UTC on 2026-10-15 is already 2026-10-16 in Mumbai: 20 days to 2026-11-05."""
    snapshot = OptionChainSnapshot(
        symbol="NSE:NIFTY50-INDEX",
        spot=24000.0,
        timestamp=datetime(2026, 10, 15, 19, 0, tzinfo=timezone.utc),
        options=(
            OptionQuote(
                strike=24000.0,
                contract_type=ContractType.CALL,
                implied_volatility_percent=15.0,
                expiry=date(2026, 11, 5),
            ),
        ),
    )

    (option,) = enrich_chain(snapshot, TradingConfig(use_quote_expiry=True))

    assert option.greeks == compute_greeks(24000.0, 24000.0, 15.0, time_to_expiry=20 / 365)


def test_quote_without_expiry_falls_back_to_horizon():
    snapshot = OptionChainSnapshot(
        symbol="NSE:NIFTYBANK-INDEX",
        spot=52000.0,
        options=(OptionQuote(strike=52000.0, contract_type=ContractType.PUT, expiry=None),),
    )
    config = TradingConfig(use_quote_expiry=True, time_to_expiry_days=10.0)

    (option,) = enrich_chain(snapshot, config)

    expected = compute_greeks(
        52000.0, 52000.0, 20.0, time_to_expiry=10.0 / 365, contract_type=ContractType.PUT
    )
    assert option.greeks == expected


def test_expired_quote_is_floored():
    snapshot = OptionChainSnapshot(
        symbol="NSE:FINNIFTY-INDEX",
        spot=23000.0,
        options=(
            OptionQuote(strike=23000.0, contract_type=ContractType.CALL, expiry=date(2000, 1, 1)),
        ),
    )

    (option,) = enrich_chain(snapshot, TradingConfig(use_quote_expiry=True))

    assert option.greeks == compute_greeks(23000.0, 23000.0, 20.0, time_to_expiry=1 / 365)


def test_nan_iv_quote_gets_zero_greeks():
    snapshot = OptionChainSnapshot(
        symbol="NSE:NIFTY50-INDEX",
        spot=24000.0,
        options=(
            OptionQuote(
                strike=24000.0,
                contract_type=ContractType.CALL,
                implied_volatility_percent=float("nan"),
            ),
        ),
    )

    (option,) = enrich_chain(snapshot)

    assert option.gamma >= 0
    assert option.greeks == Greeks.zero()


def test_enrich_empty_snapshot(empty_snapshot):
    assert enrich_chain(empty_snapshot) == ()


def test_enriched_chain_frame(nifty_snapshot):
    df = enriched_chain_frame(enrich_chain(nifty_snapshot))

    assert isinstance(df, pl.DataFrame)
    assert df.height == 10
    assert df.columns == [
        "strike", "type", "ltp", "iv", "volume", "oi", "delta", "gamma", "theta", "vega",
    ]
    assert df["type"].to_list()[:5] == ["CE"] * 5
    assert (df["gamma"] >= 0).all()


def test_enriched_chain_frame_empty():
    df = enriched_chain_frame(())

    assert df.height == 0
    assert df.schema["strike"] == pl.Float64
