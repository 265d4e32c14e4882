"""
Black-Scholes Greeks Calculator

Closed-form Black-Scholes Greeks for a single European option.

Numerics:
- Standard normal CDF via the Abramowitz-Stegun 7.1.26 rational approximation
  of erf (max absolute error ~7.5e-8 on the CDF)
- Time to expiry floored at one day, volatility floored at 1%
- Non-positive or non-finite inputs return zero Greeks (fail-soft, never raises)

Units:
- theta is per calendar day (annual theta / 365)
- vega is per 1 volatility point (S·φ(d1)·√T / 100)
"""

import math
from typing import Optional

from src.chain_alerts.models.chain import ContractType, Greeks

DEFAULT_TIME_TO_EXPIRY = 21 / 365  # three-week horizon
MIN_TIME_TO_EXPIRY = 1 / 365
MIN_VOLATILITY = 0.01
DEFAULT_RISK_FREE_RATE = 0.065

# Abramowitz & Stegun 7.1.26
_A1 = 0.254829592
_A2 = -0.284496736
_A3 = 1.421413741
_A4 = -1.453152027
_A5 = 1.061405429
_P = 0.3275911

_INV_SQRT_2 = 1.0 / math.sqrt(2.0)
_INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)


def norm_cdf(x: float) -> float:
    """
    Standard normal CDF.

    Evaluated for |x| and reflected with N(x) = 1 - N(-x) for negative x.
    """
    if x < 0:
        return 1.0 - norm_cdf(-x)

    z = x * _INV_SQRT_2
    t = 1.0 / (1.0 + _P * z)
    poly = ((((_A5 * t + _A4) * t + _A3) * t + _A2) * t + _A1) * t
    erf = 1.0 - poly * math.exp(-z * z)
    return 0.5 * (1.0 + erf)


def norm_pdf(x: float) -> float:
    """Standard normal density."""
    return _INV_SQRT_2PI * math.exp(-0.5 * x * x)


def compute_greeks(
    spot: float,
    strike: float,
    iv_percent: float,
    time_to_expiry: Optional[float] = None,
    risk_free_rate: Optional[float] = None,
    contract_type: ContractType = ContractType.CALL,
) -> Greeks:
    """
    Compute Black-Scholes Greeks for one contract.

    Args:
        spot: Underlying price
        strike: Strike price
        iv_percent: Implied volatility in percent (15.0 = 15%)
        time_to_expiry: Years to expiry (default: 21/365, floored at 1/365)
        risk_free_rate: Annual risk-free rate (default: 0.065)
        contract_type: CALL or PUT (affects delta and theta only)

    Returns:
        Greeks; all zero when spot or strike is not positive, or any input is NaN/inf
    """
    T = max(DEFAULT_TIME_TO_EXPIRY if time_to_expiry is None else time_to_expiry, MIN_TIME_TO_EXPIRY)
    r = DEFAULT_RISK_FREE_RATE if risk_free_rate is None else risk_free_rate
    sigma = max(iv_percent / 100.0, MIN_VOLATILITY)

    if not all(math.isfinite(v) for v in (spot, strike, T, r, sigma)):
        return Greeks.zero()

    if spot <= 0 or strike <= 0 or T <= 0 or sigma <= 0:
        return Greeks.zero()

    sqrt_t = math.sqrt(T)
    sigma_sqrt_t = sigma * sqrt_t
    d1 = (math.log(spot / strike) + (r + 0.5 * sigma * sigma) * T) / sigma_sqrt_t
    d2 = d1 - sigma_sqrt_t

    pdf_d1 = norm_pdf(d1)
    discounted_strike = strike * math.exp(-r * T)
    time_decay = -spot * pdf_d1 * sigma / (2.0 * sqrt_t)

    if contract_type == ContractType.CALL:
        delta = norm_cdf(d1)
        theta = time_decay - r * discounted_strike * norm_cdf(d2)
    else:
        delta = norm_cdf(d1) - 1.0
        theta = time_decay + r * discounted_strike * norm_cdf(-d2)

    gamma = pdf_d1 / (spot * sigma_sqrt_t)
    vega = spot * pdf_d1 * sqrt_t

    return Greeks(
        delta=delta,
        gamma=gamma,
        theta=theta / 365.0,
        vega=vega / 100.0,
    )
