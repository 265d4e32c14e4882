"""
Greeks Package

Exports:
- compute_greeks: Black-Scholes Greeks for one contract
- enrich_chain: Greeks for every quote in a snapshot
- enriched_chain_frame: Enriched chain as a polars DataFrame
"""

from src.chain_alerts.greeks.calculator import compute_greeks, norm_cdf, norm_pdf
from src.chain_alerts.greeks.enricher import enrich_chain, enriched_chain_frame

__all__ = [
    "compute_greeks",
    "norm_cdf",
    "norm_pdf",
    "enrich_chain",
    "enriched_chain_frame",
]
