"""
Pydantic Models for Broker Option Chain Payloads

This module provides Pydantic models for validating option chain payloads
delivered by the snapshot-producing service.
Pydantic is used here (instead of dataclasses) because broker data is external
and can be malformed. Validated payloads are converted into the internal
OptionChainSnapshot dataclass before anything else touches them.

Key patterns:
- Field constraints: gt/ge for ranges, allow_inf_nan=False for prices and IV
- Custom validators: contract type codes, missing IV
- to_snapshot(): Boundary conversion into internal dataclasses

Decision tree:
    Does this data come from outside my process?
    ├─ Yes → Use Pydantic (validation critical) ← WE ARE HERE
    └─ No → Use dataclass (performance matters)
"""

from datetime import date, datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.chain_alerts.models.chain import (
    DEFAULT_IV_PERCENT,
    ContractType,
    OptionChainSnapshot,
    OptionQuote,
)


class OptionRowPayload(BaseModel):
    """
    One option row as delivered by the broker feed.

    Attributes:
        strike: Strike price (must be positive)
        type: Contract type code (CE/PE)
        ltp: Last traded price
        iv: Implied volatility in percent (defaults to 20 when missing)
        volume: Traded volume
        oi: Open interest
        expiry: Expiration date, if provided
    """

    model_config = ConfigDict(extra="ignore")

    strike: float = Field(..., gt=0, allow_inf_nan=False, description="Strike price")
    type: ContractType
    ltp: float = Field(default=0.0, ge=0, allow_inf_nan=False, description="Last traded price")
    iv: Optional[float] = Field(
        default=None, allow_inf_nan=False, description="Implied volatility (%)"
    )
    volume: int = Field(default=0, ge=0)
    oi: int = Field(default=0, ge=0)
    expiry: Optional[date] = None

    @field_validator("type", mode="before")
    @classmethod
    def parse_type(cls, v):
        """Accept CE/PE as well as CALL/PUT style codes."""
        return ContractType.from_code(v)

    @field_validator("iv", mode="before")
    @classmethod
    def default_iv(cls, v):
        """Missing IV falls back to DEFAULT_IV_PERCENT."""
        if v is None or v == "":
            return DEFAULT_IV_PERCENT
        return v

    def to_quote(self) -> OptionQuote:
        """Convert to internal OptionQuote."""
        return OptionQuote(
            strike=self.strike,
            contract_type=self.type,
            last_traded_price=self.ltp,
            implied_volatility_percent=self.iv if self.iv is not None else DEFAULT_IV_PERCENT,
            volume=self.volume,
            open_interest=self.oi,
            expiry=self.expiry,
        )


class ChainSnapshotPayload(BaseModel):
    """
    Option chain payload for one underlying.

    Attributes:
        spot: Underlying spot price (must be positive)
        symbol: Underlying symbol, if the payload carries one
        timestamp: Capture time (defaults to now, UTC)
        options: Option rows
    """

    model_config = ConfigDict(extra="ignore")

    spot: float = Field(..., gt=0, allow_inf_nan=False, description="Underlying spot price")
    symbol: Optional[str] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    options: list[OptionRowPayload] = Field(default_factory=list)

    @field_validator("options", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return v or []

    def to_snapshot(self, symbol: Optional[str] = None) -> OptionChainSnapshot:
        """
        Convert to internal OptionChainSnapshot.

        Args:
            symbol: Symbol to stamp on the snapshot (overrides payload symbol)

        Returns:
            OptionChainSnapshot with quotes in payload order
        """
        return OptionChainSnapshot(
            symbol=symbol or self.symbol or "",
            spot=self.spot,
            timestamp=self.timestamp,
            options=tuple(row.to_quote() for row in self.options),
        )


def parse_chain_payload(data: dict[str, Any], symbol: Optional[str] = None) -> OptionChainSnapshot:
    """
    Validate a raw chain payload and convert it to a snapshot.

    Args:
        data: Decoded JSON payload
        symbol: Symbol to stamp on the snapshot

    Returns:
        OptionChainSnapshot

    Raises:
        pydantic.ValidationError: If the payload is malformed
    """
    return ChainSnapshotPayload.model_validate(data).to_snapshot(symbol)
