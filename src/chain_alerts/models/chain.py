"""
Option Chain Data Models

This module provides the data models for an option chain snapshot and its
Greeks-enriched form.
Uses dataclasses with slots=True for performance (internal data, validated on entry).

Key patterns:
- dataclass(slots=True, frozen=True) for immutable snapshot data
- __post_init__ validation for data integrity
- str Enum for contract types (CE/PE codes on the wire)

Lifecycle:
    OptionChainSnapshot (parsed broker data)
    └─ enrich_chain() → tuple[EnrichedOption, ...] (one per quote, same order)
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Optional
from zoneinfo import ZoneInfo

# NSE exchange time zone; expiry dates are IST calendar dates
IST = ZoneInfo("Asia/Kolkata")

# Applied when the broker payload carries no IV for a contract
DEFAULT_IV_PERCENT = 20.0


class ContractType(str, Enum):
    """
    Contract type enum.

    Values are the exchange codes used by the broker feed.
    """

    CALL = "CE"
    PUT = "PE"

    @classmethod
    def from_code(cls, code: str) -> "ContractType":
        """
        Parse a contract type from a broker code.

        Accepts "CE"/"PE" as well as "CALL"/"PUT"/"C"/"P" (case-insensitive).

        Raises:
            ValueError: If the code is not a known contract type
        """
        if isinstance(code, cls):
            return code

        normalized = str(code).strip().upper()
        aliases = {
            "CE": cls.CALL,
            "CALL": cls.CALL,
            "C": cls.CALL,
            "PE": cls.PUT,
            "PUT": cls.PUT,
            "P": cls.PUT,
        }
        if normalized not in aliases:
            raise ValueError(f"Unknown contract type: {code!r}")
        return aliases[normalized]


@dataclass(slots=True, frozen=True)
class OptionQuote:
    """
    Option quote data model.

    One contract row of an option chain snapshot.

    Attributes:
        strike: Strike price
        contract_type: CALL or PUT
        last_traded_price: Last traded price (LTP)
        implied_volatility_percent: Implied volatility in percent (15.0 = 15%)
        volume: Traded volume
        open_interest: Open interest
        expiry: Expiration date (None when the feed omits it)

    Raises:
        ValueError: If strike is not positive
    """

    strike: float
    contract_type: ContractType
    last_traded_price: float = 0.0
    implied_volatility_percent: float = DEFAULT_IV_PERCENT
    volume: int = 0
    open_interest: int = 0
    expiry: Optional[date] = None

    def __post_init__(self):
        if self.strike <= 0:
            raise ValueError(f"Strike must be positive, got {self.strike}")

        if not isinstance(self.contract_type, ContractType):
            raise ValueError(f"Invalid contract_type: {self.contract_type}")

    def __repr__(self) -> str:
        """Return string representation of quote."""
        return (
            f"OptionQuote({self.strike} {self.contract_type.value} "
            f"ltp={self.last_traded_price} iv={self.implied_volatility_percent}%)"
        )


@dataclass(slots=True, frozen=True)
class OptionChainSnapshot:
    """
    Point-in-time capture of one underlying's option chain.

    Attributes:
        symbol: Underlying symbol (e.g. NSE:NIFTY50-INDEX)
        spot: Underlying spot price
        timestamp: When the snapshot was taken
        options: Quotes in broker order

    Raises:
        ValueError: If spot is not positive
    """

    symbol: str
    spot: float
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    options: tuple[OptionQuote, ...] = ()

    def __post_init__(self):
        if self.spot <= 0:
            raise ValueError(f"Spot must be positive, got {self.spot}")

        # Accept any iterable but store an immutable tuple
        if not isinstance(self.options, tuple):
            object.__setattr__(self, "options", tuple(self.options))


@dataclass(slots=True, frozen=True)
class Greeks:
    """
    Option sensitivities.

    Attributes:
        delta: Price change per 1.0 move in the underlying
        gamma: Delta change per 1.0 move in the underlying (never negative)
        theta: Price change per calendar day
        vega: Price change per 1 volatility point
    """

    delta: float = 0.0
    gamma: float = 0.0
    theta: float = 0.0
    vega: float = 0.0

    @classmethod
    def zero(cls) -> "Greeks":
        """Greeks returned for degenerate inputs."""
        return cls()


@dataclass(slots=True, frozen=True)
class EnrichedOption:
    """
    Option quote combined with its computed Greeks.

    Attributes:
        quote: Source quote (unchanged)
        greeks: Greeks computed from the snapshot spot and the quote
    """

    quote: OptionQuote
    greeks: Greeks

    @property
    def strike(self) -> float:
        return self.quote.strike

    @property
    def contract_type(self) -> ContractType:
        return self.quote.contract_type

    @property
    def last_traded_price(self) -> float:
        return self.quote.last_traded_price

    @property
    def implied_volatility_percent(self) -> float:
        return self.quote.implied_volatility_percent

    @property
    def delta(self) -> float:
        return self.greeks.delta

    @property
    def gamma(self) -> float:
        return self.greeks.gamma

    @property
    def theta(self) -> float:
        return self.greeks.theta

    @property
    def vega(self) -> float:
        return self.greeks.vega

    def __repr__(self) -> str:
        return (
            f"EnrichedOption({self.strike} {self.contract_type.value} "
            f"Δ={self.delta:.4f} Γ={self.gamma:.4f} Θ={self.theta:.4f} V={self.vega:.4f})"
        )
