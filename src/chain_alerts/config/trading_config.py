"""
Alert Engine Configuration Loader

Loads and validates alert engine configuration from YAML file.

Config location: config/alert_config.yaml

Schema:
- trading: Detection thresholds, monitored symbols and pricing inputs
- monitor: Monitoring loop and alert sink settings
- logging: Log level and optional log file

Environment overrides (take precedence over the file):
- CHAIN_ALERTS_LOG_LEVEL
- CHAIN_ALERTS_LOG_FILE
- CHAIN_ALERTS_INTERVAL_SECS
- CHAIN_ALERTS_LAKE_PATH
"""

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, List, Optional

import yaml
from loguru import logger

DEFAULT_SYMBOLS = frozenset({
    "NSE:NIFTY50-INDEX",
    "NSE:NIFTYBANK-INDEX",
    "NSE:FINNIFTY-INDEX",
})

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass(frozen=True)
class TradingConfig:
    """
    Detection thresholds and pricing inputs.

    Passed explicitly into every alert generation call; never mutated.

    Attributes:
        gamma_threshold: Minimum gamma difference between adjacent strikes
        theta_decay_min: Theta floor (negative); contracts at or below it qualify
        spread_width: Maximum strike distance for two strikes to count as adjacent
        symbols: Underlying symbols to monitor
        risk_free_rate: Annual risk-free rate for Black-Scholes
        time_to_expiry_days: Horizon used when quote expiries are not used
        use_quote_expiry: Derive time to expiry from each quote's expiry date
    """

    gamma_threshold: float = 0.05
    theta_decay_min: float = -0.1
    spread_width: float = 50.0
    symbols: frozenset[str] = DEFAULT_SYMBOLS
    risk_free_rate: float = 0.065
    time_to_expiry_days: float = 21.0
    use_quote_expiry: bool = False

    def __post_init__(self):
        """Normalize symbols to a frozenset."""
        if not isinstance(self.symbols, frozenset):
            object.__setattr__(self, "symbols", frozenset(self.symbols))

    @classmethod
    def from_dict(cls, data: dict) -> "TradingConfig":
        """Create config from the `trading` section of the YAML file."""
        return cls(
            gamma_threshold=float(data.get("gamma_threshold", 0.05)),
            theta_decay_min=float(data.get("theta_decay_min", -0.1)),
            spread_width=float(data.get("spread_width", 50.0)),
            symbols=frozenset(data.get("symbols") or DEFAULT_SYMBOLS),
            risk_free_rate=float(data.get("risk_free_rate", 0.065)),
            time_to_expiry_days=float(data.get("time_to_expiry_days", 21.0)),
            use_quote_expiry=bool(data.get("use_quote_expiry", False)),
        )

    def validate(self) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.gamma_threshold <= 0:
            errors.append(f"gamma_threshold must be > 0: {self.gamma_threshold}")
        if self.theta_decay_min >= 0:
            errors.append(f"theta_decay_min must be < 0: {self.theta_decay_min}")
        if self.spread_width <= 0:
            errors.append(f"spread_width must be > 0: {self.spread_width}")
        if not self.symbols:
            errors.append("symbols must not be empty")
        if not (0 <= self.risk_free_rate < 1):
            errors.append(f"risk_free_rate must be between 0 and 1: {self.risk_free_rate}")
        if self.time_to_expiry_days <= 0:
            errors.append(f"time_to_expiry_days must be > 0: {self.time_to_expiry_days}")

        return errors


@dataclass(frozen=True)
class MonitorConfig:
    """Monitoring loop and alert sink configuration."""
    interval_secs: int = 10
    max_recent_alerts: int = 50
    alert_lake_path: str = "data/lake/alerts"
    respect_market_hours: bool = True

    def validate(self) -> List[str]:
        errors = []
        if self.interval_secs < 1:
            errors.append(f"interval_secs must be >= 1: {self.interval_secs}")
        if self.max_recent_alerts < 1:
            errors.append(f"max_recent_alerts must be >= 1: {self.max_recent_alerts}")
        if not self.alert_lake_path:
            errors.append("alert_lake_path must not be empty")
        return errors


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_file: Optional[str] = None

    def validate(self) -> List[str]:
        if self.level.upper() not in VALID_LOG_LEVELS:
            return [f"Invalid log level: {self.level}. Must be one of {VALID_LOG_LEVELS}"]
        return []


@dataclass(frozen=True)
class AlertEngineConfig:
    """Complete alert engine configuration."""

    trading: TradingConfig = field(default_factory=TradingConfig)
    monitor: MonitorConfig = field(default_factory=MonitorConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict) -> "AlertEngineConfig":
        """Create config from dictionary with nested dataclass instantiation."""
        monitor = data.get("monitor") or {}
        log = data.get("logging") or {}

        return cls(
            trading=TradingConfig.from_dict(data.get("trading") or {}),
            monitor=MonitorConfig(
                interval_secs=int(monitor.get("interval_secs", 10)),
                max_recent_alerts=int(monitor.get("max_recent_alerts", 50)),
                alert_lake_path=str(monitor.get("alert_lake_path", "data/lake/alerts")),
                respect_market_hours=bool(monitor.get("respect_market_hours", True)),
            ),
            logging=LoggingConfig(
                level=str(log.get("level", "INFO")).upper(),
                log_file=log.get("log_file"),
            ),
        )

    def validate(self) -> List[str]:
        """
        Validate every section.

        Returns:
            List of validation errors (empty if valid)
        """
        return self.trading.validate() + self.monitor.validate() + self.logging.validate()


def apply_env_overrides(config: AlertEngineConfig) -> AlertEngineConfig:
    """
    Apply environment variable overrides.

    Args:
        config: Configuration loaded from file (or defaults)

    Returns:
        New configuration with env vars applied
    """
    monitor_overrides: dict[str, Any] = {}
    logging_overrides: dict[str, Any] = {}

    if (value := os.environ.get("CHAIN_ALERTS_INTERVAL_SECS")) is not None:
        monitor_overrides["interval_secs"] = int(value)
    if (value := os.environ.get("CHAIN_ALERTS_LAKE_PATH")) is not None:
        monitor_overrides["alert_lake_path"] = value
    if (value := os.environ.get("CHAIN_ALERTS_LOG_LEVEL")) is not None:
        logging_overrides["level"] = value.upper()
    if (value := os.environ.get("CHAIN_ALERTS_LOG_FILE")) is not None:
        logging_overrides["log_file"] = value

    for key in {**monitor_overrides, **logging_overrides}:
        logger.debug(f"Overriding {key} from environment")

    return replace(
        config,
        monitor=replace(config.monitor, **monitor_overrides),
        logging=replace(config.logging, **logging_overrides),
    )


def load_config(config_path: Optional[str] = None) -> AlertEngineConfig:
    """
    Load alert engine configuration from YAML file.

    Args:
        config_path: Path to config file (default: config/alert_config.yaml)

    Returns:
        AlertEngineConfig object

    Raises:
        ValueError: If configuration is invalid or the YAML cannot be parsed
    """
    if config_path is None:
        project_root = Path(__file__).parent.parent.parent.parent
        config_path = project_root / "config" / "alert_config.yaml"

    config_file = Path(config_path)

    if not config_file.exists():
        logger.warning(f"Alert config file not found: {config_file}, using defaults")
        config = AlertEngineConfig()
    else:
        try:
            with open(config_file, "r") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing YAML config: {e}")

        if not data:
            logger.warning(f"Empty config file: {config_file}, using defaults")
            config = AlertEngineConfig()
        else:
            config = AlertEngineConfig.from_dict(data)

    config = apply_env_overrides(config)

    errors = config.validate()
    if errors:
        error_msg = "Configuration validation errors:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(error_msg)

    logger.info(f"✓ Loaded alert config from {config_file}")
    logger.debug(f"  Symbols: {sorted(config.trading.symbols)}")
    logger.debug(f"  Gamma Threshold: {config.trading.gamma_threshold}")
    logger.debug(f"  Theta Decay Min: {config.trading.theta_decay_min}")
    logger.debug(f"  Spread Width: {config.trading.spread_width}")

    return config
