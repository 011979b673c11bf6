"""
Centralized configuration with environment variable overrides.

Pricing rates, add-on fees and the booking window are configurable here.
Nothing is hardcoded in the estimator, availability or form logic.
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from src.logging_context import SubmissionIdFilter

load_dotenv()

logger = logging.getLogger(__name__)


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


def _safe_float(env_var: str, default: str) -> float:
    """Parse a float from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return float(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid float for {env_var}: {raw!r}"
        ) from None


@dataclass(frozen=True)
class BusinessConfig:
    """Business-specific settings loaded from environment or defaults."""

    name: str = os.getenv("BUSINESS_NAME", "Clear Path Cleanouts")
    currency_symbol: str = os.getenv("CURRENCY_SYMBOL", "$")


@dataclass(frozen=True)
class PricingConfig:
    """Quote estimator rates and flat add-on fees."""

    base_rate: float = _safe_float("QUOTE_BASE_RATE", "2.5")
    hazard_fee: float = _safe_float("HAZARD_FEE", "50")
    lawn_fee: float = _safe_float("LAWN_FEE", "99")


@dataclass(frozen=True)
class HoursConfig:
    """Weekly booking window. Weekdays only, close hour is inclusive at :00."""

    open_hour: int = _safe_int("OPEN_HOUR", "8")
    close_hour: int = _safe_int("CLOSE_HOUR", "17")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    business: BusinessConfig = field(default_factory=BusinessConfig)
    pricing: PricingConfig = field(default_factory=PricingConfig)
    hours: HoursConfig = field(default_factory=HoursConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    if config.pricing.base_rate <= 0:
        raise ValueError(
            f"QUOTE_BASE_RATE must be > 0, got {config.pricing.base_rate}"
        )
    for fee_name, fee_value in [
        ("HAZARD_FEE", config.pricing.hazard_fee),
        ("LAWN_FEE", config.pricing.lawn_fee),
    ]:
        if fee_value < 0:
            raise ValueError(f"{fee_name} must be >= 0, got {fee_value}")

    for hour_name, hour_value in [
        ("OPEN_HOUR", config.hours.open_hour),
        ("CLOSE_HOUR", config.hours.close_hour),
    ]:
        if not 0 <= hour_value <= 23:
            raise ValueError(f"{hour_name} must be between 0 and 23, got {hour_value}")

    if config.hours.open_hour >= config.hours.close_hour:
        raise ValueError(
            "OPEN_HOUR must be before CLOSE_HOUR, "
            f"got {config.hours.open_hour} >= {config.hours.close_hour}"
        )


LOG_FORMAT = "%(asctime)s [%(name)s] [%(submission_id)s] %(levelname)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _build_log_handler() -> logging.Handler:
    """Stream handler whose records always carry a submission_id."""
    handler = logging.StreamHandler()
    handler.addFilter(SubmissionIdFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    return handler


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        handlers=[_build_log_handler()],
    )
    logger.info("Configuration loaded for '%s'", config.business.name)
    return config


# Singleton instance
settings = load_config()
