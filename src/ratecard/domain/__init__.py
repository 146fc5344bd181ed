"""Domain types, models, and errors for the rate card engine."""

from ratecard.domain.errors import PricingConfigurationError, PricingError, RateCardError
from ratecard.domain.models import (
    AffiliateConfig,
    CreatorProfile,
    ParsedBrief,
    PerformanceConfig,
    PlatformMetrics,
    PricingOptions,
    RetainerConfig,
)
from ratecard.domain.types import (
    CreatorTier,
    DealType,
    Platform,
    PricingModel,
    calculate_tier,
)

__all__ = [
    "AffiliateConfig",
    "CreatorProfile",
    "CreatorTier",
    "DealType",
    "ParsedBrief",
    "PerformanceConfig",
    "Platform",
    "PlatformMetrics",
    "PricingConfigurationError",
    "PricingError",
    "PricingModel",
    "PricingOptions",
    "RateCardError",
    "RetainerConfig",
    "calculate_tier",
]
