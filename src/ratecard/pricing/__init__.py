"""Multi-layer pricing engine for creator brand partnerships.

Re-exports key functions and types for convenient access:
    from ratecard.pricing import calculate_price, PricingResult
"""

from ratecard.pricing.affiliate import (
    calculate_affiliate_earnings,
    calculate_affiliate_pricing,
    calculate_hybrid_price,
    calculate_performance_price,
)
from ratecard.pricing.engine import calculate_price
from ratecard.pricing.models import PricingLayer, PricingResult, RetainerPricingBreakdown
from ratecard.pricing.quick import (
    QuickEstimateInput,
    QuickEstimateResult,
    calculate_quick_estimate,
)
from ratecard.pricing.retainer import calculate_ambassador_perks, calculate_retainer_price
from ratecard.pricing.seasonal import get_seasonal_premium
from ratecard.pricing.standard import calculate_standard_sponsored_price
from ratecard.pricing.ugc import calculate_ugc_price

__all__ = [
    "PricingLayer",
    "PricingResult",
    "QuickEstimateInput",
    "QuickEstimateResult",
    "RetainerPricingBreakdown",
    "calculate_affiliate_earnings",
    "calculate_affiliate_pricing",
    "calculate_ambassador_perks",
    "calculate_hybrid_price",
    "calculate_performance_price",
    "calculate_price",
    "calculate_quick_estimate",
    "calculate_retainer_price",
    "calculate_standard_sponsored_price",
    "calculate_ugc_price",
    "get_seasonal_premium",
]
