"""Single entry point that routes a brief to its pricing calculator.

Routing order:
    1. UGC deals use the deliverable-based UGC calculator.
    2. Affiliate-only deals use the commission calculator.
    3. Everything else starts from the standard sponsored price, then:
       hybrid and performance models apply their overlays, a retainer
       configuration applies the retainer overlay, and otherwise the
       standard result is returned as a flat fee.
"""

from collections.abc import Mapping
from datetime import date
from typing import Any

import structlog

from ratecard.domain.models import CreatorProfile, ParsedBrief
from ratecard.domain.types import DealType, PricingModel
from ratecard.pricing.affiliate import (
    apply_hybrid_pricing,
    apply_performance_pricing,
    calculate_affiliate_pricing,
)
from ratecard.pricing.models import PricingResult
from ratecard.pricing.retainer import apply_retainer_pricing
from ratecard.pricing.standard import calculate_standard_sponsored_price
from ratecard.pricing.ugc import calculate_ugc_price
from ratecard.scoring.models import DealQualityResult, FitScoreResult, parse_score_input

logger = structlog.get_logger()


def calculate_price(
    profile: CreatorProfile,
    brief: ParsedBrief,
    score: FitScoreResult | DealQualityResult | Mapping[str, Any],
    today: date | None = None,
) -> PricingResult:
    """Price a brief for a creator.

    Args:
        profile: The creator's profile.
        brief: The parsed brand brief.
        score: A fit score or deal quality result, or its serialized form
            tagged with ``kind``.
        today: Date used for seasonal pricing when the brief has no
            campaign date. Defaults to the current date.

    Returns:
        The quote produced by exactly one calculator.

    Raises:
        PricingConfigurationError: If an affiliate, hybrid or performance
            deal lacks its configuration.
    """
    if isinstance(score, Mapping):
        score = parse_score_input(score)

    route = _select_route(brief)
    logger.debug(
        "pricing_route_selected",
        route=route,
        deal_type=str(brief.deal_type),
        pricing_model=str(brief.pricing_model) if brief.pricing_model else None,
        tier=str(profile.tier),
    )

    if route == "ugc":
        return calculate_ugc_price(brief, profile, today=today)
    if route == PricingModel.AFFILIATE:
        return calculate_affiliate_pricing(brief, profile)

    base = calculate_standard_sponsored_price(profile, brief, score, today=today)

    if route == PricingModel.HYBRID:
        return apply_hybrid_pricing(base, brief, profile)
    if route == PricingModel.PERFORMANCE:
        return apply_performance_pricing(base, brief, profile)
    if route == "retainer":
        return apply_retainer_pricing(base, brief, profile)

    return base.model_copy(update={"pricing_model": PricingModel.FLAT_FEE})


def _select_route(brief: ParsedBrief) -> str:
    if brief.deal_type == DealType.UGC:
        return "ugc"
    if brief.pricing_model in (
        PricingModel.AFFILIATE,
        PricingModel.HYBRID,
        PricingModel.PERFORMANCE,
    ):
        return str(brief.pricing_model)
    if brief.retainer_config is not None:
        return "retainer"
    return str(PricingModel.FLAT_FEE)
