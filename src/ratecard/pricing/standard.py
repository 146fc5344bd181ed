"""Audience-based pricing for sponsored content.

Eleven ordered layers turn a tier base rate into a per-deliverable price:

    (base x platform x region x engagement x niche)
        x (1 + format) x (1 + fit) x (1 + usage rights)
        x (1 + whitelisting) x (1 + complexity) x (1 + seasonal)

The per-deliverable price is rounded to the nearest 5.
"""

from datetime import date

from ratecard.domain.models import CreatorProfile, ParsedBrief, PricingOptions
from ratecard.pricing.layers import (
    LayerStack,
    apply_complexity,
    apply_seasonal,
    apply_usage_rights,
    apply_whitelisting,
    capitalize_first,
    format_multiplier,
    format_premium,
)
from ratecard.pricing.models import PricingResult
from ratecard.pricing.tables import (
    DEFAULT_REGION,
    get_base_rate,
    get_complexity_level,
    get_engagement_multiplier,
    get_format_premium,
    get_niche_category,
    get_niche_premium,
    get_platform_display_name,
    get_platform_multiplier,
    get_region_display_name,
    get_regional_multiplier,
    resolve_currency,
)
from ratecard.scoring.adapter import resolve_score_adjustment
from ratecard.scoring.models import DealQualityResult, FitScoreResult


def calculate_standard_sponsored_price(
    profile: CreatorProfile,
    brief: ParsedBrief,
    score: FitScoreResult | DealQualityResult,
    today: date | None = None,
) -> PricingResult:
    """Calculate the flat-fee price for sponsored content.

    Args:
        profile: The creator's profile (tier, region, engagement, niches,
            currency).
        brief: The parsed brief (platform, format, quantity, usage rights).
        score: Fit or deal quality score for the adjustment layer.
        today: Date used for seasonal pricing when the brief has no
            campaign date. Defaults to the current date.

    Returns:
        The quote with all eleven layers. ``pricing_model`` is left unset;
        the router stamps it.
    """
    options = PricingOptions.from_brief(brief, today=today)
    currency = resolve_currency(profile.currency)
    symbol = currency.symbol

    tier = profile.tier
    base_rate = get_base_rate(tier)
    stack = LayerStack(
        "Base Rate",
        f"{capitalize_first(tier)} tier creator rate",
        f"{symbol}{base_rate}",
        base_rate,
    )

    platform = brief.content.platform
    platform_multiplier = get_platform_multiplier(platform)
    stack.multiply(
        "Platform",
        f"{get_platform_display_name(platform)} content rate",
        platform,
        platform_multiplier,
    )

    region = profile.region or DEFAULT_REGION
    regional_multiplier = get_regional_multiplier(region)
    stack.multiply(
        "Regional",
        f"{get_region_display_name(region)} market rate",
        region,
        regional_multiplier,
    )

    engagement_rate = profile.avg_engagement_rate
    engagement_multiplier = get_engagement_multiplier(engagement_rate)
    stack.multiply(
        "Engagement Multiplier",
        f"{engagement_rate:.1f}% engagement rate",
        f"{engagement_rate:.1f}%",
        engagement_multiplier,
    )

    niche = profile.primary_niche
    niche_multiplier = get_niche_premium(niche)
    stack.multiply(
        "Niche Premium",
        f"{get_niche_category(niche)} content commands {format_multiplier(niche_multiplier)}x rates",
        niche,
        niche_multiplier,
    )

    content_format = brief.content.format
    format_premium_value = get_format_premium(content_format)
    stack.add_premium(
        "Format Premium",
        f"{capitalize_first(content_format)} content type",
        content_format,
        format_premium_value,
    )

    score_adjustment = resolve_score_adjustment(score)
    stack.add_premium(
        score_adjustment.layer_name,
        score_adjustment.description,
        f"{score_adjustment.total_score}/100",
        score_adjustment.adjustment,
    )

    rights_premium = apply_usage_rights(stack, brief.usage_rights)
    whitelisting_premium = apply_whitelisting(stack, options)
    complexity_premium = apply_complexity(stack, get_complexity_level(content_format))
    seasonal_premium = apply_seasonal(stack, options)

    price_per_deliverable = stack.rounded_price()
    quantity = brief.content.quantity

    formula = (
        f"({symbol}{base_rate} × {platform_multiplier:.2f} × {regional_multiplier:.2f} "
        f"× {engagement_multiplier:.2f} × {niche_multiplier:.2f}) "
        + " ".join(
            f"× (1 {format_premium(premium)})"
            for premium in (
                format_premium_value,
                score_adjustment.adjustment,
                rights_premium,
                whitelisting_premium,
                complexity_premium,
                seasonal_premium,
            )
        )
    )

    return PricingResult(
        price_per_deliverable=price_per_deliverable,
        quantity=quantity,
        total_price=price_per_deliverable * quantity,
        currency=currency.code,
        currency_symbol=symbol,
        layers=stack.layers,
        formula=formula,
    )
