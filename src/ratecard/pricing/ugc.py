"""Deliverable-based pricing for user-generated content.

UGC is priced as a production service, so audience size, engagement, niche,
platform, region and fit are ignored. Layers: UGC base rate, usage rights,
whitelisting, complexity and seasonal.
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
    format_premium,
)
from ratecard.pricing.models import PricingResult
from ratecard.pricing.tables import (
    get_ugc_base_rate,
    get_ugc_complexity_level,
    resolve_currency,
    resolve_ugc_format,
)


def calculate_ugc_price(
    brief: ParsedBrief,
    profile: CreatorProfile,
    today: date | None = None,
) -> PricingResult:
    """Calculate the flat production price for UGC deliverables.

    Args:
        brief: The parsed brief (UGC format, quantity, usage rights).
        profile: The creator's profile; only the currency is used.
        today: Date used for seasonal pricing when the brief has no
            campaign date. Defaults to the current date.

    Returns:
        The quote with five layers; ``pricing_model`` is unset.
    """
    options = PricingOptions.from_brief(brief, today=today)
    currency = resolve_currency(profile.currency)
    symbol = currency.symbol

    ugc_format = resolve_ugc_format(brief.ugc_format)
    base_rate = get_ugc_base_rate(ugc_format)
    stack = LayerStack(
        "UGC Base Rate",
        f"{capitalize_first(ugc_format)} content base rate",
        f"{symbol}{base_rate}",
        base_rate,
    )

    rights_premium = apply_usage_rights(stack, brief.usage_rights)
    whitelisting_premium = apply_whitelisting(stack, options)
    complexity_premium = apply_complexity(stack, get_ugc_complexity_level(ugc_format))
    seasonal_premium = apply_seasonal(stack, options)

    price_per_deliverable = stack.rounded_price()
    quantity = brief.content.quantity

    formula = f"{symbol}{base_rate} " + " ".join(
        f"× (1 {format_premium(premium)})"
        for premium in (rights_premium, whitelisting_premium, complexity_premium, seasonal_premium)
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
