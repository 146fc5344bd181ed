"""Multi-month retainer and ambassador pricing."""

from decimal import Decimal

from ratecard.domain.models import (
    AmbassadorPerks,
    CreatorProfile,
    MonthlyDeliverables,
    ParsedBrief,
    RetainerConfig,
)
from ratecard.domain.types import CreatorTier, PricingModel
from ratecard.pricing.layers import capitalize_first, round_to_nearest_five
from ratecard.pricing.models import (
    AmbassadorPerksBreakdown,
    DeliverableRates,
    PricingLayer,
    PricingResult,
    RetainerPricingBreakdown,
)
from ratecard.pricing.tables import (
    DELIVERABLE_FORMAT_MULTIPLIERS,
    get_ambassador_exclusivity_premium,
    get_contract_months,
    get_event_day_rate,
    get_volume_discount,
    resolve_currency,
)

ZERO = Decimal("0")


def calculate_deliverable_rates(base_rate: Decimal | float) -> DeliverableRates:
    """Derive per-piece rates for each content type from a base rate."""
    base_rate = Decimal(str(base_rate))
    return DeliverableRates(
        post_rate=round_to_nearest_five(base_rate * DELIVERABLE_FORMAT_MULTIPLIERS["posts"]),
        story_rate=round_to_nearest_five(base_rate * DELIVERABLE_FORMAT_MULTIPLIERS["stories"]),
        reel_rate=round_to_nearest_five(base_rate * DELIVERABLE_FORMAT_MULTIPLIERS["reels"]),
        video_rate=round_to_nearest_five(base_rate * DELIVERABLE_FORMAT_MULTIPLIERS["videos"]),
    )


def apply_volume_discount(rates: DeliverableRates, discount: Decimal) -> DeliverableRates:
    """Apply a fractional discount to every rate, rounding each to the nearest 5."""
    factor = 1 - discount
    return DeliverableRates(
        post_rate=round_to_nearest_five(rates.post_rate * factor),
        story_rate=round_to_nearest_five(rates.story_rate * factor),
        reel_rate=round_to_nearest_five(rates.reel_rate * factor),
        video_rate=round_to_nearest_five(rates.video_rate * factor),
    )


def calculate_ambassador_perks(
    perks: AmbassadorPerks,
    tier: CreatorTier,
    monthly_content_value: Decimal | float,
    contract_months: int,
) -> AmbassadorPerksBreakdown:
    """Value the perks attached to an ambassador deal.

    Args:
        perks: Exclusivity, product seeding and event configuration.
        tier: Creator tier, used for the default event day rate.
        monthly_content_value: Discounted monthly content value the
            exclusivity premium is computed from.
        contract_months: Number of months in the contract.

    Returns:
        The perks breakdown. Product seeding is reported but excluded from
        ``total_perks_value``.
    """
    monthly_content_value = Decimal(str(monthly_content_value))
    exclusivity_multiplier = (
        get_ambassador_exclusivity_premium(perks.exclusivity_type)
        if perks.exclusivity_required
        else ZERO
    )
    exclusivity_premium = round_to_nearest_five(
        monthly_content_value * exclusivity_multiplier * contract_months
    )

    product_seeding_value = perks.product_value if perks.product_seeding else ZERO

    event_day_rate = ZERO
    if perks.events_included > 0:
        event_day_rate = perks.event_day_rate or get_event_day_rate(tier)
    event_appearances_value = round_to_nearest_five(perks.events_included * event_day_rate)

    return AmbassadorPerksBreakdown(
        exclusivity_premium=exclusivity_premium,
        exclusivity_type=perks.exclusivity_type,
        product_seeding_value=product_seeding_value,
        events_included=perks.events_included,
        event_day_rate=event_day_rate,
        event_appearances_value=event_appearances_value,
        total_perks_value=exclusivity_premium + event_appearances_value,
    )


def calculate_retainer_price(
    base_rate: Decimal | float,
    retainer_config: RetainerConfig,
    tier: CreatorTier,
) -> RetainerPricingBreakdown:
    """Price a multi-month retainer with volume discounts and perks.

    Args:
        base_rate: Per-deliverable base price (normally the standard price).
        retainer_config: Deal length, monthly quota and optional perks.
        tier: Creator tier, used for event day rates.

    Returns:
        The retainer breakdown. ``total_contract_value`` is the monthly rate
        times the contract months plus the perks value, rounded to 5.
    """
    deliverables: MonthlyDeliverables = retainer_config.monthly_deliverables
    discount = get_volume_discount(retainer_config.deal_length)
    months = get_contract_months(retainer_config.deal_length)

    full_rates = calculate_deliverable_rates(base_rate)
    discounted_rates = apply_volume_discount(full_rates, discount)

    monthly_full = full_rates.monthly_value(deliverables)
    monthly_discounted = discounted_rates.monthly_value(deliverables)
    monthly_rate = round_to_nearest_five(monthly_discounted)

    ambassador_breakdown = None
    if retainer_config.ambassador_perks is not None:
        ambassador_breakdown = calculate_ambassador_perks(
            retainer_config.ambassador_perks, tier, monthly_discounted, months
        )

    perks_value = ambassador_breakdown.total_perks_value if ambassador_breakdown else ZERO
    total = round_to_nearest_five(monthly_rate * months + perks_value)

    return RetainerPricingBreakdown(
        deal_length=retainer_config.deal_length,
        contract_months=months,
        volume_discount=(discount * 100).normalize(),
        full_rates=full_rates,
        discounted_rates=discounted_rates,
        monthly_deliverables=deliverables,
        monthly_content_value_full=round_to_nearest_five(monthly_full),
        monthly_content_value_discounted=round_to_nearest_five(monthly_discounted),
        monthly_savings=round_to_nearest_five(monthly_full - monthly_discounted),
        monthly_rate=monthly_rate,
        total_contract_value=total,
        ambassador_breakdown=ambassador_breakdown,
    )


def describe_perks(breakdown: AmbassadorPerksBreakdown, symbol: str) -> str:
    parts = []
    if breakdown.exclusivity_premium > 0:
        parts.append(
            f"{breakdown.exclusivity_type} exclusivity (+{symbol}{breakdown.exclusivity_premium})"
        )
    if breakdown.events_included > 0:
        plural = "s" if breakdown.events_included > 1 else ""
        parts.append(
            f"{breakdown.events_included} event{plural} "
            f"(+{symbol}{breakdown.event_appearances_value})"
        )
    if breakdown.product_seeding_value > 0:
        parts.append(f"product seeding ({symbol}{breakdown.product_seeding_value} value)")
    return ", ".join(parts) or "No additional perks"


def apply_retainer_pricing(
    base: PricingResult, brief: ParsedBrief, profile: CreatorProfile
) -> PricingResult:
    """Turn a standard flat-fee result into a retainer contract quote.

    The standard per-deliverable price is the retainer's base rate. The
    returned quantity is the number of contract months and the total is
    the contract value.
    """
    config = brief.retainer_config
    breakdown = calculate_retainer_price(base.price_per_deliverable, config, profile.tier)
    currency = resolve_currency(profile.currency)
    symbol = currency.symbol
    deliverables = config.monthly_deliverables
    months = breakdown.contract_months
    discount = f"{breakdown.volume_discount:f}"

    layers = [
        PricingLayer(
            name="Base Rate",
            description=f"{capitalize_first(profile.tier)} tier base rate",
            base_value=f"{symbol}{base.price_per_deliverable}",
            multiplier=Decimal("1"),
            adjustment=base.price_per_deliverable,
        ),
        PricingLayer(
            name="Volume Discount",
            description=f"{discount}% discount for {months}-month commitment",
            base_value=f"-{discount}%",
            multiplier=1 - breakdown.volume_discount / 100,
            adjustment=-breakdown.monthly_savings,
        ),
        PricingLayer(
            name="Monthly Deliverables",
            description=(
                f"{deliverables.posts} posts, {deliverables.stories} stories, "
                f"{deliverables.reels} reels, {deliverables.videos} videos"
            ),
            base_value=f"{symbol}{breakdown.monthly_rate}/mo",
            multiplier=Decimal("1"),
            adjustment=breakdown.monthly_rate,
        ),
        PricingLayer(
            name="Contract Length",
            description=f"{months} month{'s' if months > 1 else ''}",
            base_value=f"×{months}",
            multiplier=Decimal(months),
            adjustment=breakdown.monthly_rate * months,
        ),
    ]

    perks = breakdown.ambassador_breakdown
    if perks is not None:
        layers.append(
            PricingLayer(
                name="Ambassador Perks",
                description=describe_perks(perks, symbol),
                base_value=f"+{symbol}{perks.total_perks_value}",
                multiplier=Decimal("1"),
                adjustment=perks.total_perks_value,
            )
        )
        formula = (
            f"{symbol}{breakdown.monthly_rate}/mo × {months} months + "
            f"{symbol}{perks.total_perks_value} perks = {symbol}{breakdown.total_contract_value}"
        )
    else:
        formula = (
            f"{symbol}{breakdown.monthly_rate}/mo × {months} months = "
            f"{symbol}{breakdown.total_contract_value}"
        )

    return PricingResult(
        price_per_deliverable=base.price_per_deliverable,
        quantity=months,
        total_price=breakdown.total_contract_value,
        currency=currency.code,
        currency_symbol=symbol,
        layers=tuple(layers),
        formula=formula,
        pricing_model=PricingModel.FLAT_FEE,
        retainer_breakdown=breakdown,
    )
