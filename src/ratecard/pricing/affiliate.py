"""Commission-based pricing: affiliate-only, hybrid and performance deals.

Affiliate-only deals replace the flat fee with projected commission. Hybrid
and performance deals are overlays: they take the standard flat-fee result
as an explicit input and return a new result built on top of it.
"""

from decimal import Decimal

import structlog

from ratecard.domain.errors import PricingConfigurationError
from ratecard.domain.models import (
    AffiliateConfig,
    CreatorProfile,
    ParsedBrief,
    PerformanceConfig,
)
from ratecard.domain.types import PricingModel
from ratecard.pricing.layers import round_to_nearest_five, to_cents
from ratecard.pricing.models import (
    AffiliateEarningsBreakdown,
    HybridPricingBreakdown,
    PerformanceBonusBreakdown,
    PricingLayer,
    PricingResult,
    RateRange,
)
from ratecard.pricing.tables import (
    HYBRID_BASE_FEE_DISCOUNT,
    get_affiliate_category_rates,
    resolve_currency,
)

logger = structlog.get_logger()


def _missing_configuration(pricing_model: PricingModel, missing: str) -> PricingConfigurationError:
    logger.warning(
        "pricing_configuration_missing",
        pricing_model=str(pricing_model),
        missing=missing,
    )
    return PricingConfigurationError(pricing_model, missing)


def calculate_affiliate_earnings(config: AffiliateConfig) -> AffiliateEarningsBreakdown:
    """Project commission earnings.

    Formula: ``estimated_sales * average_order_value * affiliate_rate / 100``,
    rounded to the nearest 5.

    Args:
        config: Commission rate, projected sales and average order value.

    Returns:
        The earnings breakdown, including the category's typical rate range
        when a category is given.
    """
    earnings = config.estimated_sales * config.average_order_value * config.affiliate_rate / 100

    rate_range = None
    if config.category:
        category_rates = get_affiliate_category_rates(config.category)
        rate_range = RateRange(min=category_rates.min, max=category_rates.max)

    return AffiliateEarningsBreakdown(
        commission_rate=config.affiliate_rate,
        estimated_sales=config.estimated_sales,
        average_order_value=config.average_order_value,
        estimated_earnings=round_to_nearest_five(earnings),
        category_rate_range=rate_range,
    )


def calculate_hybrid_price(
    full_rate: Decimal | float, config: AffiliateConfig
) -> HybridPricingBreakdown:
    """Split a flat fee into a discounted guaranteed fee plus commission.

    Args:
        full_rate: The full flat-fee total before the hybrid discount.
        config: The commission component.

    Returns:
        Base fee (half the full rate), the commission breakdown and the
        combined estimate, each rounded to the nearest 5.
    """
    full_rate = Decimal(str(full_rate))
    base_fee = round_to_nearest_five(full_rate * HYBRID_BASE_FEE_DISCOUNT)
    affiliate = calculate_affiliate_earnings(config)
    return HybridPricingBreakdown(
        base_fee=base_fee,
        full_rate=round_to_nearest_five(full_rate),
        base_discount=HYBRID_BASE_FEE_DISCOUNT * 100,
        affiliate_earnings=affiliate,
        combined_estimate=round_to_nearest_five(base_fee + affiliate.estimated_earnings),
    )


def calculate_performance_price(
    base_fee: Decimal | float, config: PerformanceConfig
) -> PerformanceBonusBreakdown:
    """Pair a guaranteed fee with a bonus unlocked at a target.

    Args:
        base_fee: The full flat fee, paid regardless of performance.
        config: Bonus threshold, metric and amount.

    Returns:
        The breakdown; ``potential_total`` includes the bonus.
    """
    base_fee = Decimal(str(base_fee))
    return PerformanceBonusBreakdown(
        base_fee=round_to_nearest_five(base_fee),
        bonus_threshold=config.bonus_threshold,
        bonus_metric=config.bonus_metric,
        bonus_amount=round_to_nearest_five(config.bonus_amount),
        potential_total=round_to_nearest_five(base_fee + config.bonus_amount),
    )


def calculate_affiliate_pricing(brief: ParsedBrief, profile: CreatorProfile) -> PricingResult:
    """Price a commission-only deal.

    Args:
        brief: The parsed brief; must carry an affiliate configuration.
        profile: The creator's profile; only the currency is used.

    Returns:
        A result with no flat fee (``price_per_deliverable`` is 0) whose
        total is the projected commission.

    Raises:
        PricingConfigurationError: If the brief has no affiliate configuration.
    """
    config = brief.affiliate_config
    if config is None:
        raise _missing_configuration(PricingModel.AFFILIATE, "affiliate_config")

    breakdown = calculate_affiliate_earnings(config)
    category_rates = get_affiliate_category_rates(config.category)
    symbol = resolve_currency(profile.currency).symbol
    earnings = breakdown.estimated_earnings

    layers = (
        PricingLayer(
            name="Commission Rate",
            description=f"{config.affiliate_rate}% commission on sales",
            base_value=f"{config.affiliate_rate}%",
            multiplier=config.affiliate_rate / 100,
            adjustment=Decimal("0"),
        ),
        PricingLayer(
            name="Estimated Sales",
            description=f"{config.estimated_sales} projected sales",
            base_value=str(config.estimated_sales),
            multiplier=Decimal("1"),
            adjustment=Decimal("0"),
        ),
        PricingLayer(
            name="Average Order Value",
            description=f"{symbol}{config.average_order_value} per order",
            base_value=f"{symbol}{config.average_order_value}",
            multiplier=Decimal("1"),
            adjustment=Decimal("0"),
        ),
        PricingLayer(
            name="Estimated Earnings",
            description=(
                f"{category_rates.display_name} category "
                f"(typical: {category_rates.min}-{category_rates.max}%)"
            ),
            base_value=f"{symbol}{earnings}",
            multiplier=Decimal("1"),
            adjustment=earnings,
        ),
    )

    formula = (
        f"{config.estimated_sales} sales × {symbol}{config.average_order_value} AOV "
        f"× {config.affiliate_rate}% = {symbol}{earnings}"
    )

    return PricingResult(
        price_per_deliverable=Decimal("0"),
        quantity=brief.content.quantity,
        total_price=earnings,
        currency=resolve_currency(profile.currency).code,
        currency_symbol=symbol,
        layers=layers,
        formula=formula,
        pricing_model=PricingModel.AFFILIATE,
        affiliate_breakdown=breakdown,
    )


def apply_hybrid_pricing(
    base: PricingResult, brief: ParsedBrief, profile: CreatorProfile
) -> PricingResult:
    """Convert a flat-fee result into a hybrid fee plus commission result.

    Args:
        base: The standard flat-fee result.
        brief: The parsed brief; must carry an affiliate configuration.
        profile: The creator's profile; only the currency is used.

    Returns:
        A new result whose per-deliverable price is the discounted base fee
        and whose total is the combined estimate.

    Raises:
        PricingConfigurationError: If the brief has no affiliate configuration.
    """
    config = brief.affiliate_config
    if config is None:
        raise _missing_configuration(PricingModel.HYBRID, "affiliate_config")

    breakdown = calculate_hybrid_price(base.total_price, config)
    currency = resolve_currency(profile.currency)
    symbol = currency.symbol
    kept_percent = 100 - breakdown.base_discount

    layers = (
        *base.layers,
        PricingLayer(
            name="Hybrid Discount",
            description=f"Base fee reduced to {kept_percent.normalize():f}% for hybrid model",
            base_value=f"-{breakdown.base_discount.normalize():f}%",
            multiplier=HYBRID_BASE_FEE_DISCOUNT,
            adjustment=to_cents(-(base.total_price * HYBRID_BASE_FEE_DISCOUNT)),
        ),
        PricingLayer(
            name="Affiliate Commission",
            description=f"{config.affiliate_rate}% on {config.estimated_sales} est. sales",
            base_value=f"{config.affiliate_rate}%",
            multiplier=Decimal("1"),
            adjustment=breakdown.affiliate_earnings.estimated_earnings,
        ),
    )

    formula = (
        f"({symbol}{breakdown.full_rate} × 50%) + "
        f"({config.estimated_sales} × {symbol}{config.average_order_value} × "
        f"{config.affiliate_rate}%) = {symbol}{breakdown.combined_estimate}"
    )

    return PricingResult(
        price_per_deliverable=breakdown.base_fee,
        quantity=brief.content.quantity,
        total_price=breakdown.combined_estimate,
        currency=currency.code,
        currency_symbol=symbol,
        layers=layers,
        formula=formula,
        pricing_model=PricingModel.HYBRID,
        hybrid_breakdown=breakdown,
        affiliate_breakdown=breakdown.affiliate_earnings,
    )


def apply_performance_pricing(
    base: PricingResult, brief: ParsedBrief, profile: CreatorProfile
) -> PricingResult:
    """Add a performance bonus on top of a flat-fee result.

    The guaranteed total excludes the bonus; the breakdown's
    ``potential_total`` includes it.

    Raises:
        PricingConfigurationError: If the brief has no performance configuration.
    """
    config = brief.performance_config
    if config is None:
        raise _missing_configuration(PricingModel.PERFORMANCE, "performance_config")

    breakdown = calculate_performance_price(base.total_price, config)
    currency = resolve_currency(profile.currency)
    symbol = currency.symbol

    layers = (
        *base.layers,
        PricingLayer(
            name="Performance Bonus",
            description=(
                f"+{symbol}{config.bonus_amount} if {config.bonus_threshold:,} "
                f"{config.bonus_metric} reached"
            ),
            base_value=f"{config.bonus_threshold} {config.bonus_metric}",
            multiplier=Decimal("1"),
            adjustment=config.bonus_amount,
        ),
    )

    formula = (
        f"{symbol}{breakdown.base_fee} base + {symbol}{breakdown.bonus_amount} bonus "
        f"(at {breakdown.bonus_threshold} {breakdown.bonus_metric}) = "
        f"{symbol}{breakdown.potential_total} potential"
    )

    return PricingResult(
        price_per_deliverable=base.price_per_deliverable,
        quantity=brief.content.quantity,
        total_price=breakdown.base_fee,
        currency=currency.code,
        currency_symbol=symbol,
        layers=layers,
        formula=formula,
        pricing_model=PricingModel.PERFORMANCE,
        performance_breakdown=breakdown,
    )
