"""Pricing result models.

All monetary values are Decimal. Rounded values (per-deliverable prices,
totals, fees) are whole multiples of 5; layer adjustments are informational
and carry cents.
"""

from decimal import Decimal

from pydantic import BaseModel

from ratecard.domain.models import MonthlyDeliverables
from ratecard.domain.types import DealLength, PricingModel
from ratecard.pricing.tables import QUOTE_VALID_DAYS


class PricingLayer(BaseModel, frozen=True):
    """One ordered step of a pricing formula.

    Attributes:
        name: Layer name, e.g. ``"Platform"``.
        description: Human-readable explanation of the step.
        base_value: Display value of the step's input.
        multiplier: Factor applied to the running price (1 means no-op).
        adjustment: Currency delta contributed by the step.
    """

    name: str
    description: str
    base_value: str
    multiplier: Decimal
    adjustment: Decimal


class RateRange(BaseModel, frozen=True):
    """Typical commission rate range in percent."""

    min: Decimal
    max: Decimal


class AffiliateEarningsBreakdown(BaseModel, frozen=True):
    """Projected commission earnings."""

    commission_rate: Decimal
    estimated_sales: int
    average_order_value: Decimal
    estimated_earnings: Decimal
    category_rate_range: RateRange | None = None


class HybridPricingBreakdown(BaseModel, frozen=True):
    """Discounted guaranteed fee plus commission upside.

    Attributes:
        base_fee: Guaranteed fee after the hybrid discount.
        full_rate: The flat fee before the discount.
        base_discount: Discount applied to the flat fee, in percent.
        affiliate_earnings: The commission component.
        combined_estimate: Base fee plus estimated commission.
    """

    base_fee: Decimal
    full_rate: Decimal
    base_discount: Decimal
    affiliate_earnings: AffiliateEarningsBreakdown
    combined_estimate: Decimal


class PerformanceBonusBreakdown(BaseModel, frozen=True):
    """Guaranteed fee plus a bonus unlocked at a target."""

    base_fee: Decimal
    bonus_threshold: int
    bonus_metric: str
    bonus_amount: Decimal
    potential_total: Decimal


class DeliverableRates(BaseModel, frozen=True):
    """Per-piece rates for each retainer content type."""

    post_rate: Decimal
    story_rate: Decimal
    reel_rate: Decimal
    video_rate: Decimal

    def monthly_value(self, deliverables: MonthlyDeliverables) -> Decimal:
        """Value of one month of deliverables at these rates."""
        return (
            deliverables.posts * self.post_rate
            + deliverables.stories * self.story_rate
            + deliverables.reels * self.reel_rate
            + deliverables.videos * self.video_rate
        )


class AmbassadorPerksBreakdown(BaseModel, frozen=True):
    """Valuation of ambassador perks.

    ``product_seeding_value`` is informational and not part of
    ``total_perks_value``.
    """

    exclusivity_premium: Decimal
    exclusivity_type: str
    product_seeding_value: Decimal
    events_included: int
    event_day_rate: Decimal
    event_appearances_value: Decimal
    total_perks_value: Decimal


class RetainerPricingBreakdown(BaseModel, frozen=True):
    """Multi-month retainer valuation.

    Attributes:
        deal_length: Contract length.
        contract_months: Number of billed months.
        volume_discount: Discount applied to each rate, in percent.
        full_rates: Per-piece rates before the discount.
        discounted_rates: Per-piece rates after the discount.
        monthly_deliverables: Monthly content quota.
        monthly_content_value_full: Monthly value at full rates.
        monthly_content_value_discounted: Monthly value at discounted rates.
        monthly_savings: Difference between the two monthly values.
        monthly_rate: Billed monthly rate for content.
        total_contract_value: Content value over the contract plus perks.
        ambassador_breakdown: Perk valuation, when perks are configured.
    """

    deal_length: DealLength
    contract_months: int
    volume_discount: Decimal
    full_rates: DeliverableRates
    discounted_rates: DeliverableRates
    monthly_deliverables: MonthlyDeliverables
    monthly_content_value_full: Decimal
    monthly_content_value_discounted: Decimal
    monthly_savings: Decimal
    monthly_rate: Decimal
    total_contract_value: Decimal
    ambassador_breakdown: AmbassadorPerksBreakdown | None = None


class PricingResult(BaseModel, frozen=True):
    """A complete quote with its layer-by-layer derivation."""

    price_per_deliverable: Decimal
    quantity: int
    total_price: Decimal
    currency: str
    currency_symbol: str
    valid_days: int = QUOTE_VALID_DAYS
    layers: tuple[PricingLayer, ...]
    formula: str
    pricing_model: PricingModel | None = None
    affiliate_breakdown: AffiliateEarningsBreakdown | None = None
    performance_breakdown: PerformanceBonusBreakdown | None = None
    hybrid_breakdown: HybridPricingBreakdown | None = None
    retainer_breakdown: RetainerPricingBreakdown | None = None
