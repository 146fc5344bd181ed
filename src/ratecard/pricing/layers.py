"""Layer accumulation, rounding and formula helpers shared by the calculators.

A quote is built by starting from a base amount and applying ordered layers.
Multiplicative layers record ``adjustment = price * m - price``; additive
premium layers record ``multiplier = 1 + p`` and ``adjustment = price * p``.
Because every layer's multiplier is kept, replaying the list from the base
amount reproduces the final price exactly.
"""

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from ratecard.domain.models import PricingOptions, UsageRights
from ratecard.domain.types import ComplexityLevel, ExclusivityLevel, SeasonalPeriod
from ratecard.pricing.models import PricingLayer
from ratecard.pricing.seasonal import get_seasonal_premium, seasonal_premium_for
from ratecard.pricing.tables import (
    get_complexity_premium,
    get_duration_premium,
    get_exclusivity_premium,
    get_whitelisting_display_name,
    get_whitelisting_premium,
    normalize_key,
)

TWO_PLACES = Decimal("0.01")
ONE = Decimal("1")
FIVE = Decimal("5")


def round_to_nearest_five(value: Decimal) -> Decimal:
    """Round to the nearest multiple of 5, halves rounding up.

    Args:
        value: Amount in currency units.

    Returns:
        A whole-number Decimal divisible by 5 (202.5 -> 205, 201.25 -> 200).
    """
    return (value / FIVE).quantize(ONE, rounding=ROUND_HALF_UP) * FIVE


def to_cents(value: Decimal) -> Decimal:
    """Quantize an amount to two decimal places."""
    return value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def format_premium(value: Decimal) -> str:
    """Format a premium fraction as a signed percentage (0.25 -> "+25%")."""
    percent = (value * 100).quantize(ONE, rounding=ROUND_HALF_UP)
    if percent == 0:
        return "0%"
    return f"+{percent}%" if percent > 0 else f"{percent}%"


def format_multiplier(value: Decimal) -> str:
    """Format a multiplier without trailing zeros (2.0 -> "2", 1.15 -> "1.15")."""
    return format(value.normalize(), "f")


def capitalize_first(value: str) -> str:
    """Upper-case the first character only ("mid" -> "Mid", "x_y" -> "X_y")."""
    return value[:1].upper() + value[1:]


class LayerStack:
    """A running price together with the ordered layers that produced it."""

    def __init__(self, name: str, description: str, base_value: str, amount: Decimal) -> None:
        self.base_amount = amount
        self.price = amount
        self._layers: list[PricingLayer] = [
            PricingLayer(
                name=name,
                description=description,
                base_value=base_value,
                multiplier=ONE,
                adjustment=amount,
            )
        ]

    @property
    def layers(self) -> tuple[PricingLayer, ...]:
        return tuple(self._layers)

    def multiply(self, name: str, description: str, base_value: str, multiplier: Decimal) -> None:
        """Apply a multiplicative layer to the running price."""
        self._layers.append(
            PricingLayer(
                name=name,
                description=description,
                base_value=base_value,
                multiplier=multiplier,
                adjustment=to_cents(self.price * multiplier - self.price),
            )
        )
        self.price *= multiplier

    def add_premium(self, name: str, description: str, base_value: str, premium: Decimal) -> None:
        """Apply an additive premium layer (``price *= 1 + premium``)."""
        multiplier = ONE + premium
        self._layers.append(
            PricingLayer(
                name=name,
                description=description,
                base_value=base_value,
                multiplier=multiplier,
                adjustment=to_cents(self.price * premium),
            )
        )
        self.price *= multiplier

    def rounded_price(self) -> Decimal:
        return round_to_nearest_five(self.price)


def replay_layers(layers: Sequence[PricingLayer]) -> Decimal:
    """Recompute a rounded per-deliverable price from its layer list.

    The first layer's adjustment is the base amount; every following layer
    multiplies the running price by its multiplier.

    Args:
        layers: Ordered layers from a standard or UGC quote.

    Returns:
        The replayed price rounded to the nearest 5, or 0 for an empty list.
    """
    if not layers:
        return Decimal("0")
    price = layers[0].adjustment
    for layer in layers[1:]:
        price *= layer.multiplier
    return round_to_nearest_five(price)


def describe_usage_rights(duration_days: int, exclusivity: str) -> str:
    if duration_days == 0:
        description = "Content only, no paid usage"
    elif duration_days >= 365:
        description = "Perpetual usage rights"
    else:
        description = f"{duration_days}-day usage rights"
    level = normalize_key(exclusivity)
    if level and level != ExclusivityLevel.NONE:
        description += f", {level} exclusivity"
    return description


def apply_usage_rights(stack: LayerStack, usage_rights: UsageRights) -> Decimal:
    """Add the combined duration and exclusivity layer; returns its premium."""
    premium = get_duration_premium(usage_rights.duration_days) + get_exclusivity_premium(
        usage_rights.exclusivity
    )
    stack.add_premium(
        "Usage Rights",
        describe_usage_rights(usage_rights.duration_days, usage_rights.exclusivity),
        f"{usage_rights.duration_days} days",
        premium,
    )
    return premium


def apply_whitelisting(stack: LayerStack, options: PricingOptions) -> Decimal:
    """Add the whitelisting layer; returns its premium."""
    premium = get_whitelisting_premium(options.whitelisting_type)
    stack.add_premium(
        "Whitelisting",
        get_whitelisting_display_name(options.whitelisting_type),
        options.whitelisting_type,
        premium,
    )
    return premium


def apply_complexity(stack: LayerStack, level: ComplexityLevel) -> Decimal:
    """Add the complexity layer; returns its premium."""
    premium = get_complexity_premium(level)
    stack.add_premium(
        "Complexity",
        f"{capitalize_first(level)} production requirements",
        level,
        premium,
    )
    return premium


def apply_seasonal(stack: LayerStack, options: PricingOptions) -> Decimal:
    """Add the seasonal layer; returns its premium.

    Disabled seasonal pricing always resolves to the default period.
    """
    if options.seasonal_pricing_enabled:
        seasonal = get_seasonal_premium(options.campaign_date)
    else:
        seasonal = seasonal_premium_for(SeasonalPeriod.DEFAULT)
    stack.add_premium(
        "Seasonal",
        seasonal.display_name,
        "auto" if options.seasonal_pricing_enabled else "disabled",
        seasonal.premium,
    )
    return seasonal.premium
