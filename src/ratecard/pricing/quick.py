"""Instant rate estimate from follower count, platform, format and niche.

Used before a full profile exists. Assumes average (3%) engagement and the
baseline US market, and reports a +/-20% range to cover the unknowns.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ratecard.domain.types import CreatorTier, calculate_tier
from ratecard.pricing.layers import round_to_nearest_five
from ratecard.pricing.tables import (
    get_base_rate,
    get_format_premium,
    get_niche_premium,
    get_platform_multiplier,
    normalize_key,
)

# 3% engagement sits in the average bracket
ASSUMED_ENGAGEMENT_MULTIPLIER = Decimal("1.0")
ESTIMATE_RANGE = Decimal("0.2")

# High engagement x usage rights x exclusivity
FULL_PROFILE_MULTIPLIERS = (Decimal("1.6"), Decimal("1.5"), Decimal("1.3"))

MAX_LISTED_FACTORS = 4

TIER_DISPLAY_NAMES: Mapping[str, str] = MappingProxyType(
    {
        CreatorTier.NANO: "Nano",
        CreatorTier.MICRO: "Micro",
        CreatorTier.MID: "Mid-Tier",
        CreatorTier.RISING: "Rising",
        CreatorTier.MACRO: "Macro",
        CreatorTier.MEGA: "Mega",
        CreatorTier.CELEBRITY: "Celebrity",
    }
)


@dataclass(frozen=True)
class TierBenchmark:
    """Industry-estimate rate percentiles for one tier (not user data)."""

    p25: Decimal
    p50: Decimal
    p75: Decimal
    p90: Decimal


def _benchmark(p25: int, p50: int, p75: int, p90: int) -> TierBenchmark:
    return TierBenchmark(Decimal(p25), Decimal(p50), Decimal(p75), Decimal(p90))


TIER_BENCHMARKS: Mapping[str, TierBenchmark] = MappingProxyType(
    {
        CreatorTier.NANO: _benchmark(100, 150, 225, 350),
        CreatorTier.MICRO: _benchmark(275, 400, 550, 750),
        CreatorTier.MID: _benchmark(550, 800, 1100, 1500),
        CreatorTier.RISING: _benchmark(1000, 1500, 2100, 3000),
        CreatorTier.MACRO: _benchmark(2000, 3000, 4500, 6500),
        CreatorTier.MEGA: _benchmark(4000, 6000, 9000, 14000),
        CreatorTier.CELEBRITY: _benchmark(8000, 12000, 20000, 35000),
    }
)


class RateInfluencer(BaseModel, frozen=True):
    """A factor that could raise the quoted rate."""

    name: str
    description: str
    potential_increase: str


class MissingFactor(BaseModel, frozen=True):
    """Information a full profile would add to the estimate."""

    name: str
    impact: str
    description: str
    icon: str


HIGH_ENGAGEMENT = RateInfluencer(
    name="High Engagement",
    description="Engagement rate above 5% commands premium rates",
    potential_increase="+20-60%",
)
USAGE_RIGHTS = RateInfluencer(
    name="Usage Rights",
    description="Brands using your content in ads pay more",
    potential_increase="+25-100%",
)
EXCLUSIVITY = RateInfluencer(
    name="Exclusivity",
    description="Not working with competitors justifies higher rates",
    potential_increase="+30-50%",
)
WHITELISTING = RateInfluencer(
    name="Whitelisting",
    description="Allowing brands to run your content as ads",
    potential_increase="+50-200%",
)
HOLIDAY_SEASON = RateInfluencer(
    name="Q4 Holiday Season",
    description="Brands pay more during peak shopping seasons",
    potential_increase="+15-25%",
)
COMPLEX_PRODUCTION = RateInfluencer(
    name="Complex Production",
    description="Multi-location shoots or professional editing",
    potential_increase="+15-50%",
)

RATE_INFLUENCERS: tuple[RateInfluencer, ...] = (
    HIGH_ENGAGEMENT,
    USAGE_RIGHTS,
    EXCLUSIVITY,
    WHITELISTING,
    HOLIDAY_SEASON,
    COMPLEX_PRODUCTION,
)

ENGAGEMENT_FACTOR = MissingFactor(
    name="Your Actual Engagement",
    impact="±30%",
    description="High engagement = higher rates. We assumed 3% average.",
    icon="TrendingUp",
)
LOCATION_FACTOR = MissingFactor(
    name="Audience Location",
    impact="+40%",
    description="US/UK audiences pay significantly more than global average.",
    icon="Globe",
)
BRAND_WORK_FACTOR = MissingFactor(
    name="Past Brand Work",
    impact="+15-25%",
    description="Portfolio with recognizable brands justifies premium rates.",
    icon="Briefcase",
)
QUALITY_FACTOR = MissingFactor(
    name="Content Quality",
    impact="+20-50%",
    description="Professional production value commands higher rates.",
    icon="Camera",
)
AUDIENCE_DEMO_FACTOR = MissingFactor(
    name="Audience Demographics",
    impact="+20-35%",
    description="Age, income level, and interests affect brand value.",
    icon="Users",
)
GROWTH_FACTOR = MissingFactor(
    name="Growth Velocity",
    impact="+10-20%",
    description="Fast-growing accounts command premium rates.",
    icon="TrendingUp",
)
NICHE_AUTHORITY_FACTOR = MissingFactor(
    name="Niche Authority",
    impact="+15-30%",
    description="Being a recognized expert in your niche adds value.",
    icon="Award",
)

PRODUCTION_HEAVY_FORMATS = frozenset({"reel", "video", "live"})
STATIC_FORMATS = frozenset({"static", "carousel"})


class QuickEstimateInput(BaseModel):
    """Minimal creator details for a quick estimate."""

    model_config = ConfigDict(frozen=True)

    follower_count: int = Field(ge=0)
    platform: str
    content_format: str
    niche: str = "lifestyle"

    @field_validator("platform", "content_format", mode="before")
    @classmethod
    def normalize_keys(cls, v: object) -> object:
        """Compare platform and format case-insensitively."""
        return normalize_key(v) if isinstance(v, str) else v

    @field_validator("niche", mode="before")
    @classmethod
    def blank_niche_is_lifestyle(cls, v: object) -> object:
        if v is None or (isinstance(v, str) and not v.strip()):
            return "lifestyle"
        return v


class QuickEstimateResult(BaseModel, frozen=True):
    """A quick rate range with context for where it sits in the tier."""

    min_rate: Decimal
    max_rate: Decimal
    base_rate: Decimal
    tier: CreatorTier
    tier_name: str
    platform: str
    content_format: str
    niche: str
    factors: tuple[RateInfluencer, ...]
    percentile: int
    top_performer_min: Decimal
    top_performer_max: Decimal
    potential_with_full_profile: Decimal
    missing_factors: tuple[MissingFactor, ...]


def _round_int(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def calculate_percentile(rate: Decimal, tier: CreatorTier) -> int:
    """Estimate where a rate falls within its tier's benchmark bands (0-99)."""
    bands = TIER_BENCHMARKS[tier]
    if rate <= bands.p25:
        return _round_int(rate / bands.p25 * 25)
    if rate <= bands.p50:
        return 25 + _round_int((rate - bands.p25) / (bands.p50 - bands.p25) * 25)
    if rate <= bands.p75:
        return 50 + _round_int((rate - bands.p50) / (bands.p75 - bands.p50) * 25)
    if rate <= bands.p90:
        return 75 + _round_int((rate - bands.p75) / (bands.p90 - bands.p75) * 15)
    return min(99, 90 + _round_int((rate - bands.p90) / bands.p90 * 9))


def calculate_potential_rate(base_rate: Decimal) -> Decimal:
    """Rate with high engagement, usage rights and exclusivity, rounded to a whole unit."""
    potential = base_rate
    for multiplier in FULL_PROFILE_MULTIPLIERS:
        potential *= multiplier
    return Decimal(_round_int(potential))


def get_rate_influencers(tier: CreatorTier, content_format: str) -> tuple[RateInfluencer, ...]:
    """Pick the rate influencers most relevant to this creator (at most four)."""
    factors = [HIGH_ENGAGEMENT, USAGE_RIGHTS]
    if tier != CreatorTier.NANO:
        factors.append(EXCLUSIVITY)
    if content_format in ("reel", "video"):
        factors.append(WHITELISTING)
    factors.append(HOLIDAY_SEASON)
    if content_format in ("video", "live"):
        factors.append(COMPLEX_PRODUCTION)
    return tuple(factors[:MAX_LISTED_FACTORS])


def get_missing_factors(request: QuickEstimateInput) -> tuple[MissingFactor, ...]:
    """List what a full profile would refine (at most four)."""
    tier = calculate_tier(request.follower_count)
    factors = [ENGAGEMENT_FACTOR]

    # LinkedIn audiences are global
    if request.platform != "linkedin":
        factors.append(LOCATION_FACTOR)

    factors.append(GROWTH_FACTOR if tier == CreatorTier.NANO else BRAND_WORK_FACTOR)

    if request.content_format in PRODUCTION_HEAVY_FORMATS:
        factors.append(QUALITY_FACTOR)
    elif request.content_format in STATIC_FORMATS:
        factors.append(NICHE_AUTHORITY_FACTOR)

    if tier not in (CreatorTier.NANO, CreatorTier.MICRO):
        factors.append(AUDIENCE_DEMO_FACTOR)

    return tuple(factors[:MAX_LISTED_FACTORS])


def calculate_quick_estimate(request: QuickEstimateInput) -> QuickEstimateResult:
    """Estimate a sponsored post rate from minimal input.

    Formula: tier base x platform x engagement (assumed 3%) x niche
    x (1 + format premium), with a +/-20% range.

    Args:
        request: Follower count, platform, content format and niche.

    Returns:
        The estimate with its range, tier context and suggestions.
    """
    tier = calculate_tier(request.follower_count)

    rate = (
        get_base_rate(tier)
        * get_platform_multiplier(request.platform)
        * ASSUMED_ENGAGEMENT_MULTIPLIER
        * get_niche_premium(request.niche)
        * (1 + get_format_premium(request.content_format))
    )
    base_rate = round_to_nearest_five(rate)
    benchmark = TIER_BENCHMARKS[tier]

    return QuickEstimateResult(
        min_rate=round_to_nearest_five(rate * (1 - ESTIMATE_RANGE)),
        max_rate=round_to_nearest_five(rate * (1 + ESTIMATE_RANGE)),
        base_rate=base_rate,
        tier=tier,
        tier_name=TIER_DISPLAY_NAMES[tier],
        platform=request.platform,
        content_format=request.content_format,
        niche=request.niche,
        factors=get_rate_influencers(tier, request.content_format),
        percentile=calculate_percentile(base_rate, tier),
        top_performer_min=benchmark.p75,
        top_performer_max=benchmark.p90,
        potential_with_full_profile=calculate_potential_rate(base_rate),
        missing_factors=get_missing_factors(request),
    )
