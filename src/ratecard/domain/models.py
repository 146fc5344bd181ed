"""Pydantic v2 models for the pricing engine's inputs.

Profiles and briefs arrive from upstream collaborators (profile storage and
the brief parser). Malformed values are normalized to safe defaults here at
the boundary instead of being rejected, so the calculators can assume
well-formed input. Monetary fields use Decimal; float inputs are converted
through ``str`` to avoid binary representation noise.
"""

from __future__ import annotations

import math
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ratecard.domain.types import (
    BonusMetric,
    CreatorTier,
    DealLength,
    DealType,
    PricingModel,
    WhitelistingType,
    calculate_tier,
)

PLATFORM_FIELDS: tuple[str, ...] = ("instagram", "tiktok", "youtube", "twitter")

DEFAULT_REGION = "united_states"
DEFAULT_CURRENCY = "USD"


def to_decimal(value: object) -> object:
    """Convert float inputs to Decimal via their string form."""
    if isinstance(value, float):
        return Decimal(str(value))
    return value


def coerce_date(value: object) -> date | None:
    """Best-effort conversion of a campaign date to a ``date``.

    Accepts ``date``/``datetime`` objects and ISO-8601 strings (date or
    datetime, with or without a ``Z`` suffix).

    Returns:
        The parsed date, or ``None`` when the value is missing or unparseable.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        text = value.strip()
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            return None
    return None


def _blank_to_default(value: object, default: str) -> object:
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    return value


def _whole_count(value: object, minimum: int = 0, default: int = 0) -> object:
    """Normalize a count: missing, non-finite or below-minimum values get the default.

    Fractional counts are floored.
    """
    if value is None:
        return default
    if isinstance(value, float):
        if not math.isfinite(value):
            return default
        value = math.floor(value)
    if isinstance(value, int) and value < minimum:
        return default
    return value


def _finite_rate(value: object) -> object:
    """Missing, negative, non-finite or non-numeric rates become zero."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        rate = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(rate) or rate < 0:
        return 0.0
    return rate


# ---------------------------------------------------------------------------
# Creator profile
# ---------------------------------------------------------------------------


class PlatformMetrics(BaseModel):
    """Audience metrics for a single platform."""

    model_config = ConfigDict(frozen=True)

    followers: int = 0
    engagement_rate: float = 0.0
    avg_likes: int = 0
    avg_comments: int = 0
    avg_views: int = 0

    @field_validator("followers", "avg_likes", "avg_comments", "avg_views", mode="before")
    @classmethod
    def clamp_negative_counts(cls, v: object) -> object:
        """Treat missing or negative counts as zero; floor fractional counts."""
        return _whole_count(v)

    @field_validator("engagement_rate", mode="before")
    @classmethod
    def clamp_negative_rate(cls, v: object) -> object:
        """Treat a missing, negative or non-finite engagement rate as zero."""
        return _finite_rate(v)


class GenderSplit(BaseModel):
    """Audience gender distribution in percent."""

    model_config = ConfigDict(frozen=True)

    male: float = 50.0
    female: float = 50.0
    other: float = 0.0


class AudienceDemographics(BaseModel):
    """Demographic breakdown of a creator's audience."""

    model_config = ConfigDict(frozen=True)

    age_range: str = ""
    gender_split: GenderSplit = Field(default_factory=GenderSplit)
    top_locations: list[str] = Field(default_factory=list)
    interests: list[str] = Field(default_factory=list)


class CreatorProfile(BaseModel):
    """A creator's platform metrics, audience, and market.

    ``total_reach``, ``avg_engagement_rate`` and ``tier`` are derived from the
    platform metrics when the caller does not supply them.
    """

    model_config = ConfigDict(frozen=True)

    display_name: str = ""
    handle: str = ""
    location: str = ""
    region: str = DEFAULT_REGION
    niches: list[str] = Field(default_factory=list)
    instagram: PlatformMetrics | None = None
    tiktok: PlatformMetrics | None = None
    youtube: PlatformMetrics | None = None
    twitter: PlatformMetrics | None = None
    audience: AudienceDemographics = Field(default_factory=AudienceDemographics)
    total_reach: int = 0
    avg_engagement_rate: float = 0.0
    tier: CreatorTier = CreatorTier.NANO
    currency: str = DEFAULT_CURRENCY

    @model_validator(mode="before")
    @classmethod
    def derive_audience_totals(cls, data: Any) -> Any:
        """Fill reach, engagement and tier from platform metrics when absent."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        metrics = [
            PlatformMetrics.model_validate(data[name])
            for name in PLATFORM_FIELDS
            if data.get(name) is not None
        ]

        if data.get("total_reach") is None:
            data["total_reach"] = sum(m.followers for m in metrics)
        else:
            data["total_reach"] = _whole_count(data["total_reach"])

        if data.get("avg_engagement_rate") is not None:
            data["avg_engagement_rate"] = _finite_rate(data["avg_engagement_rate"])
        else:
            total_followers = sum(m.followers for m in metrics)
            if total_followers > 0:
                weighted = sum(m.followers * m.engagement_rate for m in metrics)
                data["avg_engagement_rate"] = weighted / total_followers
            elif metrics:
                data["avg_engagement_rate"] = sum(m.engagement_rate for m in metrics) / len(
                    metrics
                )
            else:
                data["avg_engagement_rate"] = 0.0

        tier = data.get("tier")
        if tier is None or str(tier) not in CreatorTier._value2member_map_:
            data["tier"] = calculate_tier(int(data["total_reach"] or 0))

        data["region"] = _blank_to_default(data.get("region"), DEFAULT_REGION)
        data["currency"] = _blank_to_default(data.get("currency"), DEFAULT_CURRENCY)
        return data

    @property
    def primary_niche(self) -> str:
        """The first listed niche, or ``lifestyle`` when none is set."""
        return self.niches[0] if self.niches else "lifestyle"

    def metrics_for(self, platform: str) -> PlatformMetrics | None:
        """Return metrics for a platform the profile tracks, if present."""
        if platform not in PLATFORM_FIELDS:
            return None
        return getattr(self, platform)

    def platform_metrics(self) -> list[PlatformMetrics]:
        """All platform metrics present on the profile."""
        return [m for m in (getattr(self, name) for name in PLATFORM_FIELDS) if m is not None]


# ---------------------------------------------------------------------------
# Pricing model configurations
# ---------------------------------------------------------------------------


class AffiliateConfig(BaseModel):
    """Commission configuration for affiliate and hybrid deals.

    Attributes:
        affiliate_rate: Commission rate in percent (15 means 15%).
        estimated_sales: Projected number of sales.
        average_order_value: Average order value in currency units.
        category: Optional product category for rate benchmarks.
    """

    model_config = ConfigDict(frozen=True)

    affiliate_rate: Decimal
    estimated_sales: int = 0
    average_order_value: Decimal = Decimal("0")
    category: str | None = None

    @field_validator("affiliate_rate", "average_order_value", mode="before")
    @classmethod
    def coerce_decimal(cls, v: object) -> object:
        """Convert float inputs to Decimal."""
        return to_decimal(v)

    @field_validator("estimated_sales", mode="before")
    @classmethod
    def clamp_sales(cls, v: object) -> object:
        """Treat missing or negative sales as zero."""
        return _whole_count(v)


class PerformanceConfig(BaseModel):
    """Bonus configuration for performance deals."""

    model_config = ConfigDict(frozen=True)

    bonus_threshold: int
    bonus_metric: str = BonusMetric.SALES
    bonus_amount: Decimal

    @field_validator("bonus_amount", mode="before")
    @classmethod
    def coerce_decimal(cls, v: object) -> object:
        """Convert float inputs to Decimal."""
        return to_decimal(v)


class MonthlyDeliverables(BaseModel):
    """Number of each content type delivered per month of a retainer."""

    model_config = ConfigDict(frozen=True)

    posts: int = 0
    stories: int = 0
    reels: int = 0
    videos: int = 0

    @field_validator("posts", "stories", "reels", "videos", mode="before")
    @classmethod
    def clamp_counts(cls, v: object) -> object:
        """Treat missing or negative counts as zero."""
        return _whole_count(v)


class AmbassadorPerks(BaseModel):
    """Optional perks attached to long-term ambassador deals.

    An ``event_day_rate`` of zero means the tier's default day rate applies.
    """

    model_config = ConfigDict(frozen=True)

    exclusivity_required: bool = False
    exclusivity_type: str = "none"
    product_seeding: bool = False
    product_value: Decimal = Decimal("0")
    events_included: int = 0
    event_day_rate: Decimal = Decimal("0")

    @field_validator("product_value", "event_day_rate", mode="before")
    @classmethod
    def coerce_decimal(cls, v: object) -> object:
        """Convert float inputs to Decimal; missing values become zero."""
        if v is None:
            return Decimal("0")
        return to_decimal(v)

    @field_validator("events_included", mode="before")
    @classmethod
    def clamp_events(cls, v: object) -> object:
        """Treat missing or negative event counts as zero."""
        return _whole_count(v)


class RetainerConfig(BaseModel):
    """Multi-month retainer or ambassador configuration."""

    model_config = ConfigDict(frozen=True)

    deal_length: DealLength = DealLength.ONE_TIME
    monthly_deliverables: MonthlyDeliverables = Field(default_factory=MonthlyDeliverables)
    ambassador_perks: AmbassadorPerks | None = None

    @field_validator("deal_length", mode="before")
    @classmethod
    def unknown_length_is_one_time(cls, v: object) -> object:
        """Unrecognized deal lengths are priced as a one-time project."""
        if v is None or str(v) not in DealLength._value2member_map_:
            return DealLength.ONE_TIME
        return v


# ---------------------------------------------------------------------------
# Parsed brief
# ---------------------------------------------------------------------------


class BrandInfo(BaseModel):
    """Brand metadata extracted from a brief."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    industry: str = ""
    product: str = ""


class CampaignInfo(BaseModel):
    """Campaign goals extracted from a brief."""

    model_config = ConfigDict(frozen=True)

    objective: str = ""
    target_audience: str = ""
    budget_range: str = ""


class ContentRequirements(BaseModel):
    """Requested deliverables.

    Platform and format are kept as plain strings so unrecognized values
    reach the lookup tables, which resolve them to neutral defaults.
    """

    model_config = ConfigDict(frozen=True)

    platform: str = "instagram"
    format: str = "static"
    quantity: int = 1
    creative_direction: str = ""

    @field_validator("platform", mode="before")
    @classmethod
    def blank_platform_is_instagram(cls, v: object) -> object:
        return _blank_to_default(v, "instagram")

    @field_validator("format", mode="before")
    @classmethod
    def blank_format_is_static(cls, v: object) -> object:
        return _blank_to_default(v, "static")

    @field_validator("quantity", mode="before")
    @classmethod
    def quantity_at_least_one(cls, v: object) -> object:
        """Missing or non-positive quantities become a single deliverable.

        Fractional quantities are floored.
        """
        return _whole_count(v, minimum=1, default=1)


class UsageRights(BaseModel):
    """Usage and licensing terms."""

    model_config = ConfigDict(frozen=True)

    duration_days: int = 0
    exclusivity: str = "none"
    paid_amplification: bool = False
    whitelisting_type: str | None = None

    @field_validator("duration_days", mode="before")
    @classmethod
    def clamp_duration(cls, v: object) -> object:
        """Missing or negative durations mean content-only (0 days).

        Partial days round up, so 30.5 days prices in the 31-90 day bracket.
        """
        if isinstance(v, float) and math.isfinite(v) and v > 0:
            v = math.ceil(v)
        return _whole_count(v)

    @field_validator("exclusivity", mode="before")
    @classmethod
    def blank_exclusivity_is_none(cls, v: object) -> object:
        return _blank_to_default(v, "none")


class Timeline(BaseModel):
    """Delivery timeline."""

    model_config = ConfigDict(frozen=True)

    deadline: str = ""


class ParsedBrief(BaseModel):
    """A structured brand brief produced by the upstream parsing stage."""

    model_config = ConfigDict(frozen=True)

    deal_type: DealType = DealType.SPONSORED
    ugc_format: str | None = None
    pricing_model: PricingModel | None = None
    affiliate_config: AffiliateConfig | None = None
    performance_config: PerformanceConfig | None = None
    retainer_config: RetainerConfig | None = None
    brand: BrandInfo = Field(default_factory=BrandInfo)
    campaign: CampaignInfo = Field(default_factory=CampaignInfo)
    content: ContentRequirements = Field(default_factory=ContentRequirements)
    usage_rights: UsageRights = Field(default_factory=UsageRights)
    timeline: Timeline = Field(default_factory=Timeline)
    campaign_date: date | None = None
    disable_seasonal_pricing: bool = False
    raw_text: str = ""

    @field_validator("deal_type", mode="before")
    @classmethod
    def unknown_deal_type_is_sponsored(cls, v: object) -> object:
        """Anything other than a recognized deal type is priced as sponsored."""
        if v is None or str(v) not in DealType._value2member_map_:
            return DealType.SPONSORED
        return v

    @field_validator("pricing_model", mode="before")
    @classmethod
    def unknown_pricing_model_is_unset(cls, v: object) -> object:
        """Unrecognized pricing models fall back to the flat-fee default."""
        if v is None or str(v) not in PricingModel._value2member_map_:
            return None
        return v

    @field_validator("campaign_date", mode="before")
    @classmethod
    def parse_campaign_date(cls, v: object) -> date | None:
        """Parse ISO strings; unparseable dates are dropped (priced as today)."""
        return coerce_date(v)


class PricingOptions(BaseModel):
    """Defaultable pricing inputs, resolved once at the calculator boundary.

    Attributes:
        whitelisting_type: Whitelisting key (``none`` when the brief is silent).
        campaign_date: Date used for seasonal pricing.
        seasonal_pricing_enabled: ``False`` forces the default season (0%).
    """

    model_config = ConfigDict(frozen=True)

    whitelisting_type: str = WhitelistingType.NONE
    campaign_date: date
    seasonal_pricing_enabled: bool = True

    @classmethod
    def from_brief(cls, brief: ParsedBrief, today: date | None = None) -> PricingOptions:
        """Build options from a brief, applying named defaults.

        Args:
            brief: The parsed brief.
            today: Date to use when the brief has no campaign date. Defaults
                to the current date.

        Returns:
            The resolved pricing options.
        """
        campaign_date = brief.campaign_date or today or date.today()
        whitelisting = brief.usage_rights.whitelisting_type
        return cls(
            whitelisting_type=whitelisting.strip() if whitelisting and whitelisting.strip()
            else WhitelistingType.NONE,
            campaign_date=campaign_date,
            seasonal_pricing_enabled=not brief.disable_seasonal_pricing,
        )
