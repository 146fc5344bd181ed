"""Lookup and multiplier tables for rate card pricing.

Every table is an immutable mapping built once at import time. Lookup
functions are total: unrecognized keys resolve to a documented neutral
default instead of raising, so malformed upstream data never fails a quote.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType

from ratecard.domain.types import (
    AffiliateCategory,
    ComplexityLevel,
    ContentFormat,
    CreatorTier,
    DealLength,
    ExclusivityLevel,
    Platform,
    Region,
    SeasonalPeriod,
    UGCFormat,
    WhitelistingType,
)

QUOTE_VALID_DAYS = 14

# Hybrid deals pay this fraction of the full flat fee as the guaranteed base
HYBRID_BASE_FEE_DISCOUNT = Decimal("0.5")

_WHITESPACE = re.compile(r"\s+")


def normalize_key(value: str, *, underscore_spaces: bool = False) -> str:
    """Lowercase and trim a categorical key.

    Args:
        value: The raw key.
        underscore_spaces: Also replace internal whitespace runs with ``_``
            (used for platform and region keys, e.g. ``"United States"``).

    Returns:
        The normalized key.
    """
    key = value.lower().strip()
    if underscore_spaces:
        key = _WHITESPACE.sub("_", key)
    return key


# ---------------------------------------------------------------------------
# Base rates
# ---------------------------------------------------------------------------

BASE_RATES: Mapping[CreatorTier, Decimal] = MappingProxyType(
    {
        CreatorTier.NANO: Decimal("150"),
        CreatorTier.MICRO: Decimal("400"),
        CreatorTier.MID: Decimal("800"),
        CreatorTier.RISING: Decimal("1500"),
        CreatorTier.MACRO: Decimal("3000"),
        CreatorTier.MEGA: Decimal("6000"),
        CreatorTier.CELEBRITY: Decimal("12000"),
    }
)

# UGC is priced as a production service, independent of audience size
UGC_BASE_RATES: Mapping[UGCFormat, Decimal] = MappingProxyType(
    {
        UGCFormat.VIDEO: Decimal("175"),
        UGCFormat.PHOTO: Decimal("100"),
    }
)


def get_base_rate(tier: CreatorTier) -> Decimal:
    """Return the USD base rate for a single deliverable at the given tier."""
    return BASE_RATES[tier]


def resolve_ugc_format(value: str | None) -> UGCFormat:
    """Resolve a UGC format key, falling back to video."""
    if not value:
        return UGCFormat.VIDEO
    key = normalize_key(value)
    if key in UGCFormat._value2member_map_:
        return UGCFormat(key)
    return UGCFormat.VIDEO


def get_ugc_base_rate(ugc_format: str | None) -> Decimal:
    """Return the flat base rate for a UGC format (unknown formats price as video)."""
    return UGC_BASE_RATES[resolve_ugc_format(ugc_format)]


# ---------------------------------------------------------------------------
# Platform
# ---------------------------------------------------------------------------

PLATFORM_MULTIPLIERS: Mapping[str, Decimal] = MappingProxyType(
    {
        Platform.INSTAGRAM: Decimal("1.0"),
        Platform.TIKTOK: Decimal("0.9"),
        Platform.YOUTUBE: Decimal("1.4"),
        Platform.YOUTUBE_SHORTS: Decimal("0.7"),
        Platform.TWITTER: Decimal("0.7"),
        Platform.THREADS: Decimal("0.6"),
        Platform.PINTEREST: Decimal("0.8"),
        Platform.LINKEDIN: Decimal("1.3"),
        Platform.BLUESKY: Decimal("0.5"),
        Platform.LEMON8: Decimal("0.6"),
        Platform.SNAPCHAT: Decimal("0.75"),
        Platform.TWITCH: Decimal("1.1"),
    }
)

DEFAULT_PLATFORM_MULTIPLIER = Decimal("1.0")

PLATFORM_DISPLAY_NAMES: Mapping[str, str] = MappingProxyType(
    {
        Platform.INSTAGRAM: "Instagram",
        Platform.TIKTOK: "TikTok",
        Platform.YOUTUBE: "YouTube",
        Platform.YOUTUBE_SHORTS: "YouTube Shorts",
        Platform.TWITTER: "Twitter/X",
        Platform.THREADS: "Threads",
        Platform.PINTEREST: "Pinterest",
        Platform.LINKEDIN: "LinkedIn",
        Platform.BLUESKY: "Bluesky",
        Platform.LEMON8: "Lemon8",
        Platform.SNAPCHAT: "Snapchat",
        Platform.TWITCH: "Twitch",
    }
)


def get_platform_multiplier(platform: str | None) -> Decimal:
    """Return the platform multiplier (Instagram is the 1.0 baseline).

    Missing or unknown platforms use the baseline.
    """
    if not platform:
        return DEFAULT_PLATFORM_MULTIPLIER
    key = normalize_key(platform, underscore_spaces=True)
    return PLATFORM_MULTIPLIERS.get(key, DEFAULT_PLATFORM_MULTIPLIER)


def get_platform_display_name(platform: str | None) -> str:
    """Human-readable platform name; unknown platforms display as given."""
    if not platform:
        return "Unknown Platform"
    key = normalize_key(platform, underscore_spaces=True)
    return PLATFORM_DISPLAY_NAMES.get(key, platform)


# ---------------------------------------------------------------------------
# Region
# ---------------------------------------------------------------------------

REGIONAL_MULTIPLIERS: Mapping[str, Decimal] = MappingProxyType(
    {
        Region.UNITED_STATES: Decimal("1.0"),
        Region.UNITED_KINGDOM: Decimal("0.95"),
        Region.CANADA: Decimal("0.9"),
        Region.AUSTRALIA: Decimal("0.9"),
        Region.WESTERN_EUROPE: Decimal("0.85"),
        Region.UAE_GULF: Decimal("1.1"),
        Region.SINGAPORE_HK: Decimal("0.95"),
        Region.JAPAN: Decimal("0.8"),
        Region.SOUTH_KOREA: Decimal("0.75"),
        Region.BRAZIL: Decimal("0.6"),
        Region.MEXICO: Decimal("0.55"),
        Region.INDIA: Decimal("0.4"),
        Region.SOUTHEAST_ASIA: Decimal("0.5"),
        Region.EASTERN_EUROPE: Decimal("0.5"),
        Region.AFRICA: Decimal("0.4"),
        Region.OTHER: Decimal("0.7"),
    }
)

DEFAULT_REGION = Region.UNITED_STATES

REGION_DISPLAY_NAMES: Mapping[str, str] = MappingProxyType(
    {
        Region.UNITED_STATES: "United States",
        Region.UNITED_KINGDOM: "United Kingdom",
        Region.CANADA: "Canada",
        Region.AUSTRALIA: "Australia",
        Region.WESTERN_EUROPE: "Western Europe",
        Region.UAE_GULF: "UAE/Gulf States",
        Region.SINGAPORE_HK: "Singapore/Hong Kong",
        Region.JAPAN: "Japan",
        Region.SOUTH_KOREA: "South Korea",
        Region.BRAZIL: "Brazil",
        Region.MEXICO: "Mexico",
        Region.INDIA: "India",
        Region.SOUTHEAST_ASIA: "Southeast Asia",
        Region.EASTERN_EUROPE: "Eastern Europe",
        Region.AFRICA: "Africa",
        Region.OTHER: "Other",
    }
)


def get_regional_multiplier(region: str | None) -> Decimal:
    """Return the regional multiplier (United States is the 1.0 baseline).

    A missing region is treated as the United States; an unrecognized one
    gets the ``other`` rate (0.7).
    """
    if not region:
        return REGIONAL_MULTIPLIERS[DEFAULT_REGION]
    key = normalize_key(region, underscore_spaces=True)
    return REGIONAL_MULTIPLIERS.get(key, REGIONAL_MULTIPLIERS[Region.OTHER])


def get_region_display_name(region: str | None) -> str:
    """Human-readable region name; unrecognized regions display as "Other"."""
    if not region:
        return REGION_DISPLAY_NAMES[DEFAULT_REGION]
    key = normalize_key(region, underscore_spaces=True)
    return REGION_DISPLAY_NAMES.get(key, REGION_DISPLAY_NAMES[Region.OTHER])


# ---------------------------------------------------------------------------
# Engagement
# ---------------------------------------------------------------------------

# (exclusive upper bound in percent, multiplier); first match wins
ENGAGEMENT_BRACKETS: tuple[tuple[float, Decimal], ...] = (
    (1.0, Decimal("0.8")),
    (3.0, Decimal("1.0")),
    (5.0, Decimal("1.3")),
    (8.0, Decimal("1.6")),
)
TOP_ENGAGEMENT_MULTIPLIER = Decimal("2.0")


def get_engagement_multiplier(engagement_rate: float) -> Decimal:
    """Return the multiplier for an engagement rate given in percent."""
    for upper_bound, multiplier in ENGAGEMENT_BRACKETS:
        if engagement_rate < upper_bound:
            return multiplier
    return TOP_ENGAGEMENT_MULTIPLIER


# ---------------------------------------------------------------------------
# Niche
# ---------------------------------------------------------------------------

NICHE_PREMIUMS: Mapping[str, Decimal] = MappingProxyType(
    {
        "finance": Decimal("2.0"),
        "investing": Decimal("2.0"),
        "b2b": Decimal("1.8"),
        "business": Decimal("1.8"),
        "tech": Decimal("1.7"),
        "software": Decimal("1.7"),
        "technology": Decimal("1.7"),
        "legal": Decimal("1.7"),
        "medical": Decimal("1.7"),
        "healthcare": Decimal("1.7"),
        "luxury": Decimal("1.5"),
        "high-end fashion": Decimal("1.5"),
        "beauty": Decimal("1.3"),
        "skincare": Decimal("1.3"),
        "cosmetics": Decimal("1.3"),
        "fitness": Decimal("1.2"),
        "wellness": Decimal("1.2"),
        "health": Decimal("1.2"),
        "food": Decimal("1.15"),
        "cooking": Decimal("1.15"),
        "recipes": Decimal("1.15"),
        "travel": Decimal("1.15"),
        "parenting": Decimal("1.1"),
        "family": Decimal("1.1"),
        "motherhood": Decimal("1.1"),
        "lifestyle": Decimal("1.0"),
        "entertainment": Decimal("1.0"),
        "comedy": Decimal("1.0"),
        "music": Decimal("1.0"),
        "gaming": Decimal("0.95"),
        "esports": Decimal("0.95"),
    }
)

DEFAULT_NICHE_PREMIUM = Decimal("1.0")

NICHE_CATEGORIES: Mapping[str, str] = MappingProxyType(
    {
        "finance": "Finance/Investing",
        "investing": "Finance/Investing",
        "b2b": "B2B/Business",
        "business": "B2B/Business",
        "tech": "Tech/Software",
        "software": "Tech/Software",
        "technology": "Tech/Software",
        "legal": "Legal/Medical",
        "medical": "Legal/Medical",
        "healthcare": "Legal/Medical",
        "luxury": "Luxury/High-end Fashion",
        "high-end fashion": "Luxury/High-end Fashion",
        "beauty": "Beauty/Skincare",
        "skincare": "Beauty/Skincare",
        "cosmetics": "Beauty/Skincare",
        "fitness": "Fitness/Wellness",
        "wellness": "Fitness/Wellness",
        "health": "Fitness/Wellness",
        "food": "Food/Cooking",
        "cooking": "Food/Cooking",
        "recipes": "Food/Cooking",
        "travel": "Travel",
        "parenting": "Parenting/Family",
        "family": "Parenting/Family",
        "motherhood": "Parenting/Family",
        "lifestyle": "Lifestyle",
        "entertainment": "Entertainment/Comedy",
        "comedy": "Entertainment/Comedy",
        "music": "Entertainment/Comedy",
        "gaming": "Gaming",
        "esports": "Gaming",
    }
)


def get_niche_premium(niche: str) -> Decimal:
    """Return the niche multiplier (case-insensitive exact match, default 1.0)."""
    return NICHE_PREMIUMS.get(normalize_key(niche), DEFAULT_NICHE_PREMIUM)


def get_niche_category(niche: str) -> str:
    """Return the display category for a niche, or "Other" when unmatched."""
    return NICHE_CATEGORIES.get(normalize_key(niche), "Other")


# ---------------------------------------------------------------------------
# Content format and complexity
# ---------------------------------------------------------------------------

FORMAT_PREMIUMS: Mapping[str, Decimal] = MappingProxyType(
    {
        ContentFormat.STATIC: Decimal("0"),
        ContentFormat.CAROUSEL: Decimal("0.15"),
        ContentFormat.STORY: Decimal("-0.15"),
        ContentFormat.REEL: Decimal("0.25"),
        ContentFormat.VIDEO: Decimal("0.35"),
        ContentFormat.LIVE: Decimal("0.40"),
    }
)

COMPLEXITY_PREMIUMS: Mapping[ComplexityLevel, Decimal] = MappingProxyType(
    {
        ComplexityLevel.SIMPLE: Decimal("0"),
        ComplexityLevel.STANDARD: Decimal("0.15"),
        ComplexityLevel.COMPLEX: Decimal("0.3"),
        ComplexityLevel.PRODUCTION: Decimal("0.5"),
    }
)

FORMAT_COMPLEXITY: Mapping[str, ComplexityLevel] = MappingProxyType(
    {
        ContentFormat.STATIC: ComplexityLevel.SIMPLE,
        ContentFormat.STORY: ComplexityLevel.SIMPLE,
        ContentFormat.CAROUSEL: ComplexityLevel.STANDARD,
        ContentFormat.REEL: ComplexityLevel.STANDARD,
        ContentFormat.VIDEO: ComplexityLevel.PRODUCTION,
        ContentFormat.LIVE: ComplexityLevel.COMPLEX,
    }
)

UGC_FORMAT_COMPLEXITY: Mapping[UGCFormat, ComplexityLevel] = MappingProxyType(
    {
        UGCFormat.PHOTO: ComplexityLevel.SIMPLE,
        UGCFormat.VIDEO: ComplexityLevel.STANDARD,
    }
)


def get_format_premium(content_format: str) -> Decimal:
    """Return the additive premium for a content format (unknown formats add 0)."""
    return FORMAT_PREMIUMS.get(normalize_key(content_format), Decimal("0"))


def get_complexity_level(content_format: str) -> ComplexityLevel:
    """Map a sponsored content format to its production complexity."""
    return FORMAT_COMPLEXITY.get(
        normalize_key(content_format), ComplexityLevel.SIMPLE
    )


def get_ugc_complexity_level(ugc_format: str | None) -> ComplexityLevel:
    """Map a UGC format to its production complexity."""
    return UGC_FORMAT_COMPLEXITY[resolve_ugc_format(ugc_format)]


def get_complexity_premium(level: ComplexityLevel) -> Decimal:
    """Return the additive premium for a complexity level."""
    return COMPLEXITY_PREMIUMS[level]


# ---------------------------------------------------------------------------
# Usage rights and whitelisting
# ---------------------------------------------------------------------------

# (inclusive upper bound in days, premium); first match wins
DURATION_TIERS: tuple[tuple[int, Decimal], ...] = (
    (0, Decimal("0")),
    (30, Decimal("0.25")),
    (60, Decimal("0.35")),
    (90, Decimal("0.45")),
    (180, Decimal("0.6")),
    (365, Decimal("0.8")),
)
PERPETUAL_USAGE_PREMIUM = Decimal("1.0")

EXCLUSIVITY_PREMIUMS: Mapping[str, Decimal] = MappingProxyType(
    {
        ExclusivityLevel.NONE: Decimal("0"),
        ExclusivityLevel.CATEGORY: Decimal("0.3"),
        ExclusivityLevel.FULL: Decimal("0.5"),
    }
)

WHITELISTING_PREMIUMS: Mapping[WhitelistingType, Decimal] = MappingProxyType(
    {
        WhitelistingType.NONE: Decimal("0"),
        WhitelistingType.ORGANIC: Decimal("0.5"),
        WhitelistingType.PAID_SOCIAL: Decimal("1.0"),
        WhitelistingType.FULL_MEDIA: Decimal("2.0"),
    }
)

WHITELISTING_DISPLAY_NAMES: Mapping[WhitelistingType, str] = MappingProxyType(
    {
        WhitelistingType.NONE: "No whitelisting",
        WhitelistingType.ORGANIC: "Organic reposts only",
        WhitelistingType.PAID_SOCIAL: "Paid social ads",
        WhitelistingType.FULL_MEDIA: "Full media buy (TV, OOH, digital)",
    }
)


def get_duration_premium(duration_days: int) -> Decimal:
    """Return the usage-rights premium for a licensing duration in days."""
    for max_days, premium in DURATION_TIERS:
        if duration_days <= max_days:
            return premium
    return PERPETUAL_USAGE_PREMIUM


def get_exclusivity_premium(exclusivity: str) -> Decimal:
    """Return the exclusivity premium (unknown levels add 0)."""
    return EXCLUSIVITY_PREMIUMS.get(normalize_key(exclusivity), Decimal("0"))


def resolve_whitelisting_type(value: str | None) -> WhitelistingType:
    """Resolve a whitelisting key; missing or unknown values mean none."""
    if not value:
        return WhitelistingType.NONE
    key = normalize_key(value)
    if key in WhitelistingType._value2member_map_:
        return WhitelistingType(key)
    return WhitelistingType.NONE


def get_whitelisting_premium(whitelisting_type: str | None) -> Decimal:
    """Return the whitelisting premium (missing or unknown types add 0)."""
    return WHITELISTING_PREMIUMS[resolve_whitelisting_type(whitelisting_type)]


def get_whitelisting_display_name(whitelisting_type: str | None) -> str:
    """Human-readable whitelisting description."""
    return WHITELISTING_DISPLAY_NAMES[resolve_whitelisting_type(whitelisting_type)]


# ---------------------------------------------------------------------------
# Seasonal
# ---------------------------------------------------------------------------

SEASONAL_PREMIUMS: Mapping[SeasonalPeriod, Decimal] = MappingProxyType(
    {
        SeasonalPeriod.Q4_HOLIDAY: Decimal("0.25"),
        SeasonalPeriod.BACK_TO_SCHOOL: Decimal("0.15"),
        SeasonalPeriod.VALENTINES: Decimal("0.10"),
        SeasonalPeriod.SUMMER: Decimal("0.05"),
        SeasonalPeriod.DEFAULT: Decimal("0"),
    }
)

SEASONAL_DISPLAY_NAMES: Mapping[SeasonalPeriod, str] = MappingProxyType(
    {
        SeasonalPeriod.Q4_HOLIDAY: "Q4 Holiday Season (Nov-Dec)",
        SeasonalPeriod.BACK_TO_SCHOOL: "Back to School (Aug-Sep)",
        SeasonalPeriod.VALENTINES: "Valentine's Day (Feb)",
        SeasonalPeriod.SUMMER: "Summer Season (Jun-Aug)",
        SeasonalPeriod.DEFAULT: "Standard Period",
    }
)


# ---------------------------------------------------------------------------
# Affiliate commission
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AffiliateRateRange:
    """Typical commission rates for a product category, in percent."""

    min: Decimal
    max: Decimal
    default: Decimal
    display_name: str


AFFILIATE_COMMISSION_RATES: Mapping[str, AffiliateRateRange] = MappingProxyType(
    {
        AffiliateCategory.FASHION_APPAREL: AffiliateRateRange(
            Decimal("10"), Decimal("20"), Decimal("15"), "Fashion/Apparel"
        ),
        AffiliateCategory.BEAUTY_SKINCARE: AffiliateRateRange(
            Decimal("15"), Decimal("25"), Decimal("20"), "Beauty/Skincare"
        ),
        AffiliateCategory.TECH_ELECTRONICS: AffiliateRateRange(
            Decimal("5"), Decimal("10"), Decimal("7"), "Tech/Electronics"
        ),
        AffiliateCategory.HOME_LIFESTYLE: AffiliateRateRange(
            Decimal("8"), Decimal("15"), Decimal("12"), "Home/Lifestyle"
        ),
        AffiliateCategory.FOOD_BEVERAGE: AffiliateRateRange(
            Decimal("10"), Decimal("15"), Decimal("12"), "Food/Beverage"
        ),
        AffiliateCategory.HEALTH_SUPPLEMENTS: AffiliateRateRange(
            Decimal("15"), Decimal("30"), Decimal("22"), "Health/Supplements"
        ),
        AffiliateCategory.DIGITAL_PRODUCTS: AffiliateRateRange(
            Decimal("20"), Decimal("40"), Decimal("30"), "Digital Products/Courses"
        ),
        AffiliateCategory.SERVICES_SUBSCRIPTIONS: AffiliateRateRange(
            Decimal("15"), Decimal("25"), Decimal("20"), "Services/Subscriptions"
        ),
        AffiliateCategory.OTHER: AffiliateRateRange(
            Decimal("10"), Decimal("15"), Decimal("12"), "Other"
        ),
    }
)


def get_affiliate_category_rates(category: str | None) -> AffiliateRateRange:
    """Return the commission range for a product category (unknown means other)."""
    if not category:
        return AFFILIATE_COMMISSION_RATES[AffiliateCategory.OTHER]
    return AFFILIATE_COMMISSION_RATES.get(
        normalize_key(category), AFFILIATE_COMMISSION_RATES[AffiliateCategory.OTHER]
    )


# ---------------------------------------------------------------------------
# Retainer and ambassador
# ---------------------------------------------------------------------------

VOLUME_DISCOUNTS: Mapping[DealLength, Decimal] = MappingProxyType(
    {
        DealLength.ONE_TIME: Decimal("0"),
        DealLength.MONTHLY: Decimal("0"),
        DealLength.THREE_MONTH: Decimal("0.15"),
        DealLength.SIX_MONTH: Decimal("0.25"),
        DealLength.TWELVE_MONTH: Decimal("0.35"),
    }
)

CONTRACT_MONTHS: Mapping[DealLength, int] = MappingProxyType(
    {
        DealLength.ONE_TIME: 1,
        DealLength.MONTHLY: 1,
        DealLength.THREE_MONTH: 3,
        DealLength.SIX_MONTH: 6,
        DealLength.TWELVE_MONTH: 12,
    }
)

# Applied to the per-deliverable base rate to price each content type
DELIVERABLE_FORMAT_MULTIPLIERS: Mapping[str, Decimal] = MappingProxyType(
    {
        "posts": Decimal("1.0"),
        "stories": Decimal("0.3"),
        "reels": Decimal("1.25"),
        "videos": Decimal("1.5"),
    }
)

AMBASSADOR_EXCLUSIVITY_PREMIUMS: Mapping[str, Decimal] = MappingProxyType(
    {
        ExclusivityLevel.NONE: Decimal("0"),
        ExclusivityLevel.CATEGORY: Decimal("0.5"),
        ExclusivityLevel.FULL: Decimal("1.0"),
    }
)

EVENT_DAY_RATES: Mapping[str, Decimal] = MappingProxyType(
    {
        CreatorTier.NANO: Decimal("500"),
        CreatorTier.MICRO: Decimal("750"),
        CreatorTier.MID: Decimal("1000"),
        CreatorTier.RISING: Decimal("1250"),
        CreatorTier.MACRO: Decimal("1500"),
        CreatorTier.MEGA: Decimal("1750"),
        CreatorTier.CELEBRITY: Decimal("2000"),
    }
)


def get_volume_discount(deal_length: DealLength) -> Decimal:
    """Return the volume discount fraction for a contract length."""
    return VOLUME_DISCOUNTS.get(deal_length, Decimal("0"))


def get_contract_months(deal_length: DealLength) -> int:
    """Return the number of billed months for a contract length."""
    return CONTRACT_MONTHS.get(deal_length, 1)


def get_event_day_rate(tier: str) -> Decimal:
    """Return the default event appearance day rate for a tier (unknown means micro)."""
    return EVENT_DAY_RATES.get(tier, EVENT_DAY_RATES[CreatorTier.MICRO])


def get_ambassador_exclusivity_premium(exclusivity: str) -> Decimal:
    """Return the ambassador exclusivity multiplier (unknown levels add 0)."""
    return AMBASSADOR_EXCLUSIVITY_PREMIUMS.get(
        normalize_key(exclusivity), Decimal("0")
    )


# ---------------------------------------------------------------------------
# Currency
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Currency:
    """A supported quote currency."""

    code: str
    symbol: str


CURRENCIES: tuple[Currency, ...] = (
    Currency("USD", "$"),
    Currency("GBP", "£"),
    Currency("EUR", "€"),
    Currency("CAD", "C$"),
    Currency("AUD", "A$"),
    Currency("BRL", "R$"),
    Currency("INR", "₹"),
    Currency("MXN", "MX$"),
)


def resolve_currency(code: str | None) -> Currency:
    """Find a currency by code, falling back to the first table entry (USD)."""
    if code:
        wanted = code.strip().upper()
        for currency in CURRENCIES:
            if currency.code == wanted:
                return currency
    return CURRENCIES[0]
