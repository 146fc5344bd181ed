"""Domain enumerations for the rate card pricing engine."""

from enum import StrEnum


class CreatorTier(StrEnum):
    """Creator size bucket derived from total follower count."""

    NANO = "nano"
    MICRO = "micro"
    MID = "mid"
    RISING = "rising"
    MACRO = "macro"
    MEGA = "mega"
    CELEBRITY = "celebrity"


class Platform(StrEnum):
    """Social platforms with a known pricing multiplier."""

    INSTAGRAM = "instagram"
    TIKTOK = "tiktok"
    YOUTUBE = "youtube"
    YOUTUBE_SHORTS = "youtube_shorts"
    TWITTER = "twitter"
    THREADS = "threads"
    PINTEREST = "pinterest"
    LINKEDIN = "linkedin"
    BLUESKY = "bluesky"
    LEMON8 = "lemon8"
    SNAPCHAT = "snapchat"
    TWITCH = "twitch"


class Region(StrEnum):
    """Creator's primary market for regional rate adjustments."""

    UNITED_STATES = "united_states"
    UNITED_KINGDOM = "united_kingdom"
    CANADA = "canada"
    AUSTRALIA = "australia"
    WESTERN_EUROPE = "western_europe"
    UAE_GULF = "uae_gulf"
    SINGAPORE_HK = "singapore_hk"
    JAPAN = "japan"
    SOUTH_KOREA = "south_korea"
    BRAZIL = "brazil"
    MEXICO = "mexico"
    INDIA = "india"
    SOUTHEAST_ASIA = "southeast_asia"
    EASTERN_EUROPE = "eastern_europe"
    AFRICA = "africa"
    OTHER = "other"


class ContentFormat(StrEnum):
    """Sponsored content deliverable formats."""

    STATIC = "static"
    CAROUSEL = "carousel"
    STORY = "story"
    REEL = "reel"
    VIDEO = "video"
    LIVE = "live"


class UGCFormat(StrEnum):
    """User-generated content formats, priced as a production service."""

    VIDEO = "video"
    PHOTO = "photo"


class ComplexityLevel(StrEnum):
    """Production complexity of a deliverable."""

    SIMPLE = "simple"
    STANDARD = "standard"
    COMPLEX = "complex"
    PRODUCTION = "production"


class ExclusivityLevel(StrEnum):
    """Competitive restrictions attached to usage rights."""

    NONE = "none"
    CATEGORY = "category"
    FULL = "full"


class WhitelistingType(StrEnum):
    """How the brand may reuse creator content in its own channels."""

    NONE = "none"
    ORGANIC = "organic"
    PAID_SOCIAL = "paid_social"
    FULL_MEDIA = "full_media"


class DealType(StrEnum):
    """Audience-based sponsorship or deliverable-based UGC."""

    SPONSORED = "sponsored"
    UGC = "ugc"


class PricingModel(StrEnum):
    """Compensation structure declared by the brief."""

    FLAT_FEE = "flat_fee"
    AFFILIATE = "affiliate"
    HYBRID = "hybrid"
    PERFORMANCE = "performance"


class DealLength(StrEnum):
    """Retainer contract length."""

    ONE_TIME = "one_time"
    MONTHLY = "monthly"
    THREE_MONTH = "3_month"
    SIX_MONTH = "6_month"
    TWELVE_MONTH = "12_month"


class AffiliateCategory(StrEnum):
    """Product categories with known commission rate ranges."""

    FASHION_APPAREL = "fashion_apparel"
    BEAUTY_SKINCARE = "beauty_skincare"
    TECH_ELECTRONICS = "tech_electronics"
    HOME_LIFESTYLE = "home_lifestyle"
    FOOD_BEVERAGE = "food_beverage"
    HEALTH_SUPPLEMENTS = "health_supplements"
    DIGITAL_PRODUCTS = "digital_products"
    SERVICES_SUBSCRIPTIONS = "services_subscriptions"
    OTHER = "other"


class BonusMetric(StrEnum):
    """Metric a performance bonus threshold is measured in."""

    CLICKS = "clicks"
    SALES = "sales"
    CONVERSIONS = "conversions"
    VIEWS = "views"


class SeasonalPeriod(StrEnum):
    """Named demand periods used for seasonal pricing."""

    Q4_HOLIDAY = "q4_holiday"
    BACK_TO_SCHOOL = "back_to_school"
    VALENTINES = "valentines"
    SUMMER = "summer"
    DEFAULT = "default"


class FitLevel(StrEnum):
    """Legacy creator-brand fit level."""

    PERFECT = "perfect"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class DealQualityLevel(StrEnum):
    """Creator-centric deal quality level."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    CAUTION = "caution"


class DealRecommendation(StrEnum):
    """Recommendation attached to a deal quality score."""

    TAKE_DEAL = "take_deal"
    GOOD_DEAL = "good_deal"
    NEGOTIATE = "negotiate"
    DECLINE = "decline"
    ASK_QUESTIONS = "ask_questions"


class PaymentTerms(StrEnum):
    """Brand payment terms."""

    UPFRONT = "upfront"
    NET_15 = "net_15"
    NET_30 = "net_30"
    NET_60 = "net_60"
    NET_90 = "net_90"
    UNKNOWN = "unknown"


class ApprovalProcess(StrEnum):
    """Complexity of the brand's content approval process."""

    SIMPLE = "simple"
    MODERATE = "moderate"
    COMPLEX = "complex"


class BrandTier(StrEnum):
    """Brand reputation tier."""

    MAJOR = "major"
    ESTABLISHED = "established"
    EMERGING = "emerging"
    UNKNOWN = "unknown"


# Lower follower bound for each tier, highest first
TIER_THRESHOLDS: tuple[tuple[int, CreatorTier], ...] = (
    (1_000_000, CreatorTier.CELEBRITY),
    (500_000, CreatorTier.MEGA),
    (250_000, CreatorTier.MACRO),
    (100_000, CreatorTier.RISING),
    (50_000, CreatorTier.MID),
    (10_000, CreatorTier.MICRO),
)


def calculate_tier(followers: int) -> CreatorTier:
    """Classify a creator by total follower count.

    Bounds are checked highest first, so an exact boundary value belongs to
    the larger tier (10,000 followers is micro, not nano).

    Args:
        followers: Total followers across all platforms.

    Returns:
        The creator tier. Anything below 10,000 (including zero or negative
        counts) is nano.
    """
    for minimum, tier in TIER_THRESHOLDS:
        if followers >= minimum:
            return tier
    return CreatorTier.NANO
