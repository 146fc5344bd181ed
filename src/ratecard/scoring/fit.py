"""Legacy creator-brand fit score.

Five weighted components, each scored 0-100:

- niche match (30%): creator niches vs. the brand industry
- demographic match (25%): audience age, gender and location vs. the target
- platform match (20%): presence on the requested platform
- engagement quality (15%): engagement rate vs. the tier benchmark
- content capability (10%): ability to produce the requested format
"""

import re
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal
from types import MappingProxyType

from ratecard.domain.models import CreatorProfile, ParsedBrief
from ratecard.domain.types import ContentFormat, CreatorTier, FitLevel
from ratecard.scoring.industries import matching_niches, normalize, related_niches
from ratecard.scoring.models import (
    FIT_ADJUSTMENTS,
    FitScoreBreakdown,
    FitScoreComponent,
    FitScoreResult,
)

NICHE_WEIGHT = Decimal("0.30")
DEMOGRAPHIC_WEIGHT = Decimal("0.25")
PLATFORM_WEIGHT = Decimal("0.20")
ENGAGEMENT_WEIGHT = Decimal("0.15")
CONTENT_WEIGHT = Decimal("0.10")

# "Good" engagement rate in percent for each tier
ENGAGEMENT_BENCHMARKS: Mapping[CreatorTier, float] = MappingProxyType(
    {
        CreatorTier.NANO: 5.0,
        CreatorTier.MICRO: 3.5,
        CreatorTier.MID: 2.5,
        CreatorTier.RISING: 2.0,
        CreatorTier.MACRO: 1.5,
        CreatorTier.MEGA: 1.2,
        CreatorTier.CELEBRITY: 1.0,
    }
)

# Minimum total score for each level, highest first
FIT_LEVEL_THRESHOLDS: tuple[tuple[int, FitLevel], ...] = (
    (85, FitLevel.PERFECT),
    (65, FitLevel.HIGH),
    (40, FitLevel.MEDIUM),
)

VIDEO_FORMATS = frozenset(
    {ContentFormat.REEL, ContentFormat.VIDEO, ContentFormat.LIVE, ContentFormat.STORY}
)

# Target audience patterns mapped to the audience age ranges they imply
AGE_PATTERNS: tuple[tuple[re.Pattern[str], tuple[str, ...]], ...] = (
    (re.compile(r"18-24|gen.?z|young|college|teen", re.IGNORECASE), ("18-24",)),
    (re.compile(r"25-34|millennial|young.?adult", re.IGNORECASE), ("25-34",)),
    (re.compile(r"35-44|adult|parent", re.IGNORECASE), ("35-44",)),
    (re.compile(r"45\+|older|mature|senior", re.IGNORECASE), ("45-54", "55+")),
)
FEMALE_TARGET = re.compile(r"women|female|her|she", re.IGNORECASE)
MALE_TARGET = re.compile(r"men|male|him|he\b", re.IGNORECASE)
US_LOCATION = re.compile(r"us|united.?states|america", re.IGNORECASE)


def clamp_score(value: Decimal | int) -> int:
    """Round half-up and clamp to the 0-100 range."""
    rounded = int(Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    return max(0, min(100, rounded))


def fit_level_for(score: int) -> FitLevel:
    """Map a 0-100 total score to its fit level."""
    for minimum, level in FIT_LEVEL_THRESHOLDS:
        if score >= minimum:
            return level
    return FitLevel.LOW


def score_niche_match(profile: CreatorProfile, brief: ParsedBrief) -> FitScoreComponent:
    industry = brief.brand.industry
    if not related_niches(industry):
        return FitScoreComponent(
            score=50,
            weight=NICHE_WEIGHT,
            insight=(
                f'Industry "{industry}" not in our database. '
                "Consider if your content aligns."
            ),
        )

    matches = matching_niches(profile.niches, industry)
    if len(matches) >= 2:
        score = 100
        insight = (
            f"Excellent niche alignment! Your {', '.join(matches)} content "
            f"matches {industry} perfectly."
        )
    elif len(matches) == 1:
        score = 75
        insight = f"Good niche match through your {matches[0]} content for this {industry} brand."
    else:
        score = 20
        insight = (
            f"Low niche alignment with {industry}. "
            "This may affect partnership authenticity."
        )
    return FitScoreComponent(score=clamp_score(score), weight=NICHE_WEIGHT, insight=insight)


def score_demographic_match(profile: CreatorProfile, brief: ParsedBrief) -> FitScoreComponent:
    target = normalize(brief.campaign.target_audience)
    audience = profile.audience
    score = 50
    factors: list[str] = []

    for pattern, ranges in AGE_PATTERNS:
        if pattern.search(target):
            if audience.age_range in ranges:
                score += 20
                factors.append("age range")
            break

    split = audience.gender_split
    if FEMALE_TARGET.search(target):
        if split.female >= 60:
            score += 15
            factors.append("female-skewing audience")
        elif split.female >= 40:
            score += 5
    elif MALE_TARGET.search(target):
        if split.male >= 60:
            score += 15
            factors.append("male-skewing audience")
        elif split.male >= 40:
            score += 5
    elif abs(split.male - split.female) < 20:
        score += 10
        factors.append("balanced audience")

    if US_LOCATION.search(target) and any(
        US_LOCATION.search(location) for location in audience.top_locations
    ):
        score += 10
        factors.append("US audience")

    score = clamp_score(score)

    if len(factors) >= 2:
        insight = f"Strong demographic alignment: {', '.join(factors)}."
    elif len(factors) == 1:
        insight = f"Good demographic match on {factors[0]}."
    elif score >= 50:
        insight = "Demographics appear compatible with target audience."
    else:
        insight = f'Limited demographic overlap with "{brief.campaign.target_audience}".'

    return FitScoreComponent(score=score, weight=DEMOGRAPHIC_WEIGHT, insight=insight)


def score_platform_match(profile: CreatorProfile, brief: ParsedBrief) -> FitScoreComponent:
    platform = brief.content.platform
    metrics = profile.metrics_for(normalize(platform))
    if metrics is None:
        return FitScoreComponent(
            score=10,
            weight=PLATFORM_WEIGHT,
            insight=(
                f"You don't have {platform} metrics. "
                "Consider adding this platform to your profile."
            ),
        )

    score = 50
    if metrics.followers >= 10_000:
        score += 20
    elif metrics.followers >= 5_000:
        score += 10

    if metrics.engagement_rate >= 3:
        score += 20
    elif metrics.engagement_rate >= 2:
        score += 10

    # Bonus when the requested platform is the creator's largest
    largest = max(m.followers for m in profile.platform_metrics())
    if metrics.followers == largest:
        score += 10

    score = clamp_score(score)

    if score >= 90:
        insight = (
            f"Excellent {platform} presence with {metrics.followers:,} followers "
            f"and {metrics.engagement_rate:g}% engagement."
        )
    elif score >= 70:
        insight = f"Strong {platform} presence. This is a good platform match."
    elif score >= 50:
        insight = (
            f"You have {platform} presence. "
            "Consider if your audience there matches the brand."
        )
    else:
        insight = f"Limited {platform} presence. Growing this platform could improve fit."

    return FitScoreComponent(score=score, weight=PLATFORM_WEIGHT, insight=insight)


def score_engagement_quality(profile: CreatorProfile) -> FitScoreComponent:
    rate = profile.avg_engagement_rate
    tier = profile.tier
    benchmark = ENGAGEMENT_BENCHMARKS[tier]
    ratio = rate / benchmark

    if ratio >= 1.5:
        score = 100
        insight = f"Exceptional engagement ({rate:.1f}%) - 50%+ above {tier} tier average."
    elif ratio >= 1.2:
        score = 85
        insight = (
            f"Strong engagement ({rate:.1f}%) - above {tier} tier benchmark of {benchmark:g}%."
        )
    elif ratio >= 1.0:
        score = 70
        insight = f"Good engagement ({rate:.1f}%) - meeting {tier} tier standards."
    elif ratio >= 0.7:
        score = 50
        insight = (
            f"Engagement ({rate:.1f}%) is slightly below {tier} tier "
            f"benchmark of {benchmark:g}%."
        )
    else:
        score = 30
        insight = (
            f"Engagement ({rate:.1f}%) is below {tier} tier average. "
            "Focus on audience engagement."
        )

    return FitScoreComponent(score=clamp_score(score), weight=ENGAGEMENT_WEIGHT, insight=insight)


def score_content_capability(profile: CreatorProfile, brief: ParsedBrief) -> FitScoreComponent:
    content_format = normalize(brief.content.format)
    metrics = profile.metrics_for(normalize(brief.content.platform))

    if content_format in VIDEO_FORMATS:
        if metrics is not None and metrics.avg_views > 0:
            if metrics.avg_views >= 10_000:
                score = 100
                insight = (
                    f"Strong video performance with {metrics.avg_views:,} average views. "
                    f"Perfect for {content_format} content."
                )
            else:
                score = 85
                insight = f"You have video experience with {metrics.avg_views:,} average views."
        else:
            score = 50
            insight = (
                "Video content requested but no view metrics available. "
                "Add video stats to strengthen your profile."
            )
    else:
        score = 80
        insight = (
            f"{content_format[:1].upper() + content_format[1:]} format is "
            "well-suited to your content style."
        )

    if content_format == ContentFormat.LIVE:
        score = min(score, 70)
        comfort = (
            "Your metrics suggest you can handle this."
            if metrics is not None
            else "Consider your comfort with live streaming."
        )
        insight = f"Live content requires real-time engagement. {comfort}"

    return FitScoreComponent(score=clamp_score(score), weight=CONTENT_WEIGHT, insight=insight)


def _summary_insight(level: FitLevel, brand_name: str) -> str:
    if level == FitLevel.PERFECT:
        return f"Excellent match! Your profile aligns strongly with {brand_name}'s campaign."
    if level == FitLevel.HIGH:
        return f"Strong fit with {brand_name}. Minor optimizations could boost your rate."
    if level == FitLevel.MEDIUM:
        return "Moderate fit. Review the breakdown below to improve alignment."
    return "Consider if this campaign aligns with your brand and audience."


def calculate_fit_score(profile: CreatorProfile, brief: ParsedBrief) -> FitScoreResult:
    """Score how well a creator fits a brand's campaign.

    Args:
        profile: The creator's profile.
        brief: The parsed brand brief.

    Returns:
        The weighted total (0-100), its fit level and price adjustment, the
        component breakdown, and up to five insights: a summary followed by
        the three lowest-scoring components' insights.
    """
    breakdown = FitScoreBreakdown(
        niche_match=score_niche_match(profile, brief),
        demographic_match=score_demographic_match(profile, brief),
        platform_match=score_platform_match(profile, brief),
        engagement_quality=score_engagement_quality(profile),
        content_capability=score_content_capability(profile, brief),
    )

    total_score = clamp_score(sum(c.score * c.weight for c in breakdown.components()))
    level = fit_level_for(total_score)

    weakest = sorted(breakdown.components(), key=lambda c: c.score)[:3]
    insights = [_summary_insight(level, brief.brand.name), *(c.insight for c in weakest)]

    return FitScoreResult(
        total_score=total_score,
        fit_level=level,
        price_adjustment=FIT_ADJUSTMENTS[level],
        breakdown=breakdown,
        insights=tuple(insights[:5]),
    )
