"""Deal quality score: how good a deal is for the creator.

Six dimensions totalling 100 points:

=================  ======
Dimension          Points
=================  ======
Rate fairness      25
Brand legitimacy   20
Portfolio value    20
Growth potential   15
Terms fairness     10
Creative freedom   10
=================  ======

Levels: 85+ excellent (take the deal), 70+ good, 50+ fair (negotiate),
otherwise caution (consider declining).
"""

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from types import MappingProxyType

from ratecard.domain.models import CreatorProfile, ParsedBrief
from ratecard.domain.types import (
    ApprovalProcess,
    BrandTier,
    CreatorTier,
    DealLength,
    DealQualityLevel,
    DealRecommendation,
    ExclusivityLevel,
    PaymentTerms,
)
from ratecard.scoring.industries import matching_niches, normalize
from ratecard.scoring.models import (
    FIT_ADJUSTMENTS,
    QUALITY_TO_FIT_LEVEL,
    DealQualityBreakdown,
    DealQualityComponent,
    DealQualityInput,
    DealQualityResult,
    FitScoreBreakdown,
    FitScoreComponent,
    FitScoreResult,
)

RATE_FAIRNESS_POINTS = 25
BRAND_LEGITIMACY_POINTS = 20
PORTFOLIO_VALUE_POINTS = 20
GROWTH_POTENTIAL_POINTS = 15
TERMS_FAIRNESS_POINTS = 10
CREATIVE_FREEDOM_POINTS = 10

# Market rate per deliverable by tier (USD)
MARKET_RATE_BENCHMARKS: Mapping[CreatorTier, Decimal] = MappingProxyType(
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

HIGH_PRESTIGE_INDUSTRIES = frozenset(
    {"luxury", "fashion", "beauty", "technology", "finance", "automotive"}
)


@dataclass(frozen=True)
class QualityLevelInfo:
    """Level, price adjustment and recommendation for a score band."""

    min_score: int
    level: DealQualityLevel
    recommendation: DealRecommendation
    recommendation_text: str

    @property
    def adjustment(self) -> Decimal:
        return FIT_ADJUSTMENTS[QUALITY_TO_FIT_LEVEL[self.level]]


QUALITY_LEVELS: tuple[QualityLevelInfo, ...] = (
    QualityLevelInfo(
        85,
        DealQualityLevel.EXCELLENT,
        DealRecommendation.TAKE_DEAL,
        "Excellent opportunity! This deal is worth pursuing.",
    ),
    QualityLevelInfo(
        70,
        DealQualityLevel.GOOD,
        DealRecommendation.GOOD_DEAL,
        "Good deal. Consider accepting with minor negotiations.",
    ),
    QualityLevelInfo(
        50,
        DealQualityLevel.FAIR,
        DealRecommendation.NEGOTIATE,
        "Fair deal. Negotiate for better terms before accepting.",
    ),
    QualityLevelInfo(
        0,
        DealQualityLevel.CAUTION,
        DealRecommendation.DECLINE,
        "Proceed with caution. Consider declining or major renegotiation.",
    ),
)


def _round(value: Decimal | float) -> int:
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _clamp(value: int, maximum: int) -> int:
    return max(0, min(maximum, value))


def quality_level_for(score: int) -> QualityLevelInfo:
    """Return the quality band for a 0-100 total score."""
    for info in QUALITY_LEVELS:
        if score >= info.min_score:
            return info
    return QUALITY_LEVELS[-1]


def _component(
    name: str, score: int, max_points: int, insight: str, tips: list[str]
) -> DealQualityComponent:
    return DealQualityComponent(
        name=name,
        score=_clamp(score, max_points),
        max_points=max_points,
        weight=Decimal(max_points) / 100,
        insight=insight,
        tips=tuple(tips),
    )


# ---------------------------------------------------------------------------
# Dimensions
# ---------------------------------------------------------------------------


def score_rate_fairness(
    profile: CreatorProfile, signals: DealQualityInput, calculated_rate: Decimal
) -> DealQualityComponent:
    """Compare the offered (or calculated) rate to the tier's market rate."""
    max_points = RATE_FAIRNESS_POINTS
    effective_rate = (
        signals.offered_rate if signals.offered_rate is not None else calculated_rate
    )
    ratio = effective_rate / MARKET_RATE_BENCHMARKS[profile.tier]
    tips: list[str] = []

    if ratio >= Decimal("1.2"):
        score = max_points
        insight = (
            f"Excellent! This rate is {_round((ratio - 1) * 100)}% above market "
            f"average for {profile.tier} creators."
        )
    elif ratio >= 1:
        score = _round(max_points * Decimal("0.85"))
        insight = "Good rate. This is at or slightly above the market average for your tier."
    elif ratio >= Decimal("0.8"):
        score = _round(max_points * Decimal("0.6"))
        insight = (
            f"Fair rate, but {_round((1 - ratio) * 100)}% below market average. "
            "Consider negotiating."
        )
        tips += [
            "Counter with your calculated market rate",
            "Highlight your engagement rate and audience quality",
        ]
    elif ratio >= Decimal("0.6"):
        score = _round(max_points * Decimal("0.35"))
        insight = (
            f"Below market rate by {_round((1 - ratio) * 100)}%. "
            "Significant negotiation needed."
        )
        tips += [
            "This rate undervalues your work significantly",
            "Request at least market rate or decline",
        ]
    else:
        score = _round(max_points * Decimal("0.1"))
        insight = (
            f"Warning: This rate is {_round((1 - ratio) * 100)}% below market value. "
            "Major red flag."
        )
        tips += [
            "This rate is exploitative - strongly consider declining",
            "If proceeding, require significant increases",
        ]

    return _component("Rate Fairness", score, max_points, insight, tips)


def score_brand_legitimacy(signals: DealQualityInput) -> DealQualityComponent:
    """Assess brand tier, website, social following and creator history."""
    max_points = BRAND_LEGITIMACY_POINTS
    score = 0
    factors: list[str] = []
    tips: list[str] = []

    if signals.brand_tier == BrandTier.MAJOR:
        score += 8
        factors.append("major brand")
    elif signals.brand_tier == BrandTier.ESTABLISHED:
        score += 6
        factors.append("established brand")
    elif signals.brand_tier == BrandTier.EMERGING:
        score += 3
        factors.append("emerging brand")
    else:
        score += 1
        tips.append("Research this brand before committing")

    if signals.brand_has_website is True:
        score += 4
        factors.append("has website")
    elif signals.brand_has_website is False:
        tips.append("No website - verify brand legitimacy")
    else:
        score += 2

    followers = signals.brand_followers
    if followers is None:
        score += 2
    elif followers >= 100_000:
        score += 4
        factors.append(f"{followers / 1000:.0f}K followers")
    elif followers >= 10_000:
        score += 3
        factors.append(f"{followers / 1000:.0f}K followers")
    elif followers >= 1_000:
        score += 2
    else:
        tips.append("Brand has very low social presence")

    if signals.brand_has_creator_history is True:
        score += 4
        factors.append("works with creators")
    elif signals.brand_has_creator_history is False:
        score += 1
        tips.append("Brand is new to creator partnerships")
    else:
        score += 2

    if score >= 16:
        insight = f"Legitimate brand: {', '.join(factors)}."
    elif score >= 10:
        positives = f"Positive signals: {', '.join(factors)}." if factors else ""
        insight = f"Brand appears legitimate. {positives}"
    elif score >= 5:
        insight = "Limited brand verification. Research before committing."
    else:
        insight = "Unverified brand. Proceed with significant caution."

    return _component("Brand Legitimacy", score, max_points, insight, tips)


def score_portfolio_value(
    profile: CreatorProfile, brief: ParsedBrief, signals: DealQualityInput
) -> DealQualityComponent:
    """Assess niche alignment, brand prestige and category leadership."""
    max_points = PORTFOLIO_VALUE_POINTS
    score = 0
    factors: list[str] = []
    tips: list[str] = []
    industry = normalize(brief.brand.industry)

    if matching_niches(profile.niches, brief.brand.industry):
        score += 8
        factors.append("niche alignment")
    else:
        score += 2
        tips.append("Consider if this fits your content style")

    if signals.brand_tier == BrandTier.MAJOR:
        score += 8
        factors.append("major brand prestige")
    elif signals.brand_tier == BrandTier.ESTABLISHED:
        score += 6
        factors.append("established brand")
    elif industry in HIGH_PRESTIGE_INDUSTRIES:
        score += 5
        factors.append(f"{industry} industry")
    elif signals.brand_tier == BrandTier.EMERGING:
        score += 3
    else:
        score += 2

    if signals.is_category_leader:
        score += 4
        factors.append("category leader")
    else:
        score += 2

    if score >= 16:
        insight = f"Excellent portfolio addition: {', '.join(factors)}."
    elif score >= 10:
        benefits = f"Benefits: {', '.join(factors)}." if factors else ""
        insight = f"Good for portfolio. {benefits}"
    elif score >= 5:
        insight = "Moderate portfolio value. May not be a standout piece."
    else:
        insight = "Limited portfolio value. Consider if this aligns with your brand."

    return _component("Portfolio Value", score, max_points, insight, tips)


def score_growth_potential(brief: ParsedBrief, signals: DealQualityInput) -> DealQualityComponent:
    """Assess ongoing partnership potential and contract length."""
    max_points = GROWTH_POTENTIAL_POINTS
    score = 0
    factors: list[str] = []
    tips: list[str] = []

    if signals.mentions_ongoing_partnership:
        score += 6
        factors.append("ongoing partnership potential")
    else:
        score += 2
        tips.append("Ask about long-term partnership opportunities")

    if signals.is_category_leader:
        score += 5
        factors.append("category leader opens doors")
    elif signals.brand_tier == BrandTier.MAJOR:
        score += 4
        factors.append("major brand credibility")
    elif signals.brand_tier == BrandTier.ESTABLISHED:
        score += 3
    else:
        score += 1

    if brief.retainer_config is not None:
        deal_length = brief.retainer_config.deal_length
        if deal_length == DealLength.TWELVE_MONTH:
            score += 4
            factors.append("12-month ambassador")
        elif deal_length == DealLength.SIX_MONTH:
            score += 3
            factors.append("6-month retainer")
        elif deal_length == DealLength.THREE_MONTH:
            score += 2
            factors.append("3-month retainer")
    else:
        score += 1

    if score >= 12:
        insight = f"High growth potential: {', '.join(factors)}."
    elif score >= 8:
        detail = f"{', '.join(factors)}." if factors else ""
        insight = f"Good growth opportunity. {detail}"
    elif score >= 4:
        insight = (
            "Limited but possible growth. Consider negotiating for future opportunities."
        )
    else:
        insight = "One-off deal with limited growth potential."

    return _component("Growth Potential", score, max_points, insight, tips)


def score_terms_fairness(brief: ParsedBrief, signals: DealQualityInput) -> DealQualityComponent:
    """Assess payment terms, usage duration and exclusivity."""
    max_points = TERMS_FAIRNESS_POINTS
    score = 0
    factors: list[str] = []
    tips: list[str] = []

    terms = signals.payment_terms
    if terms == PaymentTerms.UPFRONT:
        score += 4
        factors.append("upfront payment")
    elif terms == PaymentTerms.NET_15:
        score += 4
        factors.append("Net-15 payment")
    elif terms == PaymentTerms.NET_30:
        score += 3
        factors.append("Net-30 payment")
    elif terms == PaymentTerms.NET_60:
        score += 1
        tips.append("Net-60 is slow - request Net-30 or faster")
    elif terms == PaymentTerms.NET_90:
        tips.append("Net-90 is unreasonable - negotiate faster payment")
    else:
        score += 2
        tips.append("Clarify payment terms before signing")

    duration_days = brief.usage_rights.duration_days
    if duration_days == 0:
        score += 3
        factors.append("no extended usage")
    elif duration_days <= 90:
        score += 2
    elif duration_days <= 365:
        score += 1
        tips.append("Long usage rights - ensure compensation matches")
    else:
        tips.append("Perpetual usage requires significant premium")

    exclusivity = normalize(brief.usage_rights.exclusivity)
    if exclusivity == ExclusivityLevel.NONE:
        score += 3
        factors.append("no exclusivity")
    elif exclusivity == ExclusivityLevel.CATEGORY:
        score += 1
        tips.append("Category exclusivity limits your opportunities")
    elif exclusivity == ExclusivityLevel.FULL:
        tips.append("Full exclusivity is restrictive - ensure major compensation")

    if score >= 8:
        insight = f"Fair terms: {', '.join(factors)}."
    elif score >= 5:
        insight = "Acceptable terms with some concerns."
    else:
        insight = "Unfavorable terms. Negotiate before accepting."

    return _component("Terms Fairness", score, max_points, insight, tips)


def score_creative_freedom(signals: DealQualityInput) -> DealQualityComponent:
    """Assess script strictness, revision rounds and approval process."""
    max_points = CREATIVE_FREEDOM_POINTS
    score = 0
    factors: list[str] = []
    tips: list[str] = []

    if signals.has_strict_script is False:
        score += 4
        factors.append("loose creative guidelines")
    elif signals.has_strict_script is True:
        score += 1
        tips.append("Strict scripts limit your authentic voice")
    else:
        score += 2

    rounds = signals.revision_rounds
    if rounds is None:
        score += 2
        tips.append("Clarify revision limits before signing")
    elif rounds <= 1:
        score += 3
        factors.append("limited revisions")
    elif rounds <= 2:
        score += 2
    elif rounds <= 3:
        score += 1
        tips.append("3+ revision rounds is excessive")
    else:
        tips.append("Unlimited revisions is a red flag - cap at 2")

    if signals.approval_process == ApprovalProcess.SIMPLE:
        score += 3
        factors.append("simple approval")
    elif signals.approval_process == ApprovalProcess.MODERATE:
        score += 2
    elif signals.approval_process == ApprovalProcess.COMPLEX:
        tips.append("Complex approval processes slow you down")
    else:
        score += 1

    if score >= 8:
        insight = f"Good creative freedom: {', '.join(factors)}."
    elif score >= 5:
        insight = "Moderate creative freedom. Some brand oversight expected."
    else:
        insight = "Limited creative freedom. This may feel restrictive."

    return _component("Creative Freedom", score, max_points, insight, tips)


# ---------------------------------------------------------------------------
# Flags
# ---------------------------------------------------------------------------


def detect_red_flags(
    brief: ParsedBrief, signals: DealQualityInput, breakdown: DealQualityBreakdown
) -> list[str]:
    flags: list[str] = []
    usage = brief.usage_rights
    exclusivity = normalize(usage.exclusivity)

    if breakdown.rate_fairness.score < RATE_FAIRNESS_POINTS * Decimal("0.4"):
        flags.append("Rate significantly below market value")
    if breakdown.brand_legitimacy.score < BRAND_LEGITIMACY_POINTS * Decimal("0.3"):
        flags.append("Unverified or suspicious brand")
    if signals.payment_terms == PaymentTerms.NET_90:
        flags.append("Payment terms beyond Net-60")
    if usage.duration_days > 365 and exclusivity != ExclusivityLevel.NONE:
        flags.append("Perpetual usage with exclusivity")
    if signals.revision_rounds is not None and signals.revision_rounds > 3:
        flags.append("Unlimited or excessive revision rounds")
    if exclusivity == ExclusivityLevel.FULL:
        flags.append("Full exclusivity restricts all other brand work")
    return flags


def detect_green_flags(
    brief: ParsedBrief, signals: DealQualityInput, breakdown: DealQualityBreakdown
) -> list[str]:
    flags: list[str] = []
    usage = brief.usage_rights

    if breakdown.rate_fairness.score >= RATE_FAIRNESS_POINTS * Decimal("0.85"):
        flags.append("Rate at or above market value")
    if signals.brand_tier == BrandTier.MAJOR:
        flags.append("Major brand opportunity")
    if signals.is_category_leader:
        flags.append("Category-leading brand")
    if signals.payment_terms in (PaymentTerms.UPFRONT, PaymentTerms.NET_15):
        flags.append("Fast payment terms")
    if normalize(usage.exclusivity) == ExclusivityLevel.NONE and usage.duration_days <= 30:
        flags.append("Minimal usage rights restrictions")
    if signals.mentions_ongoing_partnership:
        flags.append("Potential for ongoing partnership")
    if brief.retainer_config is not None and brief.retainer_config.deal_length in (
        DealLength.SIX_MONTH,
        DealLength.TWELVE_MONTH,
    ):
        flags.append("Long-term partnership commitment")
    return flags


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def _summary_insight(
    level: DealQualityLevel, brand_name: str, red_flags: list[str], green_flags: list[str]
) -> str:
    if level == DealQualityLevel.EXCELLENT:
        strengths = f"Key strengths: {', '.join(green_flags[:2])}." if green_flags else ""
        return f"Excellent deal! {strengths}"
    if level == DealQualityLevel.GOOD:
        return f"Good opportunity for {brand_name}. Minor improvements possible."
    if level == DealQualityLevel.FAIR:
        return f"Fair deal with {brand_name}. Review areas for negotiation."
    issues = f"Issues: {', '.join(red_flags[:2])}." if red_flags else ""
    return f"Significant concerns with this deal. {issues}"


def calculate_deal_quality(
    profile: CreatorProfile,
    brief: ParsedBrief,
    signals: DealQualityInput | None = None,
    calculated_rate: Decimal | None = None,
) -> DealQualityResult:
    """Score how favorable a deal is for the creator.

    Args:
        profile: The creator's profile.
        brief: The parsed brand brief.
        signals: Optional deal signals; unknown signals earn partial credit.
        calculated_rate: Rate from the pricing engine. Defaults to the tier's
            market rate. An offered rate in ``signals`` takes precedence.

    Returns:
        The total score (0-100), quality level, recommendation, dimension
        breakdown, red and green flags, and up to five insights.
    """
    signals = signals or DealQualityInput()
    rate = calculated_rate if calculated_rate is not None else MARKET_RATE_BENCHMARKS[profile.tier]

    breakdown = DealQualityBreakdown(
        rate_fairness=score_rate_fairness(profile, signals, rate),
        brand_legitimacy=score_brand_legitimacy(signals),
        portfolio_value=score_portfolio_value(profile, brief, signals),
        growth_potential=score_growth_potential(brief, signals),
        terms_fairness=score_terms_fairness(brief, signals),
        creative_freedom=score_creative_freedom(signals),
    )

    total_score = _clamp(sum(c.score for c in breakdown.components()), 100)
    info = quality_level_for(total_score)

    red_flags = detect_red_flags(brief, signals, breakdown)
    green_flags = detect_green_flags(brief, signals, breakdown)

    insights = [_summary_insight(info.level, brief.brand.name, red_flags, green_flags)]
    weakest = sorted(breakdown.components(), key=lambda c: c.percentage)[:3]
    insights.extend(c.insight for c in weakest if c.percentage < 70)

    return DealQualityResult(
        total_score=total_score,
        quality_level=info.level,
        price_adjustment=info.adjustment,
        recommendation=info.recommendation,
        recommendation_text=info.recommendation_text,
        breakdown=breakdown,
        insights=tuple(insights[:5]),
        red_flags=tuple(red_flags),
        green_flags=tuple(green_flags),
    )


def _percent_of_max(component: DealQualityComponent) -> int:
    return _round(component.percentage)


def deal_quality_to_fit_score(result: DealQualityResult) -> FitScoreResult:
    """Convert a deal quality result into the legacy fit score shape.

    The six dimensions fold into the five fit components: rate and terms
    fairness average into niche match, then brand legitimacy, portfolio
    value, growth potential and creative freedom map one-to-one.
    """
    fit_level = QUALITY_TO_FIT_LEVEL[result.quality_level]
    breakdown = None
    if result.breakdown is not None:
        b = result.breakdown
        breakdown = FitScoreBreakdown(
            niche_match=FitScoreComponent(
                score=_round((b.rate_fairness.percentage + b.terms_fairness.percentage) / 2),
                weight=Decimal("0.30"),
                insight=b.rate_fairness.insight,
            ),
            demographic_match=FitScoreComponent(
                score=_percent_of_max(b.brand_legitimacy),
                weight=Decimal("0.25"),
                insight=b.brand_legitimacy.insight,
            ),
            platform_match=FitScoreComponent(
                score=_percent_of_max(b.portfolio_value),
                weight=Decimal("0.20"),
                insight=b.portfolio_value.insight,
            ),
            engagement_quality=FitScoreComponent(
                score=_percent_of_max(b.growth_potential),
                weight=Decimal("0.15"),
                insight=b.growth_potential.insight,
            ),
            content_capability=FitScoreComponent(
                score=_percent_of_max(b.creative_freedom),
                weight=Decimal("0.10"),
                insight=b.creative_freedom.insight,
            ),
        )

    return FitScoreResult(
        total_score=result.total_score,
        fit_level=fit_level,
        price_adjustment=result.price_adjustment,
        breakdown=breakdown,
        insights=result.insights,
    )
